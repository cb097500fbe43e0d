"""
Package Listing and Program Loading.

Modules:
    - ``golist``: Expanding package patterns with ``go list``.
    - ``schema``: Pydantic models of the typed syntax export documents.
    - ``export``: Reading and decoding export documents.
    - ``program``: Choosing the packages to examine, skipping broken ones.
"""

from strconv_census.loader.export import ExportStore, decode_package
from strconv_census.loader.golist import go_list
from strconv_census.loader.program import load_program

__all__ = ["ExportStore", "decode_package", "go_list", "load_program"]
