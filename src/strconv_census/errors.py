"""
Exceptions raised by strconv-census.

All fatal conditions derive from :class:`CensusError`; the CLI reports them as
a single error line and exits non-zero. Packages that merely fail to
type-check are not errors: the loader skips them with a warning.
"""


class CensusError(Exception):
  """Base class for fatal errors."""


class PackageListError(CensusError):
  """``go list`` could not be run or did not succeed."""


class LoadError(CensusError):
  """The typed syntax export is missing or malformed."""


class ConfigError(CensusError):
  """Invalid configuration values."""
