from .count import handle_count, resolve_import_paths
from .listing import handle_categories, handle_list

__all__ = [
  "handle_categories",
  "handle_count",
  "handle_list",
  "resolve_import_paths",
]
