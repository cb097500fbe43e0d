"""
Central Logging and Console Utilities.

This module unifies diagnostic output using the Python standard `logging`
library, backed by `rich` for formatting.

It serves two purposes:
1.  **Standard Logging Integration**: Provides a configured root logger and
    adapter functions (`log_info`, `log_warning`, `log_error`).
2.  **Environment Injection**: A Proxy around the Rich Console so that the
    destination (stderr, or an in-memory buffer in tests) can be swapped at
    runtime via `set_console`.

Diagnostics always go to stderr; stdout is reserved for the census report.

Attributes:
    console (_ConsoleProxy): A global, stable reference to the active Rich Console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

SITE_LOGGER = "strconv_census.sites"
"""Logger for matched conversion sites; its records carry no level or markup."""

_THEME = Theme(
  {
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "path": "bold blue",
    "code": "bold magenta",
  }
)


def _default_console() -> Console:
  return Console(theme=_THEME, stderr=True)


class _PlainConsoleHandler(logging.Handler):
  """Prints the formatted message alone to a Rich Console, one line per record."""

  def __init__(self, target: Console):
    super().__init__()
    self.target = target
    self.setFormatter(logging.Formatter("%(message)s"))

  def emit(self, record: logging.LogRecord) -> None:
    try:
      self.target.print(self.format(record), markup=False, highlight=False, soft_wrap=True)
    except Exception:
      self.handleError(record)


class _ConsoleProxy:
  """
  A Proxy wrapper around `rich.console.Console`.

  All printing is forwarded to the backend Console, which can be replaced
  while modules keep importing the same `console` object. Replacing the
  backend also re-targets the logging handler.

  Attributes:
      _backend (Console): The active Rich Console instance.
  """

  def __init__(self) -> None:
    """Initializes the proxy with a default stderr console."""
    self._backend: Console = _default_console()
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and updates logging handlers.

    Args:
        new_console (Console): The new Rich Console instance to use.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Resets the proxy to a fresh stderr console."""
    self._backend = _default_console()
    self._configure_logging()

  @property
  def backend(self) -> Console:
    """The currently active Console."""
    return self._backend

  def _configure_logging(self) -> None:
    """
    Points the root logger's RichHandler, and the plain site handler, at the
    current backend.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      omit_repeated_times=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )

    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(rich_handler)

    site_logger = logging.getLogger(SITE_LOGGER)
    for handler in list(site_logger.handlers):
      if isinstance(handler, _PlainConsoleHandler):
        site_logger.removeHandler(handler)
    site_logger.addHandler(_PlainConsoleHandler(self._backend))
    site_logger.setLevel(logging.INFO)
    site_logger.propagate = False

  def print(self, *args: Any, **kwargs: Any) -> None:
    """Forwards `print` calls to the active backend."""
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Global helper to inject a specific console instance.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Global helper to reset logging and console to stderr."""
  console.reset()


def log_info(msg: str) -> None:
  """
  Logs an informational message via standard logging.

  Args:
      msg (str): The message content. Can include rich markup like [bold].
  """
  logging.info(msg, extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Logs a warning message via standard logging.

  Args:
      msg (str): The message content.
  """
  logging.warning(msg, extra={"markup": True})


def log_error(msg: str) -> None:
  """
  Logs an error message via standard logging.

  Args:
      msg (str): The message content.
  """
  logging.error(msg, extra={"markup": True})
