"""Command line toolkit for managing flat JSON locale files."""

from localeasy.batch import (
    add_to_files,
    delete_from_file,
    init_locales,
    resolve_targets,
    sort_target,
)
from localeasy.utils import configure_logging, logger

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "add_to_files",
    "configure_logging",
    "delete_from_file",
    "init_locales",
    "logger",
    "resolve_targets",
    "sort_target",
]
