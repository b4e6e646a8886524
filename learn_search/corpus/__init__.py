"""
Documentation corpus model.

Components:
- models: Module and Unit, canonical URLs, memoized module title
- metadata: title extraction from the module descriptor (index.yml)
- builder: discovery of unit files and grouping into modules
"""

from .models import Module, Unit, DEFAULT_BASE_URL, UNKNOWN_TITLE
from .metadata import MODULE_DESCRIPTOR, read_module_title
from .builder import (
    build_corpus,
    discover_unit_files,
    is_module_root,
    load_corpus,
    module_root_of,
)

__all__ = [
    "Module",
    "Unit",
    "DEFAULT_BASE_URL",
    "UNKNOWN_TITLE",
    "MODULE_DESCRIPTOR",
    "read_module_title",
    "build_corpus",
    "discover_unit_files",
    "is_module_root",
    "load_corpus",
    "module_root_of",
]
