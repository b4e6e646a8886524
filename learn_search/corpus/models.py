"""
Corpus model: modules and their units.

A Module is a documentation directory (identified by its path) that owns an
ordered sequence of Units (pages). A Unit refers back to its Module by path
only, so the hierarchy has no reference cycles.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from ..errors import MissingModuleMetadataError
from .metadata import read_module_title

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://docs.microsoft.com/learn/modules/"

# Cached when the descriptor has no title or cannot be read
UNKNOWN_TITLE = "<null>"


def module_url(module_path: Union[str, Path], base_url: str = DEFAULT_BASE_URL) -> str:
    """Canonical URL of a module directory"""
    return f"{base_url}{Path(module_path).name}/"


@dataclass(frozen=True)
class Unit:
    """A single content page, owned by exactly one Module"""
    path: Path          # Unit file on disk
    module_path: Path   # Owning module directory (lookup only)

    def __post_init__(self):
        # Path("") collapses to "."
        if self.module_path is None or Path(self.module_path) == Path(""):
            raise ValueError(f"Unit '{self.path}' has no parent module")
        object.__setattr__(self, "path", Path(self.path))
        object.__setattr__(self, "module_path", Path(self.module_path))

    @property
    def stem(self) -> str:
        return self.path.stem

    def canonical_url(self, base_url: str = DEFAULT_BASE_URL) -> str:
        """Parent module URL followed by the unit's file stem"""
        return f"{module_url(self.module_path, base_url)}{self.stem}/"


class Module:
    """
    A documentation module directory and its units.

    Equality and hashing use the module path, so modules can key result
    mappings. The title is read from the module descriptor on first access
    and memoized, including the UNKNOWN_TITLE fallback.
    """

    def __init__(self, path: Union[str, Path], unit_paths: Iterable[Union[str, Path]] = ()):
        self.path = Path(os.path.abspath(path))
        self.units: Tuple[Unit, ...] = tuple(
            Unit(path=Path(p), module_path=self.path) for p in unit_paths
        )
        self._title: Optional[str] = None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Module):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"Module({str(self.path)!r}, units={len(self.units)})"

    @property
    def name(self) -> str:
        return self.path.name

    def owns(self, unit: Unit) -> bool:
        return unit.module_path == self.path

    def get_title(self) -> str:
        """Module title from metadata, read at most once"""
        if self._title is not None:
            return self._title

        try:
            title = read_module_title(self.path)
        except MissingModuleMetadataError as e:
            logger.warning(str(e))
            title = None

        self._title = title if title is not None else UNKNOWN_TITLE
        return self._title

    def canonical_url(self, base_url: str = DEFAULT_BASE_URL) -> str:
        return module_url(self.path, base_url)
