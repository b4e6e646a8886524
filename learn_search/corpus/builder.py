"""
Corpus builder - groups discovered unit files into modules.

Unit files live one directory below their module, e.g.:

    learn-pr/azure/intro-to-functions/index.yml
    learn-pr/azure/intro-to-functions/includes/1-introduction.md

Markdown files whose presumed module directory has no descriptor (shared
snippets, READMEs, ...) are excluded from the corpus.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Union

from ..errors import FatalInputError
from .metadata import MODULE_DESCRIPTOR
from .models import Module

logger = logging.getLogger(__name__)

DEFAULT_UNIT_EXTENSION = ".md"


def is_module_root(path: Union[str, Path]) -> bool:
    """True iff the directory contains a module descriptor"""
    return (Path(path) / MODULE_DESCRIPTOR).is_file()


def module_root_of(unit_path: Union[str, Path]) -> Path:
    """
    Presumed module directory of a unit file: one level above its directory.

    Pure path arithmetic, the result is not checked against the disk.

    Examples:
        >>> module_root_of("/repo/mod-a/includes/1-intro.md")
        PosixPath('/repo/mod-a')
    """
    return Path(os.path.abspath(os.path.join(os.path.dirname(os.path.abspath(unit_path)), "..")))


def discover_unit_files(root: Union[str, Path], extension: str = DEFAULT_UNIT_EXTENSION) -> List[Path]:
    """
    Recursively list unit files under the corpus root.

    Returns:
        Paths sorted for reproducible module and unit order

    Raises:
        FatalInputError: If root is missing or not a directory
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise FatalInputError(f"Corpus root '{root}' does not exist or is not a directory")

    if not extension.startswith("."):
        extension = f".{extension}"

    files = sorted(p for p in root_path.rglob(f"*{extension}") if p.is_file())
    logger.debug(f"Discovered {len(files)} '{extension}' files under {root_path}")
    return files


def build_corpus(unit_paths: Iterable[Union[str, Path]]) -> List[Module]:
    """
    Build modules from a flat list of unit file paths.

    Groups paths by module_root_of(), keeps only groups whose root is a
    module, and constructs one Module per group. Modules appear in order of
    their first unit; units keep the order they were given in.
    """
    groups: Dict[Path, List[Path]] = {}
    is_module: Dict[Path, bool] = {}

    for unit_path in unit_paths:
        root = module_root_of(unit_path)
        if root not in is_module:
            is_module[root] = is_module_root(root)
        if not is_module[root]:
            logger.debug(f"Skipping {unit_path}: {root} is not a module")
            continue
        groups.setdefault(root, []).append(Path(unit_path))

    modules = [Module(root, paths) for root, paths in groups.items()]
    logger.info(f"Built corpus: {len(modules)} modules, {sum(len(m.units) for m in modules)} units")
    return modules


def load_corpus(root: Union[str, Path], extension: str = DEFAULT_UNIT_EXTENSION) -> List[Module]:
    """Discover unit files under root and build the corpus"""
    return build_corpus(discover_unit_files(root, extension))
