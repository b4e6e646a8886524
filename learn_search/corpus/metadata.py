"""
Module metadata reader.

A module directory carries an `index.yml` descriptor. Only the title is
needed, and it is taken from the first line that looks like:

    title: Introduction to Azure Functions

The descriptor is read line by line rather than parsed as YAML: the first
matching line wins even if the document is not otherwise valid YAML.
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union

from ..errors import MissingModuleMetadataError

logger = logging.getLogger(__name__)

MODULE_DESCRIPTOR = "index.yml"

# Case-sensitive, anchored at line start
TITLE_PATTERN = re.compile(r"^title:\s+(.+)")

_QUOTES = "\"'"


def clean_title(raw: str) -> str:
    """
    Trim whitespace and quote characters until nothing changes.

    Examples:
        >>> clean_title(' "Intro to Git" ')
        'Intro to Git'
        >>> clean_title("\\"' Nested '\\"")
        'Nested'
    """
    value = raw
    while True:
        trimmed = value.strip().strip(_QUOTES)
        if trimmed == value:
            return value
        value = trimmed


def read_module_title(module_path: Union[str, Path]) -> Optional[str]:
    """
    Read the title field from a module descriptor.

    Args:
        module_path: Module directory containing the descriptor

    Returns:
        Cleaned title, or None if no title line exists

    Raises:
        MissingModuleMetadataError: If the descriptor cannot be read
    """
    descriptor = Path(module_path) / MODULE_DESCRIPTOR
    try:
        with open(descriptor, "r", encoding="utf-8-sig") as f:
            for line in f:
                match = TITLE_PATTERN.match(line.rstrip("\r\n"))
                if match:
                    return clean_title(match.group(1))
    except (OSError, UnicodeDecodeError) as e:
        raise MissingModuleMetadataError(descriptor, str(e)) from e

    logger.debug(f"No title field in {descriptor}")
    return None
