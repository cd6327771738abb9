"""
bucket_rules.py - Bucketing Rules Module

Maps files to the folder they are organized into
"""

from pathlib import Path
from typing import Union

from .models_fs import NO_EXTENSION


def get_extension(name: str) -> str:
    """
    Get the lower-cased extension of a base name

    Text after the last dot; a leading dot alone (".bashrc") is not an extension.

    Returns:
        Extension without the dot, or empty string
    """
    dot = name.rfind(".")
    if dot <= 0:
        return ""
    return name[dot + 1:].lower()


def classify_extension(path: Union[str, Path]) -> str:
    """
    Get bucket name for a file

    Args:
        path: File path (only the base name is used)

    Returns:
        Upper-cased extension, or NO_EXTENSION
    """
    ext = get_extension(Path(path).name)
    if not ext:
        return NO_EXTENSION
    return ext.upper()
