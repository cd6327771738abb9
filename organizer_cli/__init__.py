"""
organizer_cli - Command Line Interface for Extension Organizer
"""

from .cli_entry import main, create_parser

__all__ = ["main", "create_parser"]
