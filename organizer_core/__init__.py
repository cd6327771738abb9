"""
organizer_core - Extension Organizer Core Module

Provides file collection, extension bucketing, organize execution and result rendering.
"""

from .models_fs import (
    OperationMode,
    OrganizeOptions,
    OrganizerResult,
    ProgressSink,
    NullProgressSink,
    CallbackProgressSink,
    PathEntry,
    OUTPUT_DIR_NAME,
    NO_EXTENSION,
    NO_FILES_SUMMARY,
    normalize_exclusions,
    parse_exclusions,
)

from .errors import (
    OrganizerError,
    PathNotFoundError,
    RootNotDirectoryError,
    RootAccessError,
    DirectoryReadError,
    OutputDirectoryError,
    DestinationExistsError,
)

from .safety_checks import (
    validate_root,
    check_destination_free,
    is_excluded_name,
)

from .scan_files import (
    collect_files,
    list_path,
    format_entry,
)

from .bucket_rules import (
    get_extension,
    classify_extension,
)

from .exec_organize import (
    organize,
    organize_with_options,
    build_summary,
)

from .report import (
    render_report,
    bucket_breakdown,
    format_errors,
)

__all__ = [
    # Data models
    "OperationMode",
    "OrganizeOptions",
    "OrganizerResult",
    "ProgressSink",
    "NullProgressSink",
    "CallbackProgressSink",
    "PathEntry",
    "OUTPUT_DIR_NAME",
    "NO_EXTENSION",
    "NO_FILES_SUMMARY",
    "normalize_exclusions",
    "parse_exclusions",

    # Errors
    "OrganizerError",
    "PathNotFoundError",
    "RootNotDirectoryError",
    "RootAccessError",
    "DirectoryReadError",
    "OutputDirectoryError",
    "DestinationExistsError",

    # Safety checks
    "validate_root",
    "check_destination_free",
    "is_excluded_name",

    # Scanning
    "collect_files",
    "list_path",
    "format_entry",

    # Bucketing
    "get_extension",
    "classify_extension",

    # Execution
    "organize",
    "organize_with_options",
    "build_summary",

    # Reporting
    "render_report",
    "bucket_breakdown",
    "format_errors",
]
