"""
report.py - Result Rendering

Turns an OrganizerResult into text for the front-ends. Works only from the
result object and never looks at the filesystem.
"""

from typing import List, Tuple

from .models_fs import OrganizerResult


def bucket_breakdown(result: OrganizerResult) -> List[Tuple[str, int]]:
    """(bucket, file count) pairs, in the result's (unspecified) bucket order"""
    return [(bucket, len(names)) for bucket, names in result.extension_map.items()]


def format_errors(result: OrganizerResult) -> List[str]:
    """Error lines, empty if the run had no per-file errors"""
    return [f"  - {error}" for error in result.errors or []]


def render_report(result: OrganizerResult) -> str:
    """Summary text followed by an Errors section when needed"""
    lines = [result.summary]
    if result.has_errors:
        lines.append("")
        lines.append("Errors:")
        lines.extend(format_errors(result))
    return "\n".join(lines)
