"""
JSON 비교 모듈
"""

from devkit.json_diff.diff_types import (
    UNDEFINED,
    DiffItem,
    DiffMode,
    DiffResult,
    DiffType,
)
from devkit.json_diff.json_diff import compare_json
from devkit.json_diff.formatting import (
    format_path,
    format_value,
    get_diff_type_color,
    get_diff_type_name,
    summarize_diff,
)

__all__ = [
    "UNDEFINED",
    "DiffItem",
    "DiffMode",
    "DiffResult",
    "DiffType",
    "compare_json",
    "format_path",
    "format_value",
    "get_diff_type_color",
    "get_diff_type_name",
    "summarize_diff",
]
