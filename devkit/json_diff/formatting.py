"""
JSON 비교 결과 표시용 헬퍼
"""
import json
import math
from typing import Any, Dict

from devkit.json_diff.diff_types import ROOT_PATH, UNDEFINED, DiffResult, DiffType

DIFF_TYPE_NAMES: Dict[str, str] = {
    "added": "추가",
    "removed": "삭제",
    "modified": "수정",
    "unchanged": "변경 없음",
    "order_changed": "순서 변경",
}

DIFF_TYPE_COLORS: Dict[str, str] = {
    "added": "#4ade80",  # 초록
    "removed": "#f87171",  # 빨강
    "modified": "#fbbf24",  # 노랑
    "unchanged": "#9ca3af",  # 회색
    "order_changed": "#60a5fa",  # 파랑
}


def format_path(path: str) -> str:
    if not path:
        return ROOT_PATH
    return path


def format_value(value: Any = UNDEFINED) -> str:
    """차이 항목의 값을 화면에 보여줄 문자열로 바꿉니다."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, indent=2, ensure_ascii=False)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def get_diff_type_name(diff_type: DiffType) -> str:
    return DIFF_TYPE_NAMES[diff_type]


def get_diff_type_color(diff_type: DiffType) -> str:
    return DIFF_TYPE_COLORS[diff_type]


def summarize_diff(result: DiffResult) -> str:
    """비교 결과 요약 문구"""
    if result["is_equal"]:
        return "두 JSON이 동일합니다"
    return f"차이 {len(result['diffs'])}건을 발견했습니다"
