from __future__ import annotations

from typing import Any, Dict, List, Literal, TypedDict, Union

JsonValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]

# strict: key 순서까지 비교, loose: key-value 집합만 비교
DiffMode = Literal["strict", "loose"]

DiffType = Literal["added", "removed", "modified", "unchanged", "order_changed"]

DIFF_MODES = ("strict", "loose")

ROOT_PATH = "(root)"


class _Undefined:
    """값이 없음을 나타내는 표식 (JSON null 과 구분)"""

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()


class DiffItem(TypedDict, total=False):
    """
    차이 하나를 나타냅니다.
    old_value / new_value 는 차이 종류에 따라 있을 수도 없을 수도 있고,
    old_index / new_index 는 order_changed 에만 있습니다.
    """

    path: str
    type: DiffType
    old_value: JsonValue
    new_value: JsonValue
    old_index: int
    new_index: int


class DiffResult(TypedDict):
    """compare_json의 반환 형태"""

    is_equal: bool
    diffs: List[DiffItem]


def make_added(path: str, new_value: JsonValue) -> DiffItem:
    return {"path": path, "type": "added", "new_value": new_value}


def make_removed(path: str, old_value: JsonValue) -> DiffItem:
    return {"path": path, "type": "removed", "old_value": old_value}


def make_modified(path: str, old_value: JsonValue, new_value: JsonValue) -> DiffItem:
    return {
        "path": path,
        "type": "modified",
        "old_value": old_value,
        "new_value": new_value,
    }


def make_order_changed(path: str, old_index: int, new_index: int) -> DiffItem:
    return {
        "path": path,
        "type": "order_changed",
        "old_index": old_index,
        "new_index": new_index,
    }
