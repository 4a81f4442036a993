"""
JSON 비교 도구

두 가지 비교 모드를 지원합니다.
- strict: key, value 그리고 key 순서까지 비교
- loose: key-value 집합만 비교하고 순서는 무시

중첩된 객체와 배열은 깊이 우선으로 재귀 비교합니다.
배열은 위치 기준으로만 비교합니다 (앞에 원소를 넣으면 뒤쪽 전체가 차이로 나옴).
"""
from typing import Any, Dict, List

from devkit.json_diff.diff_types import (
    ROOT_PATH,
    DiffItem,
    DiffMode,
    DiffResult,
    JsonValue,
    make_added,
    make_modified,
    make_order_changed,
    make_removed,
)
from devkit.utils.logger import setup_logger

logger = setup_logger("json_diff")


def compare_json(old_json: JsonValue, new_json: JsonValue, mode: DiffMode = "loose") -> DiffResult:
    """
    두 JSON 값을 비교합니다.

    Args:
        old_json: 기존 값
        new_json: 새 값
        mode: 'strict' 또는 'loose' ('strict'가 아니면 key 순서를 보지 않음)

    Returns:
        {"is_equal": 차이가 없는지, "diffs": 차이 목록}

    Example:
        >>> compare_json({'name': 'A', 'age': 25}, {'name': 'B', 'age': 25})
        {'is_equal': False, 'diffs': [{'path': 'name', 'type': 'modified', 'old_value': 'A', 'new_value': 'B'}]}
    """
    diffs: List[DiffItem] = []
    compare_values(old_json, new_json, "", mode, diffs)

    logger.info("JSON 비교 완료 (mode=%s): 차이 %d건", mode, len(diffs))
    return {"is_equal": len(diffs) == 0, "diffs": diffs}


def get_value_type(value: Any) -> str:
    """비교용 타입 태그: null, array, object, boolean, number, string"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


def compare_values(
    old_value: Any,
    new_value: Any,
    path: str,
    mode: DiffMode,
    diffs: List[DiffItem],
) -> None:
    """한 위치의 두 값을 비교합니다. 타입이 다르면 더 들어가지 않습니다."""
    old_type = get_value_type(old_value)
    new_type = get_value_type(new_value)

    if old_type != new_type:
        diffs.append(make_modified(path or ROOT_PATH, old_value, new_value))
        return

    if old_type == "object":
        compare_objects(old_value, new_value, path, mode, diffs)
    elif old_type == "array":
        compare_arrays(old_value, new_value, path, mode, diffs)
    elif not is_equal(old_value, new_value):
        diffs.append(make_modified(path or ROOT_PATH, old_value, new_value))


def _child_path(base_path: str, key: str) -> str:
    return f"{base_path}.{key}" if base_path else key


def compare_objects(
    old_obj: Dict[str, Any],
    new_obj: Dict[str, Any],
    base_path: str,
    mode: DiffMode,
    diffs: List[DiffItem],
) -> None:
    old_keys = list(old_obj)
    new_keys = list(new_obj)

    if mode == "strict":
        check_key_order(old_keys, new_keys, base_path, diffs)

    # 양쪽 key 합집합 (기존 순서 우선, 중복 제거)
    all_keys = list(dict.fromkeys(old_keys + new_keys))

    for key in all_keys:
        current_path = _child_path(base_path, key)
        has_old = key in old_obj
        has_new = key in new_obj

        if has_old and not has_new:
            diffs.append(make_removed(current_path, old_obj[key]))
        elif has_new and not has_old:
            diffs.append(make_added(current_path, new_obj[key]))
        else:
            compare_values(old_obj[key], new_obj[key], current_path, mode, diffs)


def check_key_order(
    old_keys: List[str],
    new_keys: List[str],
    base_path: str,
    diffs: List[DiffItem],
) -> None:
    """
    양쪽에 모두 있는 key 사이의 상대 순서가 바뀌었는지 확인합니다 (strict 모드).
    추가/삭제로 인한 위치 변화는 순서 변경으로 보지 않습니다.
    """
    new_key_set = set(new_keys)
    common_keys = [key for key in old_keys if key in new_key_set]

    old_positions = {key: i for i, key in enumerate(old_keys)}
    new_positions = {key: i for i, key in enumerate(new_keys)}
    old_order = sorted(common_keys, key=old_positions.__getitem__)
    new_order = sorted(common_keys, key=new_positions.__getitem__)
    new_relative = {key: i for i, key in enumerate(new_order)}

    reported = set()
    for i, key in enumerate(old_order):
        if key == new_order[i]:
            continue
        new_index = new_relative[key]
        if i == new_index or key in reported:
            continue
        reported.add(key)
        diffs.append(make_order_changed(_child_path(base_path, key), i, new_index))


def compare_arrays(
    old_arr: List[Any],
    new_arr: List[Any],
    base_path: str,
    mode: DiffMode,
    diffs: List[DiffItem],
) -> None:
    for i in range(max(len(old_arr), len(new_arr))):
        current_path = f"{base_path}[{i}]"
        has_old = i < len(old_arr)
        has_new = i < len(new_arr)

        if has_old and not has_new:
            diffs.append(make_removed(current_path, old_arr[i]))
        elif has_new and not has_old:
            diffs.append(make_added(current_path, new_arr[i]))
        else:
            compare_values(old_arr[i], new_arr[i], current_path, mode, diffs)


def is_equal(a: Any, b: Any) -> bool:
    """두 값이 완전히 같은지 재귀적으로 확인합니다."""
    if a is None or b is None:
        return a is None and b is None

    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))

    if isinstance(a, dict) and isinstance(b, dict):
        if len(a) != len(b):
            return False
        return all(key in b and is_equal(a[key], b[key]) for key in a)

    if isinstance(a, (dict, list, tuple)) or isinstance(b, (dict, list, tuple)):
        return False

    return a == b
