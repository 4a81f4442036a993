"""
파이썬 값 -> PHP 배열 문자열 변환
"""
import math
import re
from typing import Any, List

from devkit.php.php_types import PHPValue

INDENT = '    '

_DIGITS_ONLY = re.compile(r'^\d+$')


def _escape_string(value: str) -> str:
    return (
        value.replace('\\', '\\\\')
        .replace("'", "\\'")
        .replace('\n', '\\n')
        .replace('\r', '\\r')
        .replace('\t', '\\t')
    )


def _escape_key(key: str) -> str:
    return key.replace('\\', '\\\\').replace("'", "\\'")


def _format_number(value: Any) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return 'NAN'
        if math.isinf(value):
            return 'INF' if value > 0 else '-INF'
    return str(value)


def is_sequential_keys(keys: List[str]) -> bool:
    """키가 모두 0 이상의 정수 문자열이고 정렬하면 0..N-1 인지 확인합니다."""
    if not all(_DIGITS_ONLY.match(key) for key in keys):
        return False
    return sorted(int(key) for key in keys) == list(range(len(keys)))


def convert_to_php(value: PHPValue, indent: int = 0) -> str:
    """
    파이썬 값을 PHP 배열 문자열로 변환합니다.
    한 단계마다 공백 4칸으로 들여씁니다.

    Args:
        value: 변환할 값
        indent: 현재 들여쓰기 단계

    Returns:
        PHP 배열 문자열

    Example:
        >>> print(convert_to_php({'name': 'John', 'age': 25}))
        [
            'name' => 'John',
            'age' => 25
        ]
    """
    spaces = INDENT * indent
    next_spaces = INDENT * (indent + 1)

    if isinstance(value, (list, tuple)):
        if not value:
            return '[]'
        items = [next_spaces + convert_to_php(item, indent + 1) for item in value]
        return '[\n' + ',\n'.join(items) + '\n' + spaces + ']'

    if isinstance(value, dict):
        if not value:
            return '[]'

        entries = [(str(key), item) for key, item in value.items()]
        sequential = is_sequential_keys([key for key, _ in entries])
        if sequential:
            # 키를 생략하므로 0, 1, 2 ... 순서로 출력해야 위치가 보존됨
            entries.sort(key=lambda entry: int(entry[0]))

        items = []
        for key, item in entries:
            if sequential:
                # 순차 정수 키는 생략
                prefix = ''
            elif _DIGITS_ONLY.match(key):
                prefix = key + ' => '
            else:
                prefix = f"'{_escape_key(key)}' => "
            items.append(next_spaces + prefix + convert_to_php(item, indent + 1))
        return '[\n' + ',\n'.join(items) + '\n' + spaces + ']'

    if isinstance(value, str):
        return f"'{_escape_string(value)}'"

    # bool은 int의 하위 타입이므로 숫자보다 먼저 확인
    if isinstance(value, bool):
        return 'true' if value else 'false'

    if value is None:
        return 'null'

    if isinstance(value, (int, float)):
        return _format_number(value)

    return str(value)
