"""
단순 PHP 배열 파서 (대체 경로)

PHP 배열 문자열을 문자열 치환으로 JSON 텍스트로 바꾼 뒤 json.loads로 해석합니다.
토큰 파서가 처리하지 못하는 입력을 최대한 살리기 위한 용도입니다.
"""
import json
import re
from typing import List

from devkit.php.php_types import PHPValue

_ARRAY_OPEN_PATTERN = re.compile(r'\barray\s*\(')

# 따옴표 문자열은 그대로 건너뛰고, 문자열 밖의 "키 =>" 만 바꿈
_ARROW_PATTERN = re.compile(
    r"""('(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*")(\s*=>\s*)?|(\w+)\s*=>\s*""",
    re.DOTALL,
)

_LITERAL_PATTERN = re.compile(r'\b(true|false|null|TRUE|FALSE|NULL)\b')
_NEGATIVE_INF_PATTERN = re.compile(r'(?<![\w"])-INF\b')
_INF_PATTERN = re.compile(r'\bINF\b')
_NAN_PATTERN = re.compile(r'\bNAN\b')


def simple_parse_php_array(php_text: str) -> PHPValue:
    """
    문자열 치환 방식으로 PHP 배열을 해석합니다.

    Raises:
        json.JSONDecodeError: 치환 결과가 올바른 JSON이 아닌 경우
    """
    text = replace_array_syntax(php_text)
    text = replace_arrow_syntax(text)
    text = replace_single_quotes(text)
    text = replace_php_values(text)
    text = convert_brackets(text)
    return json.loads(text)


def replace_array_syntax(text: str) -> str:
    """array( 를 [ 로 바꾸고 짝이 되는 ) 를 ] 로 바꿉니다."""
    result = text
    while True:
        replaced = _ARRAY_OPEN_PATTERN.sub('[', result)
        if replaced == result:
            break
        result = replaced
    return balance_parentheses(result)


def balance_parentheses(text: str) -> str:
    """문자열 밖에 있는 ( ) 를 [ ] 로 바꿉니다."""
    result: List[str] = []
    in_string = False
    string_char = ''
    escaped = False

    for char in text:
        if escaped:
            result.append(char)
            escaped = False
            continue

        if char == '\\':
            result.append(char)
            escaped = True
            continue

        if in_string:
            if char == string_char:
                in_string = False
            result.append(char)
            continue

        if char in ('"', "'"):
            in_string = True
            string_char = char
            result.append(char)
        elif char == '(':
            result.append('[')
        elif char == ')':
            result.append(']')
        else:
            result.append(char)

    return ''.join(result)


def replace_arrow_syntax(text: str) -> str:
    """
    key => value 를 "key": value 로 바꿉니다.
    JSON 객체 키는 항상 문자열이어야 하므로 숫자 키도 따옴표로 감쌉니다.
    """
    def _replace(match: re.Match) -> str:
        quoted, arrow, bare = match.groups()
        if quoted is not None:
            if arrow is None:
                return quoted
            return quoted + ': '
        return '"' + bare + '": '

    return _ARROW_PATTERN.sub(_replace, text)


def replace_single_quotes(text: str) -> str:
    """
    작은따옴표 문자열을 큰따옴표 문자열로 바꿉니다.
    큰따옴표 문자열 안의 따옴표는 건드리지 않습니다.
    """
    result: List[str] = []
    in_double = False
    in_single = False
    escaped = False

    for char in text:
        if escaped:
            # JSON에는 \' 이스케이프가 없음
            if in_single and char == "'":
                result[-1] = "'"
            else:
                result.append(char)
            escaped = False
            continue

        if char == '\\':
            result.append(char)
            escaped = True
            continue

        if in_double:
            if char == '"':
                in_double = False
            result.append(char)
            continue

        if in_single:
            if char == "'":
                in_single = False
                result.append('"')
            elif char == '"':
                result.append('\\"')
            else:
                result.append(char)
            continue

        if char == '"':
            in_double = True
            result.append(char)
        elif char == "'":
            in_single = True
            result.append('"')
        else:
            result.append(char)

    return ''.join(result)


def replace_php_values(text: str) -> str:
    """PHP 상수(TRUE, NULL, INF, NAN 등)를 JSON 표현으로 바꿉니다."""
    result = _LITERAL_PATTERN.sub(lambda m: m.group(0).lower(), text)
    result = _NEGATIVE_INF_PATTERN.sub('"-Infinity"', result)
    result = _INF_PATTERN.sub('"Infinity"', result)
    result = _NAN_PATTERN.sub('"NaN"', result)
    return result


def convert_brackets(text: str) -> str:
    """
    바로 안쪽에 콜론(:)이 있는 [ ] 쌍만 { } 로 바꿉니다.
    콜론이 없는 쌍은 리스트로 남습니다.
    """
    stack: List[List] = []  # [여는 위치, 콜론 포함 여부]
    object_pairs = []
    in_string = False
    string_char = ''
    escaped = False

    for i, char in enumerate(text):
        if escaped:
            escaped = False
            continue

        if char == '\\':
            escaped = True
            continue

        if char in ('"', "'"):
            if not in_string:
                in_string = True
                string_char = char
            elif char == string_char:
                in_string = False
            continue

        if in_string:
            continue

        if char == '[':
            stack.append([i, False])
        elif char == ']':
            if stack:
                open_index, contains_colon = stack.pop()
                if contains_colon:
                    object_pairs.append((open_index, i))
        elif char == ':':
            if stack:
                stack[-1][1] = True

    chars = list(text)
    for open_index, close_index in object_pairs:
        chars[open_index] = '{'
        chars[close_index] = '}'
    return ''.join(chars)
