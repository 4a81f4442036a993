"""
PHP 배열 파서

PHP 배열 리터럴을 파이썬 값(dict/list/str/숫자/bool/None)으로 변환합니다.
두 가지 문법을 지원합니다.
- 기존 문법: array('key' => 'value')
- 축약 문법: ['key' => 'value']

토큰 기반 재귀 하향 파서를 먼저 시도하고, 실패하면 JSON 치환 방식의
단순 파서(fallback_parser)로 한 번 더 시도합니다.
"""
import re
from typing import Any, Dict, List, Union

from devkit.php.fallback_parser import simple_parse_php_array
from devkit.php.php_types import (
    CLOSING_TOKENS,
    PHPFallbackError,
    PHPParseError,
    PHPValue,
    Token,
)
from devkit.php.tokenizer import tokenize
from devkit.utils.logger import setup_logger

logger = setup_logger("php_parser")

__all__ = [
    "PHPParseError",
    "PHPFallbackError",
    "clean_php_input",
    "parse_php_array",
    "smart_parse_php_array",
]

_PHP_TAG_PATTERN = re.compile(r'<\?php|<\?|\?>')
_RETURN_PATTERN = re.compile(r'^return\s+')
_ASSIGNMENT_PATTERN = re.compile(r'^\$\w+\s*=\s*')
_TRAILING_SEMICOLON_PATTERN = re.compile(r';$')


def clean_php_input(php_text: str) -> str:
    """
    PHP 태그, return 키워드, 변수 대입, 마지막 세미콜론을 제거합니다.
    검증은 하지 않습니다.
    """
    cleaned = _PHP_TAG_PATTERN.sub('', php_text).strip()
    cleaned = _RETURN_PATTERN.sub('', cleaned)
    cleaned = _ASSIGNMENT_PATTERN.sub('', cleaned)
    cleaned = _TRAILING_SEMICOLON_PATTERN.sub('', cleaned)
    return cleaned


def parse_php_array(php_text: str) -> PHPValue:
    """
    PHP 배열 문자열을 파이썬 값으로 변환합니다.

    Args:
        php_text: PHP 배열 문자열 (<?php 태그, return, $var = 포함 가능)

    Returns:
        변환된 값

    Raises:
        PHPFallbackError: 두 파서가 모두 실패한 경우

    Example:
        >>> parse_php_array("['name' => 'John', 'age' => 25]")
        {'name': 'John', 'age': 25}
    """
    cleaned = clean_php_input(php_text)

    try:
        return smart_parse_php_array(cleaned)
    except PHPParseError as e:
        logger.info("토큰 파서 실패, 단순 파서로 재시도합니다: %s", e)

    try:
        return simple_parse_php_array(cleaned)
    except ValueError as e:
        logger.error("PHP 배열 파싱 실패: %s", e)
        raise PHPFallbackError(f"PHP 배열을 해석할 수 없습니다: {e}") from e


def smart_parse_php_array(php_text: str) -> PHPValue:
    """토큰 기반 파서로 PHP 배열을 해석합니다."""
    tokens = tokenize(php_text)
    return TokenParser(tokens).parse()


def _key_to_str(key: Any) -> str:
    """배열 키를 문자열로 변환합니다. 1.0 같은 정수 값 실수는 '1'이 됩니다."""
    if isinstance(key, bool):
        return 'true' if key else 'false'
    if key is None:
        return 'null'
    if isinstance(key, float) and key.is_integer():
        return str(int(key))
    return str(key)


class TokenParser:
    """
    토큰 목록에 대한 재귀 하향 파서
    커서(pos)는 인스턴스가 소유하며 parse_value / parse_array가 함께 사용합니다.
    """

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def parse(self) -> PHPValue:
        return self.parse_value()

    def peek(self, offset: int = 0) -> Union[Token, None]:
        index = self.pos + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return None

    def peek_type(self, offset: int = 0) -> Union[str, None]:
        token = self.peek(offset)
        return token.type if token else None

    def parse_value(self) -> PHPValue:
        """현재 토큰 하나의 값을 해석합니다."""
        token = self.peek()

        if token is None:
            raise PHPParseError("입력이 예상보다 일찍 끝났습니다")

        if token.type in ('STRING', 'NUMBER'):
            self.pos += 1
            return token.value

        # true, false, null
        if token.type == 'LITERAL':
            self.pos += 1
            if token.value == 'true':
                return True
            if token.value == 'false':
                return False
            return None

        if token.type in ('LBRACKET', 'ARRAY'):
            return self.parse_array()

        raise PHPParseError(f"해석할 수 없는 값입니다: {token.type} {token.value!r}")

    def parse_array(self) -> PHPValue:
        """
        array(...) 또는 [...] 를 해석합니다.
        명시적인 키(=>)가 하나도 없으면 list, 있으면 dict를 반환합니다.
        """
        result: Dict[str, Any] = {}
        values: List[Any] = []
        is_indexed = True
        index = 0

        # array 키워드 또는 여는 괄호
        if self.peek_type() == 'ARRAY':
            self.pos += 1
            if self.peek_type() == 'LPAREN':
                self.pos += 1
        elif self.peek_type() == 'LBRACKET':
            self.pos += 1

        while self.pos < len(self.tokens) and self.peek_type() not in CLOSING_TOKENS:
            key = None

            # 다음 토큰이 => 이면 키가 있는 원소
            if self.peek_type(1) == 'ARROW':
                key = _key_to_str(self.parse_value())
                self.pos += 1  # =>
                is_indexed = False

            value = self.parse_value()

            if key is None:
                # 키가 없는 원소는 0부터 번호를 받음
                # 명시적 키(=>)가 한 번이라도 나오면 번호는 더 늘어나지 않음
                key = str(index)
                if is_indexed:
                    index += 1
                values.append(value)
            result[key] = value

            if self.peek_type() == 'COMMA':
                self.pos += 1

        # 닫는 괄호
        if self.peek_type() in CLOSING_TOKENS:
            self.pos += 1

        if is_indexed:
            return values
        return result
