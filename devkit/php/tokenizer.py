"""
PHP 배열 리터럴 렉서
문자열을 왼쪽에서 오른쪽으로 한 번만 훑어서 토큰 목록을 만듭니다.
알 수 없는 문자는 건너뛰며, 렉서 자체는 실패하지 않습니다.
"""
import re
from typing import Dict, List, Union

from devkit.php.php_types import Token, TokenType
from devkit.utils.logger import setup_logger

logger = setup_logger("php_tokenizer")

SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    '[': 'LBRACKET',
    ']': 'RBRACKET',
    '(': 'LPAREN',
    ')': 'RPAREN',
    ',': 'COMMA',
}

LITERAL_WORDS = ('true', 'false', 'null')

DIGITS = frozenset('0123456789')

ESCAPE_MAP = {
    'n': '\n',
    'r': '\r',
    't': '\t',
    "'": "'",
    '"': '"',
    '\\': '\\',
}

_ESCAPE_PATTERN = re.compile(r'\\(.)', re.DOTALL)
_NUMBER_PATTERN = re.compile(r'-?\d+(?:\.\d*)?')


def unescape_string(raw: str) -> str:
    """
    \\n, \\r, \\t, \\', \\", \\\\ 만 실제 문자로 바꾸고
    나머지 이스케이프 시퀀스는 그대로 둡니다.
    """
    def _replace(match: re.Match) -> str:
        char = match.group(1)
        return ESCAPE_MAP.get(char, match.group(0))

    return _ESCAPE_PATTERN.sub(_replace, raw)


def parse_number(raw: str) -> Union[int, float]:
    """
    10진수 숫자 문자열을 숫자로 변환합니다.
    소수점이 없으면 int, 있으면 float를 반환하고 두 번째 소수점부터는 무시합니다.
    """
    match = _NUMBER_PATTERN.match(raw)
    number_text = match.group(0) if match else raw
    if '.' in number_text:
        return float(number_text)
    return int(number_text)


def tokenize(text: str) -> List[Token]:
    """
    PHP 배열 문자열을 토큰 목록으로 변환합니다.

    Args:
        text: 정리된 PHP 배열 문자열

    Returns:
        Token 리스트
    """
    tokens: List[Token] = []
    i = 0
    length = len(text)

    while i < length:
        char = text[i]

        # 공백
        if char.isspace():
            i += 1
            continue

        # 문자열 (작은따옴표 또는 큰따옴표)
        if char in ('"', "'"):
            quote = char
            i += 1
            start = i
            while i < length and text[i] != quote:
                # 백슬래시는 다음 문자를 그대로 포함
                if text[i] == '\\' and i + 1 < length:
                    i += 2
                else:
                    i += 1
            raw = text[start:i]
            tokens.append(Token('STRING', unescape_string(raw), quote))
            i += 1  # 닫는 따옴표
            continue

        # 숫자 (음수, 소수 포함)
        if char in DIGITS or (char == '-' and text[i + 1:i + 2] in DIGITS):
            start = i
            i += 1
            while i < length and (text[i] in DIGITS or text[i] == '.'):
                i += 1
            tokens.append(Token('NUMBER', parse_number(text[start:i])))
            continue

        # 식별자 (키워드 포함)
        if char.isalpha() or char == '_':
            start = i
            while i < length and (text[i].isalnum() or text[i] == '_'):
                i += 1
            word = text[start:i]

            if word == 'array':
                tokens.append(Token('ARRAY'))
            elif word.lower() in LITERAL_WORDS:
                tokens.append(Token('LITERAL', word.lower()))
            else:
                tokens.append(Token('IDENTIFIER', word))
            continue

        # => 연산자
        if char == '=' and text[i + 1:i + 2] == '>':
            tokens.append(Token('ARROW'))
            i += 2
            continue

        token_type = SINGLE_CHAR_TOKENS.get(char)
        if token_type:
            tokens.append(Token(token_type))
        # 알 수 없는 문자는 건너뜀
        i += 1

    logger.debug("토큰 %d개 생성", len(tokens))
    return tokens
