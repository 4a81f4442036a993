"""
PHP 배열 파싱에 사용되는 데이터 타입 정의
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, Union

# 문자열, 숫자, 불리언, null, 리스트, 맵
PHPValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]

TokenType = Literal[
    "STRING",
    "NUMBER",
    "LITERAL",
    "ARRAY",
    "ARROW",
    "LBRACKET",
    "RBRACKET",
    "LPAREN",
    "RPAREN",
    "COMMA",
    "IDENTIFIER",
]

# 배열을 닫는 토큰
CLOSING_TOKENS = ("RBRACKET", "RPAREN")


@dataclass
class Token:
    """렉서가 만드는 토큰 하나"""
    type: TokenType
    value: Any = None
    quote: Optional[str] = None  # STRING 토큰의 따옴표 문자


class PHPParseError(ValueError):
    """토큰 기반 파서가 입력을 해석하지 못한 경우 발생하는 예외"""
    pass


class PHPFallbackError(PHPParseError):
    """토큰 파서와 단순 파서가 모두 실패한 경우 발생하는 예외"""
    pass
