"""
PHP 배열 <-> JSON 변환 모듈
"""

from devkit.php.php_types import PHPFallbackError, PHPParseError
from devkit.php.php_parser import parse_php_array, smart_parse_php_array
from devkit.php.fallback_parser import simple_parse_php_array
from devkit.php.php_serializer import convert_to_php

__all__ = [
    'PHPParseError',
    'PHPFallbackError',
    'parse_php_array',
    'smart_parse_php_array',
    'simple_parse_php_array',
    'convert_to_php',
]
