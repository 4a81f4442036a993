"""Tests for devkit/php/fallback_parser.py."""

from __future__ import annotations

import json

import pytest

from devkit.php.fallback_parser import (
    convert_brackets,
    replace_array_syntax,
    replace_arrow_syntax,
    replace_php_values,
    replace_single_quotes,
    simple_parse_php_array,
)


class TestSimpleParsePHPArray:
    """문자열 치환 기반 파서"""

    def test_associative_array(self) -> None:
        assert simple_parse_php_array("['name' => 'John', 'age' => 30]") == {"name": "John", "age": 30}

    def test_array_function_syntax(self) -> None:
        assert simple_parse_php_array("array('name' => 'John', 'age' => 30)") == {"name": "John", "age": 30}

    def test_nested_arrays(self) -> None:
        assert simple_parse_php_array("['user' => ['name' => 'John']]") == {"user": {"name": "John"}}

    def test_list_inside_map(self) -> None:
        assert simple_parse_php_array("array('tags' => array('a', 'b'))") == {"tags": ["a", "b"]}

    def test_mixed_quotes(self) -> None:
        assert simple_parse_php_array("['desc' => \"It's ok\"]") == {"desc": "It's ok"}

    def test_escaped_single_quote(self) -> None:
        assert simple_parse_php_array("['msg' => 'It\\'s']") == {"msg": "It's"}

    def test_double_quote_inside_single_quoted_string(self) -> None:
        assert simple_parse_php_array("['q' => 'He said \"Hi\"']") == {"q": 'He said "Hi"'}

    def test_bare_word_and_numeric_keys_are_quoted(self) -> None:
        assert simple_parse_php_array("[name => 'John', 5 => 'x']") == {"name": "John", "5": "x"}

    def test_uppercase_literals(self) -> None:
        assert simple_parse_php_array("['a' => TRUE, 'b' => NULL, 'c' => FALSE]") == {
            "a": True,
            "b": None,
            "c": False,
        }

    def test_special_numbers_become_strings(self) -> None:
        assert simple_parse_php_array("[INF, -INF, NAN]") == ["Infinity", "-Infinity", "NaN"]

    def test_invalid_input_raises_json_error(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            simple_parse_php_array("['a' => FOO]")


class TestRewriteSteps:
    """개별 치환 단계"""

    def test_replace_array_syntax_nested(self) -> None:
        assert replace_array_syntax("array(1, array(2, 3))") == "[1, [2, 3]]"

    def test_replace_array_syntax_keeps_parens_in_strings(self) -> None:
        assert replace_array_syntax("array('f(x)')") == "['f(x)']"

    def test_replace_arrow_syntax_skips_string_contents(self) -> None:
        assert replace_arrow_syntax("['k' => 'a => b']") == "['k': 'a => b']"

    def test_replace_single_quotes_leaves_double_quoted_runs(self) -> None:
        assert replace_single_quotes("['a', \"it's\"]") == "[\"a\", \"it's\"]"

    def test_replace_php_values(self) -> None:
        assert replace_php_values("[TRUE, -INF, INF, NAN]") == '[true, "-Infinity", "Infinity", "NaN"]'

    def test_convert_brackets_only_direct_colons(self) -> None:
        assert convert_brackets('[["a": 1], [1, 2]]') == '[{"a": 1}, [1, 2]]'

    def test_convert_brackets_ignores_colon_in_string(self) -> None:
        assert convert_brackets('["http://x", "y"]') == '["http://x", "y"]'
