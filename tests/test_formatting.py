"""Tests for devkit/json_diff/formatting.py."""

from __future__ import annotations

from devkit.json_diff import (
    UNDEFINED,
    format_path,
    format_value,
    get_diff_type_color,
    get_diff_type_name,
    summarize_diff,
)


class TestFormatValue:
    """값 표시 문자열"""

    def test_scalars(self) -> None:
        assert format_value("test") == '"test"'
        assert format_value(123) == "123"
        assert format_value(1.5) == "1.5"
        assert format_value(2.0) == "2"
        assert format_value(None) == "null"
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_undefined(self) -> None:
        assert format_value() == "undefined"
        assert format_value(UNDEFINED) == "undefined"

    def test_special_floats(self) -> None:
        assert format_value(float("nan")) == "NaN"
        assert format_value(float("inf")) == "Infinity"
        assert format_value(float("-inf")) == "-Infinity"

    def test_containers_are_pretty_json(self) -> None:
        assert format_value({"a": 1}) == '{\n  "a": 1\n}'
        assert format_value(["한글"]) == '[\n  "한글"\n]'


class TestLabels:
    """차이 종류 이름과 색상"""

    def test_names(self) -> None:
        assert get_diff_type_name("added") == "추가"
        assert get_diff_type_name("removed") == "삭제"
        assert get_diff_type_name("modified") == "수정"
        assert get_diff_type_name("unchanged") == "변경 없음"
        assert get_diff_type_name("order_changed") == "순서 변경"

    def test_colors(self) -> None:
        assert get_diff_type_color("added") == "#4ade80"
        assert get_diff_type_color("removed") == "#f87171"
        assert get_diff_type_color("modified") == "#fbbf24"
        assert get_diff_type_color("unchanged") == "#9ca3af"
        assert get_diff_type_color("order_changed") == "#60a5fa"


class TestSummary:
    def test_format_path(self) -> None:
        assert format_path("") == "(root)"
        assert format_path("a.b") == "a.b"

    def test_summarize(self) -> None:
        assert summarize_diff({"is_equal": True, "diffs": []}) == "두 JSON이 동일합니다"
        diffs = [{"path": "a", "type": "added", "new_value": 1}]
        assert summarize_diff({"is_equal": False, "diffs": diffs}) == "차이 1건을 발견했습니다"
