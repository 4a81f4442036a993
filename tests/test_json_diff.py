"""Tests for devkit/json_diff/json_diff.py."""

from __future__ import annotations

from devkit.json_diff import compare_json
from devkit.json_diff.json_diff import get_value_type, is_equal


def _types(result) -> list:
    return [diff["type"] for diff in result["diffs"]]


class TestLooseMode:
    """loose 모드: key 순서 무시"""

    def test_identical_objects(self) -> None:
        result = compare_json({"name": "홍길동", "age": 25}, {"name": "홍길동", "age": 25}, "loose")
        assert result == {"is_equal": True, "diffs": []}

    def test_key_order_is_ignored(self) -> None:
        result = compare_json({"name": "홍길동", "age": 25}, {"age": 25, "name": "홍길동"}, "loose")
        assert result["is_equal"] is True

    def test_default_mode_is_loose(self) -> None:
        assert compare_json({"a": 1, "b": 2}, {"b": 2, "a": 1})["is_equal"] is True

    def test_added_key(self) -> None:
        result = compare_json({"name": "A"}, {"name": "A", "age": 25}, "loose")
        assert result["diffs"] == [{"path": "age", "type": "added", "new_value": 25}]

    def test_removed_key(self) -> None:
        result = compare_json({"name": "A", "age": 25}, {"name": "A"}, "loose")
        assert result["diffs"] == [{"path": "age", "type": "removed", "old_value": 25}]

    def test_modified_value(self) -> None:
        result = compare_json({"name": "A", "age": 25}, {"name": "B", "age": 25}, "loose")
        assert result["diffs"] == [
            {"path": "name", "type": "modified", "old_value": "A", "new_value": "B"}
        ]

    def test_nested_path(self) -> None:
        result = compare_json({"a": {"b": {"c": 1}}}, {"a": {"b": {"c": 2}}}, "loose")
        assert len(result["diffs"]) == 1
        assert result["diffs"][0]["path"] == "a.b.c"
        assert result["diffs"][0]["type"] == "modified"

    def test_array_is_positional(self) -> None:
        result = compare_json({"items": ["a", "b", "c"]}, {"items": ["a", "x", "c"]}, "loose")
        assert result["diffs"] == [
            {"path": "items[1]", "type": "modified", "old_value": "b", "new_value": "x"}
        ]

    def test_array_growth_and_shrink(self) -> None:
        grown = compare_json({"items": ["a"]}, {"items": ["a", "b"]})
        assert grown["diffs"] == [{"path": "items[1]", "type": "added", "new_value": "b"}]

        shrunk = compare_json({"items": ["a", "b"]}, {"items": ["a"]})
        assert shrunk["diffs"] == [{"path": "items[1]", "type": "removed", "old_value": "b"}]

    def test_front_insert_cascades(self) -> None:
        result = compare_json(["a", "b"], ["x", "a", "b"])
        assert _types(result) == ["modified", "modified", "added"]
        assert [diff["path"] for diff in result["diffs"]] == ["[0]", "[1]", "[2]"]

    def test_null_and_boolean_changes(self) -> None:
        assert _types(compare_json({"v": None}, {"v": "test"})) == ["modified"]
        assert _types(compare_json({"v": True}, {"v": False})) == ["modified"]

    def test_type_change_does_not_descend(self) -> None:
        result = compare_json({"v": {"a": 1}}, {"v": [1]})
        assert result["diffs"] == [
            {"path": "v", "type": "modified", "old_value": {"a": 1}, "new_value": [1]}
        ]

    def test_string_vs_number(self) -> None:
        assert _types(compare_json({"v": "123"}, {"v": 123})) == ["modified"]

    def test_bool_is_not_number(self) -> None:
        assert _types(compare_json({"v": 1}, {"v": True})) == ["modified"]
        assert _types(compare_json([0], [False])) == ["modified"]

    def test_int_and_float_are_equal_numbers(self) -> None:
        assert compare_json({"v": 1}, {"v": 1.0})["is_equal"] is True


class TestStrictMode:
    """strict 모드: key 순서까지 비교"""

    def test_same_order_is_equal(self) -> None:
        result = compare_json({"name": "A", "age": 25}, {"name": "A", "age": 25}, "strict")
        assert result["is_equal"] is True

    def test_swapped_keys(self) -> None:
        result = compare_json({"x": 1, "y": 2}, {"y": 2, "x": 1}, "strict")
        assert result["is_equal"] is False
        assert result["diffs"] == [
            {"path": "x", "type": "order_changed", "old_index": 0, "new_index": 1},
            {"path": "y", "type": "order_changed", "old_index": 1, "new_index": 0},
        ]

    def test_order_and_value_change_together(self) -> None:
        result = compare_json({"a": 1, "b": 2, "c": 3}, {"c": 3, "b": 5, "a": 1}, "strict")
        types = _types(result)
        assert "order_changed" in types
        assert "modified" in types
        order_paths = [d["path"] for d in result["diffs"] if d["type"] == "order_changed"]
        assert order_paths == ["a", "c"]
        # 순서 변경 항목이 값 비교 결과보다 먼저 나옴
        assert types.index("order_changed") < types.index("modified")

    def test_added_key_is_not_order_change(self) -> None:
        result = compare_json({"a": 1, "b": 2}, {"x": 0, "a": 1, "b": 2}, "strict")
        assert result["diffs"] == [{"path": "x", "type": "added", "new_value": 0}]

    def test_removed_key_is_not_order_change(self) -> None:
        result = compare_json({"a": 1, "b": 2, "c": 3}, {"a": 1, "c": 3}, "strict")
        assert _types(result) == ["removed"]

    def test_nested_order_change_path(self) -> None:
        result = compare_json({"o": {"p": 1, "q": 2}}, {"o": {"q": 2, "p": 1}}, "strict")
        assert [d["path"] for d in result["diffs"]] == ["o.p", "o.q"]

    def test_unknown_mode_behaves_as_loose(self) -> None:
        result = compare_json({"x": 1, "y": 2}, {"y": 2, "x": 1}, "other")  # type: ignore[arg-type]
        assert result["is_equal"] is True


class TestEdgeCases:
    """경계 조건"""

    def test_empty_containers(self) -> None:
        assert compare_json({}, {})["is_equal"] is True
        assert compare_json([], [])["is_equal"] is True

    def test_root_array(self) -> None:
        result = compare_json([1, 2, 3], [1, 2, 4])
        assert result["diffs"][0]["path"] == "[2]"

    def test_root_scalar_uses_root_path(self) -> None:
        result = compare_json(1, 2)
        assert result["diffs"] == [
            {"path": "(root)", "type": "modified", "old_value": 1, "new_value": 2}
        ]

    def test_root_type_mismatch(self) -> None:
        result = compare_json({"a": 1}, [1])
        assert result["diffs"][0]["path"] == "(root)"

    def test_deep_nesting(self) -> None:
        result = compare_json({"a": {"b": {"c": {"d": {"e": 1}}}}}, {"a": {"b": {"c": {"d": {"e": 2}}}}})
        assert result["diffs"][0]["path"] == "a.b.c.d.e"

    def test_mixed_arrays_and_objects(self) -> None:
        old = {"users": [{"name": "A", "scores": [90, 85]}]}
        new = {"users": [{"name": "A", "scores": [90, 95]}]}
        assert compare_json(old, new)["diffs"][0]["path"] == "users[0].scores[1]"

    def test_equality_matches_empty_diffs(self) -> None:
        samples = [
            ({}, {"a": 1}),
            ([1], [1]),
            ({"a": [1, {"b": None}]}, {"a": [1, {"b": None}]}),
            ("x", "y"),
        ]
        for old, new in samples:
            for mode in ("strict", "loose"):
                result = compare_json(old, new, mode)
                assert result["is_equal"] == (len(result["diffs"]) == 0)

    def test_reflexive(self) -> None:
        value = {"a": [1, 2, {"b": "c"}], "d": None, "e": True, "f": 1.5}
        assert compare_json(value, value, "strict")["is_equal"] is True


class TestHelpers:
    """타입 판별과 깊은 비교"""

    def test_get_value_type(self) -> None:
        assert get_value_type(None) == "null"
        assert get_value_type(True) == "boolean"
        assert get_value_type([]) == "array"
        assert get_value_type({}) == "object"
        assert get_value_type(1.5) == "number"
        assert get_value_type("s") == "string"

    def test_is_equal(self) -> None:
        assert is_equal({"a": [1, 2]}, {"a": [1, 2]}) is True
        assert is_equal({"a": 1}, {"b": 1}) is False
        assert is_equal([1, 2], [1]) is False
        assert is_equal(None, 0) is False
        assert is_equal(True, 1) is False
