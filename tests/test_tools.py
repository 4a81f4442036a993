"""Tests for devkit/tools.py (화면/API용 도구 함수)."""

from __future__ import annotations

import json

from devkit import tools


class TestPhpToJson:
    def test_success(self) -> None:
        result = tools.php_to_json("<?php return ['name' => '홍길동', 'tags' => ['a']];")
        assert result["value"] == {"name": "홍길동", "tags": ["a"]}
        assert json.loads(result["content"]) == result["value"]
        # 한글은 이스케이프하지 않음
        assert "홍길동" in result["content"]
        assert result["content"].startswith("{\n  ")

    def test_empty_input(self) -> None:
        assert tools.php_to_json("   ") == {"error": "PHP 배열을 입력해주세요"}

    def test_parse_failure(self) -> None:
        result = tools.php_to_json("['a' => FOO]")
        assert result["error"].startswith("변환 실패: ")


class TestJsonToPhp:
    def test_success(self) -> None:
        result = tools.json_to_php('{"a": 1, "b": [true, null]}')
        assert result == {
            "content": "[\n    'a' => 1,\n    'b' => [\n        true,\n        null\n    ]\n]"
        }

    def test_empty_input(self) -> None:
        assert tools.json_to_php("") == {"error": "JSON을 입력해주세요"}

    def test_invalid_json(self) -> None:
        assert tools.json_to_php("{a: 1}") == {"error": "변환 실패: JSON 형식을 확인해주세요"}


class TestParseDdlText:
    def test_success(self) -> None:
        result = tools.parse_ddl_text("CREATE TABLE t (id INT PRIMARY KEY);")
        assert result["result"]["tables"][0]["table_name"] == "t"
        assert result["markdown"].startswith("## 테이블: t")

    def test_empty_input(self) -> None:
        assert tools.parse_ddl_text("") == {"error": "DDL 문을 입력해주세요"}

    def test_nothing_found(self) -> None:
        assert tools.parse_ddl_text("SELECT 1;") == {"error": "유효한 DDL 문을 찾지 못했습니다"}

    def test_parse_error(self) -> None:
        result = tools.parse_ddl_text("CREATE TABLE users")
        assert result["error"].startswith("파싱 실패: ")


class TestDiffJsonText:
    def test_equal(self) -> None:
        result = tools.diff_json_text('{"a": 1, "b": 2}', '{"b": 2, "a": 1}', "loose")
        assert result == {"is_equal": True, "diffs": [], "summary": "두 JSON이 동일합니다"}

    def test_strict(self) -> None:
        result = tools.diff_json_text('{"a": 1, "b": 2}', '{"b": 2, "a": 1}', "strict")
        assert result["is_equal"] is False
        assert result["summary"] == "차이 2건을 발견했습니다"

    def test_empty_input(self) -> None:
        assert tools.diff_json_text("{}", " ") == {"error": "비교할 JSON을 입력해주세요"}

    def test_invalid_mode(self) -> None:
        result = tools.diff_json_text("{}", "{}", "fuzzy")
        assert result == {"error": "지원하지 않는 비교 모드입니다: fuzzy"}

    def test_invalid_json(self) -> None:
        result = tools.diff_json_text("{}", "{broken", "loose")
        assert result["error"].startswith("JSON 파싱 실패: ")
