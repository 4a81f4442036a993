"""Tests for devkit/ddl/markdown_generator.py."""

from __future__ import annotations

from devkit.ddl import (
    DDLParseResult,
    generate_markdown,
    get_index_type_label,
    get_index_type_text,
    parse_ddl,
)
from devkit.ddl.markdown_generator import field_index_labels


class TestLabels:
    def test_index_type_text(self) -> None:
        assert get_index_type_text("PRIMARY") == "기본키"
        assert get_index_type_text("UNIQUE") == "유니크 인덱스"
        assert get_index_type_text("FULLTEXT") == "전문 인덱스"
        assert get_index_type_text("SPATIAL") == "공간 인덱스"
        assert get_index_type_text("INDEX") == "일반 인덱스"

    def test_index_type_label(self) -> None:
        assert get_index_type_label("PRIMARY") == "🔑 기본키"
        assert get_index_type_label("INDEX") == "📇 인덱스"

    def test_inline_primary_key_is_not_duplicated(self) -> None:
        result = parse_ddl("CREATE TABLE t (id INT PRIMARY KEY, PRIMARY KEY (id), KEY idx_id (id))")
        labels = field_index_labels(result.tables[0].fields[0])
        assert labels == ["기본키", "일반 인덱스(idx_id)"]


class TestGenerateMarkdown:
    """Markdown 문서 생성"""

    def test_table_document(self) -> None:
        result = parse_ddl("""
            CREATE TABLE `users` (
              `id` int(11) NOT NULL AUTO_INCREMENT COMMENT 'ID',
              `email` varchar(100) DEFAULT NULL,
              PRIMARY KEY (`id`),
              UNIQUE KEY `uk_email` (`email`, `tenant_id`)
            ) COMMENT='회원';
        """)
        md = generate_markdown(result)
        lines = md.splitlines()

        assert lines[0] == "## 테이블: users (회원)"
        assert "| 필드명 | 타입 | NULL 허용 | 기본값 | 인덱스 | 설명 |" in lines
        assert "| id (AI) | int(11) | 아니오 | - | 기본키(PRIMARY) | ID |" in lines
        assert "| email | varchar(100) | 예 | NULL | 유니크 인덱스(uk_email) | - |" in lines
        assert "### 인덱스 목록" in lines
        assert "| PRIMARY | 기본키 | id |" in lines
        assert "| uk_email | 유니크 인덱스 | email, tenant_id (누락: tenant_id) |" in lines
        assert "## 독립 인덱스" not in md

    def test_table_without_indexes_has_no_index_section(self) -> None:
        md = generate_markdown(parse_ddl("CREATE TABLE t (a INT)"))
        assert md.startswith("## 테이블: t\n\n")
        assert "### 인덱스 목록" not in md
        assert "| a | INT | 예 | - | - | - |" in md

    def test_standalone_index_section(self) -> None:
        md = generate_markdown(parse_ddl("CREATE UNIQUE INDEX uk_code ON codes (code, lang);"))
        assert "## 독립 인덱스" in md
        assert "| codes | uk_code | 유니크 인덱스 | code, lang |" in md

    def test_empty_result(self) -> None:
        assert generate_markdown(DDLParseResult()) == ""
