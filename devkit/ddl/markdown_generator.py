"""
DDL 파싱 결과를 Markdown 표로 변환합니다.
"""
from typing import List

from devkit.ddl.ddl_types import DDLParseResult, IndexType, TableField, TableInfo

INDEX_TYPE_TEXT = {
    "PRIMARY": "기본키",
    "UNIQUE": "유니크 인덱스",
    "FULLTEXT": "전문 인덱스",
    "SPATIAL": "공간 인덱스",
    "INDEX": "일반 인덱스",
}

INDEX_TYPE_LABEL = {
    "PRIMARY": "🔑 기본키",
    "UNIQUE": "🎯 유니크",
    "FULLTEXT": "📝 전문",
    "SPATIAL": "🌍 공간",
    "INDEX": "📇 인덱스",
}


def get_index_type_text(index_type: IndexType) -> str:
    """인덱스 타입의 한글 설명을 반환합니다."""
    return INDEX_TYPE_TEXT.get(index_type, INDEX_TYPE_TEXT["INDEX"])


def get_index_type_label(index_type: IndexType) -> str:
    """인덱스 타입의 짧은 라벨을 반환합니다."""
    return INDEX_TYPE_LABEL.get(index_type, INDEX_TYPE_LABEL["INDEX"])


def field_index_labels(table_field: TableField) -> List[str]:
    """
    필드가 속한 인덱스 라벨 목록
    컬럼에 직접 PRIMARY KEY가 선언된 경우 기본키 라벨을 맨 앞에 두고
    PRIMARY 인덱스 항목은 중복으로 넣지 않습니다.
    """
    labels = []
    if table_field.is_primary_key:
        labels.append(get_index_type_text("PRIMARY"))
    for field_index in table_field.indexes:
        if field_index.type == "PRIMARY" and table_field.is_primary_key:
            continue
        labels.append(f"{get_index_type_text(field_index.type)}({field_index.name})")
    return labels


def _table_markdown(table: TableInfo) -> str:
    md = f"## 테이블: {table.table_name}"
    if table.table_comment:
        md += f" ({table.table_comment})"
    md += "\n\n"

    md += "| 필드명 | 타입 | NULL 허용 | 기본값 | 인덱스 | 설명 |\n"
    md += "|--------|------|-----------|--------|--------|------|\n"

    for table_field in table.fields:
        labels = field_index_labels(table_field)
        md += f"| {table_field.name}{' (AI)' if table_field.auto_increment else ''} "
        md += f"| {table_field.type} "
        md += f"| {'예' if table_field.nullable else '아니오'} "
        md += f"| {table_field.default_value if table_field.default_value is not None else '-'} "
        md += f"| {', '.join(labels) if labels else '-'} "
        md += f"| {table_field.comment or '-'} |\n"

    if table.indexes:
        md += "\n### 인덱스 목록\n\n"
        md += "| 인덱스명 | 타입 | 컬럼 |\n"
        md += "|----------|------|------|\n"
        for index in table.indexes:
            columns = ', '.join(index.columns)
            if index.missing_columns:
                columns += f" (누락: {', '.join(index.missing_columns)})"
            md += f"| {index.name} | {get_index_type_text(index.type)} | {columns} |\n"

    md += "\n"
    return md


def generate_markdown(result: DDLParseResult) -> str:
    """
    파싱 결과를 Markdown 문자열로 변환합니다.

    Args:
        result: parse_ddl 결과

    Returns:
        테이블마다 필드 표와 인덱스 표를 담은 Markdown
    """
    md = ''.join(_table_markdown(table) for table in result.tables)

    if result.standalone_indexes:
        md += "## 독립 인덱스\n\n"
        md += "| 테이블 | 인덱스명 | 타입 | 컬럼 |\n"
        md += "|--------|----------|------|------|\n"
        for standalone in result.standalone_indexes:
            index = standalone.index
            md += (
                f"| {standalone.table_name} | {index.name} "
                f"| {get_index_type_text(index.type)} | {', '.join(index.columns)} |\n"
            )
        md += "\n"

    return md
