"""
MySQL DDL 파싱 모듈
CREATE TABLE / CREATE INDEX 문에서 테이블, 컬럼, 인덱스 정보를 추출합니다.

주의:
- 주석 제거와 문장 분리(;)는 문자열 리터럴을 고려하지 않습니다.
  따옴표 안에 ; 또는 -- 가 있으면 문장이 잘못 나뉠 수 있습니다.
- 테이블 정의 안의 SPATIAL KEY/INDEX 는 인덱스로 추출되지 않습니다.
"""

import re
from typing import Dict, List, Optional

from devkit.ddl.ddl_types import (
    DDLParseResult,
    FieldIndex,
    IndexType,
    StandaloneIndex,
    TableField,
    TableIndex,
    TableInfo,
)
from devkit.utils.logger import setup_logger

logger = setup_logger("ddl_parser")


class DDLParseError(ValueError):
    """CREATE TABLE 문을 해석할 수 없는 경우 발생하는 예외"""
    pass


class TableNameNotFoundError(DDLParseError):
    """CREATE TABLE 문에서 테이블명을 찾지 못한 경우"""
    pass


class TableBodyNotFoundError(DDLParseError):
    """CREATE TABLE 문에서 괄호로 감싼 정의 부분을 찾지 못한 경우"""
    pass


LINE_COMMENT_PATTERN = re.compile(r'--.*$', re.MULTILINE)
BLOCK_COMMENT_PATTERN = re.compile(r'/\*.*?\*/', re.DOTALL)

CREATE_TABLE_PATTERN = re.compile(r'CREATE\s+TABLE', re.IGNORECASE)
CREATE_INDEX_PATTERN = re.compile(
    r'CREATE\s+(?:UNIQUE\s+|FULLTEXT\s+|SPATIAL\s+)?INDEX', re.IGNORECASE
)

TABLE_NAME_PATTERN = re.compile(
    r'CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?[`"\']?(\w+)[`"\']?',
    re.IGNORECASE
)
# 첫 번째 ( 부터 마지막 ) 까지가 본문, 그 뒤는 테이블 옵션
TABLE_BODY_PATTERN = re.compile(
    r'CREATE\s+TABLE[^(]*\((.+)\)([^)]*)$',
    re.IGNORECASE | re.DOTALL
)
TABLE_COMMENT_PATTERN = re.compile(
    r'COMMENT\s*=?\s*[\'"]([^\'"]+)[\'"]',
    re.IGNORECASE
)

CREATE_INDEX_STATEMENT_PATTERN = re.compile(
    r'CREATE\s+(UNIQUE\s+|FULLTEXT\s+|SPATIAL\s+)?INDEX\s+[`"\']?(\w+)[`"\']?'
    r'\s+ON\s+[`"\']?(\w+)[`"\']?\s*\(([^)]+)\)',
    re.IGNORECASE
)

INDEX_DEFINITION_PATTERN = re.compile(
    r'^(PRIMARY\s+KEY|UNIQUE\s+KEY|UNIQUE\s+INDEX|KEY|INDEX|FULLTEXT\s+KEY|'
    r'FULLTEXT\s+INDEX|SPATIAL\s+KEY|SPATIAL\s+INDEX|CONSTRAINT)\b',
    re.IGNORECASE
)
FIELD_DEFINITION_PATTERN = re.compile(r'^[`"\']?\w+[`"\']?\s+')

FIELD_NAME_PATTERN = re.compile(r'^[`"\']?(\w+)[`"\']?\s+(.+)$')
FIELD_TYPE_PATTERN = re.compile(
    r'^(\w+(?:\s*\([^)]+\))?(?:\s+unsigned)?(?:\s+zerofill)?)',
    re.IGNORECASE
)
NOT_NULL_PATTERN = re.compile(r'\bNOT\s+NULL\b', re.IGNORECASE)
DEFAULT_PATTERN = re.compile(
    r'DEFAULT\s+(\'(?:[^\'\\]|\\.)*\'|"(?:[^"\\]|\\.)*"|-?[\w().]+)',
    re.IGNORECASE
)
AUTO_INCREMENT_PATTERN = re.compile(r'\bAUTO_INCREMENT\b', re.IGNORECASE)
COMMENT_PATTERN = re.compile(r'COMMENT\s+[\'"]([^\'"]*)[\'"]', re.IGNORECASE)
PRIMARY_KEY_PATTERN = re.compile(r'\bPRIMARY\s+KEY\b', re.IGNORECASE)

# 인라인 인덱스: (접두 패턴, 인덱스 타입, 이름+컬럼 패턴)
INLINE_INDEX_RULES = [
    (
        re.compile(r'^UNIQUE\s+(KEY|INDEX)', re.IGNORECASE),
        "UNIQUE",
        re.compile(r'^UNIQUE\s+(?:KEY|INDEX)\s+[`"\']?(\w+)[`"\']?\s*\(([^)]+)\)', re.IGNORECASE),
    ),
    (
        re.compile(r'^FULLTEXT\s+(KEY|INDEX)', re.IGNORECASE),
        "FULLTEXT",
        re.compile(r'^FULLTEXT\s+(?:KEY|INDEX)\s+[`"\']?(\w+)[`"\']?\s*\(([^)]+)\)', re.IGNORECASE),
    ),
    (
        re.compile(r'^(KEY|INDEX)', re.IGNORECASE),
        "INDEX",
        re.compile(r'^(?:KEY|INDEX)\s+[`"\']?(\w+)[`"\']?\s*\(([^)]+)\)', re.IGNORECASE),
    ),
]
INLINE_PRIMARY_PATTERN = re.compile(r'^PRIMARY\s+KEY', re.IGNORECASE)
PARENTHESIZED_PATTERN = re.compile(r'\(([^)]+)\)')
INDEX_COLUMN_PATTERN = re.compile(r'[`"\']?(\w+)[`"\']?')

WHITESPACE_PATTERN = re.compile(r'\s+')


def normalize_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub(' ', text).strip()


class MySQLDDLParser:
    """MySQL/MariaDB DDL 파서"""

    def __init__(self, ddl_text: str):
        self.ddl_text = ddl_text

    def strip_comments(self) -> str:
        """-- 한 줄 주석과 /* */ 블록 주석을 제거합니다."""
        text = LINE_COMMENT_PATTERN.sub('', self.ddl_text)
        return BLOCK_COMMENT_PATTERN.sub('', text)

    def split_statements(self) -> List[str]:
        """; 기준으로 문장을 나누고 빈 문장은 버립니다."""
        return [s.strip() for s in self.strip_comments().split(';') if s.strip()]

    def parse_all(self) -> DDLParseResult:
        """
        DDL 텍스트 전체를 파싱합니다.
        같은 이름의 테이블이 다시 정의되면 나중 정의로 덮어씁니다.

        Returns:
            DDLParseResult

        Raises:
            DDLParseError: CREATE TABLE 문의 테이블명이나 본문을 찾지 못한 경우
        """
        tables: Dict[str, TableInfo] = {}
        standalone_indexes: List[StandaloneIndex] = []

        for statement in self.split_statements():
            if CREATE_TABLE_PATTERN.search(statement):
                table_info = self.parse_create_table(statement)
                tables[table_info.table_name.lower()] = table_info
            elif CREATE_INDEX_PATTERN.search(statement):
                standalone = self.parse_create_index(statement)
                if standalone is None:
                    logger.warning("CREATE INDEX 문을 해석하지 못해 건너뜁니다: %s", statement[:100])
                    continue

                table_info = tables.get(standalone.table_name.lower())
                if table_info:
                    attach_index(table_info, standalone.index)
                else:
                    standalone_indexes.append(standalone)

        logger.info(
            "테이블 %d개, 독립 인덱스 %d개 파싱 완료", len(tables), len(standalone_indexes)
        )
        return DDLParseResult(
            tables=list(tables.values()),
            standalone_indexes=standalone_indexes,
        )

    def parse_create_table(self, statement: str) -> TableInfo:
        """CREATE TABLE 문 하나를 TableInfo로 변환합니다."""
        name_match = TABLE_NAME_PATTERN.search(statement)
        if not name_match:
            raise TableNameNotFoundError("CREATE TABLE 문에서 테이블명을 식별할 수 없습니다")
        table_name = name_match.group(1)

        body_match = TABLE_BODY_PATTERN.search(statement)
        if not body_match:
            raise TableBodyNotFoundError(f"테이블 '{table_name}'의 정의 내용을 해석할 수 없습니다")
        body, table_options = body_match.group(1), body_match.group(2)

        comment_match = TABLE_COMMENT_PATTERN.search(table_options)
        table_comment = comment_match.group(1) if comment_match else ""

        fields: List[TableField] = []
        indexes: List[TableIndex] = []

        for definition in split_definitions(body):
            if not definition:
                continue

            if INDEX_DEFINITION_PATTERN.match(definition):
                index = parse_inline_index(definition)
                if index:
                    indexes.append(index)
            elif FIELD_DEFINITION_PATTERN.match(definition):
                table_field = parse_field(definition)
                if table_field:
                    fields.append(table_field)

        table_info = TableInfo(
            table_name=table_name,
            table_comment=table_comment,
            fields=fields,
            indexes=indexes,
        )
        link_indexes(table_info)
        return table_info

    def parse_create_index(self, statement: str) -> Optional[StandaloneIndex]:
        """
        CREATE [UNIQUE|FULLTEXT|SPATIAL] INDEX name ON table (columns) 를 파싱합니다.
        형식이 맞지 않으면 None을 반환합니다.
        """
        match = CREATE_INDEX_STATEMENT_PATTERN.search(statement)
        if not match:
            return None

        type_text = (match.group(1) or '').strip().upper()
        index_type: IndexType = "INDEX"
        if type_text in ("UNIQUE", "FULLTEXT", "SPATIAL"):
            index_type = type_text

        index = TableIndex(
            type=index_type,
            name=match.group(2),
            columns=parse_index_columns(match.group(4)),
        )
        return StandaloneIndex(table_name=match.group(3), index=index)


def split_definitions(content: str) -> List[str]:
    """
    테이블 본문을 최상위 쉼표 기준으로 나눕니다.
    괄호 안(decimal(10,2))이나 따옴표 안의 쉼표는 구분자로 보지 않습니다.
    """
    definitions: List[str] = []
    current: List[str] = []
    depth = 0
    in_string = False
    string_char = ''

    for i, char in enumerate(content):
        if in_string:
            current.append(char)
            if char == string_char and content[i - 1] != '\\':
                in_string = False
            continue

        if char in ("'", '"', '`'):
            in_string = True
            string_char = char
        elif char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
        elif char == ',' and depth == 0:
            definitions.append(''.join(current).strip())
            current = []
            continue

        current.append(char)

    tail = ''.join(current).strip()
    if tail:
        definitions.append(tail)

    return definitions


def parse_field(definition: str) -> Optional[TableField]:
    """컬럼 정의 하나를 파싱합니다."""
    normalized = normalize_whitespace(definition)

    name_match = FIELD_NAME_PATTERN.match(normalized)
    if not name_match:
        return None
    name, rest = name_match.group(1), name_match.group(2)

    type_match = FIELD_TYPE_PATTERN.match(rest)
    field_type = normalize_whitespace(type_match.group(1)) if type_match else 'UNKNOWN'

    default_value = None
    default_match = DEFAULT_PATTERN.search(rest)
    if default_match:
        default_value = re.sub(r'^[\'"]|[\'"]$', '', default_match.group(1))

    comment_match = COMMENT_PATTERN.search(rest)

    return TableField(
        name=name,
        type=field_type,
        nullable=not NOT_NULL_PATTERN.search(rest),
        default_value=default_value,
        auto_increment=bool(AUTO_INCREMENT_PATTERN.search(rest)),
        comment=comment_match.group(1) if comment_match else "",
        is_primary_key=bool(PRIMARY_KEY_PATTERN.search(rest)),
    )


def parse_inline_index(definition: str) -> Optional[TableIndex]:
    """
    테이블 정의 안의 인덱스(PRIMARY KEY, UNIQUE KEY, KEY 등)를 파싱합니다.
    컬럼이 하나도 없으면 None을 반환합니다.
    """
    normalized = normalize_whitespace(definition)

    index_type: Optional[IndexType] = None
    name = ''
    columns: List[str] = []

    if INLINE_PRIMARY_PATTERN.match(normalized):
        index_type = "PRIMARY"
        name = "PRIMARY"
        column_match = PARENTHESIZED_PATTERN.search(normalized)
        if column_match:
            columns = parse_index_columns(column_match.group(1))
    else:
        for prefix_pattern, rule_type, detail_pattern in INLINE_INDEX_RULES:
            if not prefix_pattern.match(normalized):
                continue
            index_type = rule_type
            detail_match = detail_pattern.match(normalized)
            if detail_match:
                name = detail_match.group(1)
                columns = parse_index_columns(detail_match.group(2))
            break

    if index_type is None or not columns:
        return None

    return TableIndex(type=index_type, name=name, columns=columns)


def parse_index_columns(columns_text: str) -> List[str]:
    """
    인덱스 컬럼 목록을 파싱합니다.
    name(10) 같은 길이 지정은 버리고 컬럼명만 남깁니다.
    """
    columns = []
    for column in columns_text.split(','):
        match = INDEX_COLUMN_PATTERN.search(column.strip())
        if match:
            columns.append(match.group(1))
    return columns


def _field_index(index: TableIndex, field_name: str) -> Optional[FieldIndex]:
    lowered = field_name.lower()
    if not any(column.lower() == lowered for column in index.columns):
        return None
    return FieldIndex(
        name=index.name,
        type=index.type,
        is_first=index.columns[0].lower() == lowered,
    )


def _missing_columns(index: TableIndex, field_names: set) -> List[str]:
    return [column for column in index.columns if column.lower() not in field_names]


def link_indexes(table_info: TableInfo) -> None:
    """
    모든 필드의 indexes 목록을 다시 만들고,
    모든 인덱스의 missing_columns 를 계산합니다.
    """
    field_names = table_info.field_names()

    for table_field in table_info.fields:
        table_field.indexes = []
        for index in table_info.indexes:
            field_index = _field_index(index, table_field.name)
            if field_index:
                table_field.indexes.append(field_index)

    for index in table_info.indexes:
        index.missing_columns = _missing_columns(index, field_names)


def attach_index(table_info: TableInfo, index: TableIndex) -> None:
    """CREATE INDEX 로 정의된 인덱스를 이미 파싱된 테이블에 붙입니다."""
    index.missing_columns = _missing_columns(index, table_info.field_names())
    table_info.indexes.append(index)

    for table_field in table_info.fields:
        field_index = _field_index(index, table_field.name)
        if field_index:
            table_field.indexes.append(field_index)


def parse_ddl(ddl_text: str) -> DDLParseResult:
    """
    DDL 텍스트를 파싱하여 테이블 정보를 추출합니다.

    Args:
        ddl_text: 하나 이상의 DDL 문

    Returns:
        DDLParseResult (tables, standalone_indexes)

    Raises:
        DDLParseError: CREATE TABLE 문의 테이블명이나 본문을 찾지 못한 경우

    Example:
        >>> result = parse_ddl("CREATE TABLE users (id INT PRIMARY KEY, name VARCHAR(100));")
        >>> result.tables[0].table_name
        'users'
    """
    return MySQLDDLParser(ddl_text).parse_all()
