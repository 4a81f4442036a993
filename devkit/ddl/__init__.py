"""
DDL 파서 모듈
MySQL DDL을 파싱하여 테이블, 컬럼, 인덱스 정보를 추출합니다.
"""

from devkit.ddl.ddl_types import (
    DDLParseResult,
    FieldIndex,
    StandaloneIndex,
    TableField,
    TableIndex,
    TableInfo,
)
from devkit.ddl.ddl_parser import (
    DDLParseError,
    MySQLDDLParser,
    TableBodyNotFoundError,
    TableNameNotFoundError,
    parse_ddl,
)
from devkit.ddl.markdown_generator import (
    generate_markdown,
    get_index_type_label,
    get_index_type_text,
)

__all__ = [
    'DDLParseResult',
    'FieldIndex',
    'StandaloneIndex',
    'TableField',
    'TableIndex',
    'TableInfo',
    'DDLParseError',
    'MySQLDDLParser',
    'TableBodyNotFoundError',
    'TableNameNotFoundError',
    'parse_ddl',
    'generate_markdown',
    'get_index_type_label',
    'get_index_type_text',
]
