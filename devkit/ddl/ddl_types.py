"""
DDL 파싱에 사용되는 데이터 타입 정의
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal, Optional

IndexType = Literal["PRIMARY", "UNIQUE", "INDEX", "FULLTEXT", "SPATIAL"]


@dataclass
class BaseType:
    """to_dict 공통 구현"""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class FieldIndex(BaseType):
    """필드가 속한 인덱스 정보"""
    name: str
    type: IndexType
    is_first: bool  # 인덱스의 첫 번째 컬럼인지 여부


@dataclass
class TableField(BaseType):
    """컬럼 정보를 담는 데이터클래스"""
    name: str
    type: str  # 원본 DB 타입 (예: varchar(50))
    nullable: bool = True
    default_value: Optional[str] = None
    auto_increment: bool = False
    comment: str = ""
    is_primary_key: bool = False  # 컬럼 정의에 직접 PRIMARY KEY가 있는 경우만 True
    indexes: List[FieldIndex] = field(default_factory=list)


@dataclass
class TableIndex(BaseType):
    """인덱스 정보를 담는 데이터클래스"""
    type: IndexType
    name: str
    columns: List[str] = field(default_factory=list)
    missing_columns: List[str] = field(default_factory=list)  # 테이블에 없는 컬럼


@dataclass
class TableInfo(BaseType):
    """테이블 정보를 담는 데이터클래스"""
    table_name: str
    table_comment: str = ""
    fields: List[TableField] = field(default_factory=list)
    indexes: List[TableIndex] = field(default_factory=list)

    def field_names(self) -> set:
        """소문자로 변환한 필드명 집합"""
        return {f.name.lower() for f in self.fields}


@dataclass
class StandaloneIndex(BaseType):
    """CREATE INDEX 문으로 정의된 인덱스 (대상 테이블을 찾지 못한 경우)"""
    table_name: str
    index: TableIndex


@dataclass
class DDLParseResult(BaseType):
    """DDL 파싱 결과"""
    tables: List[TableInfo] = field(default_factory=list)
    standalone_indexes: List[StandaloneIndex] = field(default_factory=list)
