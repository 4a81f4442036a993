"""
devkit API DTO 정의
"""
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from devkit import config


class PhpToJsonRequest(BaseModel):
    """PHP 배열 -> JSON 변환 요청"""
    php_text: str


class JsonToPhpRequest(BaseModel):
    """JSON -> PHP 배열 변환 요청"""
    json_text: str


class ConvertResponse(BaseModel):
    """변환 응답"""
    success: bool
    content: str
    value: Optional[Any] = None


class DdlParseRequest(BaseModel):
    """DDL 파싱 요청"""
    ddl_text: str


class DdlParseResponse(BaseModel):
    """DDL 파싱 응답"""
    success: bool
    result: Dict[str, Any]
    markdown: str


class JsonDiffRequest(BaseModel):
    """JSON 비교 요청"""
    old_json: str
    new_json: str
    # 생략하면 DEVKIT_DEFAULT_DIFF_MODE 설정을 따름
    mode: Literal["strict", "loose"] = Field(default_factory=lambda: config.DEFAULT_DIFF_MODE)


class JsonDiffResponse(BaseModel):
    """JSON 비교 응답"""
    success: bool
    is_equal: bool
    diffs: List[Dict[str, Any]]
    summary: str
