"""
화면/API에서 호출하는 도구 함수 모음
입력 검증 후 핵심 모듈을 호출하고, 실패하면 예외 대신 {"error": 메시지} 를 반환합니다.
"""
import json
from typing import Any, Dict

from devkit.config import DEFAULT_DIFF_MODE
from devkit.ddl import DDLParseError, generate_markdown, parse_ddl
from devkit.json_diff import compare_json, summarize_diff
from devkit.json_diff.diff_types import DIFF_MODES
from devkit.php import PHPParseError, convert_to_php, parse_php_array
from devkit.utils.logger import setup_logger

logger = setup_logger("devkit_tools")


def to_pretty_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def php_to_json(php_text: str) -> Dict[str, Any]:
    """
    PHP 배열 문자열을 JSON으로 변환합니다.
    Args:
        php_text (str): PHP 배열 문자열
    Returns:
        dict: {"value": 변환된 값, "content": JSON 문자열} 또는 {"error": 메시지}
    """
    if not php_text or not php_text.strip():
        return {"error": "PHP 배열을 입력해주세요"}

    try:
        value = parse_php_array(php_text)
    except PHPParseError as e:
        return {"error": f"변환 실패: {e}"}

    return {"value": value, "content": to_pretty_json(value)}


def json_to_php(json_text: str) -> Dict[str, Any]:
    """
    JSON 문자열을 PHP 배열 문자열로 변환합니다.
    Returns:
        dict: {"content": PHP 배열 문자열} 또는 {"error": 메시지}
    """
    if not json_text or not json_text.strip():
        return {"error": "JSON을 입력해주세요"}

    try:
        value = json.loads(json_text)
    except json.JSONDecodeError as e:
        logger.warning("JSON 파싱 실패: %s", e)
        return {"error": "변환 실패: JSON 형식을 확인해주세요"}

    return {"content": convert_to_php(value)}


def parse_ddl_text(ddl_text: str) -> Dict[str, Any]:
    """
    DDL 문을 파싱합니다.
    Returns:
        dict: {"result": 파싱 결과 dict, "markdown": Markdown 문자열} 또는 {"error": 메시지}
    """
    if not ddl_text or not ddl_text.strip():
        return {"error": "DDL 문을 입력해주세요"}

    try:
        result = parse_ddl(ddl_text)
    except DDLParseError as e:
        logger.error("DDL 파싱 실패: %s", e)
        return {"error": f"파싱 실패: {e}"}

    if not result.tables and not result.standalone_indexes:
        return {"error": "유효한 DDL 문을 찾지 못했습니다"}

    return {"result": result.to_dict(), "markdown": generate_markdown(result)}


def diff_json_text(old_text: str, new_text: str, mode: str = DEFAULT_DIFF_MODE) -> Dict[str, Any]:
    """
    두 JSON 문자열을 비교합니다.
    Returns:
        dict: {"is_equal", "diffs", "summary"} 또는 {"error": 메시지}
    """
    if not old_text or not old_text.strip() or not new_text or not new_text.strip():
        return {"error": "비교할 JSON을 입력해주세요"}

    if mode not in DIFF_MODES:
        return {"error": f"지원하지 않는 비교 모드입니다: {mode}"}

    try:
        old_value = json.loads(old_text)
        new_value = json.loads(new_text)
    except json.JSONDecodeError as e:
        return {"error": f"JSON 파싱 실패: {e}"}

    result = compare_json(old_value, new_value, mode)
    return {
        "is_equal": result["is_equal"],
        "diffs": result["diffs"],
        "summary": summarize_diff(result),
    }
