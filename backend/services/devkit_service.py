import asyncio
from typing import Any, Callable, Dict

from devkit import tools
from devkit.utils.logger import setup_logger


logger = setup_logger("devkit_service")


async def _run_tool(func: Callable[..., Dict[str, Any]], *args) -> Dict[str, Any]:
    """
    CPU 바운드 도구 함수를 executor에서 실행합니다.
    """
    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(None, lambda: func(*args))
    if "error" in result:
        logger.warning("%s 실패: %s", func.__name__, result["error"])
    return result


async def php_to_json_service(php_text: str) -> Dict[str, Any]:
    return await _run_tool(tools.php_to_json, php_text)


async def json_to_php_service(json_text: str) -> Dict[str, Any]:
    return await _run_tool(tools.json_to_php, json_text)


async def ddl_parse_service(ddl_text: str) -> Dict[str, Any]:
    """
    DDL 파싱 서비스입니다.
    파싱 결과(dict)와 Markdown 문자열을 함께 반환합니다.
    """
    logger.info("DDL 파싱 요청: %d자", len(ddl_text))
    return await _run_tool(tools.parse_ddl_text, ddl_text)


async def json_diff_service(old_json: str, new_json: str, mode: str) -> Dict[str, Any]:
    logger.info("JSON 비교 요청 (mode=%s)", mode)
    return await _run_tool(tools.diff_json_text, old_json, new_json, mode)
