"""
PHP 배열 <-> JSON 변환 라우터
"""
from fastapi import APIRouter, HTTPException

from backend.dto.devkit_dto import ConvertResponse, JsonToPhpRequest, PhpToJsonRequest
from backend.services import json_to_php_service, php_to_json_service
from devkit.utils.logger import setup_logger


logger = setup_logger("php_router")
router = APIRouter(prefix="/php", tags=["php"])


@router.post("/to-json", response_model=ConvertResponse)
async def php_to_json_api(request: PhpToJsonRequest):
    """
    PHP 배열 문자열을 JSON으로 변환합니다.
    """
    try:
        result = await php_to_json_service(request.php_text)
    except Exception as e:
        logger.error("PHP -> JSON 변환 오류: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))

    if "error" in result:
        raise HTTPException(status_code=400, detail=result["error"])
    return {"success": True, "content": result["content"], "value": result["value"]}


@router.post("/from-json", response_model=ConvertResponse)
async def json_to_php_api(request: JsonToPhpRequest):
    """
    JSON 문자열을 PHP 배열 문자열로 변환합니다.
    """
    try:
        result = await json_to_php_service(request.json_text)
    except Exception as e:
        logger.error("JSON -> PHP 변환 오류: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))

    if "error" in result:
        raise HTTPException(status_code=400, detail=result["error"])
    return {"success": True, "content": result["content"]}
