"""
JSON 비교 라우터
"""
from fastapi import APIRouter, HTTPException

from backend.dto.devkit_dto import JsonDiffRequest, JsonDiffResponse
from backend.services import json_diff_service
from devkit.utils.logger import setup_logger


logger = setup_logger("json_diff_router")
router = APIRouter(prefix="/json", tags=["json"])


@router.post("/diff", response_model=JsonDiffResponse)
async def json_diff_api(request: JsonDiffRequest):
    """
    두 JSON을 비교합니다.
    mode: loose (key 순서 무시) / strict (key 순서 변경도 보고)
    """
    try:
        result = await json_diff_service(request.old_json, request.new_json, request.mode)
    except Exception as e:
        logger.error("JSON 비교 오류: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))

    if "error" in result:
        raise HTTPException(status_code=400, detail=result["error"])
    return {"success": True, **result}
