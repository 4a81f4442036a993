"""
DDL 파서 라우터
"""
from fastapi import APIRouter, HTTPException

from backend.dto.devkit_dto import DdlParseRequest, DdlParseResponse
from backend.services import ddl_parse_service
from devkit.utils.logger import setup_logger


logger = setup_logger("ddl_router")
router = APIRouter(prefix="/ddl", tags=["ddl"])


@router.post("/parse", response_model=DdlParseResponse)
async def ddl_parse_api(request: DdlParseRequest):
    """
    MySQL DDL을 파싱하여 테이블/필드/인덱스 구조와 Markdown 표를 반환합니다.
    """
    try:
        result = await ddl_parse_service(request.ddl_text)
    except Exception as e:
        logger.error("DDL 파싱 오류: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))

    if "error" in result:
        raise HTTPException(status_code=400, detail=result["error"])

    logger.info("DDL 파싱 성공: 테이블 %d개", len(result["result"]["tables"]))
    return {"success": True, "result": result["result"], "markdown": result["markdown"]}
