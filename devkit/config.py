"""
환경 설정 모듈
.env 파일과 환경 변수에서 설정값을 읽어옵니다.
"""
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

# 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.getenv("DEVKIT_LOG_LEVEL", "INFO").upper()

# API 서버 설정
API_HOST = os.getenv("DEVKIT_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("DEVKIT_API_PORT", "8000"))


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


CORS_ALLOW_ORIGINS = _split_origins(
    os.getenv("DEVKIT_CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")
)

# JSON 비교 기본 모드 (loose | strict)
DEFAULT_DIFF_MODE = os.getenv("DEVKIT_DEFAULT_DIFF_MODE", "loose").lower()
if DEFAULT_DIFF_MODE not in ("loose", "strict"):
    DEFAULT_DIFF_MODE = "loose"
