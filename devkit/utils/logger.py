"""
간단한 로거 유틸리티
"""
import logging
import sys

from devkit.config import LOG_LEVEL

# 토큰 단위 로그가 많은 로거는 WARNING 레벨로 고정
QUIET_LOGGERS = ["php_tokenizer"]


def setup_logger(name: str) -> logging.Logger:
    """
    로거를 설정하고 반환합니다.

    Args:
        name: 로거 이름

    Returns:
        설정된 로거 인스턴스
    """
    logger = logging.getLogger(name)

    # 이미 핸들러가 있으면 중복 추가하지 않음
    if logger.handlers:
        return logger

    if name in QUIET_LOGGERS:
        level = logging.WARNING
    else:
        level = getattr(logging, LOG_LEVEL, logging.INFO)

    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    # 포맷터
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger
