"""
devkit - 개발자용 변환/비교 도구 모음
- PHP 배열 <-> JSON 변환
- MySQL DDL -> 테이블 구조 파싱
- JSON 구조 비교
"""

__version__ = "0.1.0"
