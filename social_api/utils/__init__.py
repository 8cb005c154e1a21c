# social_api/utils/__init__.py
"""
유틸리티 모듈 패키지

시간 처리와 문서 ID 생성/검증처럼 여러 모듈에서 공통으로 쓰는 함수들을 모아둡니다.
"""

from .datetime_utils import DateTimeUtils
from .ids import new_document_id, canonical_document_id

__all__ = [
    'DateTimeUtils',
    'new_document_id', 'canonical_document_id'
]
