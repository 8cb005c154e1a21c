# social_api/utils/ids.py
import uuid
from typing import Optional


def new_document_id() -> str:
    """게시글/댓글 문서에 부여할 새 ID (UUID4 문자열)."""
    return str(uuid.uuid4())


def canonical_document_id(value) -> Optional[str]:
    """
    저장소 ID 체계(하이픈이 들어간 UUID 문자열)에 맞는 값이면 저장된 형태(소문자)로 바꿔 반환합니다.
    형식이 틀리면 None. 잘못된 요청(InvalidId)과 존재하지 않는 리소스(NotFound)를 구분하는 데 사용됩니다.
    """
    if not isinstance(value, str):
        return None
    try:
        parsed = uuid.UUID(value)
    except ValueError:
        return None
    canonical = str(parsed)
    if canonical != value.lower():
        return None
    return canonical
