# social_api/models/user.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any

from social_api.utils.datetime_utils import DateTimeUtils


@dataclass
class User:
    """
    Firestore 'users' 컬렉션의 문서 구조 중 이 서비스가 읽는 부분.
    비밀번호 해시 필드는 의도적으로 포함하지 않습니다.
    """
    user_id: str
    name: str
    email: str
    avatar: Optional[str] = None
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            user_id=data['user_id'],
            name=data.get('name'),
            email=data.get('email'),
            avatar=data.get('avatar'),
            created_at=DateTimeUtils.coerce(data.get('created_at'))
        )
