# social_api/models/post.py
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Optional, List, Dict, Any

from social_api.utils.datetime_utils import DateTimeUtils


@dataclass
class Author:
    """게시글/댓글 문서 내부에 저장될 작성자 정보. 작성 시점의 프로필 사본이며 이후 갱신되지 않습니다."""
    user_id: str
    name: str
    avatar: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Author":
        return cls(user_id=data['user_id'], name=data.get('name'), avatar=data.get('avatar'))


@dataclass
class Like:
    """Post.likes 에 들어가는 항목. 한 사용자는 한 게시글에 최대 한 번만 등장합니다."""
    user_id: str


@dataclass
class Comment:
    """Post.comments 에 내장되는 댓글. 부모 게시글과 생명주기를 함께합니다."""
    comment_id: str
    author: Author
    text: str
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Comment":
        return cls(
            comment_id=data['comment_id'],
            author=Author.from_dict(data['author']),
            text=data['text'],
            created_at=DateTimeUtils.coerce(data.get('created_at'))
        )


@dataclass
class Post:
    """
    Firestore 'posts' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    likes, comments 는 최신 항목이 맨 앞에 오는 내장 리스트입니다.
    """
    post_id: str
    author: Author
    text: str
    likes: List[Like] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        return cls(
            post_id=data['post_id'],
            author=Author.from_dict(data['author']),
            text=data['text'],
            likes=[Like(user_id=like['user_id']) for like in data.get('likes', [])],
            comments=[Comment.from_dict(c) for c in data.get('comments', [])],
            created_at=DateTimeUtils.coerce(data.get('created_at'))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Firestore 저장용 dict. 모든 시간 필드는 UTC로 정규화됩니다."""
        return DateTimeUtils.for_firestore(asdict(self))

    # --- 좋아요/댓글 조작 (in-memory 사본에 대해 수행) ---
    def like_index(self, user_id: str) -> int:
        """user_id 의 좋아요 위치. 없으면 -1."""
        for index, like in enumerate(self.likes):
            if like.user_id == user_id:
                return index
        return -1

    def comment_index(self, comment_id: str) -> int:
        """comment_id 의 댓글 위치. 없으면 -1."""
        for index, comment in enumerate(self.comments):
            if comment.comment_id == comment_id:
                return index
        return -1
