# social_api/services/firestore_service.py
import logging
from typing import Callable, List, Optional

from firebase_admin import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from social_api.core.errors import ServiceResult
from social_api.models.post import Post
from social_api.models.user import User
from social_api.utils.datetime_utils import DateTimeUtils


class PostStore:
    """
    'posts' 컬렉션에 대한 문서 단위 읽기/쓰기.
    Firestore 클라이언트는 create_app 에서 주입됩니다.
    """
    def __init__(self, db, collection_name: str = 'posts'):
        self.db = db
        self.posts_ref = db.collection(collection_name)

    def add(self, post: Post) -> Post:
        """새 게시글 문서를 post_id 를 문서 ID로 하여 저장합니다."""
        self.posts_ref.document(post.post_id).set(post.to_dict())
        logging.info(f"Firestore 게시글 저장 성공 (post_id: {post.post_id})")
        return post

    def get(self, post_id: str) -> Optional[Post]:
        doc = self.posts_ref.document(post_id).get()
        if not doc.exists:
            return None
        return Post.from_dict(DateTimeUtils.from_firestore(doc.to_dict()))

    def list_newest_first(self) -> List[Post]:
        """모든 게시글을 created_at 내림차순(최신순)으로 반환합니다."""
        query = self.posts_ref.order_by("created_at", direction=firestore.Query.DESCENDING)
        return [Post.from_dict(DateTimeUtils.from_firestore(doc.to_dict())) for doc in query.stream()]

    def delete(self, post_id: str) -> None:
        """게시글 문서를 삭제합니다. 내장된 likes/comments 도 함께 사라집니다."""
        self.posts_ref.document(post_id).delete()
        logging.info(f"Firestore 게시글 삭제 완료 (post_id: {post_id})")

    def update(self, post_id: str, mutate: Callable[[Optional[Post]], ServiceResult]) -> ServiceResult:
        """
        트랜잭션 안에서 게시글을 읽고, mutate 로 수정한 뒤 다시 씁니다.
        - mutate 는 읽어온 Post(없으면 None)를 제자리에서 수정하고 ServiceResult 를 반환합니다.
        - 결과가 성공일 때만 문서를 덮어씁니다.
        - 동시 수정이 충돌하면 Firestore 가 함수 전체를 재실행하므로 갱신 유실이 없습니다.
        """
        transaction = self.db.transaction()
        post_ref = self.posts_ref.document(post_id)

        @firestore.transactional
        def _update_in_transaction(transaction, post_ref):
            snapshot = post_ref.get(transaction=transaction)
            post = None
            if snapshot.exists:
                post = Post.from_dict(DateTimeUtils.from_firestore(snapshot.to_dict()))

            result = mutate(post)
            if post is not None and result.ok:
                transaction.set(post_ref, post.to_dict())
            return result

        return _update_in_transaction(transaction, post_ref)


class UserStore:
    """'users' 컬렉션 조회. 작성자 프로필(이름/아바타) 확인과 이메일 중복 검사에 사용됩니다."""
    def __init__(self, db, collection_name: str = 'users'):
        self.db = db
        self.users_ref = db.collection(collection_name)

    @staticmethod
    def _to_user(doc) -> User:
        data = DateTimeUtils.from_firestore(doc.to_dict())
        data.setdefault('user_id', doc.id)
        return User.from_dict(data)

    def get(self, user_id: str) -> Optional[User]:
        doc = self.users_ref.document(user_id).get()
        if not doc.exists:
            return None
        return self._to_user(doc)

    def find_by_email(self, email: str) -> Optional[User]:
        query = self.users_ref.where(filter=FieldFilter("email", "==", email)).limit(1).stream()
        doc = next(query, None)
        if doc is None:
            return None
        return self._to_user(doc)
