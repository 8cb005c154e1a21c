# social_api/api/posts/services.py
import logging
from dataclasses import asdict
from typing import Optional, Dict, Any, List

from social_api.core.errors import ErrorKind, ServiceResult
from social_api.models.post import Post, Author, Like, Comment
from social_api.services.firestore_service import PostStore, UserStore
from social_api.utils.ids import new_document_id, canonical_document_id


class PostService:
    """
    게시글 관련 비즈니스 로직을 담당하는 서비스 클래스.
    - 게시글 생성/조회/삭제, 좋아요/좋아요 취소, 댓글 작성/삭제를 처리합니다.
    - 예상 가능한 실패는 예외 대신 ServiceResult.failure(ErrorKind) 로 돌려줍니다.
    - 저장소 장애 같은 예상치 못한 예외는 그대로 전파되어 라우트에서 500으로 변환됩니다.
    """
    def __init__(self, post_store: PostStore, user_store: UserStore):
        self.post_store = post_store
        self.user_store = user_store

    def _resolve_author(self, user_id: str) -> Optional[Author]:
        """호출 시점의 사용자 프로필을 읽어 작성자 사본을 만듭니다."""
        user = self.user_store.get(user_id)
        if user is None:
            return None
        return Author(user_id=user_id, name=user.name, avatar=user.avatar)

    def create_post(self, author_id: str, text: str) -> ServiceResult:
        """새로운 게시글을 생성하고 저장합니다."""
        author = self._resolve_author(author_id)
        if author is None:
            logging.error(f"게시글 생성 실패: 작성자 프로필을 찾을 수 없음 (user_id: {author_id})")
            return ServiceResult.failure(ErrorKind.INTERNAL)

        new_post = Post(post_id=new_document_id(), author=author, text=text)
        self.post_store.add(new_post)
        return ServiceResult.success(asdict(new_post))

    def list_posts(self) -> List[Dict[str, Any]]:
        return [asdict(post) for post in self.post_store.list_newest_first()]

    def get_post(self, post_id: str) -> ServiceResult:
        doc_id = canonical_document_id(post_id)
        if doc_id is None:
            return ServiceResult.failure(ErrorKind.INVALID_ID)
        post = self.post_store.get(doc_id)
        if post is None:
            return ServiceResult.failure(ErrorKind.NOT_FOUND)
        return ServiceResult.success(asdict(post))

    def delete_post(self, post_id: str, caller_id: str) -> ServiceResult:
        """게시글을 삭제합니다. (작성자 본인만 가능)"""
        doc_id = canonical_document_id(post_id)
        if doc_id is None:
            return ServiceResult.failure(ErrorKind.INVALID_ID)
        post = self.post_store.get(doc_id)
        if post is None:
            return ServiceResult.failure(ErrorKind.NOT_FOUND)
        if post.author.user_id != caller_id:
            logging.warning(f"게시글 삭제 거부: 작성자가 아님 (post_id: {doc_id}, user_id: {caller_id})")
            return ServiceResult.failure(ErrorKind.UNAUTHORIZED)

        self.post_store.delete(doc_id)
        return ServiceResult.success()

    # --- 내장 컬렉션(likes/comments) 수정 ---
    def _mutate(self, post_id: str, mutate) -> ServiceResult:
        """post_id 형식을 검사한 뒤 트랜잭션으로 게시글을 수정합니다."""
        doc_id = canonical_document_id(post_id)
        if doc_id is None:
            return ServiceResult.failure(ErrorKind.INVALID_ID)

        def _guarded(post: Optional[Post]) -> ServiceResult:
            if post is None:
                return ServiceResult.failure(ErrorKind.NOT_FOUND)
            return mutate(post)

        return self.post_store.update(doc_id, _guarded)

    def like_post(self, post_id: str, caller_id: str) -> ServiceResult:
        """게시글에 좋아요를 추가하고 갱신된 likes 목록을 반환합니다."""
        def _like(post: Post) -> ServiceResult:
            if post.like_index(caller_id) != -1:
                return ServiceResult.failure(ErrorKind.ALREADY_LIKED)
            post.likes.insert(0, Like(user_id=caller_id))
            return ServiceResult.success([asdict(like) for like in post.likes])

        return self._mutate(post_id, _like)

    def unlike_post(self, post_id: str, caller_id: str) -> ServiceResult:
        """
        호출자의 좋아요를 제거하고 갱신된 likes 목록을 반환합니다.
        좋아요를 누르지 않은 사용자라면 다른 사람의 좋아요를 건드리지 않고 NOT_LIKED 로 실패합니다.
        """
        def _unlike(post: Post) -> ServiceResult:
            index = post.like_index(caller_id)
            if index == -1:
                return ServiceResult.failure(ErrorKind.NOT_LIKED)
            del post.likes[index]
            return ServiceResult.success([asdict(like) for like in post.likes])

        return self._mutate(post_id, _unlike)

    def add_comment(self, post_id: str, caller_id: str, text: str) -> ServiceResult:
        """
        게시글 맨 앞에 새 댓글을 추가하고 갱신된 comments 목록을 반환합니다.
        게시글 존재 여부를 먼저 확인하므로, 없는 게시글이면 작성자 프로필과 무관하게 NOT_FOUND 입니다.
        """
        def _comment(post: Post) -> ServiceResult:
            author = self._resolve_author(caller_id)
            if author is None:
                logging.error(f"댓글 작성 실패: 작성자 프로필을 찾을 수 없음 (user_id: {caller_id})")
                return ServiceResult.failure(ErrorKind.INTERNAL)
            new_comment = Comment(comment_id=new_document_id(), author=author, text=text)
            post.comments.insert(0, new_comment)
            return ServiceResult.success([asdict(comment) for comment in post.comments])

        return self._mutate(post_id, _comment)

    def remove_comment(self, post_id: str, comment_id: str, caller_id: str) -> ServiceResult:
        """
        comment_id 로 찾은 바로 그 댓글을 삭제합니다. (댓글 작성자 본인만 가능)
        권한 검사에 사용한 댓글과 실제로 지우는 댓글이 항상 같습니다.
        """
        def _uncomment(post: Post) -> ServiceResult:
            index = post.comment_index(comment_id)
            if index == -1:
                return ServiceResult.failure(ErrorKind.COMMENT_NOT_FOUND)
            if post.comments[index].author.user_id != caller_id:
                logging.warning(f"댓글 삭제 거부: 작성자가 아님 (comment_id: {comment_id}, user_id: {caller_id})")
                return ServiceResult.failure(ErrorKind.UNAUTHORIZED)
            del post.comments[index]
            return ServiceResult.success([asdict(comment) for comment in post.comments])

        return self._mutate(post_id, _uncomment)
