# conftest.py
"""
pytest 공용 fixture.

Firestore 대신 메모리 저장소를 주입해 앱을 만듭니다.
InMemoryPostStore.update 는 Firestore 트랜잭션처럼 낙관적 동시성 제어를 흉내냅니다:
읽은 뒤 다른 쓰기가 먼저 커밋되면 mutate 를 처음부터 다시 실행합니다.
"""
import threading
from datetime import datetime, timezone

import pytest
from flask_jwt_extended import create_access_token

from social_api import create_app
from social_api.models.post import Post, Author
from social_api.models.user import User
from social_api.utils.ids import new_document_id

ALICE = "user-alice"
BOB = "user-bob"
CAROL = "user-carol"


class InMemoryPostStore:
    max_attempts = 5

    def __init__(self):
        self._docs = {}
        self._versions = {}
        self._lock = threading.Lock()
        self.before_commit = None
        self.conflicts = 0

    def add(self, post):
        with self._lock:
            self._docs[post.post_id] = post.to_dict()
            self._versions[post.post_id] = 0
        return post

    def get(self, post_id):
        with self._lock:
            data = self._docs.get(post_id)
        return Post.from_dict(data) if data is not None else None

    def list_newest_first(self):
        with self._lock:
            docs = list(self._docs.values())
        docs.sort(key=lambda d: d['created_at'], reverse=True)
        return [Post.from_dict(d) for d in docs]

    def delete(self, post_id):
        with self._lock:
            self._docs.pop(post_id, None)
            self._versions.pop(post_id, None)

    def update(self, post_id, mutate):
        for _ in range(self.max_attempts):
            with self._lock:
                data = self._docs.get(post_id)
                version = self._versions.get(post_id)
            post = Post.from_dict(data) if data is not None else None

            result = mutate(post)
            if post is None or not result.ok:
                return result

            if self.before_commit is not None:
                self.before_commit()

            with self._lock:
                if self._versions.get(post_id) != version:
                    self.conflicts += 1
                    continue
                self._docs[post_id] = post.to_dict()
                self._versions[post_id] = version + 1
            return result
        raise RuntimeError(f"transaction on {post_id} aborted after {self.max_attempts} attempts")

    def __len__(self):
        return len(self._docs)


class InMemoryUserStore:
    def __init__(self, users=()):
        self._users = {user.user_id: user for user in users}

    def get(self, user_id):
        return self._users.get(user_id)

    def find_by_email(self, email):
        return next((u for u in self._users.values() if u.email == email), None)


@pytest.fixture
def post_store():
    return InMemoryPostStore()


@pytest.fixture
def user_store():
    return InMemoryUserStore([
        User(user_id=ALICE, name="Alice", email="alice@example.com", avatar="https://example.com/alice.png"),
        User(user_id=BOB, name="Bob", email="bob@example.com", avatar=None),
        User(user_id=CAROL, name="Carol", email="carol@example.com", avatar="https://example.com/carol.png"),
    ])


@pytest.fixture
def app(post_store, user_store):
    return create_app('testing', stores={'posts': post_store, 'users': user_store})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def post_service(app):
    return app.services['posts']


@pytest.fixture
def auth_header(app):
    def _header(user_id):
        with app.app_context():
            token = create_access_token(identity=user_id)
        return {"Authorization": f"Bearer {token}"}
    return _header


@pytest.fixture
def make_post(post_store):
    """저장소에 게시글을 직접 넣습니다. created_at 을 지정해 정렬을 검증할 때 사용합니다."""
    def _make(author_id=ALICE, text="hello world", created_at=None):
        post = Post(
            post_id=new_document_id(),
            author=Author(user_id=author_id, name=author_id.split('-')[-1].title()),
            text=text,
            created_at=created_at or datetime.now(timezone.utc)
        )
        return post_store.add(post)
    return _make
