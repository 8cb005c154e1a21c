# social_api/api/posts/test_post_service.py
import threading

from conftest import ALICE, BOB, CAROL
from social_api.core.errors import ErrorKind


def test_create_post_copies_current_profile(post_service, post_store):
    result = post_service.create_post(ALICE, "hello")

    assert result.ok
    stored = post_store.get(result.value['post_id'])
    assert stored.author.name == "Alice"
    assert stored.author.avatar == "https://example.com/alice.png"
    assert stored.likes == [] and stored.comments == []


def test_operations_on_malformed_id_report_invalid_id(post_service):
    for result in (
        post_service.get_post("abc"),
        post_service.delete_post("abc", ALICE),
        post_service.like_post("abc", ALICE),
        post_service.unlike_post("abc", ALICE),
        post_service.add_comment("abc", ALICE, "hi"),
        post_service.remove_comment("abc", "def", ALICE),
    ):
        assert result.error is ErrorKind.INVALID_ID


def test_operations_on_missing_post_report_not_found(post_service):
    missing = "00000000-0000-4000-8000-000000000000"
    for result in (
        post_service.get_post(missing),
        post_service.delete_post(missing, ALICE),
        post_service.like_post(missing, ALICE),
        post_service.unlike_post(missing, ALICE),
        post_service.add_comment(missing, ALICE, "hi"),
        post_service.remove_comment(missing, "def", ALICE),
    ):
        assert result.error is ErrorKind.NOT_FOUND


def test_like_then_unlike_round_trip(post_service, make_post):
    post = make_post()

    assert post_service.like_post(post.post_id, BOB).value == [{"user_id": BOB}]
    assert post_service.like_post(post.post_id, BOB).error is ErrorKind.ALREADY_LIKED
    assert post_service.unlike_post(post.post_id, BOB).value == []
    assert post_service.unlike_post(post.post_id, BOB).error is ErrorKind.NOT_LIKED


def test_failed_mutation_does_not_write(post_service, make_post, post_store):
    post = make_post()
    post_service.like_post(post.post_id, BOB)

    post_service.like_post(post.post_id, BOB)
    post_service.unlike_post(post.post_id, CAROL)

    assert [like.user_id for like in post_store.get(post.post_id).likes] == [BOB]


def test_remove_comment_deletes_exactly_the_identified_comment(post_service, make_post, post_store):
    post = make_post()
    post_service.add_comment(post.post_id, BOB, "first by bob")
    post_service.add_comment(post.post_id, CAROL, "by carol")
    comments = post_service.add_comment(post.post_id, BOB, "second by bob").value
    # 최신순: [second by bob, by carol, first by bob]
    older_bob_comment = comments[2]

    result = post_service.remove_comment(post.post_id, older_bob_comment['comment_id'], BOB)

    assert result.ok
    assert [c['text'] for c in result.value] == ["second by bob", "by carol"]
    assert [c.text for c in post_store.get(post.post_id).comments] == ["second by bob", "by carol"]


def test_remove_comment_of_someone_else_is_unauthorized(post_service, make_post):
    post = make_post()
    comment_id = post_service.add_comment(post.post_id, CAROL, "mine").value[0]['comment_id']

    assert post_service.remove_comment(post.post_id, comment_id, BOB).error is ErrorKind.UNAUTHORIZED
    assert post_service.remove_comment(post.post_id, "missing", CAROL).error is ErrorKind.COMMENT_NOT_FOUND


def test_comment_from_unknown_profile_is_internal_error(post_service, make_post, post_store):
    post = make_post()

    result = post_service.add_comment(post.post_id, "user-ghost", "boo")

    assert result.error is ErrorKind.INTERNAL
    assert post_store.get(post.post_id).comments == []


def test_concurrent_likes_from_different_users_both_survive(post_service, make_post, post_store):
    post = make_post()
    barrier = threading.Barrier(2)
    waited = set()

    def _hold_first_attempt():
        # 두 스레드가 모두 읽기를 마친 뒤에야 커밋하도록 첫 시도에서만 대기
        name = threading.current_thread().name
        if name not in waited:
            waited.add(name)
            barrier.wait(timeout=5)

    post_store.before_commit = _hold_first_attempt
    results = {}

    def _like(user_id):
        results[user_id] = post_service.like_post(post.post_id, user_id)

    threads = [threading.Thread(target=_like, args=(user,), name=user) for user in (BOB, CAROL)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert results[BOB].ok and results[CAROL].ok
    assert post_store.conflicts >= 1
    assert sorted(like.user_id for like in post_store.get(post.post_id).likes) == sorted([BOB, CAROL])


def test_comment_on_missing_post_is_not_found_even_without_profile(post_service):
    result = post_service.add_comment("00000000-0000-4000-8000-000000000000", "user-ghost", "boo")

    assert result.error is ErrorKind.NOT_FOUND
