# social_api/api/posts/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from social_api.api.posts.schemas import (
    PostCreateSchema, CommentCreateSchema, PostResponseSchema, LikeSchema, CommentResponseSchema
)
from social_api.core.errors import ErrorKind, error_body


posts_bp = Blueprint('posts_bp', __name__)


def _failure(result):
    return jsonify(error_body(result.error)), result.error.status_code


def _server_error():
    return jsonify(error_body(ErrorKind.INTERNAL)), ErrorKind.INTERNAL.status_code


@posts_bp.route('', methods=['POST'])
@posts_bp.route('/', methods=['POST'])
@jwt_required()
def create_post():
    """
    새로운 게시글을 생성합니다.
    - 요청 본문은 PostCreateSchema 로 검사하며, 실패하면 아무것도 저장하지 않고 400을 반환합니다.
    """
    post_service = current_app.services['posts']
    user_id = get_jwt_identity()
    try:
        data = PostCreateSchema().load(request.get_json(silent=True))
        result = post_service.create_post(user_id, data['text'])
        if not result.ok:
            return _failure(result)
        return jsonify(PostResponseSchema().dump(result.value)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except Exception as e:
        logging.error(f"게시글 생성 중 오류 발생 (user_id: {user_id}): {e}", exc_info=True)
        return _server_error()


@posts_bp.route('', methods=['GET'])
@posts_bp.route('/', methods=['GET'])
@jwt_required()
def get_posts():
    """게시글 전체 목록을 최신순으로 조회합니다."""
    post_service = current_app.services['posts']
    try:
        posts = post_service.list_posts()
        return jsonify(PostResponseSchema(many=True).dump(posts)), 200
    except Exception as e:
        logging.error(f"게시글 목록 조회 중 오류 발생: {e}", exc_info=True)
        return _server_error()


@posts_bp.route('/<string:post_id>', methods=['GET'])
@jwt_required()
def get_post(post_id: str):
    post_service = current_app.services['posts']
    try:
        result = post_service.get_post(post_id)
        if not result.ok:
            return _failure(result)
        return jsonify(PostResponseSchema().dump(result.value)), 200
    except Exception as e:
        logging.error(f"게시글 조회 중 오류 발생 (post_id: {post_id}): {e}", exc_info=True)
        return _server_error()


@posts_bp.route('/<string:post_id>', methods=['DELETE'])
@jwt_required()
def delete_post(post_id: str):
    """
    특정 게시글을 삭제합니다. (작성자 본인만 가능)
    """
    post_service = current_app.services['posts']
    user_id = get_jwt_identity()
    try:
        result = post_service.delete_post(post_id, user_id)
        if not result.ok:
            return _failure(result)
        return jsonify({"msg": "Post removed"}), 200
    except Exception as e:
        logging.error(f"게시글 삭제 중 오류 발생 (post_id: {post_id}): {e}", exc_info=True)
        return _server_error()


@posts_bp.route('/like/<string:post_id>', methods=['PUT'])
@jwt_required()
def like_post(post_id: str):
    post_service = current_app.services['posts']
    user_id = get_jwt_identity()
    try:
        result = post_service.like_post(post_id, user_id)
        if not result.ok:
            return _failure(result)
        return jsonify(LikeSchema(many=True).dump(result.value)), 200
    except Exception as e:
        logging.error(f"좋아요 처리 중 오류 발생 (post_id: {post_id}): {e}", exc_info=True)
        return _server_error()


@posts_bp.route('/unlike/<string:post_id>', methods=['PUT'])
@jwt_required()
def unlike_post(post_id: str):
    post_service = current_app.services['posts']
    user_id = get_jwt_identity()
    try:
        result = post_service.unlike_post(post_id, user_id)
        if not result.ok:
            return _failure(result)
        return jsonify(LikeSchema(many=True).dump(result.value)), 200
    except Exception as e:
        logging.error(f"좋아요 취소 중 오류 발생 (post_id: {post_id}): {e}", exc_info=True)
        return _server_error()


@posts_bp.route('/comment/<string:post_id>', methods=['POST'])
@jwt_required()
def add_comment(post_id: str):
    """
    특정 게시글에 댓글을 작성합니다.
    - 성공 시, 새 댓글이 맨 앞에 온 전체 댓글 목록을 반환합니다.
    """
    post_service = current_app.services['posts']
    user_id = get_jwt_identity()
    try:
        data = CommentCreateSchema().load(request.get_json(silent=True))
        result = post_service.add_comment(post_id, user_id, data['text'])
        if not result.ok:
            return _failure(result)
        return jsonify(CommentResponseSchema(many=True).dump(result.value)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except Exception as e:
        logging.error(f"댓글 작성 중 오류 발생 (post_id: {post_id}): {e}", exc_info=True)
        return _server_error()


@posts_bp.route('/comment/<string:post_id>/<string:comment_id>', methods=['DELETE'])
@jwt_required()
def remove_comment(post_id: str, comment_id: str):
    """
    댓글을 삭제합니다. (댓글 작성자 본인만 가능)
    """
    post_service = current_app.services['posts']
    user_id = get_jwt_identity()
    try:
        result = post_service.remove_comment(post_id, comment_id, user_id)
        if not result.ok:
            return _failure(result)
        return jsonify(CommentResponseSchema(many=True).dump(result.value)), 200
    except Exception as e:
        logging.error(f"댓글 삭제 중 오류 발생 (post_id: {post_id}, comment_id: {comment_id}): {e}", exc_info=True)
        return _server_error()
