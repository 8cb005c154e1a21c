# social_api/api/users/routes.py
import logging
from flask import Blueprint, request, jsonify, Response, current_app
from marshmallow import ValidationError

from social_api.api.users.schemas import UserRegisterSchema
from social_api.core.errors import ErrorKind, error_body

users_bp = Blueprint('users_bp', __name__)


@users_bp.route('', methods=['POST'])
@users_bp.route('/', methods=['POST'])
def register_user():
    """
    회원가입 (공개 엔드포인트).
    - 이메일이 이미 등록되어 있으면 400을 반환합니다.
    - 실제 가입 처리는 아직 없으며 성공 시 텍스트 응답만 돌려줍니다.
    """
    user_service = current_app.services['users']
    try:
        data = UserRegisterSchema().load(request.get_json(silent=True))
        result = user_service.register_user(data['name'], data['email'], data['password'])
        if not result.ok:
            return jsonify(error_body(result.error)), result.error.status_code
        return Response("User Route", status=200, mimetype='text/plain')
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except Exception as e:
        logging.error(f"회원가입 처리 중 오류 발생: {e}", exc_info=True)
        return jsonify(error_body(ErrorKind.INTERNAL)), 500
