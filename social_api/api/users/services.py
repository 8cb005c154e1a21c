# social_api/api/users/services.py
import logging

from social_api.core.errors import ErrorKind, ServiceResult
from social_api.services.firestore_service import UserStore


class UserService:
    """
    회원가입 관련 로직.
    현재는 이메일 중복 검사만 수행하는 stub 이며, 사용자 저장/비밀번호 해시/토큰 발급은 하지 않습니다.
    """
    def __init__(self, user_store: UserStore):
        self.user_store = user_store

    def register_user(self, name: str, email: str, password: str) -> ServiceResult:
        if self.user_store.find_by_email(email) is not None:
            logging.warning(f"회원가입 거부: 이미 등록된 이메일 ({email})")
            return ServiceResult.failure(ErrorKind.USER_ALREADY_EXISTS)

        # TODO: 비밀번호 해시 후 users 문서를 저장하고 access token 을 발급해야 합니다.
        logging.info(f"회원가입 요청 수신 (email: {email})")
        return ServiceResult.success()
