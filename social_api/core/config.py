# social_api/core/config.py

import os


class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # JWT 서명 키. 인증 미들웨어(flask-jwt-extended)가 Bearer 토큰을 검증할 때 사용합니다.
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')

    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')

    # 게시글/사용자 문서가 저장될 Firestore 컬렉션 이름
    POSTS_COLLECTION = os.getenv('POSTS_COLLECTION', 'posts')
    USERS_COLLECTION = os.getenv('USERS_COLLECTION', 'users')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """개발 환경 설정. 코드 변경 시 자동 재시작과 상세 에러 페이지를 켭니다."""
    DEBUG = True
    FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH')


class TestingConfig(Config):
    """테스트 환경 설정."""
    TESTING = True
    DEBUG = False
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'test-secret-key-for-pytest-only-0000')
    FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH')


class ProductionConfig(Config):
    """운영 환경 설정."""
    DEBUG = False
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')


# create_app 에서 FLASK_ENV 값으로 설정 클래스를 고를 때 사용합니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
