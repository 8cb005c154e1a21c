# social_api/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from flask import Flask, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException
from flask_jwt_extended import JWTManager
import firebase_admin
from firebase_admin import credentials, firestore

# - 설정
from social_api.core.config import config_by_name
from social_api.core.errors import ErrorKind, error_body

# - API 블루프린트
from social_api.api.posts.routes import posts_bp
from social_api.api.users.routes import users_bp

# - 서비스 모듈
from social_api.api.posts.services import PostService
from social_api.api.users.services import UserService
from social_api.services.firestore_service import PostStore, UserStore


def _init_firestore(app: Flask):
    """Firebase 앱을 초기화하고 Firestore 클라이언트를 반환합니다."""
    if not firebase_admin._apps:
        cred_path = app.config.get('FIREBASE_CREDENTIALS_PATH')
        options = {}
        if app.config.get('FIREBASE_PROJECT_ID'):
            options['projectId'] = app.config['FIREBASE_PROJECT_ID']
        if cred_path:
            if not os.path.exists(cred_path):
                raise FileNotFoundError(f"Firebase 인증 파일을 찾을 수 없습니다: {cred_path}")
            firebase_admin.initialize_app(credentials.Certificate(cred_path), options)
        else:
            # GOOGLE_APPLICATION_CREDENTIALS 등 기본 자격 증명을 사용
            firebase_admin.initialize_app(options=options)
    return firestore.client()


def create_app(config_name=None, stores=None):
    """
    Flask 애플리케이션 팩토리 함수.

    :param config_name: 'development' | 'testing' | 'production' (기본값: FLASK_ENV)
    :param stores: {'posts': PostStore, 'users': UserStore} 형태로 저장소를 직접 주입할 때 사용.
                   주어지지 않으면 Firestore 클라이언트로 저장소를 만듭니다.
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    if not app.debug and not app.testing:
        logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'),
                            format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    # =====================================================================================
    # 4. 확장 기능 및 외부 저장소 초기화
    # =====================================================================================
    JWTManager(app)

    if stores is None:
        try:
            db = _init_firestore(app)
            stores = {
                'posts': PostStore(db, app.config['POSTS_COLLECTION']),
                'users': UserStore(db, app.config['USERS_COLLECTION']),
            }
            logging.info("Firestore stores initialized successfully")
        except Exception as e:
            logging.error(f"Failed to initialize Firestore: {e}")
            raise

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}
    app.services['posts'] = PostService(post_store=stores['posts'], user_store=stores['users'])
    app.services['users'] = UserService(user_store=stores['users'])

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(posts_bp, url_prefix='/api/posts')
    app.register_blueprint(users_bp, url_prefix='/api/users')

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error_code": "VALIDATION_ERROR", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # HTTP 예외(404 라우트 없음, 405 등)는 그대로 돌려보냄
        if isinstance(err, HTTPException):
            return err
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        return jsonify(error_body(ErrorKind.INTERNAL)), 500

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
