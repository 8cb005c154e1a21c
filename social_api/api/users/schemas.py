# social_api/api/users/schemas.py
from marshmallow import Schema, fields, validate


class UserRegisterSchema(Schema):
    """
    POST /api/users
    회원가입 요청 본문의 유효성을 검사하는 스키마.
    """
    name = fields.Str(required=True, validate=validate.Regexp(r'.*\S', error="Name is required"),
                      error_messages={"required": "Name is required"})
    email = fields.Email(required=True, error_messages={"required": "Please include a valid email",
                                                        "invalid": "Please include a valid email"})
    password = fields.Str(required=True, load_only=True,
                          validate=validate.Length(min=6, error="Please enter a password with 6 or more characters"),
                          error_messages={"required": "Please enter a password with 6 or more characters"})
