# social_api/api/posts/schemas.py
from marshmallow import Schema, fields, validate, pre_load


# --- 재사용을 위한 중첩 스키마 ---
class AuthorSchema(Schema):
    """게시글/댓글 응답에 포함될 작성자 정보 스키마."""
    user_id = fields.Str(required=True)
    name = fields.Str(allow_none=True)
    avatar = fields.Str(allow_none=True)

class LikeSchema(Schema):
    user_id = fields.Str(required=True)

class CommentResponseSchema(Schema):
    """댓글 정보 응답 형식."""
    comment_id = fields.Str(required=True)
    author = fields.Nested(AuthorSchema, required=True)
    text = fields.Str(required=True)
    created_at = fields.DateTime(required=True)

# --- API 요청/응답 스키마 ---

class TextBodySchema(Schema):
    """
    POST /api/posts, POST /api/posts/comment/{post_id} 요청 본문의 유효성을 검사합니다.
    앞뒤 공백만 있는 text 는 비어있는 것으로 취급합니다.
    """
    text = fields.Str(required=True, validate=validate.Length(min=1, error="Text is required"),
                      error_messages={"required": "Text is required"})

    @pre_load
    def strip_text(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get('text'), str):
            data = dict(data, text=data['text'].strip())
        return data

class PostCreateSchema(TextBodySchema):
    """POST /api/posts"""

class CommentCreateSchema(TextBodySchema):
    """POST /api/posts/comment/{post_id}"""

class PostResponseSchema(Schema):
    """게시글 정보 응답을 위한 최종 JSON 형식을 정의합니다."""
    post_id = fields.Str(required=True)
    author = fields.Nested(AuthorSchema, required=True)
    text = fields.Str(required=True)
    created_at = fields.DateTime(required=True)
    likes = fields.List(fields.Nested(LikeSchema), required=True)
    comments = fields.List(fields.Nested(CommentResponseSchema), required=True)
