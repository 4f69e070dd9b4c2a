from datetime import datetime

from pydantic import BaseModel, ConfigDict


# --- Topic ---

class TopicResponse(BaseModel):
    slug: str
    description: str | None = None
    model_config = ConfigDict(from_attributes=True)


class TopicListResponse(BaseModel):
    topics: list[TopicResponse]


# --- User ---

class UserResponse(BaseModel):
    username: str
    name: str
    avatar_url: str | None = None
    model_config = ConfigDict(from_attributes=True)


class UserEnvelope(BaseModel):
    user: UserResponse


class UserListResponse(BaseModel):
    users: list[UserResponse]


# --- Votes ---

class VoteUpdate(BaseModel):
    inc_votes: int = 0


# --- Comment ---

class CommentCreate(BaseModel):
    # Both are required; presence is checked by the comment service so a
    # missing field is reported as a bad request rather than a schema error.
    username: str | None = None
    body: str | None = None


class CommentResponse(BaseModel):
    comment_id: int
    body: str
    author: str
    article_id: int
    votes: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class CommentEnvelope(BaseModel):
    comment: CommentResponse


class CommentListResponse(BaseModel):
    comments: list[CommentResponse]


# --- Article ---

class ArticleResponse(BaseModel):
    article_id: int
    title: str
    topic: str
    body: str
    created_at: datetime
    votes: int
    article_img_url: str | None = None
    model_config = ConfigDict(from_attributes=True)


class ArticleDetail(ArticleResponse):
    comment_count: int


class ArticleEnvelope(BaseModel):
    article: ArticleDetail


class UpdatedArticleEnvelope(BaseModel):
    article: ArticleResponse


class ArticleListResponse(BaseModel):
    articles: list[ArticleDetail]


# --- Errors ---

class ErrorResponse(BaseModel):
    msg: str


# Documented on the routers whose handlers can answer 400 or 404.
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed id, query or body"},
    404: {"model": ErrorResponse, "description": "Referenced row does not exist"},
}
