from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from config import DEFAULT_NAME, DEFAULT_SUBJECT


class Board(BaseModel):
    id: str
    name: str
    description: str


class Post(BaseModel):
    id: int
    name: str = DEFAULT_NAME
    content: Optional[str] = None
    image: Optional[str] = None
    timestamp: int


class Thread(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    subject: str = DEFAULT_SUBJECT
    posts: List[Post] = Field(default_factory=list)
    post_count: int = Field(alias="postCount")
    last_post_time: int = Field(alias="lastPostTime")

    @property
    def opening_post(self) -> Optional[Post]:
        return self.posts[0] if self.posts else None

    def latest_replies(self, limit: int) -> List[Post]:
        return self.posts[1:][-limit:] if limit > 0 else []

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True)


class PostSubmission(BaseModel):
    """Form fields of a create or reply request."""
    subject: Optional[str] = None
    name: Optional[str] = None
    content: Optional[str] = None
    captcha: Optional[str] = None
    has_image: bool = False


class FlashMessage(BaseModel):
    type: str
    message: str


class BoardUpdateResponse(BaseModel):
    success: bool
    message: str
    boards: Optional[List[Board]] = None
    error: Optional[str] = None
