"""
Pydantic schemas for comment and like endpoints
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    comment_text: str = Field(..., min_length=1, description="Comment body")


class CommentUpdate(CommentCreate):
    pass


class CommentResponse(BaseModel):
    """Comment joined with its author"""
    id: int
    comment_text: str
    created_at: datetime
    user_id: int
    username: str
    profile_image: Optional[str] = None


class CommentNotification(CommentResponse):
    """Unread comment as listed for moderation"""
    post_id: int
    post_name: Optional[str] = None
    post_image: Optional[str] = None
    is_read: bool = False


class UserComment(BaseModel):
    """Comment as listed on a reader's profile"""
    id: int
    post_id: int
    user_id: int
    comment_text: str
    created_at: datetime
    is_read: bool = False
    post_title: Optional[str] = None


class LikeResponse(BaseModel):
    liked: bool
    likes: int


class LikeStatus(BaseModel):
    liked: bool
