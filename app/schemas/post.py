# schemas/post.py
from typing import Annotated, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from utils.timezone import with_ist_offset

# Stored IST wall-clock times go out with their +05:30 offset
ISTDateTime = Annotated[
    datetime,
    PlainSerializer(lambda v: with_ist_offset(v).isoformat(), return_type=str, when_used="json")
]


class PostBase(BaseModel):
    pimage: Optional[str] = None
    pname: str
    aname: Optional[str] = None
    img_alt: Optional[str] = None
    img_title: Optional[str] = None
    pdesc: Optional[str] = None
    cname: Optional[str] = None
    up_date: Optional[ISTDateTime] = None
    stime: Optional[ISTDateTime] = None


class PostListItem(PostBase):
    """Row shape of the listing endpoints"""
    id: int
    views: int = 0

    model_config = ConfigDict(from_attributes=True)


class PostResponse(PostListItem):
    """Full post row"""
    likes: int = 0
    read: bool = False


class PostUpdate(BaseModel):
    """
    Update payload for both JSON and multipart submissions; only the
    fields that are sent get written.
    """
    id: int
    image: Optional[str] = None
    pname: Optional[str] = Field(None, min_length=1)
    aname: Optional[str] = None
    img_alt: Optional[str] = None
    img_title: Optional[str] = None
    pdesc: Optional[str] = None
    cname: Optional[str] = None
    up_date: Optional[str] = None
    stime: Optional[str] = None

    @field_validator("pname")
    @classmethod
    def pname_not_null(cls, v):
        if v is None:
            raise ValueError("Post title cannot be empty")
        return v


class PostId(BaseModel):
    id: int


class NotificationRead(BaseModel):
    id: Optional[int] = None


class PopularPost(BaseModel):
    id: int
    imageUrl: Optional[str] = None
    title: str
    excerpt: Optional[str] = None
    time: Optional[ISTDateTime] = None
    visits: int = 0


class SearchResult(BaseModel):
    id: int
    image: Optional[str] = None
    title: str
    author: Optional[str] = None
    img_alt: Optional[str] = None
    img_title: Optional[str] = None
    excerpt: Optional[str] = None
    cname: Optional[str] = None
    up_date: Optional[ISTDateTime] = None
    stime: Optional[ISTDateTime] = None
    views: int = 0


class PostMutationResponse(BaseModel):
    message: str
    data: PostResponse


class ViewsResponse(BaseModel):
    message: str
    newViewsCount: int
