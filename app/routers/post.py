# routers/post.py
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Request, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session
from database import get_db
from models import Post
from schemas.post import (
    PostResponse, PostListItem, PostUpdate, PostId, PopularPost,
    SearchResult, PostMutationResponse, ViewsResponse
)
from utils.timezone import to_ist, ist_now, format_ist, is_blank
from utils.uploads import has_file, save_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["posts"])

POPULAR_LIMIT = 5
RELATED_LIMIT = 5


def get_post_or_404(db: Session, post_id: int) -> Post:
    post = db.query(Post).filter(Post.id == post_id).first()
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )
    return post


def parse_ist(value: Optional[str], field: str):
    """IST-adjust a client timestamp, turning bad input into a 400"""
    try:
        return to_ist(value)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {field}: {value}"
        )


@router.post("/add-post", response_model=PostMutationResponse)
async def add_post(
    db: Session = Depends(get_db),
    pname: str = Form(..., min_length=1),
    aname: Optional[str] = Form(None),
    img_alt: Optional[str] = Form(None),
    img_title: Optional[str] = Form(None),
    pdesc: Optional[str] = Form(None),
    cname: Optional[str] = Form(None),
    up_date: Optional[str] = Form(None),
    stime: Optional[str] = Form(None),
    image: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
):
    """Create a post from a multipart form with either an uploaded file or an image URL"""
    if not has_file(file) and is_blank(image):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded or image URL provided"
        )

    # Unscheduled posts go live now
    scheduled_time = parse_ist(stime, "stime") or ist_now()
    formatted_up_date = parse_ist(up_date, "up_date")
    logger.info(f"Scheduled time in IST: {format_ist(scheduled_time)}")

    image_path = save_upload(file) if has_file(file) else image

    db_post = Post(
        pimage=image_path,
        pname=pname,
        aname=aname,
        img_alt=img_alt,
        img_title=img_title,
        pdesc=pdesc,
        cname=cname,
        up_date=formatted_up_date,
        stime=scheduled_time,
        views=0,
        likes=0,
    )
    db.add(db_post)
    db.commit()
    db.refresh(db_post)

    logger.info(f"Created post {db_post.id}")
    return PostMutationResponse(
        message="Post file uploaded and data saved successfully",
        data=PostResponse.model_validate(db_post)
    )


@router.get("/get-posts", response_model=List[PostListItem])
async def get_posts(db: Session = Depends(get_db)):
    """All posts, newest scheduled time first"""
    return db.query(Post).order_by(Post.stime.desc(), Post.id.desc()).all()


@router.get("/get-posts/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, db: Session = Depends(get_db)):
    return get_post_or_404(db, post_id)


@router.get("/popular-posts", response_model=List[PopularPost])
async def get_popular_posts(db: Session = Depends(get_db)):
    posts = db.query(Post).order_by(Post.views.desc(), Post.id.desc()).limit(POPULAR_LIMIT).all()
    return [
        PopularPost(
            id=post.id,
            imageUrl=post.pimage,
            title=post.pname,
            excerpt=post.pdesc,
            time=post.stime,
            visits=post.views or 0
        )
        for post in posts
    ]


@router.put("/update-post", response_model=PostMutationResponse)
async def update_post(request: Request, db: Session = Depends(get_db)):
    """
    Update a post from JSON or from a multipart form. A multipart `file`
    replaces the image; so does a JSON `image` value.
    """
    upload = None
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("multipart/form-data"):
        form = await request.form()
        payload = {key: value for key, value in form.items() if isinstance(value, str)}
        candidate = form.get("file")
        if not isinstance(candidate, str) and has_file(candidate):
            upload = candidate
    else:
        try:
            payload = await request.json()
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Request body must be JSON or multipart form data"
            )

    try:
        post_data = PostUpdate.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    post = get_post_or_404(db, post_data.id)

    update_data = post_data.model_dump(exclude_unset=True, exclude={"id"})

    # Scheduling fields are IST-adjusted, blank values clear them
    for field in ("up_date", "stime"):
        if field in update_data:
            update_data[field] = parse_ist(update_data[field], field)

    image = update_data.pop("image", None)
    if upload is not None:
        post.pimage = save_upload(upload)
    elif not is_blank(image):
        post.pimage = image

    for field, value in update_data.items():
        setattr(post, field, value)

    db.commit()
    db.refresh(post)

    logger.info(f"Updated post {post.id}")
    return PostMutationResponse(
        message="Post updated successfully",
        data=PostResponse.model_validate(post)
    )


@router.delete("/delete-post")
async def delete_post(post_data: PostId, db: Session = Depends(get_db)):
    post = get_post_or_404(db, post_data.id)

    db.delete(post)
    db.commit()

    logger.info(f"Deleted post {post_data.id}")
    return {"message": "Post deleted successfully"}


@router.put("/increment-views/{post_id}", response_model=ViewsResponse)
async def increment_views(post_id: int, db: Session = Depends(get_db)):
    post = get_post_or_404(db, post_id)

    post.views = Post.views + 1
    db.commit()
    db.refresh(post)

    return ViewsResponse(
        message="Post views incremented successfully",
        newViewsCount=post.views
    )


@router.get("/related-posts/{category}/{current_post_id}", response_model=List[PostListItem])
async def get_related_posts(category: str, current_post_id: int, db: Session = Depends(get_db)):
    """Other posts in the same category"""
    return (
        db.query(Post)
        .filter(Post.cname == category, Post.id != current_post_id)
        .order_by(Post.stime.desc(), Post.id.desc())
        .limit(RELATED_LIMIT)
        .all()
    )


@router.get("/search-posts", response_model=List[SearchResult])
async def search_posts(
    db: Session = Depends(get_db),
    pname: str = Query("", description="Title substring"),
    category: str = Query("", alias="filter", description="Category name, or All"),
):
    query = db.query(Post).filter(Post.pname.contains(pname, autoescape=True))

    if category and category != "All":
        query = query.filter(Post.cname == category)

    posts = query.order_by(Post.stime.desc(), Post.id.desc()).all()
    return [
        SearchResult(
            id=post.id,
            image=post.pimage,
            title=post.pname,
            author=post.aname,
            img_alt=post.img_alt,
            img_title=post.img_title,
            excerpt=post.pdesc,
            cname=post.cname,
            up_date=post.up_date,
            stime=post.stime,
            views=post.views or 0
        )
        for post in posts
    ]
