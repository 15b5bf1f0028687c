# routers/like.py
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from database import get_db
from models import Post, UserLike
from schemas.comment import LikeResponse, LikeStatus
from schemas.post import PostResponse
from utils.auth import CurrentUser

logger = logging.getLogger(__name__)

router = APIRouter(tags=["likes"])


def find_like(db: Session, user_id: int, post_id: int):
    return db.query(UserLike).filter(
        UserLike.user_id == user_id,
        UserLike.post_id == post_id
    ).first()


@router.post("/posts/{post_id}/like", response_model=LikeResponse)
def like_post(post_id: int, current_user: CurrentUser, db: Session = Depends(get_db)):
    """
    Like a post once. The counter bump and the like record commit together.
    """
    if find_like(db, current_user.id, post_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You have already liked this post."
        )

    post = db.query(Post).filter(Post.id == post_id).first()
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

    post.likes = Post.likes + 1
    db.add(UserLike(user_id=current_user.id, post_id=post_id, post_name=post.pname))
    db.commit()
    db.refresh(post)

    logger.info(f"User {current_user.id} liked post {post_id}")
    return LikeResponse(liked=True, likes=post.likes)


@router.get("/posts/{post_id}/isLiked", response_model=LikeStatus)
def is_post_liked(post_id: int, current_user: CurrentUser, db: Session = Depends(get_db)):
    return LikeStatus(liked=find_like(db, current_user.id, post_id) is not None)


@router.get("/user/liked-posts", response_model=List[PostResponse])
def get_liked_posts(
    user_id: int = Query(..., description="Reader whose likes to list"),
    db: Session = Depends(get_db)
):
    return (
        db.query(Post)
        .join(UserLike, UserLike.post_id == Post.id)
        .filter(UserLike.user_id == user_id)
        .order_by(Post.stime.desc(), Post.id.desc())
        .all()
    )
