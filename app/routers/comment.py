"""
Comment router: public listing, authenticated authoring and admin moderation
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from database import get_db
from models import Comment, Post, User
from schemas.comment import (
    CommentCreate,
    CommentUpdate,
    CommentResponse,
    CommentNotification,
    UserComment
)
from utils.auth import CurrentUser

logger = logging.getLogger(__name__)

router = APIRouter(tags=["comments"])

COMMENT_NOTIFICATION_LIMIT = 20


def comment_with_author(comment: Comment, user: User) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        comment_text=comment.comment_text,
        created_at=comment.created_at,
        user_id=comment.user_id,
        username=user.username,
        profile_image=user.profile_image
    )


def get_owned_comment(db: Session, comment_id: int, current_user, action: str) -> Comment:
    """Helper to get a comment and verify the caller wrote it"""
    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if not comment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found"
        )

    if comment.user_id != current_user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Unauthorized to {action} this comment"
        )

    return comment


@router.get("/posts/{post_id}/comments", response_model=List[CommentResponse])
def get_post_comments(post_id: int, db: Session = Depends(get_db)):
    """Comments on a post, oldest first"""
    rows = (
        db.query(Comment, User)
        .join(User, Comment.user_id == User.id)
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )
    return [comment_with_author(comment, user) for comment, user in rows]


@router.post("/posts/{post_id}/comments", response_model=CommentResponse)
def add_comment(
    post_id: int,
    comment_data: CommentCreate,
    current_user: CurrentUser,
    db: Session = Depends(get_db)
):
    post = db.query(Post).filter(Post.id == post_id).first()
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

    user = db.query(User).filter(User.id == current_user.id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    comment = Comment(
        post_id=post_id,
        user_id=user.id,
        comment_text=comment_data.comment_text,
        is_read=False
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)

    logger.info(f"User {user.id} commented on post {post_id} (comment {comment.id})")
    return comment_with_author(comment, user)


@router.put("/comments/{comment_id}", response_model=CommentResponse)
def update_comment(
    comment_id: int,
    comment_data: CommentUpdate,
    current_user: CurrentUser,
    db: Session = Depends(get_db)
):
    comment = get_owned_comment(db, comment_id, current_user, "edit")

    comment.comment_text = comment_data.comment_text
    db.commit()
    db.refresh(comment)

    return comment_with_author(comment, comment.user)


@router.delete("/comments/{comment_id}")
def delete_comment(
    comment_id: int,
    current_user: CurrentUser,
    db: Session = Depends(get_db)
):
    comment = get_owned_comment(db, comment_id, current_user, "delete")

    db.delete(comment)
    db.commit()

    return {"message": "Comment deleted successfully"}


@router.get("/user/comments", response_model=List[UserComment])
def get_user_comments(
    user_id: int = Query(..., description="Reader whose comments to list"),
    db: Session = Depends(get_db)
):
    rows = (
        db.query(Comment, Post.pname)
        .join(Post, Comment.post_id == Post.id)
        .filter(Comment.user_id == user_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .all()
    )
    return [
        UserComment(
            id=comment.id,
            post_id=comment.post_id,
            user_id=comment.user_id,
            comment_text=comment.comment_text,
            created_at=comment.created_at,
            is_read=bool(comment.is_read),
            post_title=post_title
        )
        for comment, post_title in rows
    ]


# ADMIN ENDPOINTS

@router.get("/admin/comment-notifications", response_model=List[CommentNotification])
def get_comment_notifications(db: Session = Depends(get_db)):
    """Newest unread comments for the moderation screen"""
    rows = (
        db.query(Comment, User, Post)
        .join(User, Comment.user_id == User.id)
        .join(Post, Comment.post_id == Post.id)
        .filter(Comment.is_read.is_not(True))
        .order_by(Comment.created_at.desc(), Comment.id.desc())
        .limit(COMMENT_NOTIFICATION_LIMIT)
        .all()
    )
    return [
        CommentNotification(
            id=comment.id,
            comment_text=comment.comment_text,
            created_at=comment.created_at,
            post_id=comment.post_id,
            user_id=comment.user_id,
            username=user.username,
            profile_image=user.profile_image,
            post_name=post.pname,
            post_image=post.pimage,
            is_read=bool(comment.is_read)
        )
        for comment, user, post in rows
    ]


@router.post("/admin/mark-comment-read/{comment_id}")
def mark_comment_read(comment_id: int, db: Session = Depends(get_db)):
    """Unknown or already-read comments are a no-op"""
    db.query(Comment).filter(
        Comment.id == comment_id,
        Comment.is_read.is_not(True)
    ).update({Comment.is_read: True}, synchronize_session=False)
    db.commit()

    return {"message": "Comment marked as read"}


@router.post("/admin/mark-all-comments-read")
def mark_all_comments_read(db: Session = Depends(get_db)):
    updated = db.query(Comment).filter(
        Comment.is_read.is_not(True)
    ).update({Comment.is_read: True}, synchronize_session=False)
    db.commit()

    logger.info(f"Marked {updated} comments as read")
    return {"message": "All comments marked as read"}


@router.delete("/admin/comments/{comment_id}")
def moderate_delete_comment(comment_id: int, db: Session = Depends(get_db)):
    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if not comment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found"
        )

    db.delete(comment)
    db.commit()

    logger.info(f"Moderator removed comment {comment_id}")
    return {"message": "Comment deleted successfully"}
