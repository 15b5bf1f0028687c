# routers/notification.py
import logging
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session
from database import get_db
from models import Post
from schemas.post import PostListItem, NotificationRead
from utils.timezone import ist_now

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notifications"])

NOTIFICATION_LIMIT = 10


def mark_post_read(db: Session, post_id: int) -> int:
    """Flag a post notification as read; already-read posts are left alone"""
    updated = (
        db.query(Post)
        .filter(Post.id == post_id, Post.read.is_not(True))
        .update({Post.read: True}, synchronize_session=False)
    )
    db.commit()
    return updated


@router.get("/notifications", response_model=List[PostListItem])
async def get_notifications(db: Session = Depends(get_db)):
    """Posts whose scheduled time has arrived, most recently updated first"""
    return (
        db.query(Post)
        .filter(Post.stime <= ist_now())
        .order_by(Post.up_date.desc(), Post.stime.desc())
        .limit(NOTIFICATION_LIMIT)
        .all()
    )


@router.post("/mark-notification-read")
async def mark_notification_read(
    notification: Optional[NotificationRead] = Body(None),
    db: Session = Depends(get_db)
):
    if notification is None or not notification.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing notification ID"
        )

    mark_post_read(db, notification.id)
    return {"message": "Notification marked as read"}


@router.post("/mark-notification-read/{notification_id}")
async def mark_notification_read_by_path(notification_id: int, db: Session = Depends(get_db)):
    mark_post_read(db, notification_id)
    return {"message": "Notification marked as read"}
