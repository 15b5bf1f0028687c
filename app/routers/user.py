# routers/user.py
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from database import get_db
from models import User
from schemas.auth import UserProfile, UserProfileUpdate, PasswordUpdate
from utils.auth import hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["users"])


def get_user_or_404(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


@router.get("/get-profile", response_model=UserProfile)
def get_profile(
    user_id: int = Query(..., alias="id", description="User ID"),
    db: Session = Depends(get_db)
):
    user = get_user_or_404(db, user_id)
    return UserProfile(username=user.username, email=user.email, profileImage=user.profile_image)


@router.post("/update-profile")
def update_profile(profile: UserProfileUpdate, db: Session = Depends(get_db)):
    user = get_user_or_404(db, profile.id)

    update_data = profile.model_dump(exclude_unset=True, exclude={"id"})
    if "username" in update_data:
        taken = db.query(User).filter(
            User.username == update_data["username"], User.id != user.id
        ).first()
        if taken:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username already exists."
            )
        user.username = update_data["username"]
    if "profileImage" in update_data:
        user.profile_image = update_data["profileImage"]

    db.commit()
    db.refresh(user)

    return {
        "message": "Profile updated successfully",
        "data": UserProfile(username=user.username, email=user.email, profileImage=user.profile_image)
    }


@router.post("/update-password")
def update_password(password_data: PasswordUpdate, db: Session = Depends(get_db)):
    user = get_user_or_404(db, password_data.id)

    if not verify_password(password_data.currentPassword, user.password):
        logger.info(f"Current password is incorrect for user id {user.id}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Current password is incorrect"
        )

    user.password = hash_password(password_data.newPassword)
    db.commit()

    logger.info(f"Password updated successfully for user id {user.id}")
    return {"message": "Password updated successfully"}
