"""
Admin account (backuser) settings used by the admin app's account screen
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from database import get_db
from models import BackUser
from schemas.auth import BackUserProfile, BackUserProfileUpdate, PasswordUpdate
from utils.auth import hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["account"])

# The admin app has a single account
DEFAULT_BACKUSER_ID = 1


def get_backuser_or_404(db: Session, backuser_id: int) -> BackUser:
    backuser = db.query(BackUser).filter(BackUser.id == backuser_id).first()
    if not backuser:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return backuser


@router.get("/get-profile", response_model=BackUserProfile)
def get_profile(
    backuser_id: int = Query(DEFAULT_BACKUSER_ID, alias="id"),
    db: Session = Depends(get_db)
):
    backuser = get_backuser_or_404(db, backuser_id)
    return BackUserProfile(
        username=backuser.username,
        profileimage=backuser.profileimage,
        darkmode=bool(backuser.darkmode)
    )


@router.post("/update-profile")
def update_profile(profile: BackUserProfileUpdate, db: Session = Depends(get_db)):
    backuser = get_backuser_or_404(db, profile.id)

    if profile.username:
        taken = db.query(BackUser).filter(
            BackUser.username == profile.username, BackUser.id != backuser.id
        ).first()
        if taken:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username already exists."
            )
        backuser.username = profile.username
    if "profileImage" in profile.model_fields_set:
        backuser.profileimage = profile.profileImage
    backuser.darkmode = profile.darkMode

    db.commit()
    db.refresh(backuser)

    return {
        "message": "Profile updated successfully",
        "data": BackUserProfile(
            username=backuser.username,
            profileimage=backuser.profileimage,
            darkmode=bool(backuser.darkmode)
        )
    }


@router.post("/update-password")
def update_password(password_data: PasswordUpdate, db: Session = Depends(get_db)):
    backuser = get_backuser_or_404(db, password_data.id)

    if not verify_password(password_data.currentPassword, backuser.password):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Current password is incorrect"
        )

    backuser.password = hash_password(password_data.newPassword)
    db.commit()

    logger.info(f"Admin password updated for id {backuser.id}")
    return {"message": "Password updated successfully"}
