# routers/auth.py
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from database import get_db
from models import User, BackUser
from schemas.auth import AdminLogin, Token, UserSignup, UserSignin, SignupResponse, SigninResponse
from utils.auth import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


@router.post("/user/signup", response_model=SignupResponse)
def signup(user_data: UserSignup, db: Session = Depends(get_db)):
    existing = db.query(User).filter(
        or_(User.username == user_data.username, User.email == user_data.email)
    ).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username or email already exists."
        )

    try:
        user = User(
            username=user_data.username,
            email=user_data.email,
            password=hash_password(user_data.password)
        )
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"User signup error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error during signup."
        )

    token = create_access_token(data={"id": user.id, "username": user.username})
    return SignupResponse(token=token, id=user.id, username=user.username, email=user.email)


@router.post("/user/signin", response_model=SigninResponse)
def signin(credentials: UserSignin, db: Session = Depends(get_db)):
    """Sign in with either the username or the email address"""
    user = db.query(User).filter(
        or_(User.username == credentials.username, User.email == credentials.username)
    ).first()

    if not user or not verify_password(credentials.password, user.password):
        logger.info(f"Failed signin for {credentials.username}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials."
        )

    token = create_access_token(data={"id": user.id, "username": user.username})
    return SigninResponse(
        token=token,
        id=user.id,
        username=user.username,
        email=user.email,
        avatar=user.profile_image
    )


@router.post("/login", response_model=Token)
def admin_login(credentials: AdminLogin, db: Session = Depends(get_db)):
    """Admin app login against the backusers table"""
    if not credentials.username or not credentials.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing credentials"
        )

    backuser = db.query(BackUser).filter(BackUser.username == credentials.username).first()
    if not backuser:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    if not verify_password(credentials.password, backuser.password):
        logger.info(f"Failed admin login for {credentials.username}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials"
        )

    token = create_access_token(data={"id": backuser.id, "username": backuser.username})
    return Token(token=token)
