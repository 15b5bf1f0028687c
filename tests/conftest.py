import os
import tempfile
from datetime import datetime

import pytest

# Point the app at throwaway storage before any app module is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-that-is-long-enough-for-hs256"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="blog-uploads-")

from fastapi.testclient import TestClient

from database import SessionLocal, create_tables, drop_tables
from main import app
from models import BackUser, Comment, Post, User
from utils.auth import create_access_token, hash_password


@pytest.fixture(autouse=True)
def _tables():
    create_tables()
    yield
    drop_tables()


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(db_session):
    def _make(username="reader", password="secret", email=None, profile_image=None):
        user = User(
            username=username,
            email=email or f"{username}@example.com",
            password=hash_password(password),
            profile_image=profile_image,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make


@pytest.fixture
def make_post(db_session):
    def _make(**overrides):
        values = {
            "pimage": "/nativeuploads/cover.jpg",
            "pname": "Hello world",
            "aname": "Asha",
            "img_alt": "cover",
            "img_title": "Cover",
            "pdesc": "First post body",
            "cname": "News",
            "stime": datetime(2024, 1, 1, 10, 0, 0),
            "views": 0,
            "likes": 0,
        }
        values.update(overrides)
        post = Post(**values)
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post
    return _make


@pytest.fixture
def make_comment(db_session):
    def _make(post, user, text="Nice post", is_read=False):
        comment = Comment(post_id=post.id, user_id=user.id, comment_text=text, is_read=is_read)
        db_session.add(comment)
        db_session.commit()
        db_session.refresh(comment)
        return comment
    return _make


@pytest.fixture
def admin(db_session):
    backuser = BackUser(id=1, username="admin", password=hash_password("adminpass"), darkmode=False)
    db_session.add(backuser)
    db_session.commit()
    db_session.refresh(backuser)
    return backuser


def bearer(user):
    token = create_access_token({"id": user.id, "username": user.username})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers():
    return bearer
