from sqlalchemy import Column, Integer, String, Boolean
from sqlalchemy.orm import relationship
from database import Base


class User(Base):
    """
    Public reader account used for comments and likes
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    profile_image = Column(String(500), nullable=True)

    # Relationships
    comments = relationship("Comment", back_populates="user", cascade="all, delete-orphan")
    likes = relationship("UserLike", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"


class BackUser(Base):
    """
    Administrative account for the admin app
    """
    __tablename__ = "backusers"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash
    profileimage = Column(String(500), nullable=True)
    darkmode = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<BackUser(id={self.id}, username='{self.username}')>"
