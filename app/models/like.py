from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from database import Base


class UserLike(Base):
    """
    One row per (user, post) like; the composite key allows a single like per user
    """
    __tablename__ = "user_likes"

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    post_id = Column(Integer, ForeignKey("blog-post.id"), primary_key=True)
    post_name = Column(String(500), nullable=True)

    post = relationship("Post", back_populates="user_likes")
    user = relationship("User", back_populates="likes")

    def __repr__(self):
        return f"<UserLike(user_id={self.user_id}, post_id={self.post_id})>"
