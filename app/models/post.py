from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Index
from sqlalchemy.orm import relationship
from database import Base


class Post(Base):
    """
    Blog post with scheduling metadata and engagement counters
    """
    __tablename__ = "blog-post"

    id = Column(Integer, primary_key=True, index=True)
    pimage = Column(String(500), nullable=True)     # Upload path or external URL
    pname = Column(String(500), nullable=False)     # Title
    aname = Column(String(255), nullable=True)      # Author name
    img_alt = Column(String(500), nullable=True)
    img_title = Column(String(500), nullable=True)
    pdesc = Column(Text, nullable=True)             # Body
    cname = Column(String(255), nullable=True)      # Category name

    # Scheduling fields, stored as IST wall-clock time
    up_date = Column(DateTime, nullable=True)
    stime = Column(DateTime, nullable=True)

    # Engagement
    views = Column(Integer, default=0, nullable=False)
    likes = Column(Integer, default=0, nullable=False)
    read = Column(Boolean, default=False, nullable=False)

    # Relationships
    comments = relationship("Comment", back_populates="post", cascade="all, delete-orphan")
    user_likes = relationship("UserLike", back_populates="post", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Post(id={self.id}, pname='{(self.pname or '')[:30]}...', cname='{self.cname}')>"


# Database indexes for the listing queries
Index("idx_blog_post_stime", Post.stime)
Index("idx_blog_post_cname", Post.cname)
Index("idx_blog_post_views", Post.views)
