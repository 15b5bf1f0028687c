# Import all models to ensure they're registered with SQLAlchemy
from .user import User, BackUser
from .post import Post
from .category import Category
from .comment import Comment
from .like import UserLike

# Make models available for import
__all__ = [
    "User",
    "BackUser",
    "Post",
    "Category",
    "Comment",
    "UserLike"
]
