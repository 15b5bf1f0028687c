# init_db.py
import logging
from config import ADMIN_USERNAME, ADMIN_PASSWORD
from database import SessionLocal, create_tables
from models import BackUser
from utils.auth import hash_password

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def seed_admin(db) -> bool:
    """Create the admin app account (id 1) unless it already exists"""
    if db.query(BackUser).filter(BackUser.id == 1).first():
        return False

    db.add(BackUser(
        id=1,
        username=ADMIN_USERNAME,
        password=hash_password(ADMIN_PASSWORD),
        darkmode=False
    ))
    db.commit()
    return True


def init_database():
    """Initialize database"""
    logger.info(" Creating database tables...")
    create_tables()

    db = SessionLocal()
    try:
        if seed_admin(db):
            logger.info(f" Seeded admin account '{ADMIN_USERNAME}'")
    finally:
        db.close()

    logger.info(" Database initialized!")

if __name__ == "__main__":
    init_database()
