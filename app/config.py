import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

APP_NAME = "Blog Backend API"
APP_VERSION = "1.0.0"

# Get database URL from environment
DATABASE_URL = os.getenv("DATABASE_URL")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# Token settings
JWT_SECRET = os.getenv("JWT_SECRET", "mysecret")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# Uploaded images are stored here and served under UPLOAD_URL_PREFIX
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "nativeuploads")
UPLOAD_URL_PREFIX = "/nativeuploads"

# Seed account for the admin app (see init_db.py)
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin")
