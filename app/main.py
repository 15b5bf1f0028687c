import uvicorn
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import APP_NAME, APP_VERSION, UPLOAD_URL_PREFIX
from routers import account, auth, category, comment, like, notification, post, upload, user
from utils.uploads import ensure_upload_dir

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Location segments that only say where a value came from
REQUEST_PARTS = ("body", "query", "path", "header", "form")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown"""
    logger.info(f" Starting {APP_NAME} {APP_VERSION}")
    logger.info(f" Serving uploads from {ensure_upload_dir()} at {UPLOAD_URL_PREFIX}")

    yield  # App is running

    logger.info(" Shutting down")


# Create FastAPI app instance
app = FastAPI(
    title=APP_NAME,
    version=APP_VERSION,
    description="Blog backend for the reader and admin mobile apps, built with FastAPI and SQLAlchemy",
    docs_url="/docs",  # Swagger UI at /docs
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Mobile clients connect from anywhere
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(upload.router, prefix="/api")
app.include_router(post.router, prefix="/api")
app.include_router(notification.router, prefix="/api")
app.include_router(category.router, prefix="/api")
app.include_router(comment.router, prefix="/api")
app.include_router(like.router, prefix="/api")
app.include_router(auth.router, prefix="/api")
app.include_router(user.router, prefix="/api")
app.include_router(account.router, prefix="/api")

# Uploaded images
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=ensure_upload_dir()), name="uploads")


# Every error leaves as {"error": "..."}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=400, content={"error": "Invalid request"})

    first = errors[0]
    message = first.get("msg", "Invalid value")
    if message.startswith("Value error, "):
        # Raised by our own validators, already phrased for the client
        return JSONResponse(status_code=400, content={"error": message[len("Value error, "):]})

    field = ".".join(str(part) for part in first.get("loc", ()) if part not in REQUEST_PARTS)
    return JSONResponse(
        status_code=400,
        content={"error": f"{field}: {message}" if field else message}
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request, exc):
    logger.error(f"DB Error on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"error": "Database error"}
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": f"Internal server error: {str(exc)}"}
    )

# Health check endpoint
@app.get("/")
async def root():
    return {
        "message": APP_NAME,
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs"
    }

@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "blog-backend"}

# Run the app
if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=5000,
        reload=True,
        log_level="info"
    )
