# routers/upload.py
from typing import Optional
from fastapi import APIRouter, File, HTTPException, UploadFile, status
from utils.uploads import has_file, save_upload

router = APIRouter(tags=["uploads"])


@router.post("/upload-avatar")
async def upload_avatar(avatar: Optional[UploadFile] = File(None)):
    """Store an avatar image and return the path to save on the profile"""
    if not has_file(avatar):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded"
        )

    return {"path": save_upload(avatar)}
