# schemas/auth.py
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator


class TokenUser(BaseModel):
    """Identity carried in a bearer token"""
    id: int
    username: Optional[str] = None


# Public users
class UserSignup(BaseModel):
    username: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserSignin(BaseModel):
    username: str = Field(..., min_length=1, description="Username or email")
    password: str = Field(..., min_length=1)


class SignupResponse(BaseModel):
    token: str
    id: int
    username: str
    email: str


class SigninResponse(SignupResponse):
    avatar: Optional[str] = None


class UserProfile(BaseModel):
    username: str
    email: str
    profileImage: Optional[str] = None


class UserProfileUpdate(BaseModel):
    id: int
    username: Optional[str] = Field(None, min_length=1)
    profileImage: Optional[str] = None

    @field_validator("username")
    @classmethod
    def username_not_null(cls, v):
        if v is None:
            raise ValueError("Username cannot be empty")
        return v


class PasswordUpdate(BaseModel):
    id: int
    currentPassword: str
    newPassword: str = Field(..., min_length=1)


# Admin app
class AdminLogin(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class Token(BaseModel):
    token: str


class BackUserProfile(BaseModel):
    username: str
    profileimage: Optional[str] = None
    darkmode: bool


class BackUserProfileUpdate(BaseModel):
    id: int = 1
    username: Optional[str] = Field(None, min_length=1)
    profileImage: Optional[str] = None
    darkMode: bool = False
