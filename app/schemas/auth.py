from pydantic import BaseModel, EmailStr
from app.models.user import UserRead


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead


class TokenData(BaseModel):
    """
    The token claim used to resolve the caller. Email and role are also issued
    in the token for clients, but the stored user is authoritative.
    """
    user_id: str
