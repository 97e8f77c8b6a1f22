from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional
from app.models.user import UserRole, Seniority

# Shared properties
class UserRegisterBase(BaseModel):
    name: str
    role: UserRole
    skills: List[str] = []
    seniority: Optional[Seniority] = None
    max_capacity: float = Field(default=100, ge=0)
    department: Optional[str] = None

# Properties to receive via API on registration
class UserCreate(UserRegisterBase):
    email: EmailStr
    password: str = Field(min_length=1)
