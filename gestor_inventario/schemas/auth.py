from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from .common import CamelModel
from .user import UserResponse

class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class RegisterRequest(CamelModel):
    nombre: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    # Opcional para que la falta de contraseña dé el mismo mensaje que una corta
    password: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value):
        return value.strip().lower()

class AuthData(BaseModel):
    user: UserResponse
    token: str
