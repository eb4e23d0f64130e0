"""
Pydantic schemas for session tokens
"""

from pydantic import BaseModel

from glambook.schemas.user import UserResponse


class TokenResponse(BaseModel):
    """Sign-in response"""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
