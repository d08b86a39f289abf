"""
Shop API Pydantic Models

Request bodies for the shop endpoints.
"""
from pydantic import BaseModel


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: int


# ==================== SESSION MODELS ====================

class LoginRequest(BaseModel):
    username: str
    password: str
