"""Pydantic request/response schemas for the storefront API.

These are the external contracts, kept separate from the Protean commands
they are translated into. Request models reject unknown fields.
"""

from pydantic import BaseModel, ConfigDict, Field


class RequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------
class RegisterRequest(RequestModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=254)
    password: str = Field(min_length=6, max_length=128)


class LoginRequest(RequestModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class ForgotPasswordRequest(RequestModel):
    email: str = Field(min_length=3, max_length=254)


class ResetPasswordRequest(RequestModel):
    token: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=6, max_length=128)


class ChangeRoleRequest(RequestModel):
    role: str


class MessageResponse(BaseModel):
    success: bool = True
    message: str


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------
class AddProductRequest(RequestModel):
    title: str = Field(min_length=1, max_length=255)
    brand: str = Field(min_length=1, max_length=100)
    category: str = Field(min_length=1, max_length=100)
    sku: str = Field(min_length=1, max_length=64)
    price: float = Field(ge=0)
    original_price: float | None = Field(default=None, ge=0)
    description: str = Field(min_length=1)
    main_image: str = Field(min_length=1, max_length=1024)
    quantity: int = Field(ge=1)
    availability: str | None = None
    thumbnails: list[str] = Field(default_factory=list)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "title": "Trail Running Shoe",
                    "brand": "Stride",
                    "category": "footwear",
                    "sku": "STR-TRAIL-42",
                    "price": 89.99,
                    "original_price": 119.99,
                    "description": "Lightweight shoe with a grippy outsole.",
                    "main_image": "https://cdn.example.com/trail.jpg",
                    "quantity": 25,
                }
            ]
        },
    )


class IncrementPopularityRequest(RequestModel):
    increment_by: int = Field(default=1, ge=1)


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(RequestModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)


class UpdateCartItemRequest(RequestModel):
    product_id: str
    quantity: int = Field(ge=1)


class RemoveCartItemRequest(RequestModel):
    product_id: str


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class ShippingDetailsSchema(RequestModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    company: str | None = Field(default=None, max_length=150)
    country: str = Field(min_length=1, max_length=100)
    address: str = Field(min_length=1, max_length=255)
    city: str = Field(min_length=1, max_length=100)
    phone: str = Field(min_length=1, max_length=30)
    email: str = Field(min_length=3, max_length=254)


class CreateOrderRequest(RequestModel):
    cart_id: str
    shipping_details: ShippingDetailsSchema
    shipping: float = Field(default=0.0, ge=0)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "cart_id": "0b8f3c1e-0000-4000-8000-000000000001",
                    "shipping_details": {
                        "first_name": "Ada",
                        "last_name": "Lovelace",
                        "country": "UK",
                        "address": "12 Analytical Row",
                        "city": "London",
                        "phone": "+44 20 0000 0000",
                        "email": "ada@example.com",
                    },
                    "shipping": 5.0,
                }
            ]
        },
    )


class UpdateOrderStatusRequest(RequestModel):
    order_id: str
    status: str


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------
class AddReviewRequest(RequestModel):
    product_id: str
    review: str
    rating: int


# ---------------------------------------------------------------------------
# Wishlist
# ---------------------------------------------------------------------------
class WishlistRequest(RequestModel):
    product_id: str
    action: str
