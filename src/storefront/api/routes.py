"""FastAPI routes for the storefront.

Routes translate request schemas into Protean commands, attaching the
caller's identity from the session. Reads go straight to the repositories.
"""

import json

from fastapi import APIRouter, Depends, HTTPException, Query, status
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    AddProductRequest,
    AddReviewRequest,
    AddToCartRequest,
    ChangeRoleRequest,
    CreateOrderRequest,
    ForgotPasswordRequest,
    IncrementPopularityRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    RemoveCartItemRequest,
    ResetPasswordRequest,
    TokenResponse,
    UpdateCartItemRequest,
    UpdateOrderStatusRequest,
    WishlistRequest,
)
from storefront.api.session import Principal, create_access_token, get_current_principal, require_admin
from storefront.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from storefront.cart.view import ForeignCartError, cart_line_view, cart_view_for, owned_cart_view
from storefront.catalogue.creation import AddProduct
from storefront.catalogue.management import DeleteProduct, IncrementPopularity
from storefront.catalogue.product import Product
from storefront.order.confirmation import send_order_confirmation
from storefront.order.listing import get_order, list_orders
from storefront.order.order import Order
from storefront.order.placement import PlaceOrder
from storefront.order.status import UpdateOrderStatus
from storefront.review.listing import reviews_for_product
from storefront.review.submission import SubmitReview
from storefront.user.password_reset import RequestPasswordReset, ResetPassword
from storefront.user.registration import RegisterUser, authenticate
from storefront.user.roles import ChangeUserRole
from storefront.user.user import User
from storefront.wishlist.management import OpenWishlist, UpdateWishlist
from storefront.wishlist.view import wishlist_view

_WISHLIST_MESSAGES = {
    "added": "Product added to wishlist",
    "already_saved": "Product already in wishlist",
    "removed": "Product removed from wishlist",
}

# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------
auth_router = APIRouter(tags=["accounts"])


# bcrypt is CPU bound: plain defs run in the threadpool
@auth_router.post("/register", status_code=201)
def register(body: RegisterRequest) -> dict:
    command = RegisterUser(name=body.name, email=body.email, password=body.password)
    user_id = current_domain.process(command, asynchronous=False)
    return {"message": "User registered successfully", "user_id": user_id}


@auth_router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest) -> TokenResponse:
    user = authenticate(body.email, body.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(access_token=create_access_token(str(user.id)))


@auth_router.get("/me")
async def me(principal: Principal = Depends(get_current_principal)) -> dict:
    return current_domain.repository_for(User).get(principal.user_id).profile()


@auth_router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(body: ForgotPasswordRequest) -> MessageResponse:
    current_domain.process(RequestPasswordReset(email=body.email), asynchronous=False)
    return MessageResponse(message="Password reset email sent")


@auth_router.post("/reset-password", response_model=MessageResponse)
def reset_password(body: ResetPasswordRequest) -> MessageResponse:
    current_domain.process(ResetPassword(token=body.token, new_password=body.password), asynchronous=False)
    return MessageResponse(message="Password has been reset successfully")


# ---------------------------------------------------------------------------
# Users (admin)
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(require_admin)])


@user_router.get("")
async def list_users(page: int = Query(1, ge=1), limit: int = Query(20, ge=1, le=100)) -> dict:
    result = current_domain.repository_for(User).newest_first(page, limit)
    return {"users": [user.profile() for user in result.items], "pagination": result.pagination()}


@user_router.get("/{user_id}")
async def get_user(user_id: str) -> dict:
    return current_domain.repository_for(User).get(user_id).profile()


@user_router.patch("/{user_id}/role")
async def change_user_role(user_id: str, body: ChangeRoleRequest) -> dict:
    current_domain.process(ChangeUserRole(user_id=user_id, role=body.role), asynchronous=False)
    return current_domain.repository_for(User).get(user_id).profile()


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("")
async def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
    category: str | None = None,
) -> dict:
    result = current_domain.repository_for(Product).listing(page, limit, category=category)
    return {"products": [p.detail() for p in result.items], "pagination": result.pagination()}


@product_router.get("/search")
async def search_products(q: str = "", limit: int = Query(10, ge=1, le=100)) -> dict:
    products = current_domain.repository_for(Product).search(q, limit=limit)
    return {"products": [p.detail() for p in products]}


@product_router.get("/{product_id}")
async def get_product(product_id: str) -> dict:
    return current_domain.repository_for(Product).get(product_id).detail()


@product_router.post("", status_code=201)
async def add_product(body: AddProductRequest, admin: Principal = Depends(require_admin)) -> dict:
    command = AddProduct(
        title=body.title,
        brand=body.brand,
        category=body.category,
        sku=body.sku,
        price=body.price,
        original_price=body.original_price,
        description=body.description,
        main_image=body.main_image,
        quantity=body.quantity,
        availability=body.availability,
        thumbnails=json.dumps(body.thumbnails),
    )
    product_id = current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).get(product_id)
    return {"message": "Product added successfully", "product": product.detail()}


@product_router.delete("/{product_id}")
async def delete_product(product_id: str, admin: Principal = Depends(require_admin)) -> dict:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return {"message": "Product deleted successfully"}


@product_router.post("/{product_id}/popularity")
async def increment_popularity(product_id: str, body: IncrementPopularityRequest | None = None) -> dict:
    increment_by = body.increment_by if body else 1
    score = current_domain.process(
        IncrementPopularity(product_id=product_id, increment_by=increment_by),
        asynchronous=False,
    )
    return {"product_id": product_id, "popularity_score": score}


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.post("")
async def add_to_cart(body: AddToCartRequest, principal: Principal = Depends(get_current_principal)) -> dict:
    command = AddToCart(user_id=principal.user_id, product_id=body.product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return cart_view_for(principal.user_id)


@cart_router.get("")
async def get_cart(principal: Principal = Depends(get_current_principal)) -> dict:
    return cart_view_for(principal.user_id)


@cart_router.get("/items/{item_id}")
async def get_cart_item(item_id: str, principal: Principal = Depends(get_current_principal)) -> dict:
    return {"item": cart_line_view(principal.user_id, item_id)}


@cart_router.get("/{cart_id}")
async def get_cart_by_id(cart_id: str, principal: Principal = Depends(get_current_principal)) -> dict:
    try:
        return owned_cart_view(cart_id, principal.user_id)
    except ForeignCartError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to view this cart") from None


@cart_router.put("")
async def update_cart_item(body: UpdateCartItemRequest, principal: Principal = Depends(get_current_principal)) -> dict:
    command = UpdateCartQuantity(user_id=principal.user_id, product_id=body.product_id, quantity=body.quantity)
    current_domain.process(command, asynchronous=False)
    return cart_view_for(principal.user_id)


@cart_router.delete("")
async def remove_cart_item(body: RemoveCartItemRequest, principal: Principal = Depends(get_current_principal)) -> dict:
    command = RemoveFromCart(user_id=principal.user_id, product_id=body.product_id)
    current_domain.process(command, asynchronous=False)
    return cart_view_for(principal.user_id)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201)
async def create_order(body: CreateOrderRequest, principal: Principal = Depends(get_current_principal)) -> dict:
    command = PlaceOrder(
        user_id=principal.user_id,
        cart_id=body.cart_id,
        shipping_details=json.dumps(body.shipping_details.model_dump()),
        shipping=body.shipping,
    )
    order_id = current_domain.process(command, asynchronous=False)

    # The order is committed at this point; the email cannot undo it
    order = current_domain.repository_for(Order).get(order_id)
    send_order_confirmation(order)
    return {"message": "Order created successfully", "order": order.detail()}


@order_router.get("")
async def get_orders(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    principal: Principal = Depends(get_current_principal),
) -> dict:
    return list_orders(principal.user_id, principal.is_admin, page=page, limit=limit)


@order_router.get("/{order_id}")
async def get_one_order(order_id: str, principal: Principal = Depends(get_current_principal)) -> dict:
    return get_order(order_id, principal.user_id, principal.is_admin)


@order_router.patch("")
async def update_order_status(body: UpdateOrderStatusRequest, admin: Principal = Depends(require_admin)) -> dict:
    current_domain.process(UpdateOrderStatus(order_id=body.order_id, status=body.status), asynchronous=False)
    order = current_domain.repository_for(Order).get(body.order_id)
    return {"message": "Order status updated", "order": order.detail()}


# ---------------------------------------------------------------------------
# Reviews
# ---------------------------------------------------------------------------
review_router = APIRouter(prefix="/reviews", tags=["reviews"])


@review_router.post("", status_code=201)
async def add_review(body: AddReviewRequest, principal: Principal = Depends(get_current_principal)) -> dict:
    command = SubmitReview(
        product_id=body.product_id,
        user_id=principal.user_id,
        rating=body.rating,
        body=body.review,
    )
    review_id = current_domain.process(command, asynchronous=False)
    return {"message": "Review added successfully", "review_id": review_id}


@review_router.get("/{product_id}")
async def get_reviews(product_id: str) -> dict:
    return {"reviews": reviews_for_product(product_id)}


# ---------------------------------------------------------------------------
# Wishlist
# ---------------------------------------------------------------------------
wishlist_router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@wishlist_router.get("")
async def get_wishlist(principal: Principal = Depends(get_current_principal)) -> dict:
    current_domain.process(OpenWishlist(user_id=principal.user_id), asynchronous=False)
    return wishlist_view(principal.user_id)


@wishlist_router.post("")
async def update_wishlist(body: WishlistRequest, principal: Principal = Depends(get_current_principal)) -> dict:
    command = UpdateWishlist(user_id=principal.user_id, product_id=body.product_id, action=body.action)
    outcome = current_domain.process(command, asynchronous=False)
    return {"message": _WISHLIST_MESSAGES[outcome], **wishlist_view(principal.user_id)}


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
health_router = APIRouter(tags=["health"])


@health_router.get("/health")
async def health() -> dict:
    return {"status": "ok", "domain": current_domain.name}
