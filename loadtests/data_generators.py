"""Faker-based data generators for Locust load test scenarios.

Payloads match the field names of the API's Pydantic request schemas and
pass the domain's validation rules (password length, review length, rating
range, required shipping fields).
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ["electronics", "footwear", "kitchen", "books", "outdoors", "toys"]

# ---------- Accounts ----------


def valid_email() -> str:
    """Unique per call so concurrent registrations never collide."""
    local = fake.user_name()[:20]
    return f"{local}.{uuid.uuid4().hex[:6]}@{fake.free_email_domain()}"


def account_data() -> dict:
    """RegisterRequest payload. The password is kept for the login step."""
    return {
        "name": fake.name()[:100],
        "email": valid_email(),
        "password": fake.password(length=12),
    }


# ---------- Catalog ----------


def valid_sku(prefix: str = "LT") -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8].upper()}"


def product_data() -> dict:
    """AddProductRequest payload."""
    price = round(random.uniform(5.0, 400.0), 2)
    return {
        "title": f"{fake.word().capitalize()} {fake.word()}",
        "brand": fake.company()[:100],
        "category": random.choice(CATEGORIES),
        "sku": valid_sku(),
        "price": price,
        "original_price": round(price * 1.25, 2),
        "description": fake.paragraph(nb_sentences=2),
        "main_image": fake.image_url(),
        "quantity": random.randint(1, 250),
        "thumbnails": [fake.image_url() for _ in range(2)],
    }


def search_term() -> str:
    return random.choice(CATEGORIES + [fake.word()])


# ---------- Checkout ----------


def shipping_details() -> dict:
    """ShippingDetailsSchema payload."""
    return {
        "first_name": fake.first_name()[:100],
        "last_name": fake.last_name()[:100],
        "company": random.choice([None, fake.company()[:150]]),
        "country": fake.country()[:100],
        "address": fake.street_address()[:255],
        "city": fake.city()[:100],
        "phone": fake.phone_number()[:30],
        "email": valid_email(),
    }


def order_data(cart_id: str) -> dict:
    return {
        "cart_id": cart_id,
        "shipping_details": shipping_details(),
        "shipping": random.choice([0.0, 4.99, 9.99]),
    }


# ---------- Reviews ----------


def review_data(product_id: str) -> dict:
    """AddReviewRequest payload; the text stays within 3-500 characters."""
    return {
        "product_id": product_id,
        "review": fake.sentence(nb_words=12)[:500],
        "rating": random.randint(1, 5),
    }
