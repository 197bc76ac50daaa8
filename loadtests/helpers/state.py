"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own state. IDs returned by earlier
requests are stored here so later steps can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """A simulated shopper from registration through checkout."""

    email: str | None = None
    password: str | None = None
    token: str | None = None
    cart_id: str | None = None
    product_ids: list[str] = field(default_factory=list)
    order_ids: list[str] = field(default_factory=list)

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}


@dataclass
class CatalogState:
    """Product ids seen while browsing, shared by the tasks of one user."""

    product_ids: list[str] = field(default_factory=list)
