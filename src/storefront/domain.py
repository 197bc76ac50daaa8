"""SwiftCart storefront domain — catalog, carts, orders, reviews, wishlists and accounts.

A single bounded context: every aggregate lives in one domain so that a command
handler can read a Product and write a Cart, Order or Review inside the same
unit of work.
"""

import structlog
from protean.domain import Domain

storefront = Domain(name="storefront")

logger = structlog.get_logger(__name__)
