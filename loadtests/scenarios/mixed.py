"""Mixed storefront workload."""

from locust import HttpUser, between

from loadtests.scenarios.admin import BackOffice
from loadtests.scenarios.browsing import CatalogBrowsing
from loadtests.scenarios.shopping import ShopperJourney


class MixedWorkloadUser(HttpUser):
    """Traffic shaped like a storefront: mostly browsing, some buying.

    - Browsing (70%): listing, search, product pages and reviews
    - Shopping (25%): register through checkout and review
    - Back office (5%): product additions and order status updates
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        CatalogBrowsing: 14,
        ShopperJourney: 5,
        BackOffice: 1,
    }
