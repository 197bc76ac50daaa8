"""Anonymous catalog browsing.

Reads only: listing pages, category filters, search, product detail and
reviews. Product views also bump the popularity score, as the storefront
does when a product page is opened.
"""

import random

from locust import HttpUser, TaskSet, between, task

from loadtests.data_generators import CATEGORIES, search_term
from loadtests.helpers.state import CatalogState


class CatalogBrowsing(TaskSet):
    def on_start(self):
        self.state = CatalogState()
        self.refresh_products()

    def refresh_products(self):
        resp = self.client.get("/products", params={"limit": 50}, name="GET /products")
        if resp.status_code == 200:
            self.state.product_ids = [p["id"] for p in resp.json()["products"]]

    @task(5)
    def list_page(self):
        page = random.randint(1, 3)
        self.client.get("/products", params={"page": page, "limit": 12}, name="GET /products")

    @task(2)
    def list_category(self):
        self.client.get(
            "/products",
            params={"category": random.choice(CATEGORIES)},
            name="GET /products?category",
        )

    @task(3)
    def search(self):
        self.client.get("/products/search", params={"q": search_term()}, name="GET /products/search")

    @task(4)
    def view_product(self):
        if not self.state.product_ids:
            self.refresh_products()
            return
        product_id = random.choice(self.state.product_ids)
        with self.client.get(
            f"/products/{product_id}",
            catch_response=True,
            name="GET /products/{id}",
        ) as resp:
            if resp.status_code == 404:
                # Deleted by an admin scenario since the last refresh
                self.state.product_ids.remove(product_id)
                resp.success()
                return
        self.client.post(f"/products/{product_id}/popularity", name="POST /products/{id}/popularity")
        self.client.get(f"/reviews/{product_id}", name="GET /reviews/{id}")


class BrowsingUser(HttpUser):
    """Visitor who never signs in."""

    wait_time = between(0.5, 2.0)
    tasks = [CatalogBrowsing]
