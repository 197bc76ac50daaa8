"""Signed-in shopper journeys.

A SequentialTaskSet walks one shopper from registration to a placed order
and a review. Steps depend on the previous ones succeeding; a failure
interrupts the journey and Locust starts a fresh one.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import account_data, order_data, review_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class ShopperJourney(SequentialTaskSet):
    """Register -> Login -> Browse -> Cart -> Wishlist -> Checkout -> Review."""

    def on_start(self):
        self.state = ShopperState()

    @task
    def register(self):
        payload = account_data()
        with self.client.post("/register", json=payload, catch_response=True, name="POST /register") as resp:
            if resp.status_code != 201:
                resp.failure(f"Register failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()
                return
        self.state.email = payload["email"]
        self.state.password = payload["password"]

    @task
    def login(self):
        with self.client.post(
            "/login",
            json={"email": self.state.email, "password": self.state.password},
            catch_response=True,
            name="POST /login",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Login failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()
                return
            self.state.token = resp.json()["access_token"]

    @task
    def browse(self):
        resp = self.client.get("/products", params={"limit": 24}, name="GET /products")
        products = resp.json().get("products", []) if resp.status_code == 200 else []
        if not products:
            # Nothing to buy until the catalog is seeded
            self.interrupt()
            return
        picks = random.sample(products, k=min(3, len(products)))
        self.state.product_ids = [p["id"] for p in picks]

    @task
    def fill_cart(self):
        for product_id in self.state.product_ids:
            with self.client.post(
                "/cart",
                json={"product_id": product_id, "quantity": random.randint(1, 3)},
                headers=self.state.headers,
                catch_response=True,
                name="POST /cart",
            ) as resp:
                if resp.status_code == 200:
                    self.state.cart_id = resp.json()["id"]
                else:
                    resp.failure(f"Add to cart failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def adjust_cart(self):
        if len(self.state.product_ids) < 2:
            return
        first, last = self.state.product_ids[0], self.state.product_ids[-1]
        self.client.put(
            "/cart",
            json={"product_id": first, "quantity": random.randint(1, 5)},
            headers=self.state.headers,
            name="PUT /cart",
        )
        self.client.request(
            "DELETE",
            "/cart",
            json={"product_id": last},
            headers=self.state.headers,
            name="DELETE /cart",
        )

    @task
    def save_to_wishlist(self):
        self.client.get("/wishlist", headers=self.state.headers, name="GET /wishlist")
        self.client.post(
            "/wishlist",
            json={"product_id": self.state.product_ids[-1], "action": "add"},
            headers=self.state.headers,
            name="POST /wishlist",
        )

    @task
    def checkout(self):
        if self.state.cart_id is None:
            self.interrupt()
            return
        with self.client.post(
            "/orders",
            json=order_data(self.state.cart_id),
            headers=self.state.headers,
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["order"]["id"])
            else:
                resp.failure(f"Checkout failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def review_purchase(self):
        with self.client.post(
            "/reviews",
            json=review_data(self.state.product_ids[0]),
            headers=self.state.headers,
            catch_response=True,
            name="POST /reviews",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Review failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def check_orders(self):
        self.client.get("/orders", headers=self.state.headers, name="GET /orders")
        for order_id in self.state.order_ids:
            self.client.get(f"/orders/{order_id}", headers=self.state.headers, name="GET /orders/{id}")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    wait_time = between(1.0, 3.0)
    tasks = [ShopperJourney]
