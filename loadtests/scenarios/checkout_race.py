"""Checkout race probe.

Two checkouts of the same cart are fired at once. Sequentially the second
is rejected with "Cart is empty"; under concurrency both may read the cart
before either clears it. Every time both succeed a ``checkout_race``
failure is recorded, so the rate shows up in Locust's statistics.
"""

import random

from gevent.pool import Group
from locust import HttpUser, between, task

from loadtests.data_generators import account_data, order_data


class CheckoutRaceUser(HttpUser):
    wait_time = between(1.0, 2.0)

    def on_start(self):
        account = account_data()
        self.client.post("/register", json=account, name="POST /register")
        resp = self.client.post(
            "/login",
            json={"email": account["email"], "password": account["password"]},
            name="POST /login",
        )
        token = resp.json().get("access_token") if resp.status_code == 200 else None
        self.headers = {"Authorization": f"Bearer {token}"} if token else {}

    def _checkout(self, cart_id, outcomes):
        with self.client.post(
            "/orders",
            json=order_data(cart_id),
            headers=self.headers,
            catch_response=True,
            name="POST /orders (race)",
        ) as resp:
            # The losing checkout is expected to see an empty cart
            if resp.status_code == 400:
                resp.success()
            outcomes.append(resp.status_code)

    @task
    def double_checkout(self):
        resp = self.client.get("/products", params={"limit": 24}, name="GET /products")
        products = resp.json().get("products", []) if resp.status_code == 200 else []
        if not products or not self.headers:
            return

        cart = self.client.post(
            "/cart",
            json={"product_id": random.choice(products)["id"]},
            headers=self.headers,
            name="POST /cart",
        )
        if cart.status_code != 200:
            return
        cart_id = cart.json()["id"]

        outcomes = []
        group = Group()
        group.spawn(self._checkout, cart_id, outcomes)
        group.spawn(self._checkout, cart_id, outcomes)
        group.join()

        if outcomes.count(201) > 1:
            self.environment.events.request.fire(
                request_type="RACE",
                name="checkout_race",
                response_time=0,
                response_length=0,
                response=None,
                context={},
                exception=AssertionError("one cart produced two orders"),
            )
