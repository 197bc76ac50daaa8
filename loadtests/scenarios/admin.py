"""Back-office activity: adding products and moving orders along.

Needs an existing admin account, created with
``python src/manage.py create-admin``, whose credentials are passed in
LOADTEST_ADMIN_EMAIL and LOADTEST_ADMIN_PASSWORD.
"""

import os
import random

from locust import HttpUser, TaskSet, between, task

from loadtests.data_generators import product_data
from loadtests.helpers.response import extract_error_detail

ORDER_STATUSES = ["Processing", "Shipped", "Delivered"]


class BackOffice(TaskSet):
    def on_start(self):
        resp = self.client.post(
            "/login",
            json={
                "email": os.getenv("LOADTEST_ADMIN_EMAIL", "admin@swiftcart.local"),
                "password": os.getenv("LOADTEST_ADMIN_PASSWORD", "admin-password"),
            },
            name="POST /login (admin)",
        )
        self.headers = {}
        if resp.status_code == 200:
            self.headers = {"Authorization": f"Bearer {resp.json()['access_token']}"}

    @task(3)
    def add_product(self):
        with self.client.post(
            "/products",
            json=product_data(),
            headers=self.headers,
            catch_response=True,
            name="POST /products",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Add product failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task(5)
    def advance_order(self):
        resp = self.client.get("/orders", params={"limit": 20}, headers=self.headers, name="GET /orders (admin)")
        if resp.status_code != 200:
            return
        orders = resp.json()["orders"]
        if not orders:
            return
        order = random.choice(orders)
        self.client.patch(
            "/orders",
            json={"order_id": order["id"], "status": random.choice(ORDER_STATUSES)},
            headers=self.headers,
            name="PATCH /orders",
        )

    @task(1)
    def list_users(self):
        self.client.get("/users", headers=self.headers, name="GET /users")


class AdminUser(HttpUser):
    wait_time = between(2.0, 5.0)
    tasks = [BackOffice]
