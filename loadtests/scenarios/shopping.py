"""Shopper load test scenarios.

Two journeys: anonymous catalogue browsing, and a stateful sign-up to checkout
run. The checkout journey is a SequentialTaskSet; each step depends on the
previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, TaskSet, between, task

from loadtests.data_generators import address_data, basket, delivery_address, order_data, registration_data
from loadtests.helpers.state import ShopperState
from storefront.client import extract_error_detail


class BrowseCatalogue(TaskSet):
    """Anonymous browsing: listing, category filter, search, product detail."""

    def on_start(self):
        self.products = []
        self.categories = []
        with self.client.get("/api/categories", catch_response=True, name="GET /api/categories") as resp:
            if resp.status_code == 200:
                self.categories = resp.json()
            else:
                resp.failure(f"Categories failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task(4)
    def list_products(self):
        with self.client.get("/api/products", catch_response=True, name="GET /api/products") as resp:
            if resp.status_code == 200:
                self.products = resp.json()
            else:
                resp.failure(f"List products failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task(3)
    def filter_by_category(self):
        if not self.categories:
            return
        self.client.get(
            "/api/products",
            params={"category": random.choice(self.categories)},
            name="GET /api/products?category",
        )

    @task(2)
    def search(self):
        term = random.choice(["milk", "apple", "bread", "rice", "tea", "chips"])
        self.client.get("/api/products", params={"search": term}, name="GET /api/products?search")

    @task(2)
    def view_product(self):
        if not self.products:
            return
        product = random.choice(self.products)
        self.client.get(f"/api/products/{product['id']}", name="GET /api/products/{id}")

    @task(1)
    def stop(self):
        self.interrupt()


class CheckoutJourney(SequentialTaskSet):
    """Register -> Save Address -> Browse -> Place Order -> Review Orders.

    Generates UserRegistered, AddressAdded and OrderPlaced.
    """

    def on_start(self):
        self.state = ShopperState()

    @task
    def register(self):
        payload = registration_data()
        with self.client.post(
            "/api/auth/register",
            json=payload,
            catch_response=True,
            name="POST /api/auth/register",
        ) as resp:
            if resp.status_code == 201:
                self.state.token = resp.json()["token"]
                self.state.name = payload["name"]
                self.state.phone = payload["phone"]
            else:
                resp.failure(f"Registration failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def save_address(self):
        with self.client.post(
            "/api/user/address",
            json=address_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/user/address",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Add address failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def browse(self):
        with self.client.get("/api/products", catch_response=True, name="GET /api/products") as resp:
            if resp.status_code == 200 and resp.json():
                self.state.products = resp.json()
            else:
                resp.failure(f"Nothing to buy: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def fill_cart(self):
        self.state.cart = basket(self.state.products)

    @task
    def place_order(self):
        payload = order_data(self.state.cart, delivery_address(self.state.name, self.state.phone))
        with self.client.post(
            "/api/orders",
            json=payload,
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["id"])
                self.state.cart = []
            else:
                resp.failure(f"Place order failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def review_orders(self):
        with self.client.get(
            "/api/orders",
            headers=self.state.headers,
            catch_response=True,
            name="GET /api/orders",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List orders failed: {resp.status_code} - {extract_error_detail(resp)}")
            elif len(resp.json()) != len(self.state.order_ids):
                resp.failure("Order history does not match the orders placed")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    """Shopper traffic: mostly browsing, with a share of full checkouts."""

    wait_time = between(0.5, 2.0)
    tasks = {BrowseCatalogue: 3, CheckoutJourney: 1}
