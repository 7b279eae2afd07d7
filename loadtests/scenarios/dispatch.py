"""Admin dispatch load test scenario.

An admin signs in, reads the full order queue and walks pending orders through
to delivery. Needs an admin account, created beforehand with
``python src/manage.py create-admin``; its credentials come from the
LOADTEST_ADMIN_EMAIL and LOADTEST_ADMIN_PASSWORD environment variables.
"""

import os

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.helpers.state import DispatchState
from storefront.client import extract_error_detail

DELIVERY_PATH = ("confirmed", "preparing", "out-for-delivery", "delivered")


class DispatchJourney(SequentialTaskSet):
    """Login -> List All Orders -> Advance one pending order to delivered.

    Generates OrderStatusChanged (x4) per dispatched order.
    """

    def on_start(self):
        self.state = DispatchState()

    @task
    def login(self):
        credentials = {
            "email": os.environ.get("LOADTEST_ADMIN_EMAIL", "admin@freshcart.local"),
            "password": os.environ.get("LOADTEST_ADMIN_PASSWORD", "admin123"),
        }
        with self.client.post(
            "/api/auth/login",
            json=credentials,
            catch_response=True,
            name="POST /api/auth/login",
        ) as resp:
            if resp.status_code == 200:
                self.state.token = resp.json()["token"]
            else:
                resp.failure(f"Admin login failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def list_orders(self):
        with self.client.get(
            "/api/orders/all",
            headers=self.state.headers,
            catch_response=True,
            name="GET /api/orders/all",
        ) as resp:
            if resp.status_code == 200:
                self.state.pending_order_ids = [o["id"] for o in resp.json() if o["status"] == "pending"]
            else:
                resp.failure(f"List all orders failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def dispatch(self):
        if not self.state.pending_order_ids:
            self.interrupt()
            return

        order_id = self.state.pending_order_ids.pop(0)
        for status in DELIVERY_PATH:
            with self.client.put(
                f"/api/orders/{order_id}/status",
                json={"status": status},
                headers=self.state.headers,
                catch_response=True,
                name="PUT /api/orders/{id}/status",
            ) as resp:
                if resp.status_code != 200:
                    # Another admin may have picked this order up first
                    resp.failure(f"Move to {status} failed: {resp.status_code} - {extract_error_detail(resp)}")
                    break

    @task
    def done(self):
        self.interrupt()


class DispatchUser(HttpUser):
    """A small pool of admins working the order queue."""

    wait_time = between(2.0, 5.0)
    weight = 1
    tasks = [DispatchJourney]
