"""FreshCart Load Testing - Locust entry point.

Discovers all user classes from the scenarios package. Run from the
repository root with ``src`` on the path so the storefront helpers import.

Usage:
    # All scenarios (web UI):
    PYTHONPATH=src locust -f loadtests/locustfile.py --host http://localhost:8000

    # Mixed workload only:
    PYTHONPATH=src locust -f loadtests/locustfile.py MixedWorkloadUser

    # Headless (CI mode):
    PYTHONPATH=src locust -f loadtests/locustfile.py MixedWorkloadUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

import requests
from locust import events

# Import all user classes so Locust discovers them
from loadtests.scenarios.dispatch import DispatchUser  # noqa: F401
from loadtests.scenarios.mixed import MixedWorkloadUser  # noqa: F401
from loadtests.scenarios.shopping import ShopperUser  # noqa: F401
from storefront.client import extract_error_detail

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Shows the API's error body, e.g. "Cannot transition from pending to
    delivered", instead of just "400".
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Log a marker when the load test begins and warn on an empty catalogue."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    if not environment.host:
        print()
        return
    try:
        resp = requests.get(f"{environment.host}/api/products", timeout=5)
        count = len(resp.json()) if resp.status_code == 200 else 0
        print(f"[LOADTEST] Active products: {count}")
        if count == 0:
            print("[LOADTEST] Catalogue is empty; run `python src/manage.py seed` first")
    except requests.RequestException as e:
        print(f"[LOADTEST] Could not reach the API: {e}")
    print()


@events.test_stop.add_listener
def on_test_stop(environment, **_kwargs):
    """Print a short summary when the test ends."""
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}")
    total = environment.stats.total
    print(f"[LOADTEST] Requests: {total.num_requests}, failures: {total.num_failures}")
    print()
