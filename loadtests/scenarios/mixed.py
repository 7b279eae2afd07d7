"""Mixed storefront workload scenario.

Combines shopper and admin journeys with weights that model a grocery
storefront: mostly browsing, a steady stream of checkouts and a handful of
admins dispatching orders. This is the recommended scenario for load
baseline testing.
"""

from locust import HttpUser, between

from loadtests.scenarios.dispatch import DispatchJourney
from loadtests.scenarios.shopping import BrowseCatalogue, CheckoutJourney


class MixedWorkloadUser(HttpUser):
    """Realistic mixed workload.

    Browsing (60%): listing, category filters, search and product pages.
    Checkout (30%): register, save an address and place a cash-on-delivery order.
    Dispatch (10%): admins advancing pending orders to delivered.

    Spreads load over all three domains, exercising the middleware that
    routes each request to its domain context.
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        BrowseCatalogue: 6,
        CheckoutJourney: 3,
        DispatchJourney: 1,
    }
