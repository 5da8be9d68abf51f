"""Builders for the Stripe objects the API would return, used as mock return values."""

import stripe

API_KEY = "sk_test_dummy"


def customer_values(customer_id: str = "cus_123", email: str = "buyer@example.com", name: str = None) -> dict:
    return {"id": customer_id, "object": "customer", "email": email, "name": name}


def stripe_customer(**kwargs) -> stripe.Customer:
    return stripe.Customer.construct_from(customer_values(**kwargs), API_KEY)


def stripe_customer_list(*customers: dict) -> stripe.ListObject:
    return stripe.ListObject.construct_from({"object": "list", "data": list(customers)}, API_KEY)


def line_items(*items: dict) -> dict:
    return {"object": "list", "data": list(items)}


def checkout_session_values(**overrides) -> dict:
    values = {
        "id": "cs_test_123",
        "object": "checkout.session",
        "url": "https://checkout.stripe.com/c/pay/cs_test_123",
        "payment_status": "paid",
        "customer": "cus_123",
        "customer_email": None,
        "customer_details": {"email": "buyer@example.com", "name": "Ada Buyer"},
        "amount_total": 3998,
        "currency": "usd",
        "created": 1700000000,
        "metadata": {"customer_id": "cus_123", "customer_email": "buyer@example.com", "item_count": "1"},
        "shipping_details": {"address": {"line1": "1 Main St", "city": "Austin", "country": "US", "postal_code": "73301"}},
    }
    values.update(overrides)
    return values


def stripe_checkout_session(**overrides) -> stripe.checkout.Session:
    return stripe.checkout.Session.construct_from(checkout_session_values(**overrides), API_KEY)
