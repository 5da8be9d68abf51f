"""Integration tests for the billing portal endpoint."""

import stripe

from stripe_factories import customer_values, stripe_customer_list


def portal_session(url: str = "https://billing.stripe.com/p/session/test_123") -> stripe.billing_portal.Session:
    return stripe.billing_portal.Session.construct_from({"id": "bps_123", "object": "billing_portal.session", "url": url}, "sk_test_dummy")


class TestCreateCustomerPortal:
    def test_known_customer_gets_portal_url(self, client, mocker):
        mocker.patch.object(stripe.Customer, "list_async", new_callable=mocker.AsyncMock, return_value=stripe_customer_list(customer_values()))
        create_portal = mocker.patch.object(
            stripe.billing_portal.Session, "create_async", new_callable=mocker.AsyncMock, return_value=portal_session()
        )

        response = client.post(
            "/create-customer-portal",
            json={"customerEmail": "buyer@example.com", "returnUrl": "https://shop.example.com/orders"},
        )

        assert response.status_code == 200
        assert response.json() == {"url": "https://billing.stripe.com/p/session/test_123"}
        create_portal.assert_awaited_once_with(customer="cus_123", return_url="https://shop.example.com/orders")

    def test_return_url_defaults_to_frontend(self, client, mocker):
        mocker.patch.object(stripe.Customer, "list_async", new_callable=mocker.AsyncMock, return_value=stripe_customer_list(customer_values()))
        create_portal = mocker.patch.object(
            stripe.billing_portal.Session, "create_async", new_callable=mocker.AsyncMock, return_value=portal_session()
        )

        client.post("/create-customer-portal", json={"customerEmail": "buyer@example.com"})

        assert create_portal.await_args.kwargs["return_url"] == "https://shop.example.com"

    def test_unknown_customer_is_404(self, client, mocker):
        mocker.patch.object(stripe.Customer, "list_async", new_callable=mocker.AsyncMock, return_value=stripe_customer_list())
        create_portal = mocker.patch.object(stripe.billing_portal.Session, "create_async", new_callable=mocker.AsyncMock)

        response = client.post("/create-customer-portal", json={"customerEmail": "nobody@example.com"})

        assert response.status_code == 404
        assert response.json() == {"error": "Customer not found", "type": "customer_not_found"}
        create_portal.assert_not_awaited()

    def test_provider_error_is_500(self, client, mocker):
        mocker.patch.object(stripe.Customer, "list_async", new_callable=mocker.AsyncMock, return_value=stripe_customer_list(customer_values()))
        mocker.patch.object(
            stripe.billing_portal.Session,
            "create_async",
            new_callable=mocker.AsyncMock,
            side_effect=stripe.InvalidRequestError("No configuration provided", param="configuration"),
        )

        response = client.post("/create-customer-portal", json={"customerEmail": "buyer@example.com"})

        assert response.status_code == 500
        assert response.json()["type"] == "portal_creation_failed"
        assert "No configuration provided" in response.json()["error"]
