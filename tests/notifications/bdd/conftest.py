"""Shared BDD fixtures and step definitions for notification scenarios.

Scenarios drive the HTTP surface against the in-memory brewery API and the
recording email adapter.
"""

import pytest
from fastapi.testclient import TestClient
from notifications.api.dependencies import get_catalog_client
from notifications.config import Settings
from pytest_bdd import given, parsers, then

ADMIN_EMAIL = "admin@brewery.test"


@pytest.fixture()
def api_client(brewery_api, catalog, email_adapter):
    from app import create_app

    settings = Settings(environment="test", admin_email=ADMIN_EMAIL)
    app = create_app(settings, email_channel=email_adapter)
    app.dependency_overrides[get_catalog_client] = lambda: catalog
    return TestClient(app)


def _user(brewery_api, user_id):
    return next(u for u in brewery_api.users if u["id"] == user_id)


# ---------------------------------------------------------------------------
# Given steps — upstream data
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the product {product_id:d} "{name}" priced {price:d} with bitterness "{bitterness}"'))
def product_with_bitterness(brewery_api, product_id, name, price, bitterness):
    brewery_api.products[product_id] = {
        "id": product_id,
        "name": name,
        "price": price,
        "tasteProfile": {"bitterness": bitterness},
    }


@given(parsers.cfparse('the product {product_id:d} "{name}" priced {price:d} with {stock:d} in stock'))
def product_with_stock(brewery_api, product_id, name, price, stock):
    brewery_api.products[product_id] = {
        "id": product_id,
        "name": name,
        "price": price,
        "stockQuantity": stock,
    }


@given(parsers.cfparse('user {user_id:d} with email "{email}" and no taste preferences'))
def user_without_preferences(brewery_api, user_id, email):
    brewery_api.users.append({"id": user_id, "email": email, "tasteProfile": {}})


@given(parsers.cfparse('user {user_id:d} with email "{email}" who likes bitterness "{bitterness}"'))
def user_with_bitterness(brewery_api, user_id, email, bitterness):
    brewery_api.users.append({"id": user_id, "email": email, "tasteProfile": {"bitterness": bitterness}})


@given(parsers.cfparse('user {user_id:d} changes their taste to bitterness "{bitterness}"'))
def user_changes_taste(brewery_api, user_id, bitterness):
    _user(brewery_api, user_id)["tasteProfile"] = {"bitterness": bitterness}


@given(parsers.cfparse('user {user_id:d} ordered "{product}"'))
@given(parsers.cfparse('user {user_id:d} also ordered "{product}" again'))
def user_ordered(brewery_api, user_id, product):
    brewery_api.orders.append(
        {
            "id": len(brewery_api.orders) + 1,
            "user": str(user_id),
            "items": [{"product": product, "quantity": 1, "priceAtOrder": 9}],
        }
    )


@given(parsers.cfparse('deliveries to "{address}" fail with "{reason}"'))
def deliveries_fail(email_adapter, address, reason):
    email_adapter.fail_for(address, reason)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the request succeeds")
def request_succeeds(response):
    assert response.status_code == 200, response.text


@then(parsers.cfparse("the request fails with status {status_code:d}"))
def request_fails(response, status_code):
    assert response.status_code == status_code


@then(parsers.cfparse("{count:d} emails were sent"))
def emails_sent(email_adapter, count):
    assert len(email_adapter.sent_emails) == count


@then("no emails were sent")
def no_emails_sent(email_adapter):
    assert email_adapter.sent_emails == []


@then(parsers.cfparse('an email was sent to "{address}"'))
def email_sent_to(email_adapter, address):
    assert address in {e["to"] for e in email_adapter.sent_emails}


def _assert_mentions(email_adapter, address, text):
    email = next(e for e in email_adapter.sent_emails if e["to"] == address)
    assert text in email["subject"] + email["body"]


@then(parsers.cfparse('the email to "{address}" mentions "{text}"'))
def email_mentions(email_adapter, address, text):
    _assert_mentions(email_adapter, address, text)


@then(parsers.cfparse('the email to the admin mentions "{text}"'))
def admin_email_mentions(email_adapter, text):
    _assert_mentions(email_adapter, ADMIN_EMAIL, text)
