"""Integration tests for Product API endpoints.

Covers:
- Create via POST /api/v1/products/ (201, 400 with every message).
- Query-by-example on the list endpoint.
- Retrieve by id (200, 404).
- Distinct categories and types.
"""

from __future__ import annotations

import uuid

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration

PRODUCTS_URL = "/api/v1/products/"


@pytest.fixture()
def payload(product_data):
    """JSON-ready product payload."""
    return {**product_data, "price": "59.99"}


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_create_success(self, api_client, payload):
        response = api_client.post(PRODUCTS_URL, payload, format="json")

        assert response.status_code == 201
        assert response.data["name"] == "Lightweight Golf Shoe"
        assert response.data["price"] == "59.99"
        assert Product.objects.filter(id=response.data["id"]).exists()

    def test_create_normalises_price_and_release_date(self, api_client, payload):
        payload.update(price="19.999", release_date="06-31-2020")

        response = api_client.post(PRODUCTS_URL, payload, format="json")

        assert response.status_code == 201
        assert response.data["price"] == "19.99"
        assert response.data["release_date"] == "06-30-2020"

    def test_create_invalid_lists_every_error(self, api_client, payload):
        payload.update(name="ab", demographic="Adults", brand=None)

        response = api_client.post(PRODUCTS_URL, payload, format="json")

        assert response.status_code == 400
        assert response.data["errors"] == [
            "Name should be between 3 and 100 characters.",
            "Invalid demographic.",
            "Brand is required.",
        ]
        assert response.data["detail"] == ", ".join(response.data["errors"])
        assert Product.objects.count() == 0

    def test_create_missing_fields(self, api_client):
        response = api_client.post(PRODUCTS_URL, {"name": "Only A Name"}, format="json")

        assert response.status_code == 400
        assert "Release date is required." in response.data["errors"]
        assert "Active field is required." in response.data["errors"]

    def test_create_uncoercible_price(self, api_client, payload):
        payload["price"] = "cheap"

        response = api_client.post(PRODUCTS_URL, payload, format="json")

        assert response.status_code == 400
        assert "detail" in response.data

    def test_create_non_object_body(self, api_client):
        response = api_client.post(PRODUCTS_URL, ["not", "an", "object"], format="json")
        assert response.status_code == 400

    def test_create_price_too_large_for_column(self, api_client, payload):
        payload["price"] = "12345678901.239"

        response = api_client.post(PRODUCTS_URL, payload, format="json")

        assert response.status_code == 400
        assert response.data["errors"] == ["Price must be less than 100000000."]
        assert Product.objects.count() == 0
        assert api_client.get(PRODUCTS_URL).status_code == 200

    def test_create_quantity_too_large_for_column(self, api_client, payload):
        payload["quantity"] = 2147483648

        response = api_client.post(PRODUCTS_URL, payload, format="json")

        assert response.status_code == 400
        assert response.data["errors"] == ["Quantity cannot exceed 2147483647."]
        assert Product.objects.count() == 0

    def test_create_accepts_long_free_text(self, api_client, payload):
        payload.update(brand="b" * 500, style_number="s" * 200, img_src="i" * 2000)

        response = api_client.post(PRODUCTS_URL, payload, format="json")

        assert response.status_code == 201
        assert Product.objects.get().brand == "b" * 500


# ===========================================================================
# LIST (query by example)
# ===========================================================================


class TestProductList:
    def test_list_empty(self, api_client):
        response = api_client.get(PRODUCTS_URL)
        assert response.status_code == 200
        assert response.data == []

    def test_list_all(self, api_client, make_product):
        make_product(name="Alpha Shoe")
        make_product(name="Beta Shoe")

        response = api_client.get(PRODUCTS_URL)

        assert [p["name"] for p in response.data] == ["Alpha Shoe", "Beta Shoe"]

    def test_filters_are_combined(self, api_client, make_product):
        make_product(name="Golf Men", category="Golf", demographic="Men")
        make_product(name="Golf Kids", category="Golf", demographic="Kids")
        make_product(name="Soccer Men", category="Soccer", demographic="Men")

        response = api_client.get(PRODUCTS_URL, {"category": "Golf", "demographic": "Men"})

        assert [p["name"] for p in response.data] == ["Golf Men"]

    def test_boolean_filter(self, api_client, make_product):
        make_product(name="On Sale", active=True)
        make_product(name="Retired", active=False)

        response = api_client.get(PRODUCTS_URL, {"active": "false"})

        assert [p["name"] for p in response.data] == ["Retired"]

    def test_unknown_parameters_are_ignored(self, api_client, make_product):
        make_product()

        response = api_client.get(PRODUCTS_URL, {"colour": "red"})

        assert len(response.data) == 1

    def test_bad_filter_value(self, api_client):
        response = api_client.get(PRODUCTS_URL, {"quantity": "lots"})
        assert response.status_code == 400

    @pytest.mark.parametrize(
        "params", [{"price": "1E+30"}, {"price": "NaN"}, {"quantity": "99999999999"}]
    )
    def test_filter_value_outside_column_range(self, api_client, params):
        response = api_client.get(PRODUCTS_URL, params)
        assert response.status_code == 400


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestProductRetrieve:
    def test_retrieve(self, api_client, make_product):
        product = make_product()

        response = api_client.get(f"{PRODUCTS_URL}{product.id}/")

        assert response.status_code == 200
        assert response.data["id"] == str(product.id)

    def test_retrieve_unknown(self, api_client):
        missing = uuid.uuid4()

        response = api_client.get(f"{PRODUCTS_URL}{missing}/")

        assert response.status_code == 404
        assert response.data["detail"] == (
            f"Get by id failed, it does not exist in the database: {missing}"
        )

    def test_retrieve_malformed_id(self, api_client):
        response = api_client.get(f"{PRODUCTS_URL}not-a-uuid/")
        assert response.status_code == 404


# ===========================================================================
# DISTINCT
# ===========================================================================


class TestDistinctEndpoints:
    def test_categories(self, api_client, make_product):
        make_product(category="Golf")
        make_product(category="Soccer")
        make_product(category="Golf")

        response = api_client.get(f"{PRODUCTS_URL}categories/")

        assert response.status_code == 200
        assert response.data == ["Golf", "Soccer"]

    def test_types(self, api_client, make_product):
        make_product(type="Shoe")
        make_product(type="Hat")

        response = api_client.get(f"{PRODUCTS_URL}types/")

        assert response.status_code == 200
        assert response.data == ["Hat", "Shoe"]
