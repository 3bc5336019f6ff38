"""Integration tests for Promocode API endpoints."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import patch

import pytest

from modules.promocodes.models import Promocode
from modules.promocodes.repositories.django_repository import PromocodeDjangoRepository

pytestmark = pytest.mark.integration

PROMOCODES_URL = "/api/v1/promocodes/"


@pytest.fixture()
def payload():
    return {
        "title": "SPRING20",
        "description": "Twenty percent off",
        "type": "percent",
        "rate": "20",
    }


@pytest.fixture()
def existing_promocode():
    promocode = Promocode(
        title="SPRING20", description="Existing", type="percent", rate=Decimal("20")
    )
    promocode.save()
    return promocode


class TestPromocodeCreate:
    def test_create_success(self, api_client, payload):
        response = api_client.post(PROMOCODES_URL, payload, format="json")

        assert response.status_code == 201
        assert response.data["title"] == "SPRING20"
        assert response.data["rate"] == "20.00"

    def test_flat_rate_is_rounded(self, api_client, payload):
        payload.update(title="FIVEOFF", type="flat", rate="4.995")

        response = api_client.post(PROMOCODES_URL, payload, format="json")

        assert response.status_code == 201
        assert Promocode.objects.get(title="FIVEOFF").rate == Decimal("5.00")

    def test_invalid_fields(self, api_client, payload):
        payload.update(title="Spring 20", rate="20.5")

        response = api_client.post(PROMOCODES_URL, payload, format="json")

        assert response.status_code == 400
        assert response.data["errors"] == [
            "Invalid title: Promo code title must be uppercase only.",
            "Invalid title: Promo code title must not contain spaces.",
            "Invalid rate: When the rate is a percent, the rate must be an "
            "integer between 0 and 100.",
        ]

    def test_flat_rate_too_large_for_column(self, api_client, payload):
        payload.update(title="BIG", type="flat", rate="123456789012.5")

        response = api_client.post(PROMOCODES_URL, payload, format="json")

        assert response.status_code == 400
        assert response.data["errors"] == [
            "Invalid rate: Rate must be less than 100000000."
        ]
        assert Promocode.objects.count() == 0
        assert api_client.get(PROMOCODES_URL).status_code == 200

    def test_title_too_long(self, api_client, payload):
        payload["title"] = "A" * 51

        response = api_client.post(PROMOCODES_URL, payload, format="json")

        assert response.status_code == 400
        assert response.data["errors"] == [
            "Invalid title: Title must be 50 characters or less."
        ]
        assert Promocode.objects.count() == 0

    def test_duplicate_title(self, api_client, payload, existing_promocode):
        response = api_client.post(PROMOCODES_URL, payload, format="json")

        assert response.status_code == 409
        assert response.data["detail"] == "Invalid title: title must be unique."
        assert Promocode.objects.count() == 1

    def test_duplicate_title_caught_by_unique_index(
        self, api_client, payload, existing_promocode
    ):
        with patch.object(PromocodeDjangoRepository, "get_by_title", return_value=None):
            response = api_client.post(PROMOCODES_URL, payload, format="json")

        assert response.status_code == 409
        assert Promocode.objects.count() == 1


class TestPromocodeRead:
    def test_list(self, api_client, existing_promocode):
        response = api_client.get(PROMOCODES_URL)

        assert response.status_code == 200
        assert [p["title"] for p in response.data] == ["SPRING20"]

    def test_retrieve_by_title(self, api_client, existing_promocode):
        response = api_client.get(f"{PROMOCODES_URL}SPRING20/")

        assert response.status_code == 200
        assert response.data["description"] == "Existing"

    def test_retrieve_unknown_title(self, api_client):
        response = api_client.get(f"{PROMOCODES_URL}NOPE/")
        assert response.status_code == 404
