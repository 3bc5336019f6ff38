import pytest

from config.settings import mask_sensitive_data

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_card_number_masked(self):
        event_dict = {"event": "test", "data": "card 4111111111111111 declined"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "4111111111111111" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_spaced_card_number_masked(self):
        event_dict = {"event": "test", "data": "4111 1111 1111 1111"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "1111 1111" not in result["data"]

    def test_cvv_masked(self):
        event_dict = {"event": "test", "data": "cvv=123"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_password_masked(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]

    def test_token_masked(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]

    def test_non_sensitive_data_unchanged(self):
        event_dict = {
            "event": "purchase.created",
            "purchase_id": "0190d0e4-7c4b-7d1a-9b7e-3f5c2a1d4e6f",
            "item_count": 3,
        }
        result = mask_sensitive_data(None, None, dict(event_dict))
        assert result == event_dict
