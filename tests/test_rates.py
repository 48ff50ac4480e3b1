"""Tests for the outbound rate lookup client."""

import pytest
import requests

from order_total_service.app.rates import RateLookupClient, RateLookupError

from .conftest import RATE_URL, rate_response


@pytest.fixture
def rate_client():
    return RateLookupClient(RATE_URL, timeout=2.0)


class TestRateLookupClient:

    def test_posts_raw_zip_with_timeout(self, rate_client, mock_rate_post):
        assert rate_client.find_rate("02134") == 0.05
        mock_rate_post.assert_called_once_with(RATE_URL, data=b"02134", timeout=2.0)

    def test_surrounding_whitespace_ignored(self, rate_client, mock_rate_post):
        mock_rate_post.return_value = rate_response(text="0.0725\n")
        assert rate_client.find_rate("98101") == 0.0725

    @pytest.mark.parametrize("status_code", [201, 204, 404, 500])
    def test_non_200_status(self, rate_client, mock_rate_post, status_code):
        mock_rate_post.return_value = rate_response(status_code=status_code)
        with pytest.raises(RateLookupError) as excinfo:
            rate_client.find_rate("00000")
        assert excinfo.value.zip_code == "00000"

    @pytest.mark.parametrize("text", ["", "seven percent", "nan", "inf"])
    def test_unusable_body(self, rate_client, mock_rate_post, text):
        mock_rate_post.return_value = rate_response(text=text)
        with pytest.raises(RateLookupError):
            rate_client.find_rate("10001")

    @pytest.mark.parametrize("exc", [requests.exceptions.ConnectionError("refused"), requests.exceptions.Timeout("slow")])
    def test_request_errors(self, rate_client, mock_rate_post, exc):
        mock_rate_post.side_effect = exc
        with pytest.raises(RateLookupError) as excinfo:
            rate_client.find_rate("10001")
        assert "request error" in excinfo.value.reason
