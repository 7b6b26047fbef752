"""
Unit tests for URL helpers.
"""

import pytest

from afero_client.errors import EncodingFailureError
from afero_client.utils.url_utils import build_path, encode_path_component, with_expansions


class TestEncodePathComponent:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("abc-123", "abc-123"),
            ("foo@bar.com", "foo@bar.com"),
            ("foo+1@bar.com", "foo+1@bar.com"),
            ("a/b", "a%2Fb"),
            ("a b", "a%20b"),
            ("a?b#c", "a%3Fb%23c"),
            ("café", "caf%C3%A9"),
        ],
    )
    def test_encoding(self, value, expected):
        assert encode_path_component(value) == expected

    @pytest.mark.parametrize("value", ["", None, 42])
    def test_rejects_non_strings_and_empty(self, value):
        with pytest.raises(EncodingFailureError):
            encode_path_component(value, "account_id")

    def test_error_names_parameter(self):
        with pytest.raises(EncodingFailureError, match="email"):
            encode_path_component("", "email")


class TestWithExpansions:
    def test_no_params(self):
        assert with_expansions("/v1/users/me") == "/v1/users/me"
        assert with_expansions("/v1/users/me", [], {}) == "/v1/users/me"

    def test_expansions_joined_with_commas(self):
        assert (
            with_expansions("/v1/accounts/a1/devices", ["state", "tags", "attributes"])
            == "/v1/accounts/a1/devices?expansions=state,tags,attributes"
        )

    def test_additional_params(self):
        assert (
            with_expansions("/v1/x", ["state"], {"locale": "en_US", "imageSize": "2x"})
            == "/v1/x?expansions=state&locale=en_US&imageSize=2x"
        )

    def test_appends_to_existing_query(self):
        assert with_expansions("/v1/x?a=1", None, {"verified": "true"}) == "/v1/x?a=1&verified=true"

    def test_values_are_encoded(self):
        assert with_expansions("/v1/x", None, {"q": "a b&c"}) == "/v1/x?q=a%20b%26c"


class TestBuildPath:
    def test_fills_placeholders(self):
        path = build_path(
            "/v1/accounts/{account_id}/devices/{device_id}", account_id="a1", device_id="d 1"
        )

        assert path == "/v1/accounts/a1/devices/d%201"

    def test_invalid_value(self):
        with pytest.raises(EncodingFailureError):
            build_path("/v1/accounts/{account_id}", account_id="")
