"""
Normalization Tests

Tests for the mapping from the public create-collection body to the deploy
service payload, including the defaulting rules for symbol, price and
maxMints.
"""

import pytest

from relay.app.proxy.normalize import (
    DEFAULT_MAX_SUPPLY,
    DEFAULT_PRICE,
    DEFAULT_SYMBOL,
    MISSING_CREATOR_MESSAGE,
    normalize_collection_request,
)


class TestRequiredField:
    """creatorAddress presence check"""

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"creatorAddress": None},
            {"creatorAddress": ""},
            {"creatorAddress": 0},
            {"creatorAddress": False},
            {"hash": "0x01", "fid": 7, "symbol": "ABC"},
        ],
    )
    def test_missing_or_falsy_creator(self, body):
        result = normalize_collection_request(body)

        assert not result.ok
        assert result.error == MISSING_CREATOR_MESSAGE
        assert result.payload is None

    def test_creator_value_unchanged(self):
        """The address is only renamed, never altered"""
        address = "  0xAbC123 "
        result = normalize_collection_request({"creatorAddress": address})

        assert result.ok
        assert result.payload.recipient == address


class TestDefaults:
    """Defaulting policy per field"""

    def test_all_defaults(self):
        result = normalize_collection_request({"creatorAddress": "0xABC"})

        assert result.payload.to_json() == {
            "symbol": DEFAULT_SYMBOL,
            "price": DEFAULT_PRICE,
            "recipient": "0xABC",
            "max_supply": DEFAULT_MAX_SUPPLY,
            "manual_verify": False,
        }

    def test_manual_verify_set_by_normalizer(self):
        """manual_verify is set explicitly, so to_json keeps it without help"""
        payload = normalize_collection_request({"creatorAddress": "0xABC"}).payload

        assert "manual_verify" in payload.model_fields_set
        assert payload.to_json()["manual_verify"] is False

    def test_symbol_null_uses_default(self):
        result = normalize_collection_request({"creatorAddress": "0xABC", "symbol": None})

        assert result.payload.symbol == "FCNFT"

    def test_symbol_empty_string_kept(self):
        """Only absent or null trigger the default"""
        result = normalize_collection_request({"creatorAddress": "0xABC", "symbol": ""})

        assert result.payload.symbol == ""

    def test_max_mints_null_uses_default(self):
        result = normalize_collection_request({"creatorAddress": "0xABC", "maxMints": None})

        assert result.payload.max_supply == 0

    def test_max_mints_zero_kept(self):
        result = normalize_collection_request({"creatorAddress": "0xABC", "maxMints": 0})

        assert result.payload.max_supply == 0

    def test_price_absent_uses_default(self):
        result = normalize_collection_request({"creatorAddress": "0xABC"})

        assert result.payload.price == "0.00005 ether"

    def test_price_null_is_kept(self):
        result = normalize_collection_request({"creatorAddress": "0xABC", "price": None})

        payload = result.payload.to_json()
        assert "price" in payload
        assert payload["price"] is None

    def test_defaults_evaluated_per_call(self):
        """A provided value in one call does not leak into the next"""
        normalize_collection_request({"creatorAddress": "0x1", "symbol": "ONE", "price": "1 ether"})
        result = normalize_collection_request({"creatorAddress": "0x2"})

        assert result.payload.symbol == DEFAULT_SYMBOL
        assert result.payload.price == DEFAULT_PRICE


class TestRenames:
    """Key renames and dropped fields"""

    def test_renamed_fields(self):
        result = normalize_collection_request({
            "creatorAddress": "0xABC",
            "collectionName": "Frames",
            "baseURI": "ipfs://base/",
            "maxMints": 10,
        })

        payload = result.payload.to_json()
        assert payload["name"] == "Frames"
        assert payload["base_uri"] == "ipfs://base/"
        assert payload["max_supply"] == 10
        assert payload["recipient"] == "0xABC"

    def test_absent_optional_fields_are_omitted(self):
        payload = normalize_collection_request({"creatorAddress": "0xABC"}).payload.to_json()

        assert "base_uri" not in payload
        assert "name" not in payload

    def test_null_optional_fields_are_forwarded(self):
        payload = normalize_collection_request({
            "creatorAddress": "0xABC",
            "collectionName": None,
            "baseURI": None,
        }).payload.to_json()

        assert payload["name"] is None
        assert payload["base_uri"] is None

    def test_hash_and_fid_not_forwarded(self):
        payload = normalize_collection_request({
            "creatorAddress": "0xABC",
            "hash": "0xdeadbeef",
            "fid": 99,
        }).payload.to_json()

        assert "hash" not in payload
        assert "fid" not in payload
        assert set(payload) == {"symbol", "price", "recipient", "max_supply", "manual_verify"}

    def test_input_not_mutated(self):
        body = {"creatorAddress": "0xABC", "symbol": None}
        normalize_collection_request(body)

        assert body == {"creatorAddress": "0xABC", "symbol": None}

    def test_key_order_matches_deploy_service(self):
        payload = normalize_collection_request({
            "symbol": "FRM",
            "creatorAddress": "0xABC",
            "collectionName": "Frames",
            "baseURI": "ipfs://base/",
        }).payload.to_json()

        assert list(payload) == [
            "base_uri", "name", "symbol", "price", "recipient", "max_supply", "manual_verify",
        ]
