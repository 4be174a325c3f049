"""Unit tests for configuration."""

from __future__ import annotations

import dataclasses

import pytest

from twist.sdk.core import BATCH_CHUNK_SIZE, ApiVersion, ClientConfig, get_api_base_uri


class TestGetApiBaseUri:
    def test_default(self):
        assert get_api_base_uri() == "https://api.twist.com/api/v3/"

    def test_custom_domain_trailing_slash(self):
        assert get_api_base_uri("https://staging.example.com/", "v4") == (
            "https://staging.example.com/api/v4/"
        )
        assert get_api_base_uri("https://staging.example.com", ApiVersion.V4) == (
            "https://staging.example.com/api/v4/"
        )

    def test_unknown_version(self):
        with pytest.raises(ValueError):
            get_api_base_uri(None, "v9")


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig(api_token="t")
        assert config.timeout == 30.0
        assert config.max_retries == 3
        assert config.version is ApiVersion.V3
        assert config.base_uri() == "https://api.twist.com/api/v3/"
        assert config.base_uri("v4") == "https://api.twist.com/api/v4/"

    def test_version_coerced(self):
        config = ClientConfig(api_token="t", version="v4")  # type: ignore[arg-type]
        assert config.version is ApiVersion.V4

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"api_token": ""},
            {"api_token": "t", "timeout": 0},
            {"api_token": "t", "max_retries": -1},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            ClientConfig(**kwargs)

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ClientConfig(api_token="t").timeout = 1  # type: ignore[misc]

    def test_batch_chunk_size(self):
        assert BATCH_CHUNK_SIZE == 10
