"""Tests for applying credentials to requests."""

import pytest
import requests

from jwl.api.authorization import AccessToken, ApiToken, authorize
from jwl.config import Context


class TestAuthorize:
    """Test authorize()."""

    def test_api_token_uses_basic_auth(self):
        """Test username/api token become HTTP Basic credentials."""
        request = authorize(requests.Request("GET", "https://jira.example.com"), ApiToken("u", "t"))

        prepared = request.prepare()
        assert prepared.headers["Authorization"] == "Basic dTp0"

    def test_access_token_uses_bearer_header(self):
        """Test access token is sent as a bearer token."""
        request = authorize(requests.Request("GET", "https://jira.example.com"), AccessToken("abc"))

        prepared = request.prepare()
        assert prepared.headers["Authorization"] == "Bearer abc"

    def test_returns_same_request(self):
        request = requests.Request("GET", "https://jira.example.com")
        assert authorize(request, AccessToken("abc")) is request

    def test_unsupported_authorization(self):
        with pytest.raises(TypeError):
            authorize(requests.Request("GET", "https://jira.example.com"), ("u", "t"))


class TestCredentialRepr:
    """Test secrets stay out of repr output."""

    def test_api_token_hidden(self):
        text = repr(ApiToken("u", "s3cret"))

        assert "s3cret" not in text
        assert "u" in text

    def test_access_token_hidden(self):
        assert "s3cret" not in repr(AccessToken("s3cret"))

    def test_context_repr_hides_token(self):
        context = Context(AccessToken("s3cret"), "https://jira.example.com")

        assert "s3cret" not in repr(context)
