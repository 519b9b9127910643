"""
Tests for admin token extraction and verification
"""

from dataclasses import replace

import pytest

from auth import ExtractAdminToken, VerifyAdminToken
from exceptions import UnauthorizedError


def test_header_token_wins():
    """Test x-admin-token takes precedence over Authorization"""
    assert ExtractAdminToken("from-header", "Bearer from-bearer") == "from-header"


def test_bearer_token():
    """Test bearer tokens are accepted case-insensitively"""
    assert ExtractAdminToken(None, "Bearer abc") == "abc"
    assert ExtractAdminToken(None, "bearer abc") == "abc"


def test_other_schemes_ignored():
    """Test non-bearer Authorization headers supply no token"""
    assert ExtractAdminToken(None, "Basic dXNlcjpwYXNz") == ""
    assert ExtractAdminToken(None, None) == ""


def test_verify_gate_disabled(config):
    """Test no token is needed when ADMIN_TOKEN is not configured"""
    VerifyAdminToken(config, None, None)


def test_verify_accepts_matching_token(config):
    """Test the configured token is accepted from either header"""
    gated = replace(config, admin_token="s3cret")

    VerifyAdminToken(gated, "s3cret", None)
    VerifyAdminToken(gated, None, "Bearer s3cret")


@pytest.mark.parametrize("x_admin_token, authorization", [
    (None, None),
    ("guess", None),
    (None, "Bearer guess"),
])
def test_verify_rejects_bad_token(config, x_admin_token, authorization):
    """Test missing or wrong tokens raise UnauthorizedError"""
    gated = replace(config, admin_token="s3cret")

    with pytest.raises(UnauthorizedError) as exc_info:
        VerifyAdminToken(gated, x_admin_token, authorization)

    assert exc_info.value.status_code == 401
    assert exc_info.value.ToResponseBody() == {"error": "Unauthorized"}
