"""Tests for session credentials and the access guard"""

from datetime import timedelta

import pytest
from fastapi import HTTPException

from querynest.config import settings
from querynest.utils.auth import create_access_token, decode_token
from querynest.utils.dependencies import authenticate, authorize_owner


def test_issue_token_sets_http_only_cookie(client):
    """Test /jwt sets the session cookie"""

    response = client.post("/jwt", json={"email": "alice@example.com"})

    assert response.status_code == 200
    assert response.json() == {"success": True}

    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith("token=")
    assert "HttpOnly" in set_cookie
    assert "SameSite=strict" in set_cookie
    assert "Secure" not in set_cookie


def test_issue_token_production_cookie_flags(client, monkeypatch):
    """Test production cookies are secure and cross-site"""

    monkeypatch.setattr(settings, "ENVIRONMENT", "production")

    response = client.post("/jwt", json={"email": "alice@example.com"})

    set_cookie = response.headers["set-cookie"]
    assert "Secure" in set_cookie
    assert "SameSite=none" in set_cookie


def test_issued_token_round_trips_identity(client):
    """Test the guard recovers the email the credential was issued for"""

    response = client.post("/jwt", json={"email": "alice@example.com", "name": "Alice"})
    token = response.cookies.get("token")

    identity = authenticate(token)

    assert identity.email == "alice@example.com"
    assert identity.claims["name"] == "Alice"
    assert identity.claims["sub"] == "alice@example.com"


def test_issue_token_requires_email(client):
    """Test identities without a valid email are rejected"""

    assert client.post("/jwt", json={"name": "Alice"}).status_code == 422
    assert client.post("/jwt", json={"email": "not-an-email"}).status_code == 422


def test_token_has_no_expiry_by_default():
    """Test tokens only expire when configured to"""

    payload = decode_token(create_access_token({"email": "alice@example.com"}))

    assert "exp" not in payload


def test_token_expiry_from_settings(monkeypatch):
    """Test ACCESS_TOKEN_EXPIRE_MINUTES adds an exp claim"""

    monkeypatch.setattr(settings, "ACCESS_TOKEN_EXPIRE_MINUTES", 30)

    payload = decode_token(create_access_token({"email": "alice@example.com"}))

    assert "exp" in payload


def test_expired_token_rejected():
    """Test an expired credential is unauthenticated"""

    token = create_access_token({"email": "alice@example.com"}, expires_delta=timedelta(seconds=-10))

    with pytest.raises(HTTPException) as exc_info:
        authenticate(token)

    assert exc_info.value.status_code == 401


def test_tampered_token_rejected():
    """Test a credential with a modified payload is unauthenticated"""

    token = create_access_token({"email": "alice@example.com"})
    header, payload, signature = token.split(".")
    forged = create_access_token({"email": "mallory@example.com"}).split(".")[1]

    with pytest.raises(HTTPException) as exc_info:
        authenticate(f"{header}.{forged}.{signature}")

    assert exc_info.value.status_code == 401


def test_token_signed_with_other_secret_rejected(monkeypatch):
    """Test a credential signed with another secret is unauthenticated"""

    monkeypatch.setattr(settings, "ACCESS_TOKEN_SECRET", "other-secret")
    token = create_access_token({"email": "alice@example.com"})
    monkeypatch.undo()

    with pytest.raises(HTTPException) as exc_info:
        authenticate(token)

    assert exc_info.value.status_code == 401


def test_missing_and_malformed_tokens_rejected():
    """Test absent or garbage credentials are unauthenticated"""

    for token in (None, "", "garbage", "a.b.c"):
        with pytest.raises(HTTPException) as exc_info:
            authenticate(token)
        assert exc_info.value.status_code == 401


def test_authorize_owner():
    """Test owner matching"""

    identity = authenticate(create_access_token({"email": "alice@example.com"}))

    assert authorize_owner(identity, "alice@example.com") is identity

    with pytest.raises(HTTPException) as exc_info:
        authorize_owner(identity, "bob@example.com")

    assert exc_info.value.status_code == 403


def test_protected_route_without_cookie(client):
    """Test guarded routes reject anonymous callers"""

    response = client.get("/recommendation")

    assert response.status_code == 401
    assert response.json()["detail"] == "Unauthorized Access"


def test_protected_route_with_issued_cookie(client):
    """Test the cookie from /jwt opens guarded routes"""

    token = client.post("/jwt", json={"email": "alice@example.com"}).cookies.get("token")
    client.cookies.set("token", token)

    response = client.get("/recommendation")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.parametrize("method", ["post", "get"])
def test_logout_clears_cookie(client, method):
    """Test /logout expires the session cookie"""

    response = getattr(client, method)("/logout")

    assert response.status_code == 200
    assert response.json() == {"success": True}

    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith("token=")
    assert "Max-Age=0" in set_cookie


def test_logout_without_session_is_idempotent(client):
    """Test logging out twice succeeds both times"""

    assert client.post("/logout", json={"email": "alice@example.com"}).status_code == 200
    assert client.post("/logout").status_code == 200


def test_issue_token_ignores_posted_registered_claims(client):
    """Test registered claims in the posted identity cannot spoil the session"""

    response = client.post(
        "/jwt",
        json={"email": "alice@example.com", "sub": 42, "aud": "web", "exp": "soon", "iss": "me"}
    )
    assert response.status_code == 200

    client.cookies.set("token", response.cookies.get("token"))

    assert client.get("/recommendation").status_code == 200

    identity = authenticate(response.cookies.get("token"))
    assert identity.email == "alice@example.com"
    assert identity.claims["sub"] == "alice@example.com"
    assert "aud" not in identity.claims
    assert "exp" not in identity.claims


def test_write_guard_uses_session_cookie_scheme(client):
    """Test optional write guards are documented as cookie-secured"""

    paths = client.get("/openapi.json").json()["paths"]

    assert {"APIKeyCookie": []} in paths["/queries"]["post"]["security"]
    assert {"APIKeyCookie": []} in paths["/recommendation"]["post"]["security"]
