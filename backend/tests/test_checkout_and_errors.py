import pytest
from conftest import API, OTHER, OWNER


from store_admin.api import deps
from store_admin.core.identity import IdentityContext
from store_admin.main import app


def test_checkout_preflight_is_permissive(client, store):
    response = client.options(
        f"{API}/{store['id']}/checkout",
        headers={
            "Origin": "https://some-storefront.example.org",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.json() == {}
    assert response.headers["access-control-allow-origin"] == "*"
    assert "POST" in response.headers["access-control-allow-methods"]
    assert response.headers["access-control-allow-headers"] == "Content-Type, Authorization"


def test_non_json_body_is_invalid_request(client, store):
    response = client.post(
        f"{API}/{store['id']}/sizes",
        content=b"name=Small",
        headers={"X-User-Id": OWNER, "Content-Type": "application/json"},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Invalid Request"


def test_identity_can_be_injected(client, store):
    app.dependency_overrides[deps.get_identity] = lambda: IdentityContext(user_id=OWNER)
    try:
        response = client.post(f"{API}/{store['id']}/sizes", json={"name": "Small", "value": "S"})
    finally:
        del app.dependency_overrides[deps.get_identity]

    assert response.status_code == 200
    assert response.json()["storeId"] == store["id"]


MALFORMED = {"content": b"{not json", "headers": {"Content-Type": "application/json"}}


def _malformed(client, method, url, user_id=None):
    headers = dict(MALFORMED["headers"])
    if user_id:
        headers["X-User-Id"] = user_id
    return client.request(method, url, content=MALFORMED["content"], headers=headers)


@pytest.mark.parametrize("user_id, expected", [(None, 401), (OTHER, 403)])
def test_malformed_create_body_does_not_hide_auth_failure(client, store, user_id, expected):
    response = _malformed(client, "POST", f"{API}/{store['id']}/sizes", user_id)

    assert response.status_code == expected


@pytest.mark.parametrize("user_id, expected", [(None, 401), (OTHER, 403)])
def test_malformed_update_body_does_not_hide_auth_failure(client, store, create_resource, user_id, expected):
    size = create_resource(store["id"], "sizes", {"name": "Small", "value": "S"})

    response = _malformed(client, "PATCH", f"{API}/{store['id']}/sizes/{size['id']}", user_id)

    assert response.status_code == expected


@pytest.mark.parametrize("user_id, expected", [(None, 401), (OTHER, 403)])
def test_malformed_store_patch_does_not_hide_auth_failure(client, store, user_id, expected):
    response = _malformed(client, "PATCH", f"{API}/stores/{store['id']}", user_id)

    assert response.status_code == expected


def test_malformed_body_from_owner_is_invalid_request(client, store):
    response = _malformed(client, "POST", f"{API}/{store['id']}/sizes", OWNER)

    assert response.status_code == 404
    assert response.json()["detail"] == "Invalid Request"
    assert response.json()["errors"] == [{"field": "", "message": "Request body is not valid JSON"}]


def test_malformed_store_create_from_anonymous_is_unauthenticated(client):
    assert _malformed(client, "POST", f"{API}/stores").status_code == 401
