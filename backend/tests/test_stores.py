from conftest import API, OTHER, OWNER, as_user

STORE_BODY = {
    "name": "Main store",
    "frontEndStoreUrl": "https://shop.example.com",
    "stripeKey": "sk_test_1234567890",
}


def test_create_store(client):
    response = client.post(f"{API}/stores", json=STORE_BODY, headers=as_user(OWNER))

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Main store"
    assert body["userId"] == OWNER
    assert body["frontEndStoreUrl"] == "https://shop.example.com"
    assert body["stripeKey"] == "sk_test_1234567890"
    assert body["id"]


def test_create_store_requires_identity(client):
    response = client.post(f"{API}/stores", json=STORE_BODY)

    assert response.status_code == 401


def test_create_store_with_missing_stripe_key_persists_nothing(client):
    body = {key: value for key, value in STORE_BODY.items() if key != "stripeKey"}

    response = client.post(f"{API}/stores", json=body, headers=as_user(OWNER))

    assert response.status_code == 404
    assert response.json()["errors"][0]["field"] == "stripeKey"
    assert client.get(f"{API}/stores", headers=as_user(OWNER)).json() == []


def test_create_store_with_bad_url_is_rejected(client):
    response = client.post(
        f"{API}/stores",
        json={**STORE_BODY, "frontEndStoreUrl": "shop"},
        headers=as_user(OWNER),
    )

    assert response.status_code == 404
    assert client.get(f"{API}/stores", headers=as_user(OWNER)).json() == []


def test_list_stores_returns_only_callers_stores(client, create_store):
    mine = create_store(OWNER, "Mine")
    create_store(OTHER, "Theirs")

    response = client.get(f"{API}/stores", headers=as_user(OWNER))

    assert response.status_code == 200
    assert [s["id"] for s in response.json()] == [mine["id"]]
    assert client.get(f"{API}/stores").status_code == 401


def test_read_store_is_owner_only(client, store):
    assert client.get(f"{API}/stores/{store['id']}", headers=as_user(OWNER)).status_code == 200
    assert client.get(f"{API}/stores/{store['id']}", headers=as_user(OTHER)).status_code == 403
    assert client.get(f"{API}/stores/{store['id']}").status_code == 401
    assert client.get(f"{API}/stores/missing", headers=as_user(OWNER)).status_code == 404


def test_update_store(client, store):
    response = client.patch(
        f"{API}/stores/{store['id']}",
        json={**STORE_BODY, "name": "Renamed"},
        headers=as_user(OWNER),
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Renamed"
    assert response.json()["userId"] == OWNER


def test_update_store_by_other_user_is_forbidden(client, store):
    response = client.patch(
        f"{API}/stores/{store['id']}",
        json={**STORE_BODY, "name": "Hijacked"},
        headers=as_user(OTHER),
    )

    assert response.status_code == 403
    assert client.get(f"{API}/stores/{store['id']}", headers=as_user(OWNER)).json()["name"] == "Main store"


def test_forbidden_wins_over_invalid_body(client, store):
    response = client.patch(f"{API}/stores/{store['id']}", json={"name": ""}, headers=as_user(OTHER))

    assert response.status_code == 403


def test_delete_store_is_idempotent(client, store):
    first = client.delete(f"{API}/stores/{store['id']}", headers=as_user(OWNER))
    second = client.delete(f"{API}/stores/{store['id']}", headers=as_user(OWNER))

    assert first.status_code == 200
    assert first.json() == {"count": 1}
    assert second.status_code == 200
    assert second.json() == {"count": 0}


def test_delete_store_by_other_user_is_forbidden(client, store):
    response = client.delete(f"{API}/stores/{store['id']}", headers=as_user(OTHER))

    assert response.status_code == 403
    assert client.get(f"{API}/stores/{store['id']}", headers=as_user(OWNER)).status_code == 200


def test_delete_store_with_catalog_is_refused(client, store, create_resource):
    create_resource(store["id"], "sizes", {"name": "Small", "value": "S"})

    response = client.delete(f"{API}/stores/{store['id']}", headers=as_user(OWNER))

    assert response.status_code == 409
    assert client.get(f"{API}/stores/{store['id']}", headers=as_user(OWNER)).status_code == 200
