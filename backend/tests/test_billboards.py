from conftest import API, OTHER, OWNER, as_user

BILLBOARD = {"label": "Summer sale", "imageUrl": "https://cdn.example.com/summer.png"}


def test_create_and_read_billboard(client, store, create_resource):
    billboard = create_resource(store["id"], "billboards", BILLBOARD)

    assert billboard["storeId"] == store["id"]
    assert billboard["label"] == "Summer sale"

    anonymous = client.get(f"{API}/billboards/{billboard['id']}")
    signed_in = client.get(f"{API}/billboards/{billboard['id']}", headers=as_user(OTHER))
    assert anonymous.status_code == 200
    assert anonymous.json() == signed_in.json()
    assert anonymous.json()["imageUrl"] == BILLBOARD["imageUrl"]


def test_read_missing_billboard_returns_null(client):
    response = client.get(f"{API}/billboards/does-not-exist")

    assert response.status_code == 200
    assert response.json() is None


def test_create_billboard_requires_owner(client, store):
    url = f"{API}/{store['id']}/billboards"

    assert client.post(url, json=BILLBOARD).status_code == 401
    assert client.post(url, json=BILLBOARD, headers=as_user(OTHER)).status_code == 403
    assert client.get(f"{API}/{store['id']}/billboards").json() == []


def test_denials_ignore_payload_validity(client, store):
    url = f"{API}/{store['id']}/billboards"

    assert client.post(url, json={"label": ""}).status_code == 401
    assert client.post(url, json={"label": ""}, headers=as_user(OTHER)).status_code == 403


def test_create_billboard_in_unknown_store(client):
    response = client.post(f"{API}/missing/billboards", json=BILLBOARD, headers=as_user(OWNER))

    assert response.status_code == 404


def test_billboard_validation(client, store):
    response = client.post(
        f"{API}/{store['id']}/billboards",
        json={"label": "Sale", "imageUrl": "summer.png"},
        headers=as_user(OWNER),
    )

    assert response.status_code == 404
    assert [error["field"] for error in response.json()["errors"]] == ["imageUrl"]


def test_update_billboard(client, store, create_resource):
    billboard = create_resource(store["id"], "billboards", BILLBOARD)

    response = client.patch(
        f"{API}/{store['id']}/billboards/{billboard['id']}",
        json={"label": "Winter sale", "imageUrl": "https://cdn.example.com/winter.png", "id": "forged"},
        headers=as_user(OWNER),
    )

    assert response.status_code == 200
    assert response.json()["id"] == billboard["id"]
    assert response.json()["label"] == "Winter sale"


def test_update_missing_billboard(client, store):
    response = client.patch(f"{API}/{store['id']}/billboards/nope", json=BILLBOARD, headers=as_user(OWNER))

    assert response.status_code == 404


def test_billboard_is_isolated_between_stores(client, create_store, create_resource):
    first = create_store(OWNER, "First")
    second = create_store(OWNER, "Second")
    billboard = create_resource(first["id"], "billboards", BILLBOARD)

    scoped_read = client.get(f"{API}/{second['id']}/billboards/{billboard['id']}")
    patched = client.patch(
        f"{API}/{second['id']}/billboards/{billboard['id']}",
        json={"label": "Moved", "imageUrl": "https://cdn.example.com/x.png"},
        headers=as_user(OWNER),
    )
    deleted = client.delete(f"{API}/{second['id']}/billboards/{billboard['id']}", headers=as_user(OWNER))

    assert scoped_read.json() is None
    assert client.get(f"{API}/{second['id']}/billboards").json() == []
    assert patched.status_code == 404
    assert deleted.json() == {"count": 0}
    assert client.get(f"{API}/billboards/{billboard['id']}").json()["label"] == "Summer sale"


def test_delete_billboard_is_idempotent(client, store, create_resource):
    billboard = create_resource(store["id"], "billboards", BILLBOARD)
    url = f"{API}/{store['id']}/billboards/{billboard['id']}"

    assert client.delete(url, headers=as_user(OWNER)).json() == {"count": 1}
    assert client.delete(url, headers=as_user(OWNER)).json() == {"count": 0}
    assert client.get(f"{API}/billboards/{billboard['id']}").json() is None


def test_delete_billboard_by_other_user_is_forbidden(client, store, create_resource):
    billboard = create_resource(store["id"], "billboards", BILLBOARD)

    response = client.delete(f"{API}/{store['id']}/billboards/{billboard['id']}", headers=as_user(OTHER))

    assert response.status_code == 403
    assert client.get(f"{API}/billboards/{billboard['id']}").json() is not None


def test_delete_billboard_used_by_category_is_refused(client, store, catalog):
    billboard_id = catalog["billboard"]["id"]

    response = client.delete(f"{API}/{store['id']}/billboards/{billboard_id}", headers=as_user(OWNER))

    assert response.status_code == 409
    assert client.get(f"{API}/billboards/{billboard_id}").json() is not None
