import os

os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from store_admin.api import deps
from store_admin.main import app
from store_admin.models.base import Base

OWNER = "user_owner"
OTHER = "user_other"
API = "/api"


def as_user(user_id):
    return {"X-User-Id": user_id}


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    with session_factory() as db:
        yield db


@pytest.fixture
def client(session_factory):
    def override_get_db():
        with session_factory() as db:
            yield db

    app.dependency_overrides[deps.get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_store(client):
    def _create(user_id=OWNER, name="Main store"):
        response = client.post(
            f"{API}/stores",
            json={
                "name": name,
                "frontEndStoreUrl": "https://shop.example.com",
                "stripeKey": "sk_test_1234567890",
            },
            headers=as_user(user_id),
        )
        assert response.status_code == 200, response.text
        return response.json()
    return _create


@pytest.fixture
def store(create_store):
    return create_store()


@pytest.fixture
def create_resource(client):
    """POST a sub-resource as the store owner and return the created JSON."""
    def _create(store_id, resource, payload, user_id=OWNER):
        response = client.post(f"{API}/{store_id}/{resource}", json=payload, headers=as_user(user_id))
        assert response.status_code == 200, response.text
        return response.json()
    return _create


@pytest.fixture
def make_catalog(create_resource):
    """Billboard, category, color and size in one store, ready for products."""
    def _make(store_id, user_id=OWNER):
        billboard = create_resource(store_id, "billboards", {
            "label": "Summer sale",
            "imageUrl": "https://cdn.example.com/summer.png",
        }, user_id)
        category = create_resource(store_id, "categories", {
            "name": "Shirts",
            "billboardId": billboard["id"],
        }, user_id)
        color = create_resource(store_id, "colors", {"name": "White", "value": "#fff"}, user_id)
        size = create_resource(store_id, "sizes", {"name": "Medium", "value": "M"}, user_id)
        return {"billboard": billboard, "category": category, "color": color, "size": size}
    return _make


@pytest.fixture
def catalog(store, make_catalog):
    return make_catalog(store["id"])


@pytest.fixture
def product_payload(catalog):
    def _payload(**overrides):
        payload = {
            "name": "Linen shirt",
            "price": 49.99,
            "categoryId": catalog["category"]["id"],
            "colorId": catalog["color"]["id"],
            "sizeId": catalog["size"]["id"],
            "isFeatured": False,
            "isArchived": False,
            "images": [{"url": "https://cdn.example.com/a.png"}],
        }
        payload.update(overrides)
        return payload
    return _payload
