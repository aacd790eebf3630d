"""Bootstrap and derived view endpoint tests."""

from datetime import UTC, datetime, timedelta
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from grocery.models.item import GroceryItem
from grocery.models.recipe import Recipe
from grocery.models.store import Store
from grocery.services.gateway import GroceryGateway
from grocery.services.stores import DEFAULT_STORES


def test_bootstrap_empty(client, auth_headers):
    """A new user gets an empty snapshot with their id."""
    response = client.get("/api/v1/bootstrap", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {
        "items": [],
        "recipes": [],
        "stores": [],
        "userId": str(auth_headers.user_id),
    }


def test_bootstrap_orders_newest_first(client, auth_headers, db):
    """Items, recipes and stores come back newest first."""
    base = datetime(2025, 1, 1, tzinfo=UTC)
    user_id = auth_headers.user_id
    db.add_all(
        [
            GroceryItem(user_id=user_id, name="Old", supermarket="Costco", created_at=base),
            GroceryItem(
                user_id=user_id, name="New", supermarket=None, created_at=base + timedelta(days=1)
            ),
            Recipe(user_id=user_id, name="First", notes=None, created_at=base),
            Recipe(user_id=user_id, name="Second", created_at=base + timedelta(hours=1)),
            Store(user_id=user_id, name="Safeway", created_at=base),
            Store(user_id=user_id, name="Lucky", created_at=base + timedelta(minutes=1)),
        ]
    )
    db.commit()

    data = client.get("/api/v1/bootstrap", headers=auth_headers).json()

    assert [item["name"] for item in data["items"]] == ["New", "Old"]
    assert [recipe["name"] for recipe in data["recipes"]] == ["Second", "First"]
    assert data["stores"] == ["Lucky", "Safeway"]
    assert data["items"][1]["createdAt"] == int(base.timestamp() * 1000)
    assert data["items"][0]["supermarket"] == "General"
    assert data["recipes"][1]["notes"] == ""


def test_bootstrap_item_shape(client, auth_headers):
    """Bootstrap items match the shape mutation handlers return."""
    created = client.post(
        "/api/v1/items",
        headers=auth_headers,
        json={"name": "Eggs", "supermarket": "Costco, H mart"},
    ).json()

    data = client.get("/api/v1/bootstrap", headers=auth_headers).json()
    assert data["items"] == [created]
    assert created["stores"] == ["Costco", "H mart"]


def test_bootstrap_drops_comma_store_names(client, auth_headers, db):
    """Corrupted store rows are filtered out, not reported as errors."""
    user_id = auth_headers.user_id
    base = datetime(2025, 1, 1, tzinfo=UTC)
    db.add_all(
        [
            Store(user_id=user_id, name="Bad, Name", created_at=base + timedelta(minutes=2)),
            Store(user_id=user_id, name="  Safeway ", created_at=base + timedelta(minutes=1)),
            Store(user_id=user_id, name="   ", created_at=base),
        ]
    )
    db.commit()

    data = client.get("/api/v1/bootstrap", headers=auth_headers).json()
    assert data["stores"] == ["Safeway"]


def test_bootstrap_is_scoped_to_caller(client, auth_headers, other_auth_headers):
    """Each user sees only their own rows."""
    client.post("/api/v1/items", headers=auth_headers, json={"name": "Mine"})
    client.post("/api/v1/recipes", headers=auth_headers, json={"name": "My Recipe"})
    client.post("/api/v1/stores", headers=auth_headers, json={"name": "My Store"})

    data = client.get("/api/v1/bootstrap", headers=other_auth_headers).json()
    assert data["items"] == []
    assert data["recipes"] == []
    assert data["stores"] == []
    assert data["userId"] == str(other_auth_headers.user_id)


def test_bootstrap_fails_whole_when_one_fetch_fails(client, auth_headers):
    """A failing sub-fetch fails the snapshot with its message."""
    client.post("/api/v1/items", headers=auth_headers, json={"name": "Milk"})

    error = OperationalError("SELECT recipes", {}, Exception("recipes table unavailable"))
    with patch.object(GroceryGateway, "list_recipes", side_effect=error):
        response = client.get("/api/v1/bootstrap", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "recipes table unavailable"}


def test_views_endpoint(client, auth_headers):
    """Derived views are computed from the caller's snapshot."""
    client.post("/api/v1/items", headers=auth_headers, json={"name": "Eggs", "supermarket": "A"})
    client.post("/api/v1/items", headers=auth_headers, json={"name": "eggs", "supermarket": "B"})
    client.post("/api/v1/items", headers=auth_headers, json={"name": "Milk", "supermarket": "A"})
    client.post(
        "/api/v1/recipes",
        headers=auth_headers,
        json={"name": "Stew", "ingredients": [{"name": "Beef", "supermarket": "Butcher"}]},
    )

    response = client.get("/api/v1/views", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()

    assert {*DEFAULT_STORES, "A", "B", "Butcher"} == set(data["candidateStores"])
    assert data["managedStores"] == sorted(DEFAULT_STORES, key=str.casefold)
    assert [group["store"] for group in data["itemsByStore"]] == ["A", "B"]
    assert list(data["itemColors"]) == ["eggs"]
    assert data["completedCount"] == 0


def test_views_endpoint_search(client, auth_headers):
    """The search query narrows the grouping but not the highlights."""
    client.post("/api/v1/items", headers=auth_headers, json={"name": "Eggs", "supermarket": "A"})
    client.post("/api/v1/items", headers=auth_headers, json={"name": "Eggs", "supermarket": "B"})
    client.post("/api/v1/items", headers=auth_headers, json={"name": "Milk", "supermarket": "C"})

    data = client.get("/api/v1/views", headers=auth_headers, params={"q": "MIL"}).json()
    assert [item["name"] for item in data["filteredItems"]] == ["Milk"]
    assert [group["store"] for group in data["itemsByStore"]] == ["C"]
    assert list(data["itemColors"]) == ["eggs"]
