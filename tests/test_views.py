"""Tests for store tag helpers and derived views."""

from dataclasses import dataclass, field

import pytest

from grocery.schemas.bootstrap import BootstrapResponse
from grocery.schemas.item import ItemResponse
from grocery.services.stores import (
    DEFAULT_STORES,
    is_default_store,
    normalize_supermarket,
    parse_store_tags,
    sanitize_store_names,
)
from grocery.services.views import (
    ITEM_COLORS,
    build_views,
    candidate_stores,
    color_for_item,
    duplicate_item_colors,
    filter_items,
    group_items_by_store,
    managed_stores,
)


@dataclass
class Entry:
    name: str
    supermarket: str
    completed: bool = False


@dataclass
class RecipeStub:
    ingredients: list[Entry] = field(default_factory=list)


# --- Store tags ---


def test_parse_store_tags():
    """Tags are split, trimmed, and de-duplicated ignoring case."""
    assert parse_store_tags("Costco, H mart") == ["Costco", "H mart"]
    assert parse_store_tags(" Costco ,, costco,H mart ") == ["Costco", "H mart"]
    assert parse_store_tags("") == []
    assert parse_store_tags(None) == []


@pytest.mark.parametrize("value", [None, "", "   ", " , , "])
def test_normalize_supermarket_blank_is_general(value):
    assert normalize_supermarket(value) == "General"


def test_normalize_supermarket_rejoins_tags():
    assert normalize_supermarket("Costco,H mart") == "Costco, H mart"


def test_sanitize_store_names():
    """Comma-containing and blank names are dropped, first-seen order kept."""
    names = ["  Lucky ", "Bad, Name", "", None, "Safeway", "Lucky"]
    assert sanitize_store_names(names) == ["Lucky", "Safeway"]


def test_is_default_store():
    assert is_default_store("costco")
    assert is_default_store("  H MART ")
    assert not is_default_store("Safeway")


# --- Candidate stores ---


def test_candidate_stores_always_has_defaults():
    """Defaults appear even with no data at all."""
    assert set(candidate_stores([])) == set(DEFAULT_STORES)
    assert len(candidate_stores([])) == 4


def test_candidate_stores_merges_all_sources():
    """Registered stores and tags on items and ingredients are all offered."""
    items = [Entry("Eggs", "Safeway, costco"), Entry("Milk", "General")]
    recipes = [RecipeStub([Entry("Beef", "Butcher")])]

    result = candidate_stores([" Lucky ", ""], items, recipes)

    assert result == [
        "99 Ranch",
        "Butcher",
        "Costco",
        "General",
        "H mart",
        "Lucky",
        "Safeway",
        "Trader Joe's",
    ]


def test_managed_stores_ignores_item_tags():
    assert managed_stores(["Lucky"]) == ["99 Ranch", "Costco", "H mart", "Lucky", "Trader Joe's"]


# --- Filtering and grouping ---


def test_filter_items_matches_name_or_store():
    items = [Entry("Eggs", "Costco"), Entry("Milk", "H mart"), Entry("Bread", "General")]

    assert filter_items(items, "EGG") == [items[0]]
    assert filter_items(items, "mart") == [items[1]]
    assert filter_items(items, "") == items


def test_group_items_by_store_fans_out():
    """An item tagged with two stores is listed under both."""
    eggs = Entry("Eggs", "A, B")
    milk = Entry("Milk", "A")

    groups = dict(group_items_by_store([eggs, milk]))

    assert groups["A"] == [eggs, milk]
    assert groups["B"] == [eggs]


def test_group_items_by_store_ordering():
    """Largest group first, ties broken by store name."""
    items = [Entry("a", "Zed"), Entry("b", "Zed"), Entry("c", "beta"), Entry("d", "Alpha")]

    assert [store for store, _ in group_items_by_store(items)] == ["Zed", "Alpha", "beta"]


# --- Duplicate colors ---


def test_duplicate_item_colors():
    """Only names seen under more than one store get a color."""
    items = [Entry("eggs", "A"), Entry("eggs", "B"), Entry("milk", "A")]

    colors = duplicate_item_colors(items)

    assert colors == {"eggs": ITEM_COLORS[0]}
    assert duplicate_item_colors(items) == colors
    assert color_for_item(colors, Entry(" Eggs ", "C")) == ITEM_COLORS[0]
    assert color_for_item(colors, items[2]) is None


def test_duplicate_item_colors_same_store_twice():
    """The same name twice under one store is not a duplicate."""
    items = [Entry("Eggs", "A"), Entry("eggs ", " A ")]
    assert duplicate_item_colors(items) == {}


def test_duplicate_item_colors_store_case_matters():
    """Store tags differing only in case are separate groups, so the name is highlighted."""
    items = [Entry("eggs", "Costco"), Entry("eggs", "costco")]

    assert [store for store, _ in group_items_by_store(items)] == ["Costco", "costco"]
    assert duplicate_item_colors(items) == {"eggs": ITEM_COLORS[0]}


def test_duplicate_item_colors_alphabetical_and_cycling():
    """Colors are assigned alphabetically and wrap around the palette."""
    names = [f"item{i:02d}" for i in range(len(ITEM_COLORS) + 1)]
    items = [Entry(name, store) for name in reversed(names) for store in ("A", "B")]

    colors = duplicate_item_colors(items)

    assert colors[names[0]] == ITEM_COLORS[0]
    assert colors[names[1]] == ITEM_COLORS[1]
    assert colors[names[-1]] == ITEM_COLORS[0]


# --- Combined ---


def test_build_views():
    items = [
        ItemResponse(id="1", name="Eggs", supermarket="A, B", completed=True, created_at=2),
        ItemResponse(id="2", name="Milk", supermarket="A", completed=False, created_at=1),
    ]
    snapshot = BootstrapResponse(items=items, recipes=[], stores=["Lucky"], user_id="7")

    views = build_views(snapshot, "milk")

    assert "Lucky" in views.candidate_stores
    assert [item.id for item in views.filtered_items] == ["2"]
    assert [(group.store, [i.id for i in group.items]) for group in views.items_by_store] == [
        ("A", ["2"])
    ]
    assert views.item_colors == {"eggs": ITEM_COLORS[0]}
    assert views.completed_count == 1
