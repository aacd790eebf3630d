"""Derived views over a user's snapshot.

Everything here is a pure function of the items, recipes and stores it is
given, so views can be recomputed whenever any of them change.
"""

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from grocery.schemas.bootstrap import BootstrapResponse, DerivedViewsResponse, StoreGroup
from grocery.services.stores import DEFAULT_STORES, parse_store_tags

# 10 maximally distinguishable colors for duplicate-item highlights
ITEM_COLORS = [
    "#e6194b",  # Red
    "#3cb44b",  # Green
    "#ffe119",  # Yellow
    "#4363d8",  # Blue
    "#f58231",  # Orange
    "#911eb4",  # Purple
    "#42d4f4",  # Cyan
    "#f032e6",  # Magenta
    "#fabed4",  # Pink
    "#469990",  # Teal
]


class Tagged(Protocol):
    name: str
    supermarket: str


class HasIngredients(Protocol):
    ingredients: Sequence[Tagged]


ItemT = TypeVar("ItemT", bound=Tagged)


def store_sort_key(name: str) -> tuple[str, str]:
    """Order store names alphabetically ignoring case, like a locale compare."""
    return (name.casefold(), name)


def _merge_store_names(sources: Iterable[str]) -> list[str]:
    merged: dict[str, str] = {}
    for source in sources:
        for tag in parse_store_tags(source):
            merged.setdefault(tag.casefold(), tag)
    return sorted(merged.values(), key=store_sort_key)


def candidate_stores(
    stores: Iterable[str],
    items: Iterable[Tagged] = (),
    recipes: Iterable[HasIngredients] = (),
) -> list[str]:
    """Every store a user might pick.

    Defaults, registered stores, and any tag used on an item or recipe
    ingredient even if it was never registered.
    """
    sources: list[str] = [*DEFAULT_STORES, *stores]
    sources.extend(item.supermarket for item in items)
    for recipe in recipes:
        sources.extend(ingredient.supermarket for ingredient in recipe.ingredients)
    return _merge_store_names(sources)


def managed_stores(stores: Iterable[str]) -> list[str]:
    """Defaults plus registered stores, as listed in the store manager."""
    return _merge_store_names([*DEFAULT_STORES, *stores])


def filter_items(items: Iterable[ItemT], query: str = "") -> list[ItemT]:
    """Items whose name or raw supermarket string contains the query."""
    needle = query.casefold()
    return [
        item
        for item in items
        if needle in item.name.casefold() or needle in item.supermarket.casefold()
    ]


def group_items_by_store(items: Iterable[ItemT]) -> list[tuple[str, list[ItemT]]]:
    """Fan items out into one group per store tag.

    An item tagged with two stores lands in both groups. Groups are ordered
    by size, largest first, then by store name.
    """
    grouped: dict[str, list[ItemT]] = {}
    for item in items:
        for store in parse_store_tags(item.supermarket):
            grouped.setdefault(store, []).append(item)
    return sorted(grouped.items(), key=lambda entry: (-len(entry[1]), store_sort_key(entry[0])))


def normalize_item_name(name: str) -> str:
    return name.strip().casefold()


def duplicate_item_colors(items: Iterable[Tagged]) -> dict[str, str]:
    """Highlight colors for item names that appear under more than one store.

    Keys are normalized names. Colors are handed out in alphabetical order
    of name, cycling through ITEM_COLORS, so the result is stable for a given
    set of items.
    """
    name_to_stores: dict[str, set[str]] = {}
    for item in items:
        stores = name_to_stores.setdefault(normalize_item_name(item.name), set())
        stores.update(parse_store_tags(item.supermarket))

    multi_store_names = sorted(name for name, stores in name_to_stores.items() if len(stores) > 1)
    return {
        name: ITEM_COLORS[index % len(ITEM_COLORS)]
        for index, name in enumerate(multi_store_names)
    }


def color_for_item(colors: dict[str, str], item: Tagged) -> str | None:
    return colors.get(normalize_item_name(item.name))


def build_views(snapshot: BootstrapResponse, query: str = "") -> DerivedViewsResponse:
    """Compute every derived view for a snapshot and search query."""
    filtered = filter_items(snapshot.items, query)
    return DerivedViewsResponse(
        candidate_stores=candidate_stores(snapshot.stores, snapshot.items, snapshot.recipes),
        managed_stores=managed_stores(snapshot.stores),
        filtered_items=filtered,
        items_by_store=[
            StoreGroup(store=store, items=group) for store, group in group_items_by_store(filtered)
        ],
        item_colors=duplicate_item_colors(snapshot.items),
        completed_count=sum(1 for item in snapshot.items if item.completed),
    )
