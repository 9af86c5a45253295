"""In-memory inventory of stocked items, searched linearly in insertion order."""
import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Iterator

import pandas as pd

from . import settings
from .products import Product, get_product_name
from .schemas import Item

logger = logging.getLogger(__name__)

SearchPredicate = Callable[[Item], bool]

# Column headers come from the Item aliases so the table and the model never drift apart.
TABLE_COLUMNS = [info.alias for info in Item.model_fields.values()]
PRODUCT_COLUMN, MODEL_COLUMN, PRICE_COLUMN, QTY_COLUMN = TABLE_COLUMNS
COLUMN_WIDTHS = {PRODUCT_COLUMN: 24, MODEL_COLUMN: 24, PRICE_COLUMN: 14, QTY_COLUMN: 8}


class StaleHandleError(KeyError):
    """Raised when a handle no longer names an item in this inventory."""


@dataclass(frozen=True)
class ItemHandle:
    key: int


class Inventory:
    """
    Ordered collection of items.

    Every stored item gets its own key, handed out as an ItemHandle. A handle
    survives unrelated adds and removes and only goes stale once its own item
    is removed.
    """

    def __init__(self, capacity: int = settings.MAX_ITEMS) -> None:
        self.capacity = capacity
        self._items: dict[int, Item] = {}
        self._keys = itertools.count(1)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items.values()))

    def add(self, item: Item) -> ItemHandle:
        handle = ItemHandle(next(self._keys))
        self._items[handle.key] = item
        logger.info(f"Added {item.name} ({get_product_name(item.product)}) as #{handle.key}")

        if len(self._items) > self.capacity:
            logger.warning(
                f"⚠️ Inventory holds {len(self._items)} items, above the capacity hint of {self.capacity}."
            )
        return handle

    def get(self, handle: ItemHandle) -> Item:
        try:
            return self._items[handle.key]
        except KeyError:
            raise StaleHandleError(handle) from None

    def remove(self, handle: ItemHandle) -> Item:
        try:
            item = self._items.pop(handle.key)
        except KeyError:
            raise StaleHandleError(handle) from None
        logger.info(f"Removed {item.name} (#{handle.key})")
        return item

    def replace(self, handle: ItemHandle, item: Item) -> ItemHandle:
        """Swaps the item behind `handle` for `item`. The new item goes to the end."""
        old_item = self.remove(handle)
        new_handle = self.add(item)
        logger.info(f"Edited {old_item.name} -> {item.name}")
        return new_handle

    def search(self, predicate: SearchPredicate) -> ItemHandle | None:
        """Returns a handle to the first item the predicate accepts, or None."""
        for key, item in self._items.items():
            if predicate(item):
                return ItemHandle(key)
        return None

    def list_items(self) -> str:
        """Returns the stock table in current collection order."""
        if not self._items:
            return f"No items in stock.\n{settings.SEPARATOR}"

        df = pd.DataFrame(
            [item.model_dump(by_alias=True) for item in self._items.values()],
            columns=TABLE_COLUMNS,
        )
        df[PRODUCT_COLUMN] = df[PRODUCT_COLUMN].map(get_product_name)

        table = df.to_string(
            index=False,
            col_space=COLUMN_WIDTHS,
            formatters={PRICE_COLUMN: "{:.2f}".format},
        )
        return f"{table}\n{settings.SEPARATOR}"


def by_name(name: str) -> SearchPredicate:
    return lambda item: item.name == name


def by_product(product: Product) -> SearchPredicate:
    return lambda item: item.product == product
