import os
import sys
import unittest

# Add project root to Python path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from shop_inventory.inventory import Inventory, ItemHandle, StaleHandleError, by_name, by_product
from shop_inventory.products import Product
from shop_inventory.schemas import Item


def make_item(name, product=Product.DRESSES, price=10.0, nstock=1):
    return Item(product=product, name=name, price=price, nstock=nstock)


class TestInventoryMutation(unittest.TestCase):

    def setUp(self):
        self.inventory = Inventory()

    def test_add_preserves_insertion_order(self):
        for name in ("A1", "B2", "C3"):
            self.inventory.add(make_item(name))

        self.assertEqual([item.name for item in self.inventory], ["A1", "B2", "C3"])
        self.assertEqual(len(self.inventory), 3)

    def test_add_allows_duplicate_names(self):
        self.inventory.add(make_item("A1"))
        self.inventory.add(make_item("A1", product=Product.JEANS))

        self.assertEqual(len(self.inventory), 2)

    def test_add_past_capacity_hint_is_allowed_but_logged(self):
        inventory = Inventory(capacity=1)
        inventory.add(make_item("A1"))

        with self.assertLogs("shop_inventory.inventory", level="WARNING") as logs:
            inventory.add(make_item("B2"))

        self.assertEqual(len(inventory), 2)
        self.assertIn("capacity hint of 1", logs.output[0])

    def test_remove_deletes_the_item(self):
        handle = self.inventory.add(make_item("A1"))

        removed = self.inventory.remove(handle)

        self.assertEqual(removed.name, "A1")
        self.assertIsNone(self.inventory.search(by_name("A1")))

    def test_handle_survives_unrelated_mutation(self):
        self.inventory.add(make_item("A1"))
        handle = self.inventory.search(by_name("A1"))
        first = self.inventory.add(make_item("B2"))
        self.inventory.remove(first)
        self.inventory.add(make_item("C3"))

        self.assertEqual(self.inventory.remove(handle).name, "A1")
        self.assertEqual([item.name for item in self.inventory], ["C3"])

    def test_stale_handle_raises(self):
        handle = self.inventory.add(make_item("A1"))
        self.inventory.remove(handle)

        with self.assertRaises(StaleHandleError):
            self.inventory.remove(handle)
        with self.assertRaises(KeyError):
            self.inventory.get(handle)

    def test_foreign_handle_raises(self):
        with self.assertRaises(StaleHandleError):
            self.inventory.remove(ItemHandle(999))

    def test_replace_moves_edited_item_to_the_end(self):
        handle = self.inventory.add(make_item("A1"))
        self.inventory.add(make_item("B2"))

        new_handle = self.inventory.replace(handle, make_item("Z9"))

        self.assertEqual([item.name for item in self.inventory], ["B2", "Z9"])
        self.assertEqual(self.inventory.get(new_handle).name, "Z9")
        with self.assertRaises(StaleHandleError):
            self.inventory.get(handle)


class TestInventorySearch(unittest.TestCase):

    def setUp(self):
        self.inventory = Inventory()

    def test_empty_inventory_finds_nothing(self):
        self.assertIsNone(self.inventory.search(by_name("A1")))

    def test_search_returns_just_added_item(self):
        self.inventory.add(make_item("A1"))
        handle = self.inventory.add(make_item("B2", product=Product.JEANS))

        found = self.inventory.search(by_name("B2"))

        self.assertEqual(found, handle)
        self.assertEqual(self.inventory.get(found).name, "B2")

    def test_search_returns_first_match(self):
        first = self.inventory.add(make_item("A1", product=Product.SKIRTS))
        self.inventory.add(make_item("B2", product=Product.SKIRTS))

        self.assertEqual(self.inventory.search(by_product(Product.SKIRTS)), first)

    def test_name_match_is_exact(self):
        self.inventory.add(make_item("J100"))

        self.assertIsNone(self.inventory.search(by_name("j100")))
        self.assertIsNone(self.inventory.search(by_name("J10")))

    def test_invalid_category_matches_nothing(self):
        self.inventory.add(make_item("A1"))

        self.assertIsNone(self.inventory.search(by_product(Product.INVALID)))

    def test_custom_predicate(self):
        self.inventory.add(make_item("A1", nstock=0))
        handle = self.inventory.add(make_item("B2", nstock=7))

        self.assertEqual(self.inventory.search(lambda item: item.nstock > 5), handle)


class TestInventoryListing(unittest.TestCase):

    def test_empty_listing(self):
        listing = Inventory().list_items()

        self.assertIn("No items in stock.", listing)
        self.assertTrue(listing.endswith("---------------"))

    def test_listing_rows_follow_collection_order(self):
        inventory = Inventory()
        inventory.add(Item(product=Product.JEANS, name="J100", price=39.99, nstock=5))
        inventory.add(Item(product=Product.CROP_TOPS, name="CT7", price=12.5, nstock=-2))

        lines = inventory.list_items().splitlines()

        self.assertEqual(lines[0].split(), ["Product", "Model", "Code", "Price", "(GBP)", "Qty."])
        self.assertEqual(lines[1].split(), ["Jeans", "J100", "39.99", "5"])
        self.assertEqual(lines[2].split(), ["Crop", "Tops", "CT7", "12.50", "-2"])
        self.assertEqual(lines[3], "---------------")

    def test_listing_does_not_modify_inventory(self):
        inventory = Inventory()
        inventory.add(make_item("A1"))

        inventory.list_items()

        self.assertEqual([item.name for item in inventory], ["A1"])


if __name__ == "__main__":
    unittest.main()
