"""Interactive console front end for the shop inventory."""
import logging
from enum import Enum

from . import settings
from .console import read_choice, read_text, read_until_valid, read_value
from .inventory import Inventory, ItemHandle, by_name, by_product
from .products import get_product_name, is_valid_product, list_products, parse_product
from .schemas import MODEL_CODE_ADAPTER, PRICE_ADAPTER, QUANTITY_ADAPTER, Item

logger = logging.getLogger(__name__)

INVALID_OPTION = "Invalid option selected. Please try again."
ITEM_NOT_FOUND = "Item not found. Try adding an item."


class MenuOption(str, Enum):
    ADD_ITEM = "a"
    REMOVE_ITEM = "r"
    EDIT_ITEM = "e"
    SEARCH_ITEM = "s"
    LIST_PRODUCTS = "p"
    LIST_ITEMS = "l"
    QUIT = "q"


class SearchMode(str, Enum):
    NAME = "n"
    PRODUCT = "p"


class InventoryUI:
    """
    Blocking menu loop over a single Inventory.

    Reading the operator's choices lives here; every change to the stock goes
    through the Inventory API so it can be exercised without a terminal.
    """

    def __init__(self, inventory: Inventory | None = None) -> None:
        self.inventory = inventory if inventory is not None else Inventory()

        # --- Top-level Command Registry ---
        # Quit is handled by the loop itself.
        self.commands = {
            MenuOption.ADD_ITEM.value: self.handle_add_item,
            MenuOption.SEARCH_ITEM.value: self.handle_search_option,
            MenuOption.LIST_PRODUCTS.value: self.handle_list_products,
            MenuOption.LIST_ITEMS.value: self.handle_list_items,
        }

    def list_options(self) -> None:
        print(f"({MenuOption.ADD_ITEM.value}) Add Item")
        print(f"({MenuOption.SEARCH_ITEM.value}) Search Item")
        print(f"({MenuOption.LIST_PRODUCTS.value}) List Product Categories")
        print(f"({MenuOption.LIST_ITEMS.value}) List Items in Stock")
        print(f"({MenuOption.QUIT.value}) Quit")

    def get_user_action(self) -> str:
        return read_choice("Select operation: ")

    def run(self) -> None:
        print(settings.APP_TITLE)
        logger.info("🚀 Session started")

        try:
            while True:
                self.list_options()
                opt = self.get_user_action()
                if opt == MenuOption.QUIT.value:
                    break

                handler = self.commands.get(opt)
                if handler is None:
                    logger.info(f"Unknown menu option {opt!r}")
                    print(INVALID_OPTION)
                    continue
                handler()
        except (EOFError, KeyboardInterrupt):
            # Closed stdin or Ctrl-C ends the session the same way Quit does.
            print()
            logger.info("Input closed, ending session.")

        logger.info(f"✅ Session ended with {len(self.inventory)} item(s) in stock.")

    # --- Add ---

    def handle_add_option(self) -> Item:
        """Collects a complete item from the operator. Loops on a bad category."""
        product = read_until_valid(
            "Select product category to add: ",
            parse=parse_product,
            is_valid=is_valid_product,
            error_message=INVALID_OPTION,
            before_prompt=self.handle_list_products,
        )
        name = read_value(
            "Enter model code: ",
            MODEL_CODE_ADAPTER,
            f"Invalid model code. Please enter 1 to {settings.MAX_MODEL_NAME} characters.",
        )
        price = read_value(
            "Enter price: ",
            PRICE_ADAPTER,
            "Invalid price. Please enter a non-negative number.",
        )
        nstock = read_value(
            "Enter quantity: ",
            QUANTITY_ADAPTER,
            "Invalid quantity. Please enter a whole number.",
        )
        return Item(product=product, name=name, price=price, nstock=nstock)

    def handle_add_item(self) -> None:
        item = self.handle_add_option()
        self.inventory.add(item)
        print("Added item\n")

    # --- Search ---

    def handle_search_option(self) -> None:
        """Finds one item by name or category, then offers remove/edit on it."""
        mode = read_choice(
            f"Search by ({SearchMode.NAME.value}) Name, ({SearchMode.PRODUCT.value}) Product Category: "
        )

        if mode == SearchMode.NAME.value:
            name = read_text("Enter model name: ")
            handle = self.inventory.search(by_name(name))
        elif mode == SearchMode.PRODUCT.value:
            # An invalid category is not rejected here, it just matches nothing.
            self.handle_list_products()
            product = parse_product(read_text("Select product id: "))
            handle = self.inventory.search(by_product(product))
        else:
            print(INVALID_OPTION)
            return

        if handle is None:
            logger.info("Search found no matching item")
            print(ITEM_NOT_FOUND)
            return

        self.handle_found_item(handle)

    def handle_found_item(self, handle: ItemHandle) -> None:
        item = self.inventory.get(handle)
        print(f"Found: {item.name} ({get_product_name(item.product)})")

        while True:
            print(f"({MenuOption.REMOVE_ITEM.value}) Remove Item")
            print(f"({MenuOption.EDIT_ITEM.value}) Edit Item")
            print(f"({MenuOption.QUIT.value}) Quit")
            opt = self.get_user_action()

            if opt == MenuOption.REMOVE_ITEM.value:
                self.inventory.remove(handle)
                break
            elif opt == MenuOption.EDIT_ITEM.value:
                new_item = self.handle_add_option()
                self.inventory.replace(handle, new_item)
                break
            elif opt == MenuOption.QUIT.value:
                break
            else:
                print(INVALID_OPTION)

    # --- Listings ---

    def handle_list_products(self) -> None:
        print(list_products())

    def handle_list_items(self) -> None:
        print(self.inventory.list_items())
