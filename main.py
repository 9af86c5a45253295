import sys

from shop_inventory.logger import setup_logger
from shop_inventory.ui import InventoryUI


def main() -> int:
    """Runs one interactive inventory session. Exits with 0 when the operator quits."""
    setup_logger("shop_inventory")
    InventoryUI().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
