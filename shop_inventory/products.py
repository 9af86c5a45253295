"""Product categories stocked in the store."""
from enum import IntEnum
from types import MappingProxyType

from . import settings


class Product(IntEnum):
    INVALID = -1
    DRESSES = 0
    CROP_TOPS = 1
    SWEATSHIRTS_HOODIES = 2
    BLOUSES = 3
    SKIRTS = 4
    SHORTS = 5
    JEANS = 6
    MATCHING_SETS = 7
    SWIMWEAR = 8
    ACCESSORIES = 9
    COUNT = 10


# Display names, indexed by category. Built once, never mutated.
PRODUCT_NAMES = MappingProxyType(
    {
        Product.DRESSES: "Dresses",
        Product.CROP_TOPS: "Crop Tops",
        Product.SWEATSHIRTS_HOODIES: "Sweatshirts & Hoodies",
        Product.BLOUSES: "Blouses",
        Product.SKIRTS: "Skirts",
        Product.SHORTS: "Shorts",
        Product.JEANS: "Jeans",
        Product.MATCHING_SETS: "MatchingSets",
        Product.SWIMWEAR: "Swimwear",
        Product.ACCESSORIES: "Accessories",
    }
)


def is_valid_product(product: int) -> bool:
    """True for real categories, False for INVALID, COUNT and anything out of range."""
    return Product.INVALID < product < Product.COUNT


def get_product_name(product: int) -> str:
    if not is_valid_product(product):
        return ""
    return PRODUCT_NAMES[Product(product)]


def parse_product(raw: str) -> Product:
    """
    Turns operator input into a category.
    Non-numeric text and unknown ordinals both come back as Product.INVALID.
    """
    try:
        value = int(raw.strip())
    except ValueError:
        return Product.INVALID

    if not is_valid_product(value):
        return Product.INVALID
    return Product(value)


def list_products() -> str:
    """Returns the numbered category table shown before every category prompt."""
    lines = ["Product list: "]
    lines.extend(f"({int(product)}) {name}" for product, name in PRODUCT_NAMES.items())
    lines.append(settings.SEPARATOR)
    return "\n".join(lines)
