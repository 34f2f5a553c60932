"""
Sneaker classification heuristics.

The KicksDB catalogue mixes apparel and accessories in with footwear, and
product types are often missing. Keyword order matters: lists are scanned
in order and the first hit decides.
"""

from solesociety.services.records import RawProduct

SNEAKER_PRODUCT_TYPES = ("sneakers", "shoes")

# Checked against product_type
EXCLUDED_PRODUCT_TYPES = (
    "apparel", "clothing", "hoodie", "jacket", "shirt", "pants",
    "shorts", "accessories", "bag", "hat", "cap",
)

# Checked against the product name
EXCLUDED_NAME_KEYWORDS = (
    "hoodie", "jacket", "fleece", "windrunner", "crewneck",
    "sweatshirt", "tee", "t-shirt", "pants", "shorts",
)

# Checked against name and category
SNEAKER_KEYWORDS = (
    "air", "jordan", "dunk", "force", "yeezy", "boost",
    "slide", "sandal", "trainer", "runner", "sneaker",
    "shoe", "foamposite", "react", "zoom",
)


def is_sneaker(record: RawProduct) -> bool:
    """Decide whether a record is footwear. Exclusions win over inclusions."""
    product_type = (record.product_type or "").lower()
    name = record.display_name.lower()
    category = (record.category or "").lower()

    if product_type in SNEAKER_PRODUCT_TYPES:
        return True

    for excluded in EXCLUDED_PRODUCT_TYPES:
        if excluded in product_type:
            return False

    for keyword in EXCLUDED_NAME_KEYWORDS:
        if keyword in name:
            return False

    for keyword in SNEAKER_KEYWORDS:
        if keyword in name or keyword in category:
            return True

    # Catalogue is sneaker-dominant: include anything with a name
    return bool(name)


def has_price(record: RawProduct) -> bool:
    """
    True when the record carries pricing.

    A non-empty variant list counts even if no variant has an ask yet, since
    GOAT populates asks asynchronously.
    """
    if record.min_price is not None and record.min_price > 0:
        return True
    if record.avg_price is not None and record.avg_price > 0:
        return True
    return bool(record.variants)
