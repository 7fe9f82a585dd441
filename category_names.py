"""Encoding of custom category ids into ledger ``category_name`` values.

Ledger rows store either a built-in label (``FOOD``, ``SALARY``, ...) or a
custom token of the form ``CUSTOM:<uuid>``. Built-in labels never contain a
colon, so the two sets cannot collide.
"""

import re
from typing import Optional

CUSTOM_CATEGORY_PREFIX = "CUSTOM:"

_CUSTOM_ID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)


def encode(category_id: str) -> str:
    """Build the ledger token for a custom category.

    Args:
        category_id: The category's UUID string.

    Returns:
        The ``CUSTOM:<id>`` token stored in ledger rows.
    """
    return f"{CUSTOM_CATEGORY_PREFIX}{category_id}"


def decode(category_name) -> Optional[str]:
    """Extract the custom category id from a ledger token.

    Args:
        category_name: Any value read from a ``category_name`` column.

    Returns:
        The category id if the value is a well-formed custom token, None for
        built-in labels and anything else.
    """
    if not is_custom(category_name):
        return None
    category_id = category_name[len(CUSTOM_CATEGORY_PREFIX):]
    if not _CUSTOM_ID_PATTERN.fullmatch(category_id):
        return None
    return category_id


def is_custom(category_name) -> bool:
    """Check whether a ledger value uses the custom token prefix."""
    return isinstance(category_name, str) and category_name.startswith(
        CUSTOM_CATEGORY_PREFIX
    )
