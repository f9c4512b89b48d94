"""
Products API: Product Validator
===============================

What:  Field-level presence and type checks for candidate product records.
How:   Every rule runs independently; each failing rule adds one message to
       the error map. No I/O and no side effects.
Who:   Called by ProductService before any create or update statement.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

NAME_REQUIRED = "The name is required"
BRAND_REQUIRED = "The brand is required"
CATEGORY_REQUIRED = "The category is required"
PRICE_INVALID = "The price is not valid"
DESCRIPTION_REQUIRED = "The description is required"


@dataclass
class ValidationResult:
    """Field name → error message, plus whether any rule fired."""
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


# Plain decimal or exponent notation; Python digit separators are not numbers
_NUMERIC_TEXT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _is_number(value: Any) -> bool:
    """True when `value` is, or reads as, a finite number."""
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not _NUMERIC_TEXT.fullmatch(text):
        return False
    return math.isfinite(float(text))


def validate_product(candidate: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a candidate product record.

    Rules:
        name, brand, category, description: absent or empty → "... is required"
        price: absent, falsy (None, 0, "") or not a finite decimal number → "The price is not valid"

    Args:
        candidate: Mapping of field name to raw value; any field may be absent.

    Returns:
        ValidationResult; `errors` keys are ordered name, brand, category, price, description.
    """
    errors: Dict[str, str] = {}

    if not candidate.get("name"):
        errors["name"] = NAME_REQUIRED
    if not candidate.get("brand"):
        errors["brand"] = BRAND_REQUIRED
    if not candidate.get("category"):
        errors["category"] = CATEGORY_REQUIRED

    price = candidate.get("price")
    if not price or not _is_number(price):
        errors["price"] = PRICE_INVALID

    if not candidate.get("description"):
        errors["description"] = DESCRIPTION_REQUIRED

    return ValidationResult(errors=errors)
