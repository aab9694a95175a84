"""Deterministic SMS categorization.

Bank SMS rarely carry a category or MCC, so we infer one from the extracted
merchant plus the full message body using ``SMS_CATEGORY_KEYWORDS``.

This is intentionally first-match rather than scored:
- fast (no external calls)
- explainable (the first keyword hit decides)
- stable (table order is the precedence order)

The scored variant used for interactive suggestions lives in
``suggestion.py`` and uses its own table.
"""

from __future__ import annotations

from collections.abc import Mapping

from expense_tracker.categorization.keywords import OTHERS, SMS_CATEGORY_KEYWORDS


def categorize(
    merchant: str | None,
    body: str | None,
    table: Mapping[str, tuple[str, ...]] = SMS_CATEGORY_KEYWORDS,
) -> str:
    """Infer a category from an SMS merchant and body.

    Args:
        merchant: Extracted merchant/description text.
        body: Full SMS body.
        table: Keyword table to consult (ordering matters: earlier matches win).

    Returns:
        Category name from the table, or "Others" when nothing matches.
    """
    merchant_lower = (merchant or "").lower()
    body_lower = (body or "").lower()
    if not merchant_lower and not body_lower:
        return OTHERS

    for category, keywords in table.items():
        for keyword in keywords:
            if keyword in merchant_lower or keyword in body_lower:
                return category

    return OTHERS
