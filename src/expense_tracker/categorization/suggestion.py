"""Scored category suggestions for free-text descriptions and merchants.

Every category in ``SUGGESTION_CATEGORY_KEYWORDS`` is scored by keyword
overlap with the combined text. A keyword found in the merchant is worth 3,
one found only in the description is worth 2, and one that only appears in the
joined text (spanning the boundary) is worth 1.

Confidence is a bounded heuristic: the score divided by the best score we
expect in practice (``MAX_KEYWORDS_ESTIMATE`` keywords, all merchant hits).
It is not a probability.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping, Sequence
from typing import Final

from expense_tracker.categorization.keywords import OTHERS, SUGGESTION_CATEGORY_KEYWORDS
from expense_tracker.schemas.internal import CategorySuggestion, LearningRecord

logger = logging.getLogger(__name__)

MERCHANT_WEIGHT: Final[int] = 3
DESCRIPTION_WEIGHT: Final[int] = 2
COMBINED_WEIGHT: Final[int] = 1

MAX_KEYWORDS_ESTIMATE: Final[int] = 5
TOP_SUGGESTIONS: Final[int] = 3

# Reported once any selection has been recorded; accuracy tracking is not
# computed from the log yet.
PLACEHOLDER_ACCURACY: Final[float] = 85.0


class LearningLog:
    """Append-only, process-lifetime log of user category selections.

    Appends are serialized so concurrent suggestion-acceptance events never
    lose records. Callers own the lifetime: create one per user/session and
    pass it to ``CategorySuggester``.
    """

    def __init__(self, records: Iterable[LearningRecord] = ()):
        self._lock = threading.Lock()
        self._records: list[LearningRecord] = list(records)

    def append(self, record: LearningRecord) -> None:
        with self._lock:
            self._records.append(record)

    def records(self) -> tuple[LearningRecord, ...]:
        """Snapshot of all records in insertion order."""
        with self._lock:
            return tuple(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class CategorySuggester:
    """Keyword-scored category suggestion engine.

    Example:
        >>> suggester = CategorySuggester()
        >>> suggester.suggest_category("Monthly groceries", "DMart Supermarket")
        'Groceries'
    """

    def __init__(
        self,
        table: Mapping[str, tuple[str, ...]] = SUGGESTION_CATEGORY_KEYWORDS,
        learning_log: LearningLog | None = None,
    ):
        self.table = table
        self.learning_log = learning_log if learning_log is not None else LearningLog()

    def score(self, description: str | None, merchant: str | None) -> dict[str, int]:
        """Score every category with at least one keyword hit.

        Returns:
            Mapping of category -> score, in table order, zero scores omitted.
        """
        description_lower = (description or "").lower()
        merchant_lower = (merchant or "").lower()
        text = f"{description_lower} {merchant_lower}"

        scores: dict[str, int] = {}
        for category, keywords in self.table.items():
            total = 0
            for keyword in keywords:
                if keyword not in text:
                    continue
                if keyword in merchant_lower:
                    total += MERCHANT_WEIGHT
                elif keyword in description_lower:
                    total += DESCRIPTION_WEIGHT
                else:
                    total += COMBINED_WEIGHT
            if total > 0:
                scores[category] = total
        return scores

    def suggest_category(
        self,
        description: str | None,
        merchant: str | None,
        known_categories: Sequence[str] | None = None,
    ) -> str:
        """Return the single best category, or "Others" when nothing matches.

        Ties go to the category listed first in the keyword table.
        ``known_categories`` is accepted for interface parity with the
        suggestions call; it does not restrict the result.
        """
        scores = self.score(description, merchant)
        if not scores:
            return OTHERS
        # max() keeps the first maximal item, i.e. table order on ties.
        return max(scores.items(), key=lambda item: item[1])[0]

    def get_suggestions_with_confidence(
        self,
        description: str | None,
        merchant: str | None,
        known_categories: Sequence[str] | None = None,
    ) -> list[CategorySuggestion]:
        """Return up to three suggestions sorted by descending confidence."""
        scores = self.score(description, merchant)
        ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
        ceiling = MAX_KEYWORDS_ESTIMATE * MERCHANT_WEIGHT
        return [
            CategorySuggestion(
                category=category,
                confidence=min(100.0, max(0.0, score / ceiling * 100)),
            )
            for category, score in ranked[:TOP_SUGGESTIONS]
        ]

    def record_user_selection(
        self, description: str, merchant: str, selected_category: str
    ) -> LearningRecord:
        """Log that the user picked ``selected_category`` for this text.

        Recorded selections do not influence suggestions.
        """
        record = LearningRecord(
            description=description,
            merchant=merchant,
            selected_category=selected_category,
        )
        self.learning_log.append(record)
        logger.debug(
            "Recorded category selection",
            extra={"category": selected_category, "records_count": len(self.learning_log)},
        )
        return record

    def get_accuracy(self) -> float:
        """Placeholder accuracy: 0 with no history, a fixed figure otherwise."""
        if len(self.learning_log) == 0:
            return 0.0
        return PLACEHOLDER_ACCURACY
