"""Tests for the scored category suggestion engine."""

import threading

import pytest

from expense_tracker.categorization.suggestion import (
    PLACEHOLDER_ACCURACY,
    CategorySuggester,
    LearningLog,
)
from expense_tracker.schemas.internal import LearningRecord

CATEGORIES = [
    "Groceries",
    "Dining Out",
    "Fuel",
    "Public Transport",
    "Electricity",
    "Internet",
    "Mobile",
    "Entertainment",
    "Others",
]


@pytest.fixture
def suggester() -> CategorySuggester:
    return CategorySuggester()


class TestSuggestCategory:
    @pytest.mark.parametrize(
        "description,merchant,expected",
        [
            ("Monthly groceries", "DMart Supermarket", "Groceries"),
            ("Dinner", "Pizza Hut Restaurant", "Dining Out"),
            ("Petrol", "Indian Oil Pump", "Fuel"),
            ("Monthly bill", "Electricity Board", "Electricity"),
            ("Daily commute", "Metro Card Recharge", "Public Transport"),
            ("Internet service", "Broadband Provider", "Internet"),
        ],
    )
    def test_suggest_category(self, suggester, description, merchant, expected):
        assert suggester.suggest_category(description, merchant, CATEGORIES) == expected

    def test_empty_inputs_return_others(self, suggester):
        assert suggester.suggest_category("", "", CATEGORIES) == "Others"
        assert suggester.suggest_category(None, None) == "Others"

    def test_no_match_returns_others(self, suggester):
        assert suggester.suggest_category("Random", "Unknown Vendor", CATEGORIES) == "Others"

    def test_case_insensitive(self, suggester):
        upper = suggester.suggest_category("GROCERIES", "DMART", CATEGORIES)
        lower = suggester.suggest_category("groceries", "dmart", CATEGORIES)
        assert upper == lower == "Groceries"

    def test_ties_go_to_first_table_entry(self, suggester):
        # "coffee" scores 3 for Dining Out, Coffee & Snacks, and via "fee" for
        # Subscriptions and Bank Charges. Dining Out is listed first.
        assert suggester.score("", "coffee")["Dining Out"] == 3
        assert suggester.score("", "coffee")["Coffee & Snacks"] == 3
        assert suggester.suggest_category("", "coffee") == "Dining Out"

    def test_known_categories_do_not_filter(self, suggester):
        assert suggester.suggest_category("Petrol", "Indian Oil Pump", ["Groceries"]) == "Fuel"


class TestScore:
    def test_merchant_weight(self, suggester):
        assert suggester.score("", "Shell")["Fuel"] == 3

    def test_description_weight(self, suggester):
        assert suggester.score("petrol", "")["Fuel"] == 2

    def test_spanning_keyword_weight(self, suggester):
        scores = suggester.score("fast", "food")
        assert scores["Dining Out"] == 1
        assert scores["Pet Food & Care"] == 3

    def test_accumulates_per_category(self, suggester):
        assert suggester.score("Monthly groceries", "DMart Supermarket")["Groceries"] == 9

    def test_zero_scores_omitted(self, suggester):
        assert suggester.score("", "") == {}

    def test_custom_table(self):
        suggester = CategorySuggester(table={"Kids": ("toy",)})
        assert suggester.suggest_category("", "Toy World") == "Kids"


class TestSuggestionsWithConfidence:
    def test_ranked_with_confidence(self, suggester):
        suggestions = suggester.get_suggestions_with_confidence(
            "Monthly groceries", "DMart Supermarket", CATEGORIES
        )

        assert [s.category for s in suggestions] == ["Groceries", "Subscriptions"]
        assert suggestions[0].confidence == pytest.approx(60.0)
        assert suggestions[1].confidence == pytest.approx(2 / 15 * 100)

    def test_at_most_three(self, suggester):
        suggestions = suggester.get_suggestions_with_confidence("", "coffee")

        assert len(suggestions) == 3
        assert [s.category for s in suggestions] == [
            "Dining Out",
            "Coffee & Snacks",
            "Subscriptions",
        ]
        assert all(s.confidence == pytest.approx(20.0) for s in suggestions)

    def test_confidence_is_capped(self, suggester):
        suggestions = suggester.get_suggestions_with_confidence(
            "", "gym fitness yoga trainer workout exercise membership class studio"
        )

        assert suggestions[0].category == "Gym & Fitness"
        assert suggestions[0].confidence == 100.0
        assert all(0 <= s.confidence <= 100 for s in suggestions)

    @pytest.mark.parametrize(
        "description,merchant",
        [
            ("Daily commute", "Metro Card Recharge"),
            ("Dinner", "Pizza Hut Restaurant"),
            ("Vet visit for dog", "Pet Clinic"),
            ("", ""),
        ],
    )
    def test_sorted_descending(self, suggester, description, merchant):
        suggestions = suggester.get_suggestions_with_confidence(description, merchant)
        confidences = [s.confidence for s in suggestions]

        assert len(suggestions) <= 3
        assert confidences == sorted(confidences, reverse=True)

    def test_empty_inputs(self, suggester):
        assert suggester.get_suggestions_with_confidence("", "") == []


class TestLearning:
    def test_record_user_selection(self, suggester):
        record = suggester.record_user_selection("Dinner", "Barbeque Nation", "Dining Out")

        assert isinstance(record, LearningRecord)
        assert record.selected_category == "Dining Out"
        assert record.timestamp > 0
        assert suggester.learning_log.records() == (record,)

    def test_accuracy_placeholder(self, suggester):
        assert suggester.get_accuracy() == 0.0

        suggester.record_user_selection("x", "y", "Others")

        assert suggester.get_accuracy() == PLACEHOLDER_ACCURACY

    def test_selections_do_not_change_suggestions(self, suggester):
        before = suggester.get_suggestions_with_confidence("Petrol", "Indian Oil Pump")
        suggester.record_user_selection("Petrol", "Indian Oil Pump", "Vehicle Maintenance")

        assert suggester.get_suggestions_with_confidence("Petrol", "Indian Oil Pump") == before

    def test_shared_log(self):
        log = LearningLog()
        first = CategorySuggester(learning_log=log)
        second = CategorySuggester(learning_log=log)

        first.record_user_selection("a", "b", "Fuel")
        second.record_user_selection("c", "d", "Water")

        assert len(log) == 2
        assert [r.selected_category for r in log.records()] == ["Fuel", "Water"]


class TestLearningLog:
    def test_snapshot_is_immutable(self):
        log = LearningLog()
        log.append(LearningRecord(description="a", merchant="b", selected_category="Fuel"))

        snapshot = log.records()
        log.append(LearningRecord(description="c", merchant="d", selected_category="Water"))

        assert len(snapshot) == 1
        assert len(log) == 2

    def test_concurrent_appends_are_not_lost(self):
        log = LearningLog()

        def worker(n: int) -> None:
            for i in range(250):
                log.append(
                    LearningRecord(description=f"{n}-{i}", merchant="m", selected_category="Others")
                )

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(log) == 2000
