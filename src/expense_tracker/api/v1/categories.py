"""Category suggestion endpoints."""

from fastapi import APIRouter, Depends, status

from expense_tracker.api.deps import get_suggester
from expense_tracker.categorization.suggestion import CategorySuggester
from expense_tracker.core.exceptions import ValidationError
from expense_tracker.schemas.category import (
    CategoryAccuracyResponse,
    CategorySelectionRequest,
    CategorySelectionResponse,
    CategorySuggestRequest,
    CategorySuggestResponse,
)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.post(
    "/suggest",
    response_model=CategorySuggestResponse,
    summary="Suggest a category for a description/merchant",
)
async def suggest_category(
    payload: CategorySuggestRequest,
    suggester: CategorySuggester = Depends(get_suggester),
) -> CategorySuggestResponse:
    """
    Score the text against the suggestion keyword table.

    Returns the best category ("Others" when nothing matches) and up to three
    ranked suggestions with heuristic confidence.
    """
    return CategorySuggestResponse(
        category=suggester.suggest_category(
            payload.description, payload.merchant, payload.known_categories
        ),
        suggestions=suggester.get_suggestions_with_confidence(
            payload.description, payload.merchant, payload.known_categories
        ),
    )


@router.post(
    "/selections",
    response_model=CategorySelectionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record the category the user picked",
)
async def record_selection(
    payload: CategorySelectionRequest,
    suggester: CategorySuggester = Depends(get_suggester),
) -> CategorySelectionResponse:
    selected = payload.selected_category.strip()
    if not selected:
        raise ValidationError(error_code="CAT_001", http_status=status.HTTP_400_BAD_REQUEST)

    if payload.known_categories is not None and selected not in payload.known_categories:
        raise ValidationError(
            error_code="CAT_002",
            details={"selected_category": selected},
            http_status=status.HTTP_400_BAD_REQUEST,
        )

    suggester.record_user_selection(payload.description, payload.merchant, selected)
    return CategorySelectionResponse(records_count=len(suggester.learning_log))


@router.get(
    "/accuracy",
    response_model=CategoryAccuracyResponse,
    summary="Suggestion accuracy (placeholder)",
)
async def get_accuracy(
    suggester: CategorySuggester = Depends(get_suggester),
) -> CategoryAccuracyResponse:
    return CategoryAccuracyResponse(
        accuracy=suggester.get_accuracy(),
        records_count=len(suggester.learning_log),
    )
