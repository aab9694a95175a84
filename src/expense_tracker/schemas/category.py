"""Category suggestion request/response schemas."""

from pydantic import BaseModel, Field

from expense_tracker.schemas.internal import CategorySuggestion


class CategorySuggestRequest(BaseModel):
    """Free text to classify."""

    description: str = ""
    merchant: str = ""
    known_categories: list[str] | None = Field(
        None, description="User's category list (accepted for parity; does not filter)"
    )


class CategorySuggestResponse(BaseModel):
    category: str = Field(description="Best match, or 'Others'")
    suggestions: list[CategorySuggestion] = Field(
        default_factory=list, description="Up to three, highest confidence first"
    )


class CategorySelectionRequest(BaseModel):
    """A user's final category choice for a description/merchant pair."""

    description: str = ""
    merchant: str = ""
    selected_category: str
    known_categories: list[str] | None = Field(
        None, description="When given, the selection must be one of these"
    )


class CategorySelectionResponse(BaseModel):
    recorded: bool = True
    records_count: int


class CategoryAccuracyResponse(BaseModel):
    accuracy: float
    records_count: int
