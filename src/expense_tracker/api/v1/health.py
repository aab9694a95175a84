from fastapi import APIRouter, Request

from expense_tracker.categorization.keywords import SMS_CATEGORY_KEYWORDS

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    """Basic health check."""
    return {"status": "ok"}


@router.get("/health/ready")
async def health_ready(request: Request):
    """Readiness check: both keyword tables are loaded."""
    return {
        "status": "ready",
        "sms_categories": len(SMS_CATEGORY_KEYWORDS),
        "suggestion_categories": len(request.app.state.suggester.table),
    }
