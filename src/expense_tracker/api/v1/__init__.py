"""API version 1 routes."""

from fastapi import APIRouter

from expense_tracker.api.v1 import categories, sms

router = APIRouter(prefix="/api/v1")

router.include_router(sms.router)
router.include_router(categories.router)
