"""Error codes and user-friendly messages.

Each error has:
- error_code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

ERROR_CATALOG: dict[str, dict] = {
    "SMS_001": {
        "code": "SMS_001",
        "message": "SMS batch exceeds maximum size",
        "user_message": "Too many messages were sent in one request.",
        "suggestion": "Split the messages into smaller batches and try again.",
        "retry_allowed": True,
    },
    "SMS_002": {
        "code": "SMS_002",
        "message": "Expense repository rejected the parsed SMS transaction",
        "user_message": "We couldn't save the expense from this message.",
        "suggestion": "Please try again in a few moments.",
        "retry_allowed": True,
    },
    "CAT_001": {
        "code": "CAT_001",
        "message": "Selected category is blank",
        "user_message": "Please choose a category.",
        "suggestion": "Pick one of the suggested categories or type a category name.",
        "retry_allowed": False,
    },
    "CAT_002": {
        "code": "CAT_002",
        "message": "Selected category is not one of the known categories",
        "user_message": "That category isn't in your category list.",
        "suggestion": "Add the category first, or choose an existing one.",
        "retry_allowed": False,
    },
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request data failed validation",
        "user_message": "Invalid input data",
        "suggestion": "Please check your input and try again",
        "retry_allowed": True,
    },
    "SYS_001": {
        "code": "SYS_001",
        "message": "Internal server error",
        "user_message": "An unexpected error occurred",
        "suggestion": "Please try again later or contact support",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Unknown codes resolve to a generic, retryable definition.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again. Contact support if the problem persists.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]


def get_user_message(error_code: str) -> str:
    """Get user-friendly message for an error code."""
    return get_error(error_code)["user_message"]


def get_suggestion(error_code: str) -> str:
    """Get actionable suggestion for an error code."""
    return get_error(error_code)["suggestion"]


def is_retryable(error_code: str) -> bool:
    """Check if an error is retryable."""
    return get_error(error_code)["retry_allowed"]
