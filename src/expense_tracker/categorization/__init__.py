"""Transaction categorization utilities.

Categorization is local and keyword-based (no network calls) so SMS ingestion
stays fast and message text never leaves the device/process.
"""

from .rules import categorize
from .suggestion import CategorySuggester, LearningLog

__all__ = ["categorize", "CategorySuggester", "LearningLog"]
