"""Category keyword tables.

Two independent tables live here. ``SMS_CATEGORY_KEYWORDS`` is tuned for bank
SMS idioms and drives the parser's first-match categorization.
``SUGGESTION_CATEGORY_KEYWORDS`` is tuned for merchant/description free text
and drives the scored suggestion engine. They overlap but are not meant to
agree; changing one must not silently change the other.

Ordering matters in both: earlier categories win ties.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

OTHERS: Final[str] = "Others"


def _freeze(table: dict[str, list[str]]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({category: tuple(words) for category, words in table.items()})


SMS_CATEGORY_KEYWORDS: Final[Mapping[str, tuple[str, ...]]] = _freeze(
    {
        "Food": [
            "restaurant", "food", "cafe", "coffee", "pizza", "burger",
            "hotel", "food delivery", "swiggy", "zomato", "uber eats", "dominos",
        ],
        "Transport": [
            "uber", "ola", "taxi", "petrol", "fuel", "gas station",
            "parking", "ticket", "train", "flight", "bus",
        ],
        "Rent": ["rent", "landlord", "property", "mortgage"],
        "Utilities": [
            "electricity", "water", "gas", "internet", "mobile",
            "phone", "isp", "postpaid",
        ],
        "Shopping": [
            "amazon", "flipkart", "mall", "store", "shop", "retail",
            "grocery", "supermarket", "walmart", "target",
        ],
        "Entertainment": [
            "movie", "theater", "cinema", "game", "spotify",
            "netflix", "youtube", "entertainment",
        ],
        "Medical": [
            "hospital", "doctor", "medical", "pharmacy", "medicine",
            "clinic", "health",
        ],
    }
)


SUGGESTION_CATEGORY_KEYWORDS: Final[Mapping[str, tuple[str, ...]]] = _freeze(
    {
        "Groceries": [
            "grocery", "supermarket", "mart", "store", "dmart", "blinkit", "zepto",
            "food corner", "convenience", "vegetable", "farmer market",
        ],
        "Dining Out": [
            "restaurant", "cafe", "coffee", "pizza", "burger", "hotel", "diner",
            "fast food", "eatery", "bistro", "pub", "bar", "meal",
        ],
        "Coffee & Snacks": [
            "coffee", "cafe", "tea", "snack", "bakery", "pastry", "juice",
            "smoothie", "breakfast", "brunch", "dessert",
        ],
        "Fuel": [
            "petrol", "gas", "fuel", "pump", "filling station", "shell", "bp",
            "essar", "indian oil", "diesel",
        ],
        "Public Transport": [
            "metro", "bus", "train", "railway", "ticket", "transit", "uber pool",
            "carpool", "transport", "commute",
        ],
        "Ride Sharing": [
            "uber", "ola", "cab", "taxi", "ride", "auto", "rapido", "transport",
        ],
        "Vehicle Maintenance": [
            "mechanic", "service", "repair", "garage", "maintenance", "washing",
            "car wash", "oil change", "spare parts",
        ],
        "Electricity": [
            "electricity", "power", "bill", "kwh", "electric", "power bill",
            "utility", "discom",
        ],
        "Water": [
            "water", "hydro", "municipal", "aqua", "supply", "purifier", "tank",
        ],
        "Internet": [
            "internet", "wifi", "broadband", "airtel", "jio", "vodafone",
            "recharge", "data", "isp", "telecom",
        ],
        "Home Maintenance": [
            "plumber", "electrician", "carpenter", "paint", "construction",
            "repair", "maintenance", "cleaning", "labour",
        ],
        "Clothing": [
            "clothes", "dress", "shirt", "pants", "shoe", "fashion", "apparel",
            "boutique", "tailoring", "garment", "wear",
        ],
        "Electronics": [
            "electronics", "phone", "laptop", "computer", "gadget", "mobile",
            "tablet", "camera", "device", "tech",
        ],
        "Home & Furniture": [
            "furniture", "sofa", "bed", "table", "chair", "home", "decor",
            "kitchen", "bedding", "curtain",
        ],
        "Books & Media": [
            "book", "novel", "comics", "magazine", "library", "reader",
            "kindle", "audiobook", "publication",
        ],
        "Movies & Streaming": [
            "movie", "cinema", "netflix", "prime video", "youtube", "hotstar",
            "theater", "ticket", "film", "show", "stream",
        ],
        "Gaming": [
            "game", "gaming", "steam", "playstore", "console", "ps", "xbox",
            "nintendo", "esports",
        ],
        "Sports & Hobbies": [
            "gym", "fitness", "sport", "hobby", "yoga", "trainer", "class",
            "equipment", "league",
        ],
        "Subscriptions": [
            "subscription", "monthly", "plan", "premium", "membership",
            "recurring", "annual", "fee",
        ],
        "Medical": [
            "doctor", "hospital", "clinic", "medical", "health", "medicine",
            "appointment", "consultation", "surgery",
        ],
        "Pharmacy": [
            "pharmacy", "medicine", "drug", "tablets", "prescription",
            "chemist", "pills", "vaccine",
        ],
        "Gym & Fitness": [
            "gym", "fitness", "yoga", "trainer", "workout", "exercise",
            "membership", "class", "studio",
        ],
        "Health Insurance": [
            "insurance", "health", "policy", "premium", "mediclaim", "coverage",
        ],
        "Loan Payment": [
            "loan", "emi", "mortgage", "credit", "monthly payment",
            "installment", "debt",
        ],
        "Investment": [
            "stock", "mutual fund", "investment", "trading", "broker",
            "portfolio", "dividend",
        ],
        "Bank Charges": [
            "charge", "fee", "bank", "atm", "transfer", "account",
            "maintenance", "penalty",
        ],
        "Tuition & Courses": [
            "tuition", "course", "school", "college", "university", "class",
            "coaching", "training", "academy", "education",
        ],
        "School Supplies": [
            "book", "pen", "pencil", "notebook", "stationery", "supplies",
            "school", "study", "materials",
        ],
        "Pet Food & Care": [
            "pet", "dog", "cat", "animal", "food", "care", "treat",
            "grooming", "shop",
        ],
        "Veterinary": [
            "vet", "veterinary", "clinic", "animal", "doctor", "vaccination",
            "treatment",
        ],
        "Accommodation": [
            "hotel", "resort", "hostel", "airbnb", "stay", "lodge",
            "apartment", "booking",
        ],
        "Travel & Flights": [
            "flight", "airline", "travel", "ticket", "train", "bus",
            "booking", "vacation", "tour", "trip",
        ],
        "Gifts & Charity": [
            "gift", "charity", "donation", "present", "fund", "ngo",
            "contribution",
        ],
    }
)
