# core/classify.py
from typing import Tuple

# 依序比對，先命中者優先：crash → construction → closure → weather → other
CLASS_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("crash", ("crash", "accident")),
    ("construction", ("construction",)),
    ("closure", ("closure", "closed")),
    ("weather", ("weather", "flood")),
)
DEFAULT_CLASS = "other"

def classify_category(category: str) -> str:
    t = (category or "").lower()
    for name, words in CLASS_KEYWORDS:
        if any(w in t for w in words):
            return name
    return DEFAULT_CLASS
