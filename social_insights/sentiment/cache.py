"""In-memory cache of model sentiment results keyed by content hash."""

from __future__ import annotations

import hashlib
from collections import OrderedDict

from social_insights.sentiment.types import SentimentResult


def content_hash(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


class SentimentCache:
    """Bounded cache, oldest entries are evicted first."""

    def __init__(self, max_size: int = 1024) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._entries: OrderedDict[str, SentimentResult] = OrderedDict()

    def get(self, text: str) -> SentimentResult | None:
        return self._entries.get(content_hash(text))

    def put(self, text: str, result: SentimentResult) -> None:
        key = content_hash(text)
        self._entries[key] = result
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_size:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, text: str) -> bool:
        return content_hash(text) in self._entries
