# src/models/query.py
from __future__ import annotations
from typing import List

from pydantic import BaseModel, Field


class Query(BaseModel):
    """First token is the name to search, the rest are category keywords."""

    search_term: str = ""
    keywords: List[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.search_term

    @classmethod
    def parse(cls, text: str) -> "Query":
        words = (text or "").lower().split()
        if not words:
            return cls()
        return cls(search_term=words[0], keywords=words[1:])
