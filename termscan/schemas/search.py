"""
Search Schemas: Request and Result Models

Pydantic models for a term search.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from termscan.lexicon import LEXICON_VERSION


class SearchRequest(BaseModel):
    """A single search: the text and its comma-space separated terms."""
    text: str = Field(..., description="Text to search. Split on single spaces.")
    terms: str = Field(..., description='Terms to find, separated by ", ".')

    model_config = {
        "strict": True,
        "frozen": True,
        "json_schema_extra": {"examples": [
            {"text": "The Customer is not our client", "terms": "Customer, us"},
        ]},
    }


class SearchResult(BaseModel):
    """Outcome of a search, with the intermediate term lists."""
    request: SearchRequest
    terms: list[str] = Field(..., description="Supplied terms after case normalization.")
    expanded_terms: list[str] = Field(..., description="Terms plus added pronouns, deduplicated.")
    pronoun_classes: list[str] = Field(default_factory=list)
    case_sensitive_matches: list[str] = Field(default_factory=list)
    case_insensitive_matches: list[str] = Field(default_factory=list)
    lexicon_version: str = LEXICON_VERSION

    @property
    def matches(self) -> list[str]:
        """Case-sensitive matches followed by case-insensitive matches."""
        return self.case_sensitive_matches + self.case_insensitive_matches
