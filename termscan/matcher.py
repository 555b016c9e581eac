"""
Matcher: Search Orchestrator

Finds which requested terms occur in a text:
  1. Split the text on single spaces and the terms on ", "
  2. Normalize the terms (lowercase unless case-sensitive)
  3. Add every pronoun from the classes the terms belong to
  4. Match case-sensitive terms exactly, all others ignoring case

Tokens are never stripped of punctuation: "myself," does not match
"myself" and "i)" does not match "I".
"""

from __future__ import annotations

import logging
from typing import Sequence

from pydantic import ValidationError

from termscan.classifier import normalize_term, partition_terms
from termscan.expander import expand_pronouns, merge_terms, triggered_classes
from termscan.schemas.search import SearchRequest, SearchResult

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = " "
TERM_SEPARATOR = ", "


class InvalidInput(TypeError):
    """Raised when a search is given something other than strings."""


def _require_str(name: str, value: object) -> None:
    if not isinstance(value, str):
        raise InvalidInput(f"{name} must be a str, got {type(value).__name__}")


def _require_sequence(name: str, value: object) -> None:
    # A bare string would be searched character by character
    if isinstance(value, str):
        raise InvalidInput(f"{name} must be a sequence of str, not a str")


def split_text(text: str) -> list[str]:
    """Split text on single spaces. Consecutive spaces yield empty tokens."""
    return text.split(TOKEN_SEPARATOR)


def split_terms(terms: str) -> list[str]:
    """Split a term string on ", ". No trimming of malformed entries."""
    return terms.split(TERM_SEPARATOR)


# ============================================================
# MATCHING
# ============================================================

def find_case_sensitive_term_instances(
    tokens: Sequence[str], terms: Sequence[str]
) -> list[str]:
    """
    Return the terms present in the tokens, comparing exact casing.

    "My" will not match "my".
    """
    _require_sequence("tokens", tokens)
    _require_sequence("terms", terms)
    token_set = set(tokens)
    return [term for term in terms if term in token_set]


def find_case_insensitive_term_instances(
    tokens: Sequence[str], terms: Sequence[str]
) -> list[str]:
    """
    Return the terms present in the tokens, ignoring case.

    "My" will match "my". Matched terms are returned lowercased.
    """
    _require_sequence("tokens", tokens)
    _require_sequence("terms", terms)
    token_set = {token.lower() for token in tokens}
    return [term for term in (t.lower() for t in terms) if term in token_set]


# ============================================================
# ORCHESTRATION
# ============================================================

def scan(text: str, terms: str) -> SearchResult:
    """
    Run a search and return every intermediate list along with the matches.

    Args:
        text: The text to search. Split on single spaces.
        terms: Terms separated by ", ". Pronouns pull in their whole class.

    Returns:
        SearchResult whose ``matches`` equals ``find_term_instances(text, terms)``.

    Raises:
        InvalidInput: if text or terms is not a str.
    """
    try:
        request = SearchRequest(text=text, terms=terms)
    except ValidationError as e:
        raise InvalidInput(str(e)) from e

    tokens = split_text(request.text)
    normalized = [normalize_term(term) for term in split_terms(request.terms)]

    classes = triggered_classes(normalized)
    expanded = merge_terms(normalized, expand_pronouns(normalized))
    case_sensitive, case_insensitive = partition_terms(expanded)

    result = SearchResult(
        request=request,
        terms=normalized,
        expanded_terms=expanded,
        pronoun_classes=classes,
        case_sensitive_matches=(
            find_case_sensitive_term_instances(tokens, case_sensitive)
            if case_sensitive else []
        ),
        case_insensitive_matches=find_case_insensitive_term_instances(
            tokens, case_insensitive
        ),
    )

    logger.debug(
        "Search complete",
        extra={
            "token_count": len(tokens),
            "term_count": len(normalized),
            "expanded_count": len(expanded),
            "match_count": len(result.matches),
            "pronoun_classes": classes,
        },
    )
    return result


def find_term_instances(text: str, terms: str) -> list[str]:
    """
    Determine which search terms appear in the text.

    If a pronoun is among the terms, the other pronouns of its class are
    searched for too. Case-sensitive matches come first, then
    case-insensitive ones. The list is not deduplicated: "i" and "I" can
    both be returned.
    """
    _require_str("text", text)
    _require_str("terms", terms)
    return scan(text, terms).matches
