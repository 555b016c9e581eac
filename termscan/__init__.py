"""
termscan: Term Search with Pronoun Expansion

Finds which of a list of terms occur in a text. A pronoun among the
terms pulls in every pronoun of the same person and number; "I" is the
only term matched with its exact casing.

Public API:
  - find_term_instances:  Terms (and expanded pronouns) found in a text
  - scan:                 Same search, returning a structured SearchResult
  - is_term_case_sensitive
  - find_case_sensitive_term_instances
  - find_case_insensitive_term_instances
  - PRONOUN_CLASSES, CASE_SENSITIVE_TERMS: the fixed lookup tables

Usage:
    from termscan import find_term_instances
    find_term_instances("The Customer is not our client", "Customer, us")
    # ['customer', 'our']
"""

__version__ = "1.0.0"

from termscan.lexicon import (
    PRONOUN_CLASSES,
    CASE_SENSITIVE_TERMS,
    LEXICON_VERSION,
    get_pronoun_classes,
)
from termscan.classifier import is_term_case_sensitive
from termscan.expander import expand_pronouns
from termscan.matcher import (
    InvalidInput,
    find_case_sensitive_term_instances,
    find_case_insensitive_term_instances,
    find_term_instances,
    scan,
)
from termscan.schemas.search import SearchRequest, SearchResult

__all__ = [
    "PRONOUN_CLASSES",
    "CASE_SENSITIVE_TERMS",
    "LEXICON_VERSION",
    "get_pronoun_classes",
    "is_term_case_sensitive",
    "expand_pronouns",
    "InvalidInput",
    "find_case_sensitive_term_instances",
    "find_case_insensitive_term_instances",
    "find_term_instances",
    "scan",
    "SearchRequest",
    "SearchResult",
]
