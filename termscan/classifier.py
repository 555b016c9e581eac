"""
Term Classifier

Decides whether a term is matched with its exact casing. The decision
looks only at the term itself, never at the text being searched.
"""

from __future__ import annotations

from typing import Iterable

from termscan.lexicon import CASE_SENSITIVE_TERMS


def is_term_case_sensitive(term: str) -> bool:
    """True if the uppercased term is in the case-sensitive set."""
    return term.upper() in CASE_SENSITIVE_TERMS


def normalize_term(term: str) -> str:
    """Keep case-sensitive terms as supplied, lowercase everything else."""
    if is_term_case_sensitive(term):
        return term
    return term.lower()


def partition_terms(terms: Iterable[str]) -> tuple[list[str], list[str]]:
    """
    Split terms into (case_sensitive, case_insensitive), keeping order.

    Every term is classified on its own, so pronouns added by expansion
    are sorted the same way as the caller's terms.
    """
    case_sensitive: list[str] = []
    case_insensitive: list[str] = []
    for term in terms:
        if is_term_case_sensitive(term):
            case_sensitive.append(term)
        else:
            case_insensitive.append(term)
    return case_sensitive, case_insensitive
