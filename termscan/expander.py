"""
Pronoun Expander

If any requested term belongs to a pronoun class, the whole class is
searched for. The supplied pronoun is not privileged: "us" pulls in
"we", "our", "ours" and "ourselves" alongside itself.

Terms are compared by exact string equality, so callers pass terms
that have already been through ``normalize_term``.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from termscan.lexicon import PRONOUN_CLASSES


def triggered_classes(terms: Sequence[str]) -> list[str]:
    """Names of the pronoun classes that contain at least one of the terms."""
    return [
        name
        for name, pronouns in PRONOUN_CLASSES.items()
        if any(term in pronouns for term in terms)
    ]


def expand_pronouns(terms: Sequence[str]) -> list[str]:
    """
    Return the pronouns to add to the search.

    Whole classes are appended in declaration order. The result may hold
    duplicates across classes; ``merge_terms`` removes them.
    """
    additional: list[str] = []
    for name in triggered_classes(terms):
        additional.extend(PRONOUN_CLASSES[name])
    return additional


def merge_terms(terms: Iterable[str], additional: Iterable[str]) -> list[str]:
    """Union of both inputs, first occurrence wins."""
    return list(dict.fromkeys([*terms, *additional]))
