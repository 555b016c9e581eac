"""
Lexicon: Fixed Term Tables

The lexicon defines:
  1. The pronoun classes used for expansion (grammatical person/number)
  2. The terms that must never be case-folded during matching

These tables are read-only. They are built once at import time and
exposed as a mapping proxy of tuples and a frozenset, so nothing at
runtime can add a pronoun or change a term's case rule.
"""

from __future__ import annotations

from types import MappingProxyType

from termscan.config import settings

LEXICON_VERSION = settings.LEXICON_VERSION


# ============================================================
# PRONOUN CLASSES (declaration order is expansion order)
# ============================================================

PRONOUN_CLASSES = MappingProxyType({
    "1st person singular": ("I", "me", "my", "mine", "myself"),
    "1st person plural": ("we", "us", "our", "ours", "ourselves"),
    "2nd person singular": ("you", "your", "yourself"),
})


# ============================================================
# CASE-SENSITIVE TERMS
# ============================================================

# Entries must be uppercase, e.g. "CUSTOMER"
CASE_SENSITIVE_TERMS = frozenset({"I"})


def get_pronoun_classes() -> list[dict]:
    """
    Return every pronoun class with its members.

    Used to inspect the expansion surface without touching the tables.
    """
    return [
        {
            "name": name,
            "pronouns": list(pronouns),
            "case_sensitive": [p for p in pronouns if p.upper() in CASE_SENSITIVE_TERMS],
        }
        for name, pronouns in PRONOUN_CLASSES.items()
    ]
