"""
Tests for the term classifier and the fixed lexicon tables.
"""

import pytest
from termscan.classifier import is_term_case_sensitive, normalize_term, partition_terms
from termscan.lexicon import PRONOUN_CLASSES, CASE_SENSITIVE_TERMS, get_pronoun_classes


class TestIsTermCaseSensitive:
    def test_uppercase_i(self):
        assert is_term_case_sensitive("I") is True

    def test_lowercase_i(self):
        # Classification uses the uppercased form
        assert is_term_case_sensitive("i") is True

    def test_other_pronoun(self):
        assert is_term_case_sensitive("me") is False

    def test_empty_string(self):
        assert is_term_case_sensitive("") is False

    @pytest.mark.parametrize("term", ["I", "i", "Customer", "MY", "", "i)", "I,"])
    def test_depends_only_on_uppercase(self, term):
        assert is_term_case_sensitive(term) == (term.upper() in {"I"})
        assert is_term_case_sensitive(term) == is_term_case_sensitive(term.upper())


class TestNormalizeTerm:
    def test_case_sensitive_kept(self):
        assert normalize_term("I") == "I"
        assert normalize_term("i") == "i"

    def test_others_lowercased(self):
        assert normalize_term("Customer") == "customer"
        assert normalize_term("ME") == "me"


class TestPartitionTerms:
    def test_split_keeps_order(self):
        cs, ci = partition_terms(["me", "I", "client", "i", "my"])
        assert cs == ["I", "i"]
        assert ci == ["me", "client", "my"]

    def test_empty(self):
        assert partition_terms([]) == ([], [])


class TestLexicon:
    """The fixed tables must match the published values and stay read-only."""

    def test_pronoun_classes_verbatim(self):
        assert dict(PRONOUN_CLASSES) == {
            "1st person singular": ("I", "me", "my", "mine", "myself"),
            "1st person plural": ("we", "us", "our", "ours", "ourselves"),
            "2nd person singular": ("you", "your", "yourself"),
        }

    def test_declaration_order(self):
        assert list(PRONOUN_CLASSES) == [
            "1st person singular",
            "1st person plural",
            "2nd person singular",
        ]

    def test_case_sensitive_set(self):
        assert CASE_SENSITIVE_TERMS == frozenset({"I"})

    def test_classes_immutable(self):
        with pytest.raises(TypeError):
            PRONOUN_CLASSES["3rd person"] = ("they",)

    def test_class_members_immutable(self):
        with pytest.raises(AttributeError):
            PRONOUN_CLASSES["1st person plural"].append("y'all")

    def test_get_pronoun_classes(self):
        classes = get_pronoun_classes()
        assert [c["name"] for c in classes] == list(PRONOUN_CLASSES)
        first = classes[0]
        assert first["pronouns"] == ["I", "me", "my", "mine", "myself"]
        assert first["case_sensitive"] == ["I"]
        assert classes[2]["case_sensitive"] == []

    def test_get_pronoun_classes_returns_copies(self):
        classes = get_pronoun_classes()
        classes[0]["pronouns"].append("thee")
        assert "thee" not in PRONOUN_CLASSES["1st person singular"]
