"""
Tests for agent_programs.core.validator - lookup-key capability checks.
"""
import pytest

from agent_programs.core.validator import (
    InvalidTableError,
    TableValidator,
    UnhashablePerceptError,
    ensure_percept,
    is_lookup_key,
)


class TestLookupKeys:
    """Equality/hash capability of single percepts."""

    @pytest.mark.parametrize("value", ["sunny", 3, (1, 2), frozenset({"a"}), None])
    def test_hashable_values(self, value):
        """Hashable values are accepted and returned unchanged."""
        assert is_lookup_key(value)
        assert ensure_percept(value) is value

    @pytest.mark.parametrize("value", [["a"], {"a": 1}, {1, 2}])
    def test_unhashable_values(self, value):
        """Lists, dicts and sets cannot be percepts of a table."""
        assert not is_lookup_key(value)
        with pytest.raises(UnhashablePerceptError):
            ensure_percept(value)

    def test_unhashable_is_type_error(self):
        """Callers catching TypeError see the boundary failure."""
        with pytest.raises(TypeError):
            ensure_percept([])


class TestTableValidator:
    """Normalization of caller-supplied tables."""

    def test_list_keys_converted(self):
        """Pairs with list sequences become tuple keys."""
        table = TableValidator().normalize([(["a", "b"], 1)])

        assert table == {("a", "b"): 1}

    def test_mapping_copied(self):
        """normalize returns a new dict."""
        original = {("a",): 1}

        table = TableValidator().normalize(original)

        assert table == original
        assert table is not original

    def test_alphabet_exposed(self):
        """The declared alphabet is kept as a frozenset."""
        assert TableValidator(["a", "b", "a"]).alphabet == frozenset({"a", "b"})
        assert TableValidator().alphabet is None

    def test_unhashable_alphabet(self):
        """Alphabet members are checked too."""
        with pytest.raises(UnhashablePerceptError):
            TableValidator([["a"]])

    def test_unhashable_percept_in_pair(self):
        """A list inside a sequence is rejected."""
        with pytest.raises(UnhashablePerceptError):
            TableValidator().normalize([([["nested"]], 1)])

    def test_bytes_key_rejected(self):
        """bytes are a single percept, not a sequence."""
        with pytest.raises(InvalidTableError):
            TableValidator().sequence_key(b"ab")
