"""Tests for result assembly and grouping."""

from usaddr.postprocessing import TaggedToken, assemble, group_by_tag


class TestAssemble:
    """Test cases for assemble."""

    def test_pairs_positionally(self):
        result = assemble(["123", "Main"], ["AddressNumber", "StreetName"])
        assert result == [("123", "AddressNumber"), ("Main", "StreetName")]
        assert result[0].text == "123"
        assert result[0].label == "AddressNumber"

    def test_truncates_to_shorter(self, caplog):
        result = assemble(["123", "Main", "St"], ["AddressNumber"])
        assert result == [("123", "AddressNumber")]
        assert "mismatch" in caplog.text

    def test_empty(self):
        assert assemble([], []) == []


class TestGroupByTag:
    """Test cases for group_by_tag."""

    def test_merges_adjacent_labels(self):
        tagged = [("123", "AddressNumber"), ("Main", "StreetName"), ("Street", "StreetName")]
        assert group_by_tag(tagged) == [("123", "AddressNumber"), ("Main Street", "StreetName")]

    def test_non_adjacent_labels_stay_apart(self):
        tagged = [("A", "PlaceName"), ("B", "StateName"), ("C", "PlaceName")]
        assert group_by_tag(tagged) == tagged

    def test_long_run(self):
        tagged = [("Martin", "StreetName"), ("Luther", "StreetName"), ("King", "StreetName"), ("Jr", "StreetName")]
        assert group_by_tag(tagged) == [("Martin Luther King Jr", "StreetName")]

    def test_idempotent(self):
        tagged = [
            TaggedToken("123", "AddressNumber"),
            TaggedToken("Main", "StreetName"),
            TaggedToken("Street", "StreetName"),
            TaggedToken("Springfield", "PlaceName"),
            TaggedToken("IL", "StateName"),
        ]
        once = group_by_tag(tagged)
        assert group_by_tag(once) == once

    def test_empty(self):
        assert group_by_tag([]) == []
