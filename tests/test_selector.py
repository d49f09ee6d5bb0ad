"""Tests for count ordering and top-N selection."""

from tagcloud.selector import FrequencyEntry, find_top_n, max_count, sort_by_count

ENTRIES = [FrequencyEntry("a", 5), FrequencyEntry("b", 3), FrequencyEntry("c", 1)]


class TestFindTopN:
    def test_takes_first_n(self) -> None:
        assert find_top_n(ENTRIES, 2) == [("a", 5), ("b", 3)]

    def test_n_larger_than_entries(self) -> None:
        assert find_top_n(ENTRIES, 10) == ENTRIES

    def test_zero_and_negative(self) -> None:
        assert find_top_n(ENTRIES, 0) == []
        assert find_top_n(ENTRIES, -3) == []

    def test_does_not_consume_input(self) -> None:
        source = list(ENTRIES)
        result = find_top_n(source, 2)
        result.append(FrequencyEntry("z", 1))
        assert source == ENTRIES


class TestSortByCount:
    def test_descending_counts(self) -> None:
        entries = sort_by_count({"c": 1, "a": 5, "b": 3})
        assert [e.count for e in entries] == [5, 3, 1]

    def test_equal_counts_ordered_by_word(self) -> None:
        entries = sort_by_count({"pear": 2, "fig": 2, "kiwi": 4, "apple": 2})
        assert [e.word for e in entries] == ["kiwi", "apple", "fig", "pear"]

    def test_leaves_mapping_untouched(self) -> None:
        freqs = {"x": 1, "y": 2}
        sort_by_count(freqs)
        assert freqs == {"x": 1, "y": 2}


class TestMaxCount:
    def test_max_over_all_words(self) -> None:
        assert max_count({"a": 2, "b": 9, "c": 4}) == 9

    def test_empty(self) -> None:
        assert max_count({}) == 0
