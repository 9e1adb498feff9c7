"""Tests for uniquely.services.fingerprint."""

from uniquely.services.fingerprint import fingerprint, jaccard_similarity, shingles, similarity_percent


class TestShingles:
    def test_overlapping_three_word_windows(self):
        assert shingles("one two three four") == {"one two three", "two three four"}

    def test_exactly_n_words_gives_one_shingle(self):
        assert shingles("one two three") == {"one two three"}

    def test_fewer_than_n_words_is_empty(self):
        assert shingles("one two") == frozenset()
        assert shingles("") == frozenset()

    def test_text_is_normalised_first(self):
        assert shingles("One, Two; THREE!") == {"one two three"}

    def test_duplicate_windows_stored_once(self):
        result = shingles("a b c a b c")
        assert result == {"a b c", "b c a", "c a b"}

    def test_custom_length(self):
        result = shingles("one two three four five six", n=5)
        assert result == {"one two three four five", "two three four five six"}

    def test_size_bounded_by_word_count(self):
        text = "fast response times and fair pricing across the whole county"
        assert len(fingerprint(text)) <= len(text.split()) - 2

    def test_fingerprint_is_immutable(self):
        assert isinstance(fingerprint("one two three four"), frozenset)


class TestJaccardSimilarity:
    def test_both_empty_is_zero(self):
        assert jaccard_similarity(set(), set()) == 0.0

    def test_one_empty_is_zero(self):
        assert jaccard_similarity({"a b c"}, set()) == 0.0

    def test_identical_is_one(self):
        fp = fingerprint("professional plumbing services in canterbury")
        assert jaccard_similarity(fp, fp) == 1.0

    def test_disjoint_is_zero(self):
        assert jaccard_similarity({"a"}, {"b"}) == 0.0

    def test_partial_overlap(self):
        assert jaccard_similarity({"a", "b"}, {"b", "c"}) == 1 / 3

    def test_symmetric(self):
        a = fingerprint("emergency plumbing in canterbury with fast response")
        b = fingerprint("emergency plumbing in whitstable with fair pricing")
        assert jaccard_similarity(a, b) == jaccard_similarity(b, a)

    def test_bounded(self):
        a = fingerprint("one two three four five")
        b = fingerprint("three four five six seven")
        assert 0.0 <= jaccard_similarity(a, b) <= 1.0


class TestSimilarityPercent:
    def test_both_empty_is_zero(self):
        assert similarity_percent(frozenset(), frozenset()) == 0.0

    def test_identical_is_100(self):
        fp = fingerprint("professional plumbing services in canterbury")
        assert similarity_percent(fp, fp) == 100.0

    def test_whole_number_ratio_is_exact(self):
        current = frozenset(f"s{i}" for i in range(100))
        other = frozenset(f"s{i}" for i in range(29))
        assert similarity_percent(current, other) == 29.0

    def test_thirds_match_threshold_written_the_same_way(self):
        assert similarity_percent({"s1", "s2"}, {"s1", "s2", "s3"}) == 200 / 3
