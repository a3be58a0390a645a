"""Tests for chunk splitting: coverage, bounds, overlap and boundary preference."""

import pytest

from docsum.services.chunking.chunker import reconstruct_text, split_text
from docsum.services.chunking.strategies.recursive_boundary import choose_boundary, effective_lookback
from docsum.services.errors import ConfigurationError

NATURAL_TEXT = (
    "The quick brown fox jumps over the lazy dog. It was not amused!\n\n"
    "Paragraph two starts here. Does it end? Yes, it ends here.\n\n"
    "吾輩は猫である。名前はまだ無い。どこで生れたかとんと見当がつかぬ。"
    "Final words without a terminal stop"
) * 20

SAMPLE_TEXTS = [
    NATURAL_TEXT,
    "x" * 2500,
    "word " * 400,
    "a",
]

SIZE_OVERLAP_PAIRS = [(1, 0), (2, 1), (5, 2), (37, 0), (50, 10), (100, 99), (300, 60), (5000, 100)]


class TestSplitTextScenarios:
    """Test suite for the reference configuration (30000 chars, 1000 overlap)."""

    def test_45000_chars_yields_two_chunks(self) -> None:
        text = "x" * 45000

        chunks = split_text(text, 30000, 1000)

        assert len(chunks) == 2
        assert chunks[0].length == 30000
        assert chunks[0].start == 0
        assert chunks[1].start == 29000
        assert chunks[1].end == 45000
        assert chunks[1].text == text[29000:]

    def test_sliding_window_matches_on_spaced_text(self) -> None:
        text = "word " * 9000

        chunks = split_text(text, 30000, 1000, strategy="sliding_window")

        assert [(c.start, c.end) for c in chunks] == [(0, 30000), (29000, 45000)]

    def test_text_shorter_than_limit_is_one_chunk(self) -> None:
        chunks = split_text("short text", 30000, 1000)

        assert len(chunks) == 1
        assert chunks[0].text == "short text"
        assert chunks[0].index == 0


class TestSplitTextProperties:
    """Coverage, bound, overlap and determinism over many inputs and parameters."""

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    @pytest.mark.parametrize("size,overlap", SIZE_OVERLAP_PAIRS)
    @pytest.mark.parametrize("strategy", ["recursive", "sliding_window"])
    def test_coverage_bound_and_overlap(self, text: str, size: int, overlap: int, strategy: str) -> None:
        chunks = split_text(text, size, overlap, strategy=strategy)

        assert reconstruct_text(chunks, overlap) == text
        assert all(c.length <= size for c in chunks)
        assert [c.index for c in chunks] == list(range(len(chunks)))
        assert chunks[-1].end == len(text)
        for prev, cur in zip(chunks, chunks[1:]):
            assert cur.start == prev.end - overlap
            assert cur.start > prev.start

    def test_deterministic(self) -> None:
        first = split_text(NATURAL_TEXT, 200, 20)
        second = split_text(NATURAL_TEXT, 200, 20)

        assert first == second
        assert len({c.chunk_id for c in first}) == len(first)

    def test_empty_text_returns_no_chunks(self) -> None:
        assert split_text("", 100, 10) == []


class TestBoundaryPreference:
    """Test suite for the recursive strategy's choice of break point."""

    def test_prefers_paragraph_break(self) -> None:
        text = "a" * 65 + "\n\n" + "b" * 20 + ". " + "c" * 40

        chunks = split_text(text, 100, 0, boundary_lookback=40)

        assert chunks[0].end == 67
        assert chunks[0].text.endswith("\n\n")

    def test_falls_back_to_sentence_end(self) -> None:
        text = "a" * 70 + ". " + "b" * 50

        chunks = split_text(text, 100, 0, boundary_lookback=40)

        assert chunks[0].end == 72

    def test_cjk_sentence_end_needs_no_space(self) -> None:
        text = "あ" * 70 + "。" + "い" * 50

        chunks = split_text(text, 100, 0, boundary_lookback=40)

        assert chunks[0].end == 71

    def test_falls_back_to_word_break(self) -> None:
        text = "a" * 70 + " " + "b" * 50

        chunks = split_text(text, 100, 0, boundary_lookback=40)

        assert chunks[0].end == 71

    def test_hard_cut_when_break_is_outside_lookback(self) -> None:
        text = "a" * 10 + " " + "b" * 200

        chunks = split_text(text, 100, 0, boundary_lookback=20)

        assert chunks[0].end == 100

    def test_latest_boundary_in_tier_wins(self) -> None:
        text = "one. two. three. " + "x" * 100
        assert choose_boundary(text, 0, 17) == 17

    def test_lookback_is_clamped_so_chunks_exceed_overlap(self) -> None:
        assert effective_lookback(10, 8, 5) == 1
        assert effective_lookback(100, 0, None) == 20
        assert effective_lookback(100, 99, None) == 0


class TestSplitTextValidation:
    """Invalid parameters are configuration errors."""

    @pytest.mark.parametrize("size,overlap", [(100, 100), (100, 150), (0, 0), (10, -1)])
    def test_rejects_invalid_size_and_overlap(self, size: int, overlap: int) -> None:
        with pytest.raises(ConfigurationError):
            split_text("some text", size, overlap)

    def test_rejects_unknown_strategy(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown chunking strategy"):
            split_text("some text", 100, 10, strategy="semantic")
