"""Tests for keyboard_cli.core.texts – practice-text corpus and selection."""

from __future__ import annotations

import random
from pathlib import Path

import pytest
import yaml

from keyboard_cli.core.challenge import Challenge, ChallengeState
from keyboard_cli.core.texts import (
    DEFAULT_CORPUS_PATH,
    ChallengeSelector,
    CorpusError,
    Difficulty,
    TextCorpus,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def small_corpus() -> TextCorpus:
    return TextCorpus.from_mapping(
        {
            "easy": ["e1", "e2"],
            "medium": ["m1", "m2", "m3"],
            "hard": ["h1"],
        }
    )


def _write_yaml(path: Path, data: object) -> None:
    path.write_text(yaml.dump(data, allow_unicode=True, default_flow_style=False), encoding="utf-8")


# ---------------------------------------------------------------------------
# Difficulty
# ---------------------------------------------------------------------------

class TestDifficulty:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("easy", Difficulty.EASY),
            ("EASY", Difficulty.EASY),
            (" Hard ", Difficulty.HARD),
            ("medium", Difficulty.MEDIUM),
            ("impossible", Difficulty.MEDIUM),
            ("", Difficulty.MEDIUM),
        ],
    )
    def test_parse(self, value, expected):
        assert Difficulty.parse(value) is expected


# ---------------------------------------------------------------------------
# Built-in corpus
# ---------------------------------------------------------------------------

class TestBuiltinCorpus:
    def test_loads(self):
        corpus = TextCorpus.load()
        assert len(corpus.texts(Difficulty.EASY)) == 3
        assert len(corpus.texts(Difficulty.MEDIUM)) == 4
        assert len(corpus.texts(Difficulty.HARD)) == 3

    def test_tiers_disjoint(self):
        corpus = TextCorpus.load()
        seen = set()
        for tier in Difficulty:
            texts = set(corpus.texts(tier))
            assert not texts & seen
            seen |= texts

    def test_default_path_exists(self):
        assert DEFAULT_CORPUS_PATH.exists()

    def test_tiers_read_only(self):
        corpus = TextCorpus.load()
        with pytest.raises(TypeError):
            corpus.tiers[Difficulty.EASY] = ("x",)  # type: ignore[index]


# ---------------------------------------------------------------------------
# Corpus loading – error paths
# ---------------------------------------------------------------------------

class TestCorpusErrors:
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            TextCorpus.load(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "texts.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(CorpusError, match="expected a mapping"):
            TextCorpus.load(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "texts.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(CorpusError, match="expected a mapping"):
            TextCorpus.load(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "texts.yaml"
        path.write_text("easy: [unclosed\n", encoding="utf-8")
        with pytest.raises(CorpusError, match="invalid YAML"):
            TextCorpus.load(path)

    def test_unknown_tier(self):
        with pytest.raises(CorpusError, match="unknown tier"):
            TextCorpus.from_mapping({"easy": ["a"], "medium": ["b"], "hard": ["c"], "extreme": ["d"]})

    def test_missing_tier(self):
        with pytest.raises(CorpusError, match="missing tiers: hard"):
            TextCorpus.from_mapping({"easy": ["a"], "medium": ["b"]})

    def test_tier_not_list(self):
        with pytest.raises(CorpusError, match="must be a list"):
            TextCorpus.from_mapping({"easy": "a", "medium": ["b"], "hard": ["c"]})

    def test_empty_tier(self):
        with pytest.raises(CorpusError, match="has no texts"):
            TextCorpus.from_mapping({"easy": ["  "], "medium": ["b"], "hard": ["c"]})

    def test_non_text_entry(self):
        with pytest.raises(CorpusError, match="non-text entry"):
            TextCorpus.from_mapping({"easy": [42], "medium": ["b"], "hard": ["c"]})

    def test_duplicate_across_tiers(self):
        with pytest.raises(CorpusError, match="appears in both"):
            TextCorpus.from_mapping({"easy": ["a"], "medium": ["a"], "hard": ["c"]})

    def test_corpus_error_is_value_error(self):
        assert issubclass(CorpusError, ValueError)


# ---------------------------------------------------------------------------
# Corpus loading – happy paths
# ---------------------------------------------------------------------------

class TestCorpusLoad:
    def test_custom_file(self, tmp_path: Path):
        path = tmp_path / "texts.yaml"
        _write_yaml(path, {"easy": ["one"], "medium": ["two"], "hard": ["three"]})
        corpus = TextCorpus.load(path)
        assert corpus.texts(Difficulty.HARD) == ("three",)

    def test_entries_stripped(self):
        corpus = TextCorpus.from_mapping({"easy": ["  a  "], "Medium": ["b"], "HARD": ["c"]})
        assert corpus.texts(Difficulty.EASY) == ("a",)
        assert corpus.texts(Difficulty.MEDIUM) == ("b",)


# ---------------------------------------------------------------------------
# ChallengeSelector
# ---------------------------------------------------------------------------

class TestChallengeSelector:
    def test_selects_from_tier(self, small_corpus: TextCorpus):
        selector = ChallengeSelector(small_corpus, rng=random.Random(1))
        for _ in range(50):
            assert selector.select_text(Difficulty.MEDIUM) in {"m1", "m2", "m3"}
            assert selector.select_text(Difficulty.EASY) in {"e1", "e2"}
            assert selector.select_text(Difficulty.HARD) == "h1"

    def test_choice_varies(self, small_corpus: TextCorpus):
        selector = ChallengeSelector(small_corpus, rng=random.Random(7))
        picks = {selector.select_text(Difficulty.MEDIUM) for _ in range(200)}
        assert picks == {"m1", "m2", "m3"}

    def test_partition_is_stable(self, small_corpus: TextCorpus):
        selector = ChallengeSelector(small_corpus)
        assert small_corpus.texts(Difficulty.EASY) == small_corpus.texts(Difficulty.EASY)
        assert selector.corpus is small_corpus

    def test_new_challenge(self, small_corpus: TextCorpus):
        selector = ChallengeSelector(small_corpus, rng=random.Random(3))
        challenge = selector.new_challenge(Difficulty.HARD)
        assert isinstance(challenge, Challenge)
        assert challenge.text == "h1"
        assert challenge.state is ChallengeState.NOT_STARTED

    def test_new_challenge_defaults_to_medium(self, small_corpus: TextCorpus):
        selector = ChallengeSelector(small_corpus)
        assert selector.new_challenge().text in {"m1", "m2", "m3"}
