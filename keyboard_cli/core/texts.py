from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

import yaml

from keyboard_cli.core.challenge import Challenge

logger = logging.getLogger(__name__)

DEFAULT_CORPUS_PATH = Path(__file__).resolve().parent.parent / "data" / "practice_texts.yaml"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: str) -> "Difficulty":
        """Case-insensitive lookup; anything unrecognised means medium."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.MEDIUM


class CorpusError(ValueError):
    """Raised when the practice-text corpus is missing or malformed."""


@dataclass(frozen=True)
class TextCorpus:
    tiers: Mapping[Difficulty, Tuple[str, ...]]

    def texts(self, tier: Difficulty) -> Tuple[str, ...]:
        return self.tiers[tier]

    @classmethod
    def from_mapping(cls, raw: object, source: str = "<corpus>") -> "TextCorpus":
        if not raw or not isinstance(raw, dict):
            raise CorpusError(f"{source}: expected a mapping of tier name to texts")

        tiers: Dict[Difficulty, Tuple[str, ...]] = {}
        seen: Dict[str, Difficulty] = {}
        for name, content in raw.items():
            try:
                tier = Difficulty(str(name).strip().lower())
            except ValueError:
                raise CorpusError(f"{source}: unknown tier {name!r}") from None
            if not isinstance(content, list):
                raise CorpusError(f"{source}: tier {tier.value!r} must be a list of texts")
            texts = []
            for item in content:
                if not isinstance(item, str):
                    raise CorpusError(f"{source}: tier {tier.value!r} has a non-text entry {item!r}")
                text = item.strip()
                if not text:
                    continue
                if text in seen:
                    raise CorpusError(
                        f"{source}: {text!r} appears in both {seen[text].value!r} and {tier.value!r}"
                    )
                seen[text] = tier
                texts.append(text)
            if not texts:
                raise CorpusError(f"{source}: tier {tier.value!r} has no texts")
            tiers[tier] = tuple(texts)

        missing = [t.value for t in Difficulty if t not in tiers]
        if missing:
            raise CorpusError(f"{source}: missing tiers: {', '.join(missing)}")
        return cls(tiers=MappingProxyType(tiers))

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "TextCorpus":
        corpus_path = path or DEFAULT_CORPUS_PATH
        if not corpus_path.exists():
            raise FileNotFoundError(f"Practice text file not found: {corpus_path}")
        try:
            raw = yaml.safe_load(corpus_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise CorpusError(f"{corpus_path.name}: invalid YAML: {e}") from e
        corpus = cls.from_mapping(raw, source=corpus_path.name)
        logger.info(
            "Loaded practice texts from %s (%s)",
            corpus_path,
            ", ".join(f"{t.value}={len(corpus.texts(t))}" for t in Difficulty),
        )
        return corpus


class ChallengeSelector:
    """Picks practice texts for a difficulty tier."""

    def __init__(self, corpus: TextCorpus, rng: Optional[random.Random] = None) -> None:
        self._corpus = corpus
        self._rng = rng or random.Random()

    @property
    def corpus(self) -> TextCorpus:
        return self._corpus

    def select_text(self, tier: Difficulty) -> str:
        """Return a random text from ``tier``'s slice of the corpus."""
        return self._rng.choice(self._corpus.texts(tier))

    def new_challenge(self, tier: Difficulty = Difficulty.MEDIUM) -> Challenge:
        text = self.select_text(tier)
        logger.debug("New %s challenge: %r", tier.value, text)
        return Challenge(text)
