"""
Frequency-Aware URL Corrector
Based on Peter Norvig's approach (https://norvig.com/spell-correct.html),
applied to hostnames instead of words.

Usage is two steps:
1) train() one or more times with large texts to build the frequency table
2) correct(token) to get the best known site for a token, or None
"""
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Set, Union

from .config import get_settings
from .edits import EditGenerator
from .extract import extract_sites

logger = logging.getLogger("corrector")


class URLCorrector:
    def __init__(self, alphabet: Optional[str] = None, workers: Optional[int] = None,
                 site_pattern: Optional[str] = None):
        settings = get_settings()
        if alphabet is None:
            alphabet = settings.ALPHABET
        if not alphabet:
            raise ValueError("Alphabet must contain at least one character")
        self.alphabet = alphabet
        self.site_pattern = site_pattern or settings.SITE_PATTERN
        self.url_counts: Counter = Counter()
        self._edits = EditGenerator(
            alphabet, workers if workers is not None else settings.EDIT_WORKERS
        )

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        """Release the edit worker pool."""
        self._edits.close()

    def __contains__(self, token: str) -> bool:
        return token in self.url_counts

    def __len__(self) -> int:
        return len(self.url_counts)

    @property
    def counts(self) -> Dict[str, int]:
        """Snapshot of the frequency table."""
        return dict(self.url_counts)

    # ============================================================
    # TRAINING
    # ============================================================
    def train(self, text: str) -> None:
        """
        Count every site found in `text`. Repeated calls keep accumulating;
        nothing is ever reset.
        """
        sites = extract_sites(text, self.site_pattern)
        self.url_counts.update(sites)
        logger.info(f"📚 Trained on {len(sites)} sites ({len(self.url_counts)} known)")

    def update(self, counts: Mapping[str, int]):
        """Merge pre-computed {site: count} data into the table."""
        for site, count in counts.items():
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ValueError(f"Invalid count for {site!r}: {count!r}")
        # Nothing is merged unless every count is valid
        for site, count in counts.items():
            self.url_counts[site] += count

    # ============================================================
    # CORRECTION
    # ============================================================
    def known(self, tokens: Iterable[str]) -> Set[str]:
        """The subset of `tokens` that appear in the frequency table."""
        return {t for t in tokens if t in self.url_counts}

    def _best(self, candidates: Iterable[str]) -> Optional[str]:
        # Highest count wins; equal counts go to the lexicographically smallest
        best = None
        best_count = 0
        for token in self.known(candidates):
            count = self.url_counts[token]
            if best is None or count > best_count or (count == best_count and token < best):
                best, best_count = token, count
        return best

    def correct(self, query: str) -> Optional[str]:
        """
        Most frequent known site within two edits of `query`, or None.

        `query` is matched as given. Training lowercases sites, so callers
        wanting case-insensitive correction lowercase the query first.
        """
        # A known site is already correct, whatever its count
        if query in self.url_counts:
            return query

        # 1. Distance 1
        first = self._edits(query)
        match = self._best(first)
        if match is not None:
            logger.debug(f"{query!r} -> {match!r} (distance 1)")
            return match

        # 2. Distance 2: edits of every distance-1 edit, known or not
        match = self._best(e2 for e1 in first for e2 in self._edits(e1))
        if match is not None:
            logger.debug(f"{query!r} -> {match!r} (distance 2)")
            return match

        logger.debug(f"No correction for {query!r}")
        return None

    # ============================================================
    # PERSISTENCE
    # ============================================================
    def save(self, path: Union[str, Path]):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(
                {"alphabet": self.alphabet, "url_counts": self.counts},
                f, indent=2, sort_keys=True,
            )
        logger.info(f"💾 Saved {len(self.url_counts)} sites to {path}")

    @classmethod
    def load(cls, path: Union[str, Path], workers: Optional[int] = None) -> "URLCorrector":
        """Rebuild a corrector from a file written by save()."""
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Malformed model file {path}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("url_counts"), dict):
            raise ValueError(f"Malformed model file {path}: missing 'url_counts'")

        alphabet = data.get("alphabet")
        if alphabet is not None and (not isinstance(alphabet, str) or not alphabet):
            raise ValueError(f"Malformed model file {path}: invalid alphabet {alphabet!r}")

        corrector = cls(alphabet=alphabet, workers=workers)
        corrector.update(data["url_counts"])
        logger.info(f"📚 Loaded {len(corrector)} sites from {path}")
        return corrector
