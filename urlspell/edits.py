"""
Edit Generator - the edit-distance-1 neighbourhood of a token.

Four independent blocks, always concatenated in this order:
    deletions + transpositions + substitutions + insertions

For a token of length n and an alphabet of k characters that is
    n + max(n - 1, 0) + n*k + (n + 1)*k
strings. Duplicates (e.g. no-op substitutions) are kept; lookups are
keyed by value so multiplicity does not matter.
"""
import logging
import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import List, Optional

logger = logging.getLogger("edits")


def deletions(token: str) -> List[str]:
    return [token[:i] + token[i + 1:] for i in range(len(token))]


def transpositions(token: str) -> List[str]:
    return [
        token[:i] + token[i + 1] + token[i] + token[i + 2:]
        for i in range(len(token) - 1)
    ]


def substitutions(token: str, alphabet: str) -> List[str]:
    return [
        token[:i] + c + token[i + 1:]
        for i in range(len(token))
        for c in alphabet
    ]


def insertions(token: str, alphabet: str) -> List[str]:
    return [
        token[:i] + c + token[i:]
        for i in range(len(token) + 1)
        for c in alphabet
    ]


def edits(token: str, alphabet: str, executor: Optional[Executor] = None) -> List[str]:
    """
    All strings one deletion, transposition, substitution or insertion
    away from `token`.

    With an executor the four blocks run as separate tasks and are joined
    in the fixed block order, so the result is identical either way.
    """
    if executor is None:
        return (
            deletions(token)
            + transpositions(token)
            + substitutions(token, alphabet)
            + insertions(token, alphabet)
        )

    futures = [
        executor.submit(deletions, token),
        executor.submit(transpositions, token),
        executor.submit(substitutions, token, alphabet),
        executor.submit(insertions, token, alphabet),
    ]
    results: List[str] = []
    for future in futures:
        results.extend(future.result())
    return results


class EditGenerator:
    """Binds an alphabet to an optional worker pool for block fan-out."""

    def __init__(self, alphabet: str, workers: int = 4):
        if not alphabet:
            raise ValueError("Alphabet must contain at least one character")
        self.alphabet = alphabet
        self.workers = max(1, workers)
        self._executor: Optional[ThreadPoolExecutor] = None
        self._lock = threading.Lock()

    @property
    def executor(self) -> Optional[ThreadPoolExecutor]:
        # One worker means inline generation
        if self.workers == 1:
            return None
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.workers, thread_name_prefix="urlspell-edits"
                )
                logger.debug(f"Started edit pool with {self.workers} workers")
            return self._executor

    def __call__(self, token: str) -> List[str]:
        return edits(token, self.alphabet, self.executor)

    def close(self):
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
