"""
Thread‑safe in‑memory paper store.

The store owns the paper collection.  A single lock guards the list
of papers, the set of used ids and the id counter; it is held only
while appending or copying, never while evaluating visibility or
doing I/O.  Callers receive frozen ``Paper`` instances and list
copies, so nothing outside the store can mutate the collection.
"""

import itertools
import logging
import threading
from typing import List, Optional, Set

from ..schemas.paper import Paper

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "authors", "abstract")


class PaperValidationError(ValueError):
    """Raised when a paper lacks one of the required descriptive fields."""

    def __init__(self, missing_fields: List[str]) -> None:
        self.missing_fields = missing_fields
        super().__init__(f"Missing required fields: {', '.join(missing_fields)}")


class DuplicatePaperError(ValueError):
    """Raised when an explicit paper id is already taken."""

    def __init__(self, paper_id: str) -> None:
        self.paper_id = paper_id
        super().__init__(f"Paper {paper_id} already exists")


def validate_paper(paper: Paper) -> None:
    missing = [name for name in REQUIRED_FIELDS if not getattr(paper, name).strip()]
    if missing:
        raise PaperValidationError(missing)


class PaperStore:
    """Append‑only collection of papers with collision‑free id assignment."""

    def __init__(self, lock: Optional[threading.Lock] = None) -> None:
        self._lock = lock or threading.Lock()
        self._papers: List[Paper] = []
        self._ids: Set[str] = set()
        self._counter = itertools.count(1)

    def insert(self, paper: Paper) -> Paper:
        """Validate and store a paper, assigning an id when none was given.

        Raises :class:`PaperValidationError` when ``title``, ``authors`` or
        ``abstract`` is blank and :class:`DuplicatePaperError` when an
        explicit id is already in use.  Nothing is stored in either case.
        """
        validate_paper(paper)
        with self._lock:
            if paper.id:
                if paper.id in self._ids:
                    raise DuplicatePaperError(paper.id)
                stored = paper
            else:
                stored = paper.model_copy(update={"id": self._next_id()})
            self._papers.append(stored)
            self._ids.add(stored.id)
        logger.debug("Stored paper %s", stored.id)
        return stored

    def snapshot(self) -> List[Paper]:
        """Return a point‑in‑time copy of all papers in insertion order."""
        with self._lock:
            return list(self._papers)

    def _next_id(self) -> str:
        # Caller holds the lock.  Skip ids that were supplied explicitly.
        while True:
            candidate = str(next(self._counter))
            if candidate not in self._ids:
                return candidate

    def __len__(self) -> int:
        with self._lock:
            return len(self._papers)
