"""
Service layer for research papers.

``PaperService`` composes the paper store with the visibility rules.
Queries take a snapshot of the store and filter it outside the store
lock, so concurrent inserts are never blocked by visibility checks.
A paper that does not exist and a paper the subject may not see look
the same to the caller: both are simply absent from the result.
"""

import logging
from typing import List

from ..core.membership import MembershipIndex
from ..core.store import PaperStore
from ..schemas.paper import Paper, PaperCreate
from .visibility import can_access

logger = logging.getLogger(__name__)


class PaperService:
    """Access‑filtered queries and inserts over a :class:`PaperStore`."""

    def __init__(self, store: PaperStore, memberships: MembershipIndex) -> None:
        self.store = store
        self.memberships = memberships

    def list_accessible(self, subject_id: int) -> List[Paper]:
        """Return the papers ``subject_id`` may see, in insertion order."""
        papers = self.store.snapshot()
        visible = [paper for paper in papers if can_access(paper, subject_id, self.memberships)]
        logger.info(
            "Subject %s can see %d of %d papers",
            subject_id,
            len(visible),
            len(papers),
        )
        return visible

    def add_paper(self, data: PaperCreate) -> Paper:
        """Store a new paper and return it with its id populated.

        ``PaperValidationError`` and ``DuplicatePaperError`` from the
        store propagate to the caller.
        """
        paper = self.store.insert(Paper(**data.model_dump()))
        logger.info("Paper %s added by subject %s", paper.id, paper.owner_id)
        return paper
