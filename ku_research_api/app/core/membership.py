"""
Workspace and site membership relations.

``MembershipIndex`` is seeded once at startup and is read‑only
afterwards, so it is shared between request handlers without any
locking.  Workspace pairs are indexed by workspace id so that a lookup
costs a dict access plus a set membership test.
"""

from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from .config import Settings, parse_site_members, parse_workspace_members


class MembershipIndex:
    """Read‑only lookup of workspace and site membership."""

    def __init__(
        self,
        workspace_members: Iterable[Tuple[int, int]] = (),
        site_members: Iterable[int] = (),
    ) -> None:
        grouped: Dict[int, set] = {}
        for workspace_id, subject_id in workspace_members:
            grouped.setdefault(workspace_id, set()).add(subject_id)
        self._workspaces: Dict[int, FrozenSet[int]] = {
            workspace_id: frozenset(subjects) for workspace_id, subjects in grouped.items()
        }
        self._site: FrozenSet[int] = frozenset(site_members)

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "MembershipIndex":
        """Build the index from the ``SITE_MEMBERS`` and ``WORKSPACE_MEMBERS`` settings."""
        return cls(
            workspace_members=parse_workspace_members(app_settings.workspace_members),
            site_members=parse_site_members(app_settings.site_members),
        )

    def is_site_member(self, subject_id: int) -> bool:
        return subject_id in self._site

    def is_workspace_member(self, workspace_id: Optional[int], subject_id: int) -> bool:
        if workspace_id is None:
            return False
        return subject_id in self._workspaces.get(workspace_id, frozenset())

    def __repr__(self) -> str:
        return (
            f"MembershipIndex(workspaces={len(self._workspaces)}, "
            f"site_members={len(self._site)})"
        )
