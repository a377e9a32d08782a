"""
Visibility rules for papers.

``can_access`` decides whether a subject may see a paper.  Rules are
evaluated in a fixed order and the first match wins:

1. The owner always sees their own paper.
2. Unshared papers are private to the owner.
3. ``everyone`` scope is visible to every subject.
4. ``site`` scope is visible to site members.
5. ``workspace`` scope is visible to members of the workspace named
   by ``scope_workspace_id``.
6. Any other scope, including none at all, is denied.

Scope comparison is exact and case sensitive.  Malformed papers are
never an error; they simply resolve to deny.
"""

from ..core.membership import MembershipIndex
from ..schemas.paper import Paper, VisibilityScope


def can_access(paper: Paper, subject_id: int, memberships: MembershipIndex) -> bool:
    if paper.owner_id == subject_id:
        return True
    if not paper.is_shared:
        return False
    if paper.scope == VisibilityScope.EVERYONE.value:
        return True
    if paper.scope == VisibilityScope.SITE.value:
        return memberships.is_site_member(subject_id)
    if paper.scope == VisibilityScope.WORKSPACE.value:
        return memberships.is_workspace_member(paper.scope_workspace_id, subject_id)
    return False
