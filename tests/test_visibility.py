"""
Tests for the paper visibility rules.
"""
import pytest

from ku_research_api.app.core.membership import MembershipIndex
from ku_research_api.app.services.visibility import can_access
from tests.factories import make_paper

SUBJECTS = [1, 2, 3, 4, 5, 6, 99]


class TestOwnerRule:
    """The owner always sees their own paper"""

    @pytest.mark.parametrize(
        "is_shared,scope,workspace",
        [
            (False, None, None),
            (True, None, None),
            (True, "workspace", None),
            (True, "workspace", 42),
            (True, "site", None),
            (True, "bogus", None),
        ],
    )
    def test_owner_allowed_regardless_of_sharing(self, memberships, is_shared, scope, workspace):
        paper = make_paper(owner_id=1, is_shared=is_shared, scope=scope, scope_workspace_id=workspace)
        assert can_access(paper, 1, memberships) is True

    def test_owner_allowed_with_empty_index(self):
        paper = make_paper(owner_id=3)
        assert can_access(paper, 3, MembershipIndex()) is True


class TestPrivatePapers:
    """Unshared papers are visible to nobody but the owner"""

    @pytest.mark.parametrize("scope", [None, "everyone", "site", "workspace"])
    def test_scope_ignored_when_not_shared(self, memberships, scope):
        paper = make_paper(owner_id=1, is_shared=False, scope=scope, scope_workspace_id=7)
        for subject in SUBJECTS:
            if subject == 1:
                continue
            assert can_access(paper, subject, memberships) is False


class TestSharedScopes:
    """Shared papers follow their scope"""

    def test_everyone(self, memberships):
        paper = make_paper(is_shared=True, scope="everyone")
        assert all(can_access(paper, s, memberships) for s in SUBJECTS)

    def test_site_matches_site_membership(self, memberships):
        paper = make_paper(is_shared=True, scope="site")
        for subject in SUBJECTS:
            expected = subject == 1 or memberships.is_site_member(subject)
            assert can_access(paper, subject, memberships) is expected

    def test_workspace_matches_pair(self, memberships):
        paper = make_paper(is_shared=True, scope="workspace", scope_workspace_id=7)
        assert can_access(paper, 2, memberships) is True
        assert can_access(paper, 4, memberships) is True
        # member of a different workspace
        assert can_access(paper, 3, memberships) is False
        # site member only
        assert can_access(paper, 5, memberships) is False

    def test_workspace_without_qualifier_denies(self, memberships):
        paper = make_paper(is_shared=True, scope="workspace", scope_workspace_id=None)
        assert not any(can_access(paper, s, memberships) for s in SUBJECTS if s != 1)

    def test_workspace_with_unknown_qualifier_denies(self, memberships):
        paper = make_paper(is_shared=True, scope="workspace", scope_workspace_id=1000)
        assert not any(can_access(paper, s, memberships) for s in SUBJECTS if s != 1)


class TestFailClosed:
    """Unset or unrecognised scopes deny every non-owner"""

    @pytest.mark.parametrize("scope", [None, "", "Everyone", "EVERYONE", "Site", "public", " everyone"])
    def test_unrecognised_scope(self, memberships, scope):
        paper = make_paper(is_shared=True, scope=scope, scope_workspace_id=7)
        assert not any(can_access(paper, s, memberships) for s in SUBJECTS if s != 1)
