"""
Tests for PaperService: access-filtered listing and inserts.
"""
import pytest

from ku_research_api.app.core.membership import MembershipIndex
from ku_research_api.app.core.sample_data import SAMPLE_PAPERS, seed_sample_papers
from ku_research_api.app.core.store import PaperStore, PaperValidationError
from ku_research_api.app.schemas.paper import PaperCreate
from ku_research_api.app.services.paper_service import PaperService
from tests.factories import make_paper


@pytest.fixture
def service(store, memberships):
    return PaperService(store, memberships)


class TestListAccessible:
    """Tests for PaperService.list_accessible"""

    def test_workspace_scenario(self):
        store = PaperStore()
        service = PaperService(store, MembershipIndex(workspace_members=[(7, 2)]))
        paper = store.insert(make_paper(owner_id=1, is_shared=True, scope="workspace", scope_workspace_id=7))

        assert service.list_accessible(2) == [paper]
        assert service.list_accessible(3) == []
        assert service.list_accessible(1) == [paper]

    def test_preserves_insertion_order(self, service, store):
        store.insert(make_paper(title="first", is_shared=True, scope="everyone"))
        store.insert(make_paper(title="hidden", owner_id=9))
        store.insert(make_paper(title="second", is_shared=True, scope="site"))
        store.insert(make_paper(title="third", is_shared=True, scope="everyone"))

        titles = [p.title for p in service.list_accessible(5)]
        assert titles == ["first", "second", "third"]

    def test_repeated_queries_are_identical(self, service, store):
        for scope in ("everyone", "site", "workspace", None):
            store.insert(make_paper(is_shared=True, scope=scope, scope_workspace_id=7))
        first = service.list_accessible(2)
        second = service.list_accessible(2)
        assert first == second
        assert [p.id for p in first] == [p.id for p in second]

    def test_unknown_subject_sees_only_public(self, service, store):
        public = store.insert(make_paper(is_shared=True, scope="everyone"))
        store.insert(make_paper(is_shared=True, scope="site"))
        store.insert(make_paper(is_shared=False))
        assert service.list_accessible(12345) == [public]

    def test_sample_papers_visible_to_everyone(self, memberships):
        store = PaperStore()
        seed_sample_papers(store, owner_id=0)
        service = PaperService(store, memberships)
        visible = service.list_accessible(77)
        assert [p.id for p in visible] == [entry["id"] for entry in SAMPLE_PAPERS]


class TestAddPaper:
    """Tests for PaperService.add_paper"""

    def test_add_assigns_id(self, service):
        paper = service.add_paper(PaperCreate(title="T", authors="A", abstract="B", owner_id=3))
        assert paper.id
        assert paper.owner_id == 3
        assert service.list_accessible(3) == [paper]

    def test_added_private_paper_hidden_from_others(self, service):
        service.add_paper(PaperCreate(title="T", authors="A", abstract="B", owner_id=3))
        assert service.list_accessible(4) == []

    def test_validation_error_propagates(self, service, store):
        with pytest.raises(PaperValidationError):
            service.add_paper(PaperCreate(title="T", authors="", abstract="B"))
        assert store.snapshot() == []

    def test_generated_id_follows_seeded_ids(self, memberships):
        store = PaperStore()
        seed_sample_papers(store, owner_id=0)
        service = PaperService(store, memberships)
        paper = service.add_paper(PaperCreate(title="T", authors="A", abstract="B"))
        assert paper.id == str(len(SAMPLE_PAPERS) + 1)
