"""
Paper endpoints.

``POST /get-research`` lists the papers visible to the subject given in
the request body.  ``POST /add-paper`` stores a new paper.  The path
names double as the capability names announced to the Super App
directory, which calls them relative to this service's callback URL.

Subjects are identified by the ``user_id`` supplied in the body; the
identity is trusted as given.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ku_research_api.app.core.store import DuplicatePaperError, PaperValidationError
from ku_research_api.app.schemas.paper import (
    PaperCreate,
    PaperCreatedResponse,
    PaperListResponse,
    PaperQuery,
    paper_to_read,
)
from ku_research_api.app.services.paper_service import PaperService

QUERY_CAPABILITY = "get-research"
ADD_CAPABILITY = "add-paper"
CAPABILITIES = (QUERY_CAPABILITY, ADD_CAPABILITY)

router = APIRouter()


def get_paper_service(request: Request) -> PaperService:
    return request.app.state.paper_service


@router.post(f"/{QUERY_CAPABILITY}", response_model=PaperListResponse)
def get_research(
    query: PaperQuery,
    service: PaperService = Depends(get_paper_service),
) -> PaperListResponse:
    """Return the papers the subject may see, in the order they were added.

    Papers the subject may not see are silently left out; an empty list
    is a valid answer.
    """
    papers = service.list_accessible(query.user_id)
    return PaperListResponse(papers=[paper_to_read(paper) for paper in papers])


@router.post(f"/{ADD_CAPABILITY}", response_model=PaperCreatedResponse, status_code=status.HTTP_201_CREATED)
def add_paper(
    paper_in: PaperCreate,
    service: PaperService = Depends(get_paper_service),
) -> PaperCreatedResponse:
    """Add a paper.  An id is assigned when none is supplied.

    Returns HTTP 400 if ``title``, ``authors`` or ``abstract`` is blank
    and HTTP 409 if the supplied id is already taken.
    """
    try:
        paper = service.add_paper(paper_in)
    except PaperValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except DuplicatePaperError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    return PaperCreatedResponse(message="Paper added successfully", paper=paper_to_read(paper))
