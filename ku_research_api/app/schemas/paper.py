"""
Pydantic models for research papers.

``Paper`` is the immutable record held by the store.  It carries both
the descriptive fields shown to clients and the access‑control fields
(owner, sharing flag, scope and scope qualifier) consulted by the
visibility resolver.  ``PaperCreate`` is the insert payload and
``PaperRead`` the public representation, which never echoes the
access‑control fields back.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class VisibilityScope(str, Enum):
    """Audience a shared paper is visible to."""

    WORKSPACE = "workspace"
    SITE = "site"
    EVERYONE = "everyone"


class PaperBase(BaseModel):
    title: str = Field("", examples=["Quantum Computing: Recent Advances and Future Directions"])
    authors: str = Field("", examples=["Dr. Richard Feynman, Dr. Lisa Chen"])
    abstract: str = Field("", examples=["This paper reviews recent developments in quantum computing."])
    cover_image: str = Field("", alias="coverImage")
    published_year: int = Field(0, alias="publishedYear", examples=[2023])
    field: str = Field("", examples=["Computer Science"])
    classifications: List[str] = Field(default_factory=list)
    doi: Optional[str] = Field(None, examples=["10.1038/s41586-019-1666-5"])
    journal: Optional[str] = Field(None, examples=["Nature Quantum Information"])

    model_config = {
        "populate_by_name": True,
    }


class PaperCreate(PaperBase):
    """Schema for adding a paper.

    ``scope`` is kept as a plain string: values outside
    :class:`VisibilityScope` are accepted and simply never grant access
    to anyone but the owner.
    """

    id: str = ""
    owner_id: int = Field(0, examples=[1])
    is_shared: bool = False
    scope: Optional[str] = Field(None, examples=["workspace"])
    scope_workspace_id: Optional[int] = Field(None, examples=[7])


class Paper(PaperCreate):
    """Stored paper.  Instances are frozen once created.

    ``classifications`` is held as a tuple so that no field of a stored
    paper can be changed in place.
    """

    classifications: Tuple[str, ...] = ()

    model_config = {
        "populate_by_name": True,
        "frozen": True,
    }


class PaperRead(PaperBase):
    """Schema for returning a paper from the API."""

    id: str

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class PaperQuery(BaseModel):
    """Body of the query endpoint: the subject on whose behalf to list papers."""

    user_id: int = Field(..., examples=[2])


class PaperListResponse(BaseModel):
    papers: List[PaperRead]


class PaperCreatedResponse(BaseModel):
    message: str
    paper: PaperRead


def paper_to_read(paper: Paper) -> PaperRead:
    """Strip access‑control fields from a stored paper."""
    return PaperRead.model_validate(paper.model_dump(include=set(PaperRead.model_fields)))
