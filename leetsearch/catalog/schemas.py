"""
Pydantic schema definitions for the catalog module.

Two families of models live here. The upstream models (``TopicTag``,
``Question``, ``QuestionList`` and ``QuestionListResponse``) mirror the
shape of the LeetCode ``questionList`` GraphQL query so a response can
be validated in one call. The public models (``Problem``,
``SearchResults`` and ``ErrorBody``) describe what ``/search`` sends
back to the front-end.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class TopicTag(BaseModel):
    name: str = ""
    slug: str = ""

    @field_validator("name", "slug", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Optional[str]) -> str:
        return "" if value is None else value


class Question(BaseModel):
    """A single question record as returned by the catalog.

    Paid-only questions come back with ``content`` set to ``null`` and
    some records carry ``topicTags: null``. Any ``null`` field is
    normalised to an empty value so the mapper never has to
    special-case them.
    """

    title: str = ""
    titleSlug: str = ""
    difficulty: str = ""
    content: str = ""
    topicTags: List[TopicTag] = Field(default_factory=list)

    @field_validator("title", "titleSlug", "content", "difficulty", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Optional[str]) -> str:
        return "" if value is None else value

    @field_validator("topicTags", mode="before")
    @classmethod
    def _null_to_list(cls, value):
        return [] if value is None else value


class QuestionList(BaseModel):
    totalNum: int = 0
    data: List[Question] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def _null_to_list(cls, value):
        return [] if value is None else value


class QuestionListResponse(BaseModel):
    """The ``data`` member of the GraphQL response."""

    problemsetQuestionList: QuestionList


class Problem(BaseModel):
    """A catalogue entry as exposed by ``/search``.

    ``difficulty`` is passed through as-is (Easy/Medium/Hard in
    practice). ``content`` is the HTML problem statement and ``tags``
    holds the topic tag names in upstream order.
    """

    title: str
    titleSlug: str
    difficulty: str
    content: str
    tags: List[str] = Field(default_factory=list)


class SearchResults(BaseModel):
    """Body of a successful ``/search`` response."""

    results: List[Problem]


class ErrorBody(BaseModel):
    error: str
