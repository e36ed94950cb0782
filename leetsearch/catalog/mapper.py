"""
Local filtering and reshaping of catalog questions.

The upstream search already receives the keyword through
``searchKeywords``, but its matching is fuzzy. The filter here keeps
only questions whose title actually contains the keyword, so the
result is the intersection of both stages.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .schemas import Problem, Question


def _norm(s: Optional[str]) -> str:
    """Lowercase a string for case-insensitive comparison.

    Unlike a display normaliser this does not strip whitespace: a
    keyword such as ``"two "`` must match the title text exactly.
    """
    return (s or "").lower()


def title_matches(question: Question, search: str) -> bool:
    return _norm(search) in _norm(question.title)


def to_problem(question: Question) -> Problem:
    return Problem(
        title=question.title,
        titleSlug=question.titleSlug,
        difficulty=question.difficulty,
        content=question.content,
        tags=[tag.name for tag in question.topicTags],
    )


def filter_problems(questions: Iterable[Question], search: str) -> List[Problem]:
    """Keep the questions whose title contains ``search`` and map them.

    Parameters
    ----------
    questions : Iterable[Question]
        Decoded upstream records, in upstream order.
    search : str
        The keyword as sent by the caller.

    Returns
    -------
    List[Problem]
        The matching entries, order preserved. Empty when nothing
        matched.
    """
    return [to_problem(q) for q in questions if title_matches(q, search)]
