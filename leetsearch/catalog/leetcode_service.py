"""
LeetCode integration for the catalogue.

``LeetCodeClient`` sends the ``problemsetQuestionList`` GraphQL query to
the configured endpoint and decodes the answer into the upstream
schemas. Like the rest of the package it only relies on the Python
standard library for HTTP.

Everything that can go wrong on the way (socket errors, non-2xx
statuses, bodies that are not JSON, GraphQL ``errors`` or a payload that
does not fit ``QuestionListResponse``) is raised as a single
``TransportError``. The client does not retry, paginate or cache, and
it does not log failures itself: the route layer records them once.
"""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any, Dict, List

from pydantic import ValidationError as SchemaError

from ..config import Settings
from .errors import TransportError
from .mapper import filter_problems
from .schemas import Problem, Question, QuestionListResponse


logger = logging.getLogger(__name__)


QUESTION_LIST_QUERY = """
query problemsetQuestionList($categorySlug: String, $limit: Int, $skip: Int, $filters: QuestionListFilterInput) {
  problemsetQuestionList: questionList(
    categorySlug: $categorySlug
    limit: $limit
    skip: $skip
    filters: $filters
  ) {
    totalNum
    data {
      title
      titleSlug
      difficulty
      content
      topicTags {
        name
        slug
      }
    }
  }
}
"""


def _http_post_json(url: str, payload: dict, timeout=None) -> Any:
    """POST ``payload`` as JSON and return the decoded response body.

    A browser-like User-Agent is sent because the catalog rejects some
    default library agents.
    """
    body = json.dumps(payload).encode("utf-8")
    request = urllib.request.Request(
        url,
        data=body,
        method="POST",
        headers={
            'User-Agent': (
                'Mozilla/5.0 (Windows NT 10.0; Win64; x64) '
                'AppleWebKit/537.36 (KHTML, like Gecko) '
                'Chrome/115.0 Safari/537.36'
            ),
            'Accept': 'application/json',
            'Content-Type': 'application/json; charset=utf-8',
        },
    )
    kwargs = {} if timeout is None else {"timeout": timeout}
    try:
        with urllib.request.urlopen(request, **kwargs) as response:
            status = getattr(response, "status", 200)
            if not 200 <= status < 300:
                raise TransportError(f"{url} returned status {status}")
            raw = response.read()
    except urllib.error.HTTPError as exc:
        raise TransportError(f"{url} returned status {exc.code}") from exc
    except (urllib.error.URLError, http.client.HTTPException, OSError) as exc:
        raise TransportError(f"request to {url} failed: {exc}") from exc
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise TransportError(f"{url} returned a non-JSON body") from exc


class LeetCodeClient:
    """Thin client for the LeetCode problem catalog."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def build_payload(self, search: str) -> Dict[str, Any]:
        return {
            "query": QUESTION_LIST_QUERY,
            "variables": {
                "categorySlug": self.settings.category_slug,
                "limit": self.settings.limit,
                "skip": self.settings.skip,
                "filters": {"searchKeywords": search},
            },
        }

    def fetch_questions(self, search: str) -> List[Question]:
        """Run the question list query and return the decoded records.

        Only the first page (``settings.limit`` entries from
        ``settings.skip``) is ever requested.
        """
        data = _http_post_json(
            self.settings.graphql_url,
            self.build_payload(search),
            timeout=self.settings.upstream_timeout,
        )
        if not isinstance(data, dict):
            raise TransportError("GraphQL response is not a JSON object")
        errors = data.get("errors")
        if errors:
            messages = "; ".join(
                str(e.get("message", e)) if isinstance(e, dict) else str(e)
                for e in errors
            )
            raise TransportError(f"GraphQL errors: {messages}")
        try:
            decoded = QuestionListResponse.model_validate(data.get("data"))
        except SchemaError as exc:
            raise TransportError(f"unexpected GraphQL payload: {exc}") from exc
        question_list = decoded.problemsetQuestionList
        logger.debug(
            "Catalog returned %d of %d questions for %r",
            len(question_list.data), question_list.totalNum, search,
        )
        return question_list.data

    def search_problems(self, search: str) -> List[Problem]:
        return filter_problems(self.fetch_questions(search), search)
