"""Advisory issues from an external plan reviewer.

An outside reviewer (typically a language model asked to walk through
the plan as its occupants would) answers with a JSON array of issues.
This module turns that answer into suggestion-only ReviewIssues and
merges them into a ReviewResult. Advisory issues never block: they are
forced to "suggestion" severity and cannot change ``passed``.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from floorplan_engine.models.floorplan import FloorPlan
from floorplan_engine.validators.reachability import ReviewIssue, ReviewResult, build_result

logger = logging.getLogger(__name__)

_JSON_ARRAY = re.compile(r"\[.*\]", re.DOTALL)


def parse_advisory_response(response_text: str, floor_plan: FloorPlan) -> list[ReviewIssue]:
    """Parse a reviewer's response into suggestion issues.

    Handles JSON wrapped in markdown code fences or surrounded by prose.
    Items without a string ``code`` and ``message`` are skipped, and
    ``affectedRooms`` entries that aren't room ids in the plan are dropped.
    Returns [] when no JSON array can be read.
    """
    match = _JSON_ARRAY.search(response_text)
    if match is None:
        logger.warning("Advisory response contains no JSON array; ignoring it")
        return []

    try:
        parsed: Any = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        logger.warning("Advisory response is not valid JSON (%s); ignoring it", exc)
        return []
    if not isinstance(parsed, list):
        return []

    valid_ids = {r.id for r in floor_plan.rooms}
    issues: list[ReviewIssue] = []
    for item in parsed:
        if not isinstance(item, dict):
            continue
        code, message = item.get("code"), item.get("message")
        if not isinstance(code, str) or not isinstance(message, str):
            logger.debug("Skipping malformed advisory item: %r", item)
            continue

        raw_rooms = item.get("affectedRooms", item.get("affected_rooms", []))
        affected = (
            [r for r in raw_rooms if isinstance(r, str) and r in valid_ids]
            if isinstance(raw_rooms, list)
            else []
        )
        issues.append(ReviewIssue(
            severity="suggestion",
            code=code,
            message=message,
            affected_rooms=affected,
        ))

    logger.debug("Parsed %d advisory issues", len(issues))
    return issues


def merge_advisory_issues(result: ReviewResult, advisory: list[ReviewIssue]) -> ReviewResult:
    """Append advisory issues to a review result as suggestions.

    Returns a new result with a recomputed summary; ``passed`` is carried
    over unchanged.
    """
    extra = [
        ReviewIssue(
            severity="suggestion",
            code=issue.code,
            message=issue.message,
            affected_rooms=list(issue.affected_rooms),
        )
        for issue in advisory
    ]
    merged = build_result([*result.issues, *extra])
    merged.passed = result.passed
    return merged
