"""Pull the JSON payload out of a model reply and validate it."""

import json
import math

from pydantic import ValidationError

from stylist.errors import EmptyResult, ParseFailure
from stylist.models import PersonalAdvice, StyleRecommendation

ADVICE_TIP_COUNT = 5


def _find_object(text: str) -> str | None:
    """Return the first balanced ``{...}`` span, ignoring braces inside strings.

    Single pass. If an opening brace never closes, the earliest-opened
    object that does close is returned.
    """
    opens: list[int] = []
    best: tuple[int, int] | None = None
    in_string = False
    escaped = False
    for i, ch in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            # Quotes in prose outside any object are not strings.
            in_string = bool(opens)
        elif ch == "{":
            opens.append(i)
        elif ch == "}" and opens:
            start = opens.pop()
            if not opens:
                return text[start:i + 1]
            if best is None or start < best[0]:
                best = (start, i + 1)
    if best is None:
        return None
    return text[best[0]:best[1]]


def extract_json_object(text: str) -> dict:
    """Decode the first JSON object embedded in ``text``.

    Prose and markdown fences around the object are ignored.
    """
    if not text:
        raise ParseFailure("Empty model response")
    candidate = _find_object(text)
    if candidate is None:
        raise ParseFailure("No JSON object found in response")
    try:
        data = json.loads(candidate)
    except ValueError as e:
        raise ParseFailure(f"Malformed JSON in response: {e}") from e
    if not isinstance(data, dict):
        raise ParseFailure("Response JSON is not an object")
    return data


def _normalize_entry(entry: dict, index: int, seen_ids: set[str]) -> dict:
    entry = dict(entry)
    score = entry.get("suitability")
    if isinstance(score, float) and math.isfinite(score):
        entry["suitability"] = round(score)

    rec_id = entry.get("id")
    if not isinstance(rec_id, str) or not rec_id.strip() or rec_id in seen_ids:
        rec_id = f"ai-{index + 1}"
        while rec_id in seen_ids:
            rec_id += "-dup"
    entry["id"] = rec_id
    seen_ids.add(rec_id)
    return entry


def parse_recommendations(text: str) -> list[StyleRecommendation]:
    """Parse a recommendations reply.

    Raises ParseFailure for anything malformed and EmptyResult when the
    list is present but empty.
    """
    data = extract_json_object(text)
    entries = data.get("recommendations")
    if not isinstance(entries, list):
        raise ParseFailure("Response has no 'recommendations' list")
    if not entries:
        raise EmptyResult("Response listed no recommendations")

    seen_ids: set[str] = set()
    recommendations: list[StyleRecommendation] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ParseFailure(f"Recommendation {index} is not an object")
        try:
            recommendations.append(
                StyleRecommendation.model_validate(_normalize_entry(entry, index, seen_ids))
            )
        except ValidationError as e:
            raise ParseFailure(f"Recommendation {index} is invalid: {e}") from e
    return recommendations


def parse_advice(text: str) -> PersonalAdvice:
    data = extract_json_object(text)
    advice = data.get("advice")
    tips = data.get("tips")
    if not isinstance(advice, str) or not advice.strip():
        raise ParseFailure("Response has no 'advice' text")
    if not isinstance(tips, list) or not all(isinstance(t, str) and t.strip() for t in tips):
        raise ParseFailure("Response 'tips' must be a list of strings")
    if len(tips) < ADVICE_TIP_COUNT:
        raise ParseFailure(f"Expected {ADVICE_TIP_COUNT} tips, got {len(tips)}")
    return PersonalAdvice(advice=advice.strip(), tips=[t.strip() for t in tips[:ADVICE_TIP_COUNT]])
