# present_ai/parser.py
# Best-effort conversion of model output into GiftIdea records.
# Strategies run in order and the first one that returns a list wins:
#   1. the whole reply is a JSON array
#   2. a JSON array is embedded somewhere in the reply
#   3. free text split into "Gift 1:" / "1." sections

import json
import logging
import re
from typing import Any, Callable, List, Optional, Sequence

from pydantic import ValidationError

from .models import GiftIdea, NOT_SPECIFIED, PRICE_NOT_SPECIFIED

logger = logging.getLogger(__name__)

Strategy = Callable[[str], Optional[List[GiftIdea]]]

_EMBEDDED_ARRAY = re.compile(r"\[.*\]", re.DOTALL)
_SECTION_START = re.compile(r"(?=Gift \d+:)|(?=^\d+\.)", re.MULTILINE)
_SECTION_MARKER = re.compile(r"^(?:Gift \d+:|\d+\.)")


def _ideas_from_json(raw: str) -> Optional[List[GiftIdea]]:
    try:
        data: Any = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(data, list):
        return None

    ideas: List[GiftIdea] = []
    for item in data:
        try:
            ideas.append(GiftIdea.model_validate(item))
        except ValidationError:
            logger.debug("Skipping unusable gift idea: %r", item)
            continue
    return ideas


def parse_strict_json(text: str) -> Optional[List[GiftIdea]]:
    return _ideas_from_json(text.strip())


def parse_embedded_json(text: str) -> Optional[List[GiftIdea]]:
    m = _EMBEDDED_ARRAY.search(text)
    if not m:
        return None
    return _ideas_from_json(m.group(0))


def parse_text_sections(text: str) -> List[GiftIdea]:
    ideas: List[GiftIdea] = []
    for section in _SECTION_START.split(text):
        lines = [ln.strip() for ln in section.splitlines() if ln.strip()]
        if not lines:
            continue
        name = _SECTION_MARKER.sub("", lines[0]).strip()
        if not name:
            # "Gift 1:" alone on its line, the name follows below it
            lines = lines[1:]
            if not lines:
                continue
            name = lines[0]
        ideas.append(
            GiftIdea(
                name=name,
                appropriateness=lines[1] if len(lines) > 1 else NOT_SPECIFIED,
                relation=lines[2] if len(lines) > 2 else NOT_SPECIFIED,
                price_range=lines[3] if len(lines) > 3 else PRICE_NOT_SPECIFIED,
            )
        )
    return ideas


STRATEGIES: Sequence[Strategy] = (
    parse_strict_json,
    parse_embedded_json,
    parse_text_sections,
)


def parse_gift_ideas(text: str, strategies: Sequence[Strategy] = STRATEGIES) -> List[GiftIdea]:
    """Returns the ideas found by the first strategy that succeeds."""
    for strategy in strategies:
        ideas = strategy(text or "")
        if ideas is not None:
            if strategy is not strategies[0]:
                logger.warning("Reply was not a plain JSON array, parsed with %s", strategy.__name__)
            return ideas
    return []
