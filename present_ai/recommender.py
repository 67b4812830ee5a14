import logging
from typing import Callable, Iterable, List, Optional, Set

from .config import GENERATION_FAILED_MESSAGE, GIFT_IDEAS_PER_REQUEST
from .llm import GenerationError, generate_text
from .models import AppState, FormState, GiftIdea
from .parser import parse_gift_ideas
from .prompts import FOLLOW_UP, GIFT_IDEAS_PROMPT
from .session import begin_request, complete_request, fail_request

logger = logging.getLogger(__name__)


def build_prompt(
    form: FormState,
    previous_names: Iterable[str] = (),
    is_follow_up: bool = False,
    request_number: int = 1,
) -> str:
    follow_up = ""
    if is_follow_up:
        follow_up = FOLLOW_UP.format(
            request_number=request_number,
            previous=", ".join(previous_names),
        )

    return GIFT_IDEAS_PROMPT.format(
        count=GIFT_IDEAS_PER_REQUEST,
        name=form.name,
        age=form.age,
        gender=form.gender,
        relationship=form.relationship.resolve(),
        hobbies=form.hobbies,
        personality=form.personality.resolve(),
        budget=form.budget_text,
        occasion=form.occasion.resolve(),
        follow_up=follow_up,
    )


def filter_new_ideas(ideas: Iterable[GiftIdea], seen_names: Set[str]) -> List[GiftIdea]:
    """Drops ideas whose lowercase name was already seen, keeping order."""
    seen = set(seen_names)
    out: List[GiftIdea] = []
    for idea in ideas:
        if idea.key in seen:
            continue
        seen.add(idea.key)
        out.append(idea)
    return out


def run_request(
    state: AppState,
    show_more: bool = False,
    generate: Callable[[str], str] = generate_text,
) -> AppState:
    """Performs the generation call for a state already put in loading by begin_request."""
    session = state.session

    prompt = build_prompt(
        state.form,
        previous_names=[idea.name for idea in session.ideas],
        is_follow_up=show_more,
        request_number=session.request_count + 1,
    )

    try:
        raw = generate(prompt)
    except GenerationError:
        logger.exception("Error fetching gift ideas")
        return fail_request(state, GENERATION_FAILED_MESSAGE)

    ideas = parse_gift_ideas(raw)
    new_ideas = filter_new_ideas(ideas, session.seen_names)
    if len(new_ideas) < len(ideas):
        logger.info("Dropped %d repeated gift ideas", len(ideas) - len(new_ideas))

    return complete_request(state, new_ideas)


def fetch_gift_ideas(
    state: AppState,
    show_more: bool = False,
    form: Optional[FormState] = None,
    generate: Callable[[str], str] = generate_text,
) -> AppState:
    """Runs one Find Gift Ideas / Show More cycle and returns the resulting state."""
    return run_request(begin_request(state, form), show_more=show_more, generate=generate)
