"""
State transitions for the gift finder page.

Every function takes an AppState and returns a new one; nothing is mutated.
The page starts in the form view, a generation call puts it in the loading
state, and a finished call always lands on the results view.
"""

from typing import Iterable, Optional

from .models import AppState, FormState, GiftIdea, View


class RequestInFlightError(RuntimeError):
    """A second generation call was started while one is still running."""


def begin_request(state: AppState, form: Optional[FormState] = None) -> AppState:
    if state.loading:
        raise RequestInFlightError("A gift idea request is already running.")
    update = {"loading": True, "error": None}
    if form is not None:
        update["form"] = form
    return state.model_copy(update=update)


def complete_request(state: AppState, ideas: Iterable[GiftIdea]) -> AppState:
    session = state.session.model_copy(
        update={
            "ideas": state.session.ideas + tuple(ideas),
            "request_count": state.session.request_count + 1,
        }
    )
    return state.model_copy(
        update={"session": session, "view": View.RESULTS, "loading": False, "error": None}
    )


def fail_request(state: AppState, message: str) -> AppState:
    return state.model_copy(update={"loading": False, "error": message})


def reset() -> AppState:
    """Start Over: empty form, empty session, back to the form view."""
    return AppState()
