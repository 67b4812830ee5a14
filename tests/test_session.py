import pytest

from present_ai.models import AppState, FormState, GiftIdea, View
from present_ai.session import (
    RequestInFlightError,
    begin_request,
    complete_request,
    fail_request,
    reset,
)


def test_begin_request_enters_loading_and_clears_error(form):
    state = AppState(error="old error")

    loading = begin_request(state, form)

    assert loading.loading
    assert loading.error is None
    assert loading.form == form
    assert loading.view is View.FORM
    assert state.loading is False


def test_only_one_request_in_flight():
    state = begin_request(AppState())

    with pytest.raises(RequestInFlightError):
        begin_request(state)


def test_complete_appends_and_moves_to_results(socks):
    state = complete_request(begin_request(AppState()), [socks])
    state = complete_request(begin_request(state), [GiftIdea(name="Mug")])

    assert state.view is View.RESULTS
    assert [i.name for i in state.session.ideas] == ["Socks", "Mug"]
    assert state.session.request_count == 2
    assert state.session.seen_names == {"socks", "mug"}


def test_fail_leaves_session_alone(socks):
    state = complete_request(begin_request(AppState()), [socks])

    failed = fail_request(begin_request(state), "nope")

    assert failed.session == state.session
    assert failed.view is View.RESULTS
    assert failed.error == "nope"
    assert not failed.loading


def test_start_over_after_anything(form, socks):
    state = complete_request(begin_request(AppState(), form), [socks])
    state = fail_request(begin_request(state), "nope")

    fresh = reset()

    assert fresh.form == FormState()
    assert fresh.session.ideas == ()
    assert fresh.session.request_count == 0
    assert fresh.view is View.FORM
    assert fresh.error is None
