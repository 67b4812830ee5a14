# app.py
# Present AI: recipient form -> gift ideas -> Show More / Start Over.
# Page state is one AppState in st.session_state, changed only through
# the transition functions in present_ai.session.

import logging
from typing import Dict
from urllib.parse import quote_plus

import streamlit as st

from present_ai.config import (
    CURRENCIES,
    DEFAULT_CURRENCY,
    GENDERS,
    LOG_LEVEL,
    OCCASIONS,
    OTHERS,
    PERSONALITIES,
    RELATIONSHIPS,
)
from present_ai.models import AppState, FormState, GiftIdea, View, choice_from_widget
from present_ai.recommender import run_request
from present_ai.session import begin_request, reset


logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("present_ai.app")

st.set_page_config(page_title="Present AI", page_icon="🎁", layout="centered")


WIDGET_DEFAULTS = {
    "name": "",
    "age": "",
    "gender": "",
    "relationship": "",
    "custom_relationship": "",
    "hobbies": "",
    "personality": "",
    "custom_personality": "",
    "budget": "",
    "currency": DEFAULT_CURRENCY,
    "occasion": "",
    "custom_occasion": "",
}


def _init_state() -> None:
    defaults = {"app_state": AppState(), "show_more": False, **WIDGET_DEFAULTS}
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v


def _form_from_widgets() -> FormState:
    ss = st.session_state
    return FormState(
        name=ss.get("name", ""),
        age=ss.get("age", ""),
        gender=ss.get("gender", ""),
        relationship=choice_from_widget(ss.get("relationship"), ss.get("custom_relationship")),
        hobbies=ss.get("hobbies", ""),
        personality=choice_from_widget(ss.get("personality"), ss.get("custom_personality")),
        budget=ss.get("budget", ""),
        currency=ss.get("currency", DEFAULT_CURRENCY),
        occasion=choice_from_widget(ss.get("occasion"), ss.get("custom_occasion")),
    )


def _on_find() -> None:
    st.session_state["app_state"] = begin_request(st.session_state["app_state"], _form_from_widgets())
    st.session_state["show_more"] = False


def _on_show_more() -> None:
    st.session_state["app_state"] = begin_request(st.session_state["app_state"])
    st.session_state["show_more"] = True


def _on_start_over() -> None:
    st.session_state["app_state"] = reset()
    for k, v in WIDGET_DEFAULTS.items():
        st.session_state[k] = v
    logger.info("Session reset")


def _make_search_links(name: str, form: FormState) -> Dict[str, str]:
    q = name.strip()
    if form.budget.strip():
        q = f"{q} under {form.budget_text}"
    enc = quote_plus(q)

    return {
        "Search Etsy": f"https://www.etsy.com/search?q={enc}",
        "Search Pinterest": f"https://www.pinterest.com/search/pins/?q={enc}",
        "Search Web": f"https://www.google.com/search?q={enc}",
    }


def _select_with_other(label: str, key: str, options, placeholder: str) -> None:
    st.selectbox(label, [""] + list(options), key=key, format_func=lambda v: v or placeholder)
    if st.session_state.get(key) == OTHERS:
        st.text_input(f"Specify {label.lower()}", key=f"custom_{key}")


def _render_form(state: AppState) -> None:
    st.text_input("Recipient's name", key="name", placeholder="Recipient's Name")
    st.text_input("Age", key="age", placeholder="Age")
    st.selectbox("Gender", [""] + GENDERS, key="gender", format_func=lambda v: v or "Select Gender")
    _select_with_other("Relationship", "relationship", RELATIONSHIPS, "Select Relationship")
    st.text_input("Hobbies", key="hobbies", placeholder="Hobbies (like painting, football)")
    _select_with_other("Personality", "personality", PERSONALITIES, "Select Personality")

    c1, c2 = st.columns([3, 1])
    with c1:
        st.text_input("Budget", key="budget", placeholder="Budget")
    with c2:
        st.selectbox("Currency", list(CURRENCIES), key="currency", format_func=CURRENCIES.get)

    _select_with_other("Occasion", "occasion", OCCASIONS, "Select Occasion")

    label = "Finding Perfect Gifts..." if state.loading else "Find Gift Ideas"
    st.button(label, on_click=_on_find, disabled=state.loading, use_container_width=True)


def _render_idea(idx: int, idea: GiftIdea, form: FormState) -> None:
    with st.container(border=True):
        st.subheader(f"Gift Idea {idx}")
        st.markdown(f"**Gift:** {idea.name}")
        st.markdown(f"**Why it's appropriate:** {idea.appropriateness}")
        st.markdown(f"**How it relates:** {idea.relation}")
        st.markdown(f"**Price range:** {idea.price_range}")

        links = _make_search_links(idea.name, form)
        cols = st.columns(len(links))
        for col, (text, url) in zip(cols, links.items()):
            with col:
                st.link_button(text, url, use_container_width=True)


def _render_results(state: AppState) -> None:
    if not state.session.ideas:
        st.info("No new gift ideas this time. Try Show More.")

    for idx, idea in enumerate(state.session.ideas, start=1):
        _render_idea(idx, idea, state.form)

    left, right = st.columns(2)
    with left:
        st.button("Show More", on_click=_on_show_more, disabled=state.loading, use_container_width=True)
    with right:
        st.button("Start Over", on_click=_on_start_over, disabled=state.loading, use_container_width=True)


_init_state()

st.title("Present AI 🎁")

app_state: AppState = st.session_state["app_state"]

if app_state.view is View.FORM:
    st.subheader("Discover thoughtful gifts tailored to the recipient's personality, interests, and occasion.")
    _render_form(app_state)
else:
    st.subheader("Gift Suggestions")
    _render_results(app_state)

if app_state.error:
    st.error(app_state.error)

if app_state.loading:
    with st.spinner("Finding Perfect Gifts..."):
        st.session_state["app_state"] = run_request(app_state, show_more=st.session_state["show_more"])
    st.rerun()
