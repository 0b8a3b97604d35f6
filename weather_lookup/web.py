# ABOUTME: Streamlit entry point for the weather lookup page.
# ABOUTME: Wires widgets to WeatherController actions and draws the PageView for the current state.

import asyncio
import logging
from collections.abc import Awaitable, Callable

import streamlit as st

from weather_lookup.config import Settings, configure_logging
from weather_lookup.controller import WeatherController
from weather_lookup.deps import LookupDeps, create_http_client
from weather_lookup.models import Suggestion
from weather_lookup.presentation import PLACEHOLDER, TITLE, render_page
from weather_lookup.state import UIState

settings = Settings.from_env()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

st.set_page_config(page_title=TITLE, page_icon="☁️", layout="centered")

if "ui_state" not in st.session_state:
    st.session_state.ui_state = UIState()
    st.session_state.query_input = ""


async def _run_controller(state: UIState, action: Callable[[WeatherController], Awaitable[None]]) -> UIState:
    """Run one action with a client bound to the current event loop, then tear the controller down."""
    async with create_http_client(settings) as client:
        controller = WeatherController(LookupDeps(http_client=client, settings=settings), state)
        try:
            await action(controller)
            await controller.settle()
        finally:
            controller.close()
        return controller.state


def dispatch(action: Callable[[WeatherController], Awaitable[None]]) -> None:
    """Apply an action to the session state and sync the input widget with the resulting query."""
    state = asyncio.run(_run_controller(st.session_state.ui_state, action))
    st.session_state.ui_state = state
    st.session_state.query_input = state.query


def on_suggest() -> None:
    text = st.session_state.query_input

    async def action(controller: WeatherController) -> None:
        controller.on_query_change(text)

    dispatch(action)


def on_search() -> None:
    text = st.session_state.query_input
    dispatch(lambda controller: controller.search(text))


def on_suggestion_click(suggestion: Suggestion) -> None:
    dispatch(lambda controller: controller.select_suggestion(suggestion))


def on_dismiss_suggestions() -> None:
    async def action(controller: WeatherController) -> None:
        controller.dismiss_suggestions()

    dispatch(action)


if not settings.api_key.get_secret_value():
    logger.warning("OPENWEATHER_API_KEY is not set")
    st.warning("OPENWEATHER_API_KEY is not set; requests to OpenWeather will be rejected.")

view = render_page(st.session_state.ui_state, settings.icon_base_url)

st.title(TITLE)

# Enter inside a form presses its first submit button, so search comes first.
with st.form("search", border=False, enter_to_submit=True):
    input_col, search_col, suggest_col = st.columns([5, 1, 1])
    with input_col:
        st.text_input("Cidade", key="query_input", placeholder=PLACEHOLDER, label_visibility="collapsed")
    with search_col:
        st.form_submit_button(
            "⏳" if view.busy else "🔍",
            on_click=on_search,
            disabled=view.search_disabled,
            use_container_width=True,
        )
    with suggest_col:
        st.form_submit_button("📍", on_click=on_suggest, help="Sugestões", use_container_width=True)

if view.suggestions:
    with st.container(border=True):
        for i, row in enumerate(view.suggestions):
            label = f"📍 {row.name}  ·  {row.location}" if row.location else f"📍 {row.name}"
            st.button(label, key=f"suggestion-{i}", on_click=on_suggestion_click, args=(row.suggestion,))
        st.button("Fechar", key="dismiss-suggestions", on_click=on_dismiss_suggestions, type="tertiary")

if view.error:
    st.error(view.error)

if view.weather is not None:
    weather = view.weather
    st.subheader(f"📍 {weather.location}")
    icon_col, temp_col = st.columns([1, 2])
    with icon_col:
        st.image(weather.icon_url, caption=weather.description)
    with temp_col:
        st.markdown(f"# {weather.temperature}°C")
        st.caption(weather.description)
    for col, (label, value) in zip(st.columns(len(weather.details)), weather.details):
        col.metric(label, value)

if view.empty_text:
    st.info(view.empty_text, icon="☁️")
