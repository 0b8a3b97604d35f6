# ABOUTME: Page state record and the pure transitions that update it.
# ABOUTME: Every UI event maps to one transition; the UI mode is derived, never stored.

from enum import Enum

from pydantic import BaseModel, ConfigDict

from weather_lookup.models import Suggestion, WeatherResult


class UIMode(str, Enum):
    """What the main area of the page shows."""

    EMPTY = "empty"
    LOADING = "loading"
    ERROR = "error"
    RESULT = "result"


class UIState(BaseModel):
    """Everything the page knows during a session.

    `suggestions_visible` is the suppression flag: a scheduled suggestion
    lookup only runs, and a finished one is only applied, while it is set.
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    display_name: str = ""
    suggestions: tuple[Suggestion, ...] = ()
    suggestions_visible: bool = False
    searching_suggestions: bool = False
    loading: bool = False
    error: str = ""
    weather: WeatherResult | None = None

    @property
    def mode(self) -> UIMode:
        if self.loading:
            return UIMode.LOADING
        if self.error:
            return UIMode.ERROR
        if self.weather is not None:
            return UIMode.RESULT
        return UIMode.EMPTY


def edit_query(state: UIState, text: str) -> UIState:
    """The user typed: typing re-opens the suggestion list."""
    return state.model_copy(update={"query": text, "suggestions_visible": True})


def clear_suggestions(state: UIState) -> UIState:
    return state.model_copy(update={"suggestions": ()})


def hide_suggestions(state: UIState) -> UIState:
    return state.model_copy(update={"suggestions_visible": False})


def focus_input(state: UIState, min_length: int) -> UIState:
    """Re-show the list on focus when the query is long enough to have suggestions."""
    if len(state.query) < min_length:
        return state
    return state.model_copy(update={"suggestions_visible": True})


def start_suggestion_search(state: UIState) -> UIState:
    return state.model_copy(update={"searching_suggestions": True})


def end_suggestion_search(state: UIState) -> UIState:
    return state.model_copy(update={"searching_suggestions": False})


def suggestions_loaded(state: UIState, suggestions: list[Suggestion]) -> UIState:
    """Replace the list wholesale, unless suggestions were suppressed meanwhile."""
    if not state.suggestions_visible:
        return state
    return state.model_copy(update={"suggestions": tuple(suggestions)})


def choose_suggestion(state: UIState, label: str) -> UIState:
    """Hide and clear suggestions in the same step that writes the chosen label into the query."""
    return state.model_copy(
        update={
            "suggestions_visible": False,
            "suggestions": (),
            "query": label,
            "display_name": label,
        }
    )


def begin_weather_fetch(state: UIState) -> UIState:
    return state.model_copy(
        update={
            "error": "",
            "suggestions": (),
            "suggestions_visible": False,
            "loading": True,
        }
    )


def weather_succeeded(state: UIState, result: WeatherResult, label: str | None = None) -> UIState:
    """Store the result; a label, when given, becomes both the title and the query."""
    update = {"weather": result, "error": ""}
    if label is not None:
        update.update(suggestions_visible=False, display_name=label, query=label)
    return state.model_copy(update=update)


def weather_failed(state: UIState, message: str) -> UIState:
    return state.model_copy(update={"error": message, "weather": None})


def end_weather_fetch(state: UIState) -> UIState:
    return state.model_copy(update={"loading": False})
