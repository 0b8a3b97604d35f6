# ABOUTME: Controller that turns page events into state transitions and API calls.
# ABOUTME: Owns the suggestion debounce, the weather fetch flow and suggestion selection.

import logging

import httpx

from weather_lookup.config import Settings
from weather_lookup.debounce import Debouncer
from weather_lookup.deps import LookupDeps
from weather_lookup.errors import WeatherLookupError
from weather_lookup.models import Suggestion
from weather_lookup.presentation import compose_location_name
from weather_lookup.state import (
    UIState,
    begin_weather_fetch,
    choose_suggestion,
    clear_suggestions,
    edit_query,
    end_suggestion_search,
    end_weather_fetch,
    focus_input,
    hide_suggestions,
    start_suggestion_search,
    suggestions_loaded,
    weather_failed,
    weather_succeeded,
)
from weather_lookup.weather_service import get_current_weather, search_cities

logger = logging.getLogger(__name__)


class WeatherController:
    """Drives one page session.

    State lives in `self.state` and only ever changes through the transitions in
    `weather_lookup.state`. Any change to the query goes through
    `_query_changed()`, which decides whether a suggestion lookup is scheduled.
    """

    def __init__(self, deps: LookupDeps, state: UIState | None = None):
        self.deps = deps
        self.state = state or UIState()
        self._debouncer = Debouncer(deps.settings.debounce_seconds)
        self._generation = 0

    @property
    def settings(self) -> Settings:
        return self.deps.settings

    def on_query_change(self, text: str) -> None:
        """The user edited the input."""
        self.state = edit_query(self.state, text)
        self._query_changed()

    def on_focus(self) -> None:
        self.state = focus_input(self.state, self.settings.min_query_length)

    def on_click_outside(self) -> None:
        self.state = hide_suggestions(self.state)

    dismiss_suggestions = on_click_outside

    def _query_changed(self) -> None:
        self._debouncer.cancel()
        if len(self.state.query.strip()) < self.settings.min_query_length:
            self.state = clear_suggestions(self.state)
            return
        if self.state.suggestions_visible:
            self._debouncer.schedule(self.fetch_suggestions)

    async def fetch_suggestions(self) -> None:
        """Replace the suggestion list with geocoding matches for the current query.

        Failures leave the list as it was and are never shown to the user.
        """
        query = self.state.query
        if not self.state.suggestions_visible or len(query.strip()) < self.settings.min_query_length:
            return

        self.state = start_suggestion_search(self.state)
        try:
            suggestions = await search_cities(self.deps.http_client, self.settings, query)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("Suggestion lookup for %r failed: %s", query, e)
            return
        finally:
            self.state = end_suggestion_search(self.state)
        self.state = suggestions_loaded(self.state, suggestions)

    async def fetch_weather(
        self,
        city_name: str | None = None,
        lat: float | None = None,
        lon: float | None = None,
    ) -> None:
        """Fetch current weather for a coordinate pair or a city name.

        Without `city_name` the current query is used, and on success both the
        query and the title are replaced by the API's "<name>, <country>".
        """
        target = city_name or self.state.query
        has_coords = lat is not None and lon is not None
        if not has_coords and not target.strip():
            return

        self._generation += 1
        generation = self._generation
        self._debouncer.cancel()
        self.state = begin_weather_fetch(self.state)
        try:
            result = await get_current_weather(self.deps.http_client, self.settings, city=target, lat=lat, lon=lon)
        except WeatherLookupError as e:
            if self._is_current(generation):
                self.state = weather_failed(self.state, e.message)
        else:
            if self._is_current(generation):
                label = None if city_name else result.canonical_name
                self.state = weather_succeeded(self.state, result, label)
                if label is not None:
                    self._query_changed()
        finally:
            if self._is_current(generation):
                self.state = end_weather_fetch(self.state)

    def _is_current(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug("Discarding weather response %d, superseded by %d", generation, self._generation)
            return False
        return True

    async def submit(self) -> None:
        """Enter key or search button."""
        await self.fetch_weather()

    async def search(self, text: str) -> None:
        """Enter pressed with `text` in the input: take the edit, then search for it."""
        self.on_query_change(text)
        await self.submit()

    async def select_suggestion(self, suggestion: Suggestion) -> None:
        """Show the chosen place and fetch its weather by coordinates."""
        label = compose_location_name(suggestion)
        self.state = choose_suggestion(self.state, label)
        self._query_changed()
        await self.fetch_weather(label, suggestion.lat, suggestion.lon)

    async def settle(self) -> None:
        """Wait for a scheduled suggestion lookup to fire and finish."""
        await self._debouncer.wait()

    def close(self) -> None:
        """Teardown: a pending lookup must not fire against a disposed page."""
        self._debouncer.cancel()
