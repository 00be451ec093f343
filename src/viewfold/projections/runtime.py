# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""
Async runtime that materializes a View from an event feed.

The View itself is pure; ``ViewProjection`` is the stateful consumer that
substitutes the initial state, applies incoming events one by one and keeps
the latest materialized state for the caller to read or persist.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, Iterable
from typing import Generic, TypeVar

from viewfold.logging.logger import get_logger
from viewfold.logging.protocols import LoggerProtocol
from viewfold.projections.config import ProjectionSettings
from viewfold.projections.errors import ProjectionEvolveError, ProjectionLimitError
from viewfold.projections.protocols import Projection
from viewfold.view import View

S = TypeVar("S")
E = TypeVar("E")


class ViewProjection(Projection, Generic[S, E]):
    """
    Keeps the current state of a View up to date as events arrive.

    A projection is owned by a single task. The wrapped View can be shared
    freely; the projection's state and counter cannot.
    """

    def __init__(
        self,
        view: View[S, E],
        *,
        state: S | None = None,
        settings: ProjectionSettings | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """
        Initialize a projection over ``view``.

        Args:
            view: The View to materialize
            state: Previously materialized state to resume from; the view's
                initial state when None
            settings: Projection settings (loads from environment if None)
            logger: Logger to report through (a module logger if None)
        """
        self._view = view
        self._settings = settings or ProjectionSettings.load()
        self._logger = logger or get_logger(__name__)
        self._state: S = view.initial_state if state is None else state
        self._events_applied = 0

    @property
    def view(self) -> View[S, E]:
        return self._view

    @property
    def state(self) -> S:
        """The current materialized state."""
        return self._state

    @property
    def events_applied(self) -> int:
        """Number of events applied since construction or the last reset."""
        return self._events_applied

    def reset(self, state: S | None = None) -> None:
        """Start over from the view's initial state, or from ``state`` when given."""
        self._state = self._view.initial_state if state is None else state
        self._events_applied = 0

    async def project(self, event: E) -> None:
        """Apply a single event to the current state.

        The state is only replaced once ``evolve`` has returned, so a failing
        event leaves the projection where it was.

        Raises:
            ProjectionLimitError: If ``max_events`` events were already applied
            ProjectionEvolveError: If the view's evolve function raised
        """
        max_events = self._settings.max_events
        if max_events is not None and self._events_applied >= max_events:
            raise ProjectionLimitError(
                max_events, events_applied=self._events_applied
            )

        event_type = type(event).__name__
        try:
            new_state = self._view.evolve(self._state, event)
        except Exception as e:
            error = ProjectionEvolveError(event_type, self._events_applied)
            await self._logger.error(
                "Projection evolve failed",
                event_type=event_type,
                events_applied=self._events_applied,
                error=e,
                exc_info=e,
            )
            raise error from e

        self._state = new_state
        self._events_applied += 1
        if self._settings.trace_events:
            await self._logger.debug(
                "Event applied",
                event_type=event_type,
                events_applied=self._events_applied,
            )

    async def project_all(self, events: Iterable[E] | AsyncIterable[E]) -> S:
        """Apply every event from a sync or async source, in order.

        Args:
            events: Events to apply, oldest first

        Returns:
            The state after the last event
        """
        applied_before = self._events_applied
        if isinstance(events, AsyncIterable):
            async for event in events:
                await self.project(event)
        else:
            for event in events:
                await self.project(event)

        await self._logger.info(
            "Projection caught up",
            events_applied=self._events_applied - applied_before,
            total_events_applied=self._events_applied,
        )
        return self._state
