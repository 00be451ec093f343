# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""
The View: a pure read-model projection and its combinators.

A ``View[S, E]`` pairs an initial state with an ``evolve`` function that folds
one event into the current state. Views never perform I/O and never mutate
themselves; every combinator below builds a new View from existing ones, so a
read model can be assembled from small single-concern views and adapted to
whatever event and state representations the surrounding system uses.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import reduce
from typing import Generic, TypeVar

from viewfold.either import Either, Left, Right

S = TypeVar("S")
E = TypeVar("E")
S2 = TypeVar("S2")
E2 = TypeVar("E2")
T = TypeVar("T")


def identity(value: T) -> T:
    """Return ``value`` unchanged."""
    return value


@dataclass(frozen=True, slots=True, repr=False)
class View(Generic[S, E]):
    """
    Pure projection of a stream of events of type ``E`` into a state of type ``S``.

    Attributes:
        initial_state: State used before any event has been applied
        evolve: Total, side-effect free ``(state, event) -> state`` function
    """

    initial_state: S
    evolve: Callable[[S, E], S]

    def lmap_on_e(self, f: Callable[[E2], E]) -> View[S, E2]:
        """Adapt the view to events of another type.

        Every incoming ``E2`` is converted with ``f`` before it reaches this
        view's ``evolve``. The initial state is unchanged.

        Args:
            f: Conversion from the new event type to this view's event type

        Returns:
            A view accepting ``E2`` events
        """
        evolve = self.evolve
        return View(
            initial_state=self.initial_state,
            evolve=lambda state, event: evolve(state, f(event)),
        )

    def dimap_on_s(
        self, fl: Callable[[S], S2], fr: Callable[[S2], S]
    ) -> View[S2, E]:
        """Expose the view over another state type.

        ``fr`` projects the external state back to this view's state before
        ``evolve`` runs, and ``fl`` lifts the result forward again.

        Args:
            fl: Lift from this view's state to the external state
            fr: Projection from the external state to this view's state

        Returns:
            A view whose state type is ``S2``
        """
        evolve = self.evolve
        return View(
            initial_state=fl(self.initial_state),
            evolve=lambda state, event: fl(evolve(fr(state), event)),
        )

    def rmap_on_s(
        self, f: Callable[[S], S2], fr: Callable[[S2], S] = identity
    ) -> View[S2, E]:
        """Map the view's state forward with ``f``.

        This is ``dimap_on_s(fl=f, fr=fr)``. With the default ``fr`` the
        mapped state is passed back to the wrapped ``evolve`` as is, so pass an
        explicit ``fr`` whenever ``S2`` cannot stand in for ``S``. Mapping a
        state down to one of its fields, for instance, needs ``fr`` to rebuild
        the full state; without it the wrapped ``evolve`` receives the bare field.
        """
        return self.dimap_on_s(fl=f, fr=fr)

    map_on_s = rmap_on_s

    def rproduct_on_s(self, other: View[S2, E]) -> View[tuple[S, S2], E]:
        """Run two views over the same events side by side.

        The combined state is the pair of both states and each event is
        applied to both components independently.
        """
        first_evolve = self.evolve
        second_evolve = other.evolve

        def evolve(state: tuple[S, S2], event: E) -> tuple[S, S2]:
            first, second = state
            return first_evolve(first, event), second_evolve(second, event)

        return View(
            initial_state=(self.initial_state, other.initial_state),
            evolve=evolve,
        )

    def combine_views(
        self, other: View[S2, E2]
    ) -> View[tuple[S, S2], Either[E, E2]]:
        """Merge two views that react to disjoint event types.

        ``Left`` events are routed to this view and ``Right`` events to
        ``other``. The component owned by the view that did not receive the
        event is carried over untouched.

        Raises:
            TypeError: If the combined view is given an event that is neither
                ``Left`` nor ``Right``
        """
        first_evolve = self.evolve
        second_evolve = other.evolve

        def evolve(state: tuple[S, S2], event: Either[E, E2]) -> tuple[S, S2]:
            first, second = state
            match event:
                case Left(value):
                    return first_evolve(first, value), second
                case Right(value):
                    return first, second_evolve(second, value)
                case _:
                    raise TypeError(
                        f"Combined view expects Left or Right events, got {type(event).__name__}"
                    )

        return View(
            initial_state=(self.initial_state, other.initial_state),
            evolve=evolve,
        )

    combine = combine_views

    def fold(self, events: Iterable[E], state: S | None = None) -> S:
        """Apply ``events`` in order and return the resulting state.

        Args:
            events: Events to apply, oldest first
            state: State to start from; ``initial_state`` when None

        Returns:
            The state after the last event, or the start state if there are none
        """
        start = self.initial_state if state is None else state
        return reduce(self.evolve, events, start)

    def __repr__(self) -> str:
        evolve_name = getattr(self.evolve, "__qualname__", self.evolve)
        return f"View(initial_state={self.initial_state!r}, evolve={evolve_name})"
