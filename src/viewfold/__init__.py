# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""
viewfold: composable read-model projections for event-sourced systems.

A ``View`` folds events into state; its combinators adapt and combine views
without touching the originals. ``ViewProjection`` drives a view over a live
or stored event feed.
"""

from viewfold.either import Either, Left, Right, is_left, is_right
from viewfold.projections import ProjectionSettings, ViewProjection
from viewfold.view import View, identity

__all__ = [
    "View",
    "identity",
    "Either",
    "Left",
    "Right",
    "is_left",
    "is_right",
    "ViewProjection",
    "ProjectionSettings",
]
