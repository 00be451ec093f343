# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""
Public API for the viewfold projections package.

Runtime support for materializing Views from an event feed.
"""

from viewfold.projections.config import ProjectionSettings
from viewfold.projections.errors import (
    ProjectionError,
    ProjectionEvolveError,
    ProjectionLimitError,
)
from viewfold.projections.protocols import Projection
from viewfold.projections.runtime import ViewProjection

__all__ = [
    # Core protocols
    "Projection",
    # Runtime
    "ViewProjection",
    "ProjectionSettings",
    # Errors
    "ProjectionError",
    "ProjectionEvolveError",
    "ProjectionLimitError",
]
