# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: viewfold
"""
Protocol definitions for the projections package.
"""

from abc import ABC, abstractmethod
from typing import Any


class Projection(ABC):
    """
    Base class for projections (read models).
    """

    @abstractmethod
    async def project(self, event: Any) -> None:
        """Apply an event to the projection/read model."""
        pass
