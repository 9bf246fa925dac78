from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .errors import UserNotFoundError
from .models import UserAssignment

logger = logging.getLogger(__name__)

# Home location/floor of each known user.
USER_ASSIGNMENTS: Dict[str, Dict[str, str]] = {
    "ToanLM1": {"location": "FPT Tower", "floor": "12"},
    "AnNH8": {"location": "Hoà Lạc", "floor": "2"},
    "user123": {"location": "FPT Tower", "floor": "10"},
    "admin456": {"location": "Hoà Lạc", "floor": "1"},
    "dev789": {"location": "Fville 3", "floor": "C3"},
}


class UserDirectory:
    """Read-only lookup of where each user is assigned to sit."""

    def __init__(self, assignments: Optional[Mapping[str, Mapping[str, str]]] = None):
        source = USER_ASSIGNMENTS if assignments is None else assignments
        self._assignments: Mapping[str, UserAssignment] = MappingProxyType(
            {username: UserAssignment(**entry) for username, entry in source.items()}
        )

    def get_user_assignment(self, username: str) -> UserAssignment:
        assignment = self._assignments.get(username)
        if assignment is None:
            logger.info("No directory entry for user %s", username)
            raise UserNotFoundError(username)
        return assignment
