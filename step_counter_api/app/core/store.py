"""
In‑memory storage for teams.

``TeamStore`` is the interface the service layer depends on;
``InMemoryTeamStore`` is the only implementation.  State lives for the
lifetime of the process: one store is created by ``create_app`` and
nothing is written to disk.

The store exposes a single re‑entrant ``lock``.  Each store method
takes it, and ``TeamService`` holds it across a whole operation so a
read‑modify‑write on a team's counters stays atomic for callers that
use the service from several threads.  The async HTTP handlers all run
on the event loop thread, so the lock never contends on that path.
"""

import logging
import threading
import uuid
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..models import Team


class TeamStore(ABC):
    """Storage contract for teams."""

    lock: threading.RLock

    @abstractmethod
    def list(self) -> List[Team]:
        """Return all teams in insertion order."""

    @abstractmethod
    def get(self, team_id: uuid.UUID) -> Optional[Team]:
        """Return the team with ``team_id`` or ``None``."""

    @abstractmethod
    def add(self, team: Team) -> None:
        """Store a new team."""

    @abstractmethod
    def remove(self, team_id: uuid.UUID) -> None:
        """Remove a team.  Removing an unknown id is a no‑op."""


class InMemoryTeamStore(TeamStore):
    """Dictionary‑backed team store guarded by one lock."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._teams: Dict[uuid.UUID, Team] = {}

    def list(self) -> List[Team]:
        with self.lock:
            return list(self._teams.values())

    def get(self, team_id: uuid.UUID) -> Optional[Team]:
        with self.lock:
            return self._teams.get(team_id)

    def add(self, team: Team) -> None:
        with self.lock:
            self._teams[team.id] = team
        logging.getLogger(__name__).debug("Stored team %s", team.id)

    def remove(self, team_id: uuid.UUID) -> None:
        with self.lock:
            self._teams.pop(team_id, None)
