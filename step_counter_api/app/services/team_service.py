"""
Business logic for teams and their step counters.

``TeamService`` sits between the API handlers and the team store.
Every operation on an existing team first resolves it by id and raises
``TeamNotFoundError`` when it is missing; counter operations then do
the same for the counter and raise ``CounterNotFoundError``.  Handlers
translate both into HTTP 404 responses.

Operations run under the store lock, so two increments of the same
counter made from different threads both land.  Requests served by the
async handlers share the event loop thread and never contend for it.
"""

import dataclasses
import logging
import uuid
from typing import List

from ..core.store import TeamStore
from ..models import Counter, Team


class NotFoundError(ValueError):
    """Base class for lookups of unknown teams or counters."""


class TeamNotFoundError(NotFoundError):
    def __init__(self, team_id: uuid.UUID) -> None:
        super().__init__(f"Team {team_id} not found")
        self.team_id = team_id


class CounterNotFoundError(NotFoundError):
    def __init__(self, team_id: uuid.UUID, counter_id: uuid.UUID) -> None:
        super().__init__(f"Counter {counter_id} not found in team {team_id}")
        self.team_id = team_id
        self.counter_id = counter_id


class TeamService:
    """Service for managing teams and counters held in a ``TeamStore``."""

    def __init__(self, store: TeamStore) -> None:
        self._store = store

    @staticmethod
    def total_steps(team: Team) -> int:
        """Sum of the steps of all counters in ``team``."""
        return sum(counter.steps for counter in team.counters)

    def _require_team(self, team_id: uuid.UUID) -> Team:
        team = self._store.get(team_id)
        if team is None:
            raise TeamNotFoundError(team_id)
        return team

    def _require_counter(self, team: Team, counter_id: uuid.UUID) -> Counter:
        counter = team.find_counter(counter_id)
        if counter is None:
            raise CounterNotFoundError(team.id, counter_id)
        return counter

    async def list_teams(self) -> List[Team]:
        return self._store.list()

    async def get_team(self, team_id: uuid.UUID) -> Team:
        return self._require_team(team_id)

    async def create_team(self, name: str) -> Team:
        """Create a team with no counters and return it."""
        logger = logging.getLogger(__name__)
        team = Team(name=name)
        self._store.add(team)
        logger.info("Created team %s (%s)", team.id, name)
        return team

    async def delete_team(self, team_id: uuid.UUID) -> None:
        """Delete a team together with its counters.

        Deleting an unknown team raises ``TeamNotFoundError`` instead of
        silently succeeding, so clients can tell a typo from a success.
        """
        logger = logging.getLogger(__name__)
        with self._store.lock:
            self._require_team(team_id)
            self._store.remove(team_id)
        logger.info("Deleted team %s", team_id)

    async def add_counter(self, team_id: uuid.UUID, name: str) -> Counter:
        logger = logging.getLogger(__name__)
        with self._store.lock:
            team = self._require_team(team_id)
            counter = Counter(name=name)
            team.counters.append(counter)
        logger.info("Added counter %s (%s) to team %s", counter.id, name, team_id)
        return counter

    async def remove_counter(self, team_id: uuid.UUID, counter_id: uuid.UUID) -> None:
        logger = logging.getLogger(__name__)
        with self._store.lock:
            team = self._require_team(team_id)
            counter = self._require_counter(team, counter_id)
            team.counters.remove(counter)
        logger.info("Removed counter %s from team %s", counter_id, team_id)

    async def increment_counter(self, team_id: uuid.UUID, counter_id: uuid.UUID, steps: int) -> Counter:
        """Add ``steps`` to a counter and return a snapshot of it.

        ``steps`` is validated by the request schema; a non‑positive
        value reaching this point is a caller bug and raises
        ``ValueError`` so the counter can never go down.
        """
        if steps < 1:
            raise ValueError(f"Steps must be a positive integer, got {steps}")
        logger = logging.getLogger(__name__)
        with self._store.lock:
            team = self._require_team(team_id)
            counter = self._require_counter(team, counter_id)
            counter.steps += steps
            snapshot = dataclasses.replace(counter)
        logger.info("Counter %s in team %s incremented by %s to %s", counter_id, team_id, steps, snapshot.steps)
        return snapshot

    async def team_total_steps(self, team_id: uuid.UUID) -> int:
        with self._store.lock:
            return self.total_steps(self._require_team(team_id))

    async def list_counters(self, team_id: uuid.UUID) -> List[Counter]:
        with self._store.lock:
            return list(self._require_team(team_id).counters)
