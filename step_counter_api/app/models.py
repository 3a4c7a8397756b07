"""
Domain objects for teams and their step counters.

These are plain mutable dataclasses owned by the team store.  They are
never returned to clients directly; the endpoints convert them to the
Pydantic schemas in ``schemas``.
"""

import uuid
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Counter:
    """A named step count belonging to exactly one team."""

    name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    steps: int = 0


@dataclass
class Team:
    """A named group of counters.

    Deleting a team from the store discards its counters with it.
    """

    name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    counters: List[Counter] = field(default_factory=list)

    def find_counter(self, counter_id: uuid.UUID) -> Optional[Counter]:
        for counter in self.counters:
            if counter.id == counter_id:
                return counter
        return None
