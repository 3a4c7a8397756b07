import asyncio
import threading
import uuid

import pytest

from step_counter_api.app.services.team_service import (
    CounterNotFoundError,
    NotFoundError,
    TeamNotFoundError,
    TeamService,
)


def run(coro):
    return asyncio.run(coro)


def test_create_team(service, store):
    team = run(service.create_team("Alpha"))
    assert team.name == "Alpha"
    assert team.counters == []
    assert store.get(team.id) is team


def test_list_teams(service):
    first = run(service.create_team("Team 1"))
    second = run(service.create_team("Team 2"))
    assert run(service.list_teams()) == [first, second]


def test_get_team(service):
    team = run(service.create_team("Alpha"))
    assert run(service.get_team(team.id)) is team


def test_get_unknown_team(service):
    team_id = uuid.uuid4()
    with pytest.raises(TeamNotFoundError) as exc_info:
        run(service.get_team(team_id))
    assert str(team_id) in str(exc_info.value)


def test_delete_team(service):
    team = run(service.create_team("Alpha"))
    run(service.add_counter(team.id, "Walk"))
    run(service.delete_team(team.id))
    assert run(service.list_teams()) == []
    with pytest.raises(TeamNotFoundError):
        run(service.list_counters(team.id))


def test_delete_unknown_team(service):
    with pytest.raises(TeamNotFoundError):
        run(service.delete_team(uuid.uuid4()))


def test_add_counter(service):
    team = run(service.create_team("Alpha"))
    counter = run(service.add_counter(team.id, "Walk"))
    assert counter.name == "Walk"
    assert counter.steps == 0
    assert run(service.list_counters(team.id)) == [counter]


def test_add_counter_unknown_team(service):
    with pytest.raises(TeamNotFoundError):
        run(service.add_counter(uuid.uuid4(), "Walk"))


def test_remove_counter(service):
    team = run(service.create_team("Alpha"))
    walk = run(service.add_counter(team.id, "Walk"))
    run_counter = run(service.add_counter(team.id, "Run"))
    run(service.remove_counter(team.id, walk.id))
    assert run(service.list_counters(team.id)) == [run_counter]


def test_remove_counter_unknown_team(service):
    with pytest.raises(TeamNotFoundError):
        run(service.remove_counter(uuid.uuid4(), uuid.uuid4()))


def test_remove_unknown_counter(service):
    team = run(service.create_team("Alpha"))
    counter_id = uuid.uuid4()
    with pytest.raises(CounterNotFoundError) as exc_info:
        run(service.remove_counter(team.id, counter_id))
    assert str(counter_id) in str(exc_info.value)


def test_increment_counter(service):
    team = run(service.create_team("Alpha"))
    counter = run(service.add_counter(team.id, "Walk"))
    updated = run(service.increment_counter(team.id, counter.id, 100))
    assert updated.id == counter.id
    assert updated.steps == 100


def test_increments_accumulate(service):
    team = run(service.create_team("Alpha"))
    counter = run(service.add_counter(team.id, "Walk"))
    run(service.increment_counter(team.id, counter.id, 300))
    updated = run(service.increment_counter(team.id, counter.id, 45))
    assert updated.steps == 345


def test_increment_returns_snapshot(service):
    team = run(service.create_team("Alpha"))
    counter = run(service.add_counter(team.id, "Walk"))
    first = run(service.increment_counter(team.id, counter.id, 1))
    run(service.increment_counter(team.id, counter.id, 1))
    assert first.steps == 1


def test_increment_unknown_team(service):
    with pytest.raises(TeamNotFoundError):
        run(service.increment_counter(uuid.uuid4(), uuid.uuid4(), 100))


def test_increment_unknown_counter(service):
    team = run(service.create_team("Alpha"))
    with pytest.raises(CounterNotFoundError):
        run(service.increment_counter(team.id, uuid.uuid4(), 100))


@pytest.mark.parametrize("steps", [0, -5])
def test_increment_rejects_non_positive(service, steps):
    team = run(service.create_team("Alpha"))
    counter = run(service.add_counter(team.id, "Walk"))
    with pytest.raises(ValueError):
        run(service.increment_counter(team.id, counter.id, steps))
    assert run(service.list_counters(team.id))[0].steps == 0


def test_team_total_steps(service):
    team = run(service.create_team("Alpha"))
    first = run(service.add_counter(team.id, "Counter 1"))
    second = run(service.add_counter(team.id, "Counter 2"))
    run(service.increment_counter(team.id, first.id, 100))
    run(service.increment_counter(team.id, second.id, 200))
    assert run(service.team_total_steps(team.id)) == 300


def test_team_total_steps_without_counters(service):
    team = run(service.create_team("Alpha"))
    assert run(service.team_total_steps(team.id)) == 0


def test_team_total_steps_unknown_team(service):
    with pytest.raises(TeamNotFoundError):
        run(service.team_total_steps(uuid.uuid4()))


def test_list_counters_unknown_team(service):
    with pytest.raises(TeamNotFoundError):
        run(service.list_counters(uuid.uuid4()))


def test_not_found_errors_share_base():
    assert issubclass(TeamNotFoundError, NotFoundError)
    assert issubclass(CounterNotFoundError, NotFoundError)
    assert issubclass(NotFoundError, ValueError)


def test_concurrent_increments_all_land(service):
    team = run(service.create_team("Alpha"))
    counter = run(service.add_counter(team.id, "Walk"))

    def worker():
        for _ in range(100):
            run(service.increment_counter(team.id, counter.id, 1))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert run(service.team_total_steps(team.id)) == 400


def test_total_steps_helper(service):
    team = run(service.create_team("Alpha"))
    assert TeamService.total_steps(team) == 0
