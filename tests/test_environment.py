import pytest

from explorer import Command, ExplorerEnv, Facing


def test_reveal_starts_session():
    env = ExplorerEnv()

    result = env.reveal("...")

    assert result.success
    assert env.started
    assert env.steps == 1
    assert result.rendered.startswith("+---+\n|...|\n| ^ |")


def test_reveal_rejects_malformed_sequence():
    env = ExplorerEnv()

    result = env.reveal("..X")

    assert not result.success
    assert result.failure_reason == "INVALID_COMMAND"
    assert not env.started


def test_execute_dispatches_and_counts():
    env = ExplorerEnv()
    env.reveal("...")

    moved = env.execute("forward", "...")
    turned = env.execute("left", "...")

    assert moved.success and turned.success
    assert env.steps == 3
    assert env.engine.actor.facing is Facing.WEST


def test_syntax_errors_never_touch_the_map():
    env = ExplorerEnv()
    env.reveal("...")
    before = (env.engine.grid.lines(), env.engine.actor.to_dict())

    for keyword, sequence in [("jump", "..."), ("forward", "..Q"), ("left", None)]:
        result = env.execute(keyword, sequence)
        assert result.failure_reason == "INVALID_COMMAND"
        assert result.message == "Invalid command"

    assert (env.engine.grid.lines(), env.engine.actor.to_dict()) == before
    assert env.steps == 1


def test_blocked_and_inconsistent_results():
    env = ExplorerEnv()
    env.reveal(".#.")

    blocked = env.step(Command.forward("..."))
    assert blocked.failure_reason == "BLOCKED"
    assert blocked.message == "Blocked"

    env.step(Command.right("..."))
    inconsistent = env.step(Command.left("..."))
    assert inconsistent.failure_reason == "INCONSISTENT_MAP"
    assert inconsistent.message == "Inconsistent map"
    assert env.engine.actor.facing is Facing.EAST


def test_quit_finishes_session():
    env = ExplorerEnv()
    env.reveal("...")

    result = env.execute("quit")

    assert result.done
    assert env.done
    with pytest.raises(RuntimeError):
        env.step(Command.forward("..."))


def test_reset_and_status():
    env = ExplorerEnv()
    env.reveal("...")
    env.execute("forward", "...")

    status = env.status()
    assert status["steps"] == 2
    assert status["actor"]["height"] == 4

    env.reset()
    assert env.status() == {
        "started": False,
        "done": False,
        "steps": 0,
        "actor": {"row": 1, "col": 1, "facing": "NORTH", "last": " ", "width": 3, "height": 3},
    }
