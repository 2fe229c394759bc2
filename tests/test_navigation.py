import pytest

from explorer.core.types import Facing, TurnDirection
from explorer.mechanics import NavigationEngine, scan_cells
from explorer.world import ActorState, Grid


def started_engine(sequence="..."):
    engine = NavigationEngine()
    result = engine.reveal_initial(sequence)
    assert result.success
    return engine


def frozen(engine):
    return (engine.grid.lines(), engine.actor.pos, engine.actor.facing, engine.last)


# ----------------------------------------------------------------------------
# Directions and scan order
# ----------------------------------------------------------------------------

def test_turn_cycle():
    assert Facing.NORTH.right is Facing.EAST
    assert Facing.EAST.right is Facing.SOUTH
    assert Facing.SOUTH.right is Facing.WEST
    assert Facing.WEST.right is Facing.NORTH
    assert Facing.NORTH.left is Facing.WEST
    assert Facing.WEST.left is Facing.SOUTH


@pytest.mark.parametrize(
    "facing, expected",
    [
        (Facing.NORTH, [(4, 4), (4, 5), (4, 6)]),
        (Facing.SOUTH, [(6, 6), (6, 5), (6, 4)]),
        (Facing.EAST, [(4, 6), (5, 6), (6, 6)]),
        (Facing.WEST, [(6, 4), (5, 4), (4, 4)]),
    ],
)
def test_scan_order(facing, expected):
    assert scan_cells((5, 5), facing) == expected


# ----------------------------------------------------------------------------
# Startup reveal
# ----------------------------------------------------------------------------

def test_initial_reveal_renders_actor_at_centre():
    engine = NavigationEngine()

    result = engine.reveal_initial("...")

    assert result.success
    assert result.rendered == "+---+\n|...|\n| ^ |\n|   |\n+---+\n"
    assert engine.actor.pos == (1, 1)


def test_invalid_sequence_is_a_programming_error():
    engine = NavigationEngine()

    with pytest.raises(ValueError):
        engine.attempt_forward("..")
    with pytest.raises(ValueError):
        engine.attempt_turn(TurnDirection.LEFT, "A..")


# ----------------------------------------------------------------------------
# Forward moves and growth
# ----------------------------------------------------------------------------

def test_forward_north_grows_top_row():
    engine = started_engine("...")

    result = engine.attempt_forward("a#.")

    assert result.success
    assert engine.grid.height == 4
    assert engine.grid.width == 3
    assert engine.actor.pos == (1, 1)
    assert engine.grid.lines()[0] == "a#."
    assert engine.grid.lines()[1] == "..."
    assert engine.last == "."
    assert result.rendered.splitlines()[2] == "|.^.|"


def test_forward_blocked_by_wall():
    engine = started_engine(".#.")
    before = frozen(engine)

    result = engine.attempt_forward("...")

    assert not result.success
    assert result.failure_reason == "BLOCKED"
    assert result.rendered is None
    assert not engine.can_move_forward()
    assert frozen(engine) == before


def test_forward_inconsistent_rolls_back_move():
    engine = started_engine("...")
    assert engine.attempt_forward("...").success
    assert engine.attempt_turn(TurnDirection.RIGHT, "...").success
    assert engine.attempt_turn(TurnDirection.RIGHT, "...").success

    # facing south from (1, 1); the step to (2, 1) reveals row 3
    engine.grid.set_cell(3, 0, "#")
    before = frozen(engine)
    result = engine.attempt_forward("..x")

    assert not result.success
    assert result.failure_reason == "INCONSISTENT_MAP"
    assert result.new_pos == result.old_pos == (1, 1)
    assert frozen(engine) == before
    assert engine.grid.height == 4


@pytest.mark.parametrize(
    "turns, size, pos",
    [
        ([], (3, 4), (1, 1)),  # north: row added on top, actor shifted back
        ([TurnDirection.RIGHT], (4, 3), (1, 2)),  # east: column appended
        ([TurnDirection.RIGHT, TurnDirection.RIGHT], (3, 4), (2, 1)),  # south: row appended
        ([TurnDirection.LEFT], (4, 3), (1, 1)),  # west: column added on the left
    ],
)
def test_forward_off_each_edge(turns, size, pos):
    engine = started_engine("...")
    for turn in turns:
        assert engine.attempt_turn(turn, "...").success
    old_lines = engine.grid.lines()

    result = engine.attempt_forward("...")

    assert result.success
    assert (engine.grid.width, engine.grid.height) == size
    assert engine.actor.pos == pos

    drow = 1 if engine.actor.facing is Facing.NORTH else 0
    dcol = 1 if engine.actor.facing is Facing.WEST else 0
    for r, line in enumerate(old_lines):
        for c, ch in enumerate(line):
            assert engine.grid.cell(r + drow, c + dcol) == ch


def test_forward_away_from_edge_does_not_grow():
    engine = started_engine("...")
    engine.attempt_forward("...")
    engine.attempt_turn(TurnDirection.RIGHT, "...")
    engine.attempt_turn(TurnDirection.RIGHT, "...")

    result = engine.attempt_forward("...")

    # from (1, 1) south to (2, 1) on a 4-row grid: row 3 is the bottom edge
    assert result.success
    assert engine.actor.pos == (2, 1)
    assert engine.grid.height == 4


# ----------------------------------------------------------------------------
# Turns
# ----------------------------------------------------------------------------

def test_turn_reveals_new_side():
    engine = started_engine("...")

    result = engine.attempt_turn(TurnDirection.RIGHT, ".b#")

    assert result.success
    assert engine.actor.facing is Facing.EAST
    assert [engine.grid.cell(r, 2) for r in range(3)] == [".", "b", "#"]
    assert result.rendered.splitlines()[2] == "| >b|"
    assert engine.actor.pos == (1, 1)


def test_turn_inconsistent_reverts_facing():
    engine = started_engine("...")
    engine.attempt_turn(TurnDirection.RIGHT, "..#")

    # back to north then east again, contradicting the known wall at (2, 2)
    engine.attempt_turn(TurnDirection.LEFT, "...")
    before = frozen(engine)
    result = engine.attempt_turn(TurnDirection.RIGHT, "...")

    assert not result.success
    assert result.failure_reason == "INCONSISTENT_MAP"
    assert result.rendered is None
    assert frozen(engine) == before
    assert engine.actor.facing is Facing.NORTH


def test_turns_never_move_and_cancel_out():
    engine = started_engine("...")

    assert engine.attempt_turn(TurnDirection.RIGHT, ".#.").success
    assert engine.attempt_turn(TurnDirection.LEFT, "...").success

    assert engine.actor.facing is Facing.NORTH
    assert engine.actor.pos == (1, 1)
    assert engine.grid.lines() == ["...", "  #", "  ."]


def test_two_rights_then_left_is_one_right():
    engine = started_engine("...")

    engine.attempt_turn(TurnDirection.RIGHT, "...")
    engine.attempt_turn(TurnDirection.RIGHT, "...")
    engine.attempt_turn(TurnDirection.LEFT, "...")

    assert engine.actor.facing is Facing.EAST
    assert engine.actor.pos == (1, 1)


# ----------------------------------------------------------------------------
# Reveal semantics
# ----------------------------------------------------------------------------

def test_same_view_twice_in_place_is_a_no_op():
    engine = started_engine("a#.")
    first = frozen(engine)

    result = engine.reveal_initial("a#.")

    assert result.success
    assert result.rendered is not None
    assert frozen(engine) == first


def test_identical_reveal_is_idempotent():
    engine = started_engine("...")
    assert engine.attempt_turn(TurnDirection.RIGHT, ".a#").success
    assert engine.attempt_turn(TurnDirection.LEFT, "...").success
    first = engine.grid.lines()

    assert engine.attempt_turn(TurnDirection.RIGHT, ".a#").success
    assert engine.attempt_turn(TurnDirection.LEFT, "...").success

    assert engine.grid.lines() == first


def test_wall_then_floor_conflicts_but_unseen_accepts_anything():
    grid = Grid([list("#  "), list("   "), list("   ")])
    engine = NavigationEngine(grid=grid, actor=ActorState(1, 1, Facing.NORTH))

    conflict = engine.reveal_initial("...")
    accepted = engine.reveal_initial("#xz")

    assert conflict.failure_reason == "INCONSISTENT_MAP"
    assert accepted.success
    assert engine.grid.lines()[0] == "#xz"


def test_engine_rejects_actor_outside_grid():
    with pytest.raises(ValueError):
        NavigationEngine(actor=ActorState(5, 5))


def test_state_summary():
    engine = started_engine("...")
    engine.attempt_forward("...")

    assert engine.state() == {
        "row": 1,
        "col": 1,
        "facing": "NORTH",
        "last": ".",
        "width": 3,
        "height": 4,
    }
