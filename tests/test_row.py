import pytest

from stonelayout.config import MIN_STONE_SIZE, STONE_DEPTH
from stonelayout.engine.random import SeededRandom
from stonelayout.engine.row import apply_randomness, generate_row
from stonelayout.model.parameters import PatternType
from stonelayout.utils import lerp


def test_apply_randomness_without_jitter_keeps_value():
    assert apply_randomness(150.0, 0.0, SeededRandom()) == 150.0


def test_apply_randomness_floor():
    assert apply_randomness(5.0, 0.0, SeededRandom()) == MIN_STONE_SIZE


def test_apply_randomness_uses_one_draw():
    rng = SeededRandom(3)
    t = rng.copy().next()

    result = apply_randomness(400.0, 0.5, rng)

    assert result == max(MIN_STONE_SIZE, 400.0 + 400.0 * 0.5 * (t - 0.5) * 2)
    assert 200.0 <= result <= 600.0

    reference = SeededRandom(3)
    reference.next()
    assert rng.state == reference.state


def test_stack_row(stack_params):
    row = generate_row(stack_params, SeededRandom(), start_y=0.0, start_id=0, is_first_row=True)

    assert [s.x for s in row.stones] == [i * 100.0 for i in range(10)]
    assert all(s.width == 100.0 for s in row.stones)
    assert all(s.y == 0.0 and s.depth == STONE_DEPTH for s in row.stones)
    assert [s.id for s in row.stones] == [f"stone-{i}" for i in range(10)]
    assert row.next_id == 10
    assert row.next_y == row.row_height + stack_params.joint_height
    assert not row.stalled


def test_row_height_within_range(stack_params):
    row = generate_row(stack_params, SeededRandom(), start_y=0.0, start_id=0, is_first_row=True)
    assert stack_params.stone_min_height <= row.row_height <= stack_params.stone_max_height
    assert all(s.height == row.row_height for s in row.stones)


def test_ids_continue_from_start_id(stack_params):
    row = generate_row(stack_params, SeededRandom(), start_y=250.0, start_id=5, is_first_row=False)
    assert row.stones[0].id == "stone-5"
    assert row.next_id == 5 + len(row.stones)
    assert all(s.y == 250.0 for s in row.stones)


def test_last_stone_clipped_to_wall(stack_params):
    params = stack_params.replace(wall_width=1050.0)
    row = generate_row(params, SeededRandom(), start_y=0.0, start_id=0, is_first_row=True)

    assert len(row.stones) == 11
    assert row.stones[-1].x == 1000.0
    assert row.stones[-1].width == pytest.approx(50.0)
    assert row.stones[-1].right == pytest.approx(1050.0)


def test_small_remnant_discarded(stack_params):
    params = stack_params.replace(wall_width=1010.0)
    row = generate_row(params, SeededRandom(), start_y=0.0, start_id=0, is_first_row=True)

    assert len(row.stones) == 10
    assert row.stones[-1].right == 1000.0
    assert row.next_id == 10


def test_remnant_of_exactly_min_size_discarded(stack_params):
    params = stack_params.replace(wall_width=1000.0 + MIN_STONE_SIZE)
    row = generate_row(params, SeededRandom(), start_y=0.0, start_id=0, is_first_row=True)
    assert len(row.stones) == 10


def test_running_row_clips_left_overhang(stack_params):
    params = stack_params.replace(pattern_type=PatternType.RUNNING)
    rng = SeededRandom()
    # row height and its jitter come first, then the course offset
    probe = rng.copy()
    probe.next()
    probe.next()
    offset = -(50.0 + 150.0 * probe.next())

    row = generate_row(params, rng, start_y=0.0, start_id=0, is_first_row=False)

    # stones hanging over the left edge are cut at x=0, slivers are dropped
    visible = offset % 100.0
    assert visible > MIN_STONE_SIZE
    first, second = row.stones[0], row.stones[1]
    assert first.x == 0.0
    assert first.width == pytest.approx(visible)
    assert first.right == pytest.approx(second.x)
    assert all(s.x >= 0.0 for s in row.stones)


def test_packing_continuity_with_joints(default_params):
    params = default_params.replace(pattern_type=PatternType.STACK)
    row = generate_row(params, SeededRandom(11), start_y=0.0, start_id=0, is_first_row=True)

    for left, right in zip(row.stones, row.stones[1:]):
        assert left.x + left.width + params.joint_width == pytest.approx(right.x)


def test_max_stones_cuts_row(stack_params):
    row = generate_row(stack_params, SeededRandom(), start_y=0.0, start_id=0, is_first_row=True, max_stones=4)
    assert row.stalled
    assert len(row.stones) == 4


def test_max_stones_exactly_filled_does_not_stall(stack_params):
    row = generate_row(stack_params, SeededRandom(), start_y=0.0, start_id=0, is_first_row=True, max_stones=10)
    assert not row.stalled
    assert len(row.stones) == 10


def test_non_advancing_cursor_stops_row(stack_params):
    params = stack_params.replace(joint_width=-150.0)
    row = generate_row(params, SeededRandom(), start_y=0.0, start_id=0, is_first_row=True)
    assert row.stalled
    assert len(row.stones) == 1


def test_reversed_range_still_packs(stack_params):
    params = stack_params.replace(stone_min_width=300.0, stone_max_width=100.0, wall_height=1000.0)
    row = generate_row(params, SeededRandom(), start_y=0.0, start_id=0, is_first_row=True)
    assert row.stones
    assert all(100.0 <= s.width <= 300.0 for s in row.stones[:-1])


def test_nearly_cancelling_joint_stalls_row(stack_params):
    # floor-sized stones are discarded and the cursor creeps by 0.001 per step
    params = stack_params.replace(stone_min_width=20.0, stone_max_width=20.0, joint_width=-19.999)
    row = generate_row(params, SeededRandom(), start_y=0.0, start_id=0, is_first_row=True, max_steps=1000)
    assert row.stalled
    assert row.stones == []


def test_step_bound_does_not_cut_ordinary_rows(stack_params):
    row = generate_row(stack_params, SeededRandom(), start_y=0.0, start_id=0, is_first_row=True, max_steps=10)
    assert not row.stalled
    assert len(row.stones) == 10


@pytest.mark.parametrize("pattern", [PatternType.STACK, PatternType.RANDOM])
def test_unclipped_widths_are_the_drawn_widths(default_params, pattern):
    params = default_params.replace(pattern_type=pattern)
    row = generate_row(params, SeededRandom(), start_y=0.0, start_id=0, is_first_row=True)

    replay = SeededRandom()
    replay.next()
    replay.next()
    inner = row.stones[:-1]
    assert inner
    for stone in inner:
        base = lerp(params.stone_min_width, params.stone_max_width, replay.next())
        assert stone.width == apply_randomness(base, params.randomness, replay)
