import random

import pytest

from classic_snake.state import (
    DOWN,
    LEFT,
    RIGHT,
    UP,
    GameState,
    RunState,
    TickOutcome,
)


def _assert_alive_invariants(state):
    assert len(set(state.snake)) == len(state.snake)
    assert all(state.in_bounds(cell) for cell in state.snake)
    assert state.food is not None
    assert state.food not in state.snake


def test_reset_centers_three_segments_moving_right(rng):
    state = GameState(21, 21, rng=rng)
    assert state.snake == [(10, 10), (9, 10), (8, 10)]
    assert state.direction == RIGHT
    assert state.queued_direction == RIGHT
    assert state.score == 0
    assert state.run_state is RunState.IDLE
    _assert_alive_invariants(state)


def test_advance_moves_one_cell(rng):
    state = GameState(21, 21, rng=rng)
    state.food = (0, 0)
    assert state.advance() is TickOutcome.MOVED
    assert state.snake == [(11, 10), (10, 10), (9, 10)]
    assert state.score == 0


def test_advance_onto_food_grows_and_scores(rng):
    state = GameState(21, 21, rng=rng)
    state.food = (11, 10)
    assert state.advance() is TickOutcome.ATE
    assert state.snake == [(11, 10), (10, 10), (9, 10), (8, 10)]
    assert state.score == 1
    assert state.high_score == 1
    assert state.food is not None
    assert state.food not in state.snake


def test_leaving_the_board_ends_the_game(rng):
    state = GameState(21, 21, rng=rng)
    state.snake = [(0, 10), (1, 10), (2, 10)]
    state.direction = state.queued_direction = LEFT
    assert state.advance() is TickOutcome.COLLIDED
    assert state.run_state is RunState.GAME_OVER
    assert state.snake == [(0, 10), (1, 10), (2, 10)]


def test_running_into_own_tail_ends_the_game(rng):
    state = GameState(21, 21, rng=rng)
    state.snake = [(5, 5), (5, 6), (6, 6), (6, 5)]
    state.direction = state.queued_direction = RIGHT
    state.food = (0, 0)
    assert state.advance() is TickOutcome.COLLIDED
    assert state.game_over


def test_advance_after_game_over_is_a_no_op(rng):
    state = GameState(21, 21, rng=rng)
    state.run_state = RunState.GAME_OVER
    snake = list(state.snake)
    assert state.advance() is None
    assert state.snake == snake


def test_collision_keeps_best_score(rng):
    state = GameState(21, 21, high_score=2, rng=rng)
    state.score = 5
    state.snake = [(20, 0), (19, 0), (18, 0)]
    state.advance()
    assert state.high_score == 5


@pytest.mark.parametrize(
    "committed, reverse",
    [(RIGHT, LEFT), (LEFT, RIGHT), (UP, DOWN), (DOWN, UP)],
)
def test_reversal_is_rejected(rng, committed, reverse):
    state = GameState(21, 21, rng=rng)
    state.direction = state.queued_direction = committed
    assert state.set_direction(*reverse) is False
    assert state.queued_direction == committed


def test_turn_is_only_queued_until_the_next_tick(rng):
    state = GameState(21, 21, rng=rng)
    assert state.set_direction(*UP)
    assert state.direction == RIGHT
    assert state.snake[0] == (10, 10)
    state.food = (0, 0)
    state.advance()
    assert state.direction == UP
    assert state.head == (10, 9)


def test_reversal_is_checked_against_committed_not_queued(rng):
    state = GameState(21, 21, rng=rng)
    assert state.set_direction(0, -1)
    assert state.set_direction(0, -1)
    assert state.set_direction(-1, 0) is False
    assert state.queued_direction == (0, -1)


def test_last_valid_request_before_a_tick_wins(rng):
    state = GameState(21, 21, rng=rng)
    state.set_direction(*UP)
    state.set_direction(*DOWN)
    assert state.queued_direction == DOWN


@pytest.mark.parametrize("requested", [(0, 0), (2, 0), (1, 1), (-1, -1)])
def test_non_unit_requests_are_dropped(rng, requested):
    state = GameState(21, 21, rng=rng)
    assert state.set_direction(*requested) is False
    assert state.queued_direction == RIGHT


def test_food_fills_last_free_cell():
    state = GameState(4, 1, rng=random.Random(0))
    assert state.snake == [(2, 0), (1, 0), (0, 0)]
    assert state.food == (3, 0)


def test_eating_the_last_free_cell_is_board_full():
    state = GameState(4, 1, rng=random.Random(0))
    assert state.advance() is TickOutcome.BOARD_FULL
    assert state.board_full
    assert state.food is None
    assert state.run_state is RunState.GAME_OVER
    assert len(state.snake) == state.capacity
    assert state.score == 1


@pytest.mark.parametrize("cols, rows", [(3, 1), (3, 3), (2, 5), (4, 0)])
def test_board_too_small_for_starting_snake(cols, rows):
    with pytest.raises(ValueError):
        GameState(cols, rows)


@pytest.mark.parametrize("cols, rows", [(4, 1), (4, 4), (5, 2)])
def test_smallest_boards_start_inside_bounds(cols, rows):
    state = GameState(cols, rows, rng=random.Random(0))
    assert all(state.in_bounds(cell) for cell in state.snake)
    assert not state.board_full
    assert state.food is not None


def test_reset_after_board_full_starts_fresh():
    state = GameState(4, 1, rng=random.Random(0))
    state.advance()
    state.reset()
    assert state.snake == [(2, 0), (1, 0), (0, 0)]
    assert state.food == (3, 0)
    assert state.board_full is False
    assert state.run_state is RunState.IDLE


def test_reset_keeps_high_score(rng):
    state = GameState(21, 21, rng=rng)
    state.food = (11, 10)
    state.advance()
    state.reset()
    assert state.score == 0
    assert state.high_score == 1
    assert state.board_full is False


def test_food_placement_is_spread_over_free_cells():
    state = GameState(5, 5, rng=random.Random(7))
    seen = set()
    for _ in range(400):
        state.place_food()
        seen.add(state.food)
    assert seen == set(state.free_cells())


def test_random_play_keeps_invariants():
    rng = random.Random(99)
    state = GameState(8, 8, rng=random.Random(3))
    best = 0
    for _ in range(3000):
        if state.game_over:
            best = max(best, state.score)
            assert state.high_score == best
            state.reset()
        state.set_direction(*rng.choice([UP, DOWN, LEFT, RIGHT]))
        length, score, food = len(state.snake), state.score, state.food
        outcome = state.advance()
        if outcome is TickOutcome.MOVED:
            assert len(state.snake) == length
            assert state.score == score
        elif outcome is TickOutcome.ATE:
            assert state.head == food
            assert len(state.snake) == length + 1
            assert state.score == score + 1
        if not state.game_over:
            _assert_alive_invariants(state)
        assert state.high_score >= state.score
