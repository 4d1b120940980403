import random

import pytest

from flappy.constants import (
    BIRD_SIZE, GAME_HEIGHT, GAME_WIDTH, PIPE_INIT_SPACE, PIPE_INIT_SPEED,
    PIPE_MAX_HEIGHT, PIPE_MIN_HEIGHT, PIPE_SPEED_STEP, PIPE_WIDTH
)
from flappy.data_models import Scoreboard
from flappy.pillar import Pillar


class ScriptedRandom:
    """Hands out a fixed sequence of draws."""

    def __init__(self, *draws):
        self.draws = list(draws)

    def randint(self, low, high):
        value = self.draws.pop(0)
        assert low <= value <= high
        return value


def test_fresh_pillar_has_one_pipe_at_right_edge(rng):
    pillar = Pillar(rng=rng)
    assert len(pillar.pipes) == 1
    assert pillar.pipes[0].x == GAME_WIDTH
    assert pillar.speed == PIPE_INIT_SPEED


def test_odd_coin_hangs_pipe_from_top():
    pillar = Pillar(rng=ScriptedRandom(201, 300))
    assert pillar.pipes[0].gap_y == 300 - PIPE_MAX_HEIGHT


def test_even_coin_raises_pipe_from_bottom():
    pillar = Pillar(rng=ScriptedRandom(200, 300))
    assert pillar.pipes[0].gap_y == GAME_HEIGHT - 300


def test_gap_positions_cover_both_bands():
    pillar = Pillar(rng=random.Random(7))
    for _ in range(200):
        pillar._spawn_pipe()
    top_band = [p.gap_y for p in pillar.pipes if p.gap_y <= 0]
    bottom_band = [p.gap_y for p in pillar.pipes if p.gap_y > 0]
    assert top_band and bottom_band
    assert all(PIPE_MIN_HEIGHT - PIPE_MAX_HEIGHT <= y <= 0 for y in top_band)
    assert all(GAME_HEIGHT - PIPE_MAX_HEIGHT <= y <= GAME_HEIGHT - PIPE_MIN_HEIGHT
               for y in bottom_band)


def test_update_scrolls_every_pipe(make_pillar):
    pillar = make_pillar((100, 0), (400, 500))
    pillar.update(Scoreboard())
    assert [p.x for p in pillar.pipes] == [99.0, 399.0]


def test_retired_pipe_scores_and_is_replaced(make_pillar):
    scoreboard = Scoreboard()
    pillar = make_pillar((-PIPE_WIDTH, 0))
    pillar.update(scoreboard)
    assert scoreboard.score == 1
    assert len(pillar.pipes) == 1
    assert pillar.pipes[0].x == GAME_WIDTH


def test_pipe_on_the_edge_is_kept(make_pillar):
    scoreboard = Scoreboard()
    pillar = make_pillar((-PIPE_WIDTH + 1, 0), (400, 0))
    pillar.update(scoreboard)
    assert scoreboard.score == 0
    assert pillar.pipes[0].x == -PIPE_WIDTH


def test_speed_steps_up_on_multiple_of_ten(make_pillar):
    scoreboard = Scoreboard(score=9)
    pillar = make_pillar((-PIPE_WIDTH, 0), (400, 0))
    pillar.update(scoreboard)
    assert scoreboard.score == 10
    assert pillar.speed == PIPE_INIT_SPEED + PIPE_SPEED_STEP


def test_speed_unchanged_off_multiple_of_ten(make_pillar):
    scoreboard = Scoreboard(score=10)
    pillar = make_pillar((-PIPE_WIDTH, 0), (400, 0))
    pillar.update(scoreboard)
    assert scoreboard.score == 11
    assert pillar.speed == PIPE_INIT_SPEED


def test_several_retirements_in_one_tick(make_pillar):
    scoreboard = Scoreboard(score=8)
    pillar = make_pillar((-PIPE_WIDTH - 5, 0), (-PIPE_WIDTH, 0), (-PIPE_WIDTH + 10, 0))
    pillar.update(scoreboard)
    assert scoreboard.score == 10
    assert pillar.speed == PIPE_INIT_SPEED + PIPE_SPEED_STEP
    assert len(pillar.pipes) >= 1


def test_spawns_once_spacing_is_cleared(make_pillar):
    pillar = make_pillar((GAME_WIDTH - PIPE_WIDTH - PIPE_INIT_SPACE, 0))
    pillar.update(Scoreboard())
    assert len(pillar.pipes) == 2
    assert pillar.pipes[-1].x == GAME_WIDTH
    assert BIRD_SIZE * PIPE_MIN_HEIGHT / PIPE_MAX_HEIGHT * 2 <= pillar.space <= 2 * BIRD_SIZE


def test_no_spawn_before_spacing_is_cleared(make_pillar):
    pillar = make_pillar((GAME_WIDTH - PIPE_WIDTH - PIPE_INIT_SPACE + 2, 0))
    pillar.update(Scoreboard())
    assert len(pillar.pipes) == 1
    assert pillar.space == PIPE_INIT_SPACE


def test_first_pipe_scrolls_off_and_scores(rng):
    scoreboard = Scoreboard()
    pillar = Pillar(rng=rng)
    ticks = 0
    while scoreboard.score == 0:
        pillar.update(scoreboard)
        ticks += 1
        assert ticks < 2 * (GAME_WIDTH + PIPE_WIDTH)
    assert scoreboard.score == 1
    assert pillar.pipes


def test_long_run_invariants(rng):
    scoreboard = Scoreboard()
    pillar = Pillar(rng=rng)
    for _ in range(5000):
        before = scoreboard.score
        pillar.update(scoreboard)
        assert pillar.pipes
        assert scoreboard.score - before in (0, 1)
        assert pillar.speed == PIPE_INIT_SPEED + PIPE_SPEED_STEP * (scoreboard.score // 10)
        xs = [p.x for p in pillar.pipes]
        assert xs == sorted(xs)
    assert scoreboard.score >= 10


def test_same_seed_same_stream():
    first, second = Pillar(rng=random.Random(99)), Pillar(rng=random.Random(99))
    for _ in range(1000):
        first.update(Scoreboard())
        second.update(Scoreboard())
    assert list(first.pipes) == list(second.pipes)


def test_reset_restores_initial_stream(rng):
    scoreboard = Scoreboard(score=9)
    pillar = Pillar(rng=rng)
    for _ in range(2000):
        pillar.update(scoreboard)
    assert pillar.speed > PIPE_INIT_SPEED

    pillar.reset()
    assert pillar.speed == PIPE_INIT_SPEED
    assert pillar.space == PIPE_INIT_SPACE
    assert len(pillar.pipes) == 1
    assert pillar.pipes[0].x == GAME_WIDTH


def test_empty_stream_fails_fast(rng):
    pillar = Pillar(rng=rng)
    pillar.pipes.clear()
    with pytest.raises(AssertionError):
        pillar.update(Scoreboard())


def test_pipe_boxes(make_pillar):
    boxes = make_pillar((10, -150), (200, 450)).pipe_boxes()
    assert boxes[0].x_range == (10.0, 10.0 + PIPE_WIDTH)
    assert boxes[0].y_range == (-150.0, -150.0 + PIPE_MAX_HEIGHT)
    assert boxes[1].y_range == (450.0, 450.0 + PIPE_MAX_HEIGHT)
