import pygame
import pytest

from sandfall.game import BACKGROUND, FrameStats, Game, main, ticks_due
from sandfall.world import World


def _small_game(size=3, pixels=30):
    world = World(width=size, height=size, window_height=pixels)
    return Game(world=world, size=(pixels, pixels))


def test_ticks_due_below_one_accumulates():
    ticks, remaining = ticks_due(0.0, 0.01)
    assert ticks == 0
    assert remaining == pytest.approx(0.5)


def test_ticks_due_whole_ticks():
    ticks, remaining = ticks_due(0.0, 0.1)
    assert ticks == 5
    assert remaining == pytest.approx(0.0)


@pytest.mark.parametrize("pending,dt", [(0.0, 0.016), (0.7, 0.033), (0.2, 0.25), (0.99, 0.0)])
def test_ticks_due_invariant(pending, dt):
    ticks, remaining = ticks_due(pending, dt)
    assert ticks + remaining == pytest.approx(pending + dt * 1000 / 20)
    assert 0.0 <= remaining < 1.0


def test_frame_stats_report():
    stats = FrameStats()
    stats.record(0.5)
    assert stats.report() == "FPS: 2; frame time: 500ms; highest frame time: 500ms"


def test_frame_stats_keeps_highest():
    stats = FrameStats()
    for dt in (0.01, 0.03, 0.02):
        stats.record(dt)
    assert stats.highest_frame_time == pytest.approx(30.0)
    assert stats.frame_time == pytest.approx(20.0)


def test_frame_stats_zero_dt_is_infinite_fps():
    stats = FrameStats()
    stats.record(0.0)
    assert stats.report().startswith("FPS: inf;")


def test_quit_event_stops_game():
    game = _small_game()
    game.running = True
    game._handle_event(pygame.event.Event(pygame.QUIT), True)
    assert game.running is False


def test_left_click_creates_cell():
    game = _small_game()
    game._handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(15, 5)), True)
    assert game.world.occupied() == {(1, 0)}


def test_click_without_focus_does_nothing():
    game = _small_game()
    game._handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(15, 5)), False)
    assert game.world.occupied() == set()


def test_right_click_steps_world():
    game = _small_game()
    game.world.create_cell_from_click((5, 5))
    game._handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0)), True)
    assert game.world.occupied() == {(0, 1)}


def test_held_shift_creates_single_cell():
    game = _small_game()
    made = game._apply_held_input((25, 25), (True, False, False), pygame.KMOD_LSHIFT)
    assert len(made) == 1
    assert game.world.occupied() == {(2, 2)}


def test_held_without_modifier_creates_nothing():
    game = _small_game()
    made = game._apply_held_input((25, 25), (True, False, False), 0)
    assert made == []
    assert game.world.occupied() == set()


def test_held_ctrl_fills_disc_in_bounds():
    game = _small_game(size=5, pixels=50)
    game._apply_held_input((25, 25), (True, False, False), pygame.KMOD_LCTRL)
    expected = {
        (x, y)
        for x, y in game.world.grid_positions_in_radius((25, 25), 10)
        if 0 <= x < 5 and 0 <= y < 5
    }
    assert game.world.occupied() == expected


def test_draw_paints_cell_colour():
    game = _small_game(size=2, pixels=20)
    cell = game.world.create_cell_from_click((5, 5))
    surface = pygame.Surface((20, 20))
    surface.fill(BACKGROUND)
    game._draw(surface)
    color = game.world.vertices[cell.vertices_index].color
    assert tuple(surface.get_at((5, 5))) == color
    assert tuple(surface.get_at((15, 15)))[:3] == BACKGROUND


def test_run_without_window_raises():
    game = _small_game()
    with pytest.raises(RuntimeError):
        game.run()


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])