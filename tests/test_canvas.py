import pygame
import pytest

import constants
from canvas import InteractiveCanvas


@pytest.fixture
def canvas(params, rng, clock):
    return InteractiveCanvas(params, rng, size=(200, 150), clock=clock)


def motion(x, y):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=(x, y), rel=(0, 0), buttons=(0, 0, 0))


def button(event_type, x, y, which=1):
    return pygame.event.Event(event_type, pos=(x, y), button=which)


def test_state_is_shared_with_input_mapper(canvas):
    assert canvas.input.particles is canvas.state.particles
    assert canvas.input.trail is canvas.state.trail
    assert canvas.input.pointer is canvas.state.pointer
    assert canvas.input.params is canvas.params


def test_pointer_events_drive_emission(canvas):
    canvas.params.effect_mode = constants.MODE_DRAG
    canvas.handle_event(motion(10, 10))
    assert len(canvas.state.particles) == 0

    canvas.handle_event(button(pygame.MOUSEBUTTONDOWN, 10, 10))
    assert canvas.state.pointer.held
    canvas.handle_event(motion(12, 14))
    assert len(canvas.state.particles) == canvas.params.particle_count
    assert (canvas.state.pointer.x, canvas.state.pointer.y) == (12, 14)

    canvas.handle_event(button(pygame.MOUSEBUTTONUP, 12, 14))
    assert not canvas.state.pointer.held


def test_right_button_is_ignored(canvas):
    canvas.handle_event(button(pygame.MOUSEBUTTONDOWN, 5, 5, which=3))
    assert not canvas.state.pointer.held


def test_window_leave_releases_pointer(canvas):
    canvas.handle_event(button(pygame.MOUSEBUTTONDOWN, 5, 5))
    canvas.handle_event(pygame.event.Event(pygame.WINDOWLEAVE))
    assert not canvas.state.pointer.held


def test_keys_edit_parameters_and_escape_tears_down(canvas):
    canvas.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_1, mod=0, unicode="1", scancode=0))
    assert canvas.params.effect_mode == constants.MODE_CLICK
    assert not canvas.torn_down
    canvas.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0, unicode="", scancode=0))
    assert canvas.torn_down


def test_reset_key_restores_initial_parameters(canvas):
    canvas.params.gravity = -2.5
    canvas.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_BACKSPACE, mod=0, unicode="", scancode=0))
    assert canvas.params.gravity == 0.3


def test_quit_event_tears_down(canvas):
    canvas.handle_event(pygame.event.Event(pygame.QUIT))
    assert canvas.torn_down


def test_resize_event_keeps_particles_and_trail(canvas):
    for i in range(4):
        canvas.handle_event(motion(i, i))
    particles, trail = len(canvas.state.particles), len(canvas.state.trail)

    canvas.handle_event(pygame.event.Event(pygame.VIDEORESIZE, w=320, h=240, size=(320, 240)))
    assert canvas.renderer.size == (320, 240)
    assert len(canvas.state.particles) == particles
    assert len(canvas.state.trail) == trail


def test_step_frame_simulates_then_draws(canvas):
    surface = pygame.Surface((200, 150))
    canvas.handle_event(motion(100, 75))
    canvas.step_frame(surface, 1000)
    assert all(p.life == constants.MAX_LIFE - constants.LIFE_DECREMENT for p in canvas.state.particles)
    assert canvas.frames_drawn == 1


def test_step_frame_resyncs_to_surface_size(canvas):
    surface = pygame.Surface((300, 100))
    canvas.step_frame(surface, 0)
    assert canvas.renderer.size == (300, 100)


def test_end_to_end_continuous_press_and_moves(canvas):
    canvas.params.effect_mode = constants.MODE_CONTINUOUS
    canvas.params.particle_count = 3
    canvas.handle_event(button(pygame.MOUSEBUTTONDOWN, 50, 50))
    for i in range(5):
        canvas.handle_event(motion(50 + i, 50))
    assert len(canvas.state.particles) == 15


def test_particles_expire_over_frames(canvas):
    surface = pygame.Surface((200, 150))
    canvas.handle_event(motion(100, 75))
    for frame in range(128):
        canvas.step_frame(surface, frame * 16)
    assert len(canvas.state.particles) == 0


def test_tick_processes_quit_without_drawing(display, params, rng, clock):
    canvas = InteractiveCanvas(params, rng, size=display.get_size(), clock=clock)
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert canvas.run() == 1
    assert canvas.torn_down
    assert canvas.frames_drawn == 0


def test_tick_draws_to_display(display, params, rng, clock):
    canvas = InteractiveCanvas(params, rng, size=display.get_size(), clock=clock)
    pygame.event.clear()
    assert canvas.run(max_ticks=3) == 3
    assert canvas.frames_drawn == 3
    assert not canvas.torn_down


def test_tick_stops_when_surface_is_gone(display, params, rng, clock):
    canvas = InteractiveCanvas(params, rng, size=(200, 150), clock=clock, get_surface=lambda: None)
    pygame.event.clear()
    assert canvas.run() == 1
    assert canvas.torn_down
    assert canvas.frames_drawn == 0


def test_teardown_before_run_prevents_ticks(params, rng, clock):
    canvas = InteractiveCanvas(params, rng, size=(200, 150), clock=clock)
    canvas.teardown()
    assert canvas.run() == 0
