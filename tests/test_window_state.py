import math

from dockable.window_state import Pos2, Rect, Vec2, WindowState


def test_nothing_rect_has_infinite_corners():
    assert Rect.NOTHING.min == Pos2(math.inf, math.inf)
    assert Rect.NOTHING.max == Pos2(-math.inf, -math.inf)


def test_from_min_size_round_trips_size():
    size = Vec2(30.0, 40.0)
    origin = Pos2(5.0, 7.0)
    rect = Rect.from_min_size(origin, size)
    assert rect.min == origin
    assert rect.size() == size


def test_vec2_scaling():
    assert Vec2(10.0, 20.0) * 0.5 == Vec2(5.0, 10.0)
    assert 2 * Vec2(1.5, 3.0) == Vec2(3.0, 6.0)


def test_pos_difference_inverts_offset():
    p = Pos2(1.0, 2.0)
    offset = Vec2(3.0, 4.0)
    assert (p + offset) - p == offset


def test_default_window_state():
    state = WindowState()
    assert state.rect() == Rect.NOTHING
    assert state.dragged() is False
    assert state.is_minimized() is False
    assert state.is_new is True
    assert state.take_next_position() is None
    assert state.take_next_size() is None
    assert state.take_expanded_height() is None


def test_set_position_is_taken_once():
    state = WindowState()
    result = state.set_position(Pos2(10.0, 20.0))
    assert result is state
    assert state.take_next_position() == Pos2(10.0, 20.0)
    assert state.take_next_position() is None


def test_set_size_is_taken_once():
    state = WindowState()
    assert state.set_size(Vec2(100.0, 100.0)) is state
    assert state.take_next_size() == Vec2(100.0, 100.0)
    assert state.take_next_size() is None


def test_chained_setters():
    state = WindowState().set_position(Pos2(0.0, 0.0)).set_size(Vec2(1.0, 2.0))
    assert state.take_next_position() == Pos2(0.0, 0.0)
    assert state.take_next_size() == Vec2(1.0, 2.0)


def test_expanded_height_is_taken_once():
    state = WindowState()
    assert state.set_expanded_height(250.0) is state
    assert state.take_expanded_height() == 250.0
    assert state.take_expanded_height() is None


def test_set_new():
    state = WindowState()
    state.set_new(False)
    assert state.is_new is False
    state.set_new(True)
    assert state.is_new is True


def test_toggle_minimized_flips_back_and_forth():
    state = WindowState()
    state.toggle_minimized()
    assert state.is_minimized() is True
    state.toggle_minimized()
    assert state.is_minimized() is False


def test_window_states_are_independent():
    first = WindowState()
    second = WindowState()
    first.set_position(Pos2(1.0, 1.0))
    first.toggle_minimized()
    assert second.take_next_position() is None
    assert second.is_minimized() is False