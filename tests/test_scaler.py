"""
Tests for window scaling and orientation detection.
"""

from utils.scaler import Scaler, orientation_for


class TestOrientation:
    def test_tall_window_is_portrait(self):
        assert orientation_for(450, 800) == "portrait"

    def test_wide_window_is_landscape(self):
        assert orientation_for(800, 450) == "landscape"

    def test_square_window_is_portrait(self):
        assert orientation_for(500, 500) == "portrait"


class TestScaler:
    def test_native_size_follows_orientation(self):
        assert Scaler(720, 1280).native_size == (360, 640)
        assert Scaler(1280, 720).native_size == (640, 360)

    def test_exact_fit_has_no_letterbox(self):
        s = Scaler(720, 1280)
        assert s.scale == 2.0
        assert (s.offset_x, s.offset_y) == (0, 0)

    def test_letterbox_offsets(self):
        s = Scaler(1000, 1280)
        assert s.scale == 2.0
        assert s.offset_x == (1000 - 720) // 2
        assert s.offset_y == 0

    def test_to_game_round_trip(self):
        s = Scaler(1000, 1280)
        assert s.to_game(s.offset_x + 200, 300) == (100, 150)

    def test_in_bounds(self):
        s = Scaler(1000, 1280)
        assert s.in_bounds(500, 640)
        assert not s.in_bounds(10, 640)

    def test_resize_without_rotation(self):
        s = Scaler(720, 1280)
        assert s.update(360, 640) is False
        assert s.scale == 1.0

    def test_resize_with_rotation(self):
        s = Scaler(720, 1280)
        assert s.update(1280, 720) is True
        assert s.orientation == "landscape"
        assert s.scale == 2.0
