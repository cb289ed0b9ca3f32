"""
Tests for the synthesised sound bank.
"""

from core.audio import Audio, _fade_out, _pack, _square


class TestSynthesis:
    def test_pack_is_stereo_int16(self):
        assert len(_pack([0.0, 0.5, -0.5])) == 3 * 4

    def test_pack_clips_out_of_range(self):
        assert _pack([2.0]) == _pack([1.0])

    def test_square_length(self):
        assert len(_square(440, 0.1)) == 2205

    def test_fade_out_ends_near_silence(self):
        faded = _fade_out([1.0] * 2000)
        assert faded[0] == 1.0
        assert abs(faded[-1]) < 0.01


class TestAudio:
    def test_play_before_init_is_silent_noop(self):
        audio = Audio()
        audio.play("tap")
        assert not audio.available

    def test_init_and_play(self, pygame_init):
        audio = Audio()
        audio.init()
        audio.play("tap")
        audio.play("no_such_sound")
        audio.quit()
        assert not audio.available
