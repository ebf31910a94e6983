"""Tests for the post-match cue pause."""

from core.feedback import CueFeedback


def test_idle_by_default():
    fb = CueFeedback(min_delay=1.0, fallback_delay=2.0)
    assert not fb.active
    assert fb.update(10.0) is False


def test_cue_end_after_min_delay():
    fb = CueFeedback(min_delay=1.0, fallback_delay=2.0)
    fb.start("triangle", cue_length=0.5)
    assert fb.bundle == "triangle"
    fb.cue_finished()
    assert fb.update(0.6) is False      # confetti pause still running
    assert fb.update(0.5) is True
    assert not fb.active


def test_fires_only_once():
    fb = CueFeedback(min_delay=0.0, fallback_delay=2.0)
    fb.start("square", cue_length=0.3)
    fb.cue_finished()
    assert fb.update(0.1) is True
    assert fb.update(0.1) is False


def test_fallback_when_cue_never_ends():
    fb = CueFeedback(min_delay=1.0, fallback_delay=2.0)
    fb.start("circle", cue_length=1.5)
    assert fb.update(3.0) is False
    assert fb.update(0.6) is True


def test_fallback_without_cue_length():
    fb = CueFeedback(min_delay=1.0, fallback_delay=2.0)
    fb.start("oval")
    assert fb.update(1.9) is False
    assert fb.update(0.2) is True


def test_deadline_never_shorter_than_min_delay():
    fb = CueFeedback(min_delay=3.0, fallback_delay=0.5)
    fb.start("hexagon")
    assert fb.update(2.0) is False
    assert fb.update(1.0) is True


def test_cue_finished_while_idle_is_ignored():
    fb = CueFeedback(min_delay=0.0, fallback_delay=5.0)
    fb.cue_finished()
    fb.start("rhombus")
    assert fb.update(0.1) is False


def test_cancel():
    fb = CueFeedback(min_delay=0.0, fallback_delay=1.0)
    fb.start("octagon")
    fb.cancel()
    assert not fb.active
    assert fb.update(5.0) is False
