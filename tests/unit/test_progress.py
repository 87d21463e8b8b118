"""
Unit tests for the progress indicator.

Tests frame rendering, stop/join behaviour and argument validation.
"""

import io
import time
import pytest

from filemanager.tools.progress import ProgressIndicator


class TestProgressIndicator:
    """Test cases for the ProgressIndicator class."""

    def test_renders_rotating_frames_in_place(self):
        """Test that frames are redrawn with a carriage return."""
        stream = io.StringIO()
        with ProgressIndicator(stream=stream, interval=0.01) as indicator:
            deadline = time.monotonic() + 2
            while indicator.frames_rendered < 5 and time.monotonic() < deadline:
                time.sleep(0.01)

        output = stream.getvalue()
        assert output.startswith("\rSearching | ")
        assert "\rSearching / " in output
        assert "\rSearching - " in output
        assert "\rSearching \\ " in output
        assert "\n" not in output

    def test_stopped_after_context_exit(self):
        """Test that the thread is joined when the block exits."""
        with ProgressIndicator(stream=io.StringIO(), interval=0.01) as indicator:
            assert indicator.is_running

        assert not indicator.is_running

    def test_stopped_when_block_raises(self):
        """Test that the thread is joined when the block raises."""
        indicator = ProgressIndicator(stream=io.StringIO(), interval=0.01)
        with pytest.raises(OSError):
            with indicator:
                raise OSError("disk gone")

        assert not indicator.is_running

    def test_stop_is_prompt_with_long_interval(self):
        """Test that stopping does not wait out a long frame interval."""
        indicator = ProgressIndicator(stream=io.StringIO(), interval=5)
        indicator.start()
        started = time.monotonic()
        indicator.stop()

        assert time.monotonic() - started < 2
        assert not indicator.is_running

    def test_cannot_start_twice(self):
        """Test that an indicator is single use."""
        indicator = ProgressIndicator(stream=io.StringIO(), interval=0.01)
        indicator.start()
        try:
            with pytest.raises(RuntimeError):
                indicator.start()
        finally:
            indicator.stop()

    def test_stop_without_start(self):
        """Test that stopping an unstarted indicator is harmless."""
        indicator = ProgressIndicator(stream=io.StringIO())
        indicator.stop()
        assert not indicator.is_running

    def test_custom_frames_and_label(self):
        """Test that frames and label are configurable."""
        stream = io.StringIO()
        with ProgressIndicator(stream=stream, interval=0.01, frames="ab", label="Working") as indicator:
            deadline = time.monotonic() + 2
            while indicator.frames_rendered < 2 and time.monotonic() < deadline:
                time.sleep(0.01)

        assert "\rWorking a " in stream.getvalue()
        assert "\rWorking b " in stream.getvalue()

    @pytest.mark.parametrize("kwargs", [{'interval': 0}, {'interval': -1}, {'frames': ''}])
    def test_invalid_arguments(self, kwargs):
        """Test that invalid settings are rejected."""
        with pytest.raises(ValueError):
            ProgressIndicator(stream=io.StringIO(), **kwargs)
