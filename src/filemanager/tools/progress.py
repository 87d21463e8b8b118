"""
Progress indicator shown while a search is running.

The indicator runs on a background thread and redraws a rotating frame on a
single line with a carriage return. It is stopped through one shared flag
and is always joined by the thread that started it.
"""

import sys
import threading
import logging
from typing import Optional, TextIO


logger = logging.getLogger(__name__)


class ProgressIndicator:
    """
    Rotating "Searching" animation driven by a background thread.

    Use it as a context manager so the thread is stopped and joined on every
    exit path::

        with ProgressIndicator(stream):
            walk()

    Attributes:
        stream: Text stream receiving the animation frames
        interval: Seconds between frames
        frames: Characters shown in turn
        label: Text rendered before the frame
    """

    def __init__(self, stream: Optional[TextIO] = None, interval: float = 0.5,
                 frames: str = "|/-\\", label: str = "Searching"):
        if interval <= 0:
            raise ValueError("Progress interval must be positive")
        if not frames:
            raise ValueError("Progress frames cannot be empty")

        self.stream = stream if stream is not None else sys.stdout
        self.interval = interval
        self.frames = frames
        self.label = label
        self.frames_rendered = 0
        self._stop_requested = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        """Whether the animation thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the animation thread. An indicator can only be started once."""
        if self._thread is not None:
            raise RuntimeError("Progress indicator has already been started")

        self._thread = threading.Thread(target=self._run, name="progress-indicator", daemon=True)
        self._thread.start()
        logger.debug("Progress indicator started")

    def stop(self) -> None:
        """Signal the animation to stop and wait for its thread to finish."""
        self._stop_requested.set()
        if self._thread is not None:
            self._thread.join()
            logger.debug(f"Progress indicator stopped after {self.frames_rendered} frames")

    def _run(self) -> None:
        index = 0
        while not self._stop_requested.is_set():
            frame = self.frames[index]
            self.stream.write(f"\r{self.label} {frame} ")
            self.stream.flush()
            self.frames_rendered += 1
            index = (index + 1) % len(self.frames)
            # Event.wait returns early once stop is requested
            self._stop_requested.wait(self.interval)

    def __enter__(self) -> 'ProgressIndicator':
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
