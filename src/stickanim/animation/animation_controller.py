"""
Animation Controller

Manages animation playback state and applies sampled poses to a figure.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Iterator, Optional

from ..config.settings import DEFAULT_PLAYBACK_SPEED, MAX_PLAYBACK_SPEED, MIN_PLAYBACK_SPEED
from ..figure.pose import Pose
from .animation import Animation, sample_pose

if TYPE_CHECKING:
    from ..figure.stick_figure import StickFigure


logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    """Animator playback states."""

    IDLE = auto()       # No animation bound
    STOPPED = auto()    # Bound, not advancing (finished non-looping playback)
    PLAYING = auto()    # Advancing on every update
    PAUSED = auto()     # Bound, time frozen


class Animator:
    """
    Controls animation playback for a stick figure.

    Manages:
    - Current animation and playback time
    - Play/pause/resume/stop/loop states
    - Applying sampled poses over the baseline pose
    """

    def __init__(self, figure: StickFigure, clock: Callable[[], float] = time.perf_counter):
        """
        Initialize animator.

        Args:
            figure: Figure to animate
            clock: Wall-clock source in seconds, used by tick()
        """
        self.figure = figure
        self._clock = clock
        self._baseline: Pose = figure.get_pose()
        self._animation: Optional[Animation] = None
        self._current_time: float = 0.0
        self._speed: float = DEFAULT_PLAYBACK_SPEED
        self._state = PlaybackState.IDLE
        self._last_frame_time: float = clock()

        self._on_state_changed: list[Callable[[PlaybackState, PlaybackState], None]] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def current_animation(self) -> Optional[Animation]:
        return self._animation

    @property
    def current_time(self) -> float:
        return self._current_time

    @property
    def is_playing(self) -> bool:
        return self._state == PlaybackState.PLAYING

    @property
    def is_finished(self) -> bool:
        """True when a non-looping animation reached its end and is still bound."""
        return (
            self._state == PlaybackState.STOPPED
            and self._animation is not None
            and self._current_time >= self._animation.duration
        )

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def baseline(self) -> Pose:
        return self._baseline.copy()

    def get_speed(self) -> float:
        return self._speed

    # ------------------------------------------------------------------
    # State callbacks
    # ------------------------------------------------------------------
    def register_state_change_callback(
        self, callback: Callable[[PlaybackState, PlaybackState], None]
    ) -> None:
        """
        Register a callback for playback state changes.

        Callback signature: callback(old_state: PlaybackState, new_state: PlaybackState)
        """
        self._on_state_changed.append(callback)

    def _set_state(self, new_state: PlaybackState) -> None:
        if new_state == self._state:
            return
        old_state = self._state
        self._state = new_state
        logger.debug("Playback state %s -> %s", old_state.name, new_state.name)
        for callback in self._on_state_changed:
            try:
                callback(old_state, new_state)
            except Exception:
                logger.exception("Error in playback state change callback")

    # ------------------------------------------------------------------
    # Transport controls
    # ------------------------------------------------------------------
    def play(self, animation: Animation) -> None:
        """
        Start playing an animation from time 0.

        The figure's current pose becomes the baseline for parameters the
        animation never sets.

        Raises:
            ValueError: If the animation has no keyframes
        """
        if animation.is_empty:
            raise ValueError(f"Cannot play animation '{animation.name}': it has no keyframes")

        self._baseline = self.figure.get_pose()
        self._animation = animation
        self._current_time = 0.0
        self._last_frame_time = self._clock()
        self._set_state(PlaybackState.PLAYING)
        self._update_pose()
        logger.info("Playing animation '%s' (%.2fs, loop=%s)", animation.name, animation.duration, animation.loop)

    def pause(self) -> None:
        """Pause playback; time is frozen."""
        if self._state != PlaybackState.PLAYING:
            return
        self._set_state(PlaybackState.PAUSED)

    def resume(self) -> None:
        """Resume playback of the bound animation without a time jump."""
        if self._animation is None or self._state == PlaybackState.PLAYING:
            return
        self._last_frame_time = self._clock()
        self._set_state(PlaybackState.PLAYING)

    def stop(self) -> None:
        """Stop playback, unbind the animation and restore the baseline pose."""
        self._current_time = 0.0
        self._animation = None
        self.figure.set_pose(self._baseline)
        self._set_state(PlaybackState.IDLE)

    def reset(self) -> None:
        """Rewind to time 0 without changing the play state."""
        self._current_time = 0.0
        if self._animation is not None:
            self._update_pose()

    def set_speed(self, speed: float) -> None:
        """Set playback speed multiplier (clamped to the allowed range)."""
        self._speed = max(MIN_PLAYBACK_SPEED, min(MAX_PLAYBACK_SPEED, float(speed)))

    # ------------------------------------------------------------------
    # Time advance
    # ------------------------------------------------------------------
    def advance(self, delta_time: float) -> None:
        """
        Update animation playback.

        Args:
            delta_time: Time elapsed since last frame (seconds)
        """
        if self._state != PlaybackState.PLAYING or self._animation is None:
            return

        # Advance time
        self._current_time += max(0.0, delta_time) * self._speed

        # Handle looping
        duration = self._animation.duration
        if self._current_time >= duration:
            if self._animation.loop:
                self._current_time = self._current_time % duration
            else:
                self._current_time = duration
                self._set_state(PlaybackState.STOPPED)
                logger.debug("Animation '%s' finished", self._animation.name)

        self._update_pose()

    def tick(self) -> None:
        """Advance by the wall-clock time since the previous tick (call once per frame)."""
        now = self._clock()
        delta_time = now - self._last_frame_time
        self._last_frame_time = now
        self.advance(delta_time)

    def _update_pose(self) -> None:
        """Sample the bound animation and write the pose to the figure."""
        if self._animation is None:
            return
        self.figure.set_pose(sample_pose(self._animation, self._current_time, self._baseline))

    # ------------------------------------------------------------------
    # Out-of-band sampling
    # ------------------------------------------------------------------
    def sample_at(self, time_seconds: float, animation: Optional[Animation] = None) -> Pose:
        """
        Sample a pose at an arbitrary time without touching playback state.

        Args:
            time_seconds: Time in seconds
            animation: Animation to sample (defaults to the bound animation)

        Raises:
            ValueError: If no animation is given or bound, or it has no keyframes
        """
        animation = animation if animation is not None else self._animation
        if animation is None:
            raise ValueError("No animation to sample")
        return sample_pose(animation, time_seconds, self._baseline)

    @contextmanager
    def suspended(self) -> Iterator["Animator"]:
        """
        Suspend live playback while the figure is used for something else.

        The figure pose and the playing state are restored on exit, and the
        wall clock is re-anchored so the suspension does not count as
        elapsed playback time.
        """
        saved_pose = self.figure.get_pose()
        saved_state = self._state
        if saved_state == PlaybackState.PLAYING:
            self._set_state(PlaybackState.PAUSED)
        try:
            yield self
        finally:
            self.figure.set_pose(saved_pose)
            if saved_state == PlaybackState.PLAYING:
                self._last_frame_time = self._clock()
                self._set_state(PlaybackState.PLAYING)

    def __repr__(self):
        anim_name = self._animation.name if self._animation else "None"
        return (
            f"Animator(animation='{anim_name}', time={self._current_time:.2f}s, "
            f"state={self._state.name}, speed={self._speed:.2f})"
        )
