"""Slide-relative clock deciding when timed objects are on screen."""

from ..core.slides import SlideObject


class TimelineClock:
    """Seconds elapsed since the current slide was entered.

    Time only moves when the host calls ``advance`` while the clock is
    playing. The controller resets it on every slide change.
    """

    def __init__(self):
        self.current_time = 0.0
        self.is_playing = False

    def play(self):
        self.is_playing = True

    def pause(self):
        self.is_playing = False

    def reset(self):
        self.current_time = 0.0
        self.is_playing = False

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError("Cannot advance the clock backwards")
        if self.is_playing:
            self.current_time += seconds
        return self.current_time

    def should_be_visible(self, obj: SlideObject) -> bool:
        if not obj.visible:
            return False
        if obj.timeline is None:
            return True
        timeline = obj.timeline
        return timeline.start_time <= self.current_time < timeline.end_time
