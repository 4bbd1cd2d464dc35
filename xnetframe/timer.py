"""Timer events handed to a scheduler."""

from __future__ import annotations

import abc


class TimerEventHandler(abc.ABC):
    """An event fired after ``delay_time``, optionally repeated.

    ``timer_id`` is assigned by the scheduler and starts at zero.
    """

    def __init__(
        self,
        event_id: int,
        delay_time: int,
        repetition: bool = False,
        repetition_count: int = 0,
    ) -> None:
        self.timer_id = 0
        self.event_id = event_id
        self.delay_time = delay_time
        self.repetition = repetition
        self.repetition_count = repetition_count

    @abc.abstractmethod
    def handle_event(self) -> int:
        """Handle the fired event and return a result code."""