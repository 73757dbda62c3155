"""Stream module for interval-paced movie events."""

from .events import MovieEventStream
from .ticker import IntervalTimer, TimerClosed

__all__ = ["IntervalTimer", "MovieEventStream", "TimerClosed"]
