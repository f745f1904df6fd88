"""Formatting configuration and the reference formatter."""

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Any

from timeago.duration import TimePoint, elapsed, to_datetime
from timeago.language import Language
from timeago.util import to_timedelta

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Config:
    """A language plus an optional cutoff to absolute dates.

    Once the elapsed time reaches ``max_duration``, `format_reference` renders
    the event with the ``layout`` strftime pattern instead of a relative
    phrase. An empty layout disables the cutoff.
    """

    language: Language
    max_duration: timedelta | None = None
    layout: str = ""

    def __post_init__(self) -> None:
        if self.max_duration is None:
            return
        max_duration = to_timedelta(self.max_duration, "max_duration")
        if max_duration < timedelta(0):
            raise ValueError(
                f"max_duration must not be negative, got {max_duration}"
            )
        object.__setattr__(self, "max_duration", max_duration)

    def format_reference(self, t: TimePoint, ref: TimePoint) -> str:
        """Describe ``t`` relative to ``ref``.

        Example:
            >>> from timeago import ENGLISH, no_max
            >>> ref = datetime(2013, 8, 30, 12, tzinfo=timezone.utc)
            >>> no_max(ENGLISH).format_reference(ref - timedelta(hours=36), ref)
            '2 days ago'
        """
        diff = elapsed(t, ref)
        cutoff = self.max_duration
        if cutoff is not None and self.layout and abs(diff) >= cutoff:
            logger.debug(
                "%s is past the %s cutoff, using layout %r",
                diff,
                cutoff,
                self.layout,
            )
            return to_datetime(t).strftime(self.layout)
        text = self.language.phrase(diff)
        logger.debug("%s in %s: %r", diff, self.language, text)
        return text

    def format(self, t: TimePoint) -> str:
        """Describe ``t`` relative to the current time."""
        event = to_datetime(t, "t")
        now = datetime.now(timezone.utc) if event.tzinfo is not None else datetime.now()
        return self.format_reference(event, now)

    def format_duration(self, diff: timedelta | int | float) -> str:
        """Describe a signed duration, negative meaning past.

        The cutoff does not apply since there is no instant to lay out.
        """
        return self.language.phrase(to_timedelta(diff, "diff"))

    def replace(self, **changes: Any) -> "Config":
        return replace(self, **changes)


def no_max(language: Language) -> Config:
    """Return a config that always produces a relative phrase."""
    return Config(language=language)


def with_max(
    language: Language, max_duration: timedelta | int | float, layout: str
) -> Config:
    """
    Return a config that switches to absolute dates past ``max_duration``.

    Args:
        language: Language for relative phrases
        max_duration: Cutoff as a timedelta or a number of seconds
        layout: strftime pattern for the absolute date; "" disables the switch

    Example:
        >>> from timeago import GERMAN, with_max
        >>> cfg = with_max(GERMAN, timedelta(days=7), GERMAN.default_layout)
    """
    return Config(language=language, max_duration=max_duration, layout=layout)
