from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .types import NoEventCode


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class DateFormatKeys:
    """Markers appended by format_event() to fallback times of events that do not occur."""
    SUN_HIGH: str = "†"
    SUN_LOW: str = "‡"

    def for_code(self, code: NoEventCode) -> str:
        return getattr(self, NoEventCode(code).value)


@dataclass(frozen=True)
class Settings:
    """
    Behaviour switches for the public API.

    round_to_nearest_minute:
        Round every returned instant to the nearest whole minute.
    return_time_for_no_event_case:
        When an event does not occur, return a fixed fallback clock time tagged
        with the reason (NoEventTime) instead of the bare NoEventCode.
    """
    round_to_nearest_minute: bool = False
    return_time_for_no_event_case: bool = False
    date_format_keys: DateFormatKeys = field(default_factory=DateFormatKeys)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from SUNMOON_* environment variables:
          SUNMOON_ROUND_TO_NEAREST_MINUTE, SUNMOON_RETURN_TIME_FOR_NO_EVENT,
          SUNMOON_SUN_HIGH_KEY, SUNMOON_SUN_LOW_KEY
        """
        env = os.environ if environ is None else environ
        keys = DateFormatKeys(
            SUN_HIGH=env.get("SUNMOON_SUN_HIGH_KEY", DateFormatKeys.SUN_HIGH),
            SUN_LOW=env.get("SUNMOON_SUN_LOW_KEY", DateFormatKeys.SUN_LOW),
        )
        return cls(
            round_to_nearest_minute=_env_flag(env, "SUNMOON_ROUND_TO_NEAREST_MINUTE"),
            return_time_for_no_event_case=_env_flag(env, "SUNMOON_RETURN_TIME_FOR_NO_EVENT"),
            date_format_keys=keys,
        )


def _env_flag(env: Mapping[str, str], name: str) -> bool:
    raw = env.get(name, "").strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


DEFAULT_SETTINGS = Settings()
