# sim/clock.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo

DATE_FMT = "%Y-%m-%d"
TIME_FMTS = ("%H:%M", "%H:%M:%S")


def valid_date(s: str) -> bool:
    try:
        datetime.strptime(s, DATE_FMT)
    except ValueError:
        return False
    return True


def valid_time(s: str) -> bool:
    for fmt in TIME_FMTS:
        try:
            datetime.strptime(s, fmt)
        except ValueError:
            continue
        return True
    return False


@dataclass(frozen=True)
class FaultClock:
    tz: tzinfo = UTC
    fixed: datetime | None = None  # pin "now" (tests, replays)

    @classmethod
    def in_zone(cls, name: str, *, fixed: datetime | None = None) -> FaultClock:
        return cls(UTC if name.upper() == "UTC" else ZoneInfo(name), fixed)

    def now(self) -> datetime:
        if self.fixed is None:
            return datetime.now(self.tz)
        dt = self.fixed if self.fixed.tzinfo else self.fixed.replace(tzinfo=UTC)
        return dt.astimezone(self.tz)

    def combine(self, date_str: str = "", time_str: str = "") -> str:
        """'YYYY-MM-DDTHH:MM'; blank date -> today, blank time -> now (independently)."""
        now = self.now()
        date_part = date_str.strip() or now.strftime(DATE_FMT)
        time_part = time_str.strip() or now.strftime("%H:%M")
        return f"{date_part}T{time_part}"

    def iso_utc(self) -> str:
        # 2025-01-01T00:00:00.000Z
        return self.now().astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def epoch_ms(self) -> int:
        return int(self.now().timestamp() * 1000)
