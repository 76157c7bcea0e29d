"""Calendar units: weekdays and months with their English names."""

from __future__ import annotations

from epochal.units.month import Month, month_name
from epochal.units.weekday import Weekday, weekday_name

__all__: list[str] = ["Month", "Weekday", "month_name", "weekday_name"]
