"""Core value types: CalendarFields and the DateTime facade."""

from __future__ import annotations

from epochal.core.datetime import DateTime
from epochal.core.fields import CalendarFields

__all__: list[str] = ["CalendarFields", "DateTime"]
