"""Observability – Level, the ordered severity of a log event."""
from __future__ import annotations

from typing import ClassVar


class Level(int):
    """Severity of a log event.

    Named levels are spaced 100 apart so intermediate levels can be added
    later; any integer is a valid level and compares numerically.
    """

    DEFAULT: ClassVar["Level"]
    DEBUG: ClassVar["Level"]
    INFO: ClassVar["Level"]
    NOTICE: ClassVar["Level"]
    WARNING: ClassVar["Level"]
    ERROR: ClassVar["Level"]
    CRITICAL: ClassVar["Level"]
    ALERT: ClassVar["Level"]
    EMERGENCY: ClassVar["Level"]

    __slots__ = ()

    @property
    def name(self) -> str:
        """Full upper-case name, ``"DEFAULT"`` for unnamed values."""
        return _NAMES.get(int(self), ("DEFAULT", "DFT"))[0]

    @property
    def short(self) -> str:
        """Three letter acronym, ``"DFT"`` for unnamed values."""
        return _NAMES.get(int(self), ("DEFAULT", "DFT"))[1]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Level({int(self)})"

    @classmethod
    def lookup(cls, value: str) -> "Level | None":
        """Return the level named or numbered by *value*, ``None`` if neither.

        Names are matched case-insensitively; numbers are ASCII digits with
        an optional sign.
        """
        text = value.strip()
        named = _BY_NAME.get(text.lower())
        if named is not None:
            return named
        digits = text[1:] if text[:1] in ("+", "-") else text
        if digits.isascii() and digits.isdigit():
            return cls(int(text))
        return None

    @classmethod
    def parse(cls, value: str) -> "Level":
        """Parse a level name or decimal number, case-insensitively.

        Anything unrecognised yields :attr:`DEFAULT`; this never raises.
        """
        level = cls.lookup(value)
        return cls.DEFAULT if level is None else level


_NAMES: dict[int, tuple[str, str]] = {
    0: ("DEFAULT", "DFT"),
    100: ("DEBUG", "DBG"),
    200: ("INFO", "INF"),
    300: ("NOTICE", "NTC"),
    400: ("WARNING", "WRN"),
    500: ("ERROR", "ERR"),
    600: ("CRITICAL", "CRT"),
    700: ("ALERT", "ALR"),
    800: ("EMERGENCY", "EMG"),
}

for _value, (_name, _short) in _NAMES.items():
    setattr(Level, _name, Level(_value))

_BY_NAME: dict[str, Level] = {name.lower(): Level(value) for value, (name, _) in _NAMES.items()}

__all__ = ["Level"]
