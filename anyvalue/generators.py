"""Random "any value" generators for test fixtures.

Each generator draws from the process-wide source in anyvalue.rng unless a
RandomSource is passed via the `source` keyword.
"""

import datetime
import enum
import string

from anyvalue import rng
from anyvalue.rng import RandomSource

DEFAULT_STRING_LENGTH = 10
ALPHABET = string.ascii_uppercase  # A-Z

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1

DATE_WINDOW_DAYS = 10000
DATE_OFFSET_DAYS = 5000
MINUTES_PER_DAY = 1440

_NO_EXCLUSION = object()


def _resolve(source: RandomSource | None) -> RandomSource:
    return source if source is not None else rng.get_source()


def random_string(length: int = DEFAULT_STRING_LENGTH, *,
                  source: RandomSource | None = None) -> str:
    """Random string of `length` uppercase Latin letters."""
    if length < 1:
        raise ValueError(f"length must be positive, got {length}")
    src = _resolve(source)
    return ''.join(ALPHABET[src.randbelow(len(ALPHABET))] for _ in range(length))


def random_string_except(value: str, *, source: RandomSource | None = None) -> str:
    """Random string that differs from `value`.

    The result is one character longer than `value`, so the two can never
    be equal.
    """
    return random_string(len(value) + 1, source=source)


def random_integer(*, source: RandomSource | None = None) -> int:
    """Random signed 32-bit integer. Can be negative, positive or zero."""
    return _resolve(source).randint(INT_MIN, INT_MAX)


def random_positive_integer(maximum: int = INT_MAX, *,
                            source: RandomSource | None = None) -> int:
    """Random integer in [1, maximum]."""
    if maximum < 1:
        raise ValueError(f"maximum must be positive, got {maximum}")
    src = _resolve(source)
    while True:
        result = src.randbelow(maximum + 1)
        if result != 0:
            return result


def random_boolean(*, source: RandomSource | None = None) -> bool:
    return _resolve(source).randbelow(2) == 1


def random_date(*, source: RandomSource | None = None) -> datetime.date:
    """Random date within roughly 5000 days either side of today."""
    offset = random_positive_integer(DATE_WINDOW_DAYS, source=source) - DATE_OFFSET_DAYS
    return datetime.date.today() + datetime.timedelta(days=offset)


def random_datetime(*, source: RandomSource | None = None) -> datetime.datetime:
    """Random date plus between 1 and 1440 minutes past its midnight."""
    base = datetime.datetime.combine(random_date(source=source), datetime.time())
    minutes = random_positive_integer(MINUTES_PER_DAY, source=source)
    return base + datetime.timedelta(minutes=minutes)


def _members(enum_type) -> list:
    members = list(enum_type)
    if not members:
        raise ValueError(f"{enum_type!r} declares no members")
    return members


def _exclusion(excluded, members: list) -> list:
    """Normalize a single excluded member or a collection of them to a list."""
    if isinstance(excluded, (enum.Enum, str, bytes)) or excluded in members:
        return [excluded]
    return list(excluded)


def random_enum_value(enum_type, *, exclude=_NO_EXCLUSION,
                      source: RandomSource | None = None):
    """Uniformly random member of `enum_type`.

    `enum_type` is usually an Enum class; any finite iterable of constants
    works the same way. Passing `exclude` is equivalent to calling
    random_enum_value_except().
    """
    if exclude is not _NO_EXCLUSION:
        return random_enum_value_except(enum_type, exclude, source=source)
    return _resolve(source).choice(_members(enum_type))


def random_enum_value_except(enum_type, excluded, *,
                             source: RandomSource | None = None):
    """Uniformly random member of `enum_type` not in `excluded`.

    `excluded` is a single member or an iterable of members. Raises
    ValueError if it rules out every member.
    """
    members = _members(enum_type)
    exclusion = _exclusion(excluded, members)
    if all(m in exclusion for m in members):
        raise ValueError(f"every member of {enum_type!r} is excluded")
    src = _resolve(source)
    while True:
        value = src.choice(members)
        if value not in exclusion:
            return value
