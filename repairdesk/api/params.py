"""Lenient parsing of path and query parameters."""
import re
from typing import Optional, Tuple
from repairdesk.core.errors import ValidationError
from repairdesk.repos.base import DEFAULT_LIMIT, DEFAULT_OFFSET
from repairdesk.schemas.common import INT64_MAX, INT64_MIN

_INT_RE = re.compile(r"^[+-]?[0-9]+$")


def _parse_int64(raw: Optional[str]) -> Optional[int]:
    """Signed 64-bit base-10 value of ``raw``, or None if it is not one."""
    if raw is None or not _INT_RE.match(raw):
        return None
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def parse_id(raw: str) -> int:
    """Parse a base-10 path identifier or raise ``ValidationError``."""
    value = _parse_int64(raw)
    if value is None:
        raise ValidationError(f'invalid id "{raw}": expected a base-10 integer')
    return value


def int_or_default(raw: Optional[str], default: int) -> int:
    value = _parse_int64(raw)
    return default if value is None else value


def parse_page(limit: Optional[str], offset: Optional[str]) -> Tuple[int, int]:
    return int_or_default(limit, DEFAULT_LIMIT), int_or_default(offset, DEFAULT_OFFSET)
