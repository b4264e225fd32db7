# market_cart/utils/ids.py
import re

_ID_RE = re.compile(r"[+-]?[0-9]+")

#Integer columns are signed 32-bit
_ID_MIN = -(2**31)
_ID_MAX = 2**31 - 1


def parse_id(raw: str | None, name: str) -> int:
    """
    Ids arrive as query strings, coerce to int.
    Missing, non-numeric or out of column range -> ValueError (router maps it to 400).
    """
    if raw is None or not _ID_RE.fullmatch(raw.strip()):
        raise ValueError(f"Invalid {name}")

    value = int(raw.strip())
    if not _ID_MIN <= value <= _ID_MAX:
        raise ValueError(f"Invalid {name}")
    return value
