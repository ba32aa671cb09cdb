import re
from typing import Optional

from domain.constants import MAX_PAGE_SIZE, MAX_ROW_ID

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

def parse_int(raw: Optional[str]) -> Optional[int]:
    """
    先頭の整数部分だけを読む ("20abc" -> 20, "abc" -> None)。
    クエリ文字列の緩い数値変換に使う。
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(str(raw))
    if not match:
        return None
    return int(match.group(1))

def coerce_limit(raw: Optional[str], default: int, maximum: int = MAX_PAGE_SIZE) -> int:
    """数値でない・0・負の値はデフォルトに戻し、上限で切り詰める"""
    value = parse_int(raw)
    if not value or value < 0:
        return default
    return min(value, maximum)

def coerce_offset(raw: Optional[str]) -> int:
    value = parse_int(raw)
    if not value or value < 0:
        return 0
    return min(value, MAX_ROW_ID)
