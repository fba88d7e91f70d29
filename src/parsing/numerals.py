"""Numeral normalization for episode and season tokens."""

from __future__ import annotations

import re
from typing import Optional

from schemas.records import MAX_COUNTER

_DECIMAL_RE = re.compile(r"\+?[0-9]+")

CJK_DIGITS = {
    "零": 0, "〇": 0, "○": 0,
    "一": 1, "壹": 1,
    "二": 2, "两": 2, "兩": 2, "贰": 2, "貳": 2,
    "三": 3, "叁": 3, "參": 3,
    "四": 4, "肆": 4,
    "五": 5, "伍": 5,
    "六": 6, "陆": 6, "陸": 6,
    "七": 7, "柒": 7,
    "八": 8, "捌": 8,
    "九": 9, "玖": 9,
}

CJK_UNITS = {
    "十": 10, "拾": 10,
    "百": 100, "佰": 100,
    "千": 1000, "仟": 1000,
}

CJK_MYRIAD = {"万": 10_000, "萬": 10_000}


def parse_number(token: str, *, upper: int = MAX_COUNTER) -> Optional[int]:
    """Parse an episode/season token, decimal first and CJK numerals second.

    Returns ``None`` when neither reading yields a value in ``0..upper``.
    """
    if _DECIMAL_RE.fullmatch(token):
        value = int(token)
        if value <= upper:
            return value
    value = parse_cjk_number(token)
    if value is None or value > upper:
        return None
    return value


def parse_cjk_number(token: str) -> Optional[int]:
    """Parse a CJK numeral such as ``三``, ``十二``, ``一百零五`` or ``二〇二四``."""
    if not token:
        return None
    if all(ch in CJK_DIGITS for ch in token):
        return _parse_digit_sequence(token)

    total = 0
    section = 0
    pending: Optional[int] = None
    last_unit: Optional[int] = None
    after_zero = False
    for ch in token:
        if ch in CJK_DIGITS:
            digit = CJK_DIGITS[ch]
            if digit == 0:
                if pending is not None:
                    return None
                after_zero = True
                continue
            if pending is not None:
                return None
            pending = digit
        elif ch in CJK_UNITS:
            unit = CJK_UNITS[ch]
            if last_unit is not None and unit >= last_unit:
                return None
            # 十二 and 一千零十 read a bare 十 as ten, 百十 does not
            if pending is None:
                if unit != 10 or (section and not after_zero):
                    return None
                pending = 1
            section += pending * unit
            pending = None
            last_unit = unit
            after_zero = False
        elif ch in CJK_MYRIAD:
            if total:
                return None
            section += pending or 0
            if not section:
                return None
            total = section * CJK_MYRIAD[ch]
            section = 0
            pending = None
            last_unit = None
            after_zero = False
        else:
            return None
    return total + section + (pending or 0)


def _parse_digit_sequence(token: str) -> int:
    if len(token) == 1:
        return CJK_DIGITS[token]
    return int("".join(str(CJK_DIGITS[ch]) for ch in token))


__all__ = ["CJK_DIGITS", "CJK_MYRIAD", "CJK_UNITS", "parse_cjk_number", "parse_number"]
