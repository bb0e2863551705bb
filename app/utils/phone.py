# app/utils/phone.py
"""
Brazilian phone input mask: (DD) DDDDD-DDDD.
Applied progressively so partially typed numbers still render a partial mask.
"""

import re

MAX_PHONE_DIGITS = 11

_NON_DIGIT = re.compile(r"\D")


def digits_only(value: str) -> str:
    """Strip every non-digit character."""
    return _NON_DIGIT.sub("", value or "")


def format_phone(raw: str) -> str:
    """
    Mask raw keystrokes as a phone number.

        "11"          -> "(11"
        "119876"      -> "(11) 9876"
        "1198765432"  -> "(11) 9876-5432"
        "11987654321" -> "(11) 98765-4321"
    """
    digits = digits_only(raw)[:MAX_PHONE_DIGITS]
    n = len(digits)

    if n == 0:
        return ""
    if n <= 2:
        return f"({digits}"
    if n <= 6:
        return f"({digits[:2]}) {digits[2:]}"
    if n <= 10:
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"
    return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
