"""
Random code generators. Pure, side-effect-free functions.

All generators use the cryptographically secure ``secrets`` module since
their output gates access to brochures and password resets.
"""

from __future__ import annotations

import secrets


def generate_otp_code(length: int = 6) -> str:
    """Generate a cryptographically secure numeric OTP.

    Every value in ``0 .. 10**length - 1`` is equally likely; leading zeros
    are kept, so a 6-digit code ranges over ``000000``–``999999``.

    Args:
        length: Number of digits (default 6).

    Returns:
        String of exactly *length* decimal digits.
    """
    if length < 1:
        raise ValueError("OTP length must be positive")
    return str(secrets.randbelow(10**length)).zfill(length)
