"""
Value helpers shared by the LAS line parsers and the metadata normalizer.
"""

import re
from typing import Optional

# Strict base-10 float literal: 12, -3.5, .5, 1e-3, 2.E+4
FLOAT_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


def parse_float(token: Optional[str]) -> Optional[float]:
    """
    Parse a base-10 float token.

    The whole token must be a number. Spellings Python would otherwise
    accept ("nan", "inf", "1_000") are rejected, and a token with trailing
    characters ("50.2,", "12abc") is not read as its numeric prefix the
    way JavaScript parseFloat reads it. Overflowing literals ("1e999")
    parse to inf.

    Args:
        token: Token to parse

    Returns:
        The float value, or None when the token isn't a number
    """
    if token is None or not FLOAT_PATTERN.match(token.strip()):
        return None
    return float(token)


def camel_case(mnemonic: str) -> str:
    """Lowercase a mnemonic and camel-case underscores (WELL_NAME -> wellName)."""
    return re.sub(r"_([a-z])", lambda m: m.group(1).upper(), mnemonic.lower())
