"""Order reference generator — cosmetic, not guaranteed unique."""

from __future__ import annotations

import random
import string

REFERENCE_LENGTH = 8
REFERENCE_ALPHABET = string.ascii_uppercase + string.digits


def generate_order_reference() -> str:
    """Return a fresh 8-character uppercase alphanumeric reference."""
    return "".join(random.choices(REFERENCE_ALPHABET, k=REFERENCE_LENGTH))
