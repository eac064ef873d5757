"""
Computer "smarts": an integer 0..100 mapped onto three tiers.

    < 50  -> EASY    (mostly random)
    == 50 -> SMART   (win > block > center > corner > random)
    > 50  -> GENIUS  (full minimax, never loses)
"""
from __future__ import annotations

from enum import Enum

from .errors import InvalidDifficultyError

MIN_SMARTS = 0
MAX_SMARTS = 100
SMART_LEVEL = 50
DEFAULT_SMARTS = MAX_SMARTS


def validate_smarts(smarts: object) -> int:
    if isinstance(smarts, bool) or not isinstance(smarts, int):
        raise InvalidDifficultyError(f"Smarts must be an integer, got {smarts!r}")
    if not MIN_SMARTS <= smarts <= MAX_SMARTS:
        raise InvalidDifficultyError(
            f"Smarts out of range [{MIN_SMARTS},{MAX_SMARTS}]: {smarts}"
        )
    return smarts


class Tier(str, Enum):
    EASY = "easy"
    SMART = "smart"
    GENIUS = "genius"

    @classmethod
    def from_smarts(cls, smarts: int) -> "Tier":
        smarts = validate_smarts(smarts)
        if smarts < SMART_LEVEL:
            return cls.EASY
        if smarts == SMART_LEVEL:
            return cls.SMART
        return cls.GENIUS

    def default_smarts(self) -> int:
        return {Tier.EASY: MIN_SMARTS, Tier.SMART: SMART_LEVEL, Tier.GENIUS: MAX_SMARTS}[self]


def parse_smarts(raw: str) -> int:
    """Accept ``"0".."100"`` or a tier name (``easy``/``smart``/``genius``)."""
    text = raw.strip().lower()
    for tier in Tier:
        if text == tier.value:
            return tier.default_smarts()
    try:
        value = int(text)
    except ValueError:
        raise InvalidDifficultyError(f"Not a smarts value or tier name: {raw!r}") from None
    return validate_smarts(value)
