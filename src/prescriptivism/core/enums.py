"""Core enumerations for the card domain."""

from __future__ import annotations

from enum import IntEnum


class CardKind(IntEnum):
    """Card category."""

    SOUND = 0
    POWER = 1


class InitialWordValidationResult(IntEnum):
    """Verdict on an initial word, in check precedence order."""

    VALID = 0
    NOT_A_PERMUTATION = 1
    CLUSTER_TOO_LONG = 2
    BAD_INITIAL_CLUSTER_MANNER = 3
    BAD_INITIAL_CLUSTER_COORDINATES = 4

    @property
    def is_valid(self) -> bool:
        return self is InitialWordValidationResult.VALID


class PlaySoundCardValidationResult(IntEnum):
    """Verdict on playing a sound card onto a word position."""

    VALID = 0
    NEEDS_OTHER_CARD = 1
    INVALID = 2

    @property
    def is_playable(self) -> bool:
        """Whether the position is a candidate target at all."""
        return self is not PlaySoundCardValidationResult.INVALID
