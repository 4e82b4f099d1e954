"""Abstract interfaces and configuration for the game layer.

The UI and network layers talk to :class:`ITurnController`, never to a
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from prescriptivism.core.types import DEFAULT_WORD_SIZE

if TYPE_CHECKING:
    from prescriptivism.core.cards import CardId
    from prescriptivism.core.targets import Target


# ── Turn FSM phases ──────────────────────────────────────────────────────────


class TurnPhase(IntEnum):
    """Interaction mode of the local player within a turn."""

    NO_SELECTION = auto()
    NOT_OUR_TURN = auto()
    SINGLE_TARGET = auto()  # a hand card is selected, awaiting a target
    PASSING = auto()  # awaiting a card to discard


class NeedsOtherCardPolicy(IntEnum):
    """What to do with targets whose conversion needs a companion card."""

    OFFER = auto()  # offer now; the server resolves the companion
    REQUIRE_COMPANION = auto()  # offer only if the hand holds the companions
    FILTER = auto()  # never offer


# ── Rules configuration ──────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Immutable rule options shared by client and server.

    Args:
        word_size: Number of sounds in a dealt word.
        allow_self_target: Whether cards may be played onto our own word.
        needs_other_card: Handling of conversions that need a companion.
    """

    word_size: int = DEFAULT_WORD_SIZE
    allow_self_target: bool = True
    needs_other_card: NeedsOtherCardPolicy = NeedsOtherCardPolicy.REQUIRE_COMPANION

    def __post_init__(self) -> None:
        if self.word_size < 2:
            raise ValueError(f"word_size must be at least 2, got {self.word_size}")

    # Presets
    @classmethod
    def standard(cls) -> RulesConfig:
        return cls()

    @classmethod
    def strict(cls) -> RulesConfig:
        """Opponents only, and no conversion that needs a companion."""
        return cls(allow_self_target=False, needs_other_card=NeedsOtherCardPolicy.FILTER)


# ── Abstract interfaces ─────────────────────────────────────────────────────


class ITurnController(ABC):
    """Interface for the per-turn interaction state machine."""

    @abstractmethod
    def begin_our_turn(self) -> None:
        """The server says it is our turn."""

    @abstractmethod
    def begin_opponent_turn(self) -> None:
        """The server says it is someone else's turn."""

    @abstractmethod
    def select_card(self, card: CardId) -> bool:
        """Select a card from our hand. Returns True if it has targets."""

    @abstractmethod
    def select_target(self, target: Target) -> bool:
        """Play the selected card onto *target*. Returns True if applied."""

    @abstractmethod
    def cancel(self) -> None:
        """Drop the current selection or pass prompt."""

    @abstractmethod
    def pass_turn(self) -> bool:
        """Start passing. Returns True if the discard prompt is now open."""

    @abstractmethod
    def discard_for_pass(self, card: CardId) -> bool:
        """Discard *card* from our hand to finish passing."""
