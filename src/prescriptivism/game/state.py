"""Turn state: one case per phase, each carrying only its own data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from prescriptivism.game.interfaces import TurnPhase

if TYPE_CHECKING:
    from prescriptivism.core.cards import CardId
    from prescriptivism.core.targets import Target


@dataclass(frozen=True, slots=True)
class NoSelection:
    """Our turn; nothing is selected."""

    @property
    def phase(self) -> TurnPhase:
        return TurnPhase.NO_SELECTION


@dataclass(frozen=True, slots=True)
class NotOurTurn:
    """Someone else is playing; input is ignored."""

    @property
    def phase(self) -> TurnPhase:
        return TurnPhase.NOT_OUR_TURN


@dataclass(frozen=True, slots=True)
class SingleTarget:
    """A hand card is selected and waits for one of *targets*."""

    card: CardId
    targets: tuple[Target, ...]

    @property
    def phase(self) -> TurnPhase:
        return TurnPhase.SINGLE_TARGET


@dataclass(frozen=True, slots=True)
class Passing:
    """We pressed pass and must pick a card to discard."""

    @property
    def phase(self) -> TurnPhase:
        return TurnPhase.PASSING


TurnState: TypeAlias = NoSelection | NotOurTurn | SingleTarget | Passing


@dataclass(frozen=True, slots=True)
class PlayRecord:
    """A resolved play, handed to the network layer."""

    card: CardId
    player_id: int
    stack_index: int
    index: int | None
    covered: CardId | None
    companions: tuple[CardId, ...] = ()
