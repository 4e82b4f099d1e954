"""TurnController: the client-side turn state machine.

Coordinates: Players, hand, Validator, TargetEnumerator.
Emits events via simple callbacks so the UI / network layer can subscribe.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from prescriptivism.core.board import PlayerBoard
from prescriptivism.core.cards import CardCatalog, CardId
from prescriptivism.core.targets import Target, TargetEnumerator
from prescriptivism.core.validation import Validator
from prescriptivism.game.interfaces import (
    ITurnController,
    NeedsOtherCardPolicy,
    RulesConfig,
    TurnPhase,
)
from prescriptivism.game.player import Player
from prescriptivism.game.state import (
    NoSelection,
    NotOurTurn,
    Passing,
    PlayRecord,
    SingleTarget,
    TurnState,
)

logger = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

StateCallback = Callable[[TurnState], None]
PlayCallback = Callable[[PlayRecord], None]
DiscardCallback = Callable[[CardId], None]
RejectedCallback = Callable[[CardId], None]  # card that has no targets


@dataclass
class TurnEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_play: list[PlayCallback] = field(default_factory=list)
    on_discard: list[DiscardCallback] = field(default_factory=list)
    on_selection_rejected: list[RejectedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class TurnController(ITurnController):
    """Drives selection, targeting and passing for the local player.

    Thread-safety: all methods are meant to be called once per tick from
    the game-loop thread.  Server notifications (turn start, lock changes,
    cards placed) must be delivered on that same thread.
    """

    __slots__ = (
        "_validator",
        "_enumerator",
        "_config",
        "_us",
        "_others",
        "_hand",
        "_state",
        "events",
    )

    def __init__(self, catalog: CardCatalog, config: RulesConfig | None = None) -> None:
        self._validator = Validator(catalog)
        self._enumerator = TargetEnumerator(self._validator)
        self._config = config if config is not None else RulesConfig.standard()
        self._us: Player | None = None
        self._others: list[Player] = []
        self._hand: list[CardId] = []
        self._state: TurnState = NotOurTurn()
        self.events = TurnEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def phase(self) -> TurnPhase:
        return self._state.phase

    @property
    def selected_card(self) -> CardId | None:
        if isinstance(self._state, SingleTarget):
            return self._state.card
        return None

    @property
    def targets(self) -> tuple[Target, ...]:
        if isinstance(self._state, SingleTarget):
            return self._state.targets
        return ()

    @property
    def hand(self) -> tuple[CardId, ...]:
        return tuple(self._hand)

    @property
    def config(self) -> RulesConfig:
        return self._config

    @property
    def validator(self) -> Validator:
        return self._validator

    @property
    def us(self) -> Player | None:
        return self._us

    @property
    def players(self) -> list[Player]:
        """All players, ourselves first."""
        if self._us is None:
            return list(self._others)
        return [self._us, *self._others]

    def player(self, player_id: int) -> Player | None:
        for p in self.players:
            if p.id == player_id:
                return p
        return None

    # ── Setup ────────────────────────────────────────────────────────────

    def start_game(
        self,
        us: Player,
        others: Sequence[Player],
        hand: Iterable[CardId] = (),
    ) -> None:
        ids = [us.id, *(p.id for p in others)]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate player ids: {ids}")
        self._us = us
        self._others = list(others)
        self._hand = list(hand)
        self._set_state(NotOurTurn())

    # ── Server notifications ─────────────────────────────────────────────

    def begin_our_turn(self) -> None:
        self._set_state(NoSelection())

    def begin_opponent_turn(self) -> None:
        self._set_state(NotOurTurn())

    def add_card_to_hand(self, card: CardId) -> None:
        self._hand.append(card)
        self._refresh_targets()

    def remove_card_from_hand(self, card: CardId) -> None:
        self._take_from_hand(card)
        if self.selected_card is not None and self.selected_card not in self._hand:
            self._set_state(NoSelection())
        else:
            self._refresh_targets()

    def add_card(
        self,
        player_id: int,
        stack_index: int,
        card: CardId,
        at: int | None = None,
    ) -> None:
        """Place *card* on a word; ``at=None`` appends a new position."""
        stack = self._require_player(player_id).board.stack(stack_index)
        if at is None:
            stack.append(card)
        else:
            stack.replace(at, card)
        self._refresh_targets()

    def lock_changed(
        self,
        player_id: int,
        stack_index: int,
        at: int,
        locked: bool,
    ) -> None:
        stack = self._require_player(player_id).board.stack(stack_index)
        if stack.set_locked(at, locked):
            self._refresh_targets()

    # ── ITurnController impl ─────────────────────────────────────────────

    def select_card(self, card: CardId) -> bool:
        state = self._state
        if isinstance(state, (NotOurTurn, Passing)):
            logger.debug("Ignoring selection of %s in phase %s", card.name, state.phase.name)
            return False
        if card not in self._hand:
            raise ValueError(f"Card {card.name} is not in hand")

        # Clicking the selected card again deselects it.
        if isinstance(state, SingleTarget) and state.card == card:
            self.cancel()
            return False

        targets = self._compute_targets(card)
        if not targets:
            logger.info("Card %s has no legal targets", card.name)
            self._set_state(NoSelection())
            self._emit_rejected(card)
            return False

        self._set_state(SingleTarget(card, targets))
        return True

    def select_target(self, target: Target) -> bool:
        state = self._state
        if not isinstance(state, SingleTarget):
            return False
        if target not in state.targets:
            logger.debug("Ignoring target outside the legal set: %s", target)
            return False

        card = state.card
        if not self._target_still_legal(card, target):
            logger.info("Target %s went stale, recomputing", target)
            self._refresh_targets()
            return False
        covered: CardId | None = None
        companions: tuple[CardId, ...] = ()
        if target.index is not None:
            on_card = target.stack[target.index].card
            if (
                target.needs_other_card
                and self._config.needs_other_card == NeedsOtherCardPolicy.REQUIRE_COMPANION
            ):
                companions = self._validator.companions(card, on_card)
            covered = target.stack.replace(target.index, card)

        self._take_from_hand(card)
        for companion in companions:
            self._take_from_hand(companion)

        record = PlayRecord(
            card=card,
            player_id=target.player_id,
            stack_index=target.stack_index,
            index=target.index,
            covered=covered,
            companions=companions,
        )
        self._set_state(NoSelection())
        self._emit_play(record)
        return True

    def cancel(self) -> None:
        if isinstance(self._state, (SingleTarget, Passing)):
            self._set_state(NoSelection())

    def pass_turn(self) -> bool:
        if not isinstance(self._state, NoSelection):
            return False
        self._set_state(Passing())
        return True

    def discard_for_pass(self, card: CardId) -> bool:
        if not isinstance(self._state, Passing):
            return False
        self._take_from_hand(card)
        self._set_state(NoSelection())
        self._emit_discard(card)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _boards(self) -> list[PlayerBoard]:
        players = self.players if self._config.allow_self_target else self._others
        return [p.board for p in players]

    def _compute_targets(self, card: CardId) -> tuple[Target, ...]:
        policy = self._config.needs_other_card
        result: list[Target] = []
        for target in self._enumerator.targets(card, self._boards()):
            if target.needs_other_card:
                if policy == NeedsOtherCardPolicy.FILTER:
                    continue
                if (
                    policy == NeedsOtherCardPolicy.REQUIRE_COMPANION
                    and not self._hand_has_companions(card, target)
                ):
                    continue
            result.append(target)
        return tuple(result)

    def _hand_has_companions(self, card: CardId, target: Target) -> bool:
        assert target.index is not None
        on_card = target.stack[target.index].card
        available = Counter(self._hand)
        available[card] -= 1
        needed = Counter(self._validator.companions(card, on_card))
        return all(available[c] >= n for c, n in needed.items())

    def _target_still_legal(self, card: CardId, target: Target) -> bool:
        """Re-check *target* against the board as it is now."""
        at = target.index
        if at is None:
            return True
        stack = target.stack
        if not 0 <= at < len(stack) or stack.is_locked(at):
            return False
        return self._validator.validate_play_sound_card(card, stack.cards, at) == target.result

    def _refresh_targets(self) -> None:
        """Recompute the target set after the board or hand changed."""
        state = self._state
        if not isinstance(state, SingleTarget):
            return
        targets = self._compute_targets(state.card)
        if not targets:
            logger.info("Card %s lost all its targets", state.card.name)
            self._set_state(NoSelection())
            self._emit_rejected(state.card)
            return
        self._set_state(SingleTarget(state.card, targets))

    def _take_from_hand(self, card: CardId) -> None:
        try:
            self._hand.remove(card)
        except ValueError:
            raise ValueError(f"Card {card.name} is not in hand") from None

    def _require_player(self, player_id: int) -> Player:
        p = self.player(player_id)
        if p is None:
            raise ValueError(f"Unknown player id: {player_id}")
        return p

    def _set_state(self, state: TurnState) -> None:
        if state == self._state:
            return
        logger.debug("Turn state %s -> %s", self._state.phase.name, state.phase.name)
        self._state = state
        for cb in self.events.on_state_changed:
            cb(state)

    def _emit_play(self, record: PlayRecord) -> None:
        for cb in self.events.on_play:
            cb(record)

    def _emit_discard(self, card: CardId) -> None:
        for cb in self.events.on_discard:
            cb(card)

    def _emit_rejected(self, card: CardId) -> None:
        for cb in self.events.on_selection_rejected:
            cb(card)
