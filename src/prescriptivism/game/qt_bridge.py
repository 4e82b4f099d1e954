"""Qt bridge exposing the turn state machine as signals and slots."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from prescriptivism.core.cards import CardId
from prescriptivism.core.targets import Target
from prescriptivism.game.controller import TurnController
from prescriptivism.game.state import PlayRecord, TurnState

logger = logging.getLogger(__name__)


class TurnBridge(QObject):
    """UI-thread adapter between widgets and a :class:`TurnController`."""

    phase_changed = pyqtSignal(int)  # TurnPhase
    targets_changed = pyqtSignal(object)  # tuple[Target, ...]
    play_ready = pyqtSignal(object)  # PlayRecord
    discard_ready = pyqtSignal(int)  # CardId
    selection_rejected = pyqtSignal(int)  # CardId

    def __init__(self, controller: TurnController) -> None:
        super().__init__()
        self._controller = controller
        events = controller.events
        events.on_state_changed.append(self._on_state_changed)
        events.on_play.append(self._on_play)
        events.on_discard.append(self._on_discard)
        events.on_selection_rejected.append(self._on_rejected)

    @property
    def controller(self) -> TurnController:
        return self._controller

    # ── Slots (UI → controller) ─────────────────────────────────────────

    @pyqtSlot(int)
    def select_card(self, card_value: int) -> None:
        card = self._hand_card(card_value)
        if card is not None:
            self._controller.select_card(card)

    @pyqtSlot(object)
    def select_target(self, target_obj: object) -> None:
        if not isinstance(target_obj, Target):
            logger.warning("UI sent invalid target %r", target_obj)
            return
        self._controller.select_target(target_obj)

    @pyqtSlot()
    def cancel(self) -> None:
        self._controller.cancel()

    @pyqtSlot()
    def pass_turn(self) -> None:
        if not self._controller.pass_turn():
            logger.warning("Pass pressed in phase %s", self._controller.phase.name)

    @pyqtSlot(int)
    def discard(self, card_value: int) -> None:
        card = self._hand_card(card_value)
        if card is not None:
            self._controller.discard_for_pass(card)

    def _hand_card(self, card_value: int) -> CardId | None:
        try:
            card = CardId(card_value)
        except ValueError:
            logger.warning("UI sent unknown card id %d", card_value)
            return None
        if card not in self._controller.hand:
            logger.warning("UI sent %s which is not in hand", card.name)
            return None
        return card

    # ── Controller events → signals ─────────────────────────────────────

    def _on_state_changed(self, state: TurnState) -> None:
        self.phase_changed.emit(int(state.phase))
        self.targets_changed.emit(self._controller.targets)

    def _on_play(self, record: PlayRecord) -> None:
        self.play_ready.emit(record)

    def _on_discard(self, card: CardId) -> None:
        self.discard_ready.emit(int(card))

    def _on_rejected(self, card: CardId) -> None:
        self.selection_rejected.emit(int(card))
