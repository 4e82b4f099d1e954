"""Legal target enumeration for a selected card."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from prescriptivism.core.cards import CardId
from prescriptivism.core.enums import PlaySoundCardValidationResult

if TYPE_CHECKING:
    from prescriptivism.core.board import PlayerBoard, WordStack
    from prescriptivism.core.validation import Validator


@dataclass(frozen=True, slots=True)
class Target:
    """A board position a selected card may be played onto.

    ``index`` is ``None`` when the whole stack is targeted.
    """

    player_id: int
    stack_index: int
    stack: WordStack
    index: int | None
    result: PlaySoundCardValidationResult = PlaySoundCardValidationResult.VALID

    @property
    def needs_other_card(self) -> bool:
        return self.result == PlaySoundCardValidationResult.NEEDS_OTHER_CARD


class TargetEnumerator:
    """Produces every legal :class:`Target` for a card.

    Each call to :meth:`targets` starts a fresh traversal of the boards as
    they are at that moment; nothing is cached between calls.
    """

    __slots__ = ("_validator",)

    def __init__(self, validator: Validator) -> None:
        self._validator = validator

    def targets(
        self,
        selected_card: CardId,
        boards: Iterable[PlayerBoard],
    ) -> Iterator[Target]:
        """Yield targets in player, stack, then position order."""
        if not self._validator.catalog.is_sound(selected_card):
            return

        validate = self._validator.validate_play_sound_card
        for board in boards:
            for stack_index, stack in enumerate(board.stacks):
                cards = stack.cards
                for at in stack.unlocked_positions():
                    result = validate(selected_card, cards, at)
                    if result.is_playable:
                        yield Target(board.player_id, stack_index, stack, at, result)

    def has_targets(self, selected_card: CardId, boards: Iterable[PlayerBoard]) -> bool:
        return next(self.targets(selected_card, boards), None) is not None
