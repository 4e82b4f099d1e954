"""Initial word arrangement: rearrange the dealt word before play starts."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from prescriptivism.core.cards import CardId
from prescriptivism.core.enums import InitialWordValidationResult
from prescriptivism.core.types import Word, word_to_str
from prescriptivism.core.validation import Validator
from prescriptivism.game.interfaces import RulesConfig

logger = logging.getLogger(__name__)

SubmitCallback = Callable[[Word], None]


class WordChoice:
    """The dealt word plus the player's current arrangement of it.

    Clicking a position selects it; clicking a second position swaps the
    two sounds.  Clicking the selected position again deselects it.
    """

    __slots__ = ("_validator", "_original", "_word", "_selected", "on_submit")

    def __init__(
        self,
        original: Sequence[CardId],
        validator: Validator,
        config: RulesConfig | None = None,
    ) -> None:
        config = config if config is not None else RulesConfig.standard()
        if len(original) != config.word_size:
            raise ValueError(
                f"Dealt word has {len(original)} sounds, expected {config.word_size}"
            )
        self._validator = validator
        self._original: Word = tuple(original)
        self._word: list[CardId] = list(original)
        self._selected: int | None = None
        self.on_submit: list[SubmitCallback] = []

    @property
    def original(self) -> Word:
        return self._original

    @property
    def word(self) -> Word:
        return tuple(self._word)

    @property
    def selected(self) -> int | None:
        return self._selected

    def click(self, index: int) -> None:
        self._check_index(index)
        if self._selected is None:
            self._selected = index
        elif self._selected == index:
            self._selected = None
        else:
            self.swap(self._selected, index)
            self._selected = None

    def swap(self, i: int, j: int) -> None:
        self._check_index(i)
        self._check_index(j)
        self._word[i], self._word[j] = self._word[j], self._word[i]

    def reset(self) -> None:
        self._word = list(self._original)
        self._selected = None

    def validate(self) -> InitialWordValidationResult:
        return self._validator.validate_initial_word(self._word, self._original)

    def submit(self) -> Word | None:
        """Return the arranged word if it is valid and notify listeners."""
        result = self.validate()
        catalog = self._validator.catalog
        if not result.is_valid:
            logger.info(
                "Rejected word %s: %s", word_to_str(self._word, catalog), result.name
            )
            return None
        word = self.word
        logger.info("Submitting word %s", word_to_str(word, catalog))
        for cb in self.on_submit:
            cb(word)
        return word

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._word):
            raise IndexError(f"Position {index} out of range for word of length {len(self._word)}")
