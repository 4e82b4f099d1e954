"""Core domain layer: pure card-game rules with zero external dependencies.

Quick start::

    from prescriptivism.core import CardCatalog, Validator, parse_word

    validator = Validator(CardCatalog.standard())
    validator.validate_initial_word(parse_word("apt"), parse_word("pat"))
"""

from prescriptivism.core.board import PlayerBoard, StackEntry, WordStack
from prescriptivism.core.cards import (
    STANDARD_CATALOG,
    CardCatalog,
    CardDefinition,
    CardId,
    ConversionRule,
)
from prescriptivism.core.enums import (
    CardKind,
    InitialWordValidationResult,
    PlaySoundCardValidationResult,
)
from prescriptivism.core.targets import Target, TargetEnumerator
from prescriptivism.core.types import (
    DEFAULT_WORD_SIZE,
    Word,
    card_symbol,
    parse_card,
    parse_word,
    word_to_str,
)
from prescriptivism.core.validation import Validator

__all__ = [
    # Enums
    "CardKind",
    "InitialWordValidationResult",
    "PlaySoundCardValidationResult",
    # Catalog
    "STANDARD_CATALOG",
    "CardCatalog",
    "CardDefinition",
    "CardId",
    "ConversionRule",
    # Types / notation
    "DEFAULT_WORD_SIZE",
    "Word",
    "card_symbol",
    "parse_card",
    "parse_word",
    "word_to_str",
    # Domain objects
    "PlayerBoard",
    "StackEntry",
    "Target",
    "TargetEnumerator",
    "Validator",
    "WordStack",
]
