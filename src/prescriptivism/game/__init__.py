"""Game management layer: turn controller, players, word choice.

Quick start::

    from prescriptivism.core import CardCatalog, parse_word
    from prescriptivism.game import Player, TurnController

    ctrl = TurnController(CardCatalog.standard())
    ctrl.start_game(
        us=Player.with_word(0, "Alice", parse_word("pataki")),
        others=[Player.with_word(1, "Bob", parse_word("sɔlemi"))],
        hand=parse_word("bfe"),
    )
    ctrl.begin_our_turn()
"""

from prescriptivism.game.controller import TurnController, TurnEvents
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
from prescriptivism.game.word_choice import WordChoice

__all__ = [
    # Interfaces / config
    "ITurnController",
    "NeedsOtherCardPolicy",
    "RulesConfig",
    "TurnPhase",
    # Turn states
    "NoSelection",
    "NotOurTurn",
    "Passing",
    "PlayRecord",
    "SingleTarget",
    "TurnState",
    # Concrete
    "Player",
    "TurnController",
    "TurnEvents",
    "WordChoice",
]
