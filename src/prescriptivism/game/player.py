"""Player model: a seat at the table and the word it owns."""

from __future__ import annotations

from collections.abc import Iterable

from prescriptivism.core.board import PlayerBoard, WordStack
from prescriptivism.core.cards import CardId


class Player:
    """A participant identified by the server-side player id."""

    __slots__ = ("_id", "_name", "board")

    def __init__(self, player_id: int, name: str = "", board: PlayerBoard | None = None) -> None:
        self._id = player_id
        self._name = name or f"Player {player_id}"
        self.board = board if board is not None else PlayerBoard(player_id)
        if self.board.player_id != player_id:
            raise ValueError(
                f"Board of player {self.board.player_id} given to player {player_id}"
            )

    @classmethod
    def with_word(cls, player_id: int, name: str, word: Iterable[CardId]) -> Player:
        return cls(player_id, name, PlayerBoard.from_words(player_id, word))

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def word(self) -> WordStack:
        """The player's first (usually only) word."""
        return self.board.stack(0)

    def __repr__(self) -> str:
        return f"Player({self._id}, {self._name!r})"
