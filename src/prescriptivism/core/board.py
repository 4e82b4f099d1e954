"""Board - every player's word in progress, with lock flags."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from prescriptivism.core.cards import CardId


@dataclass(slots=True)
class StackEntry:
    """One position of a word in progress."""

    card: CardId
    locked: bool = False


class WordStack:
    """Mutable ordered sequence of :class:`StackEntry`.

    Lock flags are owned by the server; this class only stores them.
    """

    __slots__ = ("_entries",)

    def __init__(self, cards: Iterable[CardId] = ()) -> None:
        self._entries: list[StackEntry] = [StackEntry(card) for card in cards]

    # -- Element access -----------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, at: int) -> StackEntry:
        return self._entries[at]

    def __iter__(self) -> Iterator[StackEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        cards = ", ".join(
            f"{e.card.name}{'*' if e.locked else ''}" for e in self._entries
        )
        return f"WordStack([{cards}])"

    @property
    def cards(self) -> tuple[CardId, ...]:
        return tuple(e.card for e in self._entries)

    def is_locked(self, at: int) -> bool:
        return self._entries[at].locked

    def unlocked_positions(self) -> Iterator[int]:
        return (i for i, e in enumerate(self._entries) if not e.locked)

    # -- Mutation -----------------------------------------------------------

    def set_locked(self, at: int, locked: bool) -> bool:
        """Update a lock flag; return whether it changed."""
        entry = self._entries[at]
        if entry.locked == locked:
            return False
        entry.locked = locked
        return True

    def replace(self, at: int, card: CardId) -> CardId:
        """Put *card* at *at* and return the card it covered."""
        entry = self._entries[at]
        previous = entry.card
        entry.card = card
        return previous

    def append(self, card: CardId, locked: bool = False) -> None:
        self._entries.append(StackEntry(card, locked))


@dataclass
class PlayerBoard:
    """All word stacks owned by one player, in display order."""

    player_id: int
    stacks: list[WordStack] = field(default_factory=list)

    @classmethod
    def from_words(cls, player_id: int, *words: Iterable[CardId]) -> PlayerBoard:
        return cls(player_id, [WordStack(word) for word in words])

    def stack(self, index: int) -> WordStack:
        if not 0 <= index < len(self.stacks):
            raise IndexError(
                f"Player {self.player_id} has no stack {index} "
                f"({len(self.stacks)} stacks)"
            )
        return self.stacks[index]
