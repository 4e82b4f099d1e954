"""Card catalog: static definitions of every card in the game.

Consonant coordinates are ``(place, manner)``:

    place   1 labial, 2 labiodental, 3 alveolar, 4 postalveolar,
            5 palatal, 6 velar, 7 glottal
    manner  1 stop, 2 nasal, 3 fricative, 4 approximant

Vowel coordinates are ``(frontness, height)``:

    frontness  1 front, 2 central, 3 back
    height     1 close, 2 close-mid, 3 open-mid, 4 open

Voicing is not a coordinate: /p/ and /b/ sit on the same point.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType

from prescriptivism.core.enums import CardKind


class CardId(IntEnum):
    """Identity of a card. Values are stable and usable as indices."""

    # Consonants
    C_P = 0
    C_B = 1
    C_T = 2
    C_D = 3
    C_K = 4
    C_G = 5
    C_M = 6
    C_N = 7
    C_NG = 8
    C_F = 9
    C_V = 10
    C_S = 11
    C_Z = 12
    C_SH = 13
    C_ZH = 14
    C_H = 15
    C_L = 16
    C_R = 17
    C_J = 18
    C_W = 19

    # Vowels
    V_I = 20
    V_Y = 21
    V_U = 22
    V_E = 23
    V_OE = 24
    V_O = 25
    V_SCHWA = 26
    V_EH = 27
    V_AW = 28
    V_A = 29

    # Power cards
    P_DESCRIPTIVISM = 30
    P_SUPERSTRATUM = 31
    P_WHORF = 32
    P_BABEL = 33
    P_CHAOS = 34
    P_REVIVAL = 35


ConversionRule = tuple[CardId, ...]


@dataclass(frozen=True, slots=True)
class CardDefinition:
    """Immutable description of a single card."""

    id: CardId
    kind: CardKind
    name: str
    symbol: str = ""
    is_consonant: bool = False
    place_or_frontness: int = 0
    manner_or_height: int = 0
    converts_to: tuple[ConversionRule, ...] = ()

    @property
    def is_sound(self) -> bool:
        return self.kind == CardKind.SOUND

    @property
    def coordinates(self) -> tuple[int, int]:
        return (self.place_or_frontness, self.manner_or_height)

    def __str__(self) -> str:
        return self.symbol or self.name


def _consonant(
    card: CardId,
    symbol: str,
    place: int,
    manner: int,
    *converts_to: ConversionRule,
) -> CardDefinition:
    return CardDefinition(
        id=card,
        kind=CardKind.SOUND,
        name=symbol,
        symbol=symbol,
        is_consonant=True,
        place_or_frontness=place,
        manner_or_height=manner,
        converts_to=tuple(converts_to),
    )


def _vowel(
    card: CardId,
    symbol: str,
    frontness: int,
    height: int,
    *converts_to: ConversionRule,
) -> CardDefinition:
    return CardDefinition(
        id=card,
        kind=CardKind.SOUND,
        name=symbol,
        symbol=symbol,
        is_consonant=False,
        place_or_frontness=frontness,
        manner_or_height=height,
        converts_to=tuple(converts_to),
    )


def _power(card: CardId, name: str) -> CardDefinition:
    return CardDefinition(id=card, kind=CardKind.POWER, name=name)


C = CardId

_STANDARD_DEFINITIONS: tuple[CardDefinition, ...] = (
    _consonant(C.C_P, "p", 1, 1, (C.C_F,)),
    _consonant(C.C_B, "b", 1, 1, (C.C_V,)),
    _consonant(C.C_T, "t", 3, 1, (C.C_S,), (C.C_SH, C.C_J)),
    _consonant(C.C_D, "d", 3, 1, (C.C_Z,), (C.C_ZH, C.C_J)),
    _consonant(C.C_K, "k", 6, 1, (C.C_H,), (C.C_SH, C.V_I)),
    _consonant(C.C_G, "g", 6, 1, (C.C_J,)),
    _consonant(C.C_M, "m", 1, 2),
    _consonant(C.C_N, "n", 3, 2, (C.C_NG,)),
    _consonant(C.C_NG, "ŋ", 6, 2),
    _consonant(C.C_F, "f", 2, 3),
    _consonant(C.C_V, "v", 2, 3),
    _consonant(C.C_S, "s", 3, 3, (C.C_H,)),
    _consonant(C.C_Z, "z", 3, 3),
    _consonant(C.C_SH, "ʃ", 4, 3),
    _consonant(C.C_ZH, "ʒ", 4, 3),
    _consonant(C.C_H, "h", 7, 3),
    _consonant(C.C_L, "l", 3, 4, (C.C_W,)),
    _consonant(C.C_R, "r", 3, 4),
    _consonant(C.C_J, "j", 5, 4),
    _consonant(C.C_W, "w", 1, 4),
    _vowel(C.V_I, "i", 1, 1),
    _vowel(C.V_Y, "y", 1, 1),
    _vowel(C.V_U, "u", 3, 1, (C.V_Y,)),
    _vowel(C.V_E, "e", 1, 2),
    _vowel(C.V_OE, "ø", 1, 2),
    _vowel(C.V_O, "o", 3, 2, (C.V_OE,)),
    _vowel(C.V_SCHWA, "ə", 2, 3),
    _vowel(C.V_EH, "ɛ", 1, 3),
    _vowel(C.V_AW, "ɔ", 3, 3),
    _vowel(C.V_A, "a", 2, 4, (C.V_E, C.V_I)),
    _power(C.P_DESCRIPTIVISM, "Descriptivism"),
    _power(C.P_SUPERSTRATUM, "Superstratum"),
    _power(C.P_WHORF, "Whorf"),
    _power(C.P_BABEL, "Babel"),
    _power(C.P_CHAOS, "Chaos"),
    _power(C.P_REVIVAL, "Revival"),
)

del C


class CardCatalog:
    """Read-only table of card definitions indexed by :class:`CardId`.

    Built once at startup and handed to every component that needs it.
    """

    __slots__ = ("_definitions", "_by_symbol", "_glide", "_schwa")

    def __init__(
        self,
        definitions: Iterable[CardDefinition],
        *,
        glide: CardId,
        schwa: CardId,
    ) -> None:
        table: list[CardDefinition | None] = [None] * len(CardId)
        for definition in definitions:
            if table[definition.id] is not None:
                raise ValueError(f"Duplicate card definition: {definition.id.name}")
            for rule in definition.converts_to:
                if not rule:
                    raise ValueError(
                        f"Empty conversion rule on card {definition.id.name}"
                    )
            table[definition.id] = definition

        missing = [CardId(i).name for i, d in enumerate(table) if d is None]
        if missing:
            raise ValueError(f"Missing card definitions: {', '.join(missing)}")

        self._definitions: tuple[CardDefinition, ...] = tuple(
            d for d in table if d is not None
        )
        self._by_symbol: Mapping[str, CardId] = MappingProxyType(
            {d.symbol: d.id for d in self._definitions if d.symbol}
        )

        for special in (glide, schwa):
            if not self._definitions[special].is_sound:
                raise ValueError(f"{special.name} is not a sound card")
        self._glide = glide
        self._schwa = schwa

    @classmethod
    def standard(cls) -> CardCatalog:
        """The shared catalog of the standard game."""
        return STANDARD_CATALOG

    # -- Lookup -------------------------------------------------------------

    def __getitem__(self, card: CardId) -> CardDefinition:
        return self._definitions[card]

    def __iter__(self) -> Iterator[CardDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    @property
    def glide(self) -> CardId:
        """Consonant next to which an identical sound may always be played."""
        return self._glide

    @property
    def schwa(self) -> CardId:
        """Vowel next to which an identical sound may always be played."""
        return self._schwa

    def by_symbol(self, symbol: str) -> CardId | None:
        return self._by_symbol.get(symbol)

    def is_consonant(self, card: CardId) -> bool:
        return self._definitions[card].is_consonant

    def is_sound(self, card: CardId) -> bool:
        return self._definitions[card].is_sound

    def sound_cards(self) -> tuple[CardId, ...]:
        return tuple(d.id for d in self._definitions if d.is_sound)

    def power_cards(self) -> tuple[CardId, ...]:
        return tuple(d.id for d in self._definitions if not d.is_sound)


STANDARD_CATALOG = CardCatalog(
    _STANDARD_DEFINITIONS,
    glide=CardId.C_H,
    schwa=CardId.V_SCHWA,
)
