"""Word and play validation: the rules of what may be laid down where."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby

from prescriptivism.core.cards import CardCatalog, CardDefinition, CardId, ConversionRule
from prescriptivism.core.enums import (
    InitialWordValidationResult,
    PlaySoundCardValidationResult,
)

# Consonant manner classes up to this one cannot open a word-initial cluster.
MAX_NON_CLUSTERING_MANNER = 2

# Longest permitted run of consonants (cluster) or vowels (hiatus).
MAX_RUN_LENGTH = 2


class Validator:
    """Stateless rule-checker over an immutable :class:`CardCatalog`.

    Holds nothing but the catalog, so one instance may be shared freely,
    including across threads.
    """

    __slots__ = ("_catalog",)

    def __init__(self, catalog: CardCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> CardCatalog:
        return self._catalog

    # -- Initial word -------------------------------------------------------

    def validate_initial_word(
        self,
        word: Sequence[CardId],
        original: Sequence[CardId],
    ) -> InitialWordValidationResult:
        """Check an arrangement of the dealt word.

        Raises ``ValueError`` if the two words differ in length, are
        shorter than two sounds, or contain a power card.
        """
        if len(word) != len(original):
            raise ValueError(
                f"Word length {len(word)} does not match original length {len(original)}"
            )
        if len(word) < 2:
            raise ValueError(f"Word must have at least 2 sounds, got {len(word)}")
        self._require_sounds(word)

        if sorted(word) != sorted(original):
            return InitialWordValidationResult.NOT_A_PERMUTATION

        is_consonant = self._catalog.is_consonant
        for _, run in groupby(word, key=is_consonant):
            if sum(1 for _ in run) > MAX_RUN_LENGTH:
                return InitialWordValidationResult.CLUSTER_TOO_LONG

        first = self._catalog[word[0]]
        second = self._catalog[word[1]]
        if first.is_consonant and second.is_consonant:
            if first.manner_or_height <= MAX_NON_CLUSTERING_MANNER:
                return InitialWordValidationResult.BAD_INITIAL_CLUSTER_MANNER
            if first.coordinates == second.coordinates:
                return InitialWordValidationResult.BAD_INITIAL_CLUSTER_COORDINATES

        return InitialWordValidationResult.VALID

    # -- Playing a sound ----------------------------------------------------

    def validate_play_sound_card(
        self,
        played: CardId,
        on: Sequence[CardId],
        at: int,
    ) -> PlaySoundCardValidationResult:
        """Check whether *played* may replace the sound at ``on[at]``."""
        if not 0 <= at < len(on):
            raise IndexError(f"Position {at} out of range for word of length {len(on)}")
        self._require_sounds((played,))
        target = on[at]
        self._require_sounds((target,))

        # Identical neighbour of a glide or schwa.
        if target in (self._catalog.glide, self._catalog.schwa):
            if (at > 0 and on[at - 1] == played) or (
                at < len(on) - 1 and on[at + 1] == played
            ):
                return PlaySoundCardValidationResult.VALID

        # Sound change listed on the target card.
        rule = self.conversion_rule(played, target)
        if rule is not None:
            if len(rule) > 1:
                return PlaySoundCardValidationResult.NEEDS_OTHER_CARD
            return PlaySoundCardValidationResult.VALID

        # Neighbouring phoneme, or a different one on the same point.
        if (
            played != target
            and self._catalog.is_consonant(played) == self._catalog.is_consonant(target)
            and self.distance(played, target) < 2
        ):
            return PlaySoundCardValidationResult.VALID

        return PlaySoundCardValidationResult.INVALID

    def conversion_rule(self, played: CardId, on_card: CardId) -> ConversionRule | None:
        """First conversion rule of *on_card* headed by *played*, if any."""
        for rule in self._catalog[on_card].converts_to:
            if rule[0] == played:
                return rule
        return None

    def companions(self, played: CardId, on_card: CardId) -> tuple[CardId, ...]:
        """Extra cards the matching conversion rule requires (may be empty)."""
        rule = self.conversion_rule(played, on_card)
        return rule[1:] if rule is not None else ()

    def distance(self, a: CardId, b: CardId) -> int:
        """Manhattan distance between the phonetic coordinates of two sounds."""
        da: CardDefinition = self._catalog[a]
        db: CardDefinition = self._catalog[b]
        return abs(da.place_or_frontness - db.place_or_frontness) + abs(
            da.manner_or_height - db.manner_or_height
        )

    # -- Internal helpers ---------------------------------------------------

    def _require_sounds(self, cards: Sequence[CardId]) -> None:
        for card in cards:
            if not self._catalog.is_sound(card):
                raise ValueError(f"{card.name} is not a sound card")
