"""Tests for WordStack and PlayerBoard."""

import pytest

from prescriptivism.core.board import PlayerBoard, WordStack
from prescriptivism.core.cards import CardId
from prescriptivism.core.types import parse_word


class TestWordStack:
    def test_cards(self) -> None:
        stack = WordStack(parse_word("pat"))
        assert stack.cards == parse_word("pat")
        assert len(stack) == 3

    def test_entries_start_unlocked(self) -> None:
        stack = WordStack(parse_word("pat"))
        assert not any(entry.locked for entry in stack)
        assert list(stack.unlocked_positions()) == [0, 1, 2]

    def test_set_locked_reports_change(self) -> None:
        stack = WordStack(parse_word("pat"))
        assert stack.set_locked(1, True)
        assert not stack.set_locked(1, True)
        assert stack.is_locked(1)
        assert list(stack.unlocked_positions()) == [0, 2]

    def test_replace_returns_covered(self) -> None:
        stack = WordStack(parse_word("pat"))
        assert stack.replace(0, CardId.C_B) == CardId.C_P
        assert stack.cards == parse_word("bat")

    def test_replace_keeps_lock(self) -> None:
        stack = WordStack(parse_word("pat"))
        stack.set_locked(0, True)
        stack.replace(0, CardId.C_B)
        assert stack.is_locked(0)

    def test_append(self) -> None:
        stack = WordStack(parse_word("pa"))
        stack.append(CardId.C_T, locked=True)
        assert stack.cards == parse_word("pat")
        assert stack.is_locked(2)

    def test_repr_marks_locks(self) -> None:
        stack = WordStack(parse_word("pa"))
        stack.set_locked(0, True)
        assert repr(stack) == "WordStack([C_P*, V_A])"


class TestPlayerBoard:
    def test_from_words(self) -> None:
        board = PlayerBoard.from_words(3, parse_word("pa"), parse_word("to"))
        assert board.player_id == 3
        assert [s.cards for s in board.stacks] == [parse_word("pa"), parse_word("to")]

    def test_stack_out_of_range(self) -> None:
        board = PlayerBoard.from_words(0, parse_word("pa"))
        assert board.stack(0).cards == parse_word("pa")
        with pytest.raises(IndexError):
            board.stack(1)
