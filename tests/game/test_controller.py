"""Tests for TurnController: the turn state machine."""

import pytest

from prescriptivism.core.cards import CardCatalog, CardId
from prescriptivism.core.targets import Target
from prescriptivism.core.types import parse_word
from prescriptivism.game.controller import TurnController
from prescriptivism.game.interfaces import NeedsOtherCardPolicy, RulesConfig, TurnPhase
from prescriptivism.game.player import Player
from prescriptivism.game.state import NoSelection, PlayRecord, SingleTarget


def _make_controller(
    hand: str = "bʃjɔ",
    config: RulesConfig | None = None,
    our_turn: bool = True,
) -> TurnController:
    """Helper: us with /pat/, one opponent with /mik/."""
    ctrl = TurnController(CardCatalog.standard(), config)
    ctrl.start_game(
        Player.with_word(0, "Us", parse_word("pat")),
        [Player.with_word(1, "Them", parse_word("mik"))],
        parse_word(hand),
    )
    if our_turn:
        ctrl.begin_our_turn()
    return ctrl


def _coords(targets: tuple[Target, ...]) -> list[tuple[int, int | None]]:
    return [(t.player_id, t.index) for t in targets]


class TestStartGame:
    def test_starts_not_our_turn(self) -> None:
        ctrl = _make_controller(our_turn=False)
        assert ctrl.phase == TurnPhase.NOT_OUR_TURN

    def test_players_us_first(self) -> None:
        ctrl = _make_controller()
        assert [p.id for p in ctrl.players] == [0, 1]
        assert ctrl.us is not None and ctrl.us.name == "Us"
        assert ctrl.player(1) is not None
        assert ctrl.player(7) is None

    def test_hand(self) -> None:
        ctrl = _make_controller()
        assert ctrl.hand == parse_word("bʃjɔ")

    def test_duplicate_ids_rejected(self) -> None:
        ctrl = TurnController(CardCatalog.standard())
        with pytest.raises(ValueError):
            ctrl.start_game(Player(0), [Player(0)])


class TestTurnNotifications:
    def test_begin_our_turn(self) -> None:
        ctrl = _make_controller(our_turn=False)
        ctrl.begin_our_turn()
        assert ctrl.state == NoSelection()

    def test_opponent_turn_clears_selection(self) -> None:
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_B)
        ctrl.begin_opponent_turn()
        assert ctrl.phase == TurnPhase.NOT_OUR_TURN
        assert ctrl.selected_card is None
        assert ctrl.targets == ()

    def test_our_turn_from_single_target_clears_selection(self) -> None:
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_B)
        ctrl.begin_our_turn()
        assert ctrl.phase == TurnPhase.NO_SELECTION
        assert ctrl.selected_card is None
        assert ctrl.targets == ()

    def test_our_turn_from_passing(self) -> None:
        ctrl = _make_controller()
        ctrl.pass_turn()
        ctrl.begin_our_turn()
        assert ctrl.phase == TurnPhase.NO_SELECTION
        assert ctrl.selected_card is None
        assert ctrl.targets == ()

    def test_opponent_turn_from_passing(self) -> None:
        ctrl = _make_controller()
        ctrl.pass_turn()
        ctrl.begin_opponent_turn()
        assert ctrl.phase == TurnPhase.NOT_OUR_TURN
        assert ctrl.selected_card is None
        assert ctrl.targets == ()
        assert not ctrl.discard_for_pass(CardId.V_AW)

    def test_input_ignored_when_not_our_turn(self) -> None:
        ctrl = _make_controller(our_turn=False)
        assert not ctrl.select_card(CardId.C_B)
        assert not ctrl.pass_turn()
        ctrl.cancel()
        assert ctrl.phase == TurnPhase.NOT_OUR_TURN

    def test_state_events(self) -> None:
        ctrl = _make_controller(our_turn=False)
        phases: list[TurnPhase] = []
        ctrl.events.on_state_changed.append(lambda s: phases.append(s.phase))
        ctrl.begin_our_turn()
        ctrl.begin_our_turn()  # no change, no event
        ctrl.select_card(CardId.C_B)
        ctrl.cancel()
        assert phases == [
            TurnPhase.NO_SELECTION,
            TurnPhase.SINGLE_TARGET,
            TurnPhase.NO_SELECTION,
        ]


class TestSelectCard:
    def test_select_with_targets(self) -> None:
        ctrl = _make_controller()
        assert ctrl.select_card(CardId.C_B)
        assert isinstance(ctrl.state, SingleTarget)
        assert ctrl.selected_card == CardId.C_B
        assert _coords(ctrl.targets) == [(0, 0), (1, 0)]

    def test_select_without_targets_is_rejected(self) -> None:
        ctrl = _make_controller()
        rejected: list[CardId] = []
        ctrl.events.on_selection_rejected.append(rejected.append)
        assert not ctrl.select_card(CardId.V_AW)
        assert ctrl.phase == TurnPhase.NO_SELECTION
        assert ctrl.targets == ()
        assert rejected == [CardId.V_AW]

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = _make_controller()
        with caplog.at_level("INFO", logger="prescriptivism.game.controller"):
            ctrl.select_card(CardId.V_AW)
        assert "no legal targets" in caplog.text

    def test_card_not_in_hand(self) -> None:
        ctrl = _make_controller()
        with pytest.raises(ValueError):
            ctrl.select_card(CardId.C_Z)

    def test_reclick_cancels(self) -> None:
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_B)
        assert not ctrl.select_card(CardId.C_B)
        assert ctrl.phase == TurnPhase.NO_SELECTION

    def test_select_other_card_switches(self) -> None:
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_B)
        assert ctrl.select_card(CardId.C_SH)
        assert ctrl.selected_card == CardId.C_SH

    def test_cancel_clears_targets(self) -> None:
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_B)
        ctrl.cancel()
        assert ctrl.state == NoSelection()
        assert ctrl.targets == ()
        assert ctrl.selected_card is None

    def test_power_card_has_no_targets(self) -> None:
        ctrl = _make_controller()
        ctrl.add_card_to_hand(CardId.P_WHORF)
        assert not ctrl.select_card(CardId.P_WHORF)


class TestSelectTarget:
    def test_play_applied(self) -> None:
        ctrl = _make_controller()
        plays: list[PlayRecord] = []
        ctrl.events.on_play.append(plays.append)
        ctrl.select_card(CardId.C_B)
        target = ctrl.targets[1]
        assert ctrl.select_target(target)

        them = ctrl.player(1)
        assert them is not None
        assert them.word.cards == parse_word("bik")
        assert CardId.C_B not in ctrl.hand
        assert ctrl.phase == TurnPhase.NO_SELECTION
        assert plays == [
            PlayRecord(
                card=CardId.C_B,
                player_id=1,
                stack_index=0,
                index=0,
                covered=CardId.C_M,
            )
        ]

    def test_target_outside_set_ignored(self) -> None:
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_B)
        them = ctrl.player(1)
        assert them is not None
        bogus = Target(1, 0, them.word, 2)
        assert not ctrl.select_target(bogus)
        assert ctrl.phase == TurnPhase.SINGLE_TARGET

    def test_no_selection_ignores_target(self) -> None:
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_B)
        target = ctrl.targets[0]
        ctrl.cancel()
        assert not ctrl.select_target(target)


class TestCompanionPolicy:
    def test_require_companion_default(self) -> None:
        # /ʃ/ on /t/ needs /j/ (in hand); on /k/ needs /i/ (not in hand).
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_SH)
        assert _coords(ctrl.targets) == [(0, 2)]
        assert ctrl.targets[0].needs_other_card

    def test_require_companion_consumes_it(self) -> None:
        ctrl = _make_controller()
        plays: list[PlayRecord] = []
        ctrl.events.on_play.append(plays.append)
        ctrl.select_card(CardId.C_SH)
        ctrl.select_target(ctrl.targets[0])
        assert ctrl.us is not None
        assert ctrl.us.word.cards == parse_word("paʃ")
        assert ctrl.hand == parse_word("bɔ")
        assert plays[0].companions == (CardId.C_J,)
        assert plays[0].covered == CardId.C_T

    def test_companion_arriving_refreshes_targets(self) -> None:
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_SH)
        ctrl.add_card_to_hand(CardId.V_I)
        assert _coords(ctrl.targets) == [(0, 2), (1, 2)]

    def test_without_companion_rejected(self) -> None:
        ctrl = _make_controller(hand="ʃb")
        assert not ctrl.select_card(CardId.C_SH)

    def test_offer_policy(self) -> None:
        config = RulesConfig(needs_other_card=NeedsOtherCardPolicy.OFFER)
        ctrl = _make_controller(hand="ʃb", config=config)
        plays: list[PlayRecord] = []
        ctrl.events.on_play.append(plays.append)
        assert ctrl.select_card(CardId.C_SH)
        assert _coords(ctrl.targets) == [(0, 2), (1, 2)]
        ctrl.select_target(ctrl.targets[1])
        assert plays[0].companions == ()
        assert ctrl.hand == (CardId.C_B,)

    def test_filter_policy(self) -> None:
        config = RulesConfig(needs_other_card=NeedsOtherCardPolicy.FILTER)
        ctrl = _make_controller(config=config)
        assert not ctrl.select_card(CardId.C_SH)


class TestSelfTarget:
    def test_self_target_disallowed(self) -> None:
        ctrl = _make_controller(config=RulesConfig(allow_self_target=False))
        ctrl.select_card(CardId.C_B)
        assert _coords(ctrl.targets) == [(1, 0)]


class TestBoardUpdates:
    def test_lock_change_recomputes_targets(self) -> None:
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_B)
        ctrl.lock_changed(1, 0, 0, True)
        assert _coords(ctrl.targets) == [(0, 0)]

    def test_losing_all_targets_drops_selection(self) -> None:
        ctrl = _make_controller()
        rejected: list[CardId] = []
        ctrl.events.on_selection_rejected.append(rejected.append)
        ctrl.select_card(CardId.C_B)
        ctrl.lock_changed(1, 0, 0, True)
        ctrl.lock_changed(0, 0, 0, True)
        assert ctrl.phase == TurnPhase.NO_SELECTION
        assert rejected == [CardId.C_B]

    def test_unlock_restores_targets(self) -> None:
        ctrl = _make_controller()
        ctrl.lock_changed(1, 0, 0, True)
        ctrl.select_card(CardId.C_B)
        assert _coords(ctrl.targets) == [(0, 0)]
        ctrl.lock_changed(1, 0, 0, False)
        assert _coords(ctrl.targets) == [(0, 0), (1, 0)]

    def test_lock_without_notification_rejects_play(self) -> None:
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_B)
        stale = ctrl.targets[1]
        them = ctrl.player(1)
        assert them is not None
        them.word.set_locked(0, True)
        assert not ctrl.select_target(stale)
        assert them.word.cards == parse_word("mik")
        assert CardId.C_B in ctrl.hand
        assert _coords(ctrl.targets) == [(0, 0)]

    def test_changed_card_without_notification_rejects_play(self) -> None:
        ctrl = _make_controller()
        plays: list[PlayRecord] = []
        ctrl.events.on_play.append(plays.append)
        ctrl.select_card(CardId.C_B)
        stale = ctrl.targets[1]
        them = ctrl.player(1)
        assert them is not None
        them.word.replace(0, CardId.C_N)
        assert not ctrl.select_target(stale)
        assert them.word.cards == parse_word("nik")
        assert plays == []
        assert _coords(ctrl.targets) == [(0, 0)]

    def test_add_card_recomputes_targets(self) -> None:
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_B)
        ctrl.add_card(1, 0, CardId.C_N, at=0)
        assert _coords(ctrl.targets) == [(0, 0)]

    def test_add_card_appends(self) -> None:
        ctrl = _make_controller()
        ctrl.add_card(1, 0, CardId.V_A)
        them = ctrl.player(1)
        assert them is not None
        assert them.word.cards == parse_word("mika")

    def test_unknown_player(self) -> None:
        ctrl = _make_controller()
        with pytest.raises(ValueError):
            ctrl.lock_changed(9, 0, 0, True)

    def test_removing_selected_card(self) -> None:
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_B)
        ctrl.remove_card_from_hand(CardId.C_B)
        assert ctrl.phase == TurnPhase.NO_SELECTION
        assert CardId.C_B not in ctrl.hand


class TestPassing:
    def test_pass_and_discard(self) -> None:
        ctrl = _make_controller()
        discarded: list[CardId] = []
        ctrl.events.on_discard.append(discarded.append)
        assert ctrl.pass_turn()
        assert ctrl.phase == TurnPhase.PASSING
        assert ctrl.discard_for_pass(CardId.V_AW)
        assert discarded == [CardId.V_AW]
        assert CardId.V_AW not in ctrl.hand
        assert ctrl.phase == TurnPhase.NO_SELECTION

    def test_cancel_pass(self) -> None:
        ctrl = _make_controller()
        ctrl.pass_turn()
        ctrl.cancel()
        assert ctrl.phase == TurnPhase.NO_SELECTION
        assert ctrl.hand == parse_word("bʃjɔ")

    def test_pass_requires_no_selection(self) -> None:
        ctrl = _make_controller()
        ctrl.select_card(CardId.C_B)
        assert not ctrl.pass_turn()
        assert ctrl.phase == TurnPhase.SINGLE_TARGET

    def test_selection_ignored_while_passing(self) -> None:
        ctrl = _make_controller()
        ctrl.pass_turn()
        assert not ctrl.select_card(CardId.C_B)
        assert ctrl.phase == TurnPhase.PASSING

    def test_discard_outside_passing(self) -> None:
        ctrl = _make_controller()
        assert not ctrl.discard_for_pass(CardId.C_B)
        assert CardId.C_B in ctrl.hand

    def test_discard_card_not_in_hand(self) -> None:
        ctrl = _make_controller()
        ctrl.pass_turn()
        with pytest.raises(ValueError):
            ctrl.discard_for_pass(CardId.C_Z)
