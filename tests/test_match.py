"""Tests for the multi-hand match loop."""

import random

import pytest
from headsup.action import Action
from headsup.card import card
from headsup.deck import create_deck
from headsup.errors import ConfigError, DeckError, HandStateError
from headsup.match import Match, MatchStatus


def _match(chips: int = 1000) -> Match:
    return Match.create(["alice", "bob"], starting_chips=chips, small_blind=10, big_blind=20)


class TestMatch:
    def test_create(self):
        match = _match()
        assert match.status == MatchStatus.WAITING
        assert [p.chips for p in match.players] == [1000, 1000]
        assert match.dealer_index == 0
        assert match.table is None

    def test_create_validation(self):
        with pytest.raises(ValueError):
            Match.create(["alice"])
        with pytest.raises(ValueError):
            Match.create(["alice", "bob"], starting_chips=0)

    def test_create_rejects_bad_blinds(self):
        with pytest.raises(ConfigError):
            Match.create(["alice", "bob"], small_blind=30, big_blind=20)
        with pytest.raises(ConfigError):
            Match.create(["alice", "bob"], small_blind=0, big_blind=20)

    def test_start_hand(self):
        match = _match()
        table = match.start_hand(rng=random.Random(1))

        assert match.status == MatchStatus.ACTIVE
        assert match.hand_number == 1
        assert table.current_player.id == "alice"
        assert match.total_chips == 2000

    def test_failed_deal_leaves_match_untouched(self):
        match = _match()
        bad_deck = create_deck()[1:] + [card("As")]

        with pytest.raises(DeckError):
            match.start_hand(deck=bad_deck)

        assert match.hand_number == 0
        assert match.status == MatchStatus.WAITING
        assert match.table is None
        assert not match.hand_in_progress
        assert [p.chips for p in match.players] == [1000, 1000]

        table = match.start_hand(rng=random.Random(1))
        assert match.hand_number == 1
        assert table.current_player.id == "alice"

    def test_no_second_hand_while_in_progress(self):
        match = _match()
        match.start_hand(rng=random.Random(1))
        with pytest.raises(HandStateError):
            match.start_hand(rng=random.Random(2))

    def test_act_without_hand(self):
        with pytest.raises(HandStateError):
            _match().act("alice", Action.call())

    def test_dealer_button_alternates(self):
        match = _match()
        buttons = []
        for seed in range(4):
            table = match.start_hand(rng=random.Random(seed))
            buttons.append(table.button.id)
            match.act(table.current_player.id, Action.fold())

        assert buttons == ["alice", "bob", "alice", "bob"]
        assert match.status == MatchStatus.WAITING
        assert len(match.history) == 4
        assert [p.chips for p in match.players] == [1000, 1000]

    def test_button_acts_first_preflop(self):
        match = _match()
        table = match.start_hand(rng=random.Random(1))
        match.act("alice", Action.fold())

        table = match.start_hand(rng=random.Random(2))
        assert table.current_player.id == "bob"
        assert table.button.id == "bob"

    def test_bust_ends_match(self, make_deck):
        match = _match()
        match.start_hand(deck=make_deck("2c 2d", "9d 9h", "2h 7d 9c Js Ah"))
        match.act("alice", Action.all_in())
        match.act("bob", Action.call())

        assert match.status == MatchStatus.FINISHED
        assert match.winner_id == "bob"
        assert match.history[-1].winners == ["bob"]
        with pytest.raises(HandStateError):
            match.start_hand()

    def test_blinds_alone_can_end_match(self, make_deck):
        match = _match()
        match.players[0].chips = 5
        match.players[1].chips = 1995

        table = match.start_hand(deck=make_deck("2c 7d", "As Ad", "Kh Qd 9c 4s 3h"))

        assert table.is_complete
        assert match.status == MatchStatus.FINISHED
        assert match.winner_id == "bob"
        assert match.total_chips == 2000

    def test_chips_conserved_over_many_hands(self):
        match = _match(chips=200)
        rng = random.Random(11)
        while match.status != MatchStatus.FINISHED and match.hand_number < 200:
            table = match.start_hand(rng=rng)
            while not table.is_complete:
                options = table.available_actions()
                if options.can_all_in and rng.random() < 0.2:
                    action = Action.all_in()
                elif options.can_check:
                    action = Action.check()
                else:
                    action = Action.call() if options.can_call else Action.all_in()
                match.act(table.current_player.id, action)
            assert match.total_chips == 400

        assert all(p.chips >= 0 for p in match.players)
