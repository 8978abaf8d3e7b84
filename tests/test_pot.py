"""Tests for pot management and side pot calculation."""

import pytest
from headsup.player import Player
from headsup.pot import PotManager


class TestPotManager:
    def test_add_and_total(self):
        pot = PotManager()
        pot.add(100)
        pot.add(200)
        assert pot.total == 300

    def test_award_moves_chips(self):
        pot = PotManager()
        pot.add(300)
        winner = Player(id="A", chips=700)
        pot.award(winner, 300)
        assert winner.chips == 1000
        assert pot.total == 0
        assert pot.collected == 300

    def test_cannot_award_more_than_pot(self):
        pot = PotManager()
        pot.add(50)
        with pytest.raises(ValueError):
            pot.award(Player(id="A", chips=0), 51)

    def test_reset(self):
        pot = PotManager()
        pot.add(500)
        pot.reset()
        assert pot.total == 0


class TestSidePots:
    def test_two_player_single_pot(self):
        """Two players with equal bets = one pot."""
        p1 = Player(id="A", chips=0)
        p2 = Player(id="B", chips=0)
        p1.total_bet_this_hand = 100
        p2.total_bet_this_hand = 100

        pots = PotManager.calculate_side_pots([p1, p2])
        assert len(pots) == 1
        assert pots[0].amount == 200
        assert sorted(p.id for p in pots[0].eligible_players) == ["A", "B"]

    def test_short_blind_returns_excess(self):
        """SB all-in for 5 against a 20 BB: 10 contested, 15 back to the BB."""
        short = Player(id="Short", chips=0, is_all_in=True)
        big = Player(id="Big", chips=980)
        short.total_bet_this_hand = 5
        big.total_bet_this_hand = 20

        pots = PotManager.calculate_side_pots([short, big])
        assert len(pots) == 2
        assert pots[0].amount == 10
        assert len(pots[0].eligible_players) == 2
        assert pots[1].amount == 15
        assert pots[1].eligible_players == [big]

    def test_folded_player_not_eligible(self):
        """Folded player's chips stay in pot but they can't win."""
        p1 = Player(id="Folder", chips=500)
        p2 = Player(id="Winner", chips=500)

        p1.total_bet_this_hand = 100
        p1.is_folded = True
        p2.total_bet_this_hand = 100

        pots = PotManager.calculate_side_pots([p1, p2])
        assert len(pots) == 1
        assert pots[0].amount == 200
        assert pots[0].eligible_players == [p2]

    def test_no_bets_no_pots(self):
        p1 = Player(id="A", chips=500)
        p2 = Player(id="B", chips=500)
        assert PotManager.calculate_side_pots([p1, p2]) == []
