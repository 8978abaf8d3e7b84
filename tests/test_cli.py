"""Tests for the command line front end."""

from typer.testing import CliRunner

from headsup.cli import app

runner = CliRunner()


class TestCli:
    def test_evaluate(self):
        result = runner.invoke(app, ["evaluate", "2c 2d", "--board", "2h 7d 9c Js Ah"])
        assert result.exit_code == 0
        assert "Three of a Kind, 2's" in result.output

    def test_evaluate_too_few_cards(self):
        result = runner.invoke(app, ["evaluate", "2c 2d"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_evaluate_bad_card(self):
        result = runner.invoke(app, ["evaluate", "Xx 2d", "--board", "2h 7d 9c"])
        assert result.exit_code == 1

    def test_showdown(self):
        result = runner.invoke(
            app, ["showdown", "2c 2d", "9d 9h", "--board", "2h 7d 9c Js Ah"]
        )
        assert result.exit_code == 0
        assert "Wins" in result.output
        assert "Loses" in result.output

    def test_showdown_split(self):
        result = runner.invoke(
            app, ["showdown", "2c 3d", "4c 5d", "--board", "Ah Kh Qh Jh Th"]
        )
        assert result.exit_code == 0
        assert "Split" in result.output

    def test_deck(self):
        result = runner.invoke(app, ["deck", "--seed", "4"])
        assert result.exit_code == 0
        assert len(result.output.strip().splitlines()) == 4

    def test_play_quit(self):
        result = runner.invoke(app, ["play", "--seed", "1"], input="quit\n")
        assert result.exit_code == 0
        assert "Hand #1" in result.output

    def test_play_fold_then_stop(self):
        result = runner.invoke(app, ["play", "--seed", "1"], input="fold\nn\n")
        assert result.exit_code == 0
        assert "Player 2 wins the pot" in result.output

    def test_play_rejects_small_blind_above_big_blind(self):
        result = runner.invoke(app, ["play", "--sb", "30", "--bb", "20"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_play_explicit_zero_is_not_a_default(self):
        result = runner.invoke(app, ["play", "--chips", "0"])
        assert result.exit_code == 1
        assert "starting_chips must be positive" in result.output
