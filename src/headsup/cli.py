"""Command line front end: hand evaluation, showdowns and hot-seat play."""

import logging
import random

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table as RichTable

from .action import Action, ActionType
from .card import Card, parse_cards
from .config import get_config
from .deck import create_deck, shuffle_deck
from .errors import PokerError
from .hand import evaluate_hand
from .match import Match, MatchStatus
from .player import Player
from .showdown import determine_winner
from .table import Table

app = typer.Typer(help="Heads-up Texas Hold'em engine")
console = Console()


@app.callback()
def setup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show engine debug logs"),
):
    """Configure logging before any command runs."""
    level = logging.DEBUG if verbose else get_config().logging.level_number
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def format_card(c: Card) -> str:
    """Format a card with color based on suit."""
    if c.suit.is_red:
        return f"[red]{c}[/red]"
    return f"[white]{c}[/white]"


def format_cards(cards: list[Card]) -> str:
    return " ".join(format_card(c) for c in cards) or "[dim]-[/dim]"


@app.command()
def evaluate(
    hole: str = typer.Argument(..., help="Hole cards (e.g., 'As Kh')"),
    board: str = typer.Option("", "--board", "-b", help="Community cards"),
):
    """Evaluate the best five-card hand."""
    try:
        hole_cards = parse_cards(hole)
        community = parse_cards(board)
        value = evaluate_hand(hole_cards, community)
    except PokerError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]Hand:[/bold]  {format_cards(hole_cards)}")
    console.print(f"[bold]Board:[/bold] {format_cards(community)}")
    console.print(
        Panel(
            f"[bold green]{value.description}[/bold green]\n"
            f"[dim]{value.rank} - strength {value.strength}[/dim]",
            title="Best Hand",
            expand=False,
        )
    )


@app.command()
def showdown(
    first: str = typer.Argument(..., help="Player 1 hole cards"),
    second: str = typer.Argument(..., help="Player 2 hole cards"),
    board: str = typer.Option(..., "--board", "-b", help="Five community cards"),
):
    """Compare two hands on a board and show the winner(s)."""
    try:
        players = [
            Player(id="Player 1", chips=0, hole_cards=parse_cards(first)),
            Player(id="Player 2", chips=0, hole_cards=parse_cards(second)),
        ]
        community = parse_cards(board)
        result = determine_winner(players, community)
    except PokerError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    table = RichTable(title=f"Showdown on {format_cards(community)}")
    table.add_column("Player", style="cyan")
    table.add_column("Hole")
    table.add_column("Hand")
    table.add_column("Result", justify="right")
    for p in players:
        won = p.id in result.winners
        label = "[yellow]Split[/yellow]" if won and result.is_split else (
            "[green]Wins[/green]" if won else "[red]Loses[/red]"
        )
        table.add_row(p.id, format_cards(p.hole_cards), result.hands[p.id].description, label)
    console.print(table)


@app.command()
def deck(
    seed: int | None = typer.Option(None, "--seed", "-s", help="Seed for a repeatable shuffle"),
):
    """Print a freshly shuffled deck."""
    rng = random.Random(seed) if seed is not None else None
    cards = shuffle_deck(create_deck(), rng)
    for i in range(0, len(cards), 13):
        console.print(format_cards(cards[i:i + 13]))


def _show_table(table: Table) -> None:
    lines = [f"[bold]Board:[/bold] {format_cards(table.community)}   "
             f"[bold]Pot:[/bold] {table.pot.total}   [dim]{table.street}[/dim]"]
    for p in table.players:
        tags = []
        if p.is_dealer:
            tags.append("BTN")
        if p.is_big_blind:
            tags.append("BB")
        if p.is_all_in:
            tags.append("ALL-IN")
        lines.append(
            f"{p.name} [dim]{' '.join(tags)}[/dim]: {p.chips} chips, bet {p.current_bet}"
        )
    console.print(Panel("\n".join(lines), expand=False))


def _prompt_action(table: Table, player: Player) -> Action | None:
    """Ask the current player for an action. Returns None if they quit."""
    options = table.available_actions()
    choices = [t.value for t in options.legal_types] + ["quit"]
    console.print(f"\n[bold]{player.name}[/bold] holds {format_cards(player.hole_cards)}")
    if options.call_amount:
        console.print(f"[dim]To call: {options.call_amount}[/dim]")

    choice = Prompt.ask("Action", choices=choices)
    if choice == "quit":
        return None
    action_type = ActionType(choice)
    if action_type != ActionType.RAISE:
        return Action(action_type)

    max_to = player.current_bet + player.chips
    while True:
        response = Prompt.ask(f"Raise to ({options.min_raise}-{max_to})", default=str(options.min_raise))
        try:
            return Action.raise_to(int(response))
        except ValueError:
            console.print("[red]Please enter a valid number[/red]")


@app.command()
def play(
    chips: int | None = typer.Option(None, "--chips", "-c", help="Starting chips per player"),
    small_blind: int | None = typer.Option(None, "--sb", help="Small blind"),
    big_blind: int | None = typer.Option(None, "--bb", help="Big blind"),
    seed: int | None = typer.Option(None, "--seed", "-s", help="Seed for repeatable shuffles"),
):
    """Hot-seat heads-up game for two players sharing one terminal."""
    config = get_config().game
    rng = random.Random(seed) if seed is not None else None
    try:
        match = Match.create(
            ["Player 1", "Player 2"],
            starting_chips=chips if chips is not None else config.starting_chips,
            small_blind=small_blind if small_blind is not None else config.small_blind,
            big_blind=big_blind if big_blind is not None else config.big_blind,
        )
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(Panel("[bold]Heads-up Hold'em[/bold]\n[dim]Type 'quit' at any prompt to stop[/dim]"))

    while match.status != MatchStatus.FINISHED:
        table = match.start_hand(rng=rng)
        console.print(f"\n[bold cyan]Hand #{table.hand_number}[/bold cyan]")
        while not table.is_complete:
            _show_table(table)
            player = table.current_player
            action = _prompt_action(table, player)
            if action is None:
                return
            try:
                match.act(player.id, action)
            except PokerError as e:
                console.print(f"[red]{e}[/red]")

        _show_table(table)
        if table.winning_hand:
            for p in table.players:
                console.print(f"{p.name}: {format_cards(p.hole_cards)}")
        winners = " & ".join(table.winners)
        hand = f" with {table.winning_hand}" if table.winning_hand else ""
        console.print(f"[green]{winners} {'split' if len(table.winners) > 1 else 'wins'} the pot{hand}[/green]")
        if match.status != MatchStatus.FINISHED and Prompt.ask("Next hand?", choices=["y", "n"], default="y") == "n":
            return

    console.print(Panel(f"[bold green]{match.winner_id} wins the match![/bold green]", expand=False))


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
