"""
cli.py - demonstration harness for the weighted trie
Features:
- Seeds sample words (or a word list file) with frequencies
- Prints ranked autocomplete suggestions in a Rich table
- Prints the serialized node structure as JSON
- Optional interactive prompt loop for trying prefixes
"""

import argparse
import logging
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table
from rich import box

from weighted_trie.core.errors import TrieArgumentError
from weighted_trie.core.trie import Trie
from weighted_trie.utils.config_manager import Config
from weighted_trie.utils.logger_utils import configure_logging, time_block
from weighted_trie.utils.serializer import to_json

logger = logging.getLogger(__name__)

# Ideally the trie is filled from real usage data, these are just for the demo.
SAMPLE_WORDS: List[Tuple[str, int]] = [
    ("network", 8),
    ("networking", 6),
    ("neural", 5),
    ("neuralnet", 4),
    ("node", 7),
    ("nodejs", 6),
    ("python", 10),
    ("pytest", 5),
    ("query", 6),
    ("queue", 4),
]


def load_words(path: str) -> List[Tuple[str, int]]:
    """
    Read `word [frequency]` lines. Blank lines and lines starting with # are skipped,
    a missing frequency means 1.
    """
    words = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.split()
            if len(parts) > 2:
                raise ValueError(f"{path}:{lineno}: expected 'word [frequency]', got {line!r}")
            try:
                freq = int(parts[1]) if len(parts) == 2 else 1
            except ValueError:
                raise ValueError(f"{path}:{lineno}: frequency {parts[1]!r} is not an integer") from None
            words.append((parts[0], freq))
    return words


class CLI:
    """Prints suggestions and snapshots for one seeded Trie."""

    def __init__(
        self,
        trie: Trie,
        console: Optional[Console] = None,
        json_indent: Optional[int] = None,
        config: Optional[Config] = None,
    ):
        self.trie = trie
        self.console = console or Console()
        self.json_indent = json_indent
        self.config = config or Config()

    def seed(self, words: Sequence[Tuple[str, int]]) -> None:
        with time_block(f"seed {len(words)} words"):
            for word, freq in words:
                self.trie.insert(word, freq)

    def show_suggestions(self, prefix: str, max_suggestions: int) -> None:
        self.console.print(f"Searching for auto-complete suggestions for '{escape(prefix or '')}':")
        suggestions = self.trie.autocomplete(prefix, max_suggestions)
        if not suggestions:
            self.console.print("[dim](no suggestions)[/dim]")
            return

        table = Table(title="Suggestions", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Frequency", justify="right", style="magenta")
        for i, (word, freq) in enumerate(suggestions, 1):
            table.add_row(str(i), escape(word), str(freq))
        self.console.print(table)

    def show_stats(self) -> None:
        nodes = sum(1 for _ in self.trie.walk())
        self.console.print(f"[cyan]words:[/cyan] {len(self.trie)}  [cyan]nodes:[/cyan] {nodes}")

    def show_json(self) -> None:
        self.console.print("Serialized Trie:")
        # soft_wrap keeps long JSON lines intact
        self.console.print(to_json(self.trie, indent=self.json_indent), soft_wrap=True, markup=False, highlight=False, emoji=False)

    # INTERACTIVE ---------------------------------------------------------
    def run(self, max_suggestions: int) -> None:
        """
        Prompt loop: a prefix prints its suggestions.
        Commands: /quit /stats /json /config
        """
        self.console.rule("[bold magenta]Weighted Trie[/bold magenta]")
        self.console.print("Commands: /quit /stats /json /config\n")
        while True:
            try:
                fragment = Prompt.ask("[green]prefix[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                break
            fragment = fragment.strip()
            if not fragment:
                continue
            if fragment == "/quit":
                break
            if fragment == "/stats":
                self.show_stats()
                continue
            if fragment == "/config":
                self.config.show(self.console)
                continue
            if fragment == "/json":
                self.show_json()
                continue
            if fragment.startswith("/"):
                self.console.print(f"[red]Unknown command:[/red] {escape(fragment)}")
                continue
            try:
                self.show_suggestions(fragment, max_suggestions)
            except TrieArgumentError as e:
                self.console.print(f"[red]Rejected:[/red] {escape(str(e))}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weighted-trie",
        description="Seed a weighted trie and print ranked autocomplete suggestions.",
    )
    parser.add_argument("--prefix", type=str, default=None, help="prefix to complete (config: prefix)")
    parser.add_argument("--max-suggestions", type=int, default=None, help="how many suggestions to show")
    parser.add_argument("--words", type=str, default=None, help="word list file, one 'word [frequency]' per line")
    parser.add_argument("--config", type=str, default=None, help="JSON config file")
    parser.add_argument("--no-json", action="store_true", help="don't print the serialized trie")
    parser.add_argument("--interactive", action="store_true", help="prompt for prefixes after the demo")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()

    cfg = Config(args.config)
    if args.prefix is not None:
        cfg.set("prefix", args.prefix)
    if args.max_suggestions is not None:
        cfg.set("max_suggestions", args.max_suggestions)

    cli = CLI(Trie(), console=console, json_indent=cfg.get("json_indent"), config=cfg)
    try:
        configure_logging("DEBUG" if args.verbose else cfg.get("log_level"), console=console)
        words = load_words(args.words) if args.words else SAMPLE_WORDS
        cli.seed(words)
        cli.show_suggestions(cfg.get("prefix"), cfg.get("max_suggestions"))
    except TrieArgumentError as e:
        console.print(f"[red]Rejected:[/red] {escape(str(e))}")
        return 2
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    if not args.no_json:
        cli.show_json()
    if args.interactive:
        cli.run(cfg.get("max_suggestions"))
    return 0
