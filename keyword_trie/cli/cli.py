"""
cli.py - command line tool for inspecting a keyword trie
Features:
- Loads keys (one per line) from a text file into a TrieSet
- check: exact vs boundary-prefix membership per key, as a table
- list: enumerate stored keys in trie order
- stats: key/node counts and the key file load time
- shell: interactive add/remove/query loop
- Uses Rich for tables and formatting, JSON config for defaults
"""

import argparse
import os
import sys
from typing import Iterable, List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text
from rich import box

from keyword_trie.core.trie_set import TrieSet
from keyword_trie.utils.config_manager import Config
from keyword_trie.utils.logger_utils import Log

# initialise console for rich output
console = Console()

# marker for "not given on the command line, use the config"
_FROM_CONFIG = object()

SHELL_HELP = "Commands: /add KEY /remove KEY /has KEY /prefix P /list /count /clear /quit"


def read_keys(path: str) -> List[str]:
    """Read one key per line, skipping blank lines and #comments."""
    keys = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            key = line.strip()
            if not key or key.startswith("#"):
                continue
            keys.append(key)
    return keys


class CLI:
    """Keyword trie inspector: owns the TrieSet, config and log for one key file."""

    def __init__(self, keys_path: str, separator=_FROM_CONFIG, config_path: str = "config.json",
                 out: Optional[Console] = None):
        self.out = out or console
        # Config opens its log at the configured log_path, the CLI shares it
        self.cfg = Config(config_path)
        self.log = self.cfg.log
        self.keys_path = keys_path
        self.separator = self.cfg.get("separator") if separator is _FROM_CONFIG else separator
        self.trie = TrieSet(separator=self.separator)
        self.running = True
        self.load_time = None

    # LOADING -------------------------------------------------------------------
    def load(self) -> int:
        """Fill the trie from the key file. Returns the number of distinct keys."""
        with Log.time_block("load keys", path=self.log.path, echo=False) as timer:
            keys = read_keys(self.keys_path)
            self.trie.update(keys)
        self.load_time = timer.elapsed
        self.log.info(f"[CLI] loaded {len(self.trie)} keys ({len(keys)} lines) from {self.keys_path}")
        return len(self.trie)

    # COMMANDS ------------------------------------------------------------------
    def check(self, keys: Iterable[str]) -> Table:
        table = Table(title="Membership", box=box.SIMPLE, show_edge=False)
        table.add_column("Key", style="bold")
        table.add_column("Exact", justify="center")
        table.add_column("Prefix", justify="center")
        for key in keys:
            table.add_row(Text(key), self._mark(key in self.trie), self._mark(self.trie.contains_prefix(key)))
        self.out.print(table)
        return table

    def list_keys(self, limit: Optional[int] = None) -> List[str]:
        limit = self.cfg.get("max_results") if limit is None else limit
        shown = []
        for key in self.trie:
            if len(shown) >= limit:
                break
            shown.append(key)
        for key in shown:
            self.out.print(key, markup=False, highlight=False)
        if len(self.trie) > len(shown):
            self.out.print(f"[dim]... {len(self.trie) - len(shown)} more[/dim]")
        return shown

    def stats(self) -> Table:
        t = Table(title="Trie Stats", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        t.add_row("Separator", repr(self.separator) if self.separator is not None else "(none)")
        t.add_row("Keys", str(len(self.trie)))
        t.add_row("Nodes", str(self.trie.node_count()))
        t.add_row("Load time", "-" if self.load_time is None else f"{self.load_time:.3f}s")
        self.out.print(t)
        return t

    # SHELL ---------------------------------------------------------------------
    def run_shell(self):
        """
        Interactive loop:
        - /commands mutate or query the trie
        - any other input is checked as a key (exact + prefix)
        """
        self.out.rule("[bold magenta]Keyword Trie[/bold magenta]")
        self.out.print(f"[cyan]{len(self.trie)} keys loaded from {self.keys_path}[/cyan]")
        self.out.print(SHELL_HELP + "\n")

        while self.running:
            try:
                line = Prompt.ask("[green]key[/green]", default="", console=self.out)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            line = line.strip()
            if not line:
                continue
            if line.startswith("/"):
                self._handle_command(line)
            else:
                self.check([line])

    def _handle_command(self, line: str):
        cmd, _, arg = line.partition(" ")
        arg = arg.strip()

        if cmd == "/quit":
            self._exit()
            return
        if cmd == "/list":
            self.list_keys()
            return
        if cmd == "/count":
            self.out.print(f"{len(self.trie)} keys")
            return
        if cmd == "/clear":
            self.trie.clear()
            self.log.info("[CLI] cleared all keys")
            self.out.print("[yellow]All keys cleared.[/yellow]")
            return

        if cmd in ("/add", "/remove", "/has", "/prefix") and not arg:
            self.out.print(f"[red]{cmd} needs a key[/red]")
            return
        if cmd == "/add":
            before = len(self.trie)
            self.trie.add(arg)
            if len(self.trie) > before:
                self.log.info(f"[CLI] added {arg}")
                self.out.print(f"[green]Added:[/green] {arg}")
            else:
                self.out.print(f"[dim]{arg} already present[/dim]")
            return
        if cmd == "/remove":
            if self.trie.remove(arg):
                self.log.info(f"[CLI] removed {arg}")
                self.out.print(f"[green]Removed:[/green] {arg}")
            else:
                self.out.print(f"[yellow]Not found:[/yellow] {arg}")
            return
        if cmd == "/has":
            self.out.print(f"{arg}: {self._mark(arg in self.trie)}")
            return
        if cmd == "/prefix":
            self.out.print(f"{arg}: {self._mark(self.trie.contains_prefix(arg))}")
            return

        self.out.print(f"[red]Unknown command:[/red] {cmd}")

    def _exit(self):
        self.out.rule("[red]Exiting[/red]")
        self.running = False

    @staticmethod
    def _mark(flag: bool) -> str:
        return "[green]yes[/green]" if flag else "[red]no[/red]"


# ENTRY POINT -------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="keyword-trie", description="Inspect a set of keys stored in a trie.")
    p.add_argument("--config", default="config.json", help="JSON config file (created with defaults if missing)")
    sep = p.add_mutually_exclusive_group()
    sep.add_argument("--separator", help="single-character token separator (overrides config)")
    sep.add_argument("--no-separator", action="store_true", help="treat every character as a boundary")
    p.add_argument("keyfile", help="text file with one key per line")

    sub = p.add_subparsers(dest="command", required=True)
    check = sub.add_parser("check", help="exact and prefix membership of keys")
    check.add_argument("keys", nargs="+")
    lst = sub.add_parser("list", help="list stored keys")
    lst.add_argument("--limit", type=int, default=None)
    sub.add_parser("stats", help="key and node counts")
    sub.add_parser("shell", help="interactive session")
    return p


def main(argv: Optional[List[str]] = None, out: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    out = out or console

    if args.no_separator:
        separator = None
    elif args.separator is not None:
        if len(args.separator) != 1:
            parser.error("--separator must be a single character")
        separator = args.separator
    else:
        separator = _FROM_CONFIG

    if not os.path.exists(args.keyfile):
        out.print(Panel(f"Key file not found: {args.keyfile}", title="Error", border_style="red"))
        return 1

    cli = CLI(args.keyfile, separator=separator, config_path=args.config, out=out)
    cli.load()

    if args.command == "check":
        cli.check(args.keys)
    elif args.command == "list":
        cli.list_keys(args.limit)
    elif args.command == "stats":
        cli.stats()
    elif args.command == "shell":
        cli.run_shell()
    return 0


if __name__ == "__main__":
    sys.exit(main())
