"""
cli.py - command line front end for the trie index
Features:
- Builds one Trie from a text file, then answers queries against it
- One-shot mode: `trie-autocompleter FILE VERB ARGS...`
- Interactive mode: one query per line until quit/EOF
- Per-verb latency readout (`stats`), rich tables and formatting
"""

import argparse
import shlex
import sys
import time
from typing import List, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.prompt import Prompt
from rich import box

from trie_autocompleter.cli.commands import build_registry
from trie_autocompleter.context.pipeline import ingest_file
from trie_autocompleter.core.completion_engine import CompletionEngine
from trie_autocompleter.core.frequency_ranker import FrequencyRanker
from trie_autocompleter.core.registry import UsageError
from trie_autocompleter.core.trie import Trie
from trie_autocompleter.utils.config_manager import Config
from trie_autocompleter.utils.logger_utils import log
from trie_autocompleter.utils.metrics_tracker import Metrics

BANNER = "Trie Autocompleter (type help for cmds)"
SESSION_CMDS = ("help", "stats", "config", "quit", "exit")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


class CLI:
    """Owns one Trie plus the query objects built on it for a whole session."""

    def __init__(
        self,
        cfg: Optional[Config] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        trie: Optional[Trie] = None,
        metrics_path: Optional[str] = None,
    ):
        self.cfg = cfg or Config()
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.trie = trie if trie is not None else Trie()
        self.engine = CompletionEngine(self.trie)
        self.ranker = FrequencyRanker(self.trie.word_counts)
        self.metrics = Metrics(metrics_path)
        self.running = True
        self._apply_config()

    def _apply_config(self):
        """Push the current settings into the engine and the verb table."""
        self.engine.cache_mirror = self.cfg["cache_mirror"]
        self.registry = build_registry(
            self.trie, self.engine, self.ranker,
            reverse_output=self.cfg["reverse_output"],
        )

    # LOADING ------------------------------------------------------------------
    def load(self, path) -> int:
        """
        Ingest a source file. A file that cannot be read is logged and
        leaves the trie as it was (possibly empty).
        """
        try:
            return ingest_file(self.trie, path, encoding=self.cfg["encoding"])
        except OSError as e:
            log.error(f"Error reading file: {e}")
            return 0

    # COMMANDS -----------------------------------------------------------------
    @staticmethod
    def split_line(line: str) -> List[str]:
        """
        Split a query line into words. Balanced quotes group as in a shell;
        a stray quote (e.g. "search don't") is kept as part of its word.
        """
        try:
            return shlex.split(line)
        except ValueError:
            return line.split()

    def execute(self, line: str) -> str:
        """Run one query line and return its output. Raises UsageError."""
        parts = self.split_line(line)
        if not parts:
            return ""
        return self.dispatch(parts[0], parts[1:])

    def dispatch(self, verb: str, args: Sequence[str]) -> str:
        t0 = time.perf_counter()
        out = self.registry.dispatch(verb, args)
        self.metrics.record(verb.lower(), time.perf_counter() - t0)
        return out

    def run_once(self, argv: Sequence[str]) -> int:
        """One-shot mode, returns the exit status."""
        try:
            out = self.dispatch(argv[0], argv[1:])
        except UsageError as e:
            log.debug(f"usage error: {e}")
            self.err_console.print(Text(str(e), style="red"))
            return EXIT_USAGE
        finally:
            self.metrics.save()
        self._emit(out)
        return EXIT_OK

    # INTERACTIVE LOOP ---------------------------------------------------------
    def run(self):
        """
        Main interactive loop:
        - reads one line at a time
        - session commands (help/stats/config/quit) are handled here
        - anything else goes to the registry
        """
        self.console.print(f"[bold magenta]{BANNER}[/bold magenta]")
        while self.running:
            try:
                line = self.console.input("[green]>> [/green]").strip()
            except (EOFError, KeyboardInterrupt):
                self.running = False
                break
            if not line:
                continue
            if self._session_command(line):
                continue
            try:
                self._emit(self.execute(line))
            except UsageError as e:
                self.console.print(Text(str(e), style="red"))
        self.metrics.save()

    def _session_command(self, line: str) -> bool:
        parts = self.split_line(line)
        verb = parts[0].lower()
        if verb not in SESSION_CMDS:
            return False
        if verb in ("quit", "exit"):
            self.running = False
        elif verb == "help":
            self._show_help()
        elif verb == "stats":
            self._show_stats()
        elif verb == "config":
            self._config_command(parts[1:])
        return True

    def _config_command(self, args: Sequence[str]):
        """`config` shows every option, `config <key> <value>` changes one."""
        if not args:
            self.cfg.show(self.console)
            return
        if len(args) != 2:
            self.console.print(Text("usage: config [<key> <value>]", style="red"))
            return
        try:
            self.cfg.set(args[0], args[1])
        except (KeyError, ValueError) as e:
            self.console.print(Text(str(e).strip("'\""), style="red"))
            return
        self._apply_config()
        if args[0] == "log_path":
            log.path = self.cfg["log_path"]
        elif args[0] in ("log_level", "use_color"):
            log.configure(use_color=self.cfg["use_color"], level=self.cfg["log_level"])
        self.console.print(f"{args[0]} = {self.cfg[args[0]]}", markup=False, highlight=False)

    # DISPLAY ------------------------------------------------------------------
    def _emit(self, text: str):
        if text:
            # stored words may contain '[' so markup stays off; no re-wrapping
            self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def _show_help(self):
        for usage in self.registry.usage_lines():
            self.console.print(usage, markup=False, highlight=False)
        self.console.print("help, stats, config [<key> <value>], quit", markup=False, highlight=False)

    def _show_stats(self):
        table = Table(title="Query Latency", box=box.SIMPLE, show_edge=False)
        table.add_column("Command", style="cyan")
        table.add_column("Calls", justify="right")
        table.add_column("Avg ms", justify="right", style="magenta")
        for key, calls, avg in self.metrics.rows():
            table.add_row(key, str(calls), f"{avg * 1000:.3f}")
        table.add_row("[dim]words[/dim]", str(self.trie.total), "")
        table.add_row("[dim]distinct[/dim]", str(len(self.trie)), "")
        self.console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trie-autocompleter",
        description="Build a word trie from a text file and query it.",
    )
    parser.add_argument("--config", type=str, default=None, help="JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--no-color", action="store_true", help="plain log lines")
    parser.add_argument(
        "--metrics", type=str, default=None,
        help="JSON file that keeps query latency totals across runs",
    )
    parser.add_argument("source", nargs="?", help="text file to index (prompted if omitted)")
    parser.add_argument(
        "command", nargs=argparse.REMAINDER,
        help="search|autocomplete|reverse|full|topk and its args; omit for a session",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    log.configure(
        path=cfg["log_path"],
        use_color=cfg["use_color"] and not args.no_color,
        level="DEBUG" if args.verbose else cfg["log_level"],
    )

    cli = CLI(cfg=cfg, metrics_path=args.metrics)
    source = args.source
    if source is None:
        try:
            source = Prompt.ask("Source file", console=cli.console).strip()
        except (EOFError, KeyboardInterrupt):
            log.error("no source file given")
            return EXIT_ERROR
    cli.load(source)

    if args.command:
        return cli.run_once(args.command)
    cli.run()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
