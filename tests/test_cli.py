# tests/test_cli.py - command handlers, session loop and main()

import io
import json

import pytest
from rich.console import Console

from trie_autocompleter.cli.cli import CLI, EXIT_OK, EXIT_USAGE, main
from trie_autocompleter.core.registry import UsageError
from trie_autocompleter.utils.config_manager import Config

SOURCE = "Cat car cart dog\ncats rats bats the the THE end; car\n"


def make_console():
    buf = io.StringIO()
    return Console(file=buf, width=200, color_system=None), buf


@pytest.fixture
def source(tmp_path):
    p = tmp_path / "source.txt"
    p.write_text(SOURCE, encoding="utf-8")
    return p


@pytest.fixture
def cli(source):
    out, _ = make_console()
    err, _ = make_console()
    c = CLI(cfg=Config(), console=out, err_console=err)
    c.load(source)
    return c


def test_load_counts_words(cli):
    assert cli.trie.total == 12
    assert cli.trie.count("the") == 3


def test_load_missing_file_leaves_empty_trie(tmp_path, capsys):
    out, _ = make_console()
    c = CLI(cfg=Config(), console=out)
    assert c.load(tmp_path / "missing.txt") == 0
    assert len(c.trie) == 0
    assert "Error reading file" in capsys.readouterr().err
    assert c.execute("autocomplete a") == "No words"
    assert c.execute("topk 3") == ""


def test_search_is_case_insensitive(cli):
    assert cli.execute("search CAT") == "true"
    assert cli.execute("search ca") == "false"


def test_autocomplete(cli):
    assert cli.execute("autocomplete ca") == "car, cart, cat, cats"
    assert cli.execute("autocomplete zz") == "No words"


def test_autocomplete_applies_display_rule(cli):
    assert cli.execute("autocomplete en") == "end"


def test_reverse(cli):
    assert cli.execute("reverse ats") == "bats, cats, rats"
    assert cli.execute("reverse qq") == "No words"


def test_reverse_mirrored_config(source):
    cfg = Config()
    cfg.data["reverse_output"] = "mirrored"
    out, _ = make_console()
    c = CLI(cfg=cfg, console=out)
    c.load(source)
    assert c.execute("reverse ats") == "stab, stac, star"


def test_full(cli):
    assert cli.execute("full ca t") == "cart\ncat"
    assert cli.execute("full ca z") == ""
    assert cli.execute("full xy t") == "No words found with prefix: xy"


def test_topk(cli):
    assert cli.execute("topk 2") == "the: 3\ncar: 2"
    assert cli.execute("topk 0") == ""


@pytest.mark.parametrize("line", ["topk -1", "topk two", "search", "full ca", "bogus x"])
def test_usage_errors(cli, line):
    with pytest.raises(UsageError):
        cli.execute(line)


def test_metrics_recorded(cli):
    cli.execute("search cat")
    cli.execute("SEARCH dog")
    rows = {k: n for k, n, _ in cli.metrics.rows()}
    assert rows == {"search": 2}


def test_session_loop(cli, monkeypatch):
    lines = iter(["", "autocomplete do", "nope", "help", "stats", "config", "quit", "search cat"])
    monkeypatch.setattr(cli.console, "input", lambda *a, **k: next(lines))
    cli.run()
    text = cli.console.file.getvalue()
    assert "dog" in text
    assert "unknown command: nope" in text
    assert "full <prefix> <suffix>" in text
    assert "Query Latency" in text
    assert "cache_mirror" in text
    assert "true" not in text  # loop stopped at quit
    assert cli.running is False


def test_session_ends_on_eof(cli, monkeypatch):
    def boom(*a, **k):
        raise EOFError

    monkeypatch.setattr(cli.console, "input", boom)
    cli.run()
    assert cli.running is False


def test_run_once_usage_error_exit_code(cli):
    assert cli.run_once(["topk", "-5"]) == EXIT_USAGE
    assert "k must be >= 0" in cli.err_console.file.getvalue()
    assert cli.run_once(["search", "dog"]) == EXIT_OK
    assert cli.console.file.getvalue().strip() == "true"


def test_main_one_shot(source, capsys):
    assert main(["--no-color", str(source), "autocomplete", "car"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "car, cart"


def test_main_topk_lines(source, capsys):
    assert main([str(source), "topk", "3"]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["the: 3", "car: 2", "bats: 1"]


def test_main_usage_error(source, capsys):
    assert main([str(source), "full", "ca"]) == EXIT_USAGE
    assert "usage: full <prefix> <suffix>" in capsys.readouterr().err


def test_main_with_config_file(source, tmp_path, capsys):
    cfg_path = tmp_path / "cfg.json"
    cfg_path.write_text('{"reverse_output": "mirrored", "use_color": false}', encoding="utf-8")
    assert main(["--config", str(cfg_path), str(source), "reverse", "ats"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "stab, stac, star"


def test_reverse_applies_display_rule(cli):
    assert cli.execute("reverse ;") == "end"


def test_reverse_mirrored_display_rule(source):
    cfg = Config()
    cfg.data["reverse_output"] = "mirrored"
    out, _ = make_console()
    c = CLI(cfg=cfg, console=out)
    c.load(source)
    # ';' leads the mirrored string, so nothing is dropped
    assert c.execute("reverse ;") == ";dne"


def test_apostrophe_words_can_be_queried(tmp_path):
    p = tmp_path / "quotes.txt"
    p.write_text("Don't stop\nit's fine\n", encoding="utf-8")
    out, _ = make_console()
    c = CLI(cfg=Config(), console=out)
    c.load(p)
    assert c.execute("search don't") == "true"
    assert c.execute("autocomplete don") == "don't"
    assert c.execute("reverse 's") == "it's"


def test_balanced_quotes_still_group(cli):
    assert cli.execute('full "ca" t') == "cart\ncat"
    assert cli.execute('search "open') == "false"


def test_session_apostrophe_query(tmp_path, monkeypatch):
    p = tmp_path / "quotes.txt"
    p.write_text("don't stop\n", encoding="utf-8")
    out, _ = make_console()
    c = CLI(cfg=Config(), console=out)
    c.load(p)
    lines = iter(["search don't", "quit"])
    monkeypatch.setattr(c.console, "input", lambda *a, **k: next(lines))
    c.run()
    assert c.console.file.getvalue().splitlines()[-1] == "true"


def test_session_config_set_changes_reverse_output(cli, monkeypatch):
    lines = iter([
        "reverse ats",
        "config reverse_output mirrored",
        "reverse ats",
        "config cache_mirror off",
        "config theme dark",
        "config reverse_output",
        "quit",
    ])
    monkeypatch.setattr(cli.console, "input", lambda *a, **k: next(lines))
    cli.run()
    text = cli.console.file.getvalue()
    assert "bats, cats, rats" in text
    assert "reverse_output = mirrored" in text
    assert "stab, stac, star" in text
    assert cli.engine.cache_mirror is False
    assert "No such option: theme" in text
    assert "usage: config [<key> <value>]" in text


def test_session_config_bad_value_keeps_setting(cli, monkeypatch):
    lines = iter(["config log_level loud", "quit"])
    monkeypatch.setattr(cli.console, "input", lambda *a, **k: next(lines))
    cli.run()
    assert "log_level must be one of" in cli.console.file.getvalue()
    assert cli.cfg["log_level"] == "INFO"


def test_main_metrics_file_accumulates(source, tmp_path, capsys):
    mpath = tmp_path / "metrics.json"
    assert main(["--metrics", str(mpath), str(source), "search", "cat"]) == EXIT_OK
    assert main(["--metrics", str(mpath), str(source), "search", "dog"]) == EXIT_OK
    data = json.loads(mpath.read_text(encoding="utf-8"))
    assert data["search"]["count"] == 2


@pytest.mark.parametrize(
    "cfg_text",
    ['{"log_level": "verbose"}', '{"log_level": 10}', '{"use_color": "yes", "cache_mirror": 1}'],
)
def test_main_bad_config_values_fall_back(source, tmp_path, capsys, cfg_text):
    cfg_path = tmp_path / "cfg.json"
    cfg_path.write_text(cfg_text, encoding="utf-8")
    assert main(["--config", str(cfg_path), str(source), "search", "cat"]) == EXIT_OK
    captured = capsys.readouterr()
    assert captured.out.strip() == "true"
    assert "config" in captured.err and "using" in captured.err
