import runpy
from pathlib import Path

import pytest

from solid_demos import cli
from solid_demos.runner import run_from_config as rfc

QUICKSTART = Path(__file__).resolve().parents[1] / "demos" / "demo_quickstart.py"


@pytest.mark.parametrize(
    "cmd, first_line",
    [
        ("srp", "Dipping the Chocolate Chip cookie into the milk and savoring that sweet taste!"),
        ("ocp", "Tuning the guitar strings..."),
        ("lsp", "Whiskers says:"),
        ("isp", "WalkingRobot: clank, clank, clank across the floor."),
        ("dip", "Some sick ice cream!"),
    ],
)
def test_cli_single_demo(cmd, first_line, capsys):
    assert cli.main([cmd]) == 0
    assert capsys.readouterr().out.splitlines()[0] == first_line


def test_cli_all_with_banner_runs_in_order(capsys):
    assert cli.main(["all", "--banner"]) == 0
    banners = [line for line in capsys.readouterr().out.splitlines() if line.startswith("===")]
    assert banners == [f"=== {d.upper()} ===" for d in rfc.DEMO_ORDER]


def test_cli_requires_subcommand():
    with pytest.raises(SystemExit):
        cli.main([])


def test_run_rejects_unknown_demo():
    with pytest.raises(SystemExit, match="Unknown demo: yagni"):
        rfc.run("yagni")


def test_run_from_config_uses_listed_order(tmp_path, capsys):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("demos: [dip, srp]\nbanner: true\n", encoding="utf-8")

    assert rfc.main(["--config", str(cfg)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "=== DIP ==="
    assert "=== SRP ===" in lines
    assert lines[-1].startswith("Dipping the Chocolate Chip cookie")


def test_run_from_config_defaults_to_all_demos(tmp_path, capsys):
    cfg = tmp_path / "empty.yaml"
    cfg.write_text("", encoding="utf-8")

    assert rfc.main(["--config", str(cfg)]) == 0
    out = capsys.readouterr().out
    assert "Meow!" in out
    assert "===" not in out


def test_run_from_config_rejects_non_list(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("demos: srp\n", encoding="utf-8")

    with pytest.raises(SystemExit, match="must be a list"):
        rfc.main(["--config", str(cfg)])


@pytest.mark.parametrize(
    "text",
    [
        "- srp\n- dip\n",
        "just a string\n",
    ],
)
def test_run_from_config_rejects_non_mapping(text, tmp_path, capsys):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text(text, encoding="utf-8")

    with pytest.raises(SystemExit, match="must be a mapping"):
        rfc.main(["--config", str(cfg)])
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("entries", ["[srp, 5]", "[srp, yagni]"])
def test_run_from_config_checks_entries_before_running(entries, tmp_path, capsys):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text(f"demos: {entries}\nbanner: true\n", encoding="utf-8")

    with pytest.raises(SystemExit, match="Unknown demo"):
        rfc.main(["--config", str(cfg)])
    assert capsys.readouterr().out == ""


def test_run_from_config_empty_argv_does_not_read_host_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog", "--config", "does-not-exist.yaml"])
    with pytest.raises(SystemExit) as excinfo:
        rfc.main([])
    # argparse reports the missing --config with exit status 2
    assert excinfo.value.code == 2


def test_quickstart_runs_every_demo_with_banners(capsys):
    runpy.run_path(str(QUICKSTART), run_name="__main__")
    lines = capsys.readouterr().out.splitlines()
    banners = [line for line in lines if line.startswith("===")]
    assert banners == [f"=== {d.upper()} ===" for d in rfc.DEMO_ORDER]
    assert "Some sick ice cream!" in lines
