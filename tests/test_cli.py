"""CLI commands via click's test runner."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dynamic_form.cli import main as cli_main

EVENT_FORM = str(Path(__file__).parent / "fixtures" / "event_registration.json")


@pytest.fixture(autouse=True)
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "dynform" / "config.json"
    monkeypatch.setattr(cli_main, "CONFIG_FILE", path)
    return path


@pytest.fixture
def runner():
    return CliRunner()


def render_json(runner, *args):
    result = runner.invoke(cli_main.main, ["render", EVENT_FORM, "--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


def test_check(runner):
    result = runner.invoke(cli_main.main, ["check", EVENT_FORM])
    assert result.exit_code == 0, result.output
    assert "Configuration OK" in result.output


def test_check_rejects_bad_config(runner, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps([{"variant": "Input", "name": "a"}, {"variant": "Input", "name": "a"}]))
    result = runner.invoke(cli_main.main, ["check", str(bad)])
    assert result.exit_code == 1
    assert "Duplicate field names" in result.output


def test_render_applies_edits_in_order(runner):
    out = render_json(
        runner,
        "--set", "event_type=conference",
        "--set", "ticket_type=vip",
        "--set", 'vip_perks={"gala_dinner": true}',
    )
    fields = {f["name"]: f for f in out["fields"]}
    assert fields["dietary_restrictions"]["required"] is True
    assert out["values"]["vip_perks"] == {"gala_dinner": True}
    assert "dietary_restrictions" in out["missing_required"]


def test_render_bulk_controls(runner):
    out = render_json(runner, "--all-required", "--disable-inputs", "--hide-variant", "Switch")
    names = [f["name"] for f in out["fields"]]
    assert "newsletter" not in names
    assert all(f["required"] for f in out["fields"])
    assert all(f["disabled"] for f in out["fields"])


def test_render_unknown_field(runner):
    result = runner.invoke(cli_main.main, ["render", EVENT_FORM, "--set", "nope=1"])
    assert result.exit_code == 1


def test_render_bad_edit_syntax(runner):
    result = runner.invoke(cli_main.main, ["render", EVENT_FORM, "--set", "no-equals-sign"])
    assert result.exit_code == 2


def test_render_table(runner):
    result = runner.invoke(cli_main.main, ["render", EVENT_FORM, "--set", "event_type=workshop"])
    assert result.exit_code == 0, result.output
    assert "workshop_topic" in result.output
    assert "Missing required" in result.output


def test_saved_controls_feed_render(runner, config_file):
    result = runner.invoke(cli_main.main, ["controls", "set", "--all-required", "--hide-variant", "Input"])
    assert result.exit_code == 0, result.output
    saved = json.loads(config_file.read_text())["controls"]
    assert saved["all_required"] is True
    assert saved["variant_visibility"] == {"Input": False}

    out = render_json(runner)
    assert [f["name"] for f in out["fields"]] == ["event_type", "newsletter"]
    assert all(f["required"] for f in out["fields"])

    result = runner.invoke(cli_main.main, ["controls", "show"])
    assert result.exit_code == 0
    assert "Input" in result.output

    runner.invoke(cli_main.main, ["controls", "reset"])
    assert "controls" not in json.loads(config_file.read_text())
