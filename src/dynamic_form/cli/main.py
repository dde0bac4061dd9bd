"""
dynamic-form CLI — `dynform` command.

Commands:
  dynform check <config>       Validate a form configuration
  dynform render <config>      Apply edits and show the visible fields
  dynform controls <cmd>       Saved default bulk controls
"""

import json
import logging
from pathlib import Path

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install dynamic-form[cli]")

from dynamic_form.models.controls import FormControls

console = Console()
CONFIG_FILE = Path.home() / ".dynform" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _saved_controls() -> FormControls:
    cfg = _load_config()
    try:
        return FormControls.model_validate(cfg.get("controls", {}))
    except ValueError:
        console.print(f"[yellow]Ignoring invalid controls in {CONFIG_FILE}[/yellow]")
        return FormControls()


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """dynform — render rule-driven forms from a JSON field list."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands from separate modules
from dynamic_form.cli.controls import controls
from dynamic_form.cli.render import check_cmd, render_cmd

main.add_command(check_cmd)
main.add_command(render_cmd)
main.add_command(controls)


if __name__ == "__main__":
    main()
