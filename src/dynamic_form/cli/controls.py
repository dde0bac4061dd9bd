"""CLI: dynform controls show|set|reset"""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _load_config() -> dict:
    from dynamic_form.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from dynamic_form.cli.main import _save_config
    _save_config(cfg)


def _saved_controls():
    from dynamic_form.cli.main import _saved_controls
    return _saved_controls()


@click.group()
def controls():
    """Default bulk controls used by `dynform render`."""


@controls.command("show")
def controls_show():
    """Show the saved controls."""
    current = _saved_controls()
    table = Table(title="Form controls")
    table.add_column("Control", style="bold")
    table.add_column("Value")
    table.add_row("all_required", str(current.all_required))
    table.add_row("inputs_disabled", str(current.inputs_disabled))
    hidden = sorted(v for v, shown in current.variant_visibility.items() if not shown)
    table.add_row("hidden variants", ", ".join(hidden) or "-")
    console.print(table)


@controls.command("set")
@click.option("--all-required/--no-all-required", default=None, help="Force every visible field required")
@click.option("--disable-inputs/--enable-inputs", default=None, help="Disable all input-like fields")
@click.option("--hide-variant", multiple=True, help="Hide every field of this variant")
@click.option("--show-variant", multiple=True, help="Show fields of this variant again")
def controls_set(all_required: Optional[bool], disable_inputs: Optional[bool], hide_variant, show_variant):
    """Update saved controls."""
    current = _saved_controls()
    update = {}
    if all_required is not None:
        update["all_required"] = all_required
    if disable_inputs is not None:
        update["inputs_disabled"] = disable_inputs
    current = current.model_copy(update=update)
    for variant in hide_variant:
        current = current.with_variant(variant, False)
    for variant in show_variant:
        current = current.with_variant(variant, True)

    cfg = _load_config()
    _save_config({**cfg, "controls": current.model_dump()})
    console.print("[green]Controls saved.[/green]")


@controls.command("reset")
def controls_reset():
    """Clear saved controls."""
    cfg = _load_config()
    cfg.pop("controls", None)
    _save_config(cfg)
    console.print("[green]Controls reset.[/green]")
