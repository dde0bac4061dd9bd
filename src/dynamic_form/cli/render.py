"""CLI: dynform check, dynform render"""

import json
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from dynamic_form.config import load_form_config
from dynamic_form.errors import DynamicFormError
from dynamic_form.store import FieldEdit, FormStateStore

console = Console()


def _saved_controls():
    from dynamic_form.cli.main import _saved_controls
    return _saved_controls()


def _parse_edit(raw: str) -> FieldEdit:
    """name=value, where value is JSON when it parses and a string otherwise."""
    name, sep, text = raw.partition("=")
    if not sep or not name:
        raise click.BadParameter(f"expected name=value, got {raw!r}", param_hint="--set")
    try:
        value: Any = json.loads(text)
    except json.JSONDecodeError:
        value = text
    return FieldEdit(name.strip(), value)


def _load(path: str):
    try:
        return load_form_config(path)
    except DynamicFormError as e:
        console.print(f"[red]{e}[/red]")
        if e.details and e.details.get("errors"):
            for err in e.details["errors"]:
                loc = ".".join(str(p) for p in err.get("loc", ()))
                console.print(f"  [dim]{loc}[/dim] {err.get('msg', '')}")
        raise SystemExit(1)


@click.command("check")
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
def check_cmd(config: str):
    """Validate a form configuration."""
    fields = _load(config)
    table = Table(title=f"{len(fields)} fields")
    table.add_column("Row", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Variant")
    table.add_column("Rules")
    for f in fields:
        rules = []
        if f.conditions:
            rules.append("conditions")
        if f.dynamic_props:
            rules.append("dynamicProps")
        if f.options_source:
            rules.append(f"options<-{f.options_source.field}")
        table.add_row(str(f.row_index), f.name, f.variant.value, ", ".join(rules))
    console.print(table)
    console.print("[green]Configuration OK.[/green]")


@click.command("render")
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.option("-s", "--set", "edits", multiple=True, help="Edit as name=value; applied in order")
@click.option("--all-required", is_flag=True, help="Force every visible field required")
@click.option("--disable-inputs", is_flag=True, help="Disable all input-like fields")
@click.option("--hide-variant", multiple=True, help="Hide every field of this variant")
@click.option("--json-output", "--json", is_flag=True)
def render_cmd(config: str, edits, all_required: bool, disable_inputs: bool, hide_variant, json_output: bool):
    """Apply edits to a fresh session and show the visible fields."""
    fields = _load(config)
    parsed = [_parse_edit(raw) for raw in edits]

    controls = _saved_controls()
    update = {}
    if all_required:
        update["all_required"] = True
    if disable_inputs:
        update["inputs_disabled"] = True
    controls = controls.model_copy(update=update)
    for variant in hide_variant:
        controls = controls.with_variant(variant, False)

    store = FormStateStore(fields, controls)
    try:
        store.apply(parsed)
    except DynamicFormError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    if json_output:
        click.echo(json.dumps({
            "values": store.values,
            "fields": [
                {"name": pf.name, **pf.effective.model_dump(mode="json")}
                for pf in store.projection
            ],
            "missing_required": store.missing_required(),
        }, indent=2))
        return

    table = Table(title=f"Visible fields ({len(store.projection)} of {len(fields)})")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Variant")
    table.add_column("Required")
    table.add_column("Disabled")
    table.add_column("Value")
    table.add_column("Options")
    values = store.values
    for pf in store.projection:
        table.add_row(
            pf.name,
            pf.field.variant.value,
            "yes" if pf.effective.required else "",
            "yes" if pf.effective.disabled else "",
            json.dumps(values.get(pf.name)),
            ", ".join(o.value for o in pf.effective.options),
        )
    console.print(table)

    missing = store.missing_required()
    if missing:
        console.print(f"[yellow]Missing required: {', '.join(missing)}[/yellow]")
