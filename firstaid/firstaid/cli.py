from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from .followup import get_contextual_suggestions, get_follow_up_questions
from .knowledge_base import GUIDANCE_TABLE
from .matcher import KeywordTable
from .resolver import resolve_guidance_detailed
from .rules_loader import build_guidance_table, load_knowledge_dir
from .schema import PersonalizationContext
from .supplies import at_least, get_supply_recommendations
from .validator import audit_all, default_tables

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log matching decisions")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_profile(profile: Optional[str]) -> Optional[PersonalizationContext]:
    if not profile:
        return None
    try:
        data = json.loads(Path(profile).read_text(encoding="utf-8"))
        return PersonalizationContext(**data)
    except (OSError, ValueError, ValidationError) as e:
        typer.echo(f"Error loading profile {profile}: {e}", err=True)
        raise typer.Exit(code=1)


def _load_table(kb: Optional[str]) -> KeywordTable[str]:
    if not kb:
        return GUIDANCE_TABLE
    try:
        return build_guidance_table(load_knowledge_dir(kb))
    except (OSError, ValueError) as e:
        typer.echo(f"Error loading knowledge packs from {kb}: {e}", err=True)
        raise typer.Exit(code=1)


@app.command("init-profile")
def cli_init_profile(out: str = typer.Option("profile.example.json", "--out")):
    example = {
        "full_name": "Alex Example",
        "age": "67",
        "sex": "male",
        "blood_group": "O+",
        "conditions": "heart disease, type 2 diabetes",
        "allergies": "penicillin",
        "medications": "aspirin 75mg, metformin",
        "emergency_contact": "Sam Example",
        "emergency_phone": "555-0100",
    }
    Path(out).write_text(json.dumps(example, indent=2), encoding="utf-8")
    typer.echo(out)


@app.command("guide")
def cli_guide(
    text: str = typer.Argument(..., help="Emergency description"),
    profile: Optional[str] = typer.Option(None, "--profile", help="Path to personal medical profile JSON"),
    kb: Optional[str] = typer.Option(None, "--kb", help="Directory of extra knowledge pack JSON files"),
    as_json: bool = typer.Option(False, "--json", help="Print the full resolution as JSON"),
):
    """Print first-aid guidance for an emergency description."""
    context = _load_profile(profile)
    table = _load_table(kb)
    result = resolve_guidance_detailed(text, context, table=table)
    if as_json:
        typer.echo(json.dumps(result.model_dump(), indent=2))
    else:
        typer.echo(result.output)


@app.command("questions")
def cli_questions(
    text: str = typer.Argument(..., help="Emergency description"),
    suggestions: bool = typer.Option(False, "--suggestions", help="Show contextual suggestions instead"),
):
    """Print follow-up questions for an emergency description."""
    questions = get_contextual_suggestions(text) if suggestions else get_follow_up_questions(text)
    for i, q in enumerate(questions, start=1):
        typer.echo(f"{i}. {q}")


@app.command("supplies")
def cli_supplies(
    hint: str = typer.Argument(..., help="Emergency type or category hint"),
    guidance: Optional[str] = typer.Option(None, "--guidance", help="Resolved guidance text"),
    limit: Optional[int] = typer.Option(None, "--limit", min=0, help="Show only the top N items"),
    min_urgency: str = typer.Option("normal", "--min-urgency", help="normal, recommended or critical"),
    as_json: bool = typer.Option(False, "--json"),
):
    """Print recommended supplies, most urgent first."""
    if min_urgency not in ("normal", "recommended", "critical"):
        typer.echo("Error: --min-urgency must be 'normal', 'recommended' or 'critical'", err=True)
        raise typer.Exit(code=1)
    items = at_least(get_supply_recommendations(hint, guidance), min_urgency)  # type: ignore[arg-type]
    if limit is not None:
        items = items[:limit]
    if as_json:
        typer.echo(json.dumps([i.model_dump() for i in items], indent=2))
        return
    for item in items:
        typer.echo(f"[{item.urgency}] {item.name} - ${item.price:.2f}: {item.description}")


@app.command("validate-kb")
def cli_validate_kb(
    kb: Optional[str] = typer.Option(None, "--kb", help="Directory of extra knowledge pack JSON files"),
    show_shadowed: bool = typer.Option(False, "--show-shadowed", help="List shadowed keys"),
):
    """Audit the keyword tables."""
    tables = list(default_tables())
    if kb:
        tables[0] = _load_table(kb)
    report = audit_all(tables)
    for t in report["tables"]:
        status = "ok" if t["summary_pass"] else "FAILED"
        typer.echo(f"{t['table']}: {t['keys']} keys, {len(t['shadowed_keys'])} shadowed, {status}")
        if show_shadowed:
            for s in t["shadowed_keys"]:
                typer.echo(f"   {s['key']!r} shadowed by {s['shadowed_by']!r}")
    if not report["summary_pass"]:
        typer.echo(json.dumps(report, indent=2))
        raise typer.Exit(code=2)


@app.command("version")
def cli_version():
    from importlib.metadata import PackageNotFoundError, version as _pkg_version

    try:
        typer.echo(_pkg_version("firstaid"))
    except PackageNotFoundError:
        from . import __version__
        typer.echo(__version__)
