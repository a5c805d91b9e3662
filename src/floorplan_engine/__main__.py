"""Floor plan engine CLI.

Usage:
    python -m floorplan_engine <command> <file.json> [options]

All commands read JSON input and print JSON to stdout:
- place: room program → placed rooms + first-pass validation
- check-program: room program feasibility
- validate: floor plan geometry, door and window checks
- review: reachability and room-relationship review
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, TypeVar

import typer
from pydantic import BaseModel, ValidationError as ModelValidationError

from floorplan_engine import __version__
from floorplan_engine.generators.placement import place_rooms
from floorplan_engine.models.floorplan import FloorPlan
from floorplan_engine.models.rooms import RoomPlan
from floorplan_engine.validators.advisory import merge_advisory_issues, parse_advisory_response
from floorplan_engine.validators.geometry import (
    ValidationError,
    validate_adjacencies,
    validate_room_placement,
)
from floorplan_engine.validators.openings import validate_floor_plan
from floorplan_engine.validators.program import validate_room_plan
from floorplan_engine.validators.reachability import review_floor_plan

app = typer.Typer(
    name="floorplan_engine",
    help="Floor plan engine: place rooms, validate geometry, review circulation.",
    no_args_is_help=True,
)

ModelT = TypeVar("ModelT", bound=BaseModel)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _read(path: Path) -> str:
    """Read a UTF-8 text file, exiting with a JSON error on failure."""
    if not path.exists():
        _output({"ok": False, "error": f"File not found: {path}"})
        raise typer.Exit(1)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _output({"ok": False, "error": f"Cannot read {path}: {exc}"})
        raise typer.Exit(1)


def _load(path: Path, model: type[ModelT]) -> ModelT:
    """Load and validate a JSON file, exiting with a JSON error on failure."""
    text = _read(path)
    try:
        return model.model_validate_json(text)
    except ModelValidationError as exc:
        _output({"ok": False, "error": f"Invalid {model.__name__}: {exc}"})
        raise typer.Exit(1)


def _findings_json(errors: list[ValidationError]) -> dict:
    """Summarize validation findings."""
    details = []
    for e in errors:
        detail = {"severity": e.severity, "message": e.message}
        if e.element_type:
            detail["element_type"] = e.element_type
        if e.element_id:
            detail["element_id"] = e.element_id
        details.append(detail)
    return {
        "errors": sum(1 for e in errors if e.severity == "error"),
        "warnings": sum(1 for e in errors if e.severity == "warning"),
        "details": details,
    }


def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def place(program: Path = typer.Argument(..., help="Room program JSON file")):
    """Place rooms for a room program and validate the result."""
    plan = _load(program, RoomPlan)
    result = place_rooms(plan)
    errors = validate_room_placement(plan.plot, result.rooms)
    errors.extend(validate_adjacencies(result.rooms, plan.adjacencies))
    _output({
        "ok": True,
        "success": result.success,
        "rooms": [r.model_dump(mode="json") for r in result.rooms],
        "adjacencies": [a.model_dump(mode="json") for a in plan.adjacencies],
        "warnings": result.warnings,
        "validation": _findings_json(errors),
    })


@app.command("check-program")
def check_program(program: Path = typer.Argument(..., help="Room program JSON file")):
    """Check a room program for feasibility before placement."""
    plan = _load(program, RoomPlan)
    _output({"ok": True, "validation": _findings_json(validate_room_plan(plan))})


@app.command()
def validate(
    plan: Path = typer.Argument(..., help="Floor plan JSON file"),
    program: Optional[Path] = typer.Option(
        None, "--program", "-p", help="Room program whose adjacencies should be checked"
    ),
):
    """Run geometry, adjacency, door and window checks on a floor plan."""
    floor_plan = _load(plan, FloorPlan)
    adjacencies = _load(program, RoomPlan).adjacencies if program else None
    errors = validate_floor_plan(floor_plan, adjacencies)
    _output({"ok": True, "validation": _findings_json(errors)})


@app.command()
def review(
    plan: Path = typer.Argument(..., help="Floor plan JSON file"),
    advisory: Optional[Path] = typer.Option(
        None, "--advisory", "-a", help="External reviewer response to merge as suggestions"
    ),
):
    """Review circulation and room relationships of a floor plan."""
    floor_plan = _load(plan, FloorPlan)
    result = review_floor_plan(floor_plan)
    if advisory is not None:
        extra = parse_advisory_response(_read(advisory), floor_plan)
        result = merge_advisory_issues(result, extra)

    _output({
        "ok": True,
        "passed": result.passed,
        "summary": result.summary,
        "issues": [
            {
                "severity": i.severity,
                "code": i.code,
                "message": i.message,
                "affected_rooms": i.affected_rooms,
            }
            for i in result.issues
        ],
    })


@app.command()
def version() -> None:
    """Show version."""
    typer.echo(f"floorplan-engine v{__version__}")


if __name__ == "__main__":
    app()
