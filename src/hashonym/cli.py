"""Command line interface for hashonym."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from .engine import Hashonym
from .errors import HashonymError
from .settings import HashonymSettings

app = typer.Typer(help="Copy files to content-addressed names of minimal length.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("map")
def map_files(
    files: list[Path] = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Files to give hashed names."
    ),
    output_dir: Optional[Path] = typer.Option(
        None, help="Directory that receives the hashed files."
    ),
    min_hash_len: Optional[int] = typer.Option(
        None, min=0, help="Never use fewer hash characters than this."
    ),
    ext: Optional[bool] = typer.Option(
        None, "--ext/--no-ext", help="Keep the source file extension on hashed names."
    ),
    algorithm: Optional[str] = typer.Option(None, help="hashlib algorithm used for digests."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Compute names without copying."),
    manifest: Optional[Path] = typer.Option(
        None, dir_okay=False, help="Write the source to destination mapping as JSON."
    ),
) -> None:
    """Resolve hashed destination names and copy FILES to them."""

    overrides = {
        key: value
        for key, value in {
            "output_dir": output_dir,
            "min_hash_len": min_hash_len,
            "preserve_ext": ext,
            "algorithm": algorithm,
        }.items()
        if value is not None
    }
    try:
        settings = HashonymSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    engine = Hashonym.from_config(settings.engine_config())
    engine.register(files)

    run_started_at = datetime.utcnow()
    try:
        mapping = asyncio.run(engine.resolve(dry_run=dry_run))
    except HashonymError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    for source, destination in mapping.items():
        typer.echo(f"{source} -> {destination}")

    result = engine.last_result
    if dry_run or result is None:
        summary = "dry run"
        counts = {"written": 0, "skipped": 0}
    else:
        summary = f"{result.written} written, {result.skipped} skipped"
        counts = result.to_dict()

    if manifest is not None:
        payload = {
            "output_dir": str(settings.output_dir),
            "hash_length": engine.hash_length,
            "dry_run": dry_run,
            **counts,
            "run_started_at": run_started_at.isoformat(timespec="seconds") + "Z",
            "mapping": {str(source): str(destination) for source, destination in mapping.items()},
        }
        manifest.parent.mkdir(parents=True, exist_ok=True)
        manifest.write_text(json.dumps(payload, indent=2, sort_keys=True))

    typer.echo(
        f"Mapped {len(mapping)} file(s) with hash length {engine.hash_length} ({summary})"
    )
