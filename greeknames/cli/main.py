"""
Command-line interface: correct, transliterate, batch.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

import typer
from pydantic import ValidationError
from tqdm import tqdm

from greeknames.core.models import CorrectionError, CorrectionOptions, CorrectionResult
from greeknames.corrector import get_default_corrector

app = typer.Typer(add_completion=False, no_args_is_help=True)

logger = logging.getLogger(__name__)


def _build_options(target_case: Optional[str], fix_errors: bool) -> CorrectionOptions:
    try:
        return CorrectionOptions(target_case=target_case, fix_common_errors=fix_errors)
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid target case {target_case!r}", param_hint="--target-case") from exc


def _to_json(outcome: Union[CorrectionResult, CorrectionError]) -> str:
    return json.dumps(outcome.model_dump(by_alias=True), ensure_ascii=False)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def correct(
    name: str = typer.Argument(..., help="Name in Greek script or Latin transliteration"),
    target_case: Optional[str] = typer.Option(
        None, "--target-case", "-c", help="Decline into nominative/genitive/accusative/vocative"
    ),
    fix_errors: bool = typer.Option(False, "--fix-errors/--no-fix-errors", help="Fix common misspelled endings"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
) -> None:
    options = _build_options(target_case, fix_errors)
    result = get_default_corrector().correct_name(name, options)

    if isinstance(result, CorrectionError):
        typer.echo(result.error, err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(_to_json(result))
        return

    typer.echo(f"Corrected: {result.corrected}")
    typer.echo(f"Greek script: {result.greek_script}")
    typer.echo(f"Latin transliteration: {result.latin_transliteration}")
    typer.echo(f"Gender: {result.gender}")
    typer.echo(f"Case: {result.current_case}")
    typer.echo(f"Confidence: {result.confidence * 100:.1f}%")


@app.command()
def transliterate(
    text: str = typer.Argument(..., help="Text to transliterate"),
    to: Optional[str] = typer.Option(None, "--to", "-t", help="Target script (greek/latin); default is the other one"),
) -> None:
    try:
        output = get_default_corrector().transliterator.transliterate(text, to)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--to") from exc
    typer.echo(output)


@app.command()
def batch(
    input_path: Path = typer.Argument(..., exists=True, readable=True, help="File with one name per line"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write JSON Lines here instead of stdout"),
    target_case: Optional[str] = typer.Option(None, "--target-case", "-c"),
    fix_errors: bool = typer.Option(False, "--fix-errors/--no-fix-errors"),
    progress: bool = typer.Option(True, "--progress/--no-progress", help="Show a progress bar"),
) -> None:
    options = _build_options(target_case, fix_errors)
    names = input_path.read_text(encoding="utf-8").splitlines()
    corrector = get_default_corrector()

    rows = []
    invalid = 0
    for name in tqdm(names, desc="Correcting names", unit="name", disable=not progress):
        outcome = corrector.correct_name(name, options)
        if isinstance(outcome, CorrectionError):
            invalid += 1
        rows.append(_to_json(outcome))

    logger.info("Corrected %d names (%d invalid)", len(rows) - invalid, invalid)

    if output is None:
        for row in rows:
            typer.echo(row)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text("\n".join(rows) + ("\n" if rows else ""), encoding="utf-8")
    typer.echo(f"Wrote {len(rows)} results to {output}")


def run() -> None:  # entry point for module execution
    app()


if __name__ == "__main__":
    run()
