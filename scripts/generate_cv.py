#!/usr/bin/env python3
"""
CV Generation CLI

Generates LaTeX documents from CV records stored as YAML or JSON.

Commands:
    generate  - Generate a .tex file (or print LaTeX) from a CV file
    templates - List available layouts, their aliases and sections
    init      - Write an empty CV skeleton to fill in

Examples:\n

    generate_cv.py generate cv.yaml                        # Writes cv.tex with the file's template

    generate_cv.py generate cv.json -t banking -o out.tex  # Compact layout to a chosen path

    generate_cv.py generate cv.yaml --stdout               # Print LaTeX instead of writing

    generate_cv.py templates                               # Show layouts

    generate_cv.py init my_cv.yaml                         # Empty skeleton
"""

from pathlib import Path
from typing import Optional

import typer
from omegaconf import OmegaConf
from typing_extensions import Annotated

from cvtex.contexts.templating import CVRecord, TemplateId, cv_to_latex, generate_cv_file
from cvtex.contexts.templating.converter import LOGS_PATH
from cvtex.contexts.templating.defaults import TEMPLATE_ALIASES
from cvtex.contexts.templating.exceptions import InvalidCVStructureError
from cvtex.contexts.templating.layouts import get_layout_type
from cvtex.contexts.templating.logger import setup_templating_logger
from cvtex.utils.timestamp import now

app = typer.Typer(
    help="Generate LaTeX CVs from structured YAML/JSON records",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("generate")
def generate_command(
    input_path: Annotated[
        Path,
        typer.Argument(help="CV record (YAML or JSON)"),
    ],
    template: Annotated[
        Optional[str],
        typer.Option(
            "--template",
            "-t",
            help="Layout identifier or alias (overrides the file's template)",
        ),
    ] = None,
    output_path: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output .tex path (default: input path with .tex suffix)",
        ),
    ] = None,
    stdout: Annotated[
        bool,
        typer.Option(
            "--stdout",
            help="Print LaTeX to stdout instead of writing a file",
        ),
    ] = False,
    no_overwrite: Annotated[
        bool,
        typer.Option(
            "--no-overwrite",
            help="Refuse to overwrite an existing output file",
        ),
    ] = False,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Directory for the session log (default: LOGS_PATH/generate_<timestamp>)",
        ),
    ] = None,
):
    """
    Generate a LaTeX document from a CV record.

    Examples:\n

        $ generate_cv.py generate cv.yaml                  # Write cv.tex

        $ generate_cv.py generate cv.yaml -t european      # Europass layout

        $ generate_cv.py generate cv.yaml --stdout         # Print to stdout
    """
    if stdout:
        # Log to file only; stdout carries the document
        setup_templating_logger(
            log_dir or LOGS_PATH / f"generate_{now()}", console=False, Input=input_path
        )
        try:
            typer.echo(cv_to_latex(input_path, template=template), nl=False)
        except (FileNotFoundError, InvalidCVStructureError) as e:
            typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        return

    typer.secho(f"\nGenerating: {input_path}", fg=typer.colors.BLUE, bold=True)

    try:
        result = generate_cv_file(
            input_path,
            output_path=output_path,
            template=template,
            allow_overwrite=not no_overwrite,
            log_dir=log_dir or LOGS_PATH / f"generate_{now()}",
        )
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo("")
    if result.success:
        typer.secho(f"✓ Generated with '{result.template}' layout", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Output: {result.output_path}")
        typer.echo(f"  Time: {result.time_s:.2f}s")
    else:
        typer.secho("✗ Generation failed", fg=typer.colors.RED, bold=True, err=True)
        typer.secho(f"  Error: {result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("templates")
def templates_command():
    """List available layouts with their aliases and section order."""
    for template_id in TemplateId:
        layout = get_layout_type(template_id)()
        config = layout.config
        aliases = sorted(alias for alias, target in TEMPLATE_ALIASES.items() if target is template_id)

        typer.secho(f"\n{template_id.value}", fg=typer.colors.BLUE, bold=True)
        typer.echo(f"  Document class: {config['document_class']}")
        if config.get("style"):
            typer.echo(f"  Style: {config['style']}")
        if aliases:
            typer.echo(f"  Aliases: {', '.join(aliases)}")
        typer.echo("  Sections:")
        for title in layout.section_titles:
            typer.echo(f"    - {title}")

    typer.echo("")


@app.command("init")
def init_command(
    output_path: Annotated[
        Path,
        typer.Argument(help="Where to write the empty CV skeleton (YAML)"),
    ],
    template: Annotated[
        str,
        typer.Option("--template", "-t", help="Template stored in the skeleton"),
    ] = TemplateId.CLASSIC.value,
    camel_case: Annotated[
        bool,
        typer.Option("--camel-case", help="Use the editor's camelCase keys"),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file"),
    ] = False,
):
    """Write an empty CV record to fill in."""
    if output_path.exists() and not force:
        typer.secho(
            f"Error: {output_path} already exists (use --force to overwrite)\n",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    skeleton = CVRecord(template=template).to_dict(camel_case=camel_case)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    OmegaConf.save(OmegaConf.create(skeleton), output_path)

    typer.secho(f"✓ Wrote empty CV to {output_path}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
