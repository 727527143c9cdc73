#!/usr/bin/env python3
"""
Application Materials CLI

Builds a résumé or a cover letter as a PDF and manages the stored defaults
(name, API key, contact line) they are built from.

Commands:
    cover   - Build a cover letter for a company
    resume  - Build a résumé for a position
    config  - Show or change the stored settings

Examples:\n

    cv cover letter.pdf --company Acme --position Engineer   # Cover letter

    cv cover letter -c Acme -l "Remote" -n "Ada Lovelace"    # Saves the name too

    cv resume resume.pdf --position "ML Engineer"            # Résumé

    cv resume resume.pdf -p Engineer --dry-run               # Print text only

    cv config name 'Ada Lovelace'                            # Store your name
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from vitae.contexts.composing import build_cover_letter, build_resume
from vitae.contexts.layout import Document, to_plaintext
from vitae.contexts.rendering import BuildResult, build_pdf
from vitae.contexts.settings import CONFIG_PATH, ENV_PATH, Settings, load_settings, save_settings
from vitae.exceptions import MissingArgumentError, VitaeError
from vitae.utils.logger import setup_logger
from vitae.utils.text_processing import mask_secret

load_dotenv()
LOGS_PATH = os.getenv("CV_LOGS_PATH")

NAME_REMEDY = "cv config name '<YOUR NAME>'"

app = typer.Typer(
    help="Build application materials for any company or position",
    add_completion=False,
    invoke_without_command=True,
)

config_app = typer.Typer(
    help="Show or change the stored settings",
    add_completion=False,
    invoke_without_command=True,
)
app.add_typer(config_app, name="config")


def _non_empty(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise typer.BadParameter("must not be empty")
    return value


def report_error(error: VitaeError) -> None:
    """Print a core error with its remedy and exit with status 1."""
    typer.secho(f"Error: {error}\n", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _paths(ctx: typer.Context) -> dict:
    return ctx.obj or {"config_path": CONFIG_PATH, "env_path": ENV_PATH}


def _load(ctx: typer.Context) -> Settings:
    paths = _paths(ctx)
    return load_settings(config_path=paths["config_path"], env_path=paths["env_path"])


def _save(ctx: typer.Context, existing: Settings, **fields) -> Settings:
    return save_settings(existing, config_path=_paths(ctx)["config_path"], **fields)


def resolve_name(
    ctx: typer.Context, name: Optional[str], settings: Settings, remember: bool = True
) -> str:
    """
    Pick the name for a document: --name wins, then the stored name.

    With `remember`, a --name that differs from the stored one is saved for
    next time.

    Raises:
        MissingArgumentError: If neither source provides a name
    """
    if name is None:
        if settings.name:
            return settings.name
        raise MissingArgumentError(
            "name", remedy=NAME_REMEDY, suggested_value="'Johnny Appleseed'"
        )

    if remember and name != settings.name:
        _save(ctx, settings, name=name)
        typer.secho(f"Saved name '{name}' for future documents", fg=typer.colors.BLUE)
    return name


def _setup_logging(command: str, log_dir: Optional[Path], verbose: bool, **provenance) -> None:
    if log_dir is None and LOGS_PATH:
        log_dir = Path(LOGS_PATH).expanduser()
    setup_logger(command, log_dir=log_dir, verbose=verbose, extra_provenance=provenance)


def _print_preview(document: Document) -> None:
    typer.secho(f"\n{document.page.title} (dry run)\n", fg=typer.colors.BLUE, bold=True)
    for line in to_plaintext(document):
        typer.echo(line)
    typer.echo("")


def _report_build(label: str, result: BuildResult) -> None:
    typer.echo("")
    if not result.success:
        typer.secho(f"✗ {label} was not written", fg=typer.colors.RED, bold=True)
        if result.postprocess is not None:
            typer.echo(f"  Post-processor exit code: {result.postprocess.returncode}")
        typer.echo("  Rerun with --no-shrink to skip post-processing.")
        raise typer.Exit(code=1)

    typer.secho(f"✓ {label} written", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  PDF: {result.output_path}")
    if result.page_count is not None:
        typer.echo(f"  Pages: {result.page_count}")
    if result.postprocess is not None and result.postprocess.returncode != 0:
        typer.secho(
            f"  Post-processor exited with code {result.postprocess.returncode}",
            fg=typer.colors.YELLOW,
        )


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Path,
        typer.Option(
            "--config",
            help="Structured settings file (default: ~/.cv.config.yaml or CV_CONFIG_PATH)",
        ),
    ] = CONFIG_PATH,
    env_path: Annotated[
        Path,
        typer.Option(
            "--env-file",
            help="Env-style settings file (default: ~/.cvrc or CV_ENV_PATH)",
        ),
    ] = ENV_PATH,
):
    """Show help by default when no command is provided."""
    ctx.obj = {"config_path": config_path.expanduser(), "env_path": env_path.expanduser()}
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("cover")
def cover_command(
    ctx: typer.Context,
    output: Annotated[
        Path,
        typer.Argument(help="The file to save the cover letter to (.pdf is appended if missing)"),
    ],
    company: Annotated[
        str,
        typer.Option(
            "--company",
            "-c",
            help="The company you're applying to",
            callback=_non_empty,
        ),
    ],
    location: Annotated[
        Optional[str],
        typer.Option("--location", "-l", help="The location of the company"),
    ] = None,
    position: Annotated[
        Optional[str],
        typer.Option(
            "--position",
            "--role",
            "-p",
            "-r",
            help="The position you're applying for",
        ),
    ] = None,
    name: Annotated[
        Optional[str],
        typer.Option(
            "--name",
            "-n",
            help="Your full name (saved for next time; default: stored name)",
            callback=_non_empty,
        ),
    ] = None,
    no_shrink: Annotated[
        bool,
        typer.Option("--no-shrink", help="Skip the Ghostscript shrink step"),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Print the letter text instead of writing a PDF"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Write a debug log here (default: CV_LOGS_PATH)"),
    ] = None,
):
    """
    Build a cover letter.

    Examples:\n

        $ cv cover letter.pdf -c Acme -p Engineer            # Uses the stored name

        $ cv cover letter -c Acme -l "New York, NY" -n "Ada"  # Writes letter.pdf
    """
    _setup_logging("cover", log_dir, verbose, Company=company, Position=position)

    try:
        settings = _load(ctx)
        resolved_name = resolve_name(ctx, name, settings, remember=not dry_run)
        document = build_cover_letter(
            resolved_name,
            company,
            location=location,
            position=position,
            contact=settings.contact,
        )
        if dry_run:
            _print_preview(document)
            return
        result = build_pdf(document, output, shrink=not no_shrink)
    except VitaeError as e:
        report_error(e)

    _report_build("Cover letter", result)


@app.command("resume")
def resume_command(
    ctx: typer.Context,
    output: Annotated[
        Path,
        typer.Argument(help="The file to save the résumé to (.pdf is appended if missing)"),
    ],
    position: Annotated[
        str,
        typer.Option(
            "--position",
            "--role",
            "-p",
            "-r",
            help="The position you're applying for",
            callback=_non_empty,
        ),
    ],
    name: Annotated[
        Optional[str],
        typer.Option(
            "--name",
            "-n",
            help="Your full name (saved for next time; default: stored name)",
            callback=_non_empty,
        ),
    ] = None,
    no_shrink: Annotated[
        bool,
        typer.Option("--no-shrink", help="Skip the Ghostscript shrink step"),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Print the résumé text instead of writing a PDF"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Write a debug log here (default: CV_LOGS_PATH)"),
    ] = None,
):
    """
    Build a résumé.

    Uses the résumé data stored in the settings file when present, otherwise
    the built-in content.

    Examples:\n

        $ cv resume resume.pdf -p "ML Engineer"             # Uses the stored name

        $ cv resume resume -p Engineer --no-shrink          # Skip Ghostscript
    """
    _setup_logging("resume", log_dir, verbose, Position=position)

    try:
        settings = _load(ctx)
        resolved_name = resolve_name(ctx, name, settings, remember=not dry_run)
        document = build_resume(
            resolved_name,
            position,
            content=settings.resume,
            contact=settings.contact,
        )
        if dry_run:
            _print_preview(document)
            return
        result = build_pdf(document, output, shrink=not no_shrink)
    except VitaeError as e:
        report_error(e)

    _report_build("Résumé", result)


@config_app.callback()
def config_main(ctx: typer.Context):
    """Show help by default when no config command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@config_app.command("name")
def config_name_command(
    ctx: typer.Context,
    name: Annotated[
        str,
        typer.Argument(help="Your full name as it should appear on documents", callback=_non_empty),
    ],
):
    """Store the name used on every document."""
    _setup_logging("config", None, False)
    try:
        _save(ctx, _load(ctx), name=name)
    except VitaeError as e:
        report_error(e)
    typer.secho(f"✓ Name set to '{name}'", fg=typer.colors.GREEN, bold=True)


@config_app.command("api")
def config_api_command(
    ctx: typer.Context,
    api_key: Annotated[
        str,
        typer.Argument(metavar="API_KEY", help="Your OpenAI API key", callback=_non_empty),
    ],
):
    """Store the OpenAI API key."""
    _setup_logging("config", None, False)
    try:
        _save(ctx, _load(ctx), api_key=api_key)
    except VitaeError as e:
        report_error(e)
    typer.secho("✓ API key saved", fg=typer.colors.GREEN, bold=True)


@config_app.command("contact")
def config_contact_command(
    ctx: typer.Context,
    contact: Annotated[
        str,
        typer.Argument(help="Contact line for document footers (phone | email | links)"),
    ],
):
    """Store the contact line printed at the bottom of every document."""
    _setup_logging("config", None, False)
    try:
        _save(ctx, _load(ctx), contact=contact)
    except VitaeError as e:
        report_error(e)
    typer.secho("✓ Contact line saved", fg=typer.colors.GREEN, bold=True)


@config_app.command("show")
def config_show_command(ctx: typer.Context):
    """Print the resolved settings (the API key is masked)."""
    _setup_logging("config", None, False)
    try:
        settings = _load(ctx)
    except VitaeError as e:
        report_error(e)

    typer.secho(f"Settings file: {_paths(ctx)['config_path']}", bold=True)
    typer.echo(f"  name:    {settings.name or '(unset)'}")
    typer.echo(f"  api_key: {mask_secret(settings.api_key) if settings.api_key else '(unset)'}")
    typer.echo(f"  contact: {settings.contact or '(default)'}")
    typer.echo(f"  resume:  {'custom' if settings.resume else '(built-in)'}")


if __name__ == "__main__":
    app()
