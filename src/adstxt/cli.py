"""
Click-based CLI for adstxt.

This module only ORCHESTRATES. It never parses lines itself.
- Loads settings
- Reads the input file
- Invokes the parser / check action
- Formats output
"""

import logging
import sys
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adstxt import __version__
from adstxt.actions.check import CheckAction
from adstxt.actions.reporters import REPORTERS, get_reporter
from adstxt.config import ConfigError, ConfigManager, Settings
from adstxt.errors import AdsTxtParseError
from adstxt.parser.ads_txt import AdsTxtParser

console = Console()

FORMAT_CHOICE = click.Choice(sorted(REPORTERS))


@click.group()
@click.version_option(version=__version__, prog_name="adstxt")
@click.option("--config", "-c", type=click.Path(file_okay=False), help="Path to config directory")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """adstxt: inspect and check ads.txt authorized-sellers files.

    FILE arguments are local paths; use '-' to read from stdin.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    ctx.ensure_object(dict)
    config_dir = Path(config) if config else None
    ctx.obj["config_mgr"] = ConfigManager(config_dir)


def _load_settings(ctx: click.Context) -> Settings:
    """Load settings, turning bad config files into a CLI error."""
    try:
        return ctx.obj["config_mgr"].load()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.argument("file", type=click.File("rb"))
@click.option("--format", "fmt", type=FORMAT_CHOICE, default=None, help="Output format")
@click.option("--strict/--lenient", default=None, help="Fail on the first malformed line")
@click.option("--comments/--no-comments", default=None, help="Show trailing comments")
@click.pass_context
def parse(
    ctx: click.Context, file, fmt: str | None, strict: bool | None, comments: bool | None
) -> None:
    """Parse an ads.txt file and print its records and variables."""
    settings = _load_settings(ctx)
    fmt = fmt or settings.output_format
    strict = settings.strict if strict is None else strict
    show_comments = settings.show_comments if comments is None else comments

    parser = AdsTxtParser()
    try:
        ads_txt = parser.parse(file.read(), strict=strict)
    except AdsTxtParseError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        sys.exit(1)

    reporter = get_reporter(fmt, console, show_comments=show_comments)
    reporter.report_document(ads_txt)


@main.command()
@click.argument("file", type=click.File("rb"))
@click.option("--format", "fmt", type=FORMAT_CHOICE, default=None, help="Output format")
@click.option(
    "--fail-on-duplicates/--allow-duplicates",
    default=None,
    help="Exit with code 1 when a record is declared twice",
)
@click.pass_context
def check(
    ctx: click.Context, file, fmt: str | None, fail_on_duplicates: bool | None
) -> None:
    """CI/CD friendly check of an ads.txt file.

    Exits with code 1 if any line is malformed.
    """
    settings = _load_settings(ctx)
    fmt = fmt or settings.output_format
    if fail_on_duplicates is None:
        fail_on_duplicates = settings.fail_on_duplicates

    report = CheckAction().run(file.read())
    reporter = get_reporter(fmt, console, show_comments=settings.show_comments)
    reporter.report_check(report)
    sys.exit(report.exit_code(fail_on_duplicates=fail_on_duplicates))


@main.group()
def config() -> None:
    """Manage adstxt settings."""


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Print the effective settings."""
    config_mgr = ctx.obj["config_mgr"]
    settings = _load_settings(ctx)
    console.print(f"[dim]# {escape(str(config_mgr.settings_file))}[/]")
    console.out(yaml.safe_dump(settings.model_dump(), sort_keys=False), highlight=False)


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing settings file")
@click.pass_context
def config_init(ctx: click.Context, force: bool) -> None:
    """Write a settings file with default values."""
    config_mgr = ctx.obj["config_mgr"]
    if config_mgr.settings_file.exists() and not force:
        console.print(f"[bold red]Error:[/] {escape(str(config_mgr.settings_file))} already exists.")
        sys.exit(1)
    config_mgr.save(Settings())
    console.print(f"[bold green]✓ Wrote settings:[/] {escape(str(config_mgr.settings_file))}")


if __name__ == "__main__":
    main()
