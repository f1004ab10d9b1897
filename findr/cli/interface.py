# findr/cli/interface.py
import sys
from typing import Any, List

import click
from click_option_group import optgroup
import structlog

from findr import __version__ as app_version
from findr.config.settings import FindConfig
from findr.core.entries import EntryType
from findr.core.finder import FindResult, PathFinder
from findr.exceptions import FindrError
from findr.logging_setup import configure_logging

log = structlog.get_logger(__name__)

TYPE_TAG_CHOICES = [t.value for t in (EntryType.DIRECTORY, EntryType.FILE, EntryType.LINK)]

def _print_cli_summary_output(result: FindResult):
    click.secho("--- search summary ---", fg="cyan", err=True)
    click.echo(f"Entries visited: {result.visited}", err=True)
    click.echo(f"Entries matched: {result.matched}", err=True)
    if result.had_errors:
        click.secho(f"Traversal errors: {result.errors}", fg="yellow", err=True)

def _build_config(cli_params: Any) -> FindConfig:
    entry_types: List[EntryType] = []
    for tag in cli_params.get("type_tags") or ():
        parsed = EntryType.from_string(tag)
        if parsed:
            entry_types.append(parsed)
    return FindConfig(
        paths=list(cli_params.get("paths") or ()),
        entry_types=entry_types,
        name_patterns=list(cli_params.get("name_patterns") or ()),
        sort_entries=not cli_params.get("unsorted", False),
        show_summary=cli_params.get("show_summary", False),
    )

def _run_find_flow(config: FindConfig) -> FindResult:
    # the chain is compiled before the first root is touched.
    chain = config.build_filter_chain()
    finder = PathFinder(config.paths, chain, sort_entries=config.sort_entries)
    result = finder.run()
    if config.show_summary:
        _print_cli_summary_output(result)
    return result


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("paths", nargs=-1, metavar="[PATH]...")
@optgroup.group("Search Options", help="Select which entries are printed.")
@optgroup.option("-n", "--name", "name_patterns", multiple=True, metavar="NAME", help="Regular expression matched against base names. Repeatable; any may match.")
@optgroup.option("-t", "--type", "type_tags", multiple=True, type=click.Choice(TYPE_TAG_CHOICES), metavar="TYPE", help="Entry type: d (directory), f (file), l (link). Repeatable; any may match.")
@optgroup.group("Output Options", help="Control ordering and console feedback.")
@optgroup.option("--unsorted", "unsorted", is_flag=True, default=False, help="Keep the directory-read order of siblings instead of sorting by name.")
@optgroup.option("--summary", "show_summary", is_flag=True, default=False, help="Print visited/matched/error counts to stderr.")
@optgroup.group("Application Behavior", help="Logging and version information.")
@optgroup.option("--verbose", "-v", "verbosity_level", count=True, help="Verbosity: -v info, -vv debug.")
@click.version_option(version=app_version, package_name="findr", prog_name="findr", help="Show version and exit.")
@click.pass_context
def main_cli(ctx: click.Context, **cli_params: Any):
    """findr: list filesystem entries under each PATH (default '.')
    whose type and base name match the given filters."""

    log_level = "warning"
    if cli_params.get("verbosity_level", 0) == 1: log_level = "info"
    elif cli_params.get("verbosity_level", 0) >= 2: log_level = "debug"
    configure_logging(log_level_str=log_level)

    log.debug("cli_command_invoked", params=cli_params)

    try:
        config = _build_config(cli_params)
        result = _run_find_flow(config)
    except click.exceptions.Exit as e: raise e
    except FindrError as e:
        log.error("handled_application_error_in_cli", error_type=type(e).__name__, message=str(e))
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)
    except click.ClickException as e:
        log.error("click_exception_in_cli", error_type=type(e).__name__, message=str(e))
        e.show(); sys.exit(e.exit_code)
    except Exception as e:
        log.critical("unexpected_critical_error_in_cli", message=str(e), exc_info=True)
        click.secho(f"Unexpected critical error: {e}. Please report this.", fg="red", err=True)
        sys.exit(1)

    if result.had_errors:
        ctx.exit(1)
