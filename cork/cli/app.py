# cork/cli/app.py
# Root `cork` Typer app: global flags, per-run setup & command registration
#
# ! Command modules import `app` from here, so they are imported at the bottom.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables (e.g. CORK_CONFIG_PATH) once at startup
load_dotenv()

from ..config.settings import settings_manager
from ..cork_io.console import console


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    help="Stopwatch w/ lap splits & countdown timer for the terminal.",
    context_settings={"help_option_names": ["--help", "-h"]},
)


QUICK_USAGE = """[cork.accent]cork[/] - stopwatch & countdown

  [cork.accent2]cork stopwatch[/]            interactive stopwatch w/ laps
  [cork.accent2]cork countdown 5m[/]         count down a duration
  [cork.accent2]cork countdown --until 17:30[/]  count down to a clock time
  [cork.accent2]cork format 3725[/]          render a duration
  [cork.accent2]cork config[/]               show or change settings

[dim]Run [/][cork.accent2]cork --help[/][dim] for all options[/]"""


# * Load settings, theme & output manager; show quick usage when no subcommand is used
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log stopwatch, lap & countdown events"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    ),
) -> None:
    # settings may be injected via ctx.obj (CliRunner obj=...)
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()

    from ..ui.theming.console_theme import refresh_theme

    refresh_theme()

    # dev mode is read from the settings loaded above
    from ..config.dev_mode import is_dev_mode_enabled
    from ..core.verbose import init_verbose
    from ..core.output import get_output_manager

    init_verbose(
        enabled=verbose or log_file is not None,
        log_file=log_file,
        dev_mode=is_dev_mode_enabled(ctx),
        quiet=quiet,
    )
    get_output_manager().start_session()
    ctx.call_on_close(get_output_manager().end_session)

    if ctx.invoked_subcommand is None:
        console.print(QUICK_USAGE)
        ctx.exit()


# ! registered after `app` exists
from .commands import stopwatch as _stopwatch  # noqa: F401, E402
from .commands import countdown as _countdown  # noqa: F401, E402
from .commands import format as _format  # noqa: F401, E402
from .commands import config as _config  # noqa: F401, E402
