"""
Command-line interface for gotest-stats.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from .config import REPORT_FORMATS, ConfigurationError, load_config, validate_config
from .exceptions import LogFileError, RecordDecodeError, UnknownStatisticError
from .reporting import get_reporter
from .runner import StatsRunner, resolve_statistic

logger = logging.getLogger(__name__)


def _usage(ctx: click.Context, message: str) -> None:
    """Print a usage problem followed by the command help."""
    click.echo(f"{message}\n")
    click.echo(ctx.get_help())


@click.command()
@click.argument("files", nargs=-1, type=click.Path())
@click.option(
    "--statistic",
    type=str,
    help="Statistic to compute: pkg-time|test-time",
)
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to configuration file (YAML)",
)
@click.option(
    "--report-format",
    type=click.Choice(REPORT_FORMATS),
    help="Report format (overrides config)",
)
@click.option(
    "--output",
    type=click.Path(),
    help="Output file for report (default: stdout)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    help="Logging level (logs go to stderr)",
)
@click.pass_context
def main(
    ctx: click.Context,
    files: Tuple[str, ...],
    statistic: Optional[str],
    config: Optional[str],
    report_format: Optional[str],
    output: Optional[str],
    log_level: str,
) -> None:
    """
    Parses files generated by `go test -json` and computes test set statistics.

    Arguments: [file1.json file2.json ... fileN.json]

    Examples:

      # Packages by descending run time
      gotest-stats --statistic pkg-time unit.json integration.json

      # Tests by descending run time, as JSON
      gotest-stats --statistic test-time --report-format json run.json
    """
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    try:
        stats_config = load_config(config)

        # Command-line values override config file and environment
        if statistic:
            stats_config.statistic = statistic
        if files:
            stats_config.files = list(files)
        if report_format:
            stats_config.report_format = report_format

        errors = validate_config(stats_config)
        if errors:
            click.echo("Configuration errors:", err=True)
            for error in errors:
                click.echo(f"  - {error}", err=True)
            sys.exit(1)

        if not stats_config.statistic:
            _usage(ctx, "The `--statistic` option is required.")
            return
        try:
            resolve_statistic(stats_config.statistic)
        except UnknownStatisticError:
            _usage(ctx, "The `--statistic` option must be one of `pkg-time`, `test-time`.")
            return

        report = StatsRunner(stats_config).run()
        text = get_reporter(stats_config.report_format).generate(report)

        if output:
            output_path = Path(output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(text, encoding="utf-8")
            click.echo(f"Report written to: {output}")
        elif text:
            click.echo(text, nl=False)

        logger.info("Reported %d rows for %s", report.row_count, report.statistic.value)

    except (LogFileError, RecordDecodeError) as e:
        logger.error("%s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except FileNotFoundError as e:
        logger.error("File not found: %s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
