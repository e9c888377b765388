# ──────────────────────────────────────────────────────────────────────
# SNePSLOG Compiler — Batch CLI
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from __future__ import annotations

import logging
import sys
from typing import Union

import click

from snepslog.compiler import NamedCaseFrame, TermCompiler
from snepslog.compiler.registry import SUPPORTED_MODES
from snepslog.compiler.terms import TermSyntaxError
from snepslog.core.config_schema import PRINTING_MODES, settings_from_env
from snepslog.io.logging_config import setup_snepslog_logging
from snepslog.io.term_loader import load_descriptors
from snepslog.network.structure import Node, Relation


LOGGER = logging.getLogger("snepslog.cli")


def _configure_logging(level: str, json_logs: bool) -> None:
    setup_snepslog_logging(
        level=getattr(logging, level.upper(), logging.INFO),
        json_output=json_logs,
    )


def _render(result: Union[Node, NamedCaseFrame, Relation], printing_mode: str) -> str:
    if isinstance(result, Relation):
        return f"relation {result.name}: {result.semantic.name}"
    if isinstance(result, NamedCaseFrame):
        semantic = result.case_frame.semantic.name
        return f"{result.name}: {semantic} ({' '.join(result.relation_names)})"
    if printing_mode == "expert":
        wires = " ".join(repr(w) for w in result.wires)
        return f"{result.name}! {result.case_frame!r} {wires}"
    if printing_mode == "unlabeled":
        return f"{result.name} ({' '.join(w.node.name for w in result.wires)})"
    return result.name


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("descriptor_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--mode", type=int, default=None, help="Case-frame mode (1, 2 or 3). Overrides SNEPSLOG_MODE.")
@click.option(
    "--printing-mode",
    type=click.Choice(PRINTING_MODES),
    default=None,
    help="Output style. Overrides SNEPSLOG_PRINTING_MODE.",
)
@click.option("--continue-on-error", is_flag=True, help="Keep compiling after a failed descriptor.")
@click.option("--summary", is_flag=True, help="Print a network summary at the end.")
@click.option("--json-logs", is_flag=True, help="Emit JSON log lines on stderr.")
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="CLI log level.",
)
def cli(
    descriptor_file: str,
    mode: int | None,
    printing_mode: str | None,
    continue_on_error: bool,
    summary: bool,
    json_logs: bool,
    log_level: str,
) -> None:
    """Compile the term descriptors in DESCRIPTOR_FILE into network nodes.

    DESCRIPTOR_FILE holds a JSON object or list of objects, one per parsed
    term or ``define-relation`` / ``define-frame`` command.
    """
    settings = settings_from_env(
        mode=mode,
        printing_mode=printing_mode,
        log_level=log_level,
        json_logs=json_logs,
    )
    _configure_logging(settings.log_level, settings.json_logs)

    if settings.mode not in SUPPORTED_MODES:
        raise click.ClickException(
            f"Unknown mode {settings.mode}; expected one of {SUPPORTED_MODES}."
        )

    try:
        items = load_descriptors(descriptor_file)
    except TermSyntaxError as exc:
        raise click.ClickException(str(exc)) from exc
    LOGGER.info("Loaded %d descriptor(s) from %s", len(items), descriptor_file)

    compiler = TermCompiler(settings=settings)
    failures: list[str] = []
    for index, item in enumerate(items, start=1):
        try:
            result = compiler.execute(item)
        except (ValueError, LookupError) as exc:
            failures.append(f"#{index} ({exc})")
            LOGGER.error("Descriptor #%d failed: %s", index, exc)
            if not continue_on_error:
                break
            continue
        click.echo(_render(result, settings.printing_mode))

    if summary:
        click.echo(compiler.network.summary())

    if failures:
        raise click.ClickException("One or more descriptors failed: " + ", ".join(failures))


def main() -> int:
    try:
        cli.main(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
        return code
    return 0


if __name__ == "__main__":
    sys.exit(main())
