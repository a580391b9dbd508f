"""Command-line entry point: ``workflow-tui <file.json>``.

Run a workflow step by step in the terminal: answer questions, type
"back" to revisit the previous step, and see the collected data at the
end.

Usage::

    # Engine from the environment
    export WORKFLOW_TUI_ENGINE=my_engine.adapters:GraphEngine
    workflow-tui commercial-gl.json

    # Engine on the command line, answers scripted from a file
    workflow-tui flow.yaml --engine my_engine.adapters:GraphEngine --answers answers.txt

Exit status is 0 on completion, 1 on any fatal error, 130 on Ctrl-C.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from workflow_tui.config import TUISettings, load_settings
from workflow_tui.engine import load_engine
from workflow_tui.errors import InvalidWorkflowError, WorkflowTUIError
from workflow_tui.loader import load_workflow
from workflow_tui.runner import WorkflowRunner
from workflow_tui.terminal import LineReader

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="workflow-tui",
        description="Terminal client for running a workflow step by step.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("file", help="Workflow definition (.json, .yaml or .yml)")
    parser.add_argument(
        "--engine",
        default=None,
        help="Engine import path 'package.module:attribute' "
        "(default: $WORKFLOW_TUI_ENGINE)",
    )
    parser.add_argument(
        "--answers",
        default=None,
        help="Read answers from this file, one per line, instead of stdin",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr diagnostics (default: $WORKFLOW_TUI_LOG_LEVEL or WARNING)",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )


def run(
    args: argparse.Namespace,
    settings: TUISettings,
    console: Console,
) -> int:
    """Load everything, run the session, and map failures to an exit status."""
    if not settings.engine:
        console.print(
            "[red]No workflow engine configured "
            "(pass --engine package.module:attribute or set WORKFLOW_TUI_ENGINE).[/]"
        )
        return 1

    try:
        workflow = load_workflow(args.file)
        engine = load_engine(settings.engine)
    except WorkflowTUIError as exc:
        logger.error("Startup failed: %s", exc)
        console.print(f"[red]Error:[/] {escape(str(exc))}")
        return 1

    if args.answers:
        try:
            reader = LineReader.open(args.answers, console)
        except OSError as exc:
            console.print(f"[red]Cannot open answers file:[/] {escape(str(exc))}")
            return 1
    else:
        reader = LineReader(console)

    with reader:
        try:
            WorkflowRunner(
                workflow, engine, reader, back_command=settings.back_command
            ).run()
        except InvalidWorkflowError as exc:
            logger.error("Workflow rejected by engine: %s", exc.errors)
            console.print("[red]Invalid workflow:[/]")
            for err in exc.errors:
                console.print(f"[red]  - {escape(err)}[/]")
            return 1
        except WorkflowTUIError as exc:
            logger.error("Session failed: %s", exc)
            console.print(f"[red]Error:[/] {escape(str(exc))}")
            return 1
        except KeyboardInterrupt:
            console.print("\n[yellow]Interrupted.[/]")
            return 130
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = load_settings().with_overrides(engine=args.engine, log_level=args.log_level)
    configure_logging(settings.log_level)
    return run(args, settings, Console())


def cli() -> None:
    """Console-script entry point: ``workflow-tui``."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
