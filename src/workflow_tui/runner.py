"""WorkflowRunner — drives one session from the entry node to a terminal node.

The runner owns the two pieces of session state:

  - ``data``:    field id → validated value, overwritten when re-answered
  - ``history``: stack of visited node ids; the entry node is never popped

Per question node, every non-read-only field is prompted in order.  A
back request abandons the current pass: at the entry node a warning is
shown and the node is asked again, anywhere else the stack is popped and
the previous node is re-rendered with its stored answers as defaults.
Otherwise the engine picks the next node from the collected data.

Node classification and branching are delegated to ``WorkflowEngine``;
field parsing and validation happen in ``prompt_field``.
"""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console
from rich.markup import escape

from workflow_tui.constants import BACK_COMMAND, CHOICE_TYPES
from workflow_tui.engine import WorkflowEngine
from workflow_tui.errors import InvalidWorkflowError, UnknownNodeError
from workflow_tui.models.result import PromptBack
from workflow_tui.models.workflow import QuestionNode, Workflow
from workflow_tui.prompt import format_select_options, format_value, prompt_field
from workflow_tui.terminal import LineReader

logger = logging.getLogger(__name__)

_RULE_WIDTH = 50
_SUMMARY_RULE_WIDTH = 40


class WorkflowRunner:
    """Run a workflow interactively.

    Args:
        workflow: the loaded workflow definition
        engine: engine adapter for validation, classification and branching
        reader: the session's line reader (its console is used for output)
        back_command: reserved word that navigates back
    """

    def __init__(
        self,
        workflow: Workflow,
        engine: WorkflowEngine,
        reader: LineReader,
        *,
        back_command: str = BACK_COMMAND,
    ) -> None:
        self._workflow = workflow
        self._engine = engine
        self._reader = reader
        self._back_command = back_command
        self.data: dict[str, Any] = {}
        self.history: list[str] = [workflow.entry_node_id]

    @property
    def console(self) -> Console:
        return self._reader.console

    @property
    def current_node_id(self) -> str:
        return self.history[-1]

    # ==================================================================
    # Session loop
    # ==================================================================

    def run(self) -> dict[str, Any]:
        """Validate the workflow, walk it to a terminal node, print the summary.

        Returns:
            The collected data.

        Raises:
            InvalidWorkflowError: if the engine rejects the workflow.
            UnknownNodeError: if traversal reaches a missing or unknown node.
            SessionAborted: if input ends mid-session.
        """
        validation = self._engine.validate_workflow(self._workflow)
        if not validation.is_valid:
            raise InvalidWorkflowError(validation.errors)

        self._print_banner()

        while True:
            node_id = self.current_node_id
            node = self._workflow.nodes.get(node_id)
            if node is None:
                raise UnknownNodeError(f"Invalid node: {node_id}", node_id)
            if self._engine.is_end_node(node):
                logger.debug("Reached end node %s", node_id)
                break
            if not self._engine.is_question_node(node):
                raise UnknownNodeError(f"Unknown node type: {node_id}", node_id)

            if self.ask_node(node):
                self.step_back()
                continue

            next_id = self._engine.next_node(self._workflow, node_id, self.data)
            logger.debug("Transition %s -> %s", node_id, next_id)
            self.history.append(next_id)
            self.console.print()

        self._print_summary()
        return self.data

    def ask_node(self, node: QuestionNode) -> bool:
        """Prompt every field of ``node``; return True if the user went back.

        Answers are stored as soon as each field is accepted, so fields
        answered before a back request keep their new values.
        """
        self._print_node(node)

        for field in node.fields:
            if field.read_only:
                value = format_value(self.data.get(field.id))
                self.console.print(f"[dim]  {escape(field.label)}: {escape(value)}[/]")
                continue
            if field.type in CHOICE_TYPES:
                self.console.print(format_select_options(field), markup=False, highlight=False)

            result = prompt_field(
                self._reader, field, self.data, back_command=self._back_command
            )
            if isinstance(result, PromptBack):
                return True
            self.data[field.id] = result.value

        return False

    def step_back(self) -> bool:
        """Pop the history stack; returns False (and warns) at the first node."""
        if len(self.history) <= 1:
            self.console.print("[yellow]Already at the start.[/]\n")
            return False

        left = self.history.pop()
        logger.debug("Back from %s to %s", left, self.current_node_id)
        self.console.print(f"[dim]\n ← Back to: {escape(self.current_node_id)}\n[/]")
        return True

    # ==================================================================
    # Rendering
    # ==================================================================

    def _print_banner(self) -> None:
        meta = self._workflow.meta
        self.console.print(f"[bold cyan]\n {escape(meta.name)} \n[/]")
        if meta.description:
            self.console.print(f"[dim]{escape(meta.description)}[/]")
        self.console.print(
            f'[dim]Type "{escape(self._back_command)}" at any prompt '
            "to go to the previous step.\n[/]"
        )

    def _print_node(self, node: QuestionNode) -> None:
        rule = "─" * _RULE_WIDTH
        self.console.print(f"[cyan]{rule}[/]")
        self.console.print(f"[bold cyan]  {escape(node.label)}[/]")
        if node.description:
            self.console.print(f"[dim]  {escape(node.description)}[/]")
        self.console.print(f"[cyan]{rule}[/]")

    def _print_summary(self) -> None:
        meta = self._workflow.meta
        rule = "─" * _SUMMARY_RULE_WIDTH
        self.console.print("[bold green]\n ✓ Application complete \n[/]")
        self.console.print("[cyan]Collected data:[/]")
        self.console.print(f"[cyan]{rule}[/]")
        for key, value in self.data.items():
            self.console.print(f"  [dim]{escape(key)}[/]: {escape(format_value(value))}")
        self.console.print(f"[cyan]{rule}[/]")

        version = f" v{meta.version}" if meta.version else ""
        self.console.print(f"[dim]\nWorkflow: {escape(meta.name)}{version}\n[/]")
