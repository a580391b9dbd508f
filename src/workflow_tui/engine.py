"""Abstract interface for the workflow engine consumed by the client.

The client owns prompting, parsing and field validation.  Everything about
the graph itself is delegated to an engine:

  - validating the workflow before a session starts
  - classifying nodes (question vs. terminal)
  - choosing the next node from the collected data, including every
    conditional edge

The package ships no concrete engine.  One is plugged in by import path::

    engine = load_engine("my_engine.adapters:GraphEngine")

The attribute may be a ``WorkflowEngine`` instance, or a class / zero-arg
factory that returns one.
"""

from __future__ import annotations

import importlib
import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

from workflow_tui.errors import EngineLoadError
from workflow_tui.models.result import WorkflowValidation
from workflow_tui.models.workflow import Node, Workflow

logger = logging.getLogger(__name__)


class WorkflowEngine(ABC):
    """Interface every engine adapter must fulfil.

    Implementations are expected to be stateless with respect to a
    session: the runner passes the workflow and all collected data on
    every call.
    """

    @abstractmethod
    def validate_workflow(self, workflow: Workflow) -> WorkflowValidation:
        """Check the workflow graph once, before any prompting.

        Returns
        -------
        WorkflowValidation
            ``is_valid`` plus human-readable ``errors``.  A negative
            verdict aborts the run.
        """
        ...

    @abstractmethod
    def is_question_node(self, node: Node) -> bool:
        """True if ``node`` prompts fields."""
        ...

    @abstractmethod
    def is_end_node(self, node: Node) -> bool:
        """True if reaching ``node`` completes the session.

        The runner checks this before :meth:`is_question_node`.
        """
        ...

    @abstractmethod
    def next_node(
        self,
        workflow: Workflow,
        current_node_id: str,
        data: Mapping[str, Any],
    ) -> str:
        """Return the id of the node that follows ``current_node_id``.

        Parameters
        ----------
        workflow:
            The workflow being run.
        current_node_id:
            The question node whose fields were just answered.
        data:
            Every field value collected so far, keyed by field id.

        Returns
        -------
        str
            The next node id.  The runner treats an id missing from
            ``workflow.nodes`` as a fatal error.
        """
        ...


def load_engine(target: str) -> WorkflowEngine:
    """Resolve ``"package.module:attribute"`` to a ``WorkflowEngine``.

    Raises:
        EngineLoadError: if the path is malformed, the import fails, the
            attribute is missing, or it does not produce a ``WorkflowEngine``.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise EngineLoadError(
            f"Engine must be given as 'package.module:attribute', got '{target}'"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise EngineLoadError(f"Cannot import engine module '{module_name}': {exc}") from exc

    obj: Any = module
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise EngineLoadError(
                f"Engine attribute '{attr_path}' not found in '{module_name}'"
            ) from None

    # Instance given directly
    if isinstance(obj, WorkflowEngine):
        engine = obj
    elif callable(obj):
        try:
            engine = obj()
        except TypeError as exc:
            raise EngineLoadError(f"Cannot construct engine from '{target}': {exc}") from exc
    else:
        engine = None

    if not isinstance(engine, WorkflowEngine):
        raise EngineLoadError(f"'{target}' does not provide a WorkflowEngine")

    logger.info("Loaded engine %s (%s)", target, type(engine).__name__)
    return engine
