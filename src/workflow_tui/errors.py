"""Exception hierarchy for the workflow client.

Everything raised here is fatal for the session: the CLI catches
``WorkflowTUIError``, prints the message and exits with status 1.  Field
validation failures are *not* exceptions; the prompt loop reports them
inline and asks again.

Structural errors also subclass ``ValueError`` so callers that only care
about "bad input" can keep catching that.
"""


class WorkflowTUIError(Exception):
    """Base class for all fatal client errors."""


class WorkflowFileError(WorkflowTUIError, ValueError):
    """The workflow file is missing, unparseable or does not match the schema."""


class InvalidWorkflowError(WorkflowTUIError, ValueError):
    """The engine rejected the workflow graph before the session started."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("Invalid workflow: " + "; ".join(self.errors))


class UnknownNodeError(WorkflowTUIError, ValueError):
    """Traversal reached a node id that is missing or of an unknown type."""

    def __init__(self, message: str, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(message)


class EngineLoadError(WorkflowTUIError):
    """The configured engine import path could not be resolved."""


class SessionAborted(WorkflowTUIError):
    """Input ended (EOF or a closed reader) before the session completed."""
