"""Transitive trust exception hierarchy.

Provides structured exceptions for error handling throughout the codebase.
All exceptions inherit from TrustGraphError for easy catching.
"""

from __future__ import annotations


class TrustGraphError(Exception):
    """Base exception for all transitive trust errors.

    All custom exceptions in the package inherit from this class,
    allowing callers to catch every trust-graph error with a single
    except clause.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code.
    """

    code: str = "trust_graph_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, object]:
        """Convert exception to a serializable dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
            }
        }


class InvalidNodeError(TrustGraphError):
    """Node identifier is not usable.

    Raised at graph-mutation time when an identifier is not a string,
    is empty, or contains only whitespace.

    Attributes:
        node: The rejected identifier.
    """

    code: str = "invalid_node"

    def __init__(self, node: object) -> None:
        self.node = node
        super().__init__(f"Node must be a non-empty string, got {node!r}")

    def to_dict(self) -> dict[str, object]:
        """Convert exception to a serializable dictionary."""
        return {
            "error": {
                "code": self.code,
                "node": repr(self.node),
                "message": self.message,
            }
        }


class InvalidWeightError(TrustGraphError):
    """Edge weight outside the range allowed by the graph's channel mode.

    Attributes:
        field: Name of the offending weight ("weight", "positive_weight",
            or "negative_weight").
        value: The rejected value.
    """

    code: str = "invalid_weight"

    def __init__(self, field: str, value: object, message: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}: {message}")

    def to_dict(self) -> dict[str, object]:
        """Convert exception to a serializable dictionary."""
        return {
            "error": {
                "code": self.code,
                "field": self.field,
                "value": repr(self.value),
                "message": self.message,
            }
        }


class NodeNotFoundError(TrustGraphError):
    """Node not present in the graph.

    Raised by the engine when the propagation source is missing, and by
    the query layer when a requested target is missing.

    Attributes:
        node: The missing node identifier.
        role: Which argument referenced it ("source" or "target").
    """

    code: str = "node_not_found"

    def __init__(self, node: str, role: str = "source") -> None:
        self.node = node
        self.role = role
        super().__init__(f'{role.capitalize()} node "{node}" not found in the graph')

    def to_dict(self) -> dict[str, object]:
        """Convert exception to a serializable dictionary."""
        return {
            "error": {
                "code": self.code,
                "node": self.node,
                "role": self.role,
                "message": self.message,
            }
        }


class ConfigurationError(TrustGraphError):
    """Configuration error.

    Raised when a graph is created with an unknown channel mode.
    """

    code: str = "configuration_error"
