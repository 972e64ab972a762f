"""Exceptions raised for programmer errors (bad parameters, dangling edges)."""


class SmallWorldError(Exception):
    """Base class for every error raised by smallworld."""


class InvalidParameter(SmallWorldError, ValueError):
    """A generator or algorithm received a value outside its domain."""


class UnknownNodeReference(SmallWorldError, KeyError):
    """An edge or a query names a node id that is not in the node sequence."""

    def __init__(self, node_id, context: str = ""):
        self.node_id = node_id
        message = f"Unknown node id: {node_id!r}"
        if context:
            message = f"{message} ({context})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


def require_probability(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise InvalidParameter(f"{name} must be in [0, 1], got {value}")


def require_at_least(name: str, value: int, minimum: int) -> None:
    if value < minimum:
        raise InvalidParameter(f"{name} must be >= {minimum}, got {value}")
