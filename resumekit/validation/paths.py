"""Dotted field paths and their resolution against a parsed document.

A path such as ``contact.phone`` or ``experience.0.role`` is parsed once
into a tuple of segments. Mapping nodes are looked up by key and sequence
nodes by integer index. Resolution never mutates the document.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from resumekit.shared import FailureKind, InvalidPathError


@dataclass(frozen=True)
class FieldPath:
    """A parsed, validated dotted path."""

    segments: tuple[str, ...]

    def __post_init__(self):
        if not self.segments or any(not s for s in self.segments):
            raise InvalidPathError(".".join(self.segments))

    @classmethod
    def parse(cls, text: str) -> "FieldPath":
        if not isinstance(text, str) or not text.strip():
            raise InvalidPathError(str(text))
        return cls(tuple(part.strip() for part in text.split(".")))

    def child(self, *segments: str | int) -> "FieldPath":
        return FieldPath(self.segments + tuple(str(s) for s in segments))

    def prefixed(self, prefix: "FieldPath") -> "FieldPath":
        return FieldPath(prefix.segments + self.segments)

    @property
    def leaf(self) -> str:
        return self.segments[-1]

    def __str__(self) -> str:
        return ".".join(self.segments)


class ResolutionError(Exception):
    """Raised when a path (or every candidate path) cannot be resolved.

    ``missing_at`` is the shortest prefix that was not found, which for a
    ``missing-parent`` failure is shorter than the full path.
    """

    def __init__(
        self,
        path: FieldPath,
        kind: FailureKind,
        missing_at: FieldPath | None = None,
        candidates: tuple[FieldPath, ...] = (),
    ):
        self.path = path
        self.kind = kind
        self.missing_at = missing_at or path
        self.candidates = candidates or (path,)
        super().__init__(f"Cannot resolve '{path}' ({kind.value})")


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def kind_of(value: Any) -> str:
    """JSON kind name of a value, used in type mismatch messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if is_sequence(value):
        return "array"
    return type(value).__name__


def is_empty(value: Any) -> bool:
    """Null and blank strings count as empty; zero and False do not."""
    return value is None or (isinstance(value, str) and not value.strip())


def _step(node: Any, segment: str) -> tuple[bool, Any]:
    if isinstance(node, Mapping):
        if segment in node:
            return True, node[segment]
        return False, None
    if is_sequence(node) and segment.isdigit():
        index = int(segment)
        if index < len(node):
            return True, node[index]
    return False, None


def resolve(document: Any, path: FieldPath) -> Any:
    """Return the value at ``path``; raise ResolutionError when absent."""
    node = document
    last = len(path.segments) - 1
    for depth, segment in enumerate(path.segments):
        found, node = _step(node, segment)
        if not found:
            kind = FailureKind.MISSING_FIELD if depth == last else FailureKind.MISSING_PARENT
            missing_at = FieldPath(path.segments[: depth + 1])
            raise ResolutionError(path, kind, missing_at=missing_at)
    return node


def resolve_first(document: Any, candidates: tuple[FieldPath, ...]) -> tuple[FieldPath, Any]:
    """Resolve candidates in priority order.

    The first candidate holding a non-empty value wins. When candidates
    resolve but are all empty, the first resolved one is returned so the
    caller can report it as empty. When none resolve, a combined
    ResolutionError listing every candidate is raised.
    """
    if not candidates:
        raise ValueError("At least one candidate path is required")

    resolved: list[tuple[FieldPath, Any]] = []
    first_error: ResolutionError | None = None
    for candidate in candidates:
        try:
            value = resolve(document, candidate)
        except ResolutionError as e:
            first_error = first_error or e
            continue
        if not is_empty(value):
            return candidate, value
        resolved.append((candidate, value))

    if resolved:
        return resolved[0]

    if len(candidates) == 1:
        raise first_error

    raise ResolutionError(
        candidates[0],
        first_error.kind,
        missing_at=first_error.missing_at,
        candidates=candidates,
    )
