from __future__ import annotations

from typing import Any

from .paths import Index, PathLike, Step, format_path, parse_path

_MISSING = object()


def _child(container: Any, step: Step) -> Any:
    if isinstance(step, Index):
        if isinstance(container, list):
            if step.position < len(container):
                return container[step.position]
            return _MISSING
        if isinstance(container, dict):
            # Numeric-looking keys on objects, e.g. {"0": ...}
            return container.get(str(step.position), _MISSING)
        return _MISSING

    if isinstance(container, dict):
        return container.get(step.name, _MISSING)
    return _MISSING


def _lookup(data: Any, path: PathLike) -> Any:
    node = data
    for step in parse_path(path):
        node = _child(node, step)
        if node is _MISSING:
            return _MISSING
    return node


def get_value_by_path(data: Any, path: PathLike, default: Any = None) -> Any:
    """Retrieve a value from nested dicts/lists using a bracket or dot path."""
    value = _lookup(data, path)
    return default if value is _MISSING else value


def path_exists(data: Any, path: PathLike) -> bool:
    """True when every step resolves. A key holding None still exists."""
    return _lookup(data, path) is not _MISSING


def _assign(container: Any, step: Step, value: Any) -> None:
    if isinstance(step, Index):
        if isinstance(container, list):
            if step.position >= len(container):
                container.extend([None] * (step.position + 1 - len(container)))
            container[step.position] = value
            return
        if isinstance(container, dict):
            container[str(step.position)] = value
            return
    elif isinstance(container, dict):
        container[step.name] = value
        return
    raise TypeError(f"Cannot set {step} on a {type(container).__name__}")


def set_value_by_path(data: Any, path: PathLike, value: Any) -> Any:
    """Set a value at path. The parent container must already exist.

    Raises KeyError when the parent is missing and TypeError when it cannot
    hold the final step (e.g. a key on a list). An index past the end of a
    list pads it with None.
    """
    steps = parse_path(path)
    if not steps:
        raise KeyError("Cannot set the document root")

    parent = _lookup(data, steps[:-1])
    if parent is _MISSING:
        raise KeyError(f"Parent of {format_path(steps)} does not exist")
    _assign(parent, steps[-1], value)
    return data
