"""
Path resolver for nested form data.

Paths are dot separated (``user.address.city``). Bracketed indices are
accepted and normalized, so ``contacts[0].email`` and ``contacts.0.email``
address the same value.
"""

import re
from typing import Any

_BRACKET_INDEX = re.compile(r"\[(\d+)\]")

# Largest number of None slots a single write may add to a list
MAX_LIST_GAP = 1000


def _is_index(segment: str) -> bool:
    return segment.isdigit() and segment.isascii()


def split_path(path: str) -> list[str]:
    """Normalize bracket indices to dot form and split into segments."""
    return _BRACKET_INDEX.sub(r".\1", path).split(".")


def get(root: Any, path: str) -> Any:
    """
    Read the value at ``path``.

    Returns None when any step is missing, None, or cannot be traversed.
    Numeric segments index lists; any other segment against a list is
    invalid.
    """
    if not path:
        return None

    current = root
    for segment in split_path(path):
        if isinstance(current, dict):
            if segment not in current:
                return None
            current = current[segment]
        elif isinstance(current, list):
            if not _is_index(segment):
                return None
            index = int(segment)
            if index >= len(current):
                return None
            current = current[index]
        else:
            return None
    return current


def _vivify(segment: str) -> list[Any] | dict[str, Any]:
    return [] if _is_index(segment) else {}


def _copy_container(container: Any, next_segment: str) -> list[Any] | dict[str, Any]:
    """Shallow-copy a container on the write path, or create a fresh one."""
    if isinstance(container, dict):
        return dict(container)
    if isinstance(container, list) and _is_index(next_segment):
        return list(container)
    return _vivify(next_segment)


def _can_assign(container: Any, segment: str) -> bool:
    if isinstance(container, list):
        return int(segment) - len(container) <= MAX_LIST_GAP
    return True


def _assign(container: list[Any] | dict[str, Any], segment: str, value: Any) -> None:
    if isinstance(container, list):
        index = int(segment)
        if index >= len(container):
            container.extend([None] * (index + 1 - len(container)))
        container[index] = value
    else:
        container[segment] = value


def _read(container: list[Any] | dict[str, Any], segment: str) -> Any:
    if isinstance(container, list):
        index = int(segment)
        return container[index] if index < len(container) else None
    return container.get(segment)


def set(root: Any, path: str, value: Any) -> Any:
    """
    Return a copy of ``root`` with ``value`` written at ``path``.

    Only the containers along the path are copied; everything else keeps
    its identity. Missing, None or scalar intermediates are replaced by a
    new list (when the next segment is numeric) or dict. ``root`` itself
    is never mutated.

    A write whose list index lies more than ``MAX_LIST_GAP`` slots past the
    end of its list is refused, and ``root`` is returned unchanged.
    """
    segments = [segment for segment in split_path(path) if segment]
    if not segments:
        return _copy_container(root, "")

    new_root = _copy_container(root, segments[0])
    current = new_root
    for position, segment in enumerate(segments[:-1]):
        if not _can_assign(current, segment):
            return root
        next_segment = segments[position + 1]
        child = _copy_container(_read(current, segment), next_segment)
        _assign(current, segment, child)
        current = child

    if not _can_assign(current, segments[-1]):
        return root
    _assign(current, segments[-1], value)
    return new_root
