"""Field path syntax.

Paths are stored on records as strings in one of two dialects:

- bracket: ``widgets[2].elements[0].settings.title`` (what the extractor emits)
- dot:     ``widgets.2.elements.0.settings.title``

Everywhere else a path is a tuple of typed steps (``Key`` / ``Index``), parsed
once at the boundary.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from .constants import SETTINGS_KEY
from .errors import PathSyntaxError

BRACKET = 'bracket'
DOT = 'dot'

_INDEX_RE = re.compile(r'^(0|[1-9][0-9]*)$')
_BRACKET_INDEX_RE = re.compile(r'^[0-9]+$')
_SPECIAL_CHARS = ('\\', '.', '[', ']')


@dataclass(frozen=True)
class Key:
    name: str

    def __str__(self) -> str:
        return escape_path_segment(self.name)


@dataclass(frozen=True)
class Index:
    position: int

    def __str__(self) -> str:
        return str(self.position)


Step = Union[Key, Index]
Steps = Tuple[Step, ...]
PathLike = Union[str, Steps]


def escape_path_segment(segment: str) -> str:
    """Escape a single key segment.

    - Dots and brackets are escaped with a backslash so keys like 'a.b' remain one step.
    - Backslashes are doubled to preserve round-tripping.
    - A key that looks like an index gets its first digit escaped so it stays a key.
    """
    if not isinstance(segment, str):
        segment = str(segment)
    out = ''.join('\\' + ch if ch in _SPECIAL_CHARS else ch for ch in segment)
    if _INDEX_RE.match(segment):
        out = '\\' + out
    return out


def _segment_step(buf: List[str], literal: bool) -> Step:
    text = ''.join(buf)
    if not literal and _INDEX_RE.match(text):
        return Index(int(text))
    return Key(text)


def parse_path(path: PathLike) -> Steps:
    """Parse a bracket, dot or mixed dialect path into steps.

    A tuple of steps is returned unchanged.
    """
    if isinstance(path, tuple):
        return path
    if not isinstance(path, str) or not path.strip():
        raise PathSyntaxError(f"Empty or non-string path: {path!r}")

    steps: List[Step] = []
    buf: List[str] = []
    literal = False
    after_bracket = False
    i = 0
    n = len(path)

    while i < n:
        ch = path[i]

        if ch == '\\':
            if i + 1 < n:
                buf.append(path[i + 1])
                literal = True
                i += 2
            else:
                # Trailing backslash; treat as literal.
                buf.append(ch)
                i += 1
            continue

        if ch == '.':
            if buf:
                steps.append(_segment_step(buf, literal))
            elif not after_bracket:
                raise PathSyntaxError(f"Empty segment at position {i} in {path!r}")
            if i == n - 1:
                raise PathSyntaxError(f"Trailing '.' in {path!r}")
            buf = []
            literal = False
            after_bracket = False
            i += 1
            continue

        if ch == '[':
            if buf:
                steps.append(_segment_step(buf, literal))
                buf = []
                literal = False
            elif steps and not after_bracket:
                raise PathSyntaxError(f"Empty segment at position {i} in {path!r}")
            close = path.find(']', i)
            if close == -1:
                raise PathSyntaxError(f"Unclosed '[' at position {i} in {path!r}")
            inner = path[i + 1:close]
            if not _BRACKET_INDEX_RE.match(inner):
                raise PathSyntaxError(f"Non-numeric index [{inner}] in {path!r}")
            steps.append(Index(int(inner)))
            after_bracket = True
            i = close + 1
            if i < n and path[i] not in '.[':
                raise PathSyntaxError(f"Unexpected {path[i]!r} after index in {path!r}")
            continue

        if ch == ']':
            raise PathSyntaxError(f"Unbalanced ']' at position {i} in {path!r}")

        buf.append(ch)
        i += 1

    if buf:
        steps.append(_segment_step(buf, literal))
    return tuple(steps)


def format_path(steps: Sequence[Step], dialect: str = BRACKET) -> str:
    if dialect not in (BRACKET, DOT):
        raise ValueError(f"Unknown path dialect: {dialect!r}")

    parts: List[str] = []
    for step in steps:
        if isinstance(step, Index) and dialect == BRACKET:
            if parts:
                parts[-1] += f"[{step.position}]"
            else:
                parts.append(f"[{step.position}]")
        else:
            parts.append(str(step))
    return '.'.join(parts)


def to_dot_numeric(path: PathLike) -> str:
    """Rewrite every ``[N]`` as ``.N``; dot-numeric input comes back unchanged."""
    return format_path(parse_path(path), DOT)


def to_bracket(path: PathLike) -> str:
    return format_path(parse_path(path), BRACKET)


def alternate_paths(path: PathLike) -> List[str]:
    """Plausible reinterpretations of a path that no longer resolves.

    Order: leading ``settings.`` toggled, ``settings`` toggled in front of the
    final key, then bracket spellings. The input itself is never returned.
    """
    steps = parse_path(path)
    if not steps:
        return []
    settings = Key(SETTINGS_KEY)

    variants: List[Steps] = []
    if steps[0] == settings:
        if len(steps) > 1:
            variants.append(steps[1:])
    else:
        variants.append((settings,) + steps)

    if isinstance(steps[-1], Key):
        if len(steps) >= 2 and steps[-2] == settings:
            if len(steps) > 2:
                variants.append(steps[:-2] + steps[-1:])
        else:
            variants.append(steps[:-1] + (settings, steps[-1]))

    candidates: List[str] = []
    for variant in variants:
        candidates.append(format_path(variant, DOT))
        candidates.append(format_path(variant, BRACKET))
    candidates.append(format_path(steps, BRACKET))

    original = path if isinstance(path, str) else format_path(steps, BRACKET)
    out: List[str] = []
    for candidate in candidates:
        if candidate != original and candidate not in out:
            out.append(candidate)
    return out
