"""Name matcher — select dependency names by glob pattern."""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable, Sequence

DEFAULT_PATTERNS = ("gulp-*", "gulp.*", "@*/gulp{-,.}*")


def build_patterns(pattern: str | Sequence[str] | None, override_pattern: bool = True) -> list[str]:
    """Return the effective pattern list.

    ``None`` means the defaults. With ``override_pattern=False`` the given
    patterns extend the defaults instead of replacing them.
    """
    if pattern is None:
        patterns = list(DEFAULT_PATTERNS)
    elif isinstance(pattern, str):
        patterns = [pattern]
    else:
        patterns = list(pattern)
    if not override_pattern:
        patterns = list(DEFAULT_PATTERNS) + patterns
    return patterns


def _split_alternatives(body: str) -> list[str]:
    """Split a brace body on top-level commas."""
    parts: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(body):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append(body[start:i])
            start = i + 1
    parts.append(body[start:])
    return parts


def _closing_brace(pattern: str, start: int) -> int:
    depth = 0
    for i in range(start, len(pattern)):
        if pattern[i] == "{":
            depth += 1
        elif pattern[i] == "}":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _translate(pattern: str) -> str:
    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "*":
            if pattern.startswith("**", i):
                out.append(".*")
                i += 2
                continue
            out.append("[^/]*")
        elif ch == "?":
            out.append("[^/]")
        elif ch == "[":
            end = pattern.find("]", i + 2)
            if end == -1:
                out.append(re.escape(ch))
            else:
                body = pattern[i + 1 : end]
                if body[0] in "!^":
                    body = "^" + body[1:]
                out.append("[" + body.replace("\\", "\\\\") + "]")
                i = end
        elif ch == "{":
            end = _closing_brace(pattern, i)
            body = pattern[i + 1 : end] if end != -1 else ""
            alternatives = _split_alternatives(body)
            if end == -1 or len(alternatives) < 2:
                out.append(re.escape(ch))
            else:
                out.append("(?:" + "|".join(_translate(alt) for alt in alternatives) + ")")
                i = end
        else:
            out.append(re.escape(ch))
        i += 1
    return "".join(out)


@functools.lru_cache(maxsize=256)
def compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a glob into an anchored regex.

    ``*`` and ``?`` never match ``/``, so ``gulp-*`` does not match scoped
    names; ``**`` does.
    """
    return re.compile(r"\A" + _translate(pattern) + r"\Z")


def match_names(names: Iterable[str], patterns: Sequence[str]) -> list[str]:
    """Return the names matching the pattern set, in input order.

    Patterns prefixed with ``!`` exclude. When every pattern is a negation,
    each name not excluded is kept; an empty pattern set matches nothing.
    """
    if not patterns:
        return []

    positive = [compile_glob(p) for p in patterns if not p.startswith("!")]
    negative = [compile_glob(p[1:]) for p in patterns if p.startswith("!")]

    matched: list[str] = []
    seen: set[str] = set()
    for name in names:
        if name in seen:
            continue
        if positive and not any(rx.match(name) for rx in positive):
            continue
        if any(rx.match(name) for rx in negative):
            continue
        seen.add(name)
        matched.append(name)
    return matched
