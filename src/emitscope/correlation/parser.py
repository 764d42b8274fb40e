"""Source scan: which events does each function body emit?

The scanner works on a masked copy of the source in which comments and the
contents of string literals are blanked out (same length, newlines kept), so
that braces, parentheses and `emit` inside them are never counted. Function
bodies are delimited with a depth counter, not a fixed-depth pattern.
"""

from __future__ import annotations

import logging
import re

from emitscope.core.models import EmissionMap

logger = logging.getLogger(__name__)

_FUNCTION_HEAD = re.compile(r"\bfunction\s+(\w+)\s*\(")
_EMIT = re.compile(r"\bemit\s+(?:\w+\s*\.\s*)*(\w+)\s*\(")


def mask_source(source: str) -> str:
    """Blank out comments and string-literal contents, preserving offsets."""
    out: list[str] = []
    i, n = 0, len(source)
    while i < n:
        ch = source[i]
        nxt = source[i + 1] if i + 1 < n else ""
        if ch == "/" and nxt == "/":
            end = source.find("\n", i)
            end = n if end == -1 else end
            out.append(" " * (end - i))
            i = end
        elif ch == "/" and nxt == "*":
            end = source.find("*/", i + 2)
            end = n if end == -1 else end + 2
            out.append(re.sub(r"[^\n]", " ", source[i:end]))
            i = end
        elif ch in "\"'":
            j = i + 1
            while j < n and source[j] != ch and source[j] != "\n":
                j += 2 if source[j] == "\\" else 1
            j = min(j, n)
            out.append(ch + " " * (j - i - 1))
            if j < n and source[j] == ch:
                out.append(ch)
                j += 1
            i = j
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _match_paren(text: str, open_idx: int) -> int:
    """Index of the `)` closing the `(` at `open_idx`, or -1."""
    depth = 0
    for i in range(open_idx, len(text)):
        if text[i] == "(":
            depth += 1
        elif text[i] == ")":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _find_body_open(text: str, start: int) -> int:
    """After a parameter list, find the body's `{`; -1 for a bodiless declaration."""
    depth = 0
    for i in range(start, len(text)):
        ch = text[i]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif depth == 0 and ch == ";":
            return -1
        elif depth == 0 and ch == "{":
            return i
    return -1


def _match_brace(text: str, open_idx: int) -> int:
    """Index of the `}` closing the `{` at `open_idx`, or -1 if unbalanced."""
    depth = 0
    for i in range(open_idx, len(text)):
        if text[i] == "{":
            depth += 1
        elif text[i] == "}":
            depth -= 1
            if depth == 0:
                return i
    return -1


def emitted_events(body: str) -> list[str]:
    """Distinct event names emitted in `body`, in first-seen order."""
    seen: list[str] = []
    for m in _EMIT.finditer(body):
        if m.group(1) not in seen:
            seen.append(m.group(1))
    return seen


def parse_emissions(source_text: str) -> EmissionMap:
    """Map every function defined in `source_text` to the events its body emits.

    Functions with no emit are left out. Overloads sharing a name are merged.
    Parsing stops at the first unbalanced construct and keeps what it has.
    """
    mapping: EmissionMap = {}
    if not source_text:
        return mapping

    masked = mask_source(source_text)
    pos = 0
    while True:
        head = _FUNCTION_HEAD.search(masked, pos)
        if head is None:
            break
        name = head.group(1)
        params_close = _match_paren(masked, head.end() - 1)
        if params_close == -1:
            logger.debug("unbalanced parameter list for %s; stopping scan", name)
            break
        body_open = _find_body_open(masked, params_close + 1)
        if body_open == -1:
            # interface / abstract declaration
            pos = params_close + 1
            continue
        body_close = _match_brace(masked, body_open)
        if body_close == -1:
            logger.debug("unbalanced body for %s; stopping scan", name)
            break

        for event in emitted_events(masked[body_open + 1 : body_close]):
            emitted = mapping.setdefault(name, [])
            if event not in emitted:
                emitted.append(event)
        pos = body_close + 1

    return mapping
