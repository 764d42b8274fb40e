"""Name-similarity fallback for functions the source scan could not resolve.

Stems
-----
- function: lowercase name; if it starts with a known verb, just that verb
  (`incrementMe` -> `increment`, `retFunc` -> `ret`).
- event: lowercase name with a trailing `ed` or `d` removed
  (`Incremented` -> `increment`, `Approved` -> `approv`).

A function/event pair matches when any rule holds:
1. stems are equal
2. the lowercase event name contains the function stem
3. the function stem contains the event stem and the event stem is long enough
4. both stems are short and share enough characters
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from emitscope.core.config import CorrelatorConfig
from emitscope.core.models import EmissionMap

_PAST_TENSE = re.compile(r"(ed|d)$")


def function_stem(name: str, verbs: Sequence[str]) -> str:
    lower = name.lower()
    # first verb in vocabulary order wins, e.g. "ret" before "return"
    for verb in verbs:
        if lower.startswith(verb):
            return verb
    return lower


def event_stem(name: str) -> str:
    return _PAST_TENSE.sub("", name.lower(), count=1)


def char_overlap(func_stem: str, ev_stem: str) -> float:
    """Share of `func_stem` characters found in `ev_stem`, over the longer length."""
    longest = max(len(func_stem), len(ev_stem))
    if longest == 0:
        return 0.0
    common = sum(1 for c in func_stem if c in ev_stem)
    return common / longest


def is_candidate(func_stem: str, event_name: str, config: CorrelatorConfig) -> bool:
    ev_lower = event_name.lower()
    ev_stem = event_stem(event_name)

    if func_stem == ev_stem:
        return True
    if func_stem in ev_lower:
        return True
    if ev_stem in func_stem and len(ev_stem) >= config.min_event_stem_len:
        return True
    if len(func_stem) <= config.short_stem_max_len and len(ev_stem) <= config.short_stem_max_len:
        return char_overlap(func_stem, ev_stem) >= config.overlap_ratio
    return False


def infer_emissions(
    function_names: Sequence[str],
    event_names: Sequence[str],
    config: CorrelatorConfig | None = None,
) -> EmissionMap:
    """Candidate events per function by name similarity; unmatched functions are absent."""
    config = config or CorrelatorConfig()
    mapping: EmissionMap = {}
    for fn in function_names:
        stem = function_stem(fn, config.verbs)
        matched = [ev for ev in event_names if is_candidate(stem, ev, config)]
        if matched:
            mapping[fn] = matched
    return mapping
