"""
ethiocal.attributes.registry
----------------------------
Named display attributes computed from a DayInfo. Each attribute function
returns a small dict that is merged into ``DayInfo.attributes``; several keys
may come from one attribute (e.g. ``weekday`` and ``weekday_name``).
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Sequence

from ..core.errors import UnknownAttributeError
from ..core.types import DayInfo

logger = logging.getLogger(__name__)

AttrFunc = Callable[[DayInfo], Dict[str, Any]]
_ATTRIBUTES: Dict[str, AttrFunc] = {}


def register_attribute(name: str, fn: AttrFunc, *, overwrite: bool = False) -> None:
    if name in _ATTRIBUTES and not overwrite:
        raise KeyError(f"Attribute already registered: {name}")
    _ATTRIBUTES[name] = fn
    logger.debug("registered attribute %s", name)


def attribute(name: str, *, overwrite: bool = False) -> Callable[[AttrFunc], AttrFunc]:
    """Decorator form of :func:`register_attribute`."""
    def deco(fn: AttrFunc) -> AttrFunc:
        register_attribute(name, fn, overwrite=overwrite)
        return fn
    return deco


def list_attributes() -> list[str]:
    return sorted(_ATTRIBUTES)


def compute_attributes(info: DayInfo, names: Sequence[str]) -> Dict[str, Any]:
    # reject the whole request before computing anything
    unknown = [n for n in names if n not in _ATTRIBUTES]
    if unknown:
        raise UnknownAttributeError(
            f"Unknown attribute(s) {', '.join(map(repr, unknown))}. Available: {', '.join(list_attributes())}"
        )
    out: Dict[str, Any] = {}
    for name in names:
        out.update(_ATTRIBUTES[name](info))
    return out
