"""
Filter Registry

FilterRegistry: request-scoped store of value filters and output actions,
the extensibility points that SEO extensions (and the platform itself)
expose to other plugins.

Filters transform a value and hand it to the next callback in priority
order. Actions emit markup (e.g. into the document head). As with plugin
hook dispatch, a callback that raises is logged and skipped: the value
continues down the chain unchanged.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from universal_seo.overrides.base import HookRegistration

logger = logging.getLogger(__name__)


@dataclass
class _Callback:
    func: Callable[..., Any]
    priority: int
    name: str
    seq: int


class FilterRegistry:
    """In-process registry of filters and actions for a single request."""

    def __init__(self) -> None:
        self._filters: dict[str, list[_Callback]] = defaultdict(list)
        self._actions: dict[str, list[_Callback]] = defaultdict(list)
        self._seq = 0

    # ── Registration ──────────────────────────────────────────────────────────

    def add_filter(self, hook: str, func: Callable[..., Any], priority: int = 10, name: str | None = None) -> None:
        self._filters[hook].append(self._callback(func, priority, name))

    def add_action(self, hook: str, func: Callable[..., Any], priority: int = 10, name: str | None = None) -> None:
        self._actions[hook].append(self._callback(func, priority, name))

    def remove_action(self, hook: str, name: str) -> bool:
        """Remove every action on hook registered under name. Returns True if any was removed."""
        before = len(self._actions.get(hook, []))
        self._actions[hook] = [cb for cb in self._actions.get(hook, []) if cb.name != name]
        return len(self._actions[hook]) != before

    def wire(self, registrations: Iterable[HookRegistration]) -> None:
        """Apply a list of declarative registrations produced by an override strategy."""
        from universal_seo.overrides.base import HookKind

        for reg in registrations:
            if reg.kind is HookKind.FILTER:
                self.add_filter(reg.hook, reg.callback, reg.priority)
            elif reg.kind is HookKind.ACTION:
                self.add_action(reg.hook, reg.callback, reg.priority)
            elif reg.kind is HookKind.REMOVE and reg.target:
                self.remove_action(reg.hook, reg.target)

    # ── Dispatch ──────────────────────────────────────────────────────────────

    def apply_filters(self, hook: str, value: Any, *args: Any) -> Any:
        """
        Run value through every filter on hook, lowest priority first.

        Callbacks with equal priority run in registration order.
        """
        for cb in self._ordered(self._filters.get(hook, [])):
            try:
                value = cb.func(value, *args)
            except Exception as exc:
                logger.warning("Filter %s on %s raised: %s", cb.name, hook, exc)
        return value

    def do_action(self, hook: str, *args: Any) -> str:
        """Run every action on hook and concatenate the markup they return."""
        output: list[str] = []
        for cb in self._ordered(self._actions.get(hook, [])):
            try:
                result = cb.func(*args)
            except Exception as exc:
                logger.warning("Action %s on %s raised: %s", cb.name, hook, exc)
                continue
            if result:
                output.append(str(result))
        return "".join(output)

    # ── Internal ──────────────────────────────────────────────────────────────

    def _callback(self, func: Callable[..., Any], priority: int, name: str | None) -> _Callback:
        self._seq += 1
        return _Callback(func=func, priority=priority, name=name or getattr(func, "__name__", repr(func)), seq=self._seq)

    @staticmethod
    def _ordered(callbacks: list[_Callback]) -> list[_Callback]:
        return sorted(callbacks, key=lambda cb: (cb.priority, cb.seq))
