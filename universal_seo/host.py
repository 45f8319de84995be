"""
Host capability probe.

The host platform describes what is installed through a HostEnvironment:
defined constants, loaded classes, callable functions and service
singletons. Detection code only ever asks "is X present?" and "give me X",
so a host without a given integration simply leaves it out.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class HostEnvironment:
    constants: dict[str, Any] = field(default_factory=dict)
    classes: set[str] = field(default_factory=set)
    functions: dict[str, Callable[..., Any]] = field(default_factory=dict)
    services: dict[str, Any] = field(default_factory=dict)

    def is_defined(self, name: str) -> bool:
        return name in self.constants

    def constant(self, name: str, default: Any = None) -> Any:
        return self.constants.get(name, default)

    def class_exists(self, name: str) -> bool:
        return name.lstrip("\\") in {c.lstrip("\\") for c in self.classes}

    def function_exists(self, name: str) -> bool:
        return callable(self.functions.get(name))

    def function(self, name: str) -> Callable[..., Any] | None:
        fn = self.functions.get(name)
        return fn if callable(fn) else None

    def service(self, name: str) -> Any:
        return self.services.get(name)
