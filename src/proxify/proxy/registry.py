# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""ProxyRegistry — per-class record of intercepted method names and handlers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from proxify.proxy.types import Handler

REGISTRY_ATTR = "__proxify_registry__"


class ProxyRegistry(Mapping[str, Handler]):
    """Immutable mapping from method name to the handler that intercepts it.

    A registry is never mutated in place.  :meth:`merge` and :meth:`without`
    return new registries, so a subclass that reads its parent's registry
    by reference can fork it simply by storing the result on itself:

        registry = registry_of(Child)          # may be Parent's
        set_registry(Child, registry.merge({"welcome": handler}))
        # Parent's registry is untouched
    """

    __slots__ = ("_handlers",)

    def __init__(self, handlers: Mapping[str, Handler] | None = None) -> None:
        self._handlers: dict[str, Handler] = dict(handlers or {})

    def __getitem__(self, name: str) -> Handler:
        return self._handlers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def merge(self, entries: Mapping[str, Handler]) -> ProxyRegistry:
        """Return a registry with *entries* added, overwriting existing names."""
        return ProxyRegistry({**self._handlers, **entries})

    def without(self, names: Iterable[str]) -> ProxyRegistry:
        """Return a registry with every name in *names* removed."""
        dropped = set(names)
        return ProxyRegistry({k: v for k, v in self._handlers.items() if k not in dropped})

    def __repr__(self) -> str:
        return f"ProxyRegistry({sorted(self._handlers)!r})"


def registry_of(cls: type) -> ProxyRegistry | None:
    """Return the registry visible from *cls*, inherited ones included."""
    return getattr(cls, REGISTRY_ATTR, None)


def owns_registry(cls: type) -> bool:
    """Whether *cls* holds a registry of its own rather than an inherited one."""
    return REGISTRY_ATTR in cls.__dict__


def set_registry(cls: type, registry: ProxyRegistry) -> None:
    # type.__setattr__ skips the ProxifiedMeta lifecycle hook.
    type.__setattr__(cls, REGISTRY_ATTR, registry)


def handler_for(cls: type, name: str) -> Any:
    registry = registry_of(cls)
    if registry is None:
        return None
    return registry.get(name)
