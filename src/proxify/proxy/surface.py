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
"""Interception surface — forwarding methods placed ahead of a class's own bodies.

Python always resolves an attribute on ``type(obj)`` before its bases, so a
surface cannot be a separate layer in front of the class.  Instead the
forwarder takes the intercepted name in the class's own ``__dict__`` and the
class's own definition is kept aside in the surface.  Lookup order is then::

    Child.__dict__[name]  (forwarder)  ->  Child's own body (kept aside)
                                       ->  Parent.__dict__[name] ...

which is the same order a dedicated layer in front of each class would give.
"""

from __future__ import annotations

import types
from collections.abc import Callable
from typing import Any

from proxify.proxy.types import Handler, Invocation

SURFACE_ATTR = "__proxify_surface__"


class ProxyMethod:
    """Forwarding method installed under an intercepted name.

    Calling it runs the handler with an :class:`Invocation` followed by the
    call-site arguments.  The handler reaches the wrapped body through
    :meth:`Invocation.proceed`.
    """

    def __init__(self, owner: type, name: str, handler: Handler) -> None:
        self.owner = owner
        self.handler = handler
        self.__name__ = name
        self.__qualname__ = f"{owner.__qualname__}.{name}"
        self.__doc__ = getattr(handler, "__doc__", None)

    @property
    def name(self) -> str:
        return self.__name__

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __call__(self, target: Any, *args: Any, **kwargs: Any) -> Any:
        invocation = Invocation(
            target=target,
            method_name=self.__name__,
            owner=self.owner,
            args=args,
            kwargs=kwargs,
            forwarder=self,
        )
        return self.handler(invocation, *args, **kwargs)

    def next_definition(self, target: Any) -> Callable[..., Any]:
        """Resolve what this forwarder shadows, bound to *target*.

        That is the owner's own body when it has one, otherwise whatever the
        rest of the MRO provides (a parent's forwarder or body).
        """
        surface = surface_of(self.owner)
        original = surface.original(self.__name__) if surface is not None else None
        if original is not None:
            return original.__get__(target, type(target))
        return getattr(super(self.owner, target), self.__name__)

    def __repr__(self) -> str:
        return f"<proxy method {self.__qualname__}>"


class ProxySurface:
    """The set of forwarders installed on one class.

    A surface is created the first time its class intercepts a method that
    is actually defined, and it is never removed afterwards.
    """

    def __init__(self, owner: type) -> None:
        self.owner = owner
        self.name = f"{owner.__qualname__}.Proxy"
        self._forwarders: dict[str, ProxyMethod] = {}
        self._originals: dict[str, Callable[..., Any]] = {}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._holds(name)

    @property
    def names(self) -> list[str]:
        """Names of the currently installed forwarders."""
        return [name for name in self._forwarders if self._holds(name)]

    def _holds(self, name: str) -> bool:
        # A plain class can be reassigned or trimmed behind the surface's back.
        forwarder = self._forwarders.get(name)
        return forwarder is not None and self.owner.__dict__.get(name) is forwarder

    def original(self, name: str) -> Callable[..., Any] | None:
        """The owner's own definition of *name* kept aside by the forwarder."""
        return self._originals.get(name)

    def install(self, name: str, handler: Handler) -> ProxyMethod:
        """Put a forwarder for *name* in the owner's namespace.

        Replaces any forwarder already installed for *name*.  An own
        definition currently sitting in the namespace is kept aside.
        """
        current = self.owner.__dict__.get(name)
        if current is None:
            self._originals.pop(name, None)
        elif current is not self._forwarders.get(name):
            self._originals[name] = current
        forwarder = ProxyMethod(self.owner, name, handler)
        type.__setattr__(self.owner, name, forwarder)
        self._forwarders[name] = forwarder
        return forwarder

    def remove(self, name: str) -> bool:
        """Take the forwarder for *name* out, putting the own definition back.

        Returns ``False`` when nothing is installed under *name*.  When the
        namespace no longer holds the forwarder (the name was reassigned or
        deleted directly) only the bookkeeping is discarded.
        """
        holds = self._holds(name)
        self._forwarders.pop(name, None)
        original = self._originals.pop(name, None)
        if not holds:
            return False
        if original is not None:
            type.__setattr__(self.owner, name, original)
        else:
            type.__delattr__(self.owner, name)
        return True

    def drop(self, name: str) -> bool:
        """Discard both the forwarder and the own definition of *name*.

        The namespace is only touched while it still holds the forwarder.
        """
        holds = self._holds(name)
        self._forwarders.pop(name, None)
        self._originals.pop(name, None)
        if not holds:
            return False
        type.__delattr__(self.owner, name)
        return True

    def __repr__(self) -> str:
        return f"<ProxySurface {self.name} {sorted(self._forwarders)!r}>"


def surface_of(cls: type, create: bool = False) -> ProxySurface | None:
    """Return the surface owned by *cls*; inherited surfaces are not considered."""
    surface = cls.__dict__.get(SURFACE_ATTR)
    if surface is None and create:
        surface = ProxySurface(cls)
        type.__setattr__(cls, SURFACE_ATTR, surface)
    return surface


def proxy_chain(cls: type) -> list[ProxySurface]:
    """All surfaces consulted when dispatching on *cls*, most specific first."""
    return [klass.__dict__[SURFACE_ATTR] for klass in cls.__mro__ if SURFACE_ATTR in klass.__dict__]
