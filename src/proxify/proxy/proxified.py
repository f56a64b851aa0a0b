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
"""Proxified — declarative opt-in to method interception.

Inheriting from :class:`Proxified` lets a class intercept any of its
instance methods with custom code and lets descendants inherit, replace or
release that interception without affecting their ancestors.

Basic usage::

    class Greeter(Proxified):
        @intercepts("welcome", "goodbye")
        def checked(call, name):
            call.target.check(name)
            return call.proceed(name)

        def check(self, name): ...
        def welcome(self, name): return f"welcome {name}!"
        def goodbye(self, name): return f"goodbye {name}!"

A subclass that only inherits shares the parent's forwarders.  A subclass
that redefines ``welcome`` gets its new body wrapped by the inherited
handler.  A subclass that calls ``intercept("welcome", handler=...)`` gets
its own handler in front of the parent's, and ``call.proceed`` runs the
parent's handler next.

Beware: a subclass body that calls ``super().welcome(name)`` runs the
parent's handler a second time, since the parent's forwarder is what
``super()`` finds.
"""

from __future__ import annotations

from typing import Any

from proxify.proxy.decorators import declared_names
from proxify.proxy.lifecycle import define_method, method_added, remove_method
from proxify.proxy.registry import ProxyRegistry, registry_of, set_registry
from proxify.proxy.surface import ProxySurface, proxy_chain, surface_of
from proxify.proxy.types import Handler
from proxify.proxy.weaver import intercept, is_instance_method, is_intercepted, release


class ProxifiedMeta(type):
    """Metaclass that keeps each class's surface in step with its methods.

    The class-level API (``intercept``, ``release``, ``is_intercepted``)
    lives here, so it is reachable on classes but never on their instances.
    An instance method of the same name defined by the class shadows it on
    the class; use the functions in :mod:`proxify.proxy.weaver` in that case.
    """

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any], **kwargs: Any) -> ProxifiedMeta:
        declarations: list[tuple[tuple[str, ...], Handler]] = []
        body: dict[str, Any] = {}
        for attr, value in namespace.items():
            names = declared_names(value)
            if names:
                declarations.append((names, value))
            else:
                body[attr] = value

        cls = super().__new__(mcs, name, bases, body, **kwargs)

        if registry_of(cls) is None:
            set_registry(cls, ProxyRegistry())

        for attr, value in body.items():
            if is_instance_method(value):
                method_added(cls, attr)

        for names, handler in declarations:
            intercept(cls, names, handler)
        return cls

    def __setattr__(cls, name: str, value: Any) -> None:
        define_method(cls, name, value)

    def __delattr__(cls, name: str) -> None:
        remove_method(cls, name)

    def intercept(cls, *names: str, handler: Handler | None = None) -> None:
        """Intercept *names* with *handler*; see :func:`proxify.proxy.weaver.intercept`."""
        intercept(cls, names, handler)

    def release(cls, *names: str) -> list[str]:
        """Release *names*, or every intercepted name when none are given."""
        return release(cls, names)

    def is_intercepted(cls, name: str | None = None) -> bool:
        return is_intercepted(cls, name)

    @property
    def proxy_surface(cls) -> ProxySurface | None:
        """The surface this class owns, if it ever installed a forwarder."""
        return surface_of(cls)

    @property
    def proxy_chain(cls) -> list[ProxySurface]:
        """Every surface consulted when dispatching on this class."""
        return proxy_chain(cls)


class Proxified(metaclass=ProxifiedMeta):
    """Base class opting a class and its descendants into interception."""

    __slots__ = ()
