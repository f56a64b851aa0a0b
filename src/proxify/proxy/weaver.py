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
"""Proxy weaver — registers handlers on a class and keeps its surface in step."""

from __future__ import annotations

import logging
import types
from collections.abc import Iterable
from typing import Any

from proxify.kernel.exceptions import InvalidArgumentException
from proxify.proxy.registry import ProxyRegistry, registry_of, set_registry
from proxify.proxy.surface import ProxyMethod, surface_of
from proxify.proxy.types import Handler

logger = logging.getLogger(__name__)

_METHOD_TYPES = (
    types.FunctionType,
    ProxyMethod,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
)


def is_instance_method(value: Any) -> bool:
    """Whether a raw namespace value is something the weaver may wrap.

    Plain functions, installed forwarders and builtin slot methods qualify.
    Classmethods, staticmethods, properties and data attributes do not.
    """
    return isinstance(value, _METHOD_TYPES)


def method_defined(cls: type, name: str) -> bool:
    """Whether instances of *cls* currently resolve *name* to an instance method."""
    for klass in cls.__mro__:
        if name in klass.__dict__:
            return is_instance_method(klass.__dict__[name])
    return False


def validate_interception(names: Iterable[Any], handler: Handler | None) -> tuple[str, ...]:
    """Check an interception request and return its names as a tuple.

    Raises:
        InvalidArgumentException: If *handler* is missing or not callable,
            or *names* is empty or holds a non-string.
    """
    if handler is None:
        raise InvalidArgumentException("no handler given", argument="handler")
    if not callable(handler):
        raise InvalidArgumentException(f"handler {handler!r} is not callable", argument="handler")
    names = tuple(names)
    if not names:
        raise InvalidArgumentException("no methods given", argument="names")
    for name in names:
        if not isinstance(name, str):
            raise InvalidArgumentException(
                f"method names must be strings, got {name!r}",
                argument="names",
                context={"name": repr(name)},
            )
    return names


def intercept(cls: type, names: Iterable[str], handler: Handler | None) -> None:
    """Route every method in *names* on *cls* through *handler*.

    Each name is registered on *cls*, forking the registry it inherited.  A
    forwarder is installed straight away for names *cls* currently defines
    and later, through the lifecycle hooks, for the rest.  Registering a
    name again replaces its handler.
    """
    names = validate_interception(names, handler)
    registry = registry_of(cls) or ProxyRegistry()
    set_registry(cls, registry.merge(dict.fromkeys(names, handler)))

    for name in names:
        if method_defined(cls, name):
            surface_of(cls, create=True).install(name, handler)
            logger.debug("Intercepted %s.%s", cls.__qualname__, name)
        else:
            logger.debug("Deferred interception of %s.%s until it is defined", cls.__qualname__, name)


def release(cls: type, names: Iterable[str] = ()) -> list[str]:
    """Stop intercepting *names* on *cls*; every registered name when empty.

    Names that were never registered are ignored.  Returns the names that
    were actually released.
    """
    registry = registry_of(cls)
    if registry is None:
        return []

    requested = list(dict.fromkeys(names)) or list(registry)
    released = [name for name in requested if name in registry]
    if released:
        set_registry(cls, registry.without(released))

    surface = surface_of(cls)
    if surface is not None:
        for name in requested:
            if surface.remove(name):
                logger.debug("Released %s.%s", cls.__qualname__, name)
    return released


def is_intercepted(cls: type, name: str | None = None) -> bool:
    """Whether *name* (or, without a name, anything) is registered on *cls*."""
    registry = registry_of(cls)
    if registry is None:
        return False
    if name is None:
        return bool(registry)
    return name in registry
