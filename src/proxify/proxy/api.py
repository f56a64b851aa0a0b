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
"""Runtime entry points working on any class or any single object.

A class receiver is handled exactly like the class-level API.  An object
receiver gets a scope of its own: a one-off subclass of its class that the
object is moved into, so interception applied to it is invisible to every
other instance::

    greeter = Greeter()
    apply_intercept(greeter, "welcome", handler=shout)

    type(greeter).__mro__   # (Greeter <scope>, Greeter, ..., object)
    Greeter().welcome("jack")   # untouched
"""

from __future__ import annotations

import logging
from typing import Any

from proxify.proxy.registry import ProxyRegistry, set_registry
from proxify.proxy.types import Handler
from proxify.proxy.weaver import intercept, is_intercepted, release, validate_interception

logger = logging.getLogger(__name__)

SINGLETON_ATTR = "__proxify_singleton__"


def scope_of(obj: Any) -> type | None:
    """Return the per-object scope *obj* lives in, or ``None``."""
    cls = type(obj)
    return cls if cls.__dict__.get(SINGLETON_ATTR, False) else None


def class_of(obj: Any) -> type:
    """Return the class of *obj*, looking through its per-object scope."""
    scope = scope_of(obj)
    return scope.__bases__[0] if scope is not None else type(obj)


def _ensure_scope(obj: Any) -> type:
    scope = scope_of(obj)
    if scope is not None:
        return scope

    cls = type(obj)
    namespace = {
        SINGLETON_ATTR: True,
        "__module__": cls.__module__,
        "__qualname__": cls.__qualname__,
        "__slots__": (),
    }
    scope = type(cls)(cls.__name__, (cls,), namespace)
    # Starts empty: releasing on the object must never reach the class.
    set_registry(scope, ProxyRegistry())
    obj.__class__ = scope
    logger.debug("Created per-object scope for %r", obj)
    return scope


def apply_intercept(receiver: Any, *names: str, handler: Handler | None = None) -> None:
    """Intercept *names* on *receiver*, a class or a single object.

    Raises:
        InvalidArgumentException: If *handler* or *names* are missing, in
            which case *receiver* is left untouched.
        TypeError: If *receiver* is an object whose class cannot be
            reassigned (instances of builtin types, for example).
    """
    validate_interception(names, handler)
    scope = receiver if isinstance(receiver, type) else _ensure_scope(receiver)
    intercept(scope, names, handler)


def remove_intercept(receiver: Any, *names: str) -> list[str]:
    """Release *names* (all when none are given) wherever *receiver* holds them.

    An object only ever releases what was applied to it directly.  A
    receiver that never intercepted anything releases nothing.
    """
    scope = receiver if isinstance(receiver, type) else scope_of(receiver)
    if scope is None:
        return []
    return release(scope, names)


def query_intercept(receiver: Any, name: str | None = None) -> bool:
    """Whether *receiver* intercepts *name*, or anything when *name* is omitted.

    For an object, interception applied to its class counts as well.
    """
    if isinstance(receiver, type):
        return is_intercepted(receiver, name)
    scope = scope_of(receiver)
    if scope is not None and is_intercepted(scope, name):
        return True
    return is_intercepted(class_of(receiver), name)
