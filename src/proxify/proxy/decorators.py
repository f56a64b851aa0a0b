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
"""Declaration decorator — @intercepts for handlers written in a class body."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from proxify.kernel.exceptions import InvalidArgumentException

F = TypeVar("F", bound=Callable[..., Any])

INTERCEPTS_ATTR = "__proxify_intercepts__"


def intercepts(*names: str) -> Callable[[F], F]:
    """Declare the decorated function as the handler for *names*.

    Only meaningful inside the body of a :class:`~proxify.Proxified` class.
    The metaclass takes the function out of the class namespace and
    registers it once the class exists, so the declaration may come before
    or after the methods it targets::

        class Greeter(Proxified):
            @intercepts("welcome", "goodbye")
            def checked(call, name):
                call.target.check(name)
                return call.proceed(name)

            def welcome(self, name): ...

    Decorators may be stacked to attach the same handler to more names.

    Raises:
        InvalidArgumentException: If no names are given.
    """
    if not names:
        raise InvalidArgumentException("no methods given", argument="names")

    def decorator(fn: F) -> F:
        declared = getattr(fn, INTERCEPTS_ATTR, ())
        setattr(fn, INTERCEPTS_ATTR, (*declared, *names))
        return fn

    return decorator


def declared_names(value: Any) -> tuple[str, ...]:
    """Names a namespace value was declared to intercept; empty when none."""
    return getattr(value, INTERCEPTS_ATTR, ()) if callable(value) else ()
