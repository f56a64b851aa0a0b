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
"""Interception core types — Handler alias and the Invocation context."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from proxify.proxy.surface import ProxyMethod

Handler = Callable[..., Any]
"""A handler is called as ``handler(invocation, *args, **kwargs)``."""


@dataclass
class Invocation:
    """A single call routed through a forwarding method.

    Handlers receive the invocation as their first positional argument,
    followed by the arguments given at the call site.

    Attributes:
        target: The object whose method is being called.
        method_name: Name of the intercepted method.
        owner: The class whose surface holds the forwarder that fired.
        args: Positional arguments passed at the call site.
        kwargs: Keyword arguments passed at the call site.
        forwarder: The forwarding method that produced this invocation.
    """

    target: Any
    method_name: str
    owner: type
    args: tuple
    kwargs: dict[str, Any]
    forwarder: ProxyMethod = field(repr=False)

    def proceed(self, *args: Any, **kwargs: Any) -> Any:
        """Call the next applicable definition of the method.

        With no arguments the original call arguments are forwarded
        unchanged.  Otherwise exactly the given arguments are used.  To call
        the next definition with no arguments at all, use
        :meth:`proceed_with`.
        """
        if not args and not kwargs:
            args, kwargs = self.args, self.kwargs
        return self.proceed_with(*args, **kwargs)

    def proceed_with(self, *args: Any, **kwargs: Any) -> Any:
        """Call the next applicable definition with exactly these arguments."""
        return self.forwarder.next_definition(self.target)(*args, **kwargs)
