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
"""Lifecycle hooks — keep a class's surface in step with its method set.

Classes built on :class:`~proxify.proxy.proxified.ProxifiedMeta` route every
attribute assignment and deletion through :func:`define_method` and
:func:`remove_method`.  Classes with a plain ``type`` metaclass that were
opted in at runtime have no such hook and must call these functions
directly for a redefinition to be noticed.
"""

from __future__ import annotations

import logging
from typing import Any

from proxify.proxy.registry import handler_for
from proxify.proxy.surface import surface_of
from proxify.proxy.weaver import is_instance_method

logger = logging.getLogger(__name__)


def method_added(cls: type, name: str) -> None:
    """React to *name* having just been defined on *cls*."""
    handler = handler_for(cls, name)
    if handler is None:
        return
    surface_of(cls, create=True).install(name, handler)
    logger.debug("Re-attached proxy for %s.%s", cls.__qualname__, name)


def define_method(cls: type, name: str, value: Any) -> None:
    """Set *name* on *cls*, intercepting it when it is registered.

    A method assigned under a registered name is wrapped right away.  Any
    other value replacing an intercepted method takes the forwarder down
    with it; the registration stays and applies again once a method is
    assigned under that name.
    """
    surface = surface_of(cls)
    if surface is not None and name in surface:
        surface.drop(name)
    type.__setattr__(cls, name, value)
    if is_instance_method(value):
        method_added(cls, name)


def remove_method(cls: type, name: str) -> None:
    """Delete *cls*'s own definition of *name*.

    The registration is kept, so defining *name* again restores the
    interception without another ``intercept`` call.

    Raises:
        AttributeError: If *cls* itself does not define *name*.
    """
    surface = surface_of(cls)
    if surface is None or name not in surface:
        type.__delattr__(cls, name)
        return
    if surface.original(name) is None:
        raise AttributeError(f"type object '{cls.__qualname__}' has no own method '{name}'")
    surface.drop(name)
    logger.debug("Detached proxy for removed method %s.%s", cls.__qualname__, name)
