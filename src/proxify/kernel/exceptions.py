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
"""Exception hierarchy for proxify.

All library exceptions inherit from ProxifyException so callers can catch
every interception error with a single handler.

Errors raised by the host runtime while dispatching through a forwarder
(``TypeError`` for a handler called with the wrong arguments,
``AttributeError`` for a missing method) are never wrapped.
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class ProxifyException(Exception):
    """Base exception for all proxify errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INVALID_ARGUMENT").
        context: Arbitrary key-value pairs describing the failure.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Argument Exceptions
# =============================================================================


class InvalidArgumentException(ProxifyException):
    """An interception request was rejected before any state was touched.

    Raised when no handler (or a non-callable one) is given, or when the set
    of method names is empty or holds something other than strings.
    """

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        context: dict | None = None,
    ) -> None:
        ctx = dict(context or {})
        if argument is not None:
            ctx.setdefault("argument", argument)
        super().__init__(message, code="INVALID_ARGUMENT", context=ctx)
        self.argument = argument
