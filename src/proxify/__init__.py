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
"""proxify — method interception that follows classes, subclasses and objects."""

from proxify.kernel.exceptions import InvalidArgumentException, ProxifyException
from proxify.logging import configure_logging
from proxify.proxy import (
    Invocation,
    Proxified,
    ProxifiedMeta,
    apply_intercept,
    define_method,
    intercepts,
    query_intercept,
    remove_intercept,
    remove_method,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentException",
    "Invocation",
    "Proxified",
    "ProxifiedMeta",
    "ProxifyException",
    "apply_intercept",
    "configure_logging",
    "define_method",
    "intercepts",
    "query_intercept",
    "remove_intercept",
    "remove_method",
]
