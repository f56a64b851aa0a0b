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
"""Method interception: registries, surfaces, lifecycle hooks and entry points."""

from proxify.proxy.api import apply_intercept, class_of, query_intercept, remove_intercept, scope_of
from proxify.proxy.decorators import intercepts
from proxify.proxy.lifecycle import define_method, remove_method
from proxify.proxy.proxified import Proxified, ProxifiedMeta
from proxify.proxy.registry import ProxyRegistry, registry_of
from proxify.proxy.surface import ProxyMethod, ProxySurface, proxy_chain, surface_of
from proxify.proxy.types import Handler, Invocation
from proxify.proxy.weaver import intercept, is_intercepted, method_defined, release

__all__ = [
    "Handler",
    "Invocation",
    "Proxified",
    "ProxifiedMeta",
    "ProxyMethod",
    "ProxyRegistry",
    "ProxySurface",
    "apply_intercept",
    "class_of",
    "define_method",
    "intercept",
    "intercepts",
    "is_intercepted",
    "method_defined",
    "proxy_chain",
    "query_intercept",
    "registry_of",
    "release",
    "remove_intercept",
    "remove_method",
    "scope_of",
    "surface_of",
]
