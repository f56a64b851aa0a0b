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
"""Tests for ProxyRegistry and the per-class registry slot."""

from __future__ import annotations

from proxify.proxy.registry import (
    ProxyRegistry,
    handler_for,
    owns_registry,
    registry_of,
    set_registry,
)


def _h1(call):
    return "h1"


def _h2(call):
    return "h2"


# ---- ProxyRegistry ----------------------------------------------------------


class TestProxyRegistry:
    def test_empty_by_default(self) -> None:
        registry = ProxyRegistry()
        assert len(registry) == 0
        assert list(registry) == []

    def test_merge_returns_new_registry(self) -> None:
        registry = ProxyRegistry()
        merged = registry.merge({"welcome": _h1})
        assert merged is not registry
        assert "welcome" not in registry
        assert merged["welcome"] is _h1

    def test_merge_overwrites_existing_name(self) -> None:
        registry = ProxyRegistry({"welcome": _h1}).merge({"welcome": _h2})
        assert len(registry) == 1
        assert registry["welcome"] is _h2

    def test_without_drops_names_and_ignores_unknown(self) -> None:
        registry = ProxyRegistry({"welcome": _h1, "goodbye": _h1})
        trimmed = registry.without(["welcome", "missing"])
        assert set(trimmed) == {"goodbye"}
        assert set(registry) == {"welcome", "goodbye"}

    def test_repr_lists_names(self) -> None:
        assert repr(ProxyRegistry({"b": _h1, "a": _h2})) == "ProxyRegistry(['a', 'b'])"


# ---- Class slot -------------------------------------------------------------


class TestRegistrySlot:
    def test_plain_class_has_no_registry(self) -> None:
        class Plain:
            pass

        assert registry_of(Plain) is None
        assert handler_for(Plain, "anything") is None

    def test_subclass_reads_parent_registry_by_reference(self) -> None:
        class Parent:
            pass

        class Child(Parent):
            pass

        registry = ProxyRegistry({"welcome": _h1})
        set_registry(Parent, registry)

        assert registry_of(Child) is registry
        assert owns_registry(Parent)
        assert not owns_registry(Child)
        assert handler_for(Child, "welcome") is _h1

    def test_child_fork_leaves_parent_untouched(self) -> None:
        class Parent:
            pass

        class Child(Parent):
            pass

        set_registry(Parent, ProxyRegistry({"welcome": _h1}))
        set_registry(Child, registry_of(Child).without(["welcome"]))

        assert "welcome" in registry_of(Parent)
        assert "welcome" not in registry_of(Child)
