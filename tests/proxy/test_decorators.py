"""Tests for the @intercepts declaration decorator."""

from __future__ import annotations

import pytest

from proxify.kernel.exceptions import InvalidArgumentException
from proxify.proxy.decorators import INTERCEPTS_ATTR, declared_names, intercepts
from proxify.proxy.proxified import Proxified


class TestIntercepts:
    def test_marks_function_and_returns_it(self) -> None:
        def handler(call):
            return None

        assert intercepts("foo", "bar")(handler) is handler
        assert getattr(handler, INTERCEPTS_ATTR) == ("foo", "bar")

    def test_stacked_declarations_accumulate(self) -> None:
        @intercepts("bar")
        @intercepts("foo")
        def handler(call):
            return None

        assert declared_names(handler) == ("foo", "bar")

    def test_requires_names(self) -> None:
        with pytest.raises(InvalidArgumentException):
            intercepts()

    def test_declared_names_of_unmarked_values(self) -> None:
        assert declared_names(lambda: None) == ()
        assert declared_names("text") == ()

    def test_stacked_declaration_in_class_body(self) -> None:
        class Receiver(Proxified):
            @intercepts("bar")
            @intercepts("foo")
            def tagged(call):
                return f"{call.method_name}-proxied"

            def foo(self):
                return "foo"

            def bar(self):
                return "bar"

        assert Receiver().foo() == "foo-proxied"
        assert Receiver().bar() == "bar-proxied"
