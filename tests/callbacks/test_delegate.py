"""Tests for delegate composition, removal and invocation."""

import pytest

from delegates_app.callbacks import Delegate, MessageDelegate, compose, remove
from delegates_app.catalog import ProcessBookDelegate
from delegates_app.errors import CallbackError, SignatureMismatchError


class Counter:
    """Receiver used to check bound-method targets."""

    def __init__(self, name: str):
        self.name = name
        self.seen = []

    def on_message(self, message: str) -> None:
        self.seen.append(message)


class TestDelegateInvocation:
    """Test calling single and composed delegates."""

    def test_single_target_called_once(self, recorder):
        a = MessageDelegate(recorder.target("a"))
        a("x")
        assert recorder.calls == [("a", "x")]

    def test_composed_targets_called_in_order(self, recorder):
        c = compose(MessageDelegate(recorder.target("a")), MessageDelegate(recorder.target("b")))
        c("x")
        assert recorder.calls == [("a", "x"), ("b", "x")]

    def test_composition_is_associative(self, recorder):
        a = MessageDelegate(recorder.target("a"))
        b = MessageDelegate(recorder.target("b"))
        c = MessageDelegate(recorder.target("c"))

        compose(compose(a, b), c)("left")
        left = recorder.labels()
        recorder.calls.clear()
        compose(a, compose(b, c))("right")

        assert left == ["a", "b", "c"]
        assert recorder.labels() == left

    def test_return_value_of_last_target(self):
        d = Delegate(lambda x: x + 1) + (lambda x: x * 10)
        assert d(2) == 20

    def test_exception_stops_remaining_targets(self, recorder):
        def boom(_):
            raise RuntimeError("boom")

        d = MessageDelegate(recorder.target("a")) + boom + recorder.target("c")
        with pytest.raises(RuntimeError):
            d("x")
        assert recorder.labels() == ["a"]

    def test_noop_does_nothing(self):
        noop = MessageDelegate.noop()
        assert noop.is_noop
        assert noop("x") is None


class TestDelegateRemoval:
    """Test removing targets from composed delegates."""

    def test_remove_leaves_remaining_target(self, recorder):
        a = MessageDelegate(recorder.target("a"))
        b = MessageDelegate(recorder.target("b"))

        d = remove(compose(a, b), a)
        d("x")

        assert recorder.calls == [("b", "x")]
        assert d == b

    def test_remove_absent_target_is_noop(self, recorder):
        a = MessageDelegate(recorder.target("a"))
        b = MessageDelegate(recorder.target("b"))

        d = remove(compose(a, b), a)
        again = remove(d, a)
        again("y")

        assert again == d
        assert recorder.calls == [("b", "y")]

    def test_remove_last_target_yields_noop_delegate(self, recorder):
        a = MessageDelegate(recorder.target("a"))

        empty = a - a

        assert empty is not None
        assert empty.is_noop
        assert isinstance(empty, MessageDelegate)
        empty("x")
        assert recorder.calls == []

    def test_remove_unrelated_target_returns_equal_delegate(self, recorder):
        a = MessageDelegate(recorder.target("a"))
        other = MessageDelegate(recorder.target("other"))
        assert a - other == a

    def test_remove_only_first_occurrence(self, recorder):
        a = MessageDelegate(recorder.target("a"))
        b = MessageDelegate(recorder.target("b"))

        d = (a + b + a) - a
        d("x")

        assert recorder.labels() == ["b", "a"]

    def test_remove_contiguous_run(self, recorder):
        a = MessageDelegate(recorder.target("a"))
        b = MessageDelegate(recorder.target("b"))
        c = MessageDelegate(recorder.target("c"))

        assert (a + b + c) - (b + c) == a
        # b and c are not adjacent here, so nothing is removed
        unchanged = a + c + b
        assert unchanged - (b + c) == unchanged

    def test_remove_plain_callable(self, recorder):
        hello = recorder.target("hello")
        goodbye = recorder.target("goodbye")

        d = (MessageDelegate(hello) + goodbye) - hello
        d("x")

        assert recorder.labels() == ["goodbye"]

    def test_bound_methods_compare_by_receiver(self):
        first = Counter("first")
        second = Counter("second")

        both = MessageDelegate(first.on_message) + second.on_message
        # A fresh bound method of the same receiver matches
        only_second = both - first.on_message
        only_second("x")

        assert first.seen == []
        assert second.seen == ["x"]
        assert only_second == MessageDelegate(second.on_message)

    def test_operands_are_not_modified(self, recorder):
        a = MessageDelegate(recorder.target("a"))
        b = MessageDelegate(recorder.target("b"))

        c = a + b
        _ = c - a

        assert len(a.targets) == 1
        assert len(b.targets) == 1
        assert len(c.targets) == 2


class TestDelegateConstruction:
    """Test construction, typing and immutability."""

    def test_non_callable_target_rejected(self):
        with pytest.raises(TypeError):
            MessageDelegate("not callable")

    def test_adding_non_callable_rejected(self, recorder):
        with pytest.raises(TypeError):
            MessageDelegate(recorder.target("a")) + 1

    def test_compose_needs_a_delegate(self, recorder):
        with pytest.raises(TypeError):
            compose(recorder.target("a"), recorder.target("b"))

    def test_plain_callable_on_left_takes_delegate_type(self, recorder):
        d = recorder.target("a") + MessageDelegate(recorder.target("b"))
        assert isinstance(d, MessageDelegate)
        d("x")
        assert recorder.labels() == ["a", "b"]

    def test_signature_mismatch_rejected(self, recorder):
        messages = MessageDelegate(recorder.target("a"))
        books = ProcessBookDelegate(recorder.target("b"))

        with pytest.raises(SignatureMismatchError) as exc_info:
            messages + books

        assert exc_info.value.expected == "MessageDelegate"
        assert exc_info.value.actual == "ProcessBookDelegate"
        assert isinstance(exc_info.value, TypeError)
        assert isinstance(exc_info.value, CallbackError)

    def test_remove_with_mismatched_signature_rejected(self, recorder):
        messages = MessageDelegate(recorder.target("a"))
        with pytest.raises(SignatureMismatchError):
            remove(messages, ProcessBookDelegate(recorder.target("a")))

    def test_wrapping_delegate_of_other_type_rejected(self, recorder):
        with pytest.raises(SignatureMismatchError):
            MessageDelegate(ProcessBookDelegate(recorder.target("a")))

    def test_delegates_are_immutable(self, recorder):
        a = MessageDelegate(recorder.target("a"))
        with pytest.raises(AttributeError):
            a._targets = ()

    def test_invocation_list(self, recorder):
        a = MessageDelegate(recorder.target("a"))
        b = MessageDelegate(recorder.target("b"))

        parts = (a + b).invocation_list()

        assert parts == (a, b)
        assert all(isinstance(p, MessageDelegate) for p in parts)

    def test_equal_delegates_hash_equal(self, recorder):
        target = recorder.target("a")
        assert hash(MessageDelegate(target)) == hash(MessageDelegate(target))
        assert MessageDelegate(target) in {MessageDelegate(target)}

    def test_repr_lists_targets(self):
        counter = Counter("c")
        text = repr(MessageDelegate(counter.on_message))
        assert text.startswith("MessageDelegate([")
        assert "Counter.on_message of Counter@" in text
