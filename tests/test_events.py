"""
Tests for the event emitter mixin
"""

from unittest.mock import Mock

from oop_showcase.events import EventEmitterMixin


class Emitter(EventEmitterMixin):
    pass


class TestEventEmitterMixin:
    """Test on/off/emit"""

    def setup_method(self):
        """Set up test fixtures"""
        self.emitter = Emitter()

    def test_emit_calls_listeners_with_args(self):
        listener = Mock()
        self.emitter.on("checkout", listener)

        delivered = self.emitter.emit("checkout", 100, "USD")

        listener.assert_called_once_with(100, "USD")
        assert delivered == 1

    def test_emit_without_listeners(self):
        assert self.emitter.emit("nothing") == 0

    def test_listeners_are_per_event(self):
        checkout = Mock()
        cancel = Mock()
        self.emitter.on("checkout", checkout)
        self.emitter.on("cancel", cancel)

        self.emitter.emit("checkout")

        checkout.assert_called_once_with()
        cancel.assert_not_called()

    def test_listeners_called_in_subscription_order(self):
        calls = []
        self.emitter.on("e", lambda: calls.append(1))
        self.emitter.on("e", lambda: calls.append(2))

        self.emitter.emit("e")
        assert calls == [1, 2]
        assert self.emitter.listener_count("e") == 2

    def test_off(self):
        listener = Mock()
        self.emitter.on("e", listener)
        self.emitter.off("e", listener)

        self.emitter.emit("e")
        listener.assert_not_called()

    def test_off_unknown_listener_is_harmless(self):
        self.emitter.off("e", Mock())
        assert self.emitter.listener_count("e") == 0

    def test_failing_listener_does_not_stop_others(self):
        failing = Mock(side_effect=RuntimeError("boom"))
        ok = Mock()
        self.emitter.on("e", failing)
        self.emitter.on("e", ok)

        delivered = self.emitter.emit("e")

        ok.assert_called_once_with()
        assert delivered == 1

    def test_instances_do_not_share_listeners(self):
        other = Emitter()
        listener = Mock()
        self.emitter.on("e", listener)

        other.emit("e")
        listener.assert_not_called()
