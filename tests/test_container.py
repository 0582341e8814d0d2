"""
Tests for the dependency injection container
"""

import pytest
from unittest.mock import Mock

from oop_showcase.container import Container
from oop_showcase.errors import ServiceNotFound


class TestContainer:
    """Test service registration and resolution"""

    def setup_method(self):
        """Set up test fixtures"""
        self.container = Container()

    def test_register_and_resolve_instance(self):
        service = object()
        self.container.register("svc", service)

        assert self.container.resolve("svc") is service
        assert "svc" in self.container

    def test_unknown_service(self):
        with pytest.raises(ServiceNotFound, match="Service missing not found"):
            self.container.resolve("missing")

    def test_unknown_service_is_key_error(self):
        with pytest.raises(KeyError):
            self.container.resolve("missing")

    def test_factory_is_lazy_and_built_once(self):
        factory = Mock(return_value="built")
        self.container.register_factory("svc", factory)

        factory.assert_not_called()
        assert self.container.resolve("svc") == "built"
        assert self.container.resolve("svc") == "built"
        factory.assert_called_once_with(self.container)

    def test_factory_can_resolve_dependencies(self):
        self.container.register("dep", 41)
        self.container.register_factory("svc", lambda c: c.resolve("dep") + 1)

        assert self.container.resolve("svc") == 42

    def test_register_replaces_factory(self):
        self.container.register_factory("svc", lambda c: "from factory")
        self.container.register("svc", "instance")

        assert self.container.resolve("svc") == "instance"

    def test_register_factory_replaces_instance(self):
        self.container.register("svc", "instance")
        self.container.register_factory("svc", lambda c: "from factory")

        assert self.container.resolve("svc") == "from factory"

    def test_names(self):
        self.container.register("b", 1)
        self.container.register_factory("a", lambda c: 2)

        assert self.container.names() == ["a", "b"]
        assert "c" not in self.container
