"""
Test suite for the example driver

Runs each demo against a quiet event log and checks the container wiring.
"""

from decimal import Decimal

from oop_showcase import demo
from oop_showcase.config import ShowcaseConfig
from oop_showcase.currency import Currency, Money
from oop_showcase.errors import InsufficientFunds
from oop_showcase.event_log import EventLog
from oop_showcase.factory import AccountFactory


class TestBuildContainer:
    """Test service registration"""

    def setup_method(self):
        """Set up test fixtures"""
        self.config = ShowcaseConfig(event_log_echo=False)
        self.container = demo.build_container(self.config)

    def test_registered_services(self):
        assert self.container.names() == [
            "account_factory", "config", "enemy_pool", "event_log",
            "product_factory", "transfer_service", "user_service",
        ]

    def test_services_share_one_event_log(self):
        event_log = self.container.resolve("event_log")
        factory = self.container.resolve("account_factory")

        assert isinstance(factory, AccountFactory)
        assert factory.event_log is event_log
        assert self.container.resolve("transfer_service").event_log is event_log

    def test_empty_event_log_is_used(self):
        event_log = EventLog(echo=False)
        container = demo.build_container(self.config, event_log)
        assert container.resolve("event_log") is event_log

    def test_configured_currency(self):
        config = ShowcaseConfig(event_log_echo=False, default_currency="eur")
        container = demo.build_container(config)
        assert container.resolve("product_factory").currency == Currency.EUR


class TestDemos:
    """Test each demo end to end"""

    def setup_method(self):
        """Set up test fixtures"""
        self.event_log = EventLog(echo=False)
        self.container = demo.build_container(ShowcaseConfig(event_log_echo=False), self.event_log)

    def test_banking_demo(self, capsys):
        assert demo.run_demo(demo.run_banking_demo, self.container) is True

        out = capsys.readouterr().out
        assert "Account: SA123, Balance: 6175.00" in out
        assert "Account: CA456, Balance: 10500.00" in out
        assert "Interest of 175.00 applied to savings account SA123" in self.event_log.messages()

    def test_commerce_demo(self, capsys):
        assert demo.run_demo(demo.run_commerce_demo, self.container) is True

        out = capsys.readouterr().out
        assert "Order Notification: Your order of USD 921.60 has been processed." in out
        assert "Dynamic Properties Added: TechCorp, Black" in out
        assert "Discount applied: 10%" in self.event_log.messages()

    def test_game_demo(self, capsys):
        assert demo.run_demo(demo.run_game_demo, self.container) is True

        out = capsys.readouterr().out.splitlines()
        assert out[-1] == "Goblin King"
        messages = self.event_log.messages()
        assert messages.count("Loading inventory...") == 1
        assert "Goblin has been defeated!" in messages
        assert "Goblin is already defeated!" in messages
        assert self.container.resolve("enemy_pool").created_count == 2

    def test_vehicle_demo(self, capsys):
        assert demo.run_demo(demo.run_vehicle_demo, self.container) is True

        out = capsys.readouterr().out
        assert "Cannot instantiate abstract class Vehicle" in out
        assert "Ducati is faster than Tesla." in out

    def test_run_demo_reports_domain_errors(self, capsys):
        def failing(container):
            raise InsufficientFunds(
                "SA123",
                Money(Decimal('10'), Currency.USD),
                Money(Decimal('5'), Currency.USD),
            )

        assert demo.run_demo(failing, self.container) is False
        assert capsys.readouterr().out.startswith("Error: ")

    def test_event_chain_valid_after_all_demos(self, capsys):
        for run in demo.DEMOS:
            demo.run_demo(run, self.container)

        assert self.event_log.verify_integrity()['valid'] is True


class TestMain:
    """Test the entry point"""

    def test_main_runs_all_demos(self, monkeypatch, capsys):
        monkeypatch.setattr(demo, "setup_logging", lambda *args, **kwargs: None)
        monkeypatch.setattr(demo, "get_config", lambda: ShowcaseConfig(event_log_echo=False))

        assert demo.main() == 0

        out = capsys.readouterr().out
        for run in demo.DEMOS:
            assert f"--- {run.__name__} ---" in out
        assert "chain valid: True" in out

    def test_main_reports_failure(self, monkeypatch, capsys):
        def failing(container):
            raise InsufficientFunds(
                "X",
                Money(Decimal('1'), Currency.USD),
                Money(Decimal('0'), Currency.USD),
            )
        failing.__name__ = "failing"

        monkeypatch.setattr(demo, "setup_logging", lambda *args, **kwargs: None)
        monkeypatch.setattr(demo, "get_config", lambda: ShowcaseConfig(event_log_echo=False))
        monkeypatch.setattr(demo, "DEMOS", [failing])

        assert demo.main() == 1
        assert "Error: " in capsys.readouterr().out
