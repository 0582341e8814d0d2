"""
Example Driver

Wires the process-wide services into a Container once, then runs one demo
per domain. A domain error stops the demo that raised it; the message is
printed and the next demo runs.
"""

from typing import Callable, List, Optional

from .accounts import InterestAccount, OverdraftAccount
from .commerce import (
    DiscountDecorator, Order, ProductFactory, ShopUser, UserService, set_dynamic_properties
)
from .config import ShowcaseConfig, get_config
from .container import Container
from .customers import Owner
from .errors import ShowcaseError
from .event_log import EventLog
from .factory import AccountFactory
from .game import EnemyPool, GameSession
from .logging_config import setup_logging
from .transfers import TransferService
from .vehicles import Bike, Car, Vehicle


def build_container(config: ShowcaseConfig, event_log: Optional[EventLog] = None) -> Container:
    """Register every shared service for one run"""
    container = Container()
    container.register("config", config)
    if event_log is None:
        event_log = EventLog(echo=config.event_log_echo)
    container.register("event_log", event_log)
    container.register_factory(
        "account_factory", lambda c: AccountFactory(c.resolve("event_log"), config.currency)
    )
    container.register_factory("transfer_service", lambda c: TransferService(c.resolve("event_log")))
    container.register_factory("product_factory", lambda c: ProductFactory(config.currency))
    container.register_factory("user_service", lambda c: UserService(c.resolve("event_log")))
    container.register_factory("enemy_pool", lambda c: EnemyPool(c.resolve("event_log")))
    return container


def run_banking_demo(container: Container) -> None:
    factory: AccountFactory = container.resolve("account_factory")
    transfers: TransferService = container.resolve("transfer_service")

    owner = Owner("CUST123", "Alice Johnson", "alice@example.com")
    savings: InterestAccount = factory.create("savings", "SA123", 5000, 2.5)
    current: OverdraftAccount = factory.create("current", "CA456", 10000, 2000)

    owner.add_account(savings)
    owner.add_account(current)

    savings.deposit(2000)
    savings.apply_interest()
    current.withdraw(500)

    transfers.transfer(savings, current, 1000)

    for summary in owner.list_accounts():
        print(summary)


def run_commerce_demo(container: Container) -> None:
    event_log: EventLog = container.resolve("event_log")
    products: ProductFactory = container.resolve("product_factory")
    users: UserService = container.resolve("user_service")

    alice = ShopUser("Alice", "alice@example.com")
    bob = ShopUser("Bob", "bob@example.com")
    users.add_user(alice)
    users.add_user(bob)

    phone = products.create("Electronics", {"name": "Smartphone", "price": 999, "warranty": 2})
    shirt = products.create("Clothing", {"name": "T-Shirt", "price": 25, "size": "M"})

    order = Order(alice, event_log, products.currency)
    order.add_product(phone).add_product(shirt)
    order.on("checkout", lambda total: print(
        f"Order Notification: Your order of {total.to_string()} has been processed."
    ))

    DiscountDecorator(order, "0.1").checkout()

    set_dynamic_properties(phone, {"brand": "TechCorp", "color": "Black"})
    print(f"Dynamic Properties Added: {phone.brand}, {phone.color}")


def run_game_demo(container: Container) -> None:
    event_log: EventLog = container.resolve("event_log")
    pool: EnemyPool = container.resolve("enemy_pool")

    session = GameSession("Hero", event_log)
    player = session.player
    print(player.inventory)
    print(player.inventory)

    goblin = pool.acquire("Goblin")
    orc = pool.acquire("Orc")
    session.add_enemy(goblin)
    session.add_enemy(orc)

    player.move(5, 5)
    goblin.move(3, 2)
    orc.move(1, 1)

    player.attack(goblin)
    goblin.attack(player)
    for _ in range(5):
        player.attack(goblin)

    for enemy in session.enemies:
        session.remove_enemy(enemy)
        pool.release(enemy)

    reused = pool.acquire("Goblin King")
    print(reused.name)


def run_vehicle_demo(container: Container) -> None:
    try:
        Vehicle("Generic", 0)
    except ShowcaseError as e:
        print(e)

    tesla = Car("Tesla", "Model S")
    ducati = Bike("Ducati", "Sports")
    tesla.speed = 120
    ducati.speed = 150

    for vehicle in (tesla, ducati):
        print(vehicle.start())
    for vehicle in (tesla, ducati):
        print(vehicle.drive())
    print(Vehicle.compare_speeds(tesla, ducati))


DEMOS: List[Callable[[Container], None]] = [
    run_banking_demo,
    run_commerce_demo,
    run_game_demo,
    run_vehicle_demo,
]


def run_demo(demo: Callable[[Container], None], container: Container) -> bool:
    """Run one demo, printing the message of any domain error"""
    try:
        demo(container)
        return True
    except ShowcaseError as e:
        print(f"Error: {e}")
        return False


def main() -> int:
    config = get_config()
    setup_logging(config.log_level, fmt=config.log_format, log_file=config.log_file)
    container = build_container(config)

    failures = 0
    for demo in DEMOS:
        print(f"--- {demo.__name__} ---")
        if not run_demo(demo, container):
            failures += 1

    event_log: EventLog = container.resolve("event_log")
    integrity = event_log.verify_integrity()
    print(f"{len(event_log)} events logged, chain valid: {integrity['valid']}")
    return 1 if failures else 0
