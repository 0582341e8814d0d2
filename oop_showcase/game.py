"""
Game Entity Module

Entities composed from capability mixins (Movable, Damageable, Attacker),
a player with a lazily loaded inventory, an object pool that recycles
enemies, and a game session keeping its player and enemies private.
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .abstract import AbstractEntity
from .errors import InvalidAmount
from .event_log import EventLog


DEFAULT_INVENTORY = ("Sword", "Shield", "Potion")


@dataclass(frozen=True)
class Position:
    x: int = 0
    y: int = 0

    def translate(self, dx: int, dy: int) -> 'Position':
        return Position(self.x + dx, self.y + dy)


class Movable:
    """Capability: change position. Requires name, position, event_log."""

    def move(self, dx: int, dy: int) -> Position:
        self.position = self.position.translate(dx, dy)
        self.event_log.log(f"{self.name} moved to ({self.position.x}, {self.position.y})")
        return self.position


class Damageable:
    """Capability: lose health. Requires name, health, is_alive, event_log."""

    def take_damage(self, amount: int) -> int:
        """
        Reduce health by amount; health never goes below zero

        Returns:
            Remaining health
        """
        if amount < 0:
            raise InvalidAmount(f"Damage cannot be negative: {amount}")
        if not self.is_alive:
            return self.health

        self.health = max(self.health - amount, 0)
        if self.health == 0:
            self.is_alive = False
            self.event_log.log(f"{self.name} has been defeated!")
        else:
            self.event_log.log(f"{self.name}'s health is now {self.health}")
        return self.health


class Attacker:
    """Capability: deal attack_power damage to a Damageable target."""

    def attack(self, target: Damageable) -> bool:
        """
        Attack target

        Returns:
            True if damage was dealt
        """
        if not self.is_alive:
            self.event_log.log(f"{self.name} cannot attack while defeated!")
            return False
        if not target.is_alive:
            self.event_log.log(f"{target.name} is already defeated!")
            return False

        self.event_log.log(f"{self.name} attacks {target.name} for {self.attack_power} damage!")
        target.take_damage(self.attack_power)
        return True


class Entity(Movable, Damageable, Attacker, AbstractEntity):
    """Base game entity; Player and Enemy set max_health and attack_power"""

    def __init__(self, name: str, event_log: EventLog):
        self.name = name
        self.event_log = event_log
        self.position = Position()
        self.health = self.max_health
        self.is_alive = True

    @property
    @abstractmethod
    def max_health(self) -> int:
        """Health at spawn"""

    @property
    @abstractmethod
    def attack_power(self) -> int:
        """Damage dealt per attack"""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, health={self.health})"


class Player(Entity):
    max_health = 100
    attack_power = 10

    def __init__(self, name: str, event_log: EventLog,
                 inventory_loader: Optional[Callable[[], List[str]]] = None):
        super().__init__(name, event_log)
        self._inventory_loader = inventory_loader or (lambda: list(DEFAULT_INVENTORY))
        self._inventory: Optional[List[str]] = None

    @property
    def inventory(self) -> List[str]:
        """Inventory, loaded on first access only"""
        if self._inventory is None:
            self.event_log.log("Loading inventory...")
            self._inventory = list(self._inventory_loader())
        return self._inventory

    @property
    def inventory_loaded(self) -> bool:
        return self._inventory is not None


class Enemy(Entity):
    max_health = 50
    attack_power = 5

    def reset(self, name: str) -> None:
        """Return to spawn state under a new name"""
        self.name = name
        self.position = Position()
        self.health = self.max_health
        self.is_alive = True


class EnemyPool:
    """Object pool recycling released enemies"""

    def __init__(self, event_log: EventLog):
        self.event_log = event_log
        self._pool: List[Enemy] = []
        self.created_count = 0

    def acquire(self, name: str) -> Enemy:
        if self._pool:
            enemy = self._pool.pop()
            self.event_log.log(f"Reusing enemy: {enemy.name}")
            enemy.reset(name)
            return enemy

        self.event_log.log(f"Creating new enemy: {name}")
        self.created_count += 1
        return Enemy(name, self.event_log)

    def release(self, enemy: Enemy) -> None:
        if any(pooled is enemy for pooled in self._pool):
            raise ValueError(f"Enemy {enemy.name} is already in the pool")
        self.event_log.log(f"Releasing enemy: {enemy.name}")
        self._pool.append(enemy)

    @property
    def available(self) -> int:
        return len(self._pool)


class GameSession:
    """Owns one player and the enemies currently in play"""

    def __init__(self, player_name: str, event_log: EventLog,
                 inventory_loader: Optional[Callable[[], List[str]]] = None):
        self._player = Player(player_name, event_log, inventory_loader)
        self._enemies: List[Enemy] = []

    @property
    def player(self) -> Player:
        return self._player

    def add_enemy(self, enemy: Enemy) -> None:
        self._enemies.append(enemy)

    def remove_enemy(self, enemy: Enemy) -> None:
        self._enemies = [e for e in self._enemies if e is not enemy]

    @property
    def enemies(self) -> Tuple[Enemy, ...]:
        return tuple(self._enemies)

    def living_enemies(self) -> List[Enemy]:
        return [e for e in self._enemies if e.is_alive]
