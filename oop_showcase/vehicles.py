"""
Vehicle Module

Introductory hierarchy: an abstract Vehicle with an encapsulated speed,
two concrete vehicles overriding start/drive, and a static comparison.
"""

from abc import abstractmethod
from typing import Union

from .abstract import AbstractEntity
from .errors import InvalidSpeed

Speed = Union[int, float]


class Vehicle(AbstractEntity):
    """Base vehicle; subclasses must implement start()"""

    def __init__(self, brand: str, wheels: int):
        self.brand = brand
        self.wheels = wheels
        self._speed: Speed = 0

    @property
    def speed(self) -> Speed:
        return self._speed

    @speed.setter
    def speed(self, value: Speed) -> None:
        if value < 0:
            raise InvalidSpeed(value, self.brand)
        self._speed = value

    @abstractmethod
    def start(self) -> str:
        """Describe the vehicle starting"""

    def drive(self) -> str:
        return f"{self.brand} is driving at {self.speed} km/h."

    @staticmethod
    def compare_speeds(first: 'Vehicle', second: 'Vehicle') -> str:
        if first.speed > second.speed:
            return f"{first.brand} is faster than {second.brand}."
        if first.speed < second.speed:
            return f"{second.brand} is faster than {first.brand}."
        return f"{first.brand} and {second.brand} have the same speed."


class Car(Vehicle):
    def __init__(self, brand: str, model: str):
        super().__init__(brand, 4)
        self.model = model

    def start(self) -> str:
        return f"{self.brand} {self.model} car is starting..."

    def drive(self) -> str:
        return f"{self.brand} {self.model} is cruising on the road at {self.speed} km/h."


class Bike(Vehicle):
    def __init__(self, brand: str, kind: str):
        super().__init__(brand, 2)
        self.kind = kind

    def start(self) -> str:
        return f"{self.brand} bike is starting with a roar..."

    def drive(self) -> str:
        return f"{self.brand} bike is zooming past at {self.speed} km/h."
