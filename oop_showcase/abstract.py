"""
Abstract Entity Base

Base for the closed variant families (accounts, users, products, game
entities, vehicles). A class that still has abstract members cannot be
constructed and raises AbstractInstantiation instead of ABC's bare TypeError.
"""

import inspect
from abc import ABC

from .errors import AbstractInstantiation


class AbstractEntity(ABC):
    """Root of every variant family"""

    def __new__(cls, *args, **kwargs):
        if inspect.isabstract(cls):
            raise AbstractInstantiation(cls.__name__)
        return super().__new__(cls)
