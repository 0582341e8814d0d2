"""
OOP Showcase

Small domain-object layers (banking, e-commerce, game entities, vehicles)
demonstrating object-oriented composition: closed variant families,
factories, capability mixins, object pooling and explicit dependency
injection. All monetary values use Decimal through Money.
"""

__version__ = "1.0.0"
