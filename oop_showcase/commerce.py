"""
E-Commerce Module

Products built by a factory from validated option dictionaries, users kept
by a UserService, and orders with method chaining, checkout notifications
and a discount decorator.
"""

from abc import abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple
import uuid

from pydantic import BaseModel, Field

from .abstract import AbstractEntity
from .currency import AmountLike, Currency, Money, to_decimal
from .customers import User
from .errors import InvalidAmount
from .event_log import EventLog
from .events import EventEmitterMixin
from .factory import Tag, VariantFactory


# Product option schemas
class ProductSpec(BaseModel):
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0, description="Unit price in the shop currency")


class ElectronicsSpec(ProductSpec):
    warranty: int = Field(0, ge=0, description="Warranty in years")


class ClothingSpec(ProductSpec):
    size: str = Field(..., min_length=1)


class Product(AbstractEntity):
    """Base product; only concrete categories can be constructed"""

    def __init__(self, name: str, price: Money):
        self.name = name
        self.price = price

    @property
    @abstractmethod
    def category(self) -> str:
        """Product category label"""

    def details(self) -> List[str]:
        return [f"Product: {self.name} - {self.price.to_string()}"]


class Electronics(Product):
    category = "Electronics"

    def __init__(self, name: str, price: Money, warranty: int = 0):
        super().__init__(name, price)
        self.warranty = warranty

    def details(self) -> List[str]:
        return super().details() + [f"Warranty: {self.warranty} years"]


class Clothing(Product):
    category = "Clothing"

    def __init__(self, name: str, price: Money, size: str):
        super().__init__(name, price)
        self.size = size

    def details(self) -> List[str]:
        return super().details() + [f"Size: {self.size}"]


class ProductFactory(VariantFactory):
    """Creates products from a category tag and an options dictionary"""

    kind = "product type"

    def __init__(self, currency: Currency = Currency.USD):
        super().__init__()
        self.currency = currency
        self._register("electronics", self._build_electronics)
        self._register("clothing", self._build_clothing)

    def create(self, kind: Tag, options: Dict[str, Any]) -> Product:
        """
        Create a product

        Raises:
            UnknownVariant: If kind is not a known category
            pydantic.ValidationError: If options are missing or invalid
        """
        return self.build(kind, options)

    def _build_electronics(self, options: Dict[str, Any]) -> Electronics:
        spec = ElectronicsSpec(**options)
        return Electronics(spec.name, Money(spec.price, self.currency), spec.warranty)

    def _build_clothing(self, options: Dict[str, Any]) -> Clothing:
        spec = ClothingSpec(**options)
        return Clothing(spec.name, Money(spec.price, self.currency), spec.size)


class ShopUser(User):
    """Customer of the shop"""

    role = "shopper"


class UserService:
    """Keeps track of registered shop users"""

    def __init__(self, event_log: EventLog):
        self.event_log = event_log
        self._users: List[User] = []

    def add_user(self, user: User) -> None:
        self._users.append(user)
        self.event_log.log(f"User added: {user.name}")

    def list_users(self) -> List[User]:
        return list(self._users)


@dataclass(frozen=True)
class OrderReceipt:
    """Outcome of a checkout"""
    user_name: str
    products: Tuple[str, ...]
    subtotal: Money
    total: Money
    discount_rate: Decimal = Decimal('0')
    order_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    completed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Order(EventEmitterMixin):
    """
    Shopping order

    add_product returns the order so calls can be chained. checkout emits
    "checkout" with the charged total.
    """

    def __init__(self, user: User, event_log: EventLog, currency: Currency = Currency.USD):
        super().__init__()
        self.user = user
        self.event_log = event_log
        self.currency = currency
        self.products: List[Product] = []
        self.receipt: Optional[OrderReceipt] = None

    def add_product(self, product: Product) -> 'Order':
        self.products.append(product)
        self.event_log.log(f"Added product: {product.name}")
        return self

    @property
    def subtotal(self) -> Money:
        total = Money.zero(self.currency)
        for product in self.products:
            total = total + product.price
        return total

    @property
    def total(self) -> Money:
        return self.subtotal

    def checkout(self, total: Optional[Money] = None, discount_rate: Decimal = Decimal('0')) -> OrderReceipt:
        """
        Complete the order

        Args:
            total: Amount to charge; defaults to the subtotal
            discount_rate: Discount already applied to total, for the receipt
        """
        charged = total if total is not None else self.subtotal
        names = tuple(product.name for product in self.products)

        self.event_log.log(f"Order for {self.user.name} completed! Total: {charged.to_string()}")
        self.event_log.log(f"Products: {', '.join(names)}")

        self.receipt = OrderReceipt(
            user_name=self.user.name,
            products=names,
            subtotal=self.subtotal,
            total=charged,
            discount_rate=discount_rate
        )
        self.emit("checkout", charged)
        return self.receipt


class DiscountDecorator:
    """
    Wraps an order and charges a discounted total at checkout

    Everything except total and checkout is delegated to the wrapped order.
    """

    def __init__(self, order: Order, discount_rate: AmountLike):
        rate = to_decimal(discount_rate)
        if rate < 0 or rate >= 1:
            raise InvalidAmount(f"Discount rate must be in [0, 1), got {rate}")
        self._order = order
        self.discount_rate = rate

    @property
    def total(self) -> Money:
        return self._order.subtotal * (Decimal('1') - self.discount_rate)

    def checkout(self) -> OrderReceipt:
        percent = (self.discount_rate * 100).normalize()
        self._order.event_log.log(f"Discount applied: {percent:f}%")
        return self._order.checkout(total=self.total, discount_rate=self.discount_rate)

    def __getattr__(self, name: str) -> Any:
        if name == "_order":
            raise AttributeError(name)
        return getattr(self._order, name)


def set_dynamic_properties(obj: Any, properties: Dict[str, Any]) -> Any:
    """Set arbitrary attributes on obj by name"""
    for key, value in properties.items():
        setattr(obj, key, value)
    return obj
