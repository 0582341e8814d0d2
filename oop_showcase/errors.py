"""
Error Hierarchy

Every domain failure raised by the showcase derives from ShowcaseError so the
example driver can catch them in one place. Each error also derives from the
closest builtin (ValueError, TypeError, KeyError) for callers that only know
the standard exceptions.
"""

from typing import Iterable, Optional


class ShowcaseError(Exception):
    """Base class for all domain errors"""


class InvalidAmount(ShowcaseError, ValueError):
    """Amount is zero, negative or otherwise unusable for the operation"""


class InsufficientFunds(ShowcaseError, ValueError):
    """Withdrawal would take the balance below the account's floor"""

    def __init__(self, account_id: str, requested, available):
        self.account_id = account_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient funds in account {account_id}: "
            f"requested {requested.to_string()}, available {available.to_string()}"
        )


class UnknownVariant(ShowcaseError, ValueError):
    """Factory was asked for a tag outside its closed set of variants"""

    def __init__(self, variant, known: Iterable[str], kind: str = "variant"):
        self.variant = variant
        self.known = sorted(known)
        super().__init__(
            f"Unknown {kind} '{variant}'. Expected one of: {', '.join(self.known)}"
        )


class AbstractInstantiation(ShowcaseError, TypeError):
    """Base entity of a variant family was constructed directly"""

    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(f"Cannot instantiate abstract class {class_name}")


class CurrencyMismatch(ShowcaseError, ValueError):
    """Two Money values of different currencies were combined"""


class InvalidTransfer(ShowcaseError, ValueError):
    """Transfer between the given accounts is not allowed"""


class ServiceNotFound(ShowcaseError, KeyError):
    """Dependency container has no service registered under the name"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Service {self.name} not found"


class InvalidSpeed(ShowcaseError, ValueError):
    """Vehicle speed cannot be negative"""

    def __init__(self, value, brand: Optional[str] = None):
        self.value = value
        self.brand = brand
        super().__init__(f"Speed cannot be negative (got {value})")
