"""
Importable classes used as proxy targets throughout the test suite.

Generated proxies import their parent class by qualified name, so every
class here lives at module level.
"""

import abc
import enum
import typing
from typing import ClassVar, Optional, Protocol


class Order:
    """A customer order."""

    STATUS_OPEN = "open"
    STATUS_CLOSED = "closed"

    currency = "EUR"
    instances: ClassVar[int] = 0
    note: Optional[str]

    def __init__(self, order_id: int = 0):
        self.order_id = order_id
        self.history = []

    def total(self, quantity: int, price: float = 1.0) -> float:
        self.history.append(("total", quantity, price))
        return quantity * price

    def cancel(self, reason: str) -> None:
        self.history.append(("cancel", reason))

    def tag(self, *labels, sep: str = ",", **extra) -> str:
        text = sep.join(labels)
        if extra:
            text += sep + sep.join(f"{k}={v}" for k, v in sorted(extra.items()))
        return text

    def describe(self) -> str:
        return f"Order #{self.order_id}"

    def find_note(self, key: str) -> Optional[str]:
        return None

    def _recalculate(self) -> int:
        self.history.append(("recalculate",))
        return 42

    def __audit(self) -> None:
        pass

    @staticmethod
    def create(order_id: int) -> "Order":
        return Order(order_id)

    @classmethod
    def empty(cls) -> "Order":
        return cls()

    @typing.final
    def identifier(self) -> str:
        return f"order-{self.order_id}"


class SpecialOrder(Order):
    """An order with a discount."""

    def total(self, quantity: int, price: float = 1.0) -> float:
        return super().total(quantity, price) * 0.5


class Describable(Protocol):
    def describe(self) -> str:
        ...


class Printable(abc.ABC):
    @abc.abstractmethod
    def render(self, width: int = 80) -> str:
        """Render for printing."""


class Shape(abc.ABC):
    @abc.abstractmethod
    def area(self) -> float:
        ...

    def scaled(self, factor: float) -> float:
        return self.area() * factor


class Square(Shape):
    def __init__(self, side: float = 1.0):
        self.side = side

    def area(self) -> float:
        return self.side * self.side


class Inert:
    """Nothing a proxy could override."""

    @staticmethod
    def build() -> "Inert":
        return Inert()

    def __repr__(self) -> str:
        return "Inert()"


class Guarded:
    def run(self) -> str:
        return "ran"

    def _prepare(self) -> str:
        return "prepared"


class Mode(enum.Enum):
    FAST = "fast"
    SLOW = "slow"


UNSET = object()


class Scheduler:
    """Defaults without a literal form."""

    def run(self, mode: Mode = Mode.FAST, retries: int = 3, *, until=UNSET) -> tuple:
        return (mode, retries, until)


class Throttled(abc.ABC):
    @abc.abstractmethod
    def throttle(self, mode: Mode = Mode.SLOW) -> Mode:
        ...


class Collide:
    """Parameters named like the objects an interception body works with."""

    def run(self, interceptors, invocation=None, loader=None):
        return (interceptors, invocation, loader)


# =============================================================================
# Collaborators
# =============================================================================

class RecordingInterceptor:
    """Logs around the call; ``proceed=False`` vetoes it."""

    def __init__(self, name: str, log: list, proceed: bool = True, result=None):
        self.name = name
        self.log = log
        self.proceed = proceed
        self.result = result

    def intercept(self, invocation):
        self.log.append(f"{self.name}-pre")
        if not self.proceed:
            return self.result
        value = invocation.proceed()
        self.log.append(f"{self.name}-post")
        return value


class CountingInitializer:
    def __init__(self, order_id: int = 99):
        self.order_id = order_id
        self.calls = []

    def initialize(self, instance) -> None:
        self.calls.append(instance)
        instance.order_id = self.order_id
