"""Strategy: pick a payment method at runtime."""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging


logger = logging.getLogger(__name__)


class PaymentStrategy(ABC):
    """A way of paying an amount.

    ``pay`` has no default body. A subclass that forgets to implement it
    cannot be instantiated and raises ``TypeError`` at construction time.
    """

    @abstractmethod
    def pay(self, amount: float) -> None:
        """Charge ``amount`` using this payment method."""


class CreditCardPayment(PaymentStrategy):
    def pay(self, amount: float) -> None:
        print(f"Paid {amount} using Credit Card")


class PayPalPayment(PaymentStrategy):
    def pay(self, amount: float) -> None:
        print(f"Paid {amount} using PayPal")


class PaymentProcessor:
    """Delegates every payment to the currently assigned ``strategy``."""

    def __init__(self, strategy: PaymentStrategy) -> None:
        self.strategy = strategy

    def process_payment(self, amount: float) -> None:
        logger.debug("Processing payment of %s with %s", amount, type(self.strategy).__name__)
        self.strategy.pay(amount)


def demo() -> None:
    payment = PaymentProcessor(CreditCardPayment())
    payment.process_payment(100)
    payment.strategy = PayPalPayment()
    payment.process_payment(100)
