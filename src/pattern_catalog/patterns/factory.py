"""Factory: construct cars without naming the concrete class at the call site."""

from __future__ import annotations

from dataclasses import dataclass
import logging


logger = logging.getLogger(__name__)


@dataclass
class Car:
    brand: str

    def drive(self) -> None:
        print(f"Driving a {self.brand}")


class CarFactory:
    """Creates ``Car`` products from a brand discriminator."""

    @staticmethod
    def create_car(brand: str) -> Car:
        logger.debug("Creating car for brand %r", brand)
        return Car(brand)


def demo() -> None:
    car = CarFactory.create_car("Tesla")
    car.drive()
