# src/patternbook/injection.py
"""
Dependency injection through the constructor.

``BasketClient`` never builds its collaborators; it receives a store and a
service, which keeps it testable with in-memory stand-ins.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Protocol, Sequence

from .config import PlaygroundConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Product:
    id: str
    name: str


class BasketStore(Protocol):
    def load_all_products(self) -> List[Product]:
        ...

    def add(self, product: Product) -> None:
        ...

    def delete(self, product: Product) -> None:
        ...


class BasketService(Protocol):
    def fetch_all_products(self, on_success: Callable[[List[Product]], None]) -> None:
        ...

    def append(self, product: Product) -> None:
        ...

    def remove(self, product: Product) -> None:
        ...


DiscountPolicy = Callable[[Sequence[Product]], float]


def no_discount(products: Sequence[Product]) -> float:
    return 0.0


class BasketClient:
    def __init__(self, service: BasketService, store: BasketStore,
                 discount_policy: DiscountPolicy = no_discount):
        self._service = service
        self._store = store
        self._discount_policy = discount_policy
        self.applied_discount = 0.0

    def add(self, product: Product) -> None:
        self._store.add(product)
        self._service.append(product)
        self._calculate_applied_discount()

    def remove(self, product: Product) -> None:
        self._store.delete(product)
        self._service.remove(product)
        self._calculate_applied_discount()

    def products(self) -> List[Product]:
        return self._store.load_all_products()

    def sync(self) -> None:
        """Replace the local store's content with what the service reports."""
        def replace_all(products: List[Product]) -> None:
            for product in self._store.load_all_products():
                self._store.delete(product)
            for product in products:
                self._store.add(product)

        self._service.fetch_all_products(replace_all)
        self._calculate_applied_discount()

    def _calculate_applied_discount(self) -> None:
        self.applied_discount = self._discount_policy(self._store.load_all_products())
        logger.info("Applied discount is now %.2f", self.applied_discount)


class InMemoryBasketStore:
    def __init__(self):
        self._products: Dict[str, Product] = {}

    def load_all_products(self) -> List[Product]:
        return list(self._products.values())

    def add(self, product: Product) -> None:
        self._products[product.id] = product

    def delete(self, product: Product) -> None:
        self._products.pop(product.id, None)


class RecordingBasketService:
    """Remote stand-in: keeps the products and records each call made to it."""

    def __init__(self, products: Sequence[Product] = ()):
        self._products: List[Product] = list(products)
        self.calls: List[str] = []

    def fetch_all_products(self, on_success: Callable[[List[Product]], None]) -> None:
        self.calls.append("fetch")
        on_success(list(self._products))

    def append(self, product: Product) -> None:
        self.calls.append(f"append:{product.id}")
        self._products.append(product)

    def remove(self, product: Product) -> None:
        self.calls.append(f"remove:{product.id}")
        self._products = [p for p in self._products if p.id != product.id]


def demo(config: PlaygroundConfig) -> None:
    service = RecordingBasketService()
    client = BasketClient(service=service, store=InMemoryBasketStore(),
                          discount_policy=lambda products: 0.1 if len(products) >= 2 else 0.0)
    client.add(Product("1", "Coffee"))
    client.add(Product("2", "Bagel"))
    print([product.name for product in client.products()], client.applied_discount)
    print(service.calls)
