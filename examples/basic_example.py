# examples/basic_example.py
"""
Basic example of using Patternbook's patterns from your own code
"""

import requests
from patternbook import (BaseBurger, CachedNetworking, MainDispatcher, PlaygroundConfig,
                         ShoppingList, Topping, WithCheese, build_burger, run_all)
from patternbook.enums import PatternCategory
from patternbook.facade import StaticAdapter
from patternbook.futures import async_operation_1, describe


def memento_example():
    """Undo edits to a shopping list."""
    print("=== Memento ===")
    shopping_list = ShoppingList()
    shopping_list.add("Milk")
    shopping_list.save()

    shopping_list.toggle(0)
    print(shopping_list)

    shopping_list.restore()
    print(shopping_list)


def decorator_example():
    """Stack burger decorators in one go."""
    print("\n=== Decorator ===")
    burger = build_burger([Topping.TOMATO.decorate, WithCheese], base=BaseBurger(price=2.0))
    print(f"{burger.ingredients} costs {burger.price}")


def facade_example(config):
    """Serve the second request from the cache."""
    print("\n=== Facade ===")
    adapter = StaticAdapter({"memory://menu": {"burgers": 3}})
    session = requests.Session()
    session.mount("memory://", adapter)

    def report(data, response, error, from_cache):
        print(f"from cache: {from_cache}, body: {data!r}")

    with CachedNetworking(session=session, config=config) as networking:
        networking.run("memory://menu", report)
        networking.run("memory://menu", report)
    print(f"Network hits: {adapter.hits['memory://menu']}")


def futures_example(config):
    """Wait on a future settled by the dispatcher."""
    print("\n=== Futures ===")
    with MainDispatcher() as dispatcher:
        future = async_operation_1(config, dispatcher)
        future.then(lambda result: print(f"Got {describe(result)}"))
        dispatcher.drain(config.dispatch_timeout)


def main():
    print("Patternbook Basic Example")
    print("=" * 50)

    # No artificial delays
    config = PlaygroundConfig(delay_scale=0.0)

    memento_example()
    decorator_example()
    facade_example(config)
    futures_example(config)

    print("\n=== Every structural demo ===")
    run_all(config, PatternCategory.STRUCTURAL)


if __name__ == "__main__":
    main()
