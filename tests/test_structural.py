# tests/test_structural.py
"""
Unit tests for the flyweight, bridge and decorator patterns.
"""

import pytest
from patternbook import (Abstraction, BaseBurger, GroceryList, IngredientManager,
                         RecordingImplementor, Topping, WithCheese,
                         WithIncredibleBurgerPatty, WithTopping, build_burger)
from patternbook.bridge import Implementor1
from patternbook.decorator import BurgerDecorator
from patternbook.flyweight import ITEMS


class TestFlyweight:
    """Test the ingredient registry."""

    def test_same_instance_is_reused(self):
        manager = IngredientManager()
        first = manager.get("carrots")
        second = manager.get("carrots")

        assert first is second
        assert manager.count == 1

    def test_lazy_creation(self):
        manager = IngredientManager()
        assert manager.count == 0
        manager.get("kale")
        manager.get("salad")
        assert manager.count == 2

    def test_grocery_list_shares_ingredients(self):
        shopping = GroceryList()
        for item in ITEMS:
            shopping.add(item)

        assert len(shopping.entries) == 10
        assert shopping.distinct_count == 7
        carrots = [ingredient for ingredient, _ in shopping.entries if ingredient.name == "carrots"]
        assert len(carrots) == 3
        assert all(carrot is carrots[0] for carrot in carrots)

    def test_description(self):
        shopping = GroceryList()
        shopping.add("kale", amount=2)
        shopping.add("kale")

        assert str(shopping) == "1  Items: \n\nkale (x2)\nkale (x1)"


class TestBridge:
    """Test the abstraction and its implementors."""

    def test_restart_stops_before_start(self):
        recorder = RecordingImplementor()
        Abstraction(recorder).restart()

        assert recorder.calls == ["stop", "start"]
        assert recorder.in_proper_order
        assert recorder.start_called
        assert recorder.stop_called

    def test_start_alone_is_out_of_order(self):
        recorder = RecordingImplementor()
        Abstraction(recorder).start()
        assert not recorder.in_proper_order

    def test_prints(self, capsys):
        Abstraction(Implementor1()).restart()
        assert capsys.readouterr().out.split("\n")[:4] == [
            "Stopping", "Implementor1.stop()", "starting", "Implementor1.start()"]


class TestDecorator:
    """Test the burger decorators."""

    def test_full_burger(self):
        burger = BaseBurger()
        burger = WithTopping(burger, Topping.KETCHUP)
        burger = WithCheese(burger)
        burger = WithIncredibleBurgerPatty(burger)
        burger = WithTopping(burger, Topping.SALAD)

        assert burger.ingredients == ["buns", "ketchup", "cheese", "incredible patty", "salad"]
        assert burger.price == 3.5

    def test_folded_burger_matches(self):
        decorators = [Topping.KETCHUP.decorate, WithCheese,
                      WithIncredibleBurgerPatty, Topping.SALAD.decorate]
        burger = build_burger(decorators)

        assert burger.ingredients == ["buns", "ketchup", "cheese", "incredible patty", "salad"]
        assert burger.price == 3.5

    def test_base_decorator_forwards(self):
        decorated = BurgerDecorator(BaseBurger(price=2.0, ingredients=["bun"]))
        assert decorated.price == 2.0
        assert decorated.ingredients == ["bun"]

    def test_toppings_are_free(self):
        assert WithTopping(BaseBurger(), Topping.TOMATO).price == 1.0

    def test_wrapped_burger_is_not_mutated(self):
        base = BaseBurger()
        WithCheese(base).ingredients.append("pickles")
        assert base.ingredients == ["buns"]

    def test_empty_fold_is_base(self):
        burger = build_burger([])
        assert burger.price == 1.0
        assert burger.ingredients == ["buns"]
