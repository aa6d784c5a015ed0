# tests/test_architectural.py
"""
Unit tests for MVC, MVVM and constructor injection.
"""

import gc
import weakref

import pytest
from patternbook import BooleanAnswer
from patternbook.injection import (BasketClient, InMemoryBasketStore, Product,
                                   RecordingBasketService)
from patternbook.mvc import (GameController, Question, QuestionController,
                             ViewController, scripted_answers)
from patternbook.mvvm import MainView, ViewModel


QUESTIONS = [
    Question("Is water wet?", BooleanAnswer.TRUE),
    Question("Is fire cold?", BooleanAnswer.FALSE),
]


class TestQuestion:
    def test_is_good_answer(self):
        question = Question("q", BooleanAnswer.TRUE)
        assert question.is_good_answer("true")
        assert question.is_good_answer(" true\n")
        assert not question.is_good_answer("false")
        assert not question.is_good_answer(None)

    def test_controller_pops_from_the_end(self):
        controller = QuestionController(QUESTIONS)
        assert controller.next() is QUESTIONS[1]
        assert controller.next() is QUESTIONS[0]
        assert controller.next() is None
        assert len(QUESTIONS) == 2


class TestGameController:
    def test_plays_every_question(self, capsys):
        view = ViewController()
        game = GameController(QuestionController(QUESTIONS),
                              read_answer=scripted_answers(["false", "false"]), view=view)
        game.start()

        assert view.good == 1
        assert view.bad == 1
        assert view.finished
        out = capsys.readouterr().out
        assert "Is fire cold?" in out
        assert out.rstrip().endswith("Done!")

    def test_no_questions(self, capsys):
        game = GameController(QuestionController(), read_answer=scripted_answers([]))
        game.start()
        assert game.view.finished
        assert capsys.readouterr().out == "Done!\n"

    def test_end_of_input_is_a_bad_answer(self):
        game = GameController(QuestionController(QUESTIONS), read_answer=scripted_answers([]))
        game.start()
        assert game.view.bad == 2


class TestViewModel:
    def test_binding(self):
        view_model = ViewModel(QuestionController(QUESTIONS),
                               read_answer=scripted_answers(["false", "true"]))
        view = MainView(view_model)
        view_model.start()

        assert view.good == 2
        assert view.bad == 0
        assert view.finished
        assert view_model.current_question is None
        assert view_model.get_question_text() is None

    def test_question_changed_fires_for_each_question(self):
        view_model = ViewModel(QuestionController(QUESTIONS), read_answer=scripted_answers([]))
        texts = []
        view_model.on_question_changed = lambda: texts.append(view_model.get_question_text())
        view_model.start()

        assert texts == ["Is fire cold?", "Is water wet?", None]

    def test_view_is_held_weakly(self):
        """Test that the view model does not keep a released view alive."""
        reads = []

        def read_answer():
            reads.append(view_model.get_question_text())
            return "true"

        view_model = ViewModel(QuestionController(QUESTIONS), read_answer=read_answer)
        view = MainView(view_model)
        view_ref = weakref.ref(view)
        del view
        gc.collect()

        assert view_ref() is None
        assert view_model.on_question_changed is not None

        # Callbacks of a released view are no-ops; the questions are still asked
        view_model.start()
        assert reads == ["Is fire cold?", "Is water wet?"]


class TestInjection:
    def test_add_goes_to_store_and_service(self):
        store = InMemoryBasketStore()
        service = RecordingBasketService()
        client = BasketClient(service=service, store=store)
        coffee = Product("1", "Coffee")
        client.add(coffee)

        assert store.load_all_products() == [coffee]
        assert service.calls == ["append:1"]
        assert client.applied_discount == 0.0

    def test_discount_policy(self):
        client = BasketClient(RecordingBasketService(), InMemoryBasketStore(),
                              discount_policy=lambda products: 0.05 * len(products))
        client.add(Product("1", "Coffee"))
        client.add(Product("2", "Bagel"))
        assert client.applied_discount == pytest.approx(0.1)

        client.remove(Product("2", "Bagel"))
        assert client.applied_discount == pytest.approx(0.05)

    def test_sync_replaces_store(self):
        remote = [Product("9", "Tea")]
        client = BasketClient(RecordingBasketService(remote), InMemoryBasketStore())
        client.add(Product("1", "Coffee"))
        client.remove(Product("1", "Coffee"))
        client.sync()

        assert client.products() == remote

    def test_remove(self):
        service = RecordingBasketService()
        client = BasketClient(service, InMemoryBasketStore())
        coffee = Product("1", "Coffee")
        client.add(coffee)
        client.remove(coffee)

        assert client.products() == []
        assert service.calls == ["append:1", "remove:1"]
