# src/patternbook/mvvm.py
"""
Model-View-ViewModel version of the quiz game.

The view model exposes a display-ready representation of the model and lets
the view bind to its events through callbacks. The view holds the view model
strongly; the callbacks it installs hold the view weakly.
"""

import logging
import weakref
from typing import Callable, Optional

from .config import PlaygroundConfig
from .mvc import (SAMPLE_QUESTIONS, AnswerReader, PromptView, Question,
                  QuestionController, QuestionView, scripted_answers)

logger = logging.getLogger(__name__)


class ViewModel:
    def __init__(self, questions: QuestionController, read_answer: AnswerReader = input):
        self._questions = questions
        self._read_answer = read_answer
        self._current_question: Optional[Question] = None
        self.on_question_changed: Optional[Callable[[], None]] = None
        self.on_answer: Optional[Callable[[bool], None]] = None

    @property
    def current_question(self) -> Optional[Question]:
        return self._current_question

    @current_question.setter
    def current_question(self, question: Optional[Question]) -> None:
        self._current_question = question
        if self.on_question_changed is not None:
            self.on_question_changed()

    def get_question_text(self) -> Optional[str]:
        return self._current_question.question if self._current_question else None

    def start(self) -> None:
        question = self._next_question()
        while question is not None:
            self._wait_for_answer(question)
            question = self._next_question()

    def _wait_for_answer(self, question: Question) -> None:
        result = self._read_answer()
        if self.on_answer is not None:
            self.on_answer(question.is_good_answer(result))

    def _next_question(self) -> Optional[Question]:
        self.current_question = self._questions.next()
        return self.current_question


class MainView:
    def __init__(self, view_model: ViewModel):
        self._question_view = QuestionView()
        self._prompt_view = PromptView()
        self.view_model = view_model
        self.good = 0
        self.bad = 0
        self.finished = False
        self.bind_view_model()

    def bind_view_model(self) -> None:
        view_ref = weakref.ref(self)

        def question_changed() -> None:
            view = view_ref()
            if view is None:
                return
            question = view.view_model.current_question
            if question is None:
                view.finish_playing()
                return
            view.ask(question)

        def answered(is_good: bool) -> None:
            view = view_ref()
            if view is None:
                return
            if is_good:
                view.good_answer()
            else:
                view.bad_answer()

        self.view_model.on_question_changed = question_changed
        self.view_model.on_answer = answered

    def ask(self, question: Question) -> None:
        self._question_view.show(question)
        self._prompt_view.show()

    def good_answer(self) -> None:
        self.good += 1
        print("Good!")

    def bad_answer(self) -> None:
        self.bad += 1
        print("Bad!")

    def finish_playing(self) -> None:
        self.finished = True
        print("Done!")


def demo(config: PlaygroundConfig) -> None:
    view_model = ViewModel(QuestionController(SAMPLE_QUESTIONS),
                           read_answer=scripted_answers(["true", "false"]))
    view = MainView(view_model)
    view_model.start()
    logger.info("MVVM game finished with %d good and %d bad answers", view.good, view.bad)
