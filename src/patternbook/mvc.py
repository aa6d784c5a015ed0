# src/patternbook/mvc.py
"""
Model-View-Controller quiz game.

The model holds questions and judges answers, the view only displays, and
the controller drives the loop, reads input and updates the view.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from .config import PlaygroundConfig
from .enums import BooleanAnswer

AnswerReader = Callable[[], Optional[str]]


# Model

@dataclass(frozen=True)
class Question:
    question: str
    answer: BooleanAnswer

    def is_good_answer(self, result: Optional[str]) -> bool:
        return result is not None and result.strip() == self.answer.value


class QuestionController:
    """Question store. ``next`` hands questions out from the end of the list."""

    def __init__(self, questions: Optional[Iterable[Question]] = None):
        self._questions: List[Question] = []
        self.load(questions or [])

    def load(self, questions: Iterable[Question]) -> None:
        self._questions.extend(questions)

    def next(self) -> Optional[Question]:
        return self._questions.pop() if self._questions else None

    def __len__(self):
        return len(self._questions)


# View

class QuestionView:
    def show(self, question: Question) -> None:
        print(question.question)


class PromptView:
    def show(self) -> None:
        print(">", end="")


class ViewController:
    def __init__(self):
        self._question_view = QuestionView()
        self._prompt_view = PromptView()
        self.good = 0
        self.bad = 0
        self.finished = False

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


# Controller

class GameController:
    def __init__(self, questions: QuestionController, read_answer: AnswerReader = input,
                 view: Optional[ViewController] = None):
        self._questions = questions
        self._read_answer = read_answer
        self.view = view or ViewController()

    def _wait_for_answer(self, question: Question) -> None:
        result = self._read_answer()
        if question.is_good_answer(result):
            self.view.good_answer()
        else:
            self.view.bad_answer()

    def start(self) -> None:
        question = self._questions.next()
        while question is not None:
            self.view.ask(question)
            self._wait_for_answer(question)
            question = self._questions.next()
        self.view.finish_playing()


SAMPLE_QUESTIONS = [
    Question("Python lists are immutable.", BooleanAnswer.FALSE),
    Question("Dataclasses can be frozen.", BooleanAnswer.TRUE),
]


def scripted_answers(answers: Iterable[str]) -> AnswerReader:
    """An ``AnswerReader`` that replays ``answers`` and then returns None."""
    iterator = iter(answers)

    def read() -> Optional[str]:
        answer = next(iterator, None)
        if answer is not None:
            print(answer)
        return answer

    return read


def demo(config: PlaygroundConfig) -> None:
    game = GameController(QuestionController(SAMPLE_QUESTIONS),
                          read_answer=scripted_answers(["true", "true"]))
    game.start()
