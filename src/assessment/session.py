"""Assessment session: one attempt at one skill's question bank.

States::

    SELECTING_SKILL --select_skill--> IN_PROGRESS --advance (last)--> COMPLETED

A session never goes backwards. Retakes and switching skills start a fresh
session via ``new_attempt()``.
"""

import logging
from enum import Enum

from src.assessment.catalog import SkillCatalog
from src.assessment.credentials import CredentialStore
from src.core.errors import InvalidArgumentError, PreconditionError
from src.core.schemas import AssessmentResult, Question

logger = logging.getLogger(__name__)

DEFAULT_PASS_THRESHOLD = 70.0


class SessionState(str, Enum):
    SELECTING_SKILL = "selecting_skill"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class AssessmentSession:
    """Finite-state runner for a single skill assessment.

    Usage::

        session = AssessmentSession(catalog, store)
        if session.select_skill("React"):
            while session.state is SessionState.IN_PROGRESS:
                question = session.current_question()
                session.record_answer(ask(question))
                session.advance()
            print(session.result().passed)
    """

    def __init__(
        self,
        catalog: SkillCatalog,
        credentials: CredentialStore,
        pass_threshold: float = DEFAULT_PASS_THRESHOLD,
    ) -> None:
        if not 0.0 <= pass_threshold <= 100.0:
            msg = f"pass_threshold must be between 0 and 100, got {pass_threshold}"
            raise InvalidArgumentError(msg)
        self._catalog = catalog
        self._credentials = credentials
        self._threshold = pass_threshold
        self._state = SessionState.SELECTING_SKILL
        self._skill: str | None = None
        self._questions: tuple[Question, ...] = ()
        self._index = 0
        self._answers: dict[int, int] = {}
        self._result: AssessmentResult | None = None

    # -- read-only views ----------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def skill(self) -> str | None:
        return self._skill

    @property
    def question_index(self) -> int:
        return self._index

    @property
    def total_questions(self) -> int:
        return len(self._questions)

    @property
    def answers(self) -> dict[int, int]:
        """Copy of the answers recorded so far, keyed by question id."""
        return dict(self._answers)

    @property
    def progress(self) -> float:
        """Percent of the bank reached, counting the current question."""
        if self._state is SessionState.SELECTING_SKILL:
            return 0.0
        if self._state is SessionState.COMPLETED:
            return 100.0
        return (self._index + 1) / len(self._questions) * 100

    # -- transitions --------------------------------------------------------

    def select_skill(self, skill: str) -> bool:
        """Start the assessment for ``skill``.

        Returns False and stays in SELECTING_SKILL when the catalog has no
        questions for the skill.
        """
        self._require(SessionState.SELECTING_SKILL, "select a skill")
        questions = self._catalog.questions_for(skill)
        if not questions:
            logger.info("No assessment available for skill '%s'", skill)
            return False
        self._skill = questions[0].skill
        self._questions = questions
        self._index = 0
        self._answers = {}
        self._state = SessionState.IN_PROGRESS
        logger.debug("Assessment started: %s (%d questions)", self._skill, len(questions))
        return True

    def current_question(self) -> Question:
        self._require(SessionState.IN_PROGRESS, "read the current question")
        return self._questions[self._index]

    def record_answer(self, option_index: int) -> None:
        """Set (or overwrite) the answer to the current question. Does not advance."""
        question = self.current_question()
        if (
            isinstance(option_index, bool)
            or not isinstance(option_index, int)
            or not 0 <= option_index < len(question.options)
        ):
            msg = (
                f"option index {option_index!r} out of range "
                f"for {len(question.options)} options"
            )
            raise InvalidArgumentError(msg)
        self._answers[question.id] = option_index

    def advance(self) -> AssessmentResult | None:
        """Move past the current question.

        Returns the result when the last question was answered, otherwise None.
        """
        question = self.current_question()
        if question.id not in self._answers:
            msg = f"question {question.id} has no recorded answer"
            raise PreconditionError(msg)
        if self._index < len(self._questions) - 1:
            self._index += 1
            return None
        return self._complete()

    def result(self) -> AssessmentResult:
        if self._result is None:
            msg = f"cannot read the result in state '{self._state.value}'"
            raise PreconditionError(msg)
        return self._result

    def new_attempt(self) -> "AssessmentSession":
        """A fresh session sharing this one's catalog, store and threshold."""
        return AssessmentSession(self._catalog, self._credentials, self._threshold)

    # -- internals ----------------------------------------------------------

    def _complete(self) -> AssessmentResult:
        skill = self._questions[0].skill
        total = len(self._questions)
        correct = sum(
            1 for q in self._questions if self._answers.get(q.id) == q.correct_answer
        )
        percentage = correct / total * 100
        # Integer-side comparison keeps 7/10 at exactly 70%.
        passed = correct * 100 >= self._threshold * total

        newly_validated: bool | None = None
        if passed:
            newly_validated = self._credentials.add_validated_skill(skill)

        result = AssessmentResult(
            skill=skill,
            correct=correct,
            total=total,
            passed=passed,
            percentage=percentage,
            newly_validated=newly_validated,
        )
        self._result = result
        self._state = SessionState.COMPLETED
        logger.info(
            "Assessment completed: %s %d/%d (%.1f%%) - %s",
            skill, correct, total, percentage, "passed" if passed else "failed",
        )
        return result

    def _require(self, state: SessionState, action: str) -> None:
        if self._state is not state:
            msg = f"cannot {action} in state '{self._state.value}'"
            raise PreconditionError(msg)
