"""WelcomeApplication: the prompt-validate-retry workflow.

Collects a name, then an age, builds a :class:`UserData`, and prints the
greeting. States only move forward::

    awaiting_name -> awaiting_age -> done

Any error escaping that sequence is caught once in :meth:`run`, printed
through the error handler, and moves the workflow to ``failed``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from welcomer.config.models import AppConfig
from welcomer.domain.types import Variant, WorkflowState
from welcomer.domain.user import UserData
from welcomer.domain.validation import Failure, Success, ValidationResult
from welcomer.services.validator import UserDataValidator

if TYPE_CHECKING:
    from welcomer.handlers.base import InputHandler, OutputHandler

logger = logging.getLogger(__name__)


class WelcomeApplication:
    """Orchestrates input collection and the final greeting.

    Parameters:
        input_handler: Where answers come from.
        output_handler: Where the greeting goes.
        error_handler: Where rejection messages and the top-level error
            line go. Defaults to *output_handler*.
        validator: Field predicates. Defaults to one built from
            ``config.rules``.
        config: Limits and message templates.
        variant: ``basic`` asks each field once; ``validated`` retries
            with field-specific messages; ``advanced`` retries with the
            configured generic message.
    """

    def __init__(
        self,
        input_handler: InputHandler,
        output_handler: OutputHandler,
        validator: UserDataValidator | None = None,
        *,
        config: AppConfig | None = None,
        variant: Variant = Variant.ADVANCED,
        error_handler: OutputHandler | None = None,
    ) -> None:
        self._input = input_handler
        self._output = output_handler
        self._errors = error_handler or output_handler
        self._config = config or AppConfig()
        self._validator = validator or UserDataValidator(self._config.rules)
        self.variant = variant
        self.state = WorkflowState.AWAITING_NAME
        self.rejections = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> UserData | None:
        """Collect, then display. Returns the user, or None on error."""
        try:
            user = self.collect_user_data()
            self.display_user_info(user)
        except Exception as exc:
            logger.debug("Workflow aborted in state %s", self.state, exc_info=True)
            self.state = WorkflowState.FAILED
            self._errors.write(self._config.error_text(str(exc) or type(exc).__name__))
            return None
        return user

    def collect_user_data(self) -> UserData:
        """Ask for the name, then the age, and build the record."""
        if self.state is not WorkflowState.AWAITING_NAME:
            msg = f"Cannot collect user data from state {self.state}"
            raise RuntimeError(msg)

        if self.variant is Variant.BASIC:
            name = self._input.read(self._config.name_prompt())
            self._advance(WorkflowState.AWAITING_AGE)
            age = self._input.read_int(self._config.age_prompt_text())
        else:
            # validated reports each field's own rule, unparseable ages included.
            if self.variant is Variant.ADVANCED:
                error_message: str | None = self._config.invalid_input_message
                age_parse_message: str | None = None
            else:
                error_message = None
                age_parse_message = self._validator.rules.age_message
            name = self.prompt_for_valid_input(
                self._config.name_prompt(),
                self._input.read,
                self._validator.validate_name,
                error_message,
            )
            self._advance(WorkflowState.AWAITING_AGE)
            age = self.prompt_for_valid_input(
                self._config.age_prompt_text(),
                self._input.read_int,
                self._validator.validate_age,
                error_message,
                parse_error_message=age_parse_message,
            )

        return UserData(name=name, age=age, rules=self._config.rules)

    def display_user_info(self, user: UserData) -> None:
        """Print the greeting. Only ever happens once per run."""
        self._advance(WorkflowState.DONE)
        self._output.write_formatted(self._config.greeting_format, name=user.name, age=user.age)

    def prompt_for_valid_input[T](
        self,
        prompt: str,
        parse: Callable[[str], T],
        validate: Callable[[T], ValidationResult],
        error_message: str | None = None,
        *,
        parse_error_message: str | None = None,
    ) -> T:
        """Prompt until *parse* and *validate* both accept the answer.

        ``ValueError`` from *parse* counts as a rejection; anything else
        (``EOFError`` included) propagates. On rejection, *error_message*
        is written when given, otherwise the failure's own message. A parse
        failure carries *parse_error_message*, falling back to the
        configured ``invalid_input_message``.

        The loop has no attempt limit.
        """
        while True:
            outcome: ValidationResult
            try:
                value = parse(prompt)
            except ValueError as exc:
                logger.debug("Unparseable input in state %s: %s", self.state, exc)
                outcome = Failure(parse_error_message or self._config.invalid_input_message)
            else:
                outcome = validate(value)

            match outcome:
                case Success():
                    return value
                case Failure(message=message):
                    self.rejections += 1
                    logger.debug("Rejected input in state %s: %s", self.state, message)
                    self._errors.write(error_message if error_message is not None else message)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _advance(self, state: WorkflowState) -> None:
        logger.debug("Workflow state %s -> %s", self.state, state)
        self.state = state
