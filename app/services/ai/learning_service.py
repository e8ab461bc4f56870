"""
Learning Content Service - stories, quizzes, translations and practice problems for kids
"""
from typing import Any, Callable, List, Optional
from pydantic import TypeAdapter
from loguru import logger

from app.core.config import Settings
from app.core.interfaces.completion_service import CompletionService
from app.models.requests import Age
from app.models.responses import MathProblem, QuizResult
from app.services.ai import prompts
from app.services.ai.output_parser import parse_json_output


_math_problems_adapter = TypeAdapter(List[MathProblem])


def validate_quiz(value: Any) -> Any:
    """Check a parsed quiz against QuizResult, returning it unchanged"""
    QuizResult.model_validate(value)
    return value


def validate_math_problems(value: Any) -> Any:
    """Check parsed math problems against a list of MathProblem, returning them unchanged"""
    _math_problems_adapter.validate_python(value)
    return value


class LearningContentService:
    """
    Builds prompts for each kind of learning content and shapes the model output

    Request fields are substituted into the prompt templates verbatim.
    Text content is returned as produced by the model; quiz and math
    output is parsed as JSON after removing code fences.
    """

    def __init__(self, completion_service: CompletionService, settings: Settings):
        """
        Initialize Learning Content Service

        Args:
            completion_service: Gateway to the completion model
            settings: Application settings (translation language, output validation)
        """
        self.completion_service = completion_service
        self.translation_language = settings.translation_language
        self.strict_output_validation = settings.strict_output_validation

    async def write_story(self, age: Age, topic: Any) -> str:
        prompt = prompts.STORY_TMPL.format(age=age, topic=topic)
        return await self.completion_service.complete(prompt)

    async def build_quiz(self, story: Any) -> Any:
        """Return the quiz parsed from the model output, expected as {"questions": [...]}"""
        prompt = prompts.QUIZ_TMPL.format(story=story)
        return await self._complete_json(prompt, validate_quiz)

    async def translate(self, text: Any) -> str:
        prompt = prompts.TRANSLATE_TMPL.format(language=self.translation_language, text=text)
        return await self.completion_service.complete(prompt)

    async def describe_routine(self, age: Age) -> str:
        prompt = prompts.WORDS_TMPL.format(age=age)
        return await self.completion_service.complete(prompt)

    async def make_math_problems(self, age: Age, operation: Any) -> Any:
        """Return the problems parsed from the model output, expected as a JSON array"""
        prompt = prompts.MATH_TMPL.format(operation=operation, age=age)
        return await self._complete_json(prompt, validate_math_problems)

    async def _complete_json(
        self,
        prompt: str,
        validator: Optional[Callable[[Any], Any]] = None
    ) -> Any:
        """
        Call the model and parse its answer as JSON

        The validator only runs when strict output validation is enabled;
        otherwise whatever JSON the model produced is passed through.

        Raises:
            CompletionError: If the model call fails
            StructuredOutputError: If the output is not JSON or fails validation
        """
        raw = await self.completion_service.complete(prompt)
        logger.debug(f"Raw structured output: {raw[:200]}")

        return parse_json_output(
            raw,
            validator=validator if self.strict_output_validation else None
        )
