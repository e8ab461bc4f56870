"""
Learning content API routes: stories, quizzes, translation, daily routine and math practice
"""
from typing import Optional
from fastapi import APIRouter, Body, Depends
from loguru import logger

from app.models.requests import (
    StoryRequest,
    QuizRequest,
    TranslateRequest,
    WordsRequest,
    MathRequest
)
from app.models.responses import (
    ErrorResponse,
    StoryResponse,
    QuizResult,
    TranslateResponse,
    WordsResponse,
    MathResult
)
from app.services.ai.learning_service import LearningContentService
from app.utils.dependencies import get_learning_service, handle_service_errors

router = APIRouter(tags=["Learning"])

ERROR_RESPONSES = {500: {"model": ErrorResponse}}


@router.post("/story", response_model=StoryResponse, responses=ERROR_RESPONSES)
@handle_service_errors()
async def story(
    request: Optional[StoryRequest] = Body(None),
    learning_service: LearningContentService = Depends(get_learning_service)
):
    """
    Write a short story for a child

    - **age**: Child's age
    - **topic**: What the story should be about

    The story is returned exactly as the model wrote it.
    """
    request = request or StoryRequest()
    logger.info(f"📖 Story request: age={request.age}, topic={request.topic}")

    text = await learning_service.write_story(request.age, request.topic)
    return StoryResponse(story=text)


@router.post(
    "/quiz",
    response_model=None,
    responses={200: {"model": QuizResult}, **ERROR_RESPONSES}
)
@handle_service_errors("Failed to generate quiz")
async def quiz(
    request: Optional[QuizRequest] = Body(None),
    learning_service: LearningContentService = Depends(get_learning_service)
):
    """
    Create 10 multiple-choice questions about a story

    The model's JSON is returned as parsed, without reshaping.
    """
    request = request or QuizRequest()
    logger.info(f"❓ Quiz request for story of {len(str(request.story or ''))} characters")

    return await learning_service.build_quiz(request.story)


@router.post("/translate", response_model=TranslateResponse, responses=ERROR_RESPONSES)
@handle_service_errors()
async def translate(
    request: Optional[TranslateRequest] = Body(None),
    learning_service: LearningContentService = Depends(get_learning_service)
):
    """
    Translate text into the configured language using simple words for kids
    """
    request = request or TranslateRequest()
    logger.info(f"🌍 Translate request: {str(request.text or '')[:100]}")

    translated = await learning_service.translate(request.text)
    return TranslateResponse(translated=translated)


@router.post("/words", response_model=WordsResponse, responses=ERROR_RESPONSES)
@handle_service_errors()
async def words(
    request: Optional[WordsRequest] = Body(None),
    learning_service: LearningContentService = Depends(get_learning_service)
):
    """
    Describe a child's daily routine in the first person
    """
    request = request or WordsRequest()
    logger.info(f"✍️ Words request: age={request.age}")

    text = await learning_service.describe_routine(request.age)
    return WordsResponse(words=text)


@router.post("/math", response_model=MathResult, responses=ERROR_RESPONSES)
@handle_service_errors("Failed to generate problems")
async def math(
    request: Optional[MathRequest] = Body(None),
    learning_service: LearningContentService = Depends(get_learning_service)
):
    """
    Generate 5 arithmetic problems for a child

    - **age**: Child's age
    - **operation**: e.g. addition, subtraction, multiplication
    """
    request = request or MathRequest()
    logger.info(f"🧮 Math request: age={request.age}, operation={request.operation}")

    problems = await learning_service.make_math_problems(request.age, request.operation)
    return MathResult(problems=problems)
