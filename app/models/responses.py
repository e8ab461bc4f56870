"""
Pydantic models for API responses
"""
from typing import List, Optional, Dict, Any, Union
from pydantic import BaseModel, Field, StrictInt, StrictFloat


class ErrorResponse(BaseModel):
    """Error payload returned with HTTP 500"""
    error: str = Field(..., description="Error message")


class StoryResponse(BaseModel):
    """Response model for story generation"""
    story: str = Field(..., description="Generated story text")


class TranslateResponse(BaseModel):
    """Response model for translation"""
    translated: str = Field(..., description="Translated text")


class WordsResponse(BaseModel):
    """Response model for the daily routine narrative"""
    words: str = Field(..., description="Generated narrative")


class QuizQuestion(BaseModel):
    """A single multiple-choice question"""
    question: str
    options: List[str] = Field(..., min_length=4, max_length=4)
    answer: str


class QuizResult(BaseModel):
    """Quiz generated from a story"""
    questions: List[QuizQuestion]

    model_config = {
        "json_schema_extra": {
            "example": {
                "questions": [
                    {
                        "question": "What did Ravi fly at the festival?",
                        "options": ["A kite", "A balloon", "A plane", "A bird"],
                        "answer": "A kite"
                    }
                ]
            }
        }
    }


class MathProblem(BaseModel):
    """A single arithmetic problem"""
    question: str
    answer: Union[StrictInt, StrictFloat]


class MathResult(BaseModel):
    """Response model for math practice problems"""
    problems: Any = Field(None, description="Generated problems, passed through as parsed")

    model_config = {
        "json_schema_extra": {
            "example": {
                "problems": [
                    {"question": "5 + 3 =", "answer": 8},
                    {"question": "10 + 2 =", "answer": 12}
                ]
            }
        }
    }


class HealthResponse(BaseModel):
    """Response model for health check"""
    status: str
    timestamp: float
    version: str
    services: Optional[Dict[str, Any]] = Field(None, description="Service health status")
