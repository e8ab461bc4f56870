"""
Pydantic models for API requests

Fields accept any JSON value and are optional: whatever the client sends,
or None when a field is missing, is rendered into the prompt as-is and
left for the model to cope with.
"""
from typing import Any
from pydantic import BaseModel, Field

Age = Any


class StoryRequest(BaseModel):
    """Request model for story generation"""
    age: Age = Field(None, description="Child's age")
    topic: Any = Field(None, description="What the story should be about")

    model_config = {
        "json_schema_extra": {
            "example": {
                "age": 6,
                "topic": "a kite festival"
            }
        }
    }


class QuizRequest(BaseModel):
    """Request model for quiz generation"""
    story: Any = Field(None, description="Story the questions are based on")


class TranslateRequest(BaseModel):
    """Request model for translation"""
    text: Any = Field(None, description="Text to translate")


class WordsRequest(BaseModel):
    """Request model for the daily routine narrative"""
    age: Age = Field(None, description="Child's age")


class MathRequest(BaseModel):
    """Request model for math practice problems"""
    age: Age = Field(None, description="Child's age")
    operation: Any = Field(None, description="Operation, e.g. addition")

    model_config = {
        "json_schema_extra": {
            "example": {
                "age": 7,
                "operation": "addition"
            }
        }
    }
