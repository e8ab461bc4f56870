"""
Kids Learning AI Application

A FastAPI relay between a children's learning app and the Groq completion API:
- Short stories and daily-routine narratives
- Quizzes generated from a story
- Simplified translation
- Math practice problems
"""

__version__ = "1.0.0"
