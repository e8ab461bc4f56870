"""
Prompt templates for the learning content routes

Values are substituted with str.format and are not escaped.
"""

STORY_TMPL = """Write a short fun story (max 200 words) for a {age}-year-old indian child about {topic}.
Use simple English. Do not use * inside story."""

QUIZ_TMPL = """
Based on this story:
"{story}"

Create 10 multiple-choice questions for kids.
Each must have 4 options (A, B, C, D) and one correct answer.
Return STRICT JSON only:
{{
  "questions": [
    {{
      "question": "...",
      "options": ["A", "B", "C", "D"],
      "answer": "Correct Option"
    }}
  ]
}}
"""

TRANSLATE_TMPL = "Translate this into {language} with simple words for kids:\n\n{text}"

WORDS_TMPL = (
    "Pretend you are a {age}-year-old Indian child. Describe your daily routine in your own words "
    "(max 200 words), step by step, from morning to night. Use Indian food, modern games like "
    "cricket, football, and toys. Do not use * or old games."
)

MATH_TMPL = """
Generate 5 {operation} math problems for a {age}-year-old child.
Return ONLY valid JSON array:
[
  {{"question": "5 + 3 =", "answer": 8}},
  {{"question": "10 + 2 =", "answer": 12}}
]
"""
