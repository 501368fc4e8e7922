from typing import List

from pydantic import field_validator, model_validator

from quiz_admin.models.base import CamelModel


def _required_text(value: str, what: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{what} is required")
    return value


class QuestionDTO(CamelModel):
    question: str
    options: List[str]
    correct_answer: int

    @field_validator("question")
    @classmethod
    def question_not_blank(cls, value: str) -> str:
        return _required_text(value, "Question text")

    @field_validator("options")
    @classmethod
    def options_filled(cls, value: List[str]) -> List[str]:
        if len(value) < 2:
            raise ValueError("A question needs at least two options")
        return [_required_text(option, "Option text") for option in value]

    @model_validator(mode="after")
    def correct_answer_in_bounds(self):
        if not 0 <= self.correct_answer < len(self.options):
            raise ValueError(
                f"correctAnswer must be between 0 and {len(self.options) - 1}"
            )
        return self


class QuizCreateDTO(CamelModel):
    title: str
    description: str
    questions: List[QuestionDTO]

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return _required_text(value, "Title")

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, value: str) -> str:
        return _required_text(value, "Description")

    @field_validator("questions")
    @classmethod
    def has_questions(cls, value: List[QuestionDTO]) -> List[QuestionDTO]:
        if not value:
            raise ValueError("Add at least one question")
        return value
