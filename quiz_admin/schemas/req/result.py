from typing import Optional, Union

from pydantic import Field, model_validator

from quiz_admin.models.base import CamelModel


class ResultCreateDTO(CamelModel):
    user_id: str = Field(min_length=1)
    quiz_id: str = Field(min_length=1)
    score: Union[int, float] = Field(ge=0)
    total_questions: int = Field(gt=0)
    completed_at: Optional[int] = None

    @model_validator(mode="after")
    def score_within_total(self):
        if self.score > self.total_questions:
            raise ValueError("score cannot exceed totalQuestions")
        return self
