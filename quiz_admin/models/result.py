from typing import Optional, Union

from quiz_admin.models.base import CamelModel


class QuizResult(CamelModel):
    id: Optional[str] = None
    user_id: str  # weak reference into users
    quiz_id: str  # weak reference into quizzes
    score: Union[int, float]
    total_questions: int
    completed_at: Optional[int] = None


class ResultWithDetails(QuizResult):
    quiz_title: str
    user_name: str
    percentage: float
    percentage_label: str
    is_good_score: bool
