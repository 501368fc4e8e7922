from typing import List, Optional

from quiz_admin.models.base import CamelModel


class Question(CamelModel):
    question: str
    options: List[str]
    correct_answer: int  # zero-based index into options


class Quiz(CamelModel):
    id: Optional[str] = None  # document key, never stored inside the document
    title: str
    description: str = ""
    questions: List[Question] = []
    created_at: Optional[int] = None

    @property
    def question_count(self) -> int:
        return len(self.questions)
