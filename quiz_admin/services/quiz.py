import logging
from typing import List

from quiz_admin.core.database import QUIZZES, DocumentStore, StoredDocument
from quiz_admin.core.exceptions import QuizNotFound
from quiz_admin.helpers.clock import now_ms
from quiz_admin.models.quiz import Question, Quiz
from quiz_admin.schemas.req.quiz import QuizCreateDTO

logger = logging.getLogger('services')


class QuizService:
    def __init__(self, store: DocumentStore):
        self.store = store

    @staticmethod
    def _to_quiz(doc: StoredDocument) -> Quiz:
        return Quiz.model_validate({**doc.data, "id": doc.key})

    async def create_quiz(self, quiz_data: QuizCreateDTO) -> Quiz:
        """Store a validated quiz under a generated key."""
        quiz = Quiz(
            title=quiz_data.title,
            description=quiz_data.description,
            questions=[
                Question(
                    question=q.question,
                    options=q.options,
                    correct_answer=q.correct_answer,
                )
                for q in quiz_data.questions
            ],
            created_at=now_ms(),
        )
        quiz.id = await self.store.add(QUIZZES, quiz.to_document())
        logger.info(f"Created quiz '{quiz.title}' ({quiz.id}) with {quiz.question_count} questions")
        return quiz

    async def list_quizzes(self) -> List[Quiz]:
        docs = await self.store.get_all(QUIZZES)
        return [self._to_quiz(doc) for doc in docs]

    async def get_quiz(self, quiz_id: str) -> Quiz:
        doc = await self.store.get(QUIZZES, quiz_id)
        if doc is None:
            raise QuizNotFound()
        return self._to_quiz(doc)

    async def delete_quiz(self, quiz_id: str) -> None:
        if await self.store.get(QUIZZES, quiz_id) is None:
            raise QuizNotFound()
        await self.store.delete(QUIZZES, quiz_id)
        logger.info(f"Deleted quiz {quiz_id}")
