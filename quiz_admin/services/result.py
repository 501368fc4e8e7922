import logging
from typing import List, Union

from quiz_admin.core.database import QUIZZES, RESULTS, USERS, DocumentStore
from quiz_admin.helpers.clock import now_ms
from quiz_admin.models.result import QuizResult, ResultWithDetails
from quiz_admin.schemas.req.result import ResultCreateDTO

logger = logging.getLogger('services')

PASSING_PERCENTAGE = 70
UNKNOWN_QUIZ = "Unknown Quiz"
UNKNOWN_USER = "Unknown User"


def percentage(score: Union[int, float], total_questions: int) -> float:
    if not total_questions:
        return 0.0
    return score * 100 / total_questions


def format_percentage(score: Union[int, float], total_questions: int) -> str:
    return f"{percentage(score, total_questions):.1f}%"


def is_good_score(score: Union[int, float], total_questions: int) -> bool:
    return percentage(score, total_questions) >= PASSING_PERCENTAGE


class ResultService:
    def __init__(self, store: DocumentStore):
        self.store = store

    async def list_results(self) -> List[ResultWithDetails]:
        """Results newest first, with quiz titles and user names looked up by key."""
        results = await self.store.query(RESULTS, order_by="completedAt", descending=True)
        quizzes = await self.store.get_all(QUIZZES)
        users = await self.store.get_all(USERS)
        quiz_titles = {doc.key: doc.data.get("title") for doc in quizzes}
        user_names = {doc.key: doc.data.get("name") for doc in users}

        rows = []
        for doc in results:
            result = QuizResult.model_validate({**doc.data, "id": doc.key})
            rows.append(ResultWithDetails(
                **result.model_dump(),
                quiz_title=quiz_titles.get(result.quiz_id) or UNKNOWN_QUIZ,
                user_name=user_names.get(result.user_id) or UNKNOWN_USER,
                percentage=percentage(result.score, result.total_questions),
                percentage_label=format_percentage(result.score, result.total_questions),
                is_good_score=is_good_score(result.score, result.total_questions),
            ))
        return rows

    async def record_result(self, result_data: ResultCreateDTO) -> QuizResult:
        result = QuizResult(
            user_id=result_data.user_id,
            quiz_id=result_data.quiz_id,
            score=result_data.score,
            total_questions=result_data.total_questions,
            completed_at=result_data.completed_at or now_ms(),
        )
        result.id = await self.store.add(RESULTS, result.to_document())
        logger.info(
            f"Recorded {result.score}/{result.total_questions} on quiz {result.quiz_id}",
            extra={'user': result.user_id},
        )
        return result
