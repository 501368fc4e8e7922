import pytest
from pydantic import ValidationError

from quiz_admin.core.database import QUIZZES, RESULTS, USERS, DocumentStoreError
from quiz_admin.schemas.req.result import ResultCreateDTO
from quiz_admin.services.result import format_percentage, is_good_score
from tests.conftest import STUDENT_UID


def test_seven_out_of_ten_is_a_good_score():
    assert format_percentage(7, 10) == "70.0%"
    assert is_good_score(7, 10) is True


def test_percentage_formatting():
    assert format_percentage(2, 3) == "66.7%"
    assert is_good_score(2, 3) is False
    assert format_percentage(0, 0) == "0.0%"


async def test_results_newest_first_with_names(result_service, store):
    store.seed(QUIZZES, "quiz-1", {"title": "Capitals", "description": "", "questions": [], "createdAt": 1})
    store.seed(RESULTS, "r-old", {"userId": STUDENT_UID, "quizId": "quiz-1", "score": 7, "totalQuestions": 10, "completedAt": 100})
    store.seed(RESULTS, "r-new", {"userId": "gone", "quizId": "deleted-quiz", "score": 3, "totalQuestions": 10, "completedAt": 300})
    store.seed(RESULTS, "r-mid", {"userId": STUDENT_UID, "quizId": "quiz-1", "score": 10, "totalQuestions": 10, "completedAt": 200})

    rows = await result_service.list_results()

    assert [row.id for row in rows] == ["r-new", "r-mid", "r-old"]
    assert (rows[0].user_name, rows[0].quiz_title) == ("Unknown User", "Unknown Quiz")
    assert (rows[2].user_name, rows[2].quiz_title) == ("Sam Student", "Capitals")
    assert rows[2].percentage_label == "70.0%"
    assert rows[2].is_good_score is True
    assert rows[0].is_good_score is False


async def test_record_result(result_service, store):
    result = await result_service.record_result(
        ResultCreateDTO(user_id=STUDENT_UID, quiz_id="quiz-1", score=4, total_questions=5)
    )

    doc = store.raw(RESULTS, result.id)
    assert doc["userId"] == STUDENT_UID
    assert doc["totalQuestions"] == 5
    assert doc["completedAt"] == result.completed_at


@pytest.mark.parametrize("score, total", [(11, 10), (-1, 10), (0, 0)])
def test_result_write_guard(score, total):
    with pytest.raises(ValidationError):
        ResultCreateDTO(user_id="u", quiz_id="q", score=score, total_questions=total)


async def test_listing_stops_at_the_first_failed_read(result_service, store):
    store.fail("get_all", QUIZZES)

    with pytest.raises(DocumentStoreError):
        await result_service.list_results()

    assert ("get_all", USERS, None) not in store.calls
