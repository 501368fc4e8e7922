from typing import List

from fastapi import APIRouter, Depends, status

from quiz_admin.core.auth_middleware import get_current_admin
from quiz_admin.core.dependencies import get_quiz_service
from quiz_admin.models.quiz import Quiz
from quiz_admin.models.user import User
from quiz_admin.schemas.req.quiz import QuizCreateDTO
from quiz_admin.services.quiz import QuizService

quiz_router = APIRouter()


@quiz_router.post("/", response_model=Quiz, status_code=status.HTTP_201_CREATED)
async def create_quiz(
    quiz_data: QuizCreateDTO,
    admin: User = Depends(get_current_admin),
    quiz_service: QuizService = Depends(get_quiz_service),
):
    return await quiz_service.create_quiz(quiz_data)


@quiz_router.get("/", response_model=List[Quiz])
async def get_all_quizzes(
    admin: User = Depends(get_current_admin),
    quiz_service: QuizService = Depends(get_quiz_service),
):
    return await quiz_service.list_quizzes()


@quiz_router.get("/{quiz_id}", response_model=Quiz)
async def get_quiz(
    quiz_id: str,
    admin: User = Depends(get_current_admin),
    quiz_service: QuizService = Depends(get_quiz_service),
):
    return await quiz_service.get_quiz(quiz_id)


@quiz_router.delete("/{quiz_id}")
async def delete_quiz(
    quiz_id: str,
    admin: User = Depends(get_current_admin),
    quiz_service: QuizService = Depends(get_quiz_service),
):
    await quiz_service.delete_quiz(quiz_id)
    return {"success": True}
