from typing import List

from fastapi import APIRouter, Depends, status

from quiz_admin.core.auth_middleware import get_current_admin, get_current_user
from quiz_admin.core.dependencies import get_result_service
from quiz_admin.core.exceptions import AccessDenied
from quiz_admin.models.result import QuizResult, ResultWithDetails
from quiz_admin.models.user import User
from quiz_admin.schemas.req.result import ResultCreateDTO
from quiz_admin.services.result import ResultService

results_router = APIRouter()


@results_router.get("/", response_model=List[ResultWithDetails])
async def list_results(
    admin: User = Depends(get_current_admin),
    result_service: ResultService = Depends(get_result_service),
):
    return await result_service.list_results()


@results_router.post("/", response_model=QuizResult, status_code=status.HTTP_201_CREATED)
async def record_result(
    result_data: ResultCreateDTO,
    user: User = Depends(get_current_user),
    result_service: ResultService = Depends(get_result_service),
):
    """Students submit their own results; admins may record one for anybody"""
    if not user.is_admin and result_data.user_id != user.uid:
        raise AccessDenied("You can only record your own results")
    return await result_service.record_result(result_data)
