from fastapi import APIRouter

from quiz_admin.api.v1.auth import auth_router
from quiz_admin.api.v1.migration import migration_router
from quiz_admin.api.v1.quiz import quiz_router
from quiz_admin.api.v1.results import results_router
from quiz_admin.api.v1.users import users_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(quiz_router, prefix="/quizzes", tags=["Quizzes"])
api_router.include_router(results_router, prefix="/results", tags=["Results"])
api_router.include_router(migration_router, prefix="/migration", tags=["Migration"])
