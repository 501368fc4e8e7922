from fastapi import Depends, Request

from quiz_admin.core.auth_provider import AuthProvider
from quiz_admin.core.database import DocumentStore
from quiz_admin.services.auth import AuthService
from quiz_admin.services.migration import UserMigrationService
from quiz_admin.services.quiz import QuizService
from quiz_admin.services.result import ResultService


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_auth_provider(request: Request) -> AuthProvider:
    return request.app.state.auth_provider


def get_auth_service(
    store: DocumentStore = Depends(get_store),
    provider: AuthProvider = Depends(get_auth_provider),
) -> AuthService:
    return AuthService(store, provider)


def get_quiz_service(store: DocumentStore = Depends(get_store)) -> QuizService:
    return QuizService(store)


def get_result_service(store: DocumentStore = Depends(get_store)) -> ResultService:
    return ResultService(store)


def get_migration_service(store: DocumentStore = Depends(get_store)) -> UserMigrationService:
    return UserMigrationService(store)
