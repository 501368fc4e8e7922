from fastapi import APIRouter, Depends

from quiz_admin.core.auth_middleware import get_current_admin
from quiz_admin.core.dependencies import get_migration_service
from quiz_admin.models.user import User
from quiz_admin.schemas.res.migration import MigrationReport, MigrationStatus
from quiz_admin.services.migration import UserMigrationService

migration_router = APIRouter()


@migration_router.get("/status", response_model=MigrationStatus)
async def migration_status(
    admin: User = Depends(get_current_admin),
    migration_service: UserMigrationService = Depends(get_migration_service),
):
    return await migration_service.check_migration_needed()


@migration_router.post("/run", response_model=MigrationReport)
async def run_migration(
    admin: User = Depends(get_current_admin),
    migration_service: UserMigrationService = Depends(get_migration_service),
):
    return await migration_service.migrate_users()
