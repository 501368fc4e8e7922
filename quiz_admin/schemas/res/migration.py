from typing import List, Optional

from quiz_admin.models.base import CamelModel


class AffectedUser(CamelModel):
    doc_id: str
    uid: str
    email: Optional[str] = None


class MigrationStatus(CamelModel):
    needed: bool
    count: int
    users: List[AffectedUser] = []


class MigrationReport(CamelModel):
    success: bool
    migrated_count: int
    errors: List[str] = []
