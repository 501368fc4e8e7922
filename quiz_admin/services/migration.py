import logging
from typing import List

from quiz_admin.core.database import USERS, DocumentStore, StoredDocument
from quiz_admin.core.exceptions import MigrationDocumentFailed, QuizAdminError
from quiz_admin.schemas.res.migration import AffectedUser, MigrationReport, MigrationStatus

logger = logging.getLogger('services')


def _text(value):
    return None if value is None else str(value)


class UserMigrationService:
    """
    Finds ``users`` documents stored under a key other than their ``uid`` and
    moves them under the ``uid``.

    A move is a write followed by a delete. If the process dies in between
    both documents exist; the next check still lists the old one and a later
    run finishes the job. Documents without a ``uid`` field are left alone.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    async def _find_mismatched(self) -> List[StoredDocument]:
        docs = await self.store.get_all(USERS)
        return [doc for doc in docs if doc.data.get("uid") and str(doc.data["uid"]) != doc.key]

    async def check_migration_needed(self) -> MigrationStatus:
        try:
            mismatched = await self._find_mismatched()
        except QuizAdminError as e:
            logger.error(f"Error checking migration status: {e.message}")
            return MigrationStatus(needed=False, count=0, users=[])

        users = [
            AffectedUser(doc_id=doc.key, uid=str(doc.data["uid"]), email=_text(doc.data.get("email")))
            for doc in mismatched
        ]
        return MigrationStatus(needed=len(users) > 0, count=len(users), users=users)

    async def _migrate_one(self, doc: StoredDocument) -> None:
        uid = str(doc.data["uid"])
        try:
            await self.store.set(USERS, uid, doc.data)
            await self.store.delete(USERS, doc.key)
        except Exception as e:
            raise MigrationDocumentFailed(doc.data.get("email"), getattr(e, "message", str(e))) from e

    async def migrate_users(self) -> MigrationReport:
        errors: List[str] = []
        migrated_count = 0

        logger.info("Starting user migration...")
        try:
            pending = await self._find_mismatched()
        except QuizAdminError as e:
            error = f"Migration failed: {e.message}"
            logger.error(error)
            return MigrationReport(success=False, migrated_count=0, errors=[error])

        logger.info(f"Found {len(pending)} users that need migration")

        for doc in pending:
            try:
                await self._migrate_one(doc)
            except MigrationDocumentFailed as e:
                errors.append(e.message)
                logger.error(e.message)
                continue
            migrated_count += 1
            logger.info(f"Migrated user: {doc.data.get('email')} ({doc.data['uid']})")

        logger.info(f"Migration completed. Migrated {migrated_count} users.")
        return MigrationReport(success=not errors, migrated_count=migrated_count, errors=errors)
