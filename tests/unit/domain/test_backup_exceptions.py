"""
Tests unitaires pour les exceptions du domaine.
"""

from src.domain.exceptions import (
    ArchiveStoreError,
    BackupFailedError,
    BackupNotFoundError,
    DomainException,
    ForbiddenError,
    InternalError,
    InvalidBackupNameError,
    JobConflictError,
    OperatorStoreError,
    RestoreFailedError,
    UnauthorizedError,
)


class TestDomainException:
    """Tests pour l'exception de base."""

    def test_default_code_is_class_name(self):
        """Sans code, le nom de la classe est utilise."""
        exc = DomainException("Oops")

        assert exc.code == "DomainException"
        assert str(exc) == "[DomainException] Oops"

    def test_explicit_code(self):
        """Le code explicite est conserve."""
        exc = DomainException("Oops", code="CUSTOM")

        assert str(exc) == "[CUSTOM] Oops"


class TestAuthorizationErrors:
    """Tests pour les erreurs d'autorisation."""

    def test_unauthorized_message_is_generic(self):
        """La raison n'apparait pas dans le message."""
        exc = UnauthorizedError("invalid_token")

        assert exc.message == "Unauthorized"
        assert exc.code == "UNAUTHORIZED"
        assert exc.reason == "invalid_token"

    def test_forbidden(self):
        """ForbiddenError porte le sujet refuse."""
        exc = ForbiddenError("user-1")

        assert exc.message == "Forbidden"
        assert exc.subject == "user-1"


class TestBackupErrors:
    """Tests pour les erreurs de sauvegarde."""

    def test_job_conflict(self):
        """Le message cite le job en cours."""
        exc = JobConflictError("manual-backup")

        assert exc.message == "Backup job already running: manual-backup"
        assert exc.code == "JOB_CONFLICT"

    def test_invalid_name_and_not_found(self):
        """Messages fixes, sans le nom demande."""
        assert InvalidBackupNameError("../x").message == "Invalid backup name."
        assert BackupNotFoundError("x.dump").message == "Backup not found."

    def test_failures_keep_returncode(self):
        """Les echecs de processus conservent le code retour."""
        backup = BackupFailedError("pg_dump exited with code 1: boom", returncode=1)
        restore = RestoreFailedError("pg_restore exited with code 2", returncode=2)

        assert backup.code == "BACKUP_FAILED"
        assert backup.returncode == 1
        assert restore.code == "RESTORE_FAILED"
        assert restore.returncode == 2

    def test_store_errors_are_internal(self):
        """Les erreurs de transport sont des InternalError."""
        assert isinstance(ArchiveStoreError("disk"), InternalError)
        assert isinstance(OperatorStoreError("db"), InternalError)
        assert InternalError("x").code == "INTERNAL_ERROR"
