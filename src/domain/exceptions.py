"""
Exceptions metier du domaine.

Ces exceptions representent les echecs des operations de sauvegarde
et d'autorisation. Elles sont independantes de l'infrastructure:
la couche presentation les traduit en codes HTTP.
"""


class DomainException(Exception):
    """Exception de base pour toutes les erreurs du domaine."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """
        Initialise une exception du domaine.

        Args:
            message: Message d'erreur descriptif.
            code: Code d'erreur optionnel pour identification programmatique.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ═══════════════════════════════════════════════════════════════════════════════
# AUTORISATION
# ═══════════════════════════════════════════════════════════════════════════════

class UnauthorizedError(DomainException):
    """Leve quand le token est absent, invalide ou expire."""

    def __init__(self, reason: str | None = None) -> None:
        super().__init__("Unauthorized", code="UNAUTHORIZED")
        self.reason = reason


class ForbiddenError(DomainException):
    """Leve quand l'identite est valide mais n'est pas un operateur privilegie."""

    def __init__(self, subject: str | None = None) -> None:
        super().__init__("Forbidden", code="FORBIDDEN")
        self.subject = subject


# ═══════════════════════════════════════════════════════════════════════════════
# JOBS
# ═══════════════════════════════════════════════════════════════════════════════

class JobConflictError(DomainException):
    """Leve quand un job de sauvegarde ou de restauration est deja en cours."""

    def __init__(self, label: str) -> None:
        super().__init__(
            f"Backup job already running: {label}",
            code="JOB_CONFLICT"
        )
        self.label = label


# ═══════════════════════════════════════════════════════════════════════════════
# SAUVEGARDES
# ═══════════════════════════════════════════════════════════════════════════════

class InvalidBackupNameError(DomainException):
    """Leve quand un nom de sauvegarde ne respecte pas la grammaire sure."""

    def __init__(self, name: str) -> None:
        super().__init__("Invalid backup name.", code="INVALID_BACKUP_NAME")
        self.name = name


class BackupNotFoundError(DomainException):
    """Leve quand le fichier de sauvegarde demande n'existe pas."""

    def __init__(self, name: str) -> None:
        super().__init__("Backup not found.", code="BACKUP_NOT_FOUND")
        self.name = name


class BackupFailedError(DomainException):
    """Leve quand l'utilitaire de dump echoue (code retour non nul ou lancement impossible)."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message, code="BACKUP_FAILED")
        self.returncode = returncode


class RestoreFailedError(DomainException):
    """Leve quand l'utilitaire de restauration echoue."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message, code="RESTORE_FAILED")
        self.returncode = returncode


# ═══════════════════════════════════════════════════════════════════════════════
# INFRASTRUCTURE
# ═══════════════════════════════════════════════════════════════════════════════

class InternalError(DomainException):
    """Erreur de transport (systeme de fichiers, base de donnees)."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message, code=code or "INTERNAL_ERROR")


class ArchiveStoreError(InternalError):
    """Leve quand le repertoire de sauvegarde est inaccessible."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="ARCHIVE_STORE_ERROR")


class OperatorStoreError(InternalError):
    """Leve quand la requete sur les operateurs privilegies echoue."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="OPERATOR_STORE_ERROR")
