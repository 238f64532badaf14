"""
Backups Router - Endpoints de sauvegarde/restauration.

Responsabilite unique:
----------------------
Exposer les operations de sauvegarde aux operateurs privilegies.
Delegue l'exclusion mutuelle a BackupJobs et la lecture du disque
a l'ArchiveStore.

Endpoints:
----------
- GET /backups: Lister les dumps
- POST /backups: Creer un dump manuel (409 si un job tourne)
- POST /backups/{name}/restore: Restaurer un dump (409 si un job tourne)
- GET /backups/{name}/download: Telecharger un dump
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse

from src.domain.entities.operator import OperatorIdentity
from src.domain.value_objects.backup_name import is_safe_backup_name
from src.infrastructure.container import Container
from src.infrastructure.logging import get_logger
from src.presentation.api.backups.schemas import (
    BackupCreatedResponse,
    BackupListResponse,
    BackupResponse,
    ErrorResponse,
    RestoreResponse,
)
from src.presentation.api.dependencies import get_container, get_current_operator

logger = get_logger(__name__)

router = APIRouter(
    prefix="/backups",
    tags=["Backups"],
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.get(
    "",
    response_model=BackupListResponse,
    summary="Lister les dumps",
    description="Retourne les dumps du repertoire, le plus recent en premier.",
)
def list_backups(
    operator: OperatorIdentity = Depends(get_current_operator),
    container: Container = Depends(get_container),
):
    """
    Liste les dumps (relecture du disque a chaque appel).
    """
    artifacts = container.store.list()
    return BackupListResponse(
        backups=[BackupResponse.from_artifact(a) for a in artifacts],
    )


@router.post(
    "",
    response_model=BackupCreatedResponse,
    summary="Creer un dump manuel",
    responses={409: {"model": ErrorResponse}},
)
async def create_backup(
    operator: OperatorIdentity = Depends(get_current_operator),
    container: Container = Depends(get_container),
):
    """
    Lance pg_dump et attend sa fin.
    """
    logger.info("manual_backup_requested", operator=operator.subject)
    artifact = await container.jobs.create_manual_backup()
    return BackupCreatedResponse(backup=BackupResponse.from_artifact(artifact))


@router.post(
    "/{name}/restore",
    response_model=RestoreResponse,
    summary="Restaurer un dump",
    description="Operation destructive: les objets existants sont supprimes puis recrees.",
    responses={409: {"model": ErrorResponse}},
)
async def restore_backup(
    name: str,
    operator: OperatorIdentity = Depends(get_current_operator),
    container: Container = Depends(get_container),
):
    """
    Lance pg_restore et attend sa fin.
    """
    logger.warning("restore_requested", operator=operator.subject, filename=name)
    await container.jobs.restore(name)
    return RestoreResponse(success=True)


@router.get(
    "/{name}/download",
    summary="Telecharger un dump",
    response_class=FileResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def download_backup(
    name: str,
    operator: OperatorIdentity = Depends(get_current_operator),
    container: Container = Depends(get_container),
):
    """
    Retourne le fichier de dump (lecture seule, hors JobGuard).
    """
    if not is_safe_backup_name(name):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid backup name.",
        )
    if not container.store.exists(name):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Backup not found.",
        )

    return FileResponse(
        container.store.path_for(name),
        filename=name,
        media_type="application/octet-stream",
    )
