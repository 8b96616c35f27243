"""
Router pour les élèves.
GET    /students/{id} : détail d'un élève
POST   /students      : création
PUT    /students/{id} : mise à jour du nom
DELETE /students/{id} : suppression (avec les travaux de l'élève)
GET    /students      : listage paginé et filtré, diffusé en NDJSON
"""

from typing import AsyncIterator, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from students_api.config import settings
from students_api.database import get_db, get_session_factory
from students_api.schemas.envelope import GeneralResponse
from students_api.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from students_api.services import student_service
from students_api.services.student_service import StudentNotFoundError

router = APIRouter(prefix="/students", tags=["Élèves"])

NDJSON_MEDIA_TYPE = "application/x-ndjson"

StudentEnvelope = GeneralResponse[StudentResponse]


def _not_found(exc: StudentNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content=StudentEnvelope.fail(str(exc)).model_dump())


@router.get(
    "/{student_id}",
    response_model=StudentResponse,
    responses={404: {"model": StudentEnvelope}},
    summary="Détail d'un élève",
)
async def get_student(student_id: int, db: AsyncSession = Depends(get_db)):
    try:
        return await student_service.get_student(db, student_id)
    except StudentNotFoundError as e:
        return _not_found(e)


@router.post("", response_model=StudentResponse, status_code=201, summary="Créer un élève")
async def create_student(data: StudentCreate, db: AsyncSession = Depends(get_db)):
    """Crée un élève. registered_on et status (1) sont fixés par le serveur."""
    return await student_service.create_student(db, data)


@router.put(
    "/{student_id}",
    response_model=StudentEnvelope,
    status_code=202,
    responses={404: {"model": StudentEnvelope}},
    summary="Renommer un élève",
)
async def update_student(student_id: int, data: StudentUpdate, db: AsyncSession = Depends(get_db)):
    """Met à jour le nom d'un élève. Les autres champs du corps sont ignorés."""
    try:
        student = await student_service.update_student(db, student_id, data)
    except StudentNotFoundError as e:
        return _not_found(e)
    return StudentEnvelope.ok("Student update successfully", student=student)


@router.delete(
    "/{student_id}",
    response_model=StudentEnvelope,
    status_code=202,
    responses={404: {"model": StudentEnvelope}},
    summary="Supprimer un élève",
)
async def delete_student(student_id: int, db: AsyncSession = Depends(get_db)):
    """Supprime définitivement un élève ainsi que tous ses travaux (coursework)."""
    try:
        student = await student_service.delete_student(db, student_id)
    except StudentNotFoundError as e:
        return _not_found(e)
    return StudentEnvelope.ok("Student deleted successfully", student=student)


async def _ndjson(first: Optional[StudentResponse], rest: AsyncIterator[StudentResponse]) -> AsyncIterator[str]:
    try:
        if first is not None:
            yield first.model_dump_json() + "\n"
            async for student in rest:
                yield student.model_dump_json() + "\n"
    finally:
        await rest.aclose()


@router.get(
    "",
    response_class=StreamingResponse,
    responses={200: {"content": {NDJSON_MEDIA_TYPE: {}}}},
    summary="Lister les élèves (NDJSON)",
)
async def list_students(
    page: int = Query(1, ge=1, le=settings.MAX_PAGE),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    status: Optional[int] = Query(None),
    name: Optional[str] = Query(None),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
):
    """
    Retourne une page d'élèves, un objet JSON par ligne.
    `status` filtre sur le statut exact, `name` sur une sous-chaîne du nom.
    Les autres paramètres de requête sont ignorés.
    """
    students = student_service.stream_students(session_factory, page, limit, status, name)
    # Première ligne lue avant l'envoi des en-têtes : une erreur de base de données
    # remonte au gestionnaire d'exceptions (500) au lieu d'un 200 tronqué.
    first = await anext(students, None)
    return StreamingResponse(_ndjson(first, students), media_type=NDJSON_MEDIA_TYPE)
