"""
Service métier pour les élèves.
Création, lecture, listage paginé, mise à jour du nom et suppression en cascade des travaux.
"""

import logging
import time
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from students_api.models.student import Student
from students_api.repositories import CourseWorkRepository, StudentRepository
from students_api.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from students_api.services.student_query import name_pattern, page_offset

logger = logging.getLogger(__name__)

INITIAL_STATUS = 1


class StudentNotFoundError(LookupError):
    """L'élève ciblé n'existe pas."""

    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"Student with ID {student_id} not found")


def now_epoch_ms() -> int:
    return int(time.time() * 1000)


async def create_student(db: AsyncSession, data: StudentCreate) -> StudentResponse:
    """Crée un élève : registered_on et status sont toujours fixés par le serveur."""
    async with db.begin():
        student = await StudentRepository(db).save(
            Student(name=data.name, registered_on=now_epoch_ms(), status=INITIAL_STATUS)
        )
    logger.info("Élève créé : %s (%s)", student.name, student.id)
    return StudentResponse.model_validate(student)


async def get_student(db: AsyncSession, student_id: int) -> StudentResponse:
    """Retourne un élève par son ID. Lève StudentNotFoundError s'il n'existe pas."""
    student = await StudentRepository(db).find_by_id(student_id)
    if student is None:
        raise StudentNotFoundError(student_id)
    return StudentResponse.model_validate(student)


async def update_student(db: AsyncSession, student_id: int, data: StudentUpdate) -> StudentResponse:
    """Met à jour le nom d'un élève. Les autres champs ne sont jamais modifiés."""
    repository = StudentRepository(db)
    async with db.begin():
        student = await repository.find_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        student.name = data.name
        student = await repository.save(student)
    logger.info("Élève %s renommé en %s", student_id, student.name)
    return StudentResponse.model_validate(student)


async def delete_student(db: AsyncSession, student_id: int) -> StudentResponse:
    """
    Supprime un élève et tous ses travaux, dans une seule transaction.

    Étapes (dans cet ordre) :
    1. Charger l'élève (StudentNotFoundError s'il n'existe pas)
    2. Supprimer les lignes coursework de l'élève
    3. Supprimer l'élève
    4. Retourner l'élève tel qu'il était avant suppression

    Une erreur en 2 ou 3 annule la transaction : l'élève et ses travaux restent en place.
    """
    students = StudentRepository(db)
    async with db.begin():
        student = await students.find_by_id(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        snapshot = StudentResponse.model_validate(student)

        removed = await CourseWorkRepository(db).delete_by_student_id(student_id)
        await students.delete_by_id(student_id)

    logger.info("Élève supprimé : %s (%s), %d travaux supprimés", snapshot.name, student_id, removed)
    return snapshot


async def stream_students(
    session_factory: async_sessionmaker[AsyncSession],
    page: int,
    limit: int,
    status: Optional[int] = None,
    name: Optional[str] = None,
) -> AsyncIterator[StudentResponse]:
    """
    Diffuse une page d'élèves filtrés par statut et/ou par sous-chaîne du nom.
    La session est ouverte pour la durée du flux et fermée à la fin ou à l'annulation.
    """
    offset = page_offset(page, limit)
    pattern = name_pattern(name)

    async with session_factory() as session:
        rows = StudentRepository(session).find_all_by_status_and_name(offset, limit, status, pattern)
        async for student in rows:
            yield StudentResponse.model_validate(student)
