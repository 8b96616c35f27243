"""
Accès aux données des élèves et de leurs travaux.

Les repositories ne font jamais de commit : la transaction appartient au
service appelant, qui peut ainsi enchaîner plusieurs opérations atomiquement.
"""

from typing import AsyncIterator, Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from students_api.models.course import CourseWork
from students_api.models.student import Student
from students_api.services.student_query import build_list_statement


class StudentRepository:
    """Opérations sur la table `students`."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, student_id: int) -> Optional[Student]:
        return await self.session.get(Student, student_id)

    async def save(self, student: Student) -> Student:
        """Insère ou met à jour l'élève ; après le flush, `id` est attribué."""
        self.session.add(student)
        await self.session.flush()
        await self.session.refresh(student)
        return student

    async def delete_by_id(self, student_id: int) -> None:
        await self.session.execute(delete(Student).where(Student.id == student_id))

    async def find_all_by_status_and_name(
        self,
        offset: int,
        limit: int,
        status: Optional[int],
        name: Optional[str],
    ) -> AsyncIterator[Student]:
        """
        Diffuse les élèves filtrés via un curseur côté serveur : les lignes
        sont lues au fur et à mesure que le consommateur itère.
        `name` est le motif LIKE déjà normalisé (ex. '%geo%').
        """
        result = await self.session.stream_scalars(build_list_statement(offset, limit, status, name))
        try:
            async for student in result:
                yield student
        finally:
            await result.close()


class CourseWorkRepository:
    """Opérations sur la table `coursework`."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def delete_by_student_id(self, student_id: int) -> int:
        """Supprime tous les travaux d'un élève. Retourne le nombre de lignes supprimées."""
        result = await self.session.execute(
            delete(CourseWork).where(CourseWork.student_id == student_id)
        )
        return result.rowcount
