"""
Modèles SQLAlchemy pour les cours et les travaux rendus par les élèves.
"""

from sqlalchemy import Column, ForeignKey, Text

from students_api.database import Base
from students_api.models.student import IdType


class Course(Base):
    __tablename__ = "courses"

    id = Column(IdType, primary_key=True, autoincrement=True)
    coursename = Column(Text, nullable=False)


class CourseWork(Base):
    """
    Travail d'un élève pour un cours.
    Pas de ON DELETE CASCADE : la suppression des travaux est faite explicitement
    par le service avant celle de l'élève, dans la même transaction.
    """
    __tablename__ = "coursework"

    id = Column(IdType, primary_key=True, autoincrement=True)
    student_id = Column(IdType, ForeignKey("students.id"), nullable=False, index=True)
    course_id = Column(IdType, ForeignKey("courses.id"), nullable=True)
