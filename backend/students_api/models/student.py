"""
Modèle SQLAlchemy pour la table students.
"""

from sqlalchemy import BigInteger, Column, Integer, Text

from students_api.database import Base

# SQLite n'auto-incrémente que les colonnes "INTEGER PRIMARY KEY"
IdType = BigInteger().with_variant(Integer, "sqlite")


class Student(Base):
    __tablename__ = "students"

    id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    registered_on = Column(BigInteger, nullable=False)  # epoch en millisecondes
    status = Column(Integer, nullable=False, default=1)
