"""
Construction de la requête de listage des élèves (GET /students).

Une seule forme de requête sert toutes les combinaisons de filtres :
un filtre à None ne contraint pas sa colonne.

    SELECT * FROM students
    WHERE (status = :status OR :status IS NULL)
      AND (name LIKE :name ESCAPE '\\' OR :name IS NULL)
    ORDER BY id
    LIMIT :limit OFFSET :offset
"""

from typing import Optional

from sqlalchemy import Integer, Select, String, bindparam, or_, select

from students_api.models.student import Student

LIKE_ESCAPE = "\\"


def page_offset(page: int, limit: int) -> int:
    """Décalage de la page demandée (pages numérotées à partir de 1)."""
    if page < 1 or limit < 1:
        raise ValueError("page et limit doivent être des entiers positifs.")
    return (page - 1) * limit


def escape_like(value: str) -> str:
    """Neutralise les jokers LIKE (%, _) et le caractère d'échappement lui-même."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def name_pattern(name: Optional[str]) -> Optional[str]:
    """Transforme le filtre `name` en motif de sous-chaîne : 'geo' → '%geo%'."""
    if name is None:
        return None
    return f"%{escape_like(name)}%"


def build_list_statement(offset: int, limit: int, status: Optional[int], name: Optional[str]) -> Select:
    """
    `name` doit déjà être le motif normalisé par name_pattern() :
    aucun joker n'est ajouté ici.
    """
    status_param = bindparam("status", status, type_=Integer)
    name_param = bindparam("name", name, type_=String)

    return (
        select(Student)
        .where(
            or_(Student.status == status_param, status_param.is_(None)),
            or_(Student.name.like(name_param, escape=LIKE_ESCAPE), name_param.is_(None)),
        )
        .order_by(Student.id)
        .limit(limit)
        .offset(offset)
    )
