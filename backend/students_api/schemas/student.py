"""
Schémas Pydantic pour les élèves.
"""

from pydantic import BaseModel, field_validator


class StudentCreate(BaseModel):
    """
    Schéma de création d'un élève (POST /students).
    id, registered_on et status sont fixés par le serveur : s'ils sont envoyés, ils sont ignorés.
    """
    name: str

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom ne peut pas être vide.")
        return v


class StudentUpdate(BaseModel):
    """Schéma de mise à jour d'un élève (PUT /students/{id}). Seul le nom est modifiable."""
    name: str

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom ne peut pas être vide.")
        return v


class StudentResponse(BaseModel):
    """Schéma de réponse pour un élève."""
    id: int
    name: str
    registered_on: int
    status: int

    model_config = {"from_attributes": True}
