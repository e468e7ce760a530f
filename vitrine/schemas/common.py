"""
Schémas Pydantic partagés : enveloppes de réponse et utilitaires de validation.
"""

from typing import Optional

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    success: bool = True


class CreatedResponse(SuccessResponse):
    """Réponse d'une création : identifiant de la nouvelle ligne."""
    id: int


def blank_to_none(v):
    """Les champs optionnels envoyés vides par les formulaires sont stockés à NULL."""
    if isinstance(v, str) and not v.strip():
        return None
    return v


def required_text(v: Optional[str], label: str) -> Optional[str]:
    if v is not None and not v.strip():
        raise ValueError(f"{label} cannot be empty")
    return v.strip() if v else v
