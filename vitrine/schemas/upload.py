"""
Schémas Pydantic pour les réponses d'upload de médias.
"""

from vitrine.schemas.common import SuccessResponse


class ImageUploadResponse(SuccessResponse):
    imagePath: str


class VideoUploadResponse(SuccessResponse):
    videoPath: str


class LogoResponse(SuccessResponse):
    path: str
