"""
Configuration centrale de l'application via variables d'environnement.
Charger depuis un fichier .env en développement.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Serveur
    PORT: int = 3011
    NODE_ENV: str = "development"
    APP_VERSION: str = "1.1.1"

    # Frontend et origines autorisées (CORS + proxy de traduction)
    FRONTEND_URL: str = "http://localhost:3010"
    ALLOWED_ORIGINS: str = "http://localhost:3010,http://localhost:5173"

    # Session
    SESSION_SECRET: str = "change-me-in-production"
    SESSION_MAX_AGE: int = 60 * 60 * 24

    # Google OAuth
    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_CLIENT_SECRET: str = ""
    GOOGLE_CALLBACK_URL: str = "http://localhost:3011/api/auth/google/callback"

    # Google Cloud Translate
    GOOGLE_CLOUD_API_KEY: str = ""
    TRANSLATE_API_URL: str = "https://translation.googleapis.com/language/translate/v2"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # SMTP (formulaire de contact)
    EMAIL_HOST: str = ""
    EMAIL_PORT: int = 587
    EMAIL_USER: str = ""
    EMAIL_PASS: str = ""
    EMAIL_FROM: str = ""
    EMAIL_TO: str = ""
    EMAIL_USE_TLS: bool = True

    # Base de données (fichier SQLite unique)
    DATABASE_URL: str = "sqlite:///database.sqlite"

    # Médias publics
    PUBLIC_DIR: str = "public"
    MAX_IMAGE_MB: int = 5
    MAX_VIDEO_MB: int = 50

    # Assistant d'installation
    SETUP_PORT: int = 3013
    FRONTEND_ENV_PATH: str = ".env.frontend"
    BACKEND_ENV_PATH: str = ".env"
    SETUP_STATIC_DIR: str = "setup/dist"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV == "production"

    @property
    def allowed_origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @property
    def email_configured(self) -> bool:
        """Vrai si tous les paramètres SMTP sont renseignés (et pas les valeurs d'exemple)."""
        required = [
            self.EMAIL_HOST, self.EMAIL_USER, self.EMAIL_PASS,
            self.EMAIL_FROM, self.EMAIL_TO,
        ]
        if not all(required):
            return False
        return self.EMAIL_USER != "your-email@example.com" and self.EMAIL_PASS != "yourpassword"


settings = Settings()
