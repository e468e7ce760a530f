"""
Point d'entrée principal de l'API du site vitrine.
Démarrage : uvicorn vitrine.main:app --port 3011 --reload
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

import vitrine.models  # noqa: F401  enregistre tous les modèles avant les routers
from vitrine.bootstrap import init_db
from vitrine.config import settings
from vitrine.database import engine
from vitrine.routers import about, auth, contact, projects, settings as settings_router, team, translations, uploads, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie : prépare la base (tables, colonnes, données initiales) et le dossier des médias."""
    init_db(engine)
    Path(settings.PUBLIC_DIR).mkdir(parents=True, exist_ok=True)
    logger.info("API démarrée (version %s, environnement %s)", settings.APP_VERSION, settings.NODE_ENV)
    yield


app = FastAPI(
    title="Vitrine API",
    description="API du site vitrine bilingue : contenus, administration, contact et traduction",
    version=settings.APP_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Session par cookie signé : SameSite strict et cookie sécurisé en production
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET,
    max_age=settings.SESSION_MAX_AGE,
    same_site="strict" if settings.is_production else "lax",
    https_only=settings.is_production,
)

# CORS : origines explicites, cookies autorisés pour la session d'administration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


app.include_router(auth.router)
app.include_router(users.router)
app.include_router(about.router)
app.include_router(team.router)
app.include_router(projects.router)
app.include_router(settings_router.router)
app.include_router(uploads.router)
app.include_router(contact.router)
app.include_router(translations.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Toutes les erreurs HTTP suivent l'enveloppe {success: false, message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Corps de requête invalide → 400 avec le message de la première erreur."""
    errors = exc.errors()
    if not errors:
        message = "Invalid request"
    elif errors[0].get("type") == "missing":
        message = f"{errors[0]['loc'][-1]} is required"
    else:
        message = errors[0].get("msg", "Invalid request").removeprefix("Value error, ")
    return JSONResponse(status_code=400, content={"success": False, "message": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle et indique si l'envoi d'emails est configuré."""
    configured = settings.email_configured
    return {
        "success": True,
        "status": "ok",
        "version": settings.APP_VERSION,
        "emailService": {
            "configured": configured,
            "status": "ready" if configured else "not_configured",
        },
    }


# Médias uploadés et build du site public ; monté en dernier pour ne masquer aucune route /api
app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR, html=True, check_dir=False), name="public")
