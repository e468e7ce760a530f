"""
Assistant d'installation : application séparée de l'API principale, partageant la même base.
Démarrage : uvicorn vitrine.setup_wizard.main:app --port 3013
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from vitrine.bootstrap import init_db
from vitrine.config import settings
from vitrine.database import engine, get_db
from vitrine.schemas.common import SuccessResponse
from vitrine.schemas.setup import AdminSetup, SetupStatus
from vitrine.setup_wizard import service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db(engine)
    logger.info("Assistant d'installation prêt (port %s)", settings.SETUP_PORT)
    yield


app = FastAPI(
    title="Vitrine Setup",
    description="Assistant de première installation du site vitrine",
    version=settings.APP_VERSION,
    docs_url="/api/setup/docs",
    openapi_url="/api/setup/openapi.json",
    lifespan=lifespan,
)

# Outil local de configuration : aucune session, toutes origines acceptées
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)

router = APIRouter(prefix="/api/setup", tags=["Installation"])


@router.get("/status", response_model=SetupStatus, summary="État de l'installation")
def get_status(db: Session = Depends(get_db)):
    return service.get_status(db)


@router.get("/settings", summary="Paramètres du site")
def get_settings(db: Session = Depends(get_db)):
    return service.load_settings(db)


@router.post("/settings", response_model=SuccessResponse, summary="Enregistrer les paramètres")
def save_settings(values: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    service.save_settings(db, values)
    return {}


@router.get("/env/{filename}", summary="Lire un fichier d'environnement")
def read_env(filename: str):
    try:
        return service.read_env(filename)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/env/{filename}", response_model=SuccessResponse, summary="Écrire un fichier d'environnement")
def write_env(filename: str, values: Dict[str, Any] = Body(...)):
    try:
        service.write_env(filename, values)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {}


@router.get("/admin", summary="Administrateur local")
def get_admin(db: Session = Depends(get_db)):
    return service.load_admin(db)


@router.post("/admin", response_model=SuccessResponse, summary="Créer ou modifier l'administrateur local")
def save_admin(data: AdminSetup, db: Session = Depends(get_db)):
    try:
        service.save_admin(db, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {}


app.include_router(router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request").removeprefix("Value error, ") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"success": False, "message": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(status_code=500, content={"success": False, "message": "Internal server error"})


# Interface de l'assistant (build statique), si présente
if Path(settings.SETUP_STATIC_DIR).is_dir():
    app.mount("/", StaticFiles(directory=settings.SETUP_STATIC_DIR, html=True), name="setup")
