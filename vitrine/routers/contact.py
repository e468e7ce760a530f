"""
Router du formulaire de contact : CAPTCHA puis envoi de l'email.

Flux : GET /api/captcha (ou /api/captcha-data-url) → POST /api/verify-captcha
→ POST /api/send-email. Une vérification réussie autorise un seul envoi.
"""

import logging
import smtplib

from email_validator import EmailNotValidError, validate_email
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from vitrine.database import get_db
from vitrine.schemas.contact import CaptchaDataUrlResponse, CaptchaVerifyRequest, ContactMessage
from vitrine.services import captcha_service, email_service, setting_service
from vitrine.services.email_service import EmailNotConfigured
from vitrine.session_state import CaptchaExpired, CaptchaState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Contact"])

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, private",
    "Pragma": "no-cache",
}


@router.get("/captcha", summary="Nouveau CAPTCHA (SVG)")
def get_captcha(request: Request):
    text, svg = captcha_service.create_captcha()
    CaptchaState(request.session).issue(text)
    return Response(content=svg, media_type="image/svg+xml", headers=NO_CACHE_HEADERS)


@router.get("/captcha-data-url", response_model=CaptchaDataUrlResponse, summary="Nouveau CAPTCHA (data URL)")
def get_captcha_data_url(request: Request):
    text, svg = captcha_service.create_captcha()
    CaptchaState(request.session).issue(text)
    return {
        "dataUrl": captcha_service.to_data_url(svg),
        "width": captcha_service.WIDTH,
        "height": captcha_service.HEIGHT,
    }


@router.post("/verify-captcha", summary="Vérifier la saisie du CAPTCHA")
def verify_captcha(data: CaptchaVerifyRequest, request: Request):
    """Saisie comparée sans tenir compte de la casse ni des espaces autour."""
    try:
        valid = CaptchaState(request.session).verify(data.captchaInput)
    except CaptchaExpired:
        raise HTTPException(status_code=400, detail="Captcha expired. Please refresh and try again.")
    if not valid:
        return {"success": False, "message": "Incorrect captcha. Please try again."}
    return {"success": True}


@router.post("/send-email", summary="Envoyer le message de contact")
def send_email(data: ContactMessage, request: Request, db: Session = Depends(get_db)):
    captcha = CaptchaState(request.session)
    if not captcha.verified:
        raise HTTPException(status_code=403, detail="Please complete the captcha verification first.")
    if not data.is_complete:
        raise HTTPException(status_code=400, detail="Please provide name, email, and message")
    try:
        validate_email(data.email, check_deliverability=False)
    except EmailNotValidError:
        raise HTTPException(status_code=400, detail="Invalid email format")

    site_name = setting_service.get_setting(db, "site_name") or "Company Name"
    try:
        email_service.send_contact_email(
            name=data.name,
            email=data.email,
            message=data.message,
            subject=data.subject,
            site_name=site_name,
        )
    except (EmailNotConfigured, smtplib.SMTPException, OSError) as e:
        logger.error("Échec de l'envoi du message de contact: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to send email")

    captcha.consume()
    return {"success": True, "message": "Email sent successfully"}
