"""
Service d'envoi d'emails SMTP.
Utilisé par le formulaire de contact du site public : le message du visiteur
est transmis à l'adresse EMAIL_TO, avec Reply-To positionné sur le visiteur.
"""

import html
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from vitrine.config import settings

logger = logging.getLogger(__name__)


class EmailNotConfigured(RuntimeError):
    """Paramètres SMTP absents ou encore aux valeurs d'exemple."""


def default_subject(name: str, site_name: str) -> str:
    return f"New message from {name} via {site_name} website"


def build_contact_message(
    name: str,
    email: str,
    message: str,
    subject: Optional[str] = None,
    site_name: str = "Company Name",
) -> MIMEMultipart:
    """Construit le message multipart (texte + HTML) à partir du formulaire."""
    msg = MIMEMultipart("alternative")
    msg["From"] = settings.EMAIL_FROM
    msg["To"] = settings.EMAIL_TO
    msg["Reply-To"] = email
    msg["Subject"] = subject or default_subject(name, site_name)

    text_content = f"Name: {name}\nEmail: {email}\n\nMessage:\n{message}\n"

    # Le contenu saisi par le visiteur est échappé avant insertion dans le HTML
    safe_message = html.escape(message).replace("\n", "<br>")
    html_content = f"""
    <html>
      <body style="font-family: Arial, sans-serif; color: #333; max-width: 600px; margin: auto;">
        <h2>New contact form submission</h2>
        <p><strong>Name:</strong> {html.escape(name)}</p>
        <p><strong>Email:</strong> {html.escape(email)}</p>
        <p><strong>Message:</strong></p>
        <p>{safe_message}</p>
        <hr style="border: none; border-top: 1px solid #eee;" />
        <p style="font-size: 12px; color: #888;">Sent from the {html.escape(site_name)} website.</p>
      </body>
    </html>
    """

    msg.attach(MIMEText(text_content, "plain", "utf-8"))
    msg.attach(MIMEText(html_content, "html", "utf-8"))
    return msg


def send_contact_email(
    name: str,
    email: str,
    message: str,
    subject: Optional[str] = None,
    site_name: str = "Company Name",
) -> None:
    """
    Envoie le message du formulaire de contact.
    Lève EmailNotConfigured si le SMTP n'est pas paramétré, ou l'exception SMTP en cas d'échec.
    """
    if not settings.email_configured:
        raise EmailNotConfigured("Email service is not configured")

    msg = build_contact_message(name, email, message, subject, site_name)

    with smtplib.SMTP(settings.EMAIL_HOST, settings.EMAIL_PORT, timeout=settings.HTTP_TIMEOUT_SECONDS) as server:
        if settings.EMAIL_USE_TLS:
            server.starttls()
        if settings.EMAIL_USER:
            server.login(settings.EMAIL_USER, settings.EMAIL_PASS)
        server.send_message(msg)

    logger.info("Message de contact de %s transmis à %s", email, settings.EMAIL_TO)
