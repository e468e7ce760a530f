"""
Tests du service d'envoi d'emails (SMTP simulé).
"""

from unittest.mock import patch

import pytest

from vitrine.config import settings
from vitrine.services import email_service
from vitrine.services.email_service import EmailNotConfigured


@pytest.fixture
def smtp_settings(monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_HOST", "smtp.example.com")
    monkeypatch.setattr(settings, "EMAIL_USER", "mailer@example.com")
    monkeypatch.setattr(settings, "EMAIL_PASS", "secret")
    monkeypatch.setattr(settings, "EMAIL_FROM", "noreply@example.com")
    monkeypatch.setattr(settings, "EMAIL_TO", "contact@example.com")


def test_message_texte_et_html():
    msg = email_service.build_contact_message("Ada", "ada@example.com", "Line 1\n<b>Line 2</b>", site_name="Acme")

    assert msg["Reply-To"] == "ada@example.com"
    assert msg["Subject"] == "New message from Ada via Acme website"
    text_part, html_part = msg.get_payload()
    assert "Line 1\n<b>Line 2</b>" in text_part.get_payload(decode=True).decode("utf-8")
    html_body = html_part.get_payload(decode=True).decode("utf-8")
    assert "Line 1<br>&lt;b&gt;Line 2&lt;/b&gt;" in html_body


def test_sujet_fourni_conserve():
    msg = email_service.build_contact_message("Ada", "ada@example.com", "Hi", subject="Partnership")
    assert msg["Subject"] == "Partnership"


def test_envoi_non_configure(monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_HOST", "")
    with pytest.raises(EmailNotConfigured):
        email_service.send_contact_email("Ada", "ada@example.com", "Hi")


def test_envoi_smtp(smtp_settings):
    with patch("vitrine.services.email_service.smtplib.SMTP") as mock_smtp:
        email_service.send_contact_email("Ada", "ada@example.com", "Hi")

    server = mock_smtp.return_value.__enter__.return_value
    server.starttls.assert_called_once()
    server.login.assert_called_once_with("mailer@example.com", "secret")
    server.send_message.assert_called_once()
