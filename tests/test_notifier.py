import smtplib
from unittest.mock import MagicMock, patch

import pytest

from config import EMAIL_SUBJECT, MailServerConfig
from errors import ConfigError, TransportError
from notifier import (
    CODE_MAX, CODE_MIN, Notifier, VerificationSession,
    compose_message, generate_code, verify_code,
)

SERVER = MailServerConfig(host="smtp.example.com", port="587", username="bot@example.com", password="secret")


@pytest.fixture
def smtp():
    with patch("notifier.smtplib.SMTP") as smtp_cls:
        server = smtp_cls.return_value.__enter__.return_value
        server.has_extn.return_value = True
        yield smtp_cls, server


def test_generate_code_in_range():
    for _ in range(1000):
        assert CODE_MIN <= generate_code() <= CODE_MAX


def test_compose_message_contains_code():
    msg = compose_message("bot@example.com", "user@example.com", "482913")

    assert msg["To"] == "user@example.com"
    assert msg["Subject"] == EMAIL_SUBJECT
    assert "Code: 482913" in msg.get_payload()


def test_send_verification_delivers_code(smtp):
    smtp_cls, server = smtp
    notifier = Notifier(lambda: SERVER)

    with patch("notifier.generate_code", return_value=482913):
        session = notifier.send_verification("user@example.com")

    assert session == VerificationSession(code="482913", email="user@example.com")
    smtp_cls.assert_called_once_with("smtp.example.com", 587)
    server.starttls.assert_called_once()
    server.login.assert_called_once_with("bot@example.com", "secret")

    sender, recipients, raw = server.sendmail.call_args[0]
    assert sender == "bot@example.com"
    assert recipients == ["user@example.com"]
    assert "To: user@example.com" in raw
    assert "482913" in raw


def test_send_verification_skips_starttls_when_not_offered(smtp):
    _, server = smtp
    server.has_extn.return_value = False

    Notifier(lambda: SERVER).send_verification("user@example.com")

    server.starttls.assert_not_called()
    server.login.assert_called_once()


def test_transport_failure_raises_transport_error(smtp):
    _, server = smtp
    server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")

    with pytest.raises(TransportError):
        Notifier(lambda: SERVER).send_verification("user@example.com")


def test_connection_failure_raises_transport_error():
    with patch("notifier.smtplib.SMTP", side_effect=ConnectionRefusedError("refused")):
        with pytest.raises(TransportError):
            Notifier(lambda: SERVER).send_verification("user@example.com")


def test_config_failure_propagates_before_connecting(smtp):
    smtp_cls, _ = smtp
    loader = MagicMock(side_effect=ConfigError("no config"))

    with pytest.raises(ConfigError):
        Notifier(loader).send_verification("user@example.com")

    smtp_cls.assert_not_called()


def test_verify_code_exact_match_and_reusable():
    session = VerificationSession(code="482913", email="user@example.com")

    assert verify_code(session, "482913")
    assert verify_code(session, "482913")
    assert not verify_code(session, "000000")
    assert not verify_code(session, " 482913")


def test_verify_code_without_session():
    assert not verify_code(None, "482913")
