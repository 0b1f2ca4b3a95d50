"""
Verification email - code generation, SMTP delivery and code checking
"""
import logging
import random
import smtplib
from dataclasses import dataclass
from email.mime.text import MIMEText
from typing import Callable, Optional

from config import EMAIL_BODY, EMAIL_SUBJECT, MailServerConfig, load_mail_config
from errors import TransportError

logger = logging.getLogger(__name__)

CODE_MIN = 100000
CODE_MAX = 999999

_rng = random.SystemRandom()


@dataclass(frozen=True)
class VerificationSession:
    """The code sent to an address, kept until the next sign-up replaces it"""
    code: str
    email: str


def generate_code() -> int:
    return _rng.randint(CODE_MIN, CODE_MAX)


def compose_message(sender: str, to_email: str, code: str) -> MIMEText:
    msg = MIMEText(EMAIL_BODY.format(code=code) + "\r\n", "plain")
    msg["To"] = to_email
    msg["From"] = sender
    msg["Subject"] = EMAIL_SUBJECT
    return msg


def verify_code(session: Optional[VerificationSession], candidate: str) -> bool:
    """Exact match against the session's code; the code stays valid after a match"""
    if session is None:
        return False
    return candidate == session.code


class Notifier:
    """
    Sends verification codes through the configured mail relay.

    The config loader is called on every send so edits to the config file
    take effect without a restart.
    """

    def __init__(self, config_loader: Callable[[], MailServerConfig] = load_mail_config):
        self.config_loader = config_loader

    def send_verification(self, email: str) -> VerificationSession:
        """
        Generate a code and email it to the given address

        Returns:
            The session to compare the user's input against

        Raises:
            ConfigError: mail settings could not be loaded
            TransportError: the relay could not deliver the message
        """
        session = VerificationSession(code=str(generate_code()), email=email)
        server_config = self.config_loader()

        msg = compose_message(server_config.username, email, session.code)
        self._send(server_config, email, msg)

        logger.info("Verification email sent to %s", email)
        return session

    def _send(self, server_config: MailServerConfig, to_email: str, msg: MIMEText):
        try:
            with smtplib.SMTP(server_config.host, int(server_config.port)) as server:
                server.ehlo()
                if server.has_extn("starttls"):
                    server.starttls()
                    server.ehlo()
                server.login(server_config.username, server_config.password)
                server.sendmail(server_config.username, [to_email], msg.as_string())
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Could not send email via %s: %s", server_config.address, e)
            raise TransportError(f"Could not send email: {e}") from e
