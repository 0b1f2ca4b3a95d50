"""
Screen state machine: Home -> Sign Up -> Verify Code -> Wallpapers

Kept free of any toolkit so the GUI only renders `state` and forwards
button presses here.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from errors import NotifyError, ValidationError, WallpaperError
from notifier import Notifier, VerificationSession, verify_code
from validator import check_sign_up
from wallpapers import WallpaperController

logger = logging.getLogger(__name__)


class UIState(Enum):
    HOME = "home"
    SIGN_UP = "sign_up"
    VERIFYING_CODE = "verifying_code"
    WALLPAPER_BROWSER = "wallpaper_browser"


@dataclass(frozen=True)
class Feedback:
    """Result of a user action, shown as a dialog"""
    ok: bool
    title: str
    message: str


class AppFlow:

    def __init__(self, notifier: Notifier, wallpapers: WallpaperController):
        self.notifier = notifier
        self.wallpapers = wallpapers
        self.state = UIState.HOME
        self.session: Optional[VerificationSession] = None
        self.message = ""

    def _go(self, state: UIState):
        logger.debug("Screen %s -> %s", self.state.value, state.value)
        self.state = state
        self.message = ""
        if state is UIState.WALLPAPER_BROWSER:
            self.wallpapers.reset()

    def back_home(self):
        self._go(UIState.HOME)

    def open_sign_up(self):
        self._go(UIState.SIGN_UP)

    def browse_wallpapers(self):
        self._go(UIState.WALLPAPER_BROWSER)

    def submit_sign_up(self, name: str, email: str, password: str, confirm: str) -> bool:
        """
        Validate the form and send the verification email

        Returns:
            True when the code was sent and the flow moved to code entry.
            On False, `message` holds the reason.
        """
        try:
            check_sign_up(email, password, confirm)
        except ValidationError as e:
            self.message = str(e)
            return False

        try:
            session = self.notifier.send_verification(email)
        except NotifyError as e:
            logger.error("Error sending email: %s", e)
            self.message = f"Could not send verification email: {e}"
            return False

        logger.info("Sign-up started for %s%s", email, f" ({name})" if name else "")
        self.session = session
        self._go(UIState.VERIFYING_CODE)
        return True

    def submit_code(self, code: str) -> Feedback:
        if not verify_code(self.session, code):
            return Feedback(False, "Error", "Invalid verification code")

        self._go(UIState.WALLPAPER_BROWSER)
        return Feedback(True, "Verification Successful", "Code verified successfully!")

    def previous(self) -> str:
        return self.wallpapers.previous()

    def next(self) -> str:
        return self.wallpapers.next()

    def current(self) -> str:
        return self.wallpapers.current()

    def set_wallpaper(self) -> Feedback:
        try:
            self.wallpapers.commit(self.wallpapers.current())
        except WallpaperError as e:
            return Feedback(False, "Error", f"Could not set wallpaper: {e}")
        return Feedback(True, "Wallpaper Set", "The wallpaper has been set as the desktop background.")
