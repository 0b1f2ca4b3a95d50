"""
Main Application GUI - renders one screen per flow state
"""
import logging
import customtkinter as ctk
from tkinter import messagebox
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from config import WINDOW_TITLE, WINDOW_SIZE, PREVIEW_SIZE, CONFIG_FILE, WALLPAPER_PATHS, load_config
from errors import ConfigError
from flow import AppFlow, Feedback, UIState
from notifier import Notifier
from wallpaper_setter import default_backend
from wallpapers import WallpaperController
from gui.components import FormField, WallpaperPreview

logger = logging.getLogger(__name__)

ctk.set_appearance_mode("dark")
ctk.set_default_color_theme("blue")


class WallpaperChangerApp(ctk.CTk):
    """Main Application Window"""

    def __init__(self, flow: AppFlow):
        super().__init__()

        self.flow = flow

        self.title(WINDOW_TITLE)
        self.geometry(f"{WINDOW_SIZE[0]}x{WINDOW_SIZE[1]}")

        self.content = ctk.CTkFrame(self, corner_radius=0, fg_color="transparent")
        self.content.pack(fill="both", expand=True, padx=20, pady=20)

        self.render()

    def render(self):
        """Rebuild the window content for the current flow state"""
        for widget in self.content.winfo_children():
            widget.destroy()

        builders = {
            UIState.HOME: self._build_home,
            UIState.SIGN_UP: self._build_sign_up,
            UIState.VERIFYING_CODE: self._build_verify_code,
            UIState.WALLPAPER_BROWSER: self._build_wallpapers,
        }
        builders[self.flow.state]()

    def _title(self, text):
        ctk.CTkLabel(self.content, text=text,
                     font=ctk.CTkFont(size=22, weight="bold")).pack(pady=(15, 20))

    def _build_home(self):
        self._title("Welcome to Wallpaper Changer!")

        ctk.CTkButton(self.content, text="Sign Up", height=40, width=220,
                      command=self._on_sign_up).pack(pady=5)

        ctk.CTkButton(self.content, text="Browse Wallpapers", height=32, width=220,
                      fg_color="transparent", border_width=1,
                      command=self._on_browse).pack(pady=5)

    def _build_sign_up(self):
        self._title("Sign Up")

        form = ctk.CTkFrame(self.content, fg_color="transparent", width=360)
        form.pack(pady=5)

        self.name_field = FormField(form, "Name:")
        self.email_field = FormField(form, "Email:")
        self.password_field = FormField(form, "Create a Password:", password=True)
        self.confirm_field = FormField(form, "Confirm Password:", password=True)

        for field in (self.name_field, self.email_field, self.password_field, self.confirm_field):
            field.pack(fill="x", pady=4)

        ctk.CTkButton(form, text="Sign Up", height=36,
                      command=self._submit_sign_up).pack(fill="x", pady=(12, 4))

        ctk.CTkButton(form, text="Back", height=28, fg_color="transparent", border_width=1,
                      command=self._on_home).pack(fill="x", pady=4)

        self.status_label = ctk.CTkLabel(form, text=self.flow.message,
                                         text_color=("#C0392B", "#E74C3C"), wraplength=340)
        self.status_label.pack(pady=8)

    def _build_verify_code(self):
        self._title("Verification Code")

        email = self.flow.session.email if self.flow.session else ""
        ctk.CTkLabel(self.content, text=f"We sent a 6-digit code to {email}",
                     text_color=("gray50", "gray60")).pack(pady=(0, 10))

        self.code_entry = ctk.CTkEntry(self.content, width=200, height=36, justify="center")
        self.code_entry.pack(pady=5)
        self.code_entry.bind("<Return>", lambda event: self._submit_code())

        ctk.CTkButton(self.content, text="Verify", width=200, height=36,
                      command=self._submit_code).pack(pady=10)

    def _build_wallpapers(self):
        self._title("Wallpaper Changer")

        WallpaperPreview(self.content, WallpaperController.resolve(self.flow.current()),
                         size=PREVIEW_SIZE).pack(pady=10)

        buttons = ctk.CTkFrame(self.content, fg_color="transparent")
        buttons.pack(pady=10)

        ctk.CTkButton(buttons, text="Previous", width=120,
                      command=self._on_previous).pack(side="left", padx=10)
        ctk.CTkButton(buttons, text="Next", width=120,
                      command=self._on_next).pack(side="left", padx=10)
        ctk.CTkButton(buttons, text="Set Wallpaper", width=140,
                      fg_color=("#27AE60", "#1E8449"), hover_color=("#2ECC71", "#27AE60"),
                      command=self._on_set_wallpaper).pack(side="left", padx=10)

        self.status_label = ctk.CTkLabel(self.content, text="", font=ctk.CTkFont(size=11),
                                         text_color=("gray50", "gray60"))
        self.status_label.pack(pady=5)

    def _on_sign_up(self):
        self.flow.open_sign_up()
        self.render()

    def _on_browse(self):
        self.flow.browse_wallpapers()
        self.render()

    def _on_home(self):
        self.flow.back_home()
        self.render()

    def _submit_sign_up(self):
        self._update_status("⏳ Sending verification code...")
        self.update()

        self.flow.submit_sign_up(
            self.name_field.get().strip(),
            self.email_field.get().strip(),
            self.password_field.get(),
            self.confirm_field.get(),
        )
        self.render()

    def _submit_code(self):
        feedback = self.flow.submit_code(self.code_entry.get())
        self._show_feedback(feedback)
        self.render()

    def _on_previous(self):
        self.flow.previous()
        self.render()

    def _on_next(self):
        self.flow.next()
        self.render()

    def _on_set_wallpaper(self):
        self._update_status("⏳ Applying...")
        self.update()

        self._show_feedback(self.flow.set_wallpaper())
        self._update_status("")

    def _show_feedback(self, feedback: Feedback):
        if feedback.ok:
            messagebox.showinfo(feedback.title, feedback.message, parent=self)
        else:
            messagebox.showerror(feedback.title, feedback.message, parent=self)

    def _update_status(self, msg):
        self.status_label.configure(text=msg)


def build_flow(config_path=None) -> AppFlow:
    """Wire the flow to the configured catalog and mail relay"""
    try:
        catalog = load_config(config_path).wallpapers
    except ConfigError as e:
        logger.warning("%s; using bundled wallpapers", e)
        catalog = WALLPAPER_PATHS

    notifier = Notifier(lambda: load_config(config_path).smtp_server)
    return AppFlow(notifier, WallpaperController(catalog, default_backend()))


def run_app():
    logger.info("Starting %s (config: %s)", WINDOW_TITLE, CONFIG_FILE)
    app = WallpaperChangerApp(build_flow())
    app.mainloop()


if __name__ == "__main__":
    run_app()
