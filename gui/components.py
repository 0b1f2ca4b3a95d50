"""
Reusable GUI Components
"""
import customtkinter as ctk
from pathlib import Path
from typing import Tuple


class FormField(ctk.CTkFrame):
    """Label above an entry box"""

    def __init__(self, parent, label: str, password: bool = False, **kwargs):
        super().__init__(parent, **kwargs)

        self.configure(fg_color="transparent")

        ctk.CTkLabel(self, text=label, anchor="w",
                     font=ctk.CTkFont(size=13)).pack(fill="x")

        self.entry = ctk.CTkEntry(self, height=34, show="*" if password else "")
        self.entry.pack(fill="x", pady=(2, 0))

    def get(self) -> str:
        return self.entry.get()


class WallpaperPreview(ctk.CTkFrame):
    """Wallpaper image scaled to fit a fixed box, aspect ratio kept"""

    def __init__(self, parent, image_path: Path, size: Tuple[int, int], **kwargs):
        super().__init__(parent, **kwargs)

        self.image_path = Path(image_path)
        self.size = size

        self.configure(fg_color=("gray85", "gray20"), corner_radius=10)

        self._create_widgets()

    def _create_widgets(self):
        from PIL import Image

        try:
            img = Image.open(self.image_path)
            img.thumbnail(self.size, Image.Resampling.LANCZOS)

            self.ctk_image = ctk.CTkImage(
                light_image=img,
                dark_image=img,
                size=img.size
            )

            ctk.CTkLabel(self, image=self.ctk_image, text="",
                         width=self.size[0], height=self.size[1]).pack(padx=10, pady=10)

        except OSError as e:
            ctk.CTkLabel(self, text=f"Could not load image\n{e}", text_color="red",
                         width=self.size[0], height=self.size[1]).pack(padx=10, pady=10)

        ctk.CTkLabel(self, text=self.image_path.name,
                     font=ctk.CTkFont(size=11)).pack(pady=(0, 8))
