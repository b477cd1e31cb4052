"""Display surfaces that take ownership of a finished pixel buffer.

- ImageFileSurface writes the buffer to disk through Pillow.
- WindowSurface shows it in a scrollable Tkinter window.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol, Union

from PIL import Image

from .utils.loader import save_image
from .utils.pack import PixelBuffer

logger = logging.getLogger(__name__)


class DisplaySurface(Protocol):
    def present(self, buffer: PixelBuffer) -> None:
        """Take ownership of ``buffer`` and show it."""


def to_pil(buffer: PixelBuffer) -> Image.Image:
    return Image.fromarray(buffer.to_array())


class ImageFileSurface:
    """Write presented buffers to ``path``; the format follows the extension."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self.buffer: Optional[PixelBuffer] = None

    def present(self, buffer: PixelBuffer) -> None:
        self.buffer = buffer
        save_image(buffer.to_array(), self.path)
        logger.info("wrote %dx%d image to %s", buffer.width, buffer.height, self.path)


class WindowSurface:
    """Scrollable Tkinter window holding one image on a black background."""

    def __init__(self, title: str = "Image Display", max_side: int = 900) -> None:
        self.title = title
        self.max_side = max_side
        self.buffer: Optional[PixelBuffer] = None

    def present(self, buffer: PixelBuffer) -> None:
        # Imported here so headless runs never need a display server
        import tkinter as tk
        from PIL import ImageTk

        self.buffer = buffer
        root = tk.Tk()
        root.title(self.title)

        view_w = min(buffer.width, self.max_side)
        view_h = min(buffer.height, self.max_side)
        canvas = tk.Canvas(root, bg="black", width=view_w, height=view_h, highlightthickness=0)
        xbar = tk.Scrollbar(root, orient="horizontal", command=canvas.xview)
        ybar = tk.Scrollbar(root, orient="vertical", command=canvas.yview)
        canvas.configure(
            xscrollcommand=xbar.set,
            yscrollcommand=ybar.set,
            scrollregion=(0, 0, buffer.width, buffer.height),
        )
        canvas.grid(row=0, column=0, sticky="nsew")
        ybar.grid(row=0, column=1, sticky="ns")
        xbar.grid(row=1, column=0, sticky="ew")
        root.columnconfigure(0, weight=1)
        root.rowconfigure(0, weight=1)

        imgtk = ImageTk.PhotoImage(to_pil(buffer), master=root)
        canvas.create_image(0, 0, anchor="nw", image=imgtk)
        canvas.image = imgtk  # keep reference to prevent GC
        root.mainloop()
