from __future__ import annotations

import tkinter as tk


def center_window_on_screen(window: tk.Tk | tk.Toplevel) -> None:
    """Center a Tk window on screen, keeping its top-left corner visible.

    An unmapped window reports a 1x1 size, so the requested size from its
    packed children is used until the real one is known.
    """
    window.update_idletasks()
    width = max(window.winfo_width(), window.winfo_reqwidth())
    height = max(window.winfo_height(), window.winfo_reqheight())
    x = max(0, (window.winfo_screenwidth() - width) // 2)
    y = max(0, (window.winfo_screenheight() - height) // 2)
    window.geometry(f"+{x}+{y}")
