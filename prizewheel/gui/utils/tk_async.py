from __future__ import annotations

from collections.abc import Callable
from threading import Thread
from typing import TypeVar

import tkinter as tk


T = TypeVar("T")


def run_in_thread(
    root: tk.Misc,
    work: Callable[[], T],
    on_done: Callable[[T], None],
    *,
    on_error: Callable[[BaseException], None] | None = None,
) -> None:
    """Run work in a daemon thread and call on_done(result) on Tk's thread.

    If *work* raises and *on_error* is given, the exception is delivered to
    on_error on Tk's thread instead; without on_error it propagates in the
    worker thread.
    """

    def worker() -> None:
        try:
            result = work()
        except Exception as exc:
            if on_error is None:
                raise
            root.after(0, lambda err=exc: on_error(err))
            return
        root.after(0, lambda: on_done(result))

    Thread(target=worker, daemon=True).start()
