import tkinter as tk
import logging
from tracker.core.interfaces import Notifier

logger = logging.getLogger(__name__)

ICON_COLORS = {
    "success": ("#dff0d8", "#9EC600"),
    "info": ("#d9edf7", "#31708f"),
}

class TkToastNotifier(Notifier):
    """Top-right toasts that close themselves. Must be used from the Tk main thread."""

    def __init__(self, root: tk.Misc, hide_after: int = 7000, stack: int = 5, width: int = 320):
        self.root = root
        self.hide_after = hide_after
        self.stack = stack
        self.width = width
        self.toasts = []

    def success(self, text: str) -> None:
        self.show(text, "success")

    def info(self, text: str) -> None:
        self.show(text, "info")

    def show(self, text: str, icon: str = "info"):
        logger.info(text)
        # Oldest toast goes away when the stack is full
        while len(self.toasts) >= self.stack:
            self._close(self.toasts[0])

        bg, loader_bg = ICON_COLORS.get(icon, ICON_COLORS["info"])
        toast = tk.Toplevel(self.root, bg=bg)
        toast.overrideredirect(True)
        toast.attributes("-topmost", True)

        tk.Frame(toast, height=4, bg=loader_bg).pack(fill=tk.X, side=tk.TOP)
        tk.Label(toast, text=text, bg=bg, wraplength=self.width - 40, justify="center").pack(
            side=tk.LEFT, fill=tk.BOTH, expand=True, padx=10, pady=8
        )
        tk.Button(toast, text="×", relief=tk.FLAT, bg=bg, command=lambda: self._close(toast)).pack(side=tk.RIGHT, padx=4)

        self.toasts.append(toast)
        self._place()
        toast.after(self.hide_after, lambda: self._close(toast))

    def _place(self):
        self.root.update_idletasks()
        x = self.root.winfo_rootx() + self.root.winfo_width() - self.width - 10
        y = self.root.winfo_rooty() + 10
        for toast in self.toasts:
            toast.update_idletasks()
            toast.geometry(f"{self.width}x{toast.winfo_reqheight()}+{x}+{y}")
            y += toast.winfo_reqheight() + 5

    def _close(self, toast):
        if toast not in self.toasts:
            return
        self.toasts.remove(toast)
        toast.destroy()
        self._place()
