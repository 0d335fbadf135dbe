"""
User interface functions
"""

import tkinter as tk
from tkinter import simpledialog


def ask_credentials() -> tuple[str | None, str | None]:
    """
    Open dialogs to let the user enter the session id and developer key.

    Returns:
        Tuple of (session id, developer key), None for cancelled dialogs
    """
    root = tk.Tk()
    root.withdraw()

    session_id = simpledialog.askstring(
        "Bill.com Login", "Session ID:", parent=root
    )
    dev_key = simpledialog.askstring(
        "Bill.com Login", "Developer Key:", parent=root, show="*"
    )

    root.destroy()
    return session_id, dev_key
