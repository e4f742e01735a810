#!/usr/bin/env python3
"""
BacVar - Bacterial Variation Explorer

A Python/Tkinter application explaining bacterial genetic variation
(mutation, gene transfer, recombinant DNA technology) with interactive,
animated diagrams.

Entry point for the application. Initializes the main window and starts
the Tkinter event loop.

Usage:
    python BacVar.py [--debug]
"""
import sys
import logging
import tkinter as tk
from bacvar.ui.main_window import BacVarBrowser

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if "--debug" in sys.argv else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    root = tk.Tk()
    app = BacVarBrowser(root)
    root.mainloop()
