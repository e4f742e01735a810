# main_window.py
"""
Main application window for BacVar.

This module contains the BacVarBrowser class: a scrollable single page with
a navigation bar, prose sections and the three interactive diagrams.
"""
import logging
import tkinter as tk
from tkinter import ttk
from typing import Dict

from bacvar.config.constants import *
from bacvar.config import content
from bacvar.ui.renderer import DiagramRenderer

# Mixins
from bacvar.ui.mixins.event_mixin import EventMixin
from bacvar.ui.mixins.section_mixin import SectionMixin

logger = logging.getLogger(__name__)


class BacVarBrowser(SectionMixin, EventMixin, ttk.Frame):
    """
    Main application class for BacVar.
    Manages the page layout and mounts the diagram panels inside their sections.
    """

    # ==========================================
    #           SECTION 1: INITIALIZATION
    # ==========================================

    def __init__(self, master: tk.Tk):
        super().__init__(master)
        master.title(f"BacVar - {content.APP_TITLE}")
        master.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        master.minsize(700, 500)
        master.columnconfigure(0, weight=1)
        master.rowconfigure(0, weight=1)
        master.configure(bg=COLOR_BG_PAGE)

        self.renderer = DiagramRenderer()
        self.section_widgets: Dict[str, tk.Widget] = {}
        self.diagram_panels: Dict[str, tk.Widget] = {}
        self.is_scrolled = False

        # --- Build UI ---
        self.pack(fill=tk.BOTH, expand=True)
        self._create_widgets()
        self._build_page()
        logger.info(f"Page built with {len(self.diagram_panels)} diagrams")

        # --- Keyboard Shortcuts ---
        master.bind('<Home>', lambda e: self.scroll_to_top())
        for i, (_, section_id) in enumerate(content.NAV_ITEMS, start=1):
            master.bind(f'<Control-Key-{i}>', lambda e, s=section_id: self.scroll_to_section(s))

    # ==========================================
    #           SECTION 2: WIDGET CREATION
    # ==========================================

    def _create_widgets(self):
        """Initializes the nav bar and the scrolling page area."""
        self._create_nav_bar()
        self._create_page_area()

    def _create_nav_bar(self):
        self.nav_frame = tk.Frame(self, bg=COLOR_BG_PAGE, height=NAV_HEIGHT, padx=PAGE_PADDING, pady=6,
                                  highlightthickness=0, highlightbackground=COLOR_BORDER)
        self.nav_frame.pack(fill=tk.X)

        logo = tk.Label(self.nav_frame, text=" G ", font=FONT_SUBHEADING, bg=COLOR_GOLD, fg="white", cursor="hand2")
        logo.pack(side=tk.LEFT)
        logo.bind("<Button-1>", lambda e: self.scroll_to_top())
        tk.Label(self.nav_frame, text="GENETICS RESEARCH", font=FONT_SUBHEADING, bg=COLOR_BG_PAGE,
                 fg=COLOR_TEXT).pack(side=tk.LEFT, padx=8)

        tk.Label(self.nav_frame, text=content.APP_VERSION, font=FONT_SMALL, bg=COLOR_TEXT,
                 fg="white", padx=10).pack(side=tk.RIGHT, padx=(12, 0))
        for label, section_id in reversed(content.NAV_ITEMS):
            tk.Button(self.nav_frame, text=label.upper(), font=FONT_SMALL_BOLD, relief="flat", bd=0,
                      bg=COLOR_BG_PAGE, fg=COLOR_TEXT_MUTED, activeforeground=COLOR_GOLD,
                      command=lambda s=section_id: self.scroll_to_section(s)).pack(side=tk.RIGHT, padx=8)

    def _create_page_area(self):
        """Creates the vertical scrolling canvas holding all sections."""
        area = ttk.Frame(self)
        area.pack(fill=tk.BOTH, expand=True)
        area.grid_rowconfigure(0, weight=1)
        area.grid_columnconfigure(0, weight=1)

        self.page_canvas = tk.Canvas(area, bg=COLOR_BG_PAGE, highlightthickness=0, borderwidth=0)
        self.page_canvas.grid(row=0, column=0, sticky="nsew")
        self.v_scroll = ttk.Scrollbar(area, orient=tk.VERTICAL, command=self.on_vscroll)
        self.v_scroll.grid(row=0, column=1, sticky="ns")
        self.page_canvas.configure(yscrollcommand=self.v_scroll.set)

        self.page_frame = tk.Frame(self.page_canvas, bg=COLOR_BG_PAGE)
        self.page_window = self.page_canvas.create_window(0, 0, window=self.page_frame, anchor="nw")

        # Bindings
        self.page_frame.bind("<Configure>", self._on_inner_configure)
        self.page_canvas.bind("<Configure>", self._on_canvas_resize)
        self.page_canvas.bind_all("<MouseWheel>", self.on_mousewheel)
        self.page_canvas.bind_all("<Button-4>", self.on_mousewheel)
        self.page_canvas.bind_all("<Button-5>", self.on_mousewheel)
