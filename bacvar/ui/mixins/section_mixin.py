"""
Section mixin for BacVarBrowser.

Builds the static page content:
- Hero header
- Prose sections from bacvar.config.content, with their diagram panels
- Pioneers cards and footer
"""
import tkinter as tk
from bacvar.config.constants import *
from bacvar.config import content
from bacvar.ui.panels import MutationPanel, ConjugationPanel, RecombinantPanel

DIAGRAM_PANELS = {
    "mutation": MutationPanel,
    "conjugation": ConjugationPanel,
    "recombinant": RecombinantPanel,
}


class SectionMixin:
    """
    Lays out page sections inside self.page_frame.
    """

    def _build_page(self):
        self._build_hero()
        for i, section in enumerate(content.SECTIONS):
            self._build_section(section, dark=(i % 2 == 1))
        self._build_pioneers()
        self._build_footer()

    def _build_hero(self):
        hero = tk.Frame(self.page_frame, bg=COLOR_BG_PAGE, pady=80)
        hero.pack(fill=tk.X)
        tk.Label(hero, text="MICROBIOLOGY & GENETICS", font=FONT_SMALL_BOLD, fg=COLOR_GOLD,
                 bg=COLOR_BG_PAGE).pack(pady=(0, 12))
        tk.Label(hero, text=content.APP_TITLE, font=FONT_TITLE, fg=COLOR_TEXT,
                 bg=COLOR_BG_PAGE).pack()
        tk.Label(hero, text=content.APP_SUBTITLE, font=FONT_BODY, fg=COLOR_TEXT_MUTED,
                 bg=COLOR_BG_PAGE, wraplength=SECTION_WRAP).pack(pady=(12, 24))
        tk.Button(hero, text="START LEARNING ↓", font=FONT_SMALL_BOLD, relief="flat",
                  bg=COLOR_BG_PAGE, fg=COLOR_TEXT_MUTED,
                  command=lambda: self.scroll_to_section(content.NAV_ITEMS[0][1])).pack()

    def _build_section(self, section, dark=False):
        bg = COLOR_BG_DARK if dark else COLOR_BG_WHITE
        fg = COLOR_TEXT_LIGHT if dark else COLOR_TEXT
        muted = "#a8a29e" if dark else COLOR_TEXT_MUTED

        frame = tk.Frame(self.page_frame, bg=bg, padx=PAGE_PADDING, pady=48)
        frame.pack(fill=tk.X)
        self.section_widgets[section['id']] = frame

        tk.Label(frame, text=section['kicker'].upper(), font=FONT_SMALL_BOLD, fg=COLOR_GOLD,
                 bg=bg).pack(anchor="w")
        tk.Label(frame, text=section['title'], font=FONT_HEADING, fg=fg, bg=bg).pack(anchor="w", pady=(4, 12))
        for para in section['body']:
            tk.Label(frame, text=para, font=FONT_BODY, fg=muted, bg=bg, wraplength=SECTION_WRAP,
                     justify=tk.LEFT).pack(anchor="w", pady=(0, 8))

        for heading, text in section.get('items', []):
            tk.Label(frame, text=heading, font=FONT_SUBHEADING, fg=fg, bg=bg).pack(anchor="w", pady=(8, 0))
            tk.Label(frame, text=text, font=FONT_BODY, fg=muted, bg=bg, wraplength=SECTION_WRAP,
                     justify=tk.LEFT).pack(anchor="w")

        diagram = section.get('diagram')
        if diagram:
            panel = DIAGRAM_PANELS[diagram](frame, renderer=self.renderer)
            panel.pack(pady=(24, 0))
            self.diagram_panels[diagram] = panel

    def _build_pioneers(self):
        frame = tk.Frame(self.page_frame, bg=COLOR_BG_PANEL, padx=PAGE_PADDING, pady=48)
        frame.pack(fill=tk.X)
        self.section_widgets["pioneers"] = frame

        tk.Label(frame, text="HISTORY", font=FONT_SMALL_BOLD, fg=COLOR_TEXT_MUTED, bg=COLOR_BG_PANEL).pack()
        tk.Label(frame, text="Pioneers of Bacterial Genetics", font=FONT_HEADING, fg=COLOR_TEXT,
                 bg=COLOR_BG_PANEL).pack(pady=(4, 4))
        tk.Label(frame, text="The foundational discoveries that enabled modern biotechnology.",
                 font=FONT_BODY, fg=COLOR_TEXT_MUTED, bg=COLOR_BG_PANEL).pack(pady=(0, 24))

        cards = tk.Frame(frame, bg=COLOR_BG_PANEL)
        cards.pack()
        for col, (name, role) in enumerate(content.PIONEERS):
            card = tk.Frame(cards, bg=COLOR_BG_WHITE, padx=20, pady=20,
                            highlightthickness=1, highlightbackground=COLOR_BORDER)
            card.grid(row=0, column=col, padx=8, sticky="ns")
            tk.Label(card, text=name, font=FONT_SUBHEADING, fg=COLOR_TEXT, bg=COLOR_BG_WHITE,
                     wraplength=160).pack()
            tk.Frame(card, bg=COLOR_GOLD, height=2, width=48).pack(pady=8)
            tk.Label(card, text=role.upper(), font=FONT_SMALL_BOLD, fg=COLOR_TEXT_MUTED,
                     bg=COLOR_BG_WHITE, wraplength=160).pack()

    def _build_footer(self):
        footer = tk.Frame(self.page_frame, bg=COLOR_BG_DARK, padx=PAGE_PADDING, pady=32)
        footer.pack(fill=tk.X)
        tk.Label(footer, text=content.FOOTER_TITLE, font=FONT_HEADING, fg=COLOR_TEXT_LIGHT,
                 bg=COLOR_BG_DARK).pack(anchor="w")
        tk.Label(footer, text=content.FOOTER_TEXT, font=FONT_BODY, fg="#a8a29e",
                 bg=COLOR_BG_DARK).pack(anchor="w")
        tk.Label(footer, text=content.FOOTER_NOTE, font=FONT_SMALL, fg=COLOR_TEXT_MUTED,
                 bg=COLOR_BG_DARK).pack(pady=(24, 0))
