"""
Utility functions and classes for UI rendering.
"""
import math
import tkinter as tk
from bacvar.config.constants import *

TOOLTIP_OFFSET = 6  # Gap between a widget's bottom edge and its tooltip


def tooltip_position(root_x, root_y, widget_height, offset=TOOLTIP_OFFSET):
    """Screen position of a tooltip anchored under a widget's left edge."""
    return int(root_x), int(root_y + widget_height + offset)


class ToolTip:
    """
    Hover hints for a group of widgets sharing one pop-up window.

    Each bound widget keeps its own text; the pop-up is placed under
    whichever widget the pointer entered.
    """
    def __init__(self, host: tk.Widget, delay_ms: int = 400):
        self.host = host
        self.delay_ms = delay_ms
        self.texts = {}
        self.popup = None
        self.label = None
        self.pending = None

    def bind(self, target: tk.Widget, text: str):
        self.texts[target] = text
        target.bind("<Enter>", lambda e: self._arm(target), add="+")
        target.bind("<Leave>", lambda e: self.hide(), add="+")
        target.bind("<ButtonPress>", lambda e: self.hide(), add="+")

    def _arm(self, target):
        self._disarm()
        self.pending = self.host.after(self.delay_ms, lambda: self.show(target))

    def _disarm(self):
        if self.pending is not None:
            pending, self.pending = self.pending, None
            try:
                self.host.after_cancel(pending)
            except tk.TclError:
                pass  # Host already destroyed

    def show(self, target: tk.Widget):
        self.pending = None
        if not target.winfo_exists():
            return
        x, y = tooltip_position(target.winfo_rootx(), target.winfo_rooty(), target.winfo_height())
        if self.popup is None:
            self.popup = tk.Toplevel(self.host)
            self.popup.wm_overrideredirect(True)
            self.label = tk.Label(self.popup, justify=tk.LEFT, background="#ffffe0",
                                  relief=tk.SOLID, borderwidth=1, font=FONT_SMALL, wraplength=260)
            self.label.pack(ipadx=2, ipady=1)
        self.label.config(text=self.texts.get(target, ""))
        self.popup.wm_geometry(f"+{x}+{y}")
        self.popup.deiconify()

    def hide(self):
        self._disarm()
        if self.popup is not None:
            self.popup.withdraw()

def draw_base_cell(canvas, x, y, base, highlighted, tags=()):
    """
    Draws one nucleotide cell of the sequence strip.

    Args:
        x, y: Top-left corner of the cell.
        highlighted: Draws the cell in the 'changed' colors.
    """
    fill = COLOR_CELL_CHANGED if highlighted else COLOR_CELL_NORMAL
    outline = COLOR_CELL_CHANGED_OUTLINE if highlighted else COLOR_CELL_OUTLINE
    text_color = COLOR_CELL_CHANGED_TEXT if highlighted else COLOR_TEXT
    w, h = BASE_CELL_WIDTH, BASE_CELL_HEIGHT

    canvas.create_rectangle(x, y, x + w, y + h, fill=fill, outline=outline, width=1, tags=tags)
    # Thick bottom border
    canvas.create_line(x, y + h - 2, x + w, y + h - 2, fill=outline, width=4, tags=tags)
    canvas.create_text(x + w / 2, y + h / 2, text=base, font=FONT_BASE, fill=text_color, tags=tags)

def sequence_strip_origin(n_bases, canvas_width):
    """Left x of a centered strip of n_bases cells."""
    strip_w = n_bases * BASE_CELL_WIDTH + max(0, n_bases - 1) * BASE_CELL_GAP
    return (canvas_width - strip_w) / 2

def draw_cell_body(canvas, cx, cy, fill, outline, label, label_color, tags=()):
    """Draws an oval bacterial cell with its label above it."""
    rx, ry = CELL_RADIUS_X, CELL_RADIUS_Y
    canvas.create_oval(cx - rx, cy - ry, cx + rx, cy + ry, fill=fill, outline=outline, width=2, tags=tags)
    canvas.create_text(cx, cy - ry - 10, text=label, font=FONT_SMALL_BOLD, fill=label_color, tags=tags)
    # Chromosome
    canvas.create_oval(cx - 32, cy - 32, cx + 32, cy + 32, outline=outline, dash=(2, 2), tags=tags)

def draw_plasmid(canvas, cx, cy, r, fill="", tags=()):
    """Draws a small plasmid ring (F-plasmid marker)."""
    canvas.create_oval(cx - r, cy - r, cx + r, cy + r, outline=COLOR_GOLD, width=2, fill=fill, tags=tags)

def draw_ring_arc(canvas, cx, cy, r, start_deg, extent_deg, color, width, tags=()):
    """Draws an arc of a circle centered on (cx, cy). Angles are in degrees, counter-clockwise."""
    return canvas.create_arc(cx - r, cy - r, cx + r, cy + r, start=start_deg, extent=extent_deg,
                             style=tk.ARC, outline=color, width=width, tags=tags)

def rotation_angle(elapsed_ms, period_ms=ROTATION_PERIOD_MS):
    """Angle in degrees of a continuous rotation after elapsed_ms."""
    return (elapsed_ms % period_ms) / period_ms * 360.0

def polar(cx, cy, r, deg):
    """Canvas point at angle deg (counter-clockwise from east)."""
    rad = math.radians(deg)
    return cx + r * math.cos(rad), cy - r * math.sin(rad)
