"""
Event mixin for BacVarBrowser.

Handles UI events including:
- Mouse wheel scrolling of the page
- Canvas resize events
- Navigation jumps to a section
"""
import sys
import logging
from bacvar.config.constants import *

logger = logging.getLogger(__name__)

SCROLLED_THRESHOLD_PX = 50  # Nav bar gets a border below this scroll depth


class EventMixin:
    """
    Handles scrolling, resizing and navigation events.
    """

    def on_vscroll(self, *args):
        self.page_canvas.yview(*args)
        self._update_nav_style()

    def on_mousewheel(self, event):
        if sys.platform == "darwin":
            delta = -event.delta
        elif event.num == 4:
            delta = -1
        elif event.num == 5:
            delta = 1
        else:
            delta = -int(event.delta / 120)
        self.page_canvas.yview_scroll(delta, "units")
        self._update_nav_style()
        return "break"

    def _on_inner_configure(self, event):
        """Keeps the scroll region in sync with the page content."""
        self.page_canvas.configure(scrollregion=self.page_canvas.bbox("all"))

    def _on_canvas_resize(self, event):
        """Stretches the page frame to the visible width."""
        self.page_canvas.itemconfig(self.page_window, width=event.width)

    def scroll_to_section(self, section_id: str):
        """Scrolls so the section's top sits just under the nav bar."""
        widget = self.section_widgets.get(section_id)
        if widget is None:
            logger.warning(f"Unknown section: {section_id}")
            return
        self.page_frame.update_idletasks()
        total_h = self.page_frame.winfo_height()
        if total_h <= 0:
            return
        self.page_canvas.yview_moveto(widget.winfo_y() / total_h)
        self._update_nav_style()

    def scroll_to_top(self):
        self.page_canvas.yview_moveto(0)
        self._update_nav_style()

    def _update_nav_style(self):
        top_px = self.page_canvas.canvasy(0)
        scrolled = top_px > SCROLLED_THRESHOLD_PX
        if scrolled != self.is_scrolled:
            self.is_scrolled = scrolled
            self.nav_frame.config(highlightthickness=1 if scrolled else 0)
