"""
Diagram renderer for BacVar.

Handles all canvas drawing operations for the three diagrams:
- Sequence strip with the changed base highlighted
- Donor/recipient cells, pilus bridge and transferring plasmid
- Plasmid ring, cut site, gene insert and host cell overlay

Drawing only reads snapshots/frames from bacvar.core; it never changes state.
Every item carries a tag naming its role so it can be found again.
"""
from bacvar.config.constants import *
from bacvar.core.conjugation import ConjugationFrame, TransferStep
from bacvar.core.mutation import MutationSnapshot
from bacvar.core.recombinant import PhaseFrame, InsertArc, PhaseIcon, restriction_note
from bacvar.utils.utils import (
    draw_base_cell, sequence_strip_origin, draw_cell_body,
    draw_plasmid, draw_ring_arc, polar
)

ICON_TEXT = {
    PhaseIcon.SCISSORS: "✂",  # scissors
    PhaseIcon.MERGE: "⇄",     # merge arrows
    PhaseIcon.SEAL: "⚡",      # flash
    PhaseIcon.HOST: "E. COLI HOST",
}

CUT_GAP_DEG = 10       # Opening of the cut plasmid at the top
INSERT_EXTENT_DEG = 60  # Arc covered by the gene insert


class DiagramRenderer:
    """
    Draws diagram states on Tk canvases.
    Separates rendering logic from the panels that own the state machines.
    """

    # ==========================================
    #           MUTATION DIAGRAM
    # ==========================================

    def draw_mutation(self, canvas, snap: MutationSnapshot, width=MUTATION_CANVAS_WIDTH,
                      height=MUTATION_CANVAS_HEIGHT):
        """Draws the sequence strip. Only the annotated index is highlighted."""
        canvas.delete("all")
        canvas.create_rectangle(0, 0, width, height, fill=COLOR_BG_PANEL, outline=COLOR_BORDER, tags=("background",))

        x = sequence_strip_origin(len(snap.bases), width)
        y = (height - BASE_CELL_HEIGHT) / 2
        for i, base in enumerate(snap.bases):
            changed = snap.is_annotated(i)
            tags = ("cell", f"cell_{i}", "changed") if changed else ("cell", f"cell_{i}")
            draw_base_cell(canvas, x, y, base, changed, tags=tags)
            x += BASE_CELL_WIDTH + BASE_CELL_GAP

    # ==========================================
    #           CONJUGATION DIAGRAM
    # ==========================================

    def draw_conjugation(self, canvas, frame: ConjugationFrame, progress=1.0,
                         width=CONJUGATION_CANVAS_WIDTH, height=CONJUGATION_CANVAS_HEIGHT):
        """
        Draws donor, recipient, pilus and plasmid for one transfer step.

        Args:
            progress: Fraction (0-1) of the step animation; 1.0 draws the settled state.
        """
        canvas.delete("all")
        canvas.create_rectangle(0, 0, width, height, fill=COLOR_BG_WHITE, outline=COLOR_BORDER, tags=("background",))

        cy = height / 2 - 12
        donor_x = width * 0.25
        recipient_x = width * 0.75

        # Donor cell (F+) with its plasmid
        draw_cell_body(canvas, donor_x, cy, COLOR_DONOR_FILL, COLOR_DONOR_OUTLINE,
                       "Donor (F+)", "#15803d", tags=("donor",))
        draw_plasmid(canvas, donor_x, cy, 16, tags=("donor_plasmid",))

        # Recipient cell
        draw_cell_body(canvas, recipient_x, cy, frame.recipient_fill, frame.recipient_outline,
                       f"Recipient ({frame.recipient_label})", COLOR_TEXT_MUTED, tags=("recipient",))
        if frame.plasmid_copy_shown:
            draw_plasmid(canvas, recipient_x, cy, 16, tags=("plasmid_copy",))

        # Pilus bridge between the two membranes
        scale = frame.bridge_scale(progress)
        if scale > 0:
            bridge_x1 = donor_x + CELL_RADIUS_X
            bridge_x2 = bridge_x1 + (recipient_x - CELL_RADIUS_X - bridge_x1) * scale
            canvas.create_line(bridge_x1, cy, bridge_x2, cy,
                               fill=COLOR_PILUS, width=8, tags=("bridge",))

        # Transferring plasmid copy
        if frame.particle_visible:
            px = width * frame.particle_at(progress)
            draw_plasmid(canvas, px, cy, 8, fill=COLOR_BG_WHITE, tags=("particle",))

        self._draw_step_indicator(canvas, frame.step, width, height)

    def _draw_step_indicator(self, canvas, current: TransferStep, width, height):
        """Progress bars under the stage; the current step is wide and labelled."""
        bar_y = height - 26
        slots = len(TransferStep)
        slot_w = 56
        x0 = (width - slots * slot_w) / 2
        for step in TransferStep:
            cx = x0 + step * slot_w + slot_w / 2
            active = step == current
            half = 24 if active else 8
            color = COLOR_GOLD if active else COLOR_PILUS
            canvas.create_line(cx - half, bar_y, cx + half, bar_y, fill=color, width=4,
                               capstyle="round", tags=("indicator",))
            if active:
                canvas.create_text(cx, bar_y + 12, text=step.label.upper(), font=FONT_SMALL_BOLD,
                                   fill=COLOR_TEXT_MUTED, tags=("indicator", "step_label"))

    # ==========================================
    #           RECOMBINANT DNA DIAGRAM
    # ==========================================

    def draw_recombinant(self, canvas, frame: PhaseFrame, angle=0.0, size=RECOMBINANT_CANVAS_SIZE):
        """
        Draws the plasmid for one engineering phase.

        Args:
            angle: Rotation offset in degrees, used while frame.rotating.
        """
        canvas.delete("all")
        canvas.create_rectangle(0, 0, size, size, fill=COLOR_BG_DARK, outline="#44403c", tags=("background",))
        c = size / 2
        r = PLASMID_RADIUS
        offset = angle if frame.rotating else 0.0

        canvas.create_oval(c - r, c - r, c + r, c + r, outline=frame.ring_color, width=6, tags=("plasmid",))

        if frame.cut_ring_shown:
            # Open ring with a gap at the top
            draw_ring_arc(canvas, c, c, r, 90 + CUT_GAP_DEG / 2 - offset, 360 - CUT_GAP_DEG,
                          COLOR_PLASMID, 6, tags=("cut_ring",))

        if frame.insert_shown:
            color = COLOR_INSERT_FADING if frame.insert_arc is InsertArc.FADING_IN else COLOR_INSERT
            draw_ring_arc(canvas, c, c, r, 90 - INSERT_EXTENT_DEG - offset, INSERT_EXTENT_DEG,
                          color, 8, tags=("insert",))
            # Insert end marker shows rotation clearly
            ex, ey = polar(c, c, r, 90 - INSERT_EXTENT_DEG - offset)
            canvas.create_oval(ex - 4, ey - 4, ex + 4, ey + 4, fill=color, outline="", tags=("insert",))

        if frame.icon is not PhaseIcon.NONE:
            self._draw_icon(canvas, frame.icon, c)

        if frame.host_ring_shown:
            canvas.create_oval(8, 8, size - 8, size - 8, outline=COLOR_HOST_RING, width=4,
                               dash=(8, 6), tags=("host_ring",))

        canvas.create_text(c, size - 14, text=frame.description, font=(FONT_MONO, 8),
                           fill="#a8a29e", width=size - 20, tags=("caption",))

    def _draw_icon(self, canvas, icon: PhaseIcon, c):
        if icon is PhaseIcon.HOST:
            canvas.create_text(c, c - 8, text=ICON_TEXT[icon], font=(FONT_MONO, 9),
                               fill="#78716c", tags=("icon",))
            canvas.create_text(c, c + 10, text="⧉", font=("tahoma", 16),
                               fill="#a8a29e", tags=("icon",))
            return
        color = COLOR_GOLD if icon is PhaseIcon.SEAL else "#a8a29e"
        canvas.create_text(c, c, text=ICON_TEXT[icon], font=("tahoma", 24), fill=color, tags=("icon",))
        if icon is PhaseIcon.SCISSORS:
            canvas.create_text(c, c + 26, text=restriction_note(), font=(FONT_MONO, 8),
                               fill="#a8a29e", tags=("icon", "enzyme"))
