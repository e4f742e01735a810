"""
Diagram panels for BacVar.

Each panel is a self-contained frame that owns one state machine from
bacvar.core, wires its buttons to the machine's operations and redraws
its canvas after every state change. Panels share nothing.
"""
import logging
import tkinter as tk
from tkinter import ttk

from bacvar.config.constants import *
from bacvar.core.conjugation import ConjugationStepper
from bacvar.core.mutation import SequenceMutationView, MutationMode
from bacvar.core.recombinant import RecombinantPhaseWalker, EngineeringPhase
from bacvar.ui.renderer import DiagramRenderer
from bacvar.utils.utils import ToolTip, rotation_angle

logger = logging.getLogger(__name__)


class MutationPanel(tk.Frame):
    """Sequence strip with Substitution / Insertion / Deletion / Reset buttons."""

    def __init__(self, master, renderer: DiagramRenderer = None):
        super().__init__(master, bg=COLOR_BG_WHITE, padx=24, pady=24,
                         highlightthickness=1, highlightbackground=COLOR_BORDER)
        self.renderer = renderer or DiagramRenderer()
        self.view = SequenceMutationView()
        self.mode_buttons = {}
        self.tooltip = ToolTip(self)

        tk.Label(self, text="Genotypic Mechanisms: Mutation", font=FONT_HEADING,
                 bg=COLOR_BG_WHITE, fg=COLOR_TEXT).pack(pady=(0, 6))
        tk.Label(self, text="Explore how sequence alterations affect the genome. "
                            "These changes are heritable and irreversible.",
                 font=FONT_BODY, bg=COLOR_BG_WHITE, fg=COLOR_TEXT_MUTED,
                 wraplength=MUTATION_CANVAS_WIDTH).pack(pady=(0, 12))

        self.canvas = tk.Canvas(self, width=MUTATION_CANVAS_WIDTH, height=MUTATION_CANVAS_HEIGHT,
                                bg=COLOR_BG_PANEL, highlightthickness=0)
        self.canvas.pack()

        button_frame = tk.Frame(self, bg=COLOR_BG_WHITE)
        button_frame.pack(pady=12)
        hints = {
            MutationMode.SUBSTITUTION: f"Replace base {SUBSTITUTION_INDEX + 1} with {SUBSTITUTION_BASE}",
            MutationMode.INSERTION: f"Insert {INSERTION_BASE} before base {INSERTION_INDEX + 1}",
            MutationMode.DELETION: f"Remove base {DELETION_INDEX + 1}",
        }
        for mode in (MutationMode.SUBSTITUTION, MutationMode.INSERTION, MutationMode.DELETION):
            btn = tk.Button(button_frame, text=mode.value.upper(), font=FONT_SMALL_BOLD, width=13,
                            relief="solid", bd=1, command=lambda m=mode: self.view.apply_mutation(m))
            btn.pack(side=tk.LEFT, padx=3)
            self.tooltip.bind(btn, hints[mode])
            self.mode_buttons[mode] = btn
        tk.Button(button_frame, text="RESET", font=FONT_SMALL_BOLD, width=10, relief="solid", bd=1,
                  fg=COLOR_TEXT_MUTED, command=self.view.reset).pack(side=tk.LEFT, padx=3)

        self.caption_label = tk.Label(self, text="", font=FONT_CAPTION, bg=COLOR_BG_WHITE, fg=COLOR_TEXT_MUTED)
        self.caption_label.pack()
        self.detail_label = tk.Label(self, text="", font=FONT_SMALL, bg=COLOR_BG_WHITE, fg=COLOR_TEXT_MUTED)
        self.detail_label.pack()

        self.view.subscribe(self.redraw)
        self.redraw(self.view)

    def redraw(self, view=None):
        snap = self.view.snapshot()
        self.renderer.draw_mutation(self.canvas, snap)
        self.caption_label.config(text=snap.caption)

        details = []
        if snap.substitution_class:
            details.append(f"{snap.substitution_class.capitalize()} at position {snap.annotated_index + 1}")
        if snap.frameshift:
            details.append("Reading frame shifted downstream")
        self.detail_label.config(text=" · ".join(details))

        for mode, btn in self.mode_buttons.items():
            if mode is snap.mode:
                btn.config(bg=COLOR_TEXT, fg=COLOR_TEXT_LIGHT)
            else:
                btn.config(bg=COLOR_BG_WHITE, fg=COLOR_TEXT)


class ConjugationPanel(tk.Frame):
    """
    Self-running conjugation animation.
    The stepper is started on creation and stopped when the panel is destroyed.
    """

    def __init__(self, master, renderer: DiagramRenderer = None, interval_ms=TRANSFER_STEP_INTERVAL_MS):
        super().__init__(master, bg=COLOR_BG_PANEL, padx=24, pady=24,
                         highlightthickness=1, highlightbackground=COLOR_BORDER)
        self.renderer = renderer or DiagramRenderer()

        tk.Label(self, text="Conjugation: Gene Transfer", font=FONT_HEADING,
                 bg=COLOR_BG_PANEL, fg=COLOR_TEXT).pack(pady=(0, 6))
        tk.Label(self, text="Transfer of genetic material (F-plasmid) via direct cell contact (Sex pilus).",
                 font=FONT_BODY, bg=COLOR_BG_PANEL, fg=COLOR_TEXT_MUTED,
                 wraplength=CONJUGATION_CANVAS_WIDTH).pack(pady=(0, 12))

        self.canvas = tk.Canvas(self, width=CONJUGATION_CANVAS_WIDTH, height=CONJUGATION_CANVAS_HEIGHT,
                                bg=COLOR_BG_WHITE, highlightthickness=0)
        self.canvas.pack()

        # The frame itself is the timer host
        self.stepper = ConjugationStepper(self, interval_ms=interval_ms)
        self._anim_timer = None
        self._anim_elapsed_ms = 0
        self.stepper.subscribe(self.redraw)
        self.redraw(self.stepper)

        self.bind("<Destroy>", self._on_destroy, add="+")
        self.stepper.start()

    def redraw(self, stepper=None):
        """Draws the new step and restarts its particle/bridge motion."""
        self._stop_animation()
        frame = self.stepper.frame
        self.renderer.draw_conjugation(self.canvas, frame, progress=0.0 if frame.animated else 1.0)
        if frame.animated:
            self._anim_timer = self.after(TRANSFER_FRAME_MS, self._animate)

    def _stop_animation(self):
        if self._anim_timer is not None:
            self.after_cancel(self._anim_timer)
            self._anim_timer = None
        self._anim_elapsed_ms = 0

    def _animate(self):
        self._anim_timer = None
        self._anim_elapsed_ms += TRANSFER_FRAME_MS
        progress = min(1.0, self._anim_elapsed_ms / TRANSFER_ANIMATION_MS)
        self.renderer.draw_conjugation(self.canvas, self.stepper.frame, progress=progress)
        if progress < 1.0:
            self._anim_timer = self.after(TRANSFER_FRAME_MS, self._animate)

    def _on_destroy(self, event):
        if event.widget is not self:
            return
        try:
            self.stepper.stop()
            self._stop_animation()
        except tk.TclError as e:
            logger.warning(f"Could not cancel conjugation timers: {e}")
        self.stepper.clear_listeners()


class RecombinantPanel(tk.Frame):
    """Phase list on the left, plasmid diagram on the right."""

    def __init__(self, master, renderer: DiagramRenderer = None):
        super().__init__(master, bg=COLOR_BG_DARK, padx=24, pady=24)
        self.renderer = renderer or DiagramRenderer()
        self.walker = RecombinantPhaseWalker()
        self.phase_buttons = []
        self._rotation_timer = None
        self._elapsed_ms = 0

        left = tk.Frame(self, bg=COLOR_BG_DARK)
        left.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 24))
        tk.Label(left, text="Recombinant DNA Technology", font=FONT_HEADING,
                 bg=COLOR_BG_DARK, fg=COLOR_GOLD).pack(anchor="w")
        tk.Label(left, text="Genetic Engineering allows the isolation and joining of genes from "
                            "different species (e.g., Bacteria + Human Insulin Gene).",
                 font=FONT_BODY, bg=COLOR_BG_DARK, fg="#a8a29e", wraplength=300,
                 justify=tk.LEFT).pack(anchor="w", pady=(4, 16))

        for phase in EngineeringPhase:
            btn = tk.Button(left, text=f"0{phase + 1}.  {phase.title}", anchor="w", font=FONT_BODY,
                            relief="flat", bd=0, padx=10, pady=6, bg=COLOR_BG_DARK,
                            activebackground="#292524", activeforeground=COLOR_TEXT_LIGHT,
                            command=lambda i=int(phase): self.walker.select_phase(i))
            btn.pack(fill=tk.X, pady=2)
            self.phase_buttons.append(btn)

        self.canvas = tk.Canvas(self, width=RECOMBINANT_CANVAS_SIZE, height=RECOMBINANT_CANVAS_SIZE,
                                bg=COLOR_BG_DARK, highlightthickness=0)
        self.canvas.pack(side=tk.RIGHT)

        self.walker.subscribe(self.redraw)
        self.bind("<Destroy>", self._on_destroy, add="+")
        self.redraw(self.walker)

    def redraw(self, walker=None):
        frame = self.walker.frame
        self.renderer.draw_recombinant(self.canvas, frame, angle=rotation_angle(self._elapsed_ms))

        for phase, btn in zip(EngineeringPhase, self.phase_buttons):
            if phase == frame.phase:
                btn.config(bg="#292524", fg=COLOR_TEXT_LIGHT, text=f"0{phase + 1}.  {phase.title}   →")
            else:
                btn.config(bg=COLOR_BG_DARK, fg=COLOR_TEXT_MUTED, text=f"0{phase + 1}.  {phase.title}")

        if frame.rotating:
            self._start_rotation()
        else:
            self._stop_rotation()

    # --- Rotation loop (Transformation phase only) ---
    def _start_rotation(self):
        if self._rotation_timer is None:
            self._rotation_timer = self.after(ROTATION_FRAME_MS, self._rotate)

    def _stop_rotation(self):
        if self._rotation_timer is not None:
            self.after_cancel(self._rotation_timer)
            self._rotation_timer = None
        self._elapsed_ms = 0

    def _rotate(self):
        self._rotation_timer = None
        self._elapsed_ms += ROTATION_FRAME_MS
        self.renderer.draw_recombinant(self.canvas, self.walker.frame,
                                       angle=rotation_angle(self._elapsed_ms))
        self._start_rotation()

    def _on_destroy(self, event):
        if event.widget is not self:
            return
        try:
            self._stop_rotation()
        except tk.TclError as e:
            logger.warning(f"Could not cancel rotation timer: {e}")
        self.walker.clear_listeners()
