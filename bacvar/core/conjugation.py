# conjugation.py
"""
Timer-driven state machine behind the conjugation (gene transfer) diagram.

The stepper cycles Contact -> Pilus Formation -> Transfer -> Complete and
wraps back to Contact. It has no user input: a recurring timer advances it
while it is running.

The timer host is anything exposing Tkinter's scheduling API:
    after(ms, func) -> handle
    after_cancel(handle)
so a Tk widget can be passed directly.
"""
import logging
from functools import partial
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Optional, Protocol

from bacvar.config.constants import (
    TRANSFER_STEP_INTERVAL_MS,
    PARTICLE_DONOR_POSITION, PARTICLE_MIDPOINT_POSITION, PARTICLE_RECIPIENT_POSITION,
    COLOR_RECIPIENT_NEUTRAL, COLOR_RECIPIENT_NEUTRAL_OUTLINE,
    COLOR_RECIPIENT_RECEIVED, COLOR_DONOR_OUTLINE
)
from bacvar.core.state import ChangeNotifier

logger = logging.getLogger(__name__)


class TransferStep(IntEnum):
    CONTACT = 0
    PILUS_FORMATION = 1
    TRANSFER = 2
    COMPLETE = 3

    @property
    def label(self) -> str:
        return STEP_LABELS[self]

    def next(self) -> "TransferStep":
        return TransferStep((self + 1) % len(TransferStep))


STEP_LABELS = {
    TransferStep.CONTACT: "Contact",
    TransferStep.PILUS_FORMATION: "Pilus Formation",
    TransferStep.TRANSFER: "Transfer",
    TransferStep.COMPLETE: "Complete",
}


class Scheduler(Protocol):
    def after(self, ms: int, func: Callable) -> Any: ...
    def after_cancel(self, handle: Any) -> None: ...


@dataclass(frozen=True)
class ConjugationFrame:
    """Visual configuration of the conjugation diagram for one step."""
    step: TransferStep
    bridge_visible: bool
    particle_visible: bool
    particle_position: Optional[float]  # Fraction of stage width, None if hidden
    particle_from: Optional[float]      # Where the particle starts moving from
    bridge_from: float                  # Bridge length (0-1) when the step begins
    recipient_label: str
    recipient_fill: str
    recipient_outline: str
    plasmid_copy_shown: bool

    @property
    def received(self) -> bool:
        return self.recipient_label == "F+"

    @property
    def animated(self) -> bool:
        """True when the step moves the particle or grows the bridge."""
        moving = self.particle_visible and self.particle_from != self.particle_position
        growing = self.bridge_visible and self.bridge_from < 1.0
        return moving or growing

    def particle_at(self, progress: float) -> Optional[float]:
        """Particle position after a fraction (0-1) of the step animation."""
        if not self.particle_visible:
            return None
        progress = min(max(progress, 0.0), 1.0)
        return self.particle_from + (self.particle_position - self.particle_from) * progress

    def bridge_scale(self, progress: float) -> float:
        """Bridge length (0-1) after a fraction of the step animation."""
        if not self.bridge_visible:
            return 0.0
        progress = min(max(progress, 0.0), 1.0)
        return self.bridge_from + (1.0 - self.bridge_from) * progress


def conjugation_frame(step: TransferStep) -> ConjugationFrame:
    """Maps a transfer step to its visual configuration."""
    step = TransferStep(step)
    complete = step is TransferStep.COMPLETE

    if step is TransferStep.TRANSFER:
        start, position = PARTICLE_DONOR_POSITION, PARTICLE_MIDPOINT_POSITION
    elif complete:
        start, position = PARTICLE_MIDPOINT_POSITION, PARTICLE_RECIPIENT_POSITION
    else:
        start = position = None

    return ConjugationFrame(
        step=step,
        bridge_visible=step >= TransferStep.PILUS_FORMATION,
        particle_visible=position is not None,
        particle_position=position,
        particle_from=start,
        bridge_from=0.0 if step is TransferStep.PILUS_FORMATION else 1.0,
        recipient_label="F+" if complete else "F-",
        recipient_fill=COLOR_RECIPIENT_RECEIVED if complete else COLOR_RECIPIENT_NEUTRAL,
        recipient_outline=COLOR_DONOR_OUTLINE if complete else COLOR_RECIPIENT_NEUTRAL_OUTLINE,
        plasmid_copy_shown=complete,
    )


class ConjugationStepper(ChangeNotifier):
    """
    Advances the transfer step on a fixed interval.

    start() arms the timer and stop() cancels it. A tick that is delivered
    after stop() leaves the state untouched. Also usable as a context manager:

        with ConjugationStepper(widget) as stepper:
            ...
    """

    def __init__(self, scheduler: Scheduler, interval_ms: int = TRANSFER_STEP_INTERVAL_MS):
        if interval_ms <= 0:
            raise ValueError(f"Interval must be positive, got {interval_ms}")
        self._init_listeners()
        self.scheduler = scheduler
        self.interval_ms = interval_ms
        self.step = TransferStep.CONTACT
        self._timer_id = None
        self._active = False
        self._generation = 0  # Bumped by start/stop; stale ticks carry an old value

    @property
    def is_running(self) -> bool:
        return self._active

    @property
    def frame(self) -> ConjugationFrame:
        return conjugation_frame(self.step)

    def start(self):
        """Arms the recurring timer. Calling it while running does nothing."""
        if self._active:
            return
        self._active = True
        self._generation += 1
        self._schedule()
        logger.debug(f"Conjugation stepper started ({self.interval_ms} ms)")

    def stop(self):
        """Cancels the pending tick. Safe to call more than once."""
        self._active = False
        self._generation += 1
        if self._timer_id is not None:
            timer_id, self._timer_id = self._timer_id, None
            self.scheduler.after_cancel(timer_id)
            logger.debug("Conjugation stepper stopped")

    def _schedule(self):
        self._timer_id = self.scheduler.after(
            self.interval_ms, partial(self._on_tick, self._generation))

    def _on_tick(self, generation: int):
        if not self._active or generation != self._generation:
            return
        self._timer_id = None
        self.step = self.step.next()
        logger.debug(f"Transfer step -> {self.step.label}")
        self._notify()
        # A listener may have stopped us
        if self._active:
            self._schedule()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False
