# recombinant.py
"""
User-driven state machine behind the recombinant DNA diagram.

Five phases (Vector Prep, Restriction, Annealing, Ligation, Transformation)
are selected directly by the user. Any phase can be reached from any other;
the numbering is only a reading order.
"""
import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Union

from Bio.Restriction import EcoRI
from Bio.Seq import Seq

from bacvar.config.constants import COLOR_PLASMID, COLOR_PLASMID_DIM, VECTOR_SEQUENCE
from bacvar.core.state import ChangeNotifier

logger = logging.getLogger(__name__)

RESTRICTION_ENZYME = EcoRI


class EngineeringPhase(IntEnum):
    VECTOR_PREP = 0
    RESTRICTION = 1
    ANNEALING = 2
    LIGATION = 3
    TRANSFORMATION = 4

    @property
    def title(self) -> str:
        return PHASE_CAPTIONS[self][0]

    @property
    def description(self) -> str:
        return PHASE_CAPTIONS[self][1]


# (title, description) per phase
PHASE_CAPTIONS = {
    EngineeringPhase.VECTOR_PREP: ("Vector Prep", "Plasmid vector and Target Gene are isolated."),
    EngineeringPhase.RESTRICTION: ("Restriction", "Endonuclease cuts plasmid at specific site."),
    EngineeringPhase.ANNEALING: ("Annealing", "Target gene pairs with plasmid sticky ends."),
    EngineeringPhase.LIGATION: ("Ligation", "DNA Ligase seals the gaps. Recombinant DNA formed."),
    EngineeringPhase.TRANSFORMATION: ("Transformation", "Vector introduced to Host (E. coli) for amplification."),
}


class InsertArc(Enum):
    HIDDEN = 'hidden'
    FADING_IN = 'fading_in'
    FULL = 'full'


class PhaseIcon(Enum):
    NONE = 'none'
    SCISSORS = 'scissors'
    MERGE = 'merge'
    SEAL = 'seal'
    HOST = 'host'


class Rotation(Enum):
    STATIC = 'static'
    CONTINUOUS = 'continuous'


PHASE_ICONS = {
    EngineeringPhase.VECTOR_PREP: PhaseIcon.NONE,
    EngineeringPhase.RESTRICTION: PhaseIcon.SCISSORS,
    EngineeringPhase.ANNEALING: PhaseIcon.MERGE,
    EngineeringPhase.LIGATION: PhaseIcon.SEAL,
    EngineeringPhase.TRANSFORMATION: PhaseIcon.HOST,
}


@dataclass(frozen=True)
class PhaseFrame:
    """Visual configuration of the recombinant DNA diagram for one phase."""
    phase: EngineeringPhase
    title: str
    description: str
    ring_color: str
    cut_ring_shown: bool
    insert_arc: InsertArc
    icon: PhaseIcon
    host_ring_shown: bool
    rotation: Rotation

    @property
    def insert_shown(self) -> bool:
        return self.insert_arc is not InsertArc.HIDDEN

    @property
    def rotating(self) -> bool:
        return self.rotation is Rotation.CONTINUOUS


def phase_frame(phase: Union[EngineeringPhase, int]) -> PhaseFrame:
    """Maps a phase to its visual configuration."""
    phase = EngineeringPhase(phase)

    if phase < EngineeringPhase.ANNEALING:
        insert_arc = InsertArc.HIDDEN
    elif phase is EngineeringPhase.ANNEALING:
        insert_arc = InsertArc.FADING_IN
    else:
        insert_arc = InsertArc.FULL

    transformed = phase is EngineeringPhase.TRANSFORMATION
    return PhaseFrame(
        phase=phase,
        title=phase.title,
        description=phase.description,
        ring_color=COLOR_PLASMID if phase is EngineeringPhase.VECTOR_PREP else COLOR_PLASMID_DIM,
        cut_ring_shown=phase >= EngineeringPhase.RESTRICTION,
        insert_arc=insert_arc,
        icon=PHASE_ICONS[phase],
        host_ring_shown=transformed,
        rotation=Rotation.CONTINUOUS if transformed else Rotation.STATIC,
    )


def enzyme_label() -> str:
    """Enzyme name with its cut pattern, e.g. 'EcoRI G^AATT_C'."""
    return f"{RESTRICTION_ENZYME} {RESTRICTION_ENZYME.elucidate()}"


def find_cut_sites(seq: Union[str, Seq], circular: bool = True) -> List[int]:
    """
    Finds the enzyme's cut positions in a vector sequence.

    Returns:
        list: 1-based positions of the first base after each cut.
    """
    return RESTRICTION_ENZYME.search(Seq(str(seq).upper()), linear=not circular)


def restriction_note(vector: Union[str, Seq] = VECTOR_SEQUENCE) -> str:
    """Overlay text for the Restriction phase: enzyme, cut pattern and cut positions."""
    sites = find_cut_sites(vector)
    if not sites:
        return f"{enzyme_label()} (no site in vector)"
    return f"{enzyme_label()} cuts at {', '.join(str(s) for s in sites)}"


class RecombinantPhaseWalker(ChangeNotifier):
    """Holds the currently selected engineering phase."""

    def __init__(self):
        self._init_listeners()
        self.phase = EngineeringPhase.VECTOR_PREP

    @property
    def frame(self) -> PhaseFrame:
        return phase_frame(self.phase)

    def select_phase(self, index: Union[EngineeringPhase, int]):
        """
        Selects a phase unconditionally.

        Raises:
            ValueError: If index is not a phase number (0-4).
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(f"Phase index must be an int, got {index!r}")
        self.phase = EngineeringPhase(index)
        logger.debug(f"Engineering phase -> {self.phase.title}")
        self._notify()
