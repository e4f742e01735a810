# mutation.py
"""
State machine behind the mutation diagram.

Holds a fixed reference sequence and a working sequence derived from it by
at most one mutation. Every mutation is recomputed from the reference, so
applying Insertion after Substitution yields the same sequence as Insertion
alone.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from Bio.Seq import Seq

from bacvar.config.constants import (
    REFERENCE_SEQUENCE, SUBSTITUTION_INDEX, SUBSTITUTION_BASE,
    INSERTION_INDEX, INSERTION_BASE, DELETION_INDEX, NO_ANNOTATION
)
from bacvar.core.sequence import (
    validate_sequence, substitute, insert, delete,
    classify_substitution, is_frameshift
)
from bacvar.core.state import ChangeNotifier

logger = logging.getLogger(__name__)


class MutationMode(Enum):
    """Active mutation shown by the diagram."""
    NORMAL = 'normal'
    SUBSTITUTION = 'substitution'
    INSERTION = 'insertion'
    DELETION = 'deletion'


MUTATION_CAPTIONS = {
    MutationMode.NORMAL: "Original DNA Sequence.",
    MutationMode.SUBSTITUTION: "Base Substitution: Transition or Transversion.",
    MutationMode.INSERTION: "Frame-shift: Integration of new base.",
    MutationMode.DELETION: "Frame-shift: Loss of base pair.",
}


def mutation_caption(mode: MutationMode) -> str:
    """Caption shown under the sequence for a mode."""
    return MUTATION_CAPTIONS[MutationMode(mode)]


def annotated_index_for(mode: MutationMode) -> int:
    """Index of the changed cell, or NO_ANNOTATION when none is highlighted."""
    mode = MutationMode(mode)
    if mode is MutationMode.SUBSTITUTION:
        return SUBSTITUTION_INDEX
    if mode is MutationMode.INSERTION:
        return INSERTION_INDEX
    return NO_ANNOTATION


@dataclass(frozen=True)
class MutationSnapshot:
    """Read-only view of the mutation diagram for the renderer."""
    bases: Tuple[str, ...]
    mode: MutationMode
    annotated_index: int
    caption: str
    substitution_class: Optional[str] = None
    frameshift: bool = False

    def is_annotated(self, index: int) -> bool:
        return index == self.annotated_index


class SequenceMutationView(ChangeNotifier):
    """
    Applies one of three fixed mutations to a pristine reference sequence.

    Substitution replaces index 2 with T, Insertion adds A at index 3 and
    Deletion removes index 3.
    """

    def __init__(self, reference: Union[str, Seq] = REFERENCE_SEQUENCE):
        self._init_listeners()
        self._reference = validate_sequence(reference)
        if len(self._reference) <= max(SUBSTITUTION_INDEX, INSERTION_INDEX, DELETION_INDEX):
            raise ValueError(f"Reference sequence too short: {len(self._reference)} bases")
        self.working: Seq = self._reference
        self.mode = MutationMode.NORMAL

    @property
    def reference(self) -> Seq:
        return self._reference

    @property
    def annotated_index(self) -> int:
        return annotated_index_for(self.mode)

    @property
    def caption(self) -> str:
        return mutation_caption(self.mode)

    def apply_mutation(self, mutation_type: Union[MutationMode, str]):
        """
        Recomputes the working sequence from the reference.

        Args:
            mutation_type: SUBSTITUTION, INSERTION or DELETION (or their values).

        Raises:
            ValueError: For NORMAL or an unknown mutation type.
        """
        mode = MutationMode(mutation_type)
        ref = self._reference

        if mode is MutationMode.SUBSTITUTION:
            self.working = substitute(ref, SUBSTITUTION_INDEX, SUBSTITUTION_BASE)
        elif mode is MutationMode.INSERTION:
            self.working = insert(ref, INSERTION_INDEX, INSERTION_BASE)
        elif mode is MutationMode.DELETION:
            self.working = delete(ref, DELETION_INDEX)
        else:
            raise ValueError("NORMAL is not a mutation; use reset()")

        self.mode = mode
        logger.debug(f"Applied {mode.value}: {self.working}")
        self._notify()

    def reset(self):
        """Restores the reference sequence and NORMAL mode."""
        self.working = self._reference
        self.mode = MutationMode.NORMAL
        logger.debug("Mutation view reset")
        self._notify()

    def snapshot(self) -> MutationSnapshot:
        sub_class = None
        if self.mode is MutationMode.SUBSTITUTION:
            sub_class = classify_substitution(
                self._reference[SUBSTITUTION_INDEX], SUBSTITUTION_BASE)
        return MutationSnapshot(
            bases=tuple(str(self.working)),
            mode=self.mode,
            annotated_index=self.annotated_index,
            caption=self.caption,
            substitution_class=sub_class,
            frameshift=is_frameshift(self._reference, self.working),
        )
