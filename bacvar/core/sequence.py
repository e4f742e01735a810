# sequence.py
"""
Sequence helpers for the mutation diagram.

All operations take the reference sequence and return a new Bio.Seq.Seq.
The reference itself is never modified: each edit works on a fresh
MutableSeq copy.
"""
from typing import Union

from Bio.Seq import Seq, MutableSeq

from bacvar.config.constants import VALID_BASES, PURINES, PYRIMIDINES

SeqLike = Union[str, Seq]


def validate_sequence(seq: SeqLike) -> Seq:
    """
    Checks that a sequence is non-empty and uses only A, T, G and C.

    Returns:
        Seq: Upper-cased copy of the input.

    Raises:
        ValueError: If the sequence is empty or has other symbols.
    """
    text = str(seq).upper()
    if not text:
        raise ValueError("Sequence must not be empty")
    invalid = set(text) - VALID_BASES
    if invalid:
        raise ValueError(f"Invalid bases in sequence: {''.join(sorted(invalid))}")
    return Seq(text)


def _validate_base(base: str) -> str:
    base = str(base).upper()
    if len(base) != 1 or base not in VALID_BASES:
        raise ValueError(f"Invalid base: {base!r}")
    return base


def substitute(reference: SeqLike, index: int, base: str) -> Seq:
    """Replaces the base at index. Length is preserved."""
    if not 0 <= index < len(reference):
        raise ValueError(f"Substitution index {index} out of range")
    edited = MutableSeq(str(reference))
    edited[index] = _validate_base(base)
    return Seq(str(edited))


def insert(reference: SeqLike, index: int, base: str) -> Seq:
    """Inserts a base before index. Length grows by one."""
    if not 0 <= index <= len(reference):
        raise ValueError(f"Insertion index {index} out of range")
    edited = MutableSeq(str(reference))
    edited.insert(index, _validate_base(base))
    return Seq(str(edited))


def delete(reference: SeqLike, index: int) -> Seq:
    """Removes the base at index. Length shrinks by one."""
    if not 0 <= index < len(reference):
        raise ValueError(f"Deletion index {index} out of range")
    edited = MutableSeq(str(reference))
    del edited[index]
    return Seq(str(edited))


def classify_substitution(old: str, new: str) -> str:
    """
    Classifies a point substitution.

    Returns:
        str: 'transition' for purine<->purine or pyrimidine<->pyrimidine,
             'transversion' for purine<->pyrimidine.
    """
    old, new = _validate_base(old), _validate_base(new)
    if old == new:
        raise ValueError("Substitution must change the base")
    if {old, new} <= PURINES or {old, new} <= PYRIMIDINES:
        return "transition"
    return "transversion"


def is_frameshift(reference: SeqLike, mutated: SeqLike) -> bool:
    """True when the length change would shift the reading frame."""
    return (len(mutated) - len(reference)) % 3 != 0
