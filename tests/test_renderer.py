"""Tests for bacvar.ui.renderer module (drawn on a recording canvas)."""

import pytest

pytest.importorskip("tkinter")

from bacvar.core.conjugation import TransferStep, conjugation_frame
from bacvar.core.mutation import SequenceMutationView, MutationMode
from bacvar.core.recombinant import phase_frame
from bacvar.ui.renderer import DiagramRenderer


@pytest.fixture
def renderer():
    return DiagramRenderer()


def cell_count(canvas):
    return len({t for item in canvas.tagged("cell") for t in item['tags'] if t.startswith("cell_")})


class TestDrawMutation:
    """Test the sequence strip."""

    def test_normal_has_no_highlight(self, renderer, canvas):
        renderer.draw_mutation(canvas, SequenceMutationView().snapshot())
        assert cell_count(canvas) == 7
        assert canvas.tagged("changed") == []

    def test_insertion_highlights_index_three(self, renderer, canvas):
        view = SequenceMutationView()
        view.apply_mutation(MutationMode.INSERTION)
        renderer.draw_mutation(canvas, view.snapshot())
        assert cell_count(canvas) == 8
        changed = canvas.tagged("changed")
        assert changed
        assert all("cell_3" in item['tags'] for item in changed)

    def test_deletion_draws_without_highlight(self, renderer, canvas):
        view = SequenceMutationView()
        view.apply_mutation(MutationMode.DELETION)
        renderer.draw_mutation(canvas, view.snapshot())
        assert cell_count(canvas) == 6
        assert canvas.tagged("changed") == []

    def test_redraw_replaces_items(self, renderer, canvas):
        view = SequenceMutationView()
        renderer.draw_mutation(canvas, view.snapshot())
        first = len(canvas.items)
        renderer.draw_mutation(canvas, view.snapshot())
        assert len(canvas.items) == first


class TestDrawConjugation:
    """Test the conjugation stage."""

    def test_contact(self, renderer, canvas):
        renderer.draw_conjugation(canvas, conjugation_frame(TransferStep.CONTACT))
        assert canvas.tagged("bridge") == []
        assert canvas.tagged("particle") == []
        assert canvas.tagged("plasmid_copy") == []

    def test_transfer_particle_at_midpoint(self, renderer, canvas):
        frame = conjugation_frame(TransferStep.TRANSFER)
        renderer.draw_conjugation(canvas, frame, width=400)
        assert canvas.tagged("bridge")
        (particle,) = canvas.tagged("particle")
        x1, _, x2, _ = particle['coords']
        assert (x1 + x2) / 2 == pytest.approx(400 * frame.particle_position)

    def test_transfer_particle_mid_flight(self, renderer, canvas):
        frame = conjugation_frame(TransferStep.TRANSFER)
        renderer.draw_conjugation(canvas, frame, progress=0.5, width=400)
        (particle,) = canvas.tagged("particle")
        x1, _, x2, _ = particle['coords']
        assert (x1 + x2) / 2 == pytest.approx(400 * 0.425)

    def test_transfer_particle_starts_at_donor(self, renderer, canvas):
        frame = conjugation_frame(TransferStep.TRANSFER)
        renderer.draw_conjugation(canvas, frame, progress=0.0, width=400)
        (particle,) = canvas.tagged("particle")
        x1, _, x2, _ = particle['coords']
        assert (x1 + x2) / 2 == pytest.approx(400 * frame.particle_from)

    def test_pilus_bridge_grows(self, renderer, canvas):
        frame = conjugation_frame(TransferStep.PILUS_FORMATION)
        renderer.draw_conjugation(canvas, frame, progress=0.0, width=400)
        assert canvas.tagged("bridge") == []

        def bridge_length(progress):
            renderer.draw_conjugation(canvas, frame, progress=progress, width=400)
            (bridge,) = canvas.tagged("bridge")
            x1, _, x2, _ = bridge['coords']
            return x2 - x1

        assert 0 < bridge_length(0.5) < bridge_length(1.0)
        assert bridge_length(0.5) == pytest.approx(bridge_length(1.0) / 2)

    def test_complete_recipient_label(self, renderer, canvas):
        renderer.draw_conjugation(canvas, conjugation_frame(TransferStep.COMPLETE))
        texts = [item['options'].get('text') for item in canvas.tagged("recipient")]
        assert "Recipient (F+)" in texts
        assert canvas.tagged("plasmid_copy")

    def test_step_label_shown(self, renderer, canvas):
        renderer.draw_conjugation(canvas, conjugation_frame(TransferStep.PILUS_FORMATION))
        (label,) = canvas.tagged("step_label")
        assert label['options']['text'] == "PILUS FORMATION"


class TestDrawRecombinant:
    """Test the plasmid diagram."""

    def test_vector_prep_is_bare_ring(self, renderer, canvas):
        renderer.draw_recombinant(canvas, phase_frame(0))
        assert canvas.tagged("plasmid")
        for tag in ("cut_ring", "insert", "icon", "host_ring"):
            assert canvas.tagged(tag) == []

    def test_restriction_shows_enzyme(self, renderer, canvas):
        renderer.draw_recombinant(canvas, phase_frame(1))
        assert canvas.tagged("cut_ring")
        (enzyme,) = canvas.tagged("enzyme")
        assert enzyme['options']['text'].startswith("EcoRI")
        assert "cuts at" in enzyme['options']['text']

    def test_transformation_shows_host_ring(self, renderer, canvas):
        renderer.draw_recombinant(canvas, phase_frame(4))
        assert canvas.tagged("host_ring")
        assert canvas.tagged("insert")

    def test_rotation_only_when_rotating(self, renderer, canvas):
        renderer.draw_recombinant(canvas, phase_frame(3), angle=90)
        static_start = canvas.tagged("cut_ring")[0]['options']['start']
        renderer.draw_recombinant(canvas, phase_frame(3), angle=0)
        assert canvas.tagged("cut_ring")[0]['options']['start'] == static_start

        renderer.draw_recombinant(canvas, phase_frame(4), angle=0)
        start_0 = canvas.tagged("cut_ring")[0]['options']['start']
        renderer.draw_recombinant(canvas, phase_frame(4), angle=90)
        start_90 = canvas.tagged("cut_ring")[0]['options']['start']
        assert start_0 - start_90 == pytest.approx(90)

    def test_caption_drawn(self, renderer, canvas):
        renderer.draw_recombinant(canvas, phase_frame(2))
        (caption,) = canvas.tagged("caption")
        assert caption['options']['text'] == "Target gene pairs with plasmid sticky ends."
