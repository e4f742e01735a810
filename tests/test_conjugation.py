"""Tests for bacvar.core.conjugation module."""

import pytest

from bacvar.config.constants import (
    TRANSFER_STEP_INTERVAL_MS,
    PARTICLE_DONOR_POSITION,
    PARTICLE_MIDPOINT_POSITION,
    PARTICLE_RECIPIENT_POSITION,
)
from bacvar.core.conjugation import (
    ConjugationStepper,
    TransferStep,
    conjugation_frame,
)


class TestTransferStep:
    """Test TransferStep enum."""

    def test_labels(self):
        assert [s.label for s in TransferStep] == [
            "Contact", "Pilus Formation", "Transfer", "Complete"]

    def test_next_wraps(self):
        assert TransferStep.CONTACT.next() is TransferStep.PILUS_FORMATION
        assert TransferStep.COMPLETE.next() is TransferStep.CONTACT


class TestConjugationFrame:
    """Test the step -> visual configuration mapping."""

    def test_contact(self):
        frame = conjugation_frame(TransferStep.CONTACT)
        assert not frame.bridge_visible
        assert not frame.particle_visible
        assert frame.particle_position is None
        assert frame.recipient_label == "F-"
        assert not frame.plasmid_copy_shown

    def test_pilus_formation(self):
        frame = conjugation_frame(TransferStep.PILUS_FORMATION)
        assert frame.bridge_visible
        assert not frame.particle_visible
        assert frame.recipient_label == "F-"

    def test_transfer(self):
        frame = conjugation_frame(TransferStep.TRANSFER)
        assert frame.bridge_visible
        assert frame.particle_visible
        assert frame.particle_position == PARTICLE_MIDPOINT_POSITION
        assert frame.recipient_label == "F-"
        assert not frame.received

    def test_complete(self):
        frame = conjugation_frame(TransferStep.COMPLETE)
        assert frame.bridge_visible
        assert frame.particle_visible
        assert frame.particle_position == PARTICLE_RECIPIENT_POSITION
        assert frame.recipient_label == "F+"
        assert frame.received
        assert frame.plasmid_copy_shown

    def test_recipient_color_changes_only_when_complete(self):
        neutral = {conjugation_frame(s).recipient_fill for s in TransferStep if s is not TransferStep.COMPLETE}
        assert len(neutral) == 1
        assert conjugation_frame(TransferStep.COMPLETE).recipient_fill not in neutral

    def test_accepts_int(self):
        assert conjugation_frame(2).step is TransferStep.TRANSFER

    def test_transfer_particle_leaves_donor(self):
        frame = conjugation_frame(TransferStep.TRANSFER)
        assert frame.particle_from == PARTICLE_DONOR_POSITION
        assert frame.particle_at(0.0) == pytest.approx(PARTICLE_DONOR_POSITION)
        assert frame.particle_at(1.0) == pytest.approx(PARTICLE_MIDPOINT_POSITION)

    def test_complete_particle_leaves_midpoint(self):
        frame = conjugation_frame(TransferStep.COMPLETE)
        assert frame.particle_from == PARTICLE_MIDPOINT_POSITION
        assert frame.particle_at(0.0) == pytest.approx(PARTICLE_MIDPOINT_POSITION)
        assert frame.particle_at(1.0) == pytest.approx(PARTICLE_RECIPIENT_POSITION)

    def test_particle_interpolates_and_clamps(self):
        frame = conjugation_frame(TransferStep.TRANSFER)
        assert frame.particle_at(0.5) == pytest.approx(0.425)
        assert frame.particle_at(-1.0) == pytest.approx(PARTICLE_DONOR_POSITION)
        assert frame.particle_at(2.0) == pytest.approx(PARTICLE_MIDPOINT_POSITION)

    def test_hidden_particle_has_no_position(self):
        frame = conjugation_frame(TransferStep.PILUS_FORMATION)
        assert frame.particle_from is None
        assert frame.particle_at(0.5) is None

    def test_bridge_grows_during_pilus_formation(self):
        frame = conjugation_frame(TransferStep.PILUS_FORMATION)
        assert frame.bridge_scale(0.0) == 0.0
        assert frame.bridge_scale(0.5) == pytest.approx(0.5)
        assert frame.bridge_scale(1.0) == pytest.approx(1.0)

    def test_bridge_full_once_formed(self):
        for step in (TransferStep.TRANSFER, TransferStep.COMPLETE):
            assert conjugation_frame(step).bridge_scale(0.0) == pytest.approx(1.0)
        assert conjugation_frame(TransferStep.CONTACT).bridge_scale(1.0) == 0.0

    def test_only_contact_is_still(self):
        animated = {s for s in TransferStep if conjugation_frame(s).animated}
        assert animated == {TransferStep.PILUS_FORMATION, TransferStep.TRANSFER, TransferStep.COMPLETE}


class TestStepperTimer:
    """Test the timer-driven transitions."""

    def test_initial_state(self, scheduler):
        stepper = ConjugationStepper(scheduler)
        assert stepper.step is TransferStep.CONTACT
        assert not stepper.is_running
        assert scheduler.pending == {}

    def test_start_schedules_interval(self, scheduler):
        stepper = ConjugationStepper(scheduler)
        stepper.start()
        assert stepper.is_running
        assert scheduler.delays == [TRANSFER_STEP_INTERVAL_MS]
        assert len(scheduler.pending) == 1

    def test_tick_advances_and_rearms(self, scheduler):
        stepper = ConjugationStepper(scheduler)
        stepper.start()
        scheduler.tick()
        assert stepper.step is TransferStep.PILUS_FORMATION
        assert len(scheduler.pending) == 1

    @pytest.mark.parametrize("k", range(0, 13))
    def test_step_is_ticks_mod_four(self, scheduler, k):
        stepper = ConjugationStepper(scheduler)
        stepper.start()
        scheduler.tick(k)
        assert stepper.step == k % 4

    def test_four_ticks_return_to_contact(self, scheduler):
        stepper = ConjugationStepper(scheduler)
        stepper.start()
        scheduler.tick(4)
        assert stepper.step is TransferStep.CONTACT

    def test_start_twice_keeps_one_timer(self, scheduler):
        stepper = ConjugationStepper(scheduler)
        stepper.start()
        stepper.start()
        assert len(scheduler.pending) == 1

    def test_custom_interval(self, scheduler):
        stepper = ConjugationStepper(scheduler, interval_ms=100)
        stepper.start()
        assert scheduler.delays == [100]

    def test_invalid_interval(self, scheduler):
        with pytest.raises(ValueError):
            ConjugationStepper(scheduler, interval_ms=0)


class TestStepperTeardown:
    """Test no state changes after stop()."""

    def test_stop_cancels_pending_timer(self, scheduler):
        stepper = ConjugationStepper(scheduler)
        stepper.start()
        handle = next(iter(scheduler.pending))
        stepper.stop()
        assert scheduler.cancelled == [handle]
        assert scheduler.pending == {}
        assert not stepper.is_running

    def test_late_tick_is_ignored(self, scheduler):
        """A tick already captured before stop() must not change state."""
        stepper = ConjugationStepper(scheduler)
        stepper.start()
        scheduler.tick(2)
        late_tick = next(iter(scheduler.pending.values()))

        stepper.stop()
        late_tick()

        assert stepper.step is TransferStep.TRANSFER
        assert scheduler.pending == {}

    def test_late_tick_does_not_notify(self, scheduler):
        stepper = ConjugationStepper(scheduler)
        seen = []
        stepper.subscribe(seen.append)
        stepper.start()
        late_tick = next(iter(scheduler.pending.values()))
        stepper.stop()
        late_tick()
        assert seen == []

    def test_stop_is_idempotent(self, scheduler):
        stepper = ConjugationStepper(scheduler)
        stepper.start()
        stepper.stop()
        stepper.stop()
        assert len(scheduler.cancelled) == 1

    def test_stop_before_start(self, scheduler):
        stepper = ConjugationStepper(scheduler)
        stepper.stop()
        assert scheduler.cancelled == []

    def test_listener_may_stop_stepper(self, scheduler):
        stepper = ConjugationStepper(scheduler)
        stepper.subscribe(lambda s: s.stop())
        stepper.start()
        scheduler.tick()
        assert stepper.step is TransferStep.PILUS_FORMATION
        assert scheduler.pending == {}

    def test_context_manager_releases_timer(self, scheduler):
        with ConjugationStepper(scheduler) as stepper:
            assert stepper.is_running
            scheduler.tick()
        assert not stepper.is_running
        assert scheduler.pending == {}

    def test_context_manager_releases_on_error(self, scheduler):
        with pytest.raises(RuntimeError):
            with ConjugationStepper(scheduler) as stepper:
                raise RuntimeError("boom")
        assert not stepper.is_running
        assert scheduler.pending == {}

    def test_restart_after_stop(self, scheduler):
        stepper = ConjugationStepper(scheduler)
        stepper.start()
        scheduler.tick()
        stepper.stop()
        stepper.start()
        scheduler.tick()
        assert stepper.step is TransferStep.TRANSFER

    def test_tick_from_before_restart_is_ignored(self, scheduler):
        """A tick captured before stop() stays dead after a restart."""
        stepper = ConjugationStepper(scheduler)
        stepper.start()
        stale_tick = next(iter(scheduler.pending.values()))
        stepper.stop()
        stepper.start()

        stale_tick()
        assert stepper.step is TransferStep.CONTACT
        assert len(scheduler.pending) == 1

        stepper.stop()
        assert scheduler.pending == {}


class TestStepperListeners:
    """Test change notifications."""

    def test_notified_each_tick(self, scheduler):
        stepper = ConjugationStepper(scheduler)
        seen = []
        stepper.subscribe(lambda s: seen.append(s.step))
        stepper.start()
        scheduler.tick(5)
        assert seen == [1, 2, 3, 0, 1]

    def test_frame_follows_step(self, scheduler):
        stepper = ConjugationStepper(scheduler)
        stepper.start()
        scheduler.tick(3)
        assert stepper.frame.recipient_label == "F+"
