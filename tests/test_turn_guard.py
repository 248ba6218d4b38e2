# Area: Core Tests
"""Tests for TurnGuard — exactly-once acting per decision point."""

import threading
from unittest.mock import patch

import pytest

from fakes import AGENT_NAME, HAND, make_snapshot
from holdem_agent._core.enums import GuardEvent, GuardPhase
from holdem_agent._core.fingerprint import round_key
from holdem_agent._core.state_store import GameStateStore
from holdem_agent._core.turn_guard import Claim, TRANSITIONS, TurnGuard


MOCK_TIME = "holdem_agent._core.turn_guard.time"


@pytest.fixture
def store():
    s = GameStateStore(agent_name=AGENT_NAME)
    s.install_hand(HAND)
    return s


def _evaluate(guard, store, snapshot):
    store.update_snapshot(snapshot)
    return guard.evaluate(snapshot, store)


class TestEligibility:
    """Snapshots that must not produce a claim."""

    def test_first_eligible_snapshot_is_claimed(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        snapshot = make_snapshot()
        claim = _evaluate(guard, store, snapshot)

        assert claim == Claim(round_key=round_key(snapshot), bet_level=20, hand_epoch=0)
        assert guard.phase is GuardPhase.ACTING
        assert guard.state.acted is True

    def test_not_my_turn(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        assert _evaluate(guard, store, make_snapshot(current="p2")) is None
        assert guard.phase is GuardPhase.IDLE

    def test_no_hand_held(self):
        store = GameStateStore(agent_name=AGENT_NAME)
        guard = TurnGuard(cooldown_seconds=0)
        assert _evaluate(guard, store, make_snapshot()) is None
        assert guard.phase is GuardPhase.IDLE

    def test_folded_player_cannot_act(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        assert _evaluate(guard, store, make_snapshot(my_status="folded")) is None

    def test_all_in_player_cannot_act(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        assert _evaluate(guard, store, make_snapshot(my_status="all-in")) is None

    def test_unresolved_identity_stays_idle(self):
        store = GameStateStore(agent_name="SomeoneElse")
        store.install_hand(HAND)
        guard = TurnGuard(cooldown_seconds=0)
        assert _evaluate(guard, store, make_snapshot()) is None
        assert store.my_player_id is None
        assert guard.phase is GuardPhase.IDLE


class TestDuplicateSuppression:
    """Fingerprint-based dedup."""

    def test_identical_snapshot_ignored(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        claim = _evaluate(guard, store, make_snapshot())
        guard.complete(claim, success=True)

        assert _evaluate(guard, store, make_snapshot()) is None

    def test_fields_outside_fingerprint_do_not_matter(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        claim = _evaluate(guard, store, make_snapshot(my_chips=1000))
        guard.complete(claim, success=True)

        assert _evaluate(guard, store, make_snapshot(my_chips=900)) is None

    def test_snapshot_during_decision_is_deferred(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        claim = _evaluate(guard, store, make_snapshot())
        stored = guard.state.fingerprint

        assert _evaluate(guard, store, make_snapshot(message="Villain raises")) is None
        # Not recorded, so the same snapshot is looked at again later
        assert guard.state.fingerprint == stored
        assert guard.phase is GuardPhase.ACTING

        guard.complete(claim, success=True)
        assert _evaluate(guard, store, make_snapshot(message="Villain raises")) is not None


class TestCooldown:
    """Minimum spacing between actions."""

    def test_within_cooldown_blocks(self, store):
        guard = TurnGuard(cooldown_seconds=2.0)
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 100.0
            claim = _evaluate(guard, store, make_snapshot())
            guard.complete(claim, success=True)
            assert guard.phase is GuardPhase.COOLING

            mock_time.monotonic.return_value = 101.0
            assert _evaluate(guard, store, make_snapshot(betting_round="flop", to_call=0)) is None
            assert guard.phase is GuardPhase.COOLING

    def test_after_cooldown_new_round_acts(self, store):
        guard = TurnGuard(cooldown_seconds=2.0)
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 100.0
            claim = _evaluate(guard, store, make_snapshot())
            guard.complete(claim, success=True)

            mock_time.monotonic.return_value = 102.5
            claim = _evaluate(guard, store, make_snapshot(betting_round="flop", to_call=0))
            assert claim is not None
            assert claim.bet_level == 0

    def test_completion_records_action_time(self, store):
        guard = TurnGuard(cooldown_seconds=2.0)
        with patch(MOCK_TIME) as mock_time:
            mock_time.monotonic.return_value = 100.0
            claim = _evaluate(guard, store, make_snapshot())
            mock_time.monotonic.return_value = 104.0
            guard.complete(claim, success=True)

        assert guard.state.last_action_at == 104.0


class TestRoundsAndBetLevels:
    """Round key and bet-level bookkeeping."""

    def test_same_round_same_level_already_acted(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        claim = _evaluate(guard, store, make_snapshot())
        guard.complete(claim, success=True)

        # Someone else's turn in between changes the fingerprint
        assert _evaluate(guard, store, make_snapshot(current="p2")) is None
        assert _evaluate(guard, store, make_snapshot()) is None
        assert guard.phase is GuardPhase.IDLE

    def test_bet_level_escalation_reenables(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        claim = _evaluate(guard, store, make_snapshot(to_call=20))
        guard.complete(claim, success=True)

        claim = _evaluate(guard, store, make_snapshot(to_call=40))
        assert claim is not None
        assert claim.bet_level == 40

    def test_lower_bet_level_does_not_reenable(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        claim = _evaluate(guard, store, make_snapshot(to_call=40))
        guard.complete(claim, success=True)

        assert _evaluate(guard, store, make_snapshot(to_call=20)) is None

    def test_new_round_key_clears_acted(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        claim = _evaluate(guard, store, make_snapshot(pot=30))
        guard.complete(claim, success=True)

        claim = _evaluate(guard, store, make_snapshot(pot=70))
        assert claim is not None
        assert guard.state.last_bet_level == 0

    def test_success_records_round_and_level(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        snapshot = make_snapshot()
        claim = _evaluate(guard, store, snapshot)
        assert guard.complete(claim, success=True) is True

        assert guard.state.last_round_key == round_key(snapshot)
        assert guard.state.last_bet_level == 20
        assert guard.state.acted is True


class TestClaimResolution:
    """complete / hold / stale claims."""

    def test_failure_releases_claim(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        claim = _evaluate(guard, store, make_snapshot())
        guard.complete(claim, success=False)

        assert guard.state.acted is False
        assert guard.phase is GuardPhase.IDLE
        assert _evaluate(guard, store, make_snapshot(message="again")) is not None

    def test_hold_keeps_claim(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        claim = _evaluate(guard, store, make_snapshot())
        assert guard.hold(claim) is True

        assert guard.state.acted is True
        assert guard.phase is GuardPhase.IDLE
        assert _evaluate(guard, store, make_snapshot(current="p2")) is None
        assert _evaluate(guard, store, make_snapshot()) is None

    def test_hold_does_not_start_cooldown(self, store):
        guard = TurnGuard(cooldown_seconds=5.0)
        claim = _evaluate(guard, store, make_snapshot())
        guard.hold(claim)
        assert guard.state.last_action_at == 0.0

    def test_reset_makes_claim_stale(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        claim = _evaluate(guard, store, make_snapshot())
        guard.reset_for_new_hand()

        assert guard.is_current(claim) is False
        assert guard.complete(claim, success=True) is False
        assert guard.hold(claim) is False
        assert guard.state.last_round_key is None


class TestHandReset:
    """reset_for_new_hand."""

    def test_reset_clears_everything_and_bumps_epoch(self, store):
        guard = TurnGuard(cooldown_seconds=2.0)
        claim = _evaluate(guard, store, make_snapshot())
        guard.complete(claim, success=True)

        guard.reset_for_new_hand()

        s = guard.state
        assert s.acted is False
        assert s.fingerprint is None
        assert s.last_round_key is None
        assert s.last_action_at == 0.0
        assert s.phase is GuardPhase.IDLE
        assert s.hand_epoch == 1

    def test_previously_blocked_point_acts_again(self, store):
        guard = TurnGuard(cooldown_seconds=2.0)
        claim = _evaluate(guard, store, make_snapshot())
        guard.complete(claim, success=True)
        assert _evaluate(guard, store, make_snapshot()) is None

        guard.reset_for_new_hand()

        claim = _evaluate(guard, store, make_snapshot())
        assert claim is not None
        assert claim.hand_epoch == 1


class TestTransitions:
    """The transition table."""

    def test_invalid_transition_raises(self):
        guard = TurnGuard()
        with pytest.raises(ValueError, match="Invalid transition"):
            guard._fire(GuardEvent.ACTION_SENT)

    def test_every_phase_accepts_hand_reset(self):
        for phase in GuardPhase:
            assert TRANSITIONS[phase][GuardEvent.HAND_RESET] is GuardPhase.IDLE

    def test_acting_only_leaves_via_resolution(self):
        assert set(TRANSITIONS[GuardPhase.ACTING]) == {
            GuardEvent.ACTION_SENT, GuardEvent.ACTION_FAILED, GuardEvent.HAND_RESET,
        }


class TestConcurrentClaims:
    """The claim is a compare-and-set under the guard lock."""

    def test_only_one_thread_claims(self, store):
        guard = TurnGuard(cooldown_seconds=0)
        snapshot = make_snapshot()
        store.update_snapshot(snapshot)
        claims = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            claim = guard.evaluate(snapshot, store)
            if claim is not None:
                claims.append(claim)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(5)

        assert len(claims) == 1
