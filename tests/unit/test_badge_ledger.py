"""Badge ledger and badge service unit tests — de-duplication and safe removal."""

from __future__ import annotations

import threading

import pytest

from skillswap.errors import InvalidInput
from skillswap.gamification.badge_ledger import BadgeLedger
from skillswap.gamification.badge_service import award_badge, remove_badge, resolve_badge_owner
from skillswap.identity.store import IdentityStore


@pytest.fixture
def ledger() -> BadgeLedger:
    return BadgeLedger()


@pytest.fixture
def identity() -> IdentityStore:
    return IdentityStore()


class TestAward:
    def test_award_creates_entry(self, ledger):
        assert ledger.award("alex", "Mentor") is True
        assert ledger.badges_for("alex") == ["Mentor"]

    def test_duplicate_in_other_case_is_noop(self, ledger):
        assert ledger.award("alex", "Mentor") is True
        assert ledger.award("alex", "mentor") is False
        assert ledger.badges_for("alex") == ["Mentor"]

    def test_username_key_is_case_insensitive(self, ledger):
        ledger.award("Alex", "Mentor")
        ledger.award("ALEX", "Helper")
        assert ledger.badges_for("alex") == ["Mentor", "Helper"]
        assert len(ledger.entries()) == 1

    def test_award_order_is_kept(self, ledger):
        for badge in ["Super Teacher", "Helper", "Mentor"]:
            ledger.award("alex", badge)
        assert ledger.badges_for("alex") == ["Super Teacher", "Helper", "Mentor"]

    def test_concurrent_duplicate_awards_count_once(self, ledger):
        threads = [threading.Thread(target=ledger.award, args=("alex", "Mentor")) for _ in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert ledger.badges_for("alex") == ["Mentor"]


class TestRemove:
    def test_remove_case_insensitive(self, ledger):
        ledger.award("alex", "Mentor")
        assert ledger.remove("ALEX", "MENTOR") is True
        assert ledger.badges_for("alex") == []

    def test_remove_from_unknown_user(self, ledger):
        assert ledger.remove("nobody", "Mentor") is False

    def test_remove_missing_badge(self, ledger):
        ledger.award("alex", "Helper")
        assert ledger.remove("alex", "Mentor") is False
        assert ledger.badges_for("alex") == ["Helper"]

    def test_entry_survives_removing_last_badge(self, ledger):
        ledger.award("alex", "Mentor")
        ledger.remove("alex", "Mentor")
        assert [e.username for e in ledger.entries()] == ["alex"]


class TestEntries:
    def test_entries_are_snapshots(self, ledger):
        ledger.award("alex", "Mentor")
        snapshot = ledger.entries()
        snapshot[0].badges.append("Forged")
        assert ledger.badges_for("alex") == ["Mentor"]


class TestBadgeService:
    def test_username_wins_over_user_id(self, identity):
        sam = identity.login("sam")
        assert resolve_badge_owner(identity, "alex", sam.id) == "alex"

    def test_user_id_resolves_to_username(self, identity):
        sam = identity.login("Sam")
        assert resolve_badge_owner(identity, None, sam.id) == "Sam"

    def test_unresolvable_owner(self, identity):
        with pytest.raises(InvalidInput):
            resolve_badge_owner(identity, None, "missing")

    def test_award_requires_badge(self, identity, ledger):
        with pytest.raises(InvalidInput):
            award_badge(identity, ledger, "", username="alex")

    def test_award_by_user_id(self, identity, ledger):
        sam = identity.login("sam")
        assert award_badge(identity, ledger, "Collaborator", user_id=sam.id) is True
        assert ledger.badges_for("sam") == ["Collaborator"]

    def test_remove_requires_owner(self, identity, ledger):
        with pytest.raises(InvalidInput):
            remove_badge(identity, ledger, "Mentor")

    def test_remove_never_raises_for_missing_badge(self, identity, ledger):
        assert remove_badge(identity, ledger, "Mentor", username="ghost") is False
