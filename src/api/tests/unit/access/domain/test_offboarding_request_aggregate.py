"""Unit tests for the OffboardingRequest aggregate."""

from datetime import date

import pytest

from access.domain.aggregates import OffboardingRequest
from access.domain.value_objects import OffboardingStatus, SystemId, UserId


def _request(**overrides) -> OffboardingRequest:
    kwargs = {
        "user_id": UserId.generate(),
        "requested_by": UserId.generate(),
        "removal_date": date(2026, 11, 30),
        "system_ids": [SystemId.generate()],
    }
    kwargs.update(overrides)
    return OffboardingRequest.create(**kwargs)


class TestCreation:
    def test_starts_pending(self):
        request = _request()

        assert request.status == OffboardingStatus.PENDING
        assert request.is_pending
        assert request.completed_at is None

    def test_requires_systems_unless_all_systems(self):
        with pytest.raises(ValueError, match="at least one system"):
            _request(system_ids=[])

    def test_all_systems_discards_listed_systems(self):
        request = _request(all_systems=True)

        assert request.all_systems is True
        assert request.system_ids == []

    def test_duplicate_systems_collapsed_in_order(self):
        first, second = SystemId.generate(), SystemId.generate()

        request = _request(system_ids=[first, second, first])

        assert request.system_ids == [first, second]

    def test_blank_notes_become_none(self):
        assert _request(notes="   ").notes is None
        assert _request(notes=" leaving Friday ").notes == "leaving Friday"


class TestCoverage:
    def test_all_systems_covers_everything(self):
        assert _request(all_systems=True).covers_system(SystemId.generate())

    def test_listed_systems_only(self):
        listed = SystemId.generate()
        request = _request(system_ids=[listed])

        assert request.covers_system(listed)
        assert not request.covers_system(SystemId.generate())


class TestCompletion:
    def test_complete_transitions_once(self):
        request = _request()

        assert request.complete() is True
        completed_at = request.completed_at

        assert request.status == OffboardingStatus.COMPLETED
        assert completed_at is not None
        assert request.complete() is False
        assert request.completed_at == completed_at
