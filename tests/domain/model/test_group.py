from __future__ import annotations

import logging

import pytest

from modcatalog.domain.model import Group, IdRanges


def test_create_dedupes_members() -> None:
    group = Group.create(10_001, "Road tools", [1_000_001, 1_000_002, 1_000_001])

    assert group.members == (1_000_001, 1_000_002)
    assert group.label() == "[Group 10001] Road tools"


def test_out_of_range_and_undersized_groups_only_warn(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        group = Group.create(500, None, [1_000_001])

    assert group.group_id == 500
    assert group.name == ""
    assert group.is_undersized
    messages = [(record.levelno, record.getMessage()) for record in caplog.records]
    assert (logging.ERROR, "Group ID out of range: [Group 500] . This might give weird results.") in messages
    assert any("less than 2 members" in message for _, message in messages)


def test_in_range_uses_configured_ranges() -> None:
    ranges = IdRanges(lowest_group_id=200, highest_group_id=300, highest_local_id=199)
    group = Group.create(250, "Custom", [1, 2], ranges=ranges)

    assert group.in_range(ranges)
    assert not group.in_range()


def test_membership_edits() -> None:
    group = Group.create(10_001, "Road tools", [1_000_001, 1_000_002])

    assert group.add_member(1_000_003)
    assert not group.add_member(1_000_003)
    assert group.remove_member(1_000_001)
    assert not group.remove_member(1_000_001)
    assert group.has_member(1_000_003)
    assert not group.has_member(1_000_001)


def test_copy_does_not_share_members() -> None:
    group = Group.create(10_001, "Road tools", [1_000_001, 1_000_002])

    clone = group.copy()
    clone.add_member(1_000_003)
    clone.rename("Renamed")

    assert group.members == (1_000_001, 1_000_002)
    assert group.name == "Road tools"
    assert clone.members == (1_000_001, 1_000_002, 1_000_003)


def test_record_round_trip() -> None:
    group = Group.create(10_001, "Road tools", [1_000_001, 1_000_002])

    restored = Group.from_record(group.to_record())

    assert restored.group_id == 10_001
    assert restored.name == "Road tools"
    assert restored.members == group.members
