"""
Tests for merge_storage_map.

Tests cover:
- Slot union across passes
- Root entries superseding slots in either order
- Last root wins
- Idempotence
- In-place mutation of the accumulator
"""

import copy

from bundler_utils.storage import StorageMap, merge_storage_map


ACCOUNT = "0x" + "aa" * 20
PAYMASTER = "0x" + "bb" * 20
ROOT_1 = "0x" + "01" * 32
ROOT_2 = "0x" + "02" * 32
SLOT_A = "0x" + "00" * 31 + "0a"
SLOT_B = "0x" + "00" * 31 + "0b"


class TestMergeStorageMap:
    """Tests for merge_storage_map."""

    def test_empty_incoming(self) -> None:
        merged: StorageMap = {ACCOUNT: {SLOT_A: "0x01"}}

        assert merge_storage_map(merged, {}) == {ACCOUNT: {SLOT_A: "0x01"}}

    def test_returns_and_mutates_accumulator(self) -> None:
        merged: StorageMap = {}

        result = merge_storage_map(merged, {ACCOUNT: {SLOT_A: "0x01"}})

        assert result is merged
        assert merged == {ACCOUNT: {SLOT_A: "0x01"}}

    def test_slots_are_unioned(self) -> None:
        merged: StorageMap = {}

        merge_storage_map(merged, {ACCOUNT: {SLOT_A: "0x01"}})
        merge_storage_map(merged, {ACCOUNT: {SLOT_B: "0x02"}, PAYMASTER: {SLOT_A: "0x03"}})

        assert merged == {
            ACCOUNT: {SLOT_A: "0x01", SLOT_B: "0x02"},
            PAYMASTER: {SLOT_A: "0x03"},
        }

    def test_same_slot_last_write_wins(self) -> None:
        merged: StorageMap = {ACCOUNT: {SLOT_A: "0x01"}}

        merge_storage_map(merged, {ACCOUNT: {SLOT_A: "0x02"}})

        assert merged[ACCOUNT] == {SLOT_A: "0x02"}

    def test_root_replaces_earlier_slots(self) -> None:
        merged: StorageMap = {}

        merge_storage_map(merged, {ACCOUNT: {SLOT_A: "0x01"}})
        merge_storage_map(merged, {ACCOUNT: ROOT_1})

        assert merged == {ACCOUNT: ROOT_1}

    def test_root_ignores_later_slots(self) -> None:
        merged: StorageMap = {}

        merge_storage_map(merged, {ACCOUNT: ROOT_1})
        merge_storage_map(merged, {ACCOUNT: {SLOT_A: "0x01"}})

        assert merged == {ACCOUNT: ROOT_1}

    def test_last_root_wins(self) -> None:
        merged: StorageMap = {}

        merge_storage_map(merged, {ACCOUNT: ROOT_1})
        merge_storage_map(merged, {ACCOUNT: ROOT_2})

        assert merged == {ACCOUNT: ROOT_2}

    def test_root_only_affects_its_address(self) -> None:
        merged: StorageMap = {ACCOUNT: {SLOT_A: "0x01"}, PAYMASTER: {SLOT_B: "0x02"}}

        merge_storage_map(merged, {ACCOUNT: ROOT_1})

        assert merged == {ACCOUNT: ROOT_1, PAYMASTER: {SLOT_B: "0x02"}}

    def test_idempotent(self) -> None:
        incoming: StorageMap = {ACCOUNT: {SLOT_A: "0x01", SLOT_B: "0x02"}, PAYMASTER: ROOT_1}
        once = merge_storage_map({ACCOUNT: {SLOT_A: "0x01"}}, copy.deepcopy(incoming))
        twice = merge_storage_map(
            merge_storage_map({ACCOUNT: {SLOT_A: "0x01"}}, incoming),
            incoming,
        )

        assert once == twice

    def test_does_not_alias_incoming_slot_maps(self) -> None:
        incoming: StorageMap = {ACCOUNT: {SLOT_A: "0x01"}}
        merged = merge_storage_map({}, incoming)

        merge_storage_map(merged, {ACCOUNT: {SLOT_B: "0x02"}})

        assert incoming == {ACCOUNT: {SLOT_A: "0x01"}}
