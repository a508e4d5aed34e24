"""Tests for location inversion.

Topologies are drawn relay-first; ``v Source`` marks the local system and
``^ Target`` the far end of the location being inverted.
"""

import pytest

from crossloc.errors import Overflow
from crossloc.inverter import LocationInverter, invert_location
from crossloc.location import (
    ANY,
    ONLY_CHILD,
    AccountId32,
    AccountKey20,
    GeneralIndex,
    Location,
    PalletInstance,
    Parachain,
)


def account20() -> AccountKey20:
    return AccountKey20(ANY, bytes(20))


def account32() -> AccountId32:
    return AccountId32(ANY, bytes(32))


def inverter(*ancestry) -> LocationInverter:
    return LocationInverter(Location.new(0, *ancestry))


class TestInverterTopologies:
    def test_inverter_works_in_tree(self):
        #                                     v Source
        # Relay -> Para 1 -> SmartContract -> Account
        #       -> Para 2 -> Account
        #                    ^ Target
        inv = inverter(Parachain(1), account20(), account20())
        inverted = inv.invert_location(Location.new(3, Parachain(2), account32()))
        assert inverted == Location.new(2, Parachain(1), account20(), account20())

    def test_uses_ancestry_as_inverted_location(self):
        #                                     v Source
        # Relay -> Para 1 -> SmartContract -> Account
        #          ^ Target
        inv = inverter(account20(), account20())
        assert inv.invert_location(Location.grandparent()) == Location.new(0, account20(), account20())

    def test_uses_only_child_on_missing_ancestry(self):
        #                                        v Source
        # Relay -> Para 1 -> CollectivePallet -> Plurality
        #          ^ Target
        inv = inverter(PalletInstance(5))
        assert inv.invert_location(Location.grandparent()) == Location.new(
            0, PalletInstance(5), ONLY_CHILD
        )

    def test_errors_when_location_is_too_large(self):
        inv = inverter()
        with pytest.raises(Overflow):
            inv.invert_location(Location(99, Parachain(88)))

    def test_overflow_with_short_ancestry(self):
        inv = inverter(Parachain(1000), PalletInstance(42))
        with pytest.raises(Overflow):
            inv.invert_location(Location(99))

    def test_eight_parents_fit(self):
        inv = inverter(Parachain(1))
        inverted = inv.invert_location(Location(8))
        assert inverted.length() == 8
        assert list(inverted.interior)[1:] == [ONLY_CHILD] * 7

    def test_nine_parents_overflow(self):
        with pytest.raises(Overflow):
            inverter(Parachain(1)).invert_location(Location(9))


class TestInvertParaPallet:
    @pytest.fixture
    def inv(self) -> LocationInverter:
        return inverter(Parachain(1000), PalletInstance(42))

    def test_here(self, inv: LocationInverter):
        assert inv.invert_location(Location.here()) == Location.here()

    def test_one_parent(self, inv: LocationInverter):
        assert inv.invert_location(Location(1)) == Location(0, Parachain(1000))

    def test_two_parents(self, inv: LocationInverter):
        assert inv.invert_location(Location(2)) == Location.new(0, Parachain(1000), PalletInstance(42))

    def test_three_parents_pads_only_child(self, inv: LocationInverter):
        assert inv.invert_location(Location(3)) == Location.new(
            0, Parachain(1000), PalletInstance(42), ONLY_CHILD
        )

    def test_sibling_pallet(self, inv: LocationInverter):
        #                    v Source
        # Relay -> Para 1 -> Pallet(42)
        #            |-----> Pallet(69)
        #                    ^ Target
        inverted = inv.invert_location(Location(1, PalletInstance(69)))
        assert inverted == Location(1, Parachain(1000))

    def test_pallet_on_relay(self, inv: LocationInverter):
        #                    v Source
        # Relay -> Para 1 -> Pallet(42)
        #   |-----> Pallet(69)
        #           ^ Target
        inverted = inv.invert_location(Location(2, PalletInstance(69)))
        assert inverted == Location.new(1, Parachain(1000), PalletInstance(42))

    def test_pallet_on_other_para(self, inv: LocationInverter):
        #                    v Source
        # Relay -> Para 1 -> Pallet(42)
        #       -> Para 2 -> Pallet(43)
        #                    ^ Target
        inverted = inv.invert_location(Location.new(2, Parachain(2000), PalletInstance(43)))
        assert inverted == Location.new(2, Parachain(1000), PalletInstance(42))

    def test_ancestry_is_not_consumed(self, inv: LocationInverter):
        inv.invert_location(Location(3))
        assert inv.ancestry == Location.new(0, Parachain(1000), PalletInstance(42))
        assert inv.invert_location(Location(1)) == Location(0, Parachain(1000))


class TestInvertDeeperAncestry:
    def test_three_level_ancestry(self):
        #                                  v Source
        # Relay -> Para 1 -> Pallet(42) -> Pallet(52)
        #       -> Para 2 -> Pallet(43)
        #                    ^ Target
        inv = inverter(Parachain(1000), PalletInstance(42), PalletInstance(52))
        inverted = inv.invert_location(Location.new(3, Parachain(2000), PalletInstance(43)))
        assert inverted == Location.new(2, Parachain(1000), PalletInstance(42), PalletInstance(52))

        #                                  v Source
        # Relay -> Para 1 -> Pallet(42) -> Pallet(52)
        #       -> Para 2 -> Pallet(43) -> Pallet(53)
        #                                  ^ Target
        inverted = inv.invert_location(
            Location.new(3, Parachain(2000), PalletInstance(43), PalletInstance(53))
        )
        assert inverted == Location.new(3, Parachain(1000), PalletInstance(42), PalletInstance(52))

    def test_general_index_cousins(self):
        #                                  v Source
        # Relay -> Para 1 -> Pallet(42) -> GeneralIndex(1)
        #                 -> Pallet(69) -> GeneralIndex(2)
        #                                  ^ Target
        inv = inverter(Parachain(1000), PalletInstance(42), GeneralIndex(1))
        inverted = inv.invert_location(Location.new(2, PalletInstance(69), GeneralIndex(2)))
        assert inverted == Location.new(2, Parachain(1000), PalletInstance(42))


class TestInvertPara:
    @pytest.fixture
    def inv(self) -> LocationInverter:
        return inverter(Parachain(1000))

    def test_parent(self, inv: LocationInverter):
        assert inv.invert_location(Location(1)) == Location(0, Parachain(1000))

    def test_padding(self, inv: LocationInverter):
        assert inv.invert_location(Location(2)) == Location.new(0, Parachain(1000), ONLY_CHILD)
        assert inv.invert_location(Location(3)) == Location.new(
            0, Parachain(1000), ONLY_CHILD, ONLY_CHILD
        )

    def test_sibling_reciprocal(self):
        # Para 1 sends to its sibling Para 2; Para 2 reaches back via ../Parachain(1).
        inv = inverter(Parachain(1))
        assert inv.invert_location(Location(1, Parachain(2))) == Location(1, Parachain(1))


class TestInverterConstruction:
    def test_empty_ancestry(self):
        assert invert_location(Location.here(), Location.here()) == Location.here()

    def test_ancestry_must_not_have_parents(self):
        with pytest.raises(ValueError):
            LocationInverter(Location(1, Parachain(1)))

    def test_input_untouched(self):
        location = Location.new(2, Parachain(7))
        inverter(Parachain(1)).invert_location(location)
        assert location == Location.new(2, Parachain(7))

    def test_caller_ancestry_mutation_does_not_leak(self):
        ancestry = Location.new(0, Parachain(1))
        inv = LocationInverter(ancestry)
        ancestry.take_first_interior()
        assert inv.invert_location(Location(1)) == Location(0, Parachain(1))
