"""Tests for the location/account converters and the fallback chain."""

import hashlib

import pytest

from crossloc.converters import (
    SIBLING_TAG,
    Account32Hash,
    AccountId32Aliases,
    AccountKey20Aliases,
    ChildParachainConvertsVia,
    Converter,
    ParachainAccountDerivation,
    ParentIsDefault,
    SiblingParachainConvertsVia,
    convert_with,
    reverse_with,
)
from crossloc.errors import NoConverterMatched, NoMatch, UnsupportedDirection
from crossloc.location import (
    ANY,
    KUSAMA,
    POLKADOT,
    AccountId32,
    AccountKey20,
    GeneralIndex,
    Location,
    PalletInstance,
    Parachain,
)

ALICE = bytes(32)
BOB = b"\x01" * 32


class TestAccount32Hash:
    def test_any_location_hashes(self):
        conv = Account32Hash()
        expected = hashlib.blake2b(b"\x20multiloc" + b"\x01\x00", digest_size=32).digest()
        assert conv.convert(Location.parent()) == expected

    def test_deterministic_and_distinct(self):
        conv = Account32Hash()
        a = conv.convert(Location(1, Parachain(2)))
        assert a == conv.convert(Location(1, Parachain(2)))
        assert a != conv.convert(Location(1, Parachain(3)))
        assert len(a) == 32

    def test_narrow_width_truncates(self):
        wide = Account32Hash().convert(Location(1, Parachain(2)))
        narrow = Account32Hash(width=20).convert(Location(1, Parachain(2)))
        assert narrow == wide[:20]

    @pytest.mark.parametrize("account", [ALICE, BOB, b"", b"\x00" * 20])
    def test_reverse_always_fails(self, account):
        with pytest.raises(UnsupportedDirection):
            Account32Hash().reverse(account)

    def test_width_validation(self):
        with pytest.raises(ValueError):
            Account32Hash(width=33)


class TestParentIsDefault:
    @pytest.fixture
    def conv(self) -> ParentIsDefault:
        return ParentIsDefault()

    def test_parent_is_zero_account(self, conv: ParentIsDefault):
        assert conv.convert(Location.parent()) == bytes(32)

    def test_zero_account_is_parent(self, conv: ParentIsDefault):
        assert conv.reverse(bytes(32)) == Location.parent()

    @pytest.mark.parametrize(
        "location",
        [Location.here(), Location.grandparent(), Location(1, Parachain(1)), Location(0, Parachain(1))],
    )
    def test_other_locations_fail(self, conv: ParentIsDefault, location):
        with pytest.raises(NoMatch):
            conv.convert(location)

    def test_other_accounts_fail(self, conv: ParentIsDefault):
        with pytest.raises(NoMatch):
            conv.reverse(BOB)
        with pytest.raises(NoMatch):
            conv.reverse(bytes(20))

    def test_twenty_byte_default(self):
        conv = ParentIsDefault(width=20)
        assert conv.convert(Location.parent()) == bytes(20)
        assert conv.reverse(bytes(20)) == Location.parent()


class TestParachainDerivation:
    def test_layout(self):
        account = ParachainAccountDerivation().into_account(1000)
        assert account == b"para" + (1000).to_bytes(4, "little") + bytes(24)

    def test_rejects_foreign_tag(self):
        account = ParachainAccountDerivation(tag=SIBLING_TAG).into_account(7)
        assert ParachainAccountDerivation().try_from_account(account) is None

    def test_rejects_dirty_tail(self):
        account = bytearray(ParachainAccountDerivation().into_account(7))
        account[-1] = 1
        assert ParachainAccountDerivation().try_from_account(bytes(account)) is None

    def test_tag_length(self):
        with pytest.raises(ValueError):
            ParachainAccountDerivation(tag=b"parachain")


class TestChildParachain:
    @pytest.fixture
    def conv(self) -> ChildParachainConvertsVia:
        return ChildParachainConvertsVia()

    @pytest.mark.parametrize("para_id", [0, 1, 1000, 2001, 2**32 - 1])
    def test_recoverable(self, conv: ChildParachainConvertsVia, para_id):
        location = Location(0, Parachain(para_id))
        assert conv.reverse(conv.convert(location)) == location

    def test_sovereign_account_layout(self, conv: ChildParachainConvertsVia):
        assert conv.convert(Location(0, Parachain(1)))[:8] == b"para\x01\x00\x00\x00"

    @pytest.mark.parametrize(
        "location",
        [
            Location(1, Parachain(1)),
            Location(0, PalletInstance(1)),
            Location.new(0, Parachain(1), GeneralIndex(1)),
            Location.here(),
        ],
    )
    def test_shape_mismatch(self, conv: ChildParachainConvertsVia, location):
        with pytest.raises(NoMatch):
            conv.convert(location)

    def test_reverse_rejects_plain_accounts(self, conv: ChildParachainConvertsVia):
        with pytest.raises(NoMatch):
            conv.reverse(BOB)
        with pytest.raises(NoMatch):
            conv.reverse(b"para")


class TestSiblingParachain:
    @pytest.fixture
    def conv(self) -> SiblingParachainConvertsVia:
        return SiblingParachainConvertsVia()

    def test_recoverable(self, conv: SiblingParachainConvertsVia):
        location = Location(1, Parachain(2000))
        assert conv.reverse(conv.convert(location)) == location

    def test_child_shape_rejected(self, conv: SiblingParachainConvertsVia):
        with pytest.raises(NoMatch):
            conv.convert(Location(0, Parachain(2000)))

    def test_same_account_as_child(self, conv: SiblingParachainConvertsVia):
        child = ChildParachainConvertsVia()
        assert conv.convert(Location(1, Parachain(5))) == child.convert(Location(0, Parachain(5)))

    def test_sibling_tag(self):
        conv = SiblingParachainConvertsVia(ParachainAccountDerivation(tag=SIBLING_TAG))
        account = conv.convert(Location(1, Parachain(5)))
        assert account.startswith(b"sibl")
        assert conv.reverse(account) == Location(1, Parachain(5))


class TestAccountId32Aliases:
    @pytest.fixture
    def conv(self) -> AccountId32Aliases:
        return AccountId32Aliases(KUSAMA)

    def test_any_network_accepted(self, conv: AccountId32Aliases):
        assert conv.convert(Location(0, AccountId32(ANY, BOB))) == BOB

    def test_configured_network_accepted(self, conv: AccountId32Aliases):
        assert conv.convert(Location(0, AccountId32(KUSAMA, BOB))) == BOB

    def test_other_network_rejected(self, conv: AccountId32Aliases):
        with pytest.raises(NoMatch):
            conv.convert(Location(0, AccountId32(POLKADOT, BOB)))

    def test_wrong_shape_rejected(self, conv: AccountId32Aliases):
        with pytest.raises(NoMatch):
            conv.convert(Location(1, AccountId32(ANY, BOB)))
        with pytest.raises(NoMatch):
            conv.convert(Location(0, AccountKey20(ANY, bytes(20))))

    def test_reverse_uses_configured_network(self, conv: AccountId32Aliases):
        assert conv.reverse(BOB) == Location(0, AccountId32(KUSAMA, BOB))

    def test_reverse_wrong_width(self, conv: AccountId32Aliases):
        with pytest.raises(NoMatch):
            conv.reverse(bytes(20))

    def test_wildcard_network_not_configurable(self):
        with pytest.raises(ValueError):
            AccountId32Aliases(ANY)


class TestAccountKey20Aliases:
    @pytest.fixture
    def conv(self) -> AccountKey20Aliases:
        return AccountKey20Aliases(POLKADOT)

    def test_forward(self, conv: AccountKey20Aliases):
        key = b"\x42" * 20
        assert conv.convert(Location(0, AccountKey20(ANY, key))) == key
        assert conv.convert(Location(0, AccountKey20(POLKADOT, key))) == key
        with pytest.raises(NoMatch):
            conv.convert(Location(0, AccountKey20(KUSAMA, key)))

    def test_reverse(self, conv: AccountKey20Aliases):
        key = b"\x42" * 20
        assert conv.reverse(key) == Location(0, AccountKey20(POLKADOT, key))
        with pytest.raises(NoMatch):
            conv.reverse(BOB)


class TestChain:
    @pytest.fixture
    def chain(self) -> list:
        return [
            ParentIsDefault(),
            SiblingParachainConvertsVia(),
            AccountId32Aliases(KUSAMA),
        ]

    def test_protocol(self, chain):
        assert all(isinstance(c, Converter) for c in chain)
        assert isinstance(Account32Hash(), Converter)

    def test_first_success_wins(self, chain):
        assert convert_with(chain, Location.parent()) == bytes(32)
        assert convert_with(chain, Location(0, AccountId32(ANY, BOB))) == BOB

    def test_order_matters(self):
        hashed = Account32Hash()
        assert convert_with([ParentIsDefault(), hashed], Location.parent()) == bytes(32)
        assert convert_with([hashed, ParentIsDefault()], Location.parent()) == hashed.convert(
            Location.parent()
        )

    def test_no_match_aggregates(self, chain):
        with pytest.raises(NoConverterMatched) as excinfo:
            convert_with(chain, Location(2, GeneralIndex(1)))
        names = [name for name, _ in excinfo.value.attempts]
        assert names == ["parent_default", "sibling_parachain", "account_id32"]
        assert all(isinstance(err, NoMatch) for _, err in excinfo.value.attempts)

    def test_empty_chain(self):
        with pytest.raises(NoConverterMatched):
            convert_with([], Location.parent())

    def test_reverse_skips_one_way(self):
        chain = [Account32Hash(), ParentIsDefault(), AccountId32Aliases(KUSAMA)]
        assert reverse_with(chain, bytes(32)) == Location.parent()
        assert reverse_with(chain, BOB) == Location(0, AccountId32(KUSAMA, BOB))

    def test_reverse_no_match(self):
        with pytest.raises(NoConverterMatched) as excinfo:
            reverse_with([Account32Hash(), ParentIsDefault()], BOB)
        assert isinstance(excinfo.value.attempts[0][1], UnsupportedDirection)
        assert isinstance(excinfo.value.attempts[1][1], NoMatch)
