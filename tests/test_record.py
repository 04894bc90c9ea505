"""
eidinfo Record Tests

Tests for EidInfo: immutability, accessors and composite formatting.
"""
from __future__ import annotations

import copy
import dataclasses
import pickle
from types import MappingProxyType

import pytest

from eidinfo import AddressLabels, DuplicateFieldError, EidInfo, Tag, ValidationError


# =============================================================================
# Construction and Immutability
# =============================================================================

class TestEidInfoConstruction:
    """Test invariants enforced on construction."""

    def test_direct_construction(self) -> None:
        info = EidInfo(entries=((Tag.SURNAME, "Petrović"),))
        assert info.surname == "Petrović"

    def test_direct_construction_accepts_list(self) -> None:
        info = EidInfo(entries=[(Tag.SURNAME, "Petrović")])
        assert info.entries == ((Tag.SURNAME, "Petrović"),)

    def test_direct_construction_rejects_duplicates(self) -> None:
        with pytest.raises(DuplicateFieldError):
            EidInfo(entries=((Tag.SURNAME, "A"), (Tag.SURNAME, "B")))

    def test_direct_construction_rejects_sentinel(self) -> None:
        with pytest.raises(ValidationError):
            EidInfo(entries=((Tag.NULL, "x"),))

    def test_direct_construction_rejects_invalid_value(self) -> None:
        with pytest.raises(ValidationError):
            EidInfo(entries=((Tag.PERSONAL_NUMBER, "12345"),))

    @pytest.mark.parametrize("entries", [
        (Tag.SURNAME, "Petrović"),
        ((Tag.SURNAME,),),
        ((Tag.SURNAME, "Petrović", "extra"),),
        ("ab",),
        None,
        "SURNAME",
    ])
    def test_direct_construction_rejects_malformed_entries(self, entries) -> None:
        with pytest.raises(ValidationError):
            EidInfo(entries=entries)

    def test_pickle_round_trip(self, full_info: EidInfo) -> None:
        restored = pickle.loads(pickle.dumps(full_info))
        assert restored == full_info
        assert restored.get_place_full() == full_info.get_place_full()
        assert isinstance(restored._fields, MappingProxyType)

    def test_copy_and_deepcopy(self, make_info) -> None:
        info = make_info(surname="Petrović", floor="5")
        for clone in (copy.copy(info), copy.deepcopy(info)):
            assert clone == info
            assert hash(clone) == hash(info)
            assert clone.floor == "5"

    def test_fields_cannot_be_reassigned(self, make_info) -> None:
        info = make_info(surname="Petrović")
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.entries = ()

    def test_mapping_is_read_only(self, make_info) -> None:
        info = make_info(surname="Petrović")
        assert isinstance(info._fields, MappingProxyType)
        with pytest.raises(TypeError):
            info._fields[Tag.SURNAME] = "Jovanović"

    def test_equal_records_hash_equal(self, make_info) -> None:
        a = make_info(surname="Petrović", given_name="Petar")
        b = make_info(surname="Petrović", given_name="Petar")
        assert a == b
        assert hash(a) == hash(b)
        assert a != make_info(surname="Petrović")


# =============================================================================
# Accessors
# =============================================================================

class TestEidInfoAccessors:
    """Test get/has and typed properties."""

    def test_get_missing_returns_none(self, empty_info: EidInfo) -> None:
        assert empty_info.get(Tag.SURNAME) is None
        assert empty_info.surname is None

    def test_has_false_for_everything_on_empty(self, empty_info: EidInfo) -> None:
        for tag in Tag:
            assert empty_info.has(tag) is False

    def test_empty_value_is_not_present(self, make_info) -> None:
        info = make_info(surname="")
        assert Tag.SURNAME in info
        assert info.get(Tag.SURNAME) == ""
        assert info.has(Tag.SURNAME) is False
        assert info.present_tags() == ()

    def test_typed_properties(self, full_info: EidInfo) -> None:
        for tag in Tag.data_tags():
            assert getattr(full_info, tag.name.lower()) == full_info.get(tag)
        assert full_info.personal_number == "0101990710006"
        assert full_info.apartment_number == "4"
        assert full_info.state_of_birth_code == "SRB"

    def test_container_protocol(self, full_info: EidInfo) -> None:
        assert len(full_info) == 29
        assert Tag.SURNAME in full_info
        assert Tag.NULL not in full_info
        assert dict(full_info)[Tag.GIVEN_NAME] == "Petar"

    def test_to_dict(self, make_info) -> None:
        info = make_info(surname="Petrović", floor="5")
        assert info.to_dict() == {"SURNAME": "Petrović", "FLOOR": "5"}

    def test_present_tags(self, make_info) -> None:
        info = make_info(surname="Petrović", house_letter="", floor="5")
        assert info.present_tags() == (Tag.SURNAME, Tag.FLOOR)


# =============================================================================
# Full Name
# =============================================================================

class TestNameFull:
    """Test get_name_full fixed-slot formatting."""

    def test_all_names(self, make_info) -> None:
        info = make_info(given_name="Petar", parent_given_name="Marko", surname="Petrović")
        assert info.get_name_full() == "Petar Marko Petrović"

    def test_only_surname_keeps_slots(self, make_info) -> None:
        assert make_info(surname="Petrović").get_name_full() == "  Petrović"

    def test_missing_parent_name(self, make_info) -> None:
        info = make_info(given_name="Petar", surname="Petrović")
        assert info.get_name_full() == "Petar  Petrović"

    def test_empty(self, empty_info: EidInfo) -> None:
        assert empty_info.get_name_full() == "  "


# =============================================================================
# Place of Residence
# =============================================================================

class TestPlaceFull:
    """Test get_place_full address assembly."""

    def test_short_form(self, short_address_info: EidInfo) -> None:
        assert short_address_info.get_place_full("ulaz %s", "%s. sprat", "br. %s") == (
            "Main street 11A/4\nBeograd, Savski Venac\nREPUBLIKA SRBIJA"
        )

    def test_short_form_ignores_apartment_format(self, make_info) -> None:
        info = make_info(street="Main street", house_number="11", house_letter="A", apartment_number="4")
        assert info.get_place_full(None, None, "br. %s") == "Main street 11A/4\n"

    def test_long_form(self, make_info) -> None:
        info = make_info(
            street="Main street",
            house_number="11",
            house_letter="A",
            entrance="2",
            floor="5",
            apartment_number="4",
        )
        assert info.get_place_full("ulaz %s", "%s. sprat", "br. %s") == (
            "Main street 11A ulaz 2, 5. sprat, br. 4\n"
        )

    def test_long_form_with_floor_only(self, make_info) -> None:
        info = make_info(street="Main street", house_number="11", floor="5", apartment_number="4")
        assert info.get_place_full("ulaz %s", "%s. sprat", "br. %s") == (
            "Main street 11, 5. sprat, br. 4\n"
        )

    def test_long_form_with_entrance_only(self, make_info) -> None:
        info = make_info(street="Main street", house_number="11", entrance="2", apartment_number="4")
        assert info.get_place_full("ulaz %s", "%s. sprat", "br. %s") == (
            "Main street 11 ulaz 2, br. 4\n"
        )

    def test_empty_entrance_counts_as_absent(self, make_info) -> None:
        info = make_info(street="Main street", house_number="11", entrance="", apartment_number="4")
        assert info.get_place_full("ulaz %s", "%s. sprat", "br. %s") == "Main street 11/4\n"

    def test_empty_floor_format_renders_raw_value(self, make_info) -> None:
        info = make_info(street="Main street", house_number="11", entrance="2", floor="5", apartment_number="4")
        assert info.get_place_full("ulaz %s", "", "br. %s") == (
            "Main street 11 ulaz 2, 5, br. 4\n"
        )

    @pytest.mark.parametrize("bad_format", [None, "", "sprat"])
    @pytest.mark.parametrize("position,expected", [
        (0, " 2, 5. sprat, br. 4\n"),
        (1, " ulaz 2, 5, br. 4\n"),
        (2, " ulaz 2, 5. sprat, 4\n"),
    ])
    def test_formats_sanitized_independently(
        self, make_info, bad_format, position: int, expected: str
    ) -> None:
        formats = ["ulaz %s", "%s. sprat", "br. %s"]
        formats[position] = bad_format
        info = make_info(entrance="2", floor="5", apartment_number="4")
        assert info.get_place_full(*formats) == expected

    def test_defaults_render_bare_values(self, make_info) -> None:
        info = make_info(street="Main street", house_number="11", entrance="2", floor="5", apartment_number="4")
        assert info.get_place_full() == "Main street 11 2, 5, 4\n"

    def test_stray_percent_in_format_does_not_raise(self, make_info) -> None:
        info = make_info(floor="5")
        assert info.get_place_full(None, "%s% sprat", None) == ", 5% sprat\n"

    def test_house_number_without_street(self, make_info) -> None:
        info = make_info(house_number="11", house_letter="A")
        assert info.get_place_full() == " 11A\n"

    def test_street_without_house_number(self, make_info) -> None:
        info = make_info(street="Main street", house_letter="A")
        assert info.get_place_full() == "Main streetA\n"

    def test_serbia_spelled_out(self, make_info) -> None:
        assert make_info(state="SRB").get_place_full() == "\nREPUBLIKA SRBIJA"

    @pytest.mark.parametrize("state", ["MNE", "srb", "SRB ", "Srbija"])
    def test_other_states_unchanged(self, make_info, state: str) -> None:
        assert make_info(state=state).get_place_full() == f"\n{state}"

    def test_place_and_community(self, make_info) -> None:
        info = make_info(place="Beograd", community="Savski Venac", state="MNE")
        assert info.get_place_full() == "\nBeograd, Savski Venac\nMNE"

    def test_community_without_place(self, make_info) -> None:
        assert make_info(community="Savski Venac").get_place_full() == ", Savski Venac\n"

    def test_empty_record(self, empty_info: EidInfo) -> None:
        assert empty_info.get_place_full("ulaz %s", "%s. sprat", "br. %s") == "\n"

    def test_with_labels(self, full_info: EidInfo) -> None:
        assert full_info.get_place_full_with(AddressLabels.serbian_latin()) == (
            "Main street 11A ulaz 2, 5. sprat, br. 4\n"
            "Beograd, Savski Venac\n"
            "REPUBLIKA SRBIJA"
        )


# =============================================================================
# Place of Birth
# =============================================================================

class TestPlaceOfBirthFull:
    """Test get_place_of_birth_full."""

    def test_all_parts(self, make_info) -> None:
        info = make_info(
            place_of_birth="Beograd",
            community_of_birth="Savski Venac",
            state_of_birth="Republika Srbija",
        )
        assert info.get_place_of_birth_full() == "Beograd, Savski Venac\nRepublika Srbija"

    def test_place_only(self, make_info) -> None:
        assert make_info(place_of_birth="Beograd").get_place_of_birth_full() == "Beograd"

    def test_without_community(self, make_info) -> None:
        info = make_info(place_of_birth="Beograd", state_of_birth="Republika Srbija")
        assert info.get_place_of_birth_full() == "Beograd\nRepublika Srbija"

    def test_empty_community_skipped(self, make_info) -> None:
        info = make_info(place_of_birth="Beograd", community_of_birth="")
        assert info.get_place_of_birth_full() == "Beograd"

    def test_empty_record(self, empty_info: EidInfo) -> None:
        assert empty_info.get_place_of_birth_full() == ""


# =============================================================================
# Debug Output
# =============================================================================

class TestDebugOutput:
    """Test __str__ and __repr__."""

    def test_str_concatenates_present_fields(self, make_info) -> None:
        info = make_info(surname="Petrović", house_letter="", floor="5")
        assert str(info) == "Surname: PetrovićFloor number: 5"

    def test_str_empty(self, empty_info: EidInfo) -> None:
        assert str(empty_info) == ""

    def test_repr_hides_values(self, make_info) -> None:
        info = make_info(surname="Petrović", personal_number="1234567890123")
        text = repr(info)
        assert "SURNAME" in text
        assert "PERSONAL_NUMBER" in text
        assert "Petrović" not in text
        assert "1234567890123" not in text
