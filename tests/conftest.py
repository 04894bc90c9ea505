"""
Pytest configuration and fixtures for eidinfo tests.

Provides a record factory fixture and common records.
"""
from typing import Callable

import pytest

from eidinfo.models import EidInfo, EidInfoBuilder, Tag


# =============================================================================
# Factory Fixtures
# =============================================================================

@pytest.fixture
def make_info() -> Callable[..., EidInfo]:
    """
    Factory building an EidInfo from keyword arguments named after tags.

    Example:
        make_info(surname="Petrović", house_number="11")
    """
    def _make(**values: str) -> EidInfo:
        builder = EidInfoBuilder()
        for name, value in values.items():
            builder.add_value(Tag[name.upper()], value)
        return builder.build()

    return _make


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def empty_info() -> EidInfo:
    """Record with no fields at all."""
    return EidInfo.builder().build()


@pytest.fixture
def short_address_info(make_info) -> EidInfo:
    """Street address without entrance/floor (short form apartment)."""
    return make_info(
        street="Main street",
        house_number="11",
        house_letter="A",
        apartment_number="4",
        place="Beograd",
        community="Savski Venac",
        state="SRB",
    )


@pytest.fixture
def full_info(make_info) -> EidInfo:
    """Record with every field set, as read from a typical card."""
    return make_info(
        doc_reg_no="006123456",
        issuing_date="01.03.2019",
        expiry_date="01.03.2029",
        issuing_authority="PU ZA GRAD BEOGRAD",
        document_type="ID",
        document_serial_number="0123456789",
        chip_serial_number="1A2B3C4D",
        personal_number="0101990710006",
        surname="Petrović",
        given_name="Petar",
        parent_given_name="Marko",
        sex="M",
        nationality_full="SRPSKO",
        place_of_birth="Beograd",
        community_of_birth="Savski Venac",
        state_of_birth="Republika Srbija",
        state_of_birth_code="SRB",
        date_of_birth="01.01.1990",
        state="SRB",
        community="Savski Venac",
        place="Beograd",
        street="Main street",
        house_number="11",
        house_letter="A",
        entrance="2",
        floor="5",
        apartment_number="4",
        address_date="15.06.2015",
        address_label="ABC123",
    )
