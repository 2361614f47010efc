# -*- coding: utf-8 -*-
"""
Registration form model.

Holds everything the registration wizard collects. The nested address is
a typed record with explicit setters; error keys for it are the dotted
names ``address.city`` and ``address.country``.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict

from app.config import Config

ADDRESS_CITY = "address.city"
ADDRESS_COUNTRY = "address.country"
ADDRESS_STREET = "address.street"


@dataclass
class Address:
    street: str = ""
    city: str = ""
    country: str = ""

    def set_street(self, value: str):
        self.street = value

    def set_city(self, value: str):
        self.city = value

    def set_country(self, value: str):
        self.country = value


@dataclass
class RegistrationForm:
    """Mutable registration record owned by the wizard."""

    # Basic Info
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    role: str = "student"

    # Contact Info
    contact_number: str = ""
    alternative_number: str = ""
    address: Address = field(default_factory=Address)

    # Student-specific
    year: str = ""
    session: str = ""
    nationality: str = ""
    school: str = ""
    is_retaker: bool = False
    parent_contact_number: str = ""
    tech_knowledge: int = Config.DEFAULT_TECH_KNOWLEDGE
    other_subjects: str = ""

    def set_field(self, name: str, value: Any):
        """
        Write a wizard field.

        Address fields are routed to their setters; any other name must be
        a flat attribute of the form.
        """
        address_setters = {
            ADDRESS_STREET: self.address.set_street,
            ADDRESS_CITY: self.address.set_city,
            ADDRESS_COUNTRY: self.address.set_country,
        }
        if name in address_setters:
            address_setters[name](value)
            return
        if name not in FLAT_FIELD_NAMES:
            raise KeyError(f"Unknown registration field: {name}")
        setattr(self, name, value)

    def get_field(self, name: str) -> Any:
        if name == ADDRESS_STREET:
            return self.address.street
        if name == ADDRESS_CITY:
            return self.address.city
        if name == ADDRESS_COUNTRY:
            return self.address.country
        if name not in FLAT_FIELD_NAMES:
            raise KeyError(f"Unknown registration field: {name}")
        return getattr(self, name)

    def reset(self):
        """Restore every field to its initial value."""
        defaults = RegistrationForm()
        for f in fields(self):
            setattr(self, f.name, getattr(defaults, f.name))

    def to_payload(self) -> Dict[str, Any]:
        """Map the form to the registration endpoint's request body."""
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "year": self.year,
            "nationality": self.nationality,
            "city": self.address.city,
            "school": self.school,
            "session": self.session,
            "isRetaker": bool(self.is_retaker),
            "email": self.email,
            "contactNumber": self.contact_number,
            "parentNumber": self.parent_contact_number,
            "techKnowledge": _to_int(self.tech_knowledge, Config.DEFAULT_TECH_KNOWLEDGE),
            "otherSubjects": self.other_subjects or "",
            "password": self.password,
        }


def _to_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


FLAT_FIELD_NAMES = frozenset(f.name for f in fields(RegistrationForm) if f.name != "address")

FIELD_NAMES = tuple(sorted(FLAT_FIELD_NAMES)) + (ADDRESS_STREET, ADDRESS_CITY, ADDRESS_COUNTRY)


@dataclass
class PendingRegistration:
    """A submitted registration awaiting teacher approval."""

    id: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    year: str = ""
    session: str = ""
    school: str = ""
    city: str = ""
    nationality: str = ""
    contact_number: str = ""
    tech_knowledge: int = 0
    is_retaker: bool = False
    created_at: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'PendingRegistration':
        return cls(
            id=str(data.get("_id") or data.get("id") or ""),
            first_name=data.get("firstName") or "",
            last_name=data.get("lastName") or "",
            email=data.get("email") or "",
            year=str(data.get("year") or ""),
            session=data.get("session") or "",
            school=data.get("school") or "",
            city=data.get("city") or "",
            nationality=data.get("nationality") or "",
            contact_number=data.get("contactNumber") or "",
            tech_knowledge=_to_int(data.get("techKnowledge"), 0),
            is_retaker=bool(data.get("isRetaker")),
            created_at=data.get("createdAt") or "",
        )
