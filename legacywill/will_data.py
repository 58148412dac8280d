"""
Will Data Model

Immutable representation of a will in progress: testator, family,
beneficiaries, assets, executors, guardianship appointments, special
instructions and witnesses.

Every update helper returns a new WillUserData snapshot; nothing here
performs I/O. from_dict is tolerant of partially filled wizard payloads:
unknown enum values and malformed dates become None and are reported by
the validator rather than raised here.
"""

import math
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar

from legacywill.jurisdictions import WillType
from legacywill.utils import parse_date


E = TypeVar('E', bound=Enum)
T = TypeVar('T')

RESIDUARY_POOL = None


class MaritalStatus(str, Enum):
    SINGLE = 'single'
    MARRIED = 'married'
    DIVORCED = 'divorced'
    WIDOWED = 'widowed'
    PARTNERSHIP = 'partnership'


class Relationship(str, Enum):
    SPOUSE = 'spouse'
    CHILD = 'child'
    PARENT = 'parent'
    SIBLING = 'sibling'
    GRANDCHILD = 'grandchild'
    FRIEND = 'friend'
    CHARITY = 'charity'
    OTHER = 'other'


class ShareType(str, Enum):
    PERCENTAGE = 'percentage'
    SPECIFIC_AMOUNT = 'specific_amount'
    SPECIFIC_ASSETS = 'specific_assets'
    REMAINDER = 'remainder'


class AssetType(str, Enum):
    REAL_ESTATE = 'real_estate'
    BANK_ACCOUNT = 'bank_account'
    INVESTMENT = 'investment'
    VEHICLE = 'vehicle'
    BUSINESS = 'business'
    PERSONAL_PROPERTY = 'personal_property'
    DIGITAL_ASSET = 'digital_asset'
    OTHER = 'other'


class ExecutorRole(str, Enum):
    PRIMARY = 'primary'
    ALTERNATE = 'alternate'
    CO_EXECUTOR = 'co_executor'


class InstructionCategory(str, Enum):
    FUNERAL = 'funeral'
    BURIAL = 'burial'
    ORGAN_DONATION = 'organ_donation'
    PET_CARE = 'pet_care'
    DIGITAL_ASSETS = 'digital_assets'
    BUSINESS_SUCCESSION = 'business_succession'
    CHARITABLE_GIVING = 'charitable_giving'
    PERSONAL_MESSAGE = 'personal_message'
    OTHER = 'other'


class Priority(str, Enum):
    HIGH = 'high'
    MEDIUM = 'medium'
    LOW = 'low'


class DetailLevel(str, Enum):
    BASIC = 'basic'
    DETAILED = 'detailed'
    COMPREHENSIVE = 'comprehensive'


class LanguageStyle(str, Enum):
    FORMAL = 'formal'
    SIMPLIFIED = 'simplified'
    TRADITIONAL = 'traditional'


class BeneficiaryCategory(str, Enum):
    """Beneficiary classification stored on the will record."""
    PRIMARY = 'primary'
    SECONDARY = 'secondary'
    CONTINGENT = 'contingent'
    CHARITABLE = 'charitable'


class RecordWillType(str, Enum):
    """Coarse will classification stored on the will record."""
    SIMPLE = 'simple'
    DETAILED = 'detailed'
    INTERNATIONAL = 'international'
    TRUST = 'trust'


def _enum(enum_cls: Type[E], value: Any) -> Optional[E]:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _text(value: Any) -> str:
    if value is None:
        return ''
    return str(value).strip()


def _number(value: Any) -> Optional[float]:
    if value is None or value == '' or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # NaN and infinity are treated as missing
    return number if math.isfinite(number) else None


def _bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() in ('true', '1', 'yes', 'on')
    return bool(value)


def _strings(values: Any) -> Tuple[str, ...]:
    if not values:
        return ()
    if isinstance(values, str):
        values = [values]
    return tuple(_text(v) for v in values if _text(v))


def _items(values: Any, factory: Callable[[Dict[str, Any]], T]) -> Tuple[T, ...]:
    if not values:
        return ()
    return tuple(factory(v) for v in values if isinstance(v, Mapping))


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


def _value(enum_value: Optional[Enum]) -> Optional[str]:
    return enum_value.value if enum_value is not None else None


@dataclass(frozen=True)
class Address:
    street: str = ''
    city: str = ''
    postal_code: str = ''
    country: str = ''
    region: str = ''

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'Address':
        if not data:
            return cls()
        return cls(
            street=_text(data.get('street')),
            city=_text(data.get('city')),
            postal_code=_text(data.get('postal_code')),
            country=_text(data.get('country')),
            region=_text(data.get('region')),
        )

    def is_complete(self) -> bool:
        return all([self.street, self.city, self.postal_code, self.country])

    def to_single_line(self) -> str:
        locality = ' '.join(p for p in [self.postal_code, self.city] if p)
        parts = [p for p in [self.street, locality, self.region, self.country] if p]
        return ', '.join(parts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'street': self.street,
            'city': self.city,
            'postal_code': self.postal_code,
            'country': self.country,
            'region': self.region,
        }


@dataclass(frozen=True)
class ContactInfo:
    email: str = ''
    phone: str = ''

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'ContactInfo':
        if not data:
            return cls()
        return cls(email=_text(data.get('email')), phone=_text(data.get('phone')))

    def to_dict(self) -> Dict[str, Any]:
        return {'email': self.email, 'phone': self.phone}


@dataclass(frozen=True)
class PersonalInfo:
    """The testator."""
    full_name: str = ''
    date_of_birth: Optional[date] = None
    place_of_birth: str = ''
    personal_id: str = ''
    citizenship: str = ''
    address: Address = field(default_factory=Address)
    marital_status: Optional[MaritalStatus] = None
    profession: str = ''

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'PersonalInfo':
        if not data:
            return cls()
        return cls(
            full_name=_text(data.get('full_name')),
            date_of_birth=parse_date(data.get('date_of_birth')),
            place_of_birth=_text(data.get('place_of_birth')),
            personal_id=_text(data.get('personal_id')),
            citizenship=_text(data.get('citizenship')),
            address=Address.from_dict(data.get('address')),
            marital_status=_enum(MaritalStatus, data.get('marital_status')),
            profession=_text(data.get('profession')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'full_name': self.full_name,
            'date_of_birth': _iso(self.date_of_birth),
            'place_of_birth': self.place_of_birth,
            'personal_id': self.personal_id,
            'citizenship': self.citizenship,
            'address': self.address.to_dict(),
            'marital_status': _value(self.marital_status),
            'profession': self.profession,
        }


@dataclass(frozen=True)
class FamilyMember:
    full_name: str = ''
    date_of_birth: Optional[date] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'FamilyMember':
        if not data:
            return cls()
        return cls(
            full_name=_text(data.get('full_name')),
            date_of_birth=parse_date(data.get('date_of_birth')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'full_name': self.full_name, 'date_of_birth': _iso(self.date_of_birth)}


@dataclass(frozen=True)
class Child:
    """A child of the testator. An explicit is_minor flag wins over the computed age."""
    id: str = ''
    full_name: str = ''
    date_of_birth: Optional[date] = None
    is_minor: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Child':
        flag = data.get('is_minor')
        return cls(
            id=_text(data.get('id')),
            full_name=_text(data.get('full_name')),
            date_of_birth=parse_date(data.get('date_of_birth')),
            is_minor=None if flag is None else _bool(flag),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'full_name': self.full_name,
            'date_of_birth': _iso(self.date_of_birth),
            'is_minor': self.is_minor,
        }


@dataclass(frozen=True)
class FamilyInfo:
    spouse: Optional[FamilyMember] = None
    children: Tuple[Child, ...] = ()
    parents: Tuple[FamilyMember, ...] = ()
    siblings: Tuple[FamilyMember, ...] = ()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'FamilyInfo':
        if not data:
            return cls()
        spouse = data.get('spouse')
        return cls(
            spouse=FamilyMember.from_dict(spouse) if spouse else None,
            children=_items(data.get('children'), Child.from_dict),
            parents=_items(data.get('parents'), FamilyMember.from_dict),
            siblings=_items(data.get('siblings'), FamilyMember.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'spouse': self.spouse.to_dict() if self.spouse else None,
            'children': [c.to_dict() for c in self.children],
            'parents': [p.to_dict() for p in self.parents],
            'siblings': [s.to_dict() for s in self.siblings],
        }


@dataclass(frozen=True)
class Share:
    """
    What a beneficiary receives.

    A percentage share without asset_ids is a share of the residuary
    estate; with asset_ids it is a share of each named asset.
    """
    type: Optional[ShareType] = None
    value: Optional[float] = None
    asset_ids: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'Share':
        if not data:
            return cls()
        return cls(
            type=_enum(ShareType, data.get('type')),
            value=_number(data.get('value')),
            asset_ids=tuple(dict.fromkeys(_strings(data.get('asset_ids')))),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'type': _value(self.type), 'value': self.value, 'asset_ids': list(self.asset_ids)}


@dataclass(frozen=True)
class Beneficiary:
    id: str = ''
    name: str = ''
    relationship: Optional[Relationship] = None
    date_of_birth: Optional[date] = None
    address: Address = field(default_factory=Address)
    contact: ContactInfo = field(default_factory=ContactInfo)
    share: Share = field(default_factory=Share)
    conditions: Tuple[str, ...] = ()
    alternate_beneficiary_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Beneficiary':
        return cls(
            id=_text(data.get('id')),
            name=_text(data.get('name')),
            relationship=_enum(Relationship, data.get('relationship')),
            date_of_birth=parse_date(data.get('date_of_birth')),
            address=Address.from_dict(data.get('address')),
            contact=ContactInfo.from_dict(data.get('contact')),
            share=Share.from_dict(data.get('share')),
            conditions=_strings(data.get('conditions')),
            alternate_beneficiary_id=_text(data.get('alternate_beneficiary_id')) or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'relationship': _value(self.relationship),
            'date_of_birth': _iso(self.date_of_birth),
            'address': self.address.to_dict(),
            'contact': self.contact.to_dict(),
            'share': self.share.to_dict(),
            'conditions': list(self.conditions),
            'alternate_beneficiary_id': self.alternate_beneficiary_id,
        }


@dataclass(frozen=True)
class Asset:
    id: str = ''
    type: Optional[AssetType] = None
    description: str = ''
    value: Optional[float] = None
    currency: str = ''
    location: str = ''
    ownership_percentage: float = 100.0
    encumbrances: str = ''

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Asset':
        ownership = _number(data.get('ownership_percentage'))
        return cls(
            id=_text(data.get('id')),
            type=_enum(AssetType, data.get('type')),
            description=_text(data.get('description')),
            value=_number(data.get('value')),
            currency=_text(data.get('currency')),
            location=_text(data.get('location')),
            ownership_percentage=100.0 if ownership is None else ownership,
            encumbrances=_text(data.get('encumbrances')),
        )

    @property
    def is_partially_owned(self) -> bool:
        return self.ownership_percentage < 100.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'type': _value(self.type),
            'description': self.description,
            'value': self.value,
            'currency': self.currency,
            'location': self.location,
            'ownership_percentage': self.ownership_percentage,
            'encumbrances': self.encumbrances,
        }


@dataclass(frozen=True)
class Executor:
    id: str = ''
    role: Optional[ExecutorRole] = None
    name: str = ''
    relationship: str = ''
    address: Address = field(default_factory=Address)
    contact: ContactInfo = field(default_factory=ContactInfo)
    is_professional: bool = False
    compensation: str = ''
    powers: Tuple[str, ...] = ()
    restrictions: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Executor':
        return cls(
            id=_text(data.get('id')),
            role=_enum(ExecutorRole, data.get('role')),
            name=_text(data.get('name')),
            relationship=_text(data.get('relationship')),
            address=Address.from_dict(data.get('address')),
            contact=ContactInfo.from_dict(data.get('contact')),
            is_professional=_bool(data.get('is_professional', False)),
            compensation=_text(data.get('compensation')),
            powers=_strings(data.get('powers')),
            restrictions=_strings(data.get('restrictions')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'role': _value(self.role),
            'name': self.name,
            'relationship': self.relationship,
            'address': self.address.to_dict(),
            'contact': self.contact.to_dict(),
            'is_professional': self.is_professional,
            'compensation': self.compensation,
            'powers': list(self.powers),
            'restrictions': list(self.restrictions),
        }


@dataclass(frozen=True)
class Guardian:
    name: str = ''
    relationship: str = ''
    contact: ContactInfo = field(default_factory=ContactInfo)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional['Guardian']:
        if not data:
            return None
        return cls(
            name=_text(data.get('name')),
            relationship=_text(data.get('relationship')),
            contact=ContactInfo.from_dict(data.get('contact')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'relationship': self.relationship, 'contact': self.contact.to_dict()}


@dataclass(frozen=True)
class GuardianshipAppointment:
    child_id: str = ''
    child_name: str = ''
    primary_guardian: Optional[Guardian] = None
    alternate_guardian: Optional[Guardian] = None
    special_instructions: str = ''
    financial_provisions: str = ''
    education_wishes: str = ''

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'GuardianshipAppointment':
        return cls(
            child_id=_text(data.get('child_id')),
            child_name=_text(data.get('child_name')),
            primary_guardian=Guardian.from_dict(data.get('primary_guardian')),
            alternate_guardian=Guardian.from_dict(data.get('alternate_guardian')),
            special_instructions=_text(data.get('special_instructions')),
            financial_provisions=_text(data.get('financial_provisions')),
            education_wishes=_text(data.get('education_wishes')),
        )

    @property
    def names_primary_guardian(self) -> bool:
        return self.primary_guardian is not None and bool(self.primary_guardian.name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'child_id': self.child_id,
            'child_name': self.child_name,
            'primary_guardian': self.primary_guardian.to_dict() if self.primary_guardian else None,
            'alternate_guardian': self.alternate_guardian.to_dict() if self.alternate_guardian else None,
            'special_instructions': self.special_instructions,
            'financial_provisions': self.financial_provisions,
            'education_wishes': self.education_wishes,
        }


@dataclass(frozen=True)
class SpecialInstruction:
    id: str = ''
    category: Optional[InstructionCategory] = None
    title: str = ''
    content: str = ''
    priority: Priority = Priority.MEDIUM
    recipient: str = ''

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SpecialInstruction':
        return cls(
            id=_text(data.get('id')),
            category=_enum(InstructionCategory, data.get('category')),
            title=_text(data.get('title')),
            content=_text(data.get('content')),
            priority=_enum(Priority, data.get('priority')) or Priority.MEDIUM,
            recipient=_text(data.get('recipient')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'category': _value(self.category),
            'title': self.title,
            'content': self.content,
            'priority': self.priority.value,
            'recipient': self.recipient,
        }


@dataclass(frozen=True)
class Witness:
    id: str = ''
    name: str = ''
    date_of_birth: Optional[date] = None
    address: Address = field(default_factory=Address)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Witness':
        return cls(
            id=_text(data.get('id')),
            name=_text(data.get('name')),
            date_of_birth=parse_date(data.get('date_of_birth')),
            address=Address.from_dict(data.get('address')),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'date_of_birth': _iso(self.date_of_birth),
            'address': self.address.to_dict(),
        }


@dataclass(frozen=True)
class GenerationPreferences:
    include_optional_clauses: bool = True
    detail_level: DetailLevel = DetailLevel.DETAILED
    language_style: LanguageStyle = LanguageStyle.FORMAL
    include_legal_explanations: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'GenerationPreferences':
        if not data:
            return cls()
        return cls(
            include_optional_clauses=_bool(data.get('include_optional_clauses', True)),
            detail_level=_enum(DetailLevel, data.get('detail_level')) or DetailLevel.DETAILED,
            language_style=_enum(LanguageStyle, data.get('language_style')) or LanguageStyle.FORMAL,
            include_legal_explanations=_bool(data.get('include_legal_explanations', False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'include_optional_clauses': self.include_optional_clauses,
            'detail_level': self.detail_level.value,
            'language_style': self.language_style.value,
            'include_legal_explanations': self.include_legal_explanations,
        }


@dataclass(frozen=True)
class WillUserData:
    """Snapshot of everything the testator has entered."""
    personal: PersonalInfo = field(default_factory=PersonalInfo)
    family: FamilyInfo = field(default_factory=FamilyInfo)
    assets: Tuple[Asset, ...] = ()
    beneficiaries: Tuple[Beneficiary, ...] = ()
    executors: Tuple[Executor, ...] = ()
    guardians: Tuple[GuardianshipAppointment, ...] = ()
    special_instructions: Tuple[SpecialInstruction, ...] = ()
    witnesses: Tuple[Witness, ...] = ()
    no_assets_declared: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'WillUserData':
        if not data:
            return cls()
        return cls(
            personal=PersonalInfo.from_dict(data.get('personal')),
            family=FamilyInfo.from_dict(data.get('family')),
            assets=_items(data.get('assets'), Asset.from_dict),
            beneficiaries=_items(data.get('beneficiaries'), Beneficiary.from_dict),
            executors=_items(data.get('executors'), Executor.from_dict),
            guardians=_items(data.get('guardians'), GuardianshipAppointment.from_dict),
            special_instructions=_items(data.get('special_instructions'), SpecialInstruction.from_dict),
            witnesses=_items(data.get('witnesses'), Witness.from_dict),
            no_assets_declared=_bool(data.get('no_assets_declared', False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'personal': self.personal.to_dict(),
            'family': self.family.to_dict(),
            'assets': [a.to_dict() for a in self.assets],
            'beneficiaries': [b.to_dict() for b in self.beneficiaries],
            'executors': [e.to_dict() for e in self.executors],
            'guardians': [g.to_dict() for g in self.guardians],
            'special_instructions': [s.to_dict() for s in self.special_instructions],
            'witnesses': [w.to_dict() for w in self.witnesses],
            'no_assets_declared': self.no_assets_declared,
        }

    def get_asset(self, asset_id: str) -> Optional[Asset]:
        for asset in self.assets:
            if asset.id == asset_id:
                return asset
        return None

    def get_beneficiary(self, beneficiary_id: str) -> Optional[Beneficiary]:
        for beneficiary in self.beneficiaries:
            if beneficiary.id == beneficiary_id:
                return beneficiary
        return None

    @property
    def primary_executors(self) -> List[Executor]:
        return [e for e in self.executors if e.role == ExecutorRole.PRIMARY]

    @property
    def remainder_beneficiaries(self) -> List[Beneficiary]:
        return [b for b in self.beneficiaries if b.share.type == ShareType.REMAINDER]


# Pure update operations

def _upsert(items: Tuple[T, ...], item: T, key: Callable[[T], Any]) -> Tuple[T, ...]:
    """Replace the element with the same key in place, else append."""
    item_key = key(item)
    if item_key:
        for index, existing in enumerate(items):
            if key(existing) == item_key:
                return items[:index] + (item,) + items[index + 1:]
    return items + (item,)


def _without(items: Tuple[T, ...], item_key: Any, key: Callable[[T], Any]) -> Tuple[T, ...]:
    return tuple(i for i in items if key(i) != item_key)


def _by_id(item: Any) -> str:
    return item.id


def _by_child(item: GuardianshipAppointment) -> str:
    return item.child_id


def with_personal(will: WillUserData, personal: PersonalInfo) -> WillUserData:
    return replace(will, personal=personal)


def with_family(will: WillUserData, family: FamilyInfo) -> WillUserData:
    return replace(will, family=family)


def with_beneficiary(will: WillUserData, beneficiary: Beneficiary) -> WillUserData:
    return replace(will, beneficiaries=_upsert(will.beneficiaries, beneficiary, _by_id))


def remove_beneficiary(will: WillUserData, beneficiary_id: str) -> WillUserData:
    return replace(will, beneficiaries=_without(will.beneficiaries, beneficiary_id, _by_id))


def with_asset(will: WillUserData, asset: Asset) -> WillUserData:
    return replace(will, assets=_upsert(will.assets, asset, _by_id))


def remove_asset(will: WillUserData, asset_id: str) -> WillUserData:
    """Remove an asset. Shares still naming it are left for the validator to flag."""
    return replace(will, assets=_without(will.assets, asset_id, _by_id))


def with_executor(will: WillUserData, executor: Executor) -> WillUserData:
    return replace(will, executors=_upsert(will.executors, executor, _by_id))


def remove_executor(will: WillUserData, executor_id: str) -> WillUserData:
    return replace(will, executors=_without(will.executors, executor_id, _by_id))


def with_guardianship(will: WillUserData, appointment: GuardianshipAppointment) -> WillUserData:
    return replace(will, guardians=_upsert(will.guardians, appointment, _by_child))


def remove_guardianship(will: WillUserData, child_id: str) -> WillUserData:
    return replace(will, guardians=_without(will.guardians, child_id, _by_child))


def with_special_instruction(will: WillUserData, instruction: SpecialInstruction) -> WillUserData:
    return replace(will, special_instructions=_upsert(will.special_instructions, instruction, _by_id))


def remove_special_instruction(will: WillUserData, instruction_id: str) -> WillUserData:
    return replace(will, special_instructions=_without(will.special_instructions, instruction_id, _by_id))


def with_witness(will: WillUserData, witness: Witness) -> WillUserData:
    return replace(will, witnesses=_upsert(will.witnesses, witness, _by_id))


def remove_witness(will: WillUserData, witness_id: str) -> WillUserData:
    return replace(will, witnesses=_without(will.witnesses, witness_id, _by_id))


# Share arithmetic

def percentage_pools(will: WillUserData) -> Dict[Optional[str], List[Beneficiary]]:
    """
    Group percentage-share beneficiaries by the pool they draw from.

    The residuary estate is keyed by None; specific assets by asset id.
    Pools are returned in first-seen order.
    """
    pools: Dict[Optional[str], List[Beneficiary]] = {}
    for beneficiary in will.beneficiaries:
        share = beneficiary.share
        if share.type != ShareType.PERCENTAGE:
            continue
        # an asset named twice is still one share of it
        targets: Iterable[Optional[str]] = dict.fromkeys(share.asset_ids) or (RESIDUARY_POOL,)
        for target in targets:
            pools.setdefault(target, []).append(beneficiary)
    return pools


def compute_total_allocated_share(will: WillUserData, asset_id: Optional[str] = None) -> float:
    """Sum of percentage shares on one asset, or on the residuary estate when asset_id is None."""
    total = 0.0
    for beneficiary in percentage_pools(will).get(asset_id, []):
        if beneficiary.share.value is not None:
            total += beneficiary.share.value
    return total


# Total mappings over closed enumerations

_BENEFICIARY_CATEGORIES: Dict[Relationship, BeneficiaryCategory] = {
    Relationship.SPOUSE: BeneficiaryCategory.PRIMARY,
    Relationship.CHILD: BeneficiaryCategory.PRIMARY,
    Relationship.PARENT: BeneficiaryCategory.PRIMARY,
    Relationship.SIBLING: BeneficiaryCategory.SECONDARY,
    Relationship.GRANDCHILD: BeneficiaryCategory.SECONDARY,
    Relationship.FRIEND: BeneficiaryCategory.SECONDARY,
    Relationship.CHARITY: BeneficiaryCategory.CHARITABLE,
    Relationship.OTHER: BeneficiaryCategory.CONTINGENT,
}

_RECORD_WILL_TYPES: Dict[WillType, RecordWillType] = {
    WillType.HOLOGRAPHIC: RecordWillType.SIMPLE,
    WillType.ALLOGRAPHIC: RecordWillType.DETAILED,
    WillType.WITNESSED: RecordWillType.DETAILED,
    WillType.NOTARIAL: RecordWillType.INTERNATIONAL,
}


def _check_exhaustive(mapping: Mapping[Enum, Any], enum_cls: Type[Enum]) -> None:
    missing = [member.value for member in enum_cls if member not in mapping]
    if missing:
        raise RuntimeError(f'{enum_cls.__name__} members without a mapping: {", ".join(missing)}')


_check_exhaustive(_BENEFICIARY_CATEGORIES, Relationship)
_check_exhaustive(_RECORD_WILL_TYPES, WillType)


def beneficiary_category(relationship: Relationship) -> BeneficiaryCategory:
    return _BENEFICIARY_CATEGORIES[relationship]


def record_will_type(will_type: WillType) -> RecordWillType:
    return _RECORD_WILL_TYPES[will_type]
