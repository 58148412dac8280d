"""
Jurisdiction-aware validation of will data.

Validation Rules Documentation:
===============================

1. MANDATORY FIELDS
   - Testator full name, date of birth and complete address
     (street, city, postal code, country)
   - At least one beneficiary
   - At least one asset, or an explicit "no assets declared" acknowledgment
   - Each beneficiary: name, relationship and share type
   - Each asset: description; each executor: name
   - Ids must be unique within beneficiaries and assets

2. AGE
   - Date of birth may not lie in the future
   - Testator age must reach the jurisdiction minimum age (hard error)
   - Jurisdictions with "minors_notarial_only": testators under the age of
     majority may only make a notarial will

3. SHARE ARITHMETIC (per pool: residuary estate and each named asset)
   - Percentage values must lie in (0, 100]; fixed amounts must be positive
   - Pool total > 100% is an over-allocation error naming every beneficiary
   - Pool total < 100% with no remainder beneficiary is exactly one
     under-allocation warning
   - Pool total of exactly 100% produces nothing

4. REFERENTIAL INTEGRITY
   - Every asset id named by a share must exist
   - Specific-asset shares must name at least one asset
   - Alternate beneficiaries must exist and differ from the beneficiary

5. FORMALITIES
   - Witnesses required (by jurisdiction or by a witness-based will type)
     and fewer than the minimum recorded: warning
   - Witness restrictions (not a beneficiary, adult): warnings
   - Holographic will where not permitted: error
   - Notarization required but non-notarial form: warning
   - No primary executor, or more than one: warning

6. GUARDIANSHIP
   - A minor child (family member or child beneficiary) and no appointment
     naming a primary guardian: error and missing field "guardians"
   - Appointments that leave a named minor child uncovered: warning

7. FORCED HEIRSHIP
   - A spouse or child from the family data receiving no share, in a
     forced-heirship jurisdiction: warning per omitted heir

8. COMPLETENESS SCORE
   - 70 points for weighted presence of expected fields; a present field
     carrying errors earns half its weight
   - 30 points for integrity, minus one per warning, zero with any error
   - Clamped to [0, 100]

Every rule group always runs; nothing short-circuits.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from legacywill.jurisdictions import (
    FORMALITY_MINORS_NOTARIAL_ONLY,
    REFERENCE_CAPACITY,
    REFERENCE_FORCED_HEIRSHIP,
    REFERENCE_FORMS,
    REFERENCE_GUARDIANSHIP,
    REFERENCE_WITNESSES,
    RESTRICTION_ADULT,
    RESTRICTION_NOT_BENEFICIARY,
    JurisdictionConfig,
    WillType,
)
from legacywill.utils import age_on, format_percentage, is_minor, join_names
from legacywill.will_data import (
    ExecutorRole,
    Relationship,
    ShareType,
    WillUserData,
    compute_total_allocated_share,
    percentage_pools,
)


class Severity(str, Enum):
    ERROR = 'error'
    WARNING = 'warning'


@dataclass
class ValidationIssue:
    """A single validation error or warning with a precise field path."""
    field: str
    message: str
    code: str
    severity: Severity = Severity.ERROR
    legal_reference: Optional[str] = None
    suggested_fix: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'field': self.field,
            'message': self.message,
            'code': self.code,
            'severity': self.severity.value,
            'legal_reference': self.legal_reference,
            'suggested_fix': self.suggested_fix,
        }


@dataclass
class WillValidationResult:
    """Container for validation results."""
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    is_valid: bool = True
    completeness_score: int = 0
    legal_requirements_met: bool = True
    missing_required_fields: List[str] = field(default_factory=list)
    suggested_improvements: List[str] = field(default_factory=list)

    def add_error(self, field: str, message: str, code: str = 'invalid',
                  legal_reference: Optional[str] = None, suggested_fix: Optional[str] = None):
        """Add a validation error."""
        self.errors.append(ValidationIssue(
            field, message, code, Severity.ERROR, legal_reference, suggested_fix
        ))
        self.is_valid = False

    def add_warning(self, field: str, message: str, code: str = 'warning',
                    legal_reference: Optional[str] = None, suggested_fix: Optional[str] = None):
        """Add a non-blocking warning."""
        self.warnings.append(ValidationIssue(
            field, message, code, Severity.WARNING, legal_reference, suggested_fix
        ))

    def add_missing(self, field: str, message: str, code: str = 'required',
                    legal_reference: Optional[str] = None):
        """Add an error for an absent required field and record the field."""
        self.add_error(field, message, code, legal_reference)
        if field not in self.missing_required_fields:
            self.missing_required_fields.append(field)

    def suggest(self, improvement: str):
        if improvement not in self.suggested_improvements:
            self.suggested_improvements.append(improvement)

    def has_error(self, code: str) -> bool:
        return any(e.code == code for e in self.errors)

    def has_warning(self, code: str) -> bool:
        return any(w.code == code for w in self.warnings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON response."""
        return {
            'is_valid': self.is_valid,
            'completeness_score': self.completeness_score,
            'legal_requirements_met': self.legal_requirements_met,
            'errors': [e.to_dict() for e in self.errors],
            'warnings': [w.to_dict() for w in self.warnings],
            'missing_required_fields': list(self.missing_required_fields),
            'suggested_improvements': list(self.suggested_improvements),
        }


# Error and warning codes
REQUIRED = 'required'
DUPLICATE_ID = 'duplicate_id'
INVALID_DATE = 'invalid_date'
UNDER_MINIMUM_AGE = 'under_minimum_age'
NOTARIAL_FORM_REQUIRED = 'notarial_form_required'
INVALID_SHARE = 'invalid_share'
OVER_ALLOCATION = 'over_allocation'
UNDER_ALLOCATION = 'under_allocation'
DANGLING_ASSET_REFERENCE = 'dangling_asset_reference'
MISSING_SHARE_ASSETS = 'missing_share_assets'
INVALID_REFERENCE = 'invalid_reference'
INSUFFICIENT_WITNESSES = 'insufficient_witnesses'
WITNESS_IS_BENEFICIARY = 'witness_is_beneficiary'
WITNESS_IS_MINOR = 'witness_is_minor'
HOLOGRAPHIC_NOT_PERMITTED = 'holographic_not_permitted'
NOTARIZATION_REQUIRED = 'notarization_required'
MISSING_PRIMARY_EXECUTOR = 'missing_primary_executor'
MULTIPLE_PRIMARY_EXECUTORS = 'multiple_primary_executors'
MISSING_GUARDIAN = 'missing_guardian'
GUARDIANSHIP_INCOMPLETE = 'guardianship_incomplete'
FORCED_HEIRSHIP_REVIEW = 'forced_heirship_review'

# Errors that make the document legally ineffective
LEGAL_REQUIREMENT_CODES = frozenset([
    UNDER_MINIMUM_AGE, NOTARIAL_FORM_REQUIRED, HOLOGRAPHIC_NOT_PERMITTED, INVALID_DATE,
])
IDENTITY_FIELDS = frozenset(['personal.full_name', 'personal.date_of_birth'])

SHARE_TOLERANCE = 0.01
MAX_PERCENTAGE = 100.0

# Completeness weights of expected fields
FIELD_WEIGHTS: Dict[str, int] = {
    'personal.full_name': 10,
    'personal.date_of_birth': 10,
    'personal.address': 8,
    'personal.place_of_birth': 2,
    'personal.citizenship': 2,
    'personal.marital_status': 2,
    'beneficiaries': 12,
    'assets': 8,
    'executors': 8,
    'guardians': 4,
    'witnesses': 3,
}
PRESENCE_POINTS = 70
INTEGRITY_POINTS = 30


def validate(will: WillUserData, config: JurisdictionConfig,
             will_type: Optional[WillType] = None,
             as_of: Optional[date] = None) -> WillValidationResult:
    """
    Validate will data against a jurisdiction's rules.

    Args:
        will: Will data snapshot (may be partially filled)
        config: Jurisdiction configuration
        will_type: Chosen will form, when known
        as_of: Reference date for ages (defaults to today)

    Returns:
        WillValidationResult with every rule group applied
    """
    if as_of is None:
        as_of = date.today()

    result = WillValidationResult()

    _validate_mandatory_fields(will, result)
    _validate_age(will, config, will_type, as_of, result)
    _validate_shares(will, result)
    _validate_references(will, result)
    _validate_formalities(will, config, will_type, as_of, result)
    _validate_guardianship(will, config, as_of, result)
    _validate_forced_heirship(will, config, result)

    result.legal_requirements_met = not any(
        e.code in LEGAL_REQUIREMENT_CODES or e.field in IDENTITY_FIELDS
        for e in result.errors
    )
    result.completeness_score = calculate_completeness_score(will, config, will_type, as_of, result)

    return result


def _validate_mandatory_fields(will: WillUserData, result: WillValidationResult):
    personal = will.personal

    if not personal.full_name:
        result.add_missing('personal.full_name', 'Full name of the testator is required')

    if personal.date_of_birth is None:
        result.add_missing('personal.date_of_birth', 'Date of birth of the testator is required')

    if not personal.address.is_complete():
        missing_parts = [
            label for label, value in [
                ('street', personal.address.street),
                ('city', personal.address.city),
                ('postal code', personal.address.postal_code),
                ('country', personal.address.country),
            ] if not value
        ]
        result.add_missing(
            'personal.address',
            f'Address of the testator is incomplete (missing {", ".join(missing_parts)})'
        )

    if not will.beneficiaries:
        result.add_missing('beneficiaries', 'At least one beneficiary is required')

    if not will.assets and not will.no_assets_declared:
        result.add_missing(
            'assets',
            'List at least one asset or confirm that no assets are declared'
        )

    seen_beneficiaries = set()
    for i, beneficiary in enumerate(will.beneficiaries):
        prefix = f'beneficiaries[{i}]'
        if not beneficiary.name:
            result.add_missing(f'{prefix}.name', 'Beneficiary name is required')
        if beneficiary.relationship is None:
            result.add_missing(
                f'{prefix}.relationship',
                f'Relationship is required and must be one of: '
                f'{", ".join(r.value for r in Relationship)}'
            )
        if beneficiary.share.type is None:
            result.add_missing(f'{prefix}.share.type', 'Share type is required')
        if beneficiary.id:
            if beneficiary.id in seen_beneficiaries:
                result.add_error(f'{prefix}.id', f'Duplicate beneficiary id "{beneficiary.id}"', DUPLICATE_ID)
            seen_beneficiaries.add(beneficiary.id)

    seen_assets = set()
    for i, asset in enumerate(will.assets):
        prefix = f'assets[{i}]'
        if not asset.description:
            result.add_missing(f'{prefix}.description', 'Asset description is required')
        if asset.id:
            if asset.id in seen_assets:
                result.add_error(f'{prefix}.id', f'Duplicate asset id "{asset.id}"', DUPLICATE_ID)
            seen_assets.add(asset.id)

    for i, executor in enumerate(will.executors):
        if not executor.name:
            result.add_missing(f'executors[{i}].name', 'Executor name is required')


def _validate_age(will: WillUserData, config: JurisdictionConfig,
                  will_type: Optional[WillType], as_of: date, result: WillValidationResult):
    dob = will.personal.date_of_birth
    if dob is None:
        return

    if dob > as_of:
        result.add_error('personal.date_of_birth', 'Date of birth cannot be in the future', INVALID_DATE)
        return

    requirements = config.requirements
    age = age_on(dob, as_of)

    if age < requirements.minimum_age:
        result.add_error(
            'personal.date_of_birth',
            f'The testator must be at least {requirements.minimum_age} years old to make a will '
            f'in {config.country_name("en")} (current age {age})',
            UNDER_MINIMUM_AGE,
            legal_reference=config.legal_reference(REFERENCE_CAPACITY),
        )
        return

    if (FORMALITY_MINORS_NOTARIAL_ONLY in requirements.formal_requirements
            and age < requirements.age_of_majority
            and will_type != WillType.NOTARIAL):
        message = (
            f'A testator under {requirements.age_of_majority} may only make a notarial will '
            f'in {config.country_name("en")}'
        )
        if will_type is None:
            result.add_warning('personal.date_of_birth', message, NOTARIAL_FORM_REQUIRED,
                               legal_reference=config.legal_reference(REFERENCE_CAPACITY))
        else:
            result.add_error('personal.date_of_birth', message, NOTARIAL_FORM_REQUIRED,
                             legal_reference=config.legal_reference(REFERENCE_CAPACITY),
                             suggested_fix='Choose the notarial will form')


def _validate_shares(will: WillUserData, result: WillValidationResult):
    for i, beneficiary in enumerate(will.beneficiaries):
        share = beneficiary.share
        share_field = f'beneficiaries[{i}].share.value'

        if share.type == ShareType.PERCENTAGE:
            if share.value is None:
                result.add_missing(share_field, 'Percentage share requires a value')
            elif share.value <= 0 or share.value > MAX_PERCENTAGE:
                result.add_error(share_field, 'Percentage share must be greater than 0 and at most 100',
                                 INVALID_SHARE)

        elif share.type == ShareType.SPECIFIC_AMOUNT:
            if share.value is None or share.value <= 0:
                result.add_error(share_field, 'Specific amount must be a positive number', INVALID_SHARE)

    has_remainder = bool(will.remainder_beneficiaries)

    for pool, beneficiaries in percentage_pools(will).items():
        total = compute_total_allocated_share(will, pool)
        pool_label = 'the residuary estate' if pool is None else _asset_label(will, pool)
        names = join_names([b.name or b.id or '(unnamed)' for b in beneficiaries])

        if total > MAX_PERCENTAGE + SHARE_TOLERANCE:
            result.add_error(
                'beneficiaries',
                f'Percentage shares of {pool_label} total {format_percentage(total)} '
                f'and exceed 100% ({names})',
                OVER_ALLOCATION,
                suggested_fix='Reduce the shares so that they total 100%',
            )
        elif total < MAX_PERCENTAGE - SHARE_TOLERANCE and not has_remainder:
            result.add_warning(
                'beneficiaries',
                f'Percentage shares of {pool_label} total {format_percentage(total)}; '
                f'the unallocated part passes by statutory succession',
                UNDER_ALLOCATION,
                suggested_fix='Allocate the full 100% or name a remainder beneficiary',
            )
            result.suggest('Name a remainder beneficiary to receive any part of the estate not otherwise allocated')


def _asset_label(will: WillUserData, asset_id: str) -> str:
    asset = will.get_asset(asset_id)
    if asset and asset.description:
        return f'asset "{asset.description}"'
    return f'asset "{asset_id}"'


def _validate_references(will: WillUserData, result: WillValidationResult):
    asset_ids = {a.id for a in will.assets if a.id}
    beneficiary_ids = {b.id for b in will.beneficiaries if b.id}

    for i, beneficiary in enumerate(will.beneficiaries):
        share = beneficiary.share

        if share.type == ShareType.SPECIFIC_ASSETS and not share.asset_ids:
            result.add_error(
                f'beneficiaries[{i}].share.asset_ids',
                'A specific-assets share must name at least one asset',
                MISSING_SHARE_ASSETS,
            )

        for asset_id in share.asset_ids:
            if asset_id not in asset_ids:
                result.add_error(
                    f'beneficiaries[{i}].share.asset_ids',
                    f'Referenced asset "{asset_id}" does not exist',
                    DANGLING_ASSET_REFERENCE,
                )

        alternate = beneficiary.alternate_beneficiary_id
        if alternate:
            if alternate == beneficiary.id:
                result.add_error(
                    f'beneficiaries[{i}].alternate_beneficiary_id',
                    'A beneficiary cannot be their own alternate',
                    INVALID_REFERENCE,
                )
            elif alternate not in beneficiary_ids:
                result.add_error(
                    f'beneficiaries[{i}].alternate_beneficiary_id',
                    f'Alternate beneficiary "{alternate}" does not exist',
                    INVALID_REFERENCE,
                )


def _validate_formalities(will: WillUserData, config: JurisdictionConfig,
                          will_type: Optional[WillType], as_of: date,
                          result: WillValidationResult):
    requirements = config.requirements
    recorded = [w for w in will.witnesses if w.name]

    if config.requires_witnesses(will_type):
        minimum = config.minimum_witnesses(will_type)
        if len(recorded) < minimum:
            result.add_warning(
                'witnesses',
                f'{minimum} witnesses are required for this will but {len(recorded)} are recorded',
                INSUFFICIENT_WITNESSES,
                legal_reference=config.legal_reference(REFERENCE_WITNESSES),
                suggested_fix='Record the witnesses who will attend the signing',
            )
            result.suggest(f'Arrange {minimum} independent adult witnesses for the signing')

    restrictions = requirements.witnesses.restrictions
    beneficiary_names = {b.name.casefold() for b in will.beneficiaries if b.name}
    for i, witness in enumerate(recorded):
        if RESTRICTION_NOT_BENEFICIARY in restrictions and witness.name.casefold() in beneficiary_names:
            result.add_warning(
                f'witnesses[{i}]',
                f'Witness {witness.name} is also a beneficiary',
                WITNESS_IS_BENEFICIARY,
                legal_reference=config.legal_reference(REFERENCE_WITNESSES),
                suggested_fix='Choose a witness who receives nothing under the will',
            )
        if (RESTRICTION_ADULT in restrictions
                and is_minor(witness.date_of_birth, as_of, requirements.age_of_majority)):
            result.add_warning(
                f'witnesses[{i}]',
                f'Witness {witness.name} is under {requirements.age_of_majority}',
                WITNESS_IS_MINOR,
                legal_reference=config.legal_reference(REFERENCE_WITNESSES),
            )

    if will_type == WillType.HOLOGRAPHIC and not requirements.holographic_allowed:
        result.add_error(
            'will_type',
            f'Holographic wills are not recognised in {config.country_name("en")}',
            HOLOGRAPHIC_NOT_PERMITTED,
            legal_reference=config.legal_reference(REFERENCE_FORMS),
        )

    if requirements.notarization.required and will_type is not None and will_type != WillType.NOTARIAL:
        result.add_warning(
            'will_type',
            f'{config.country_name("en")} requires wills to be notarised',
            NOTARIZATION_REQUIRED,
            legal_reference=config.legal_reference(REFERENCE_FORMS),
        )

    primaries = will.primary_executors
    if not primaries:
        result.add_warning(
            'executors',
            'No primary executor is appointed; a court may have to appoint an administrator',
            MISSING_PRIMARY_EXECUTOR,
            suggested_fix='Appoint a primary executor',
        )
    elif len(primaries) > 1:
        result.add_warning(
            'executors',
            f'{len(primaries)} primary executors are appointed; appoint one primary and use co-executors',
            MULTIPLE_PRIMARY_EXECUTORS,
        )

    if primaries and not any(e.role == ExecutorRole.ALTERNATE for e in will.executors):
        result.suggest('Name an alternate executor in case the primary executor cannot act')


def find_minor_children(will: WillUserData, config: JurisdictionConfig,
                        as_of: date) -> List[Tuple[str, str]]:
    """(id, name) of every minor child found in family data or child beneficiaries."""
    majority = config.requirements.age_of_majority
    minors: List[Tuple[str, str]] = []
    seen_names = set()

    for child in will.family.children:
        minor = child.is_minor if child.is_minor is not None else is_minor(child.date_of_birth, as_of, majority)
        if minor:
            minors.append((child.id, child.full_name))
            seen_names.add(child.full_name.casefold())

    for beneficiary in will.beneficiaries:
        if beneficiary.relationship != Relationship.CHILD:
            continue
        if not is_minor(beneficiary.date_of_birth, as_of, majority):
            continue
        if beneficiary.name.casefold() in seen_names:
            continue
        minors.append((beneficiary.id, beneficiary.name))
        seen_names.add(beneficiary.name.casefold())

    return minors


def _validate_guardianship(will: WillUserData, config: JurisdictionConfig,
                           as_of: date, result: WillValidationResult):
    minors = find_minor_children(will, config, as_of)
    if not minors:
        return

    appointed = [g for g in will.guardians if g.names_primary_guardian]
    if not appointed:
        result.add_missing(
            'guardians',
            'A guardian must be appointed for minor children '
            f'({join_names([name or child_id for child_id, name in minors])})',
            MISSING_GUARDIAN,
            legal_reference=config.legal_reference(REFERENCE_GUARDIANSHIP),
        )
        return

    for child_id, name in minors:
        covered = any(
            (child_id and g.child_id == child_id)
            or (name and g.child_name.casefold() == name.casefold())
            for g in appointed
        )
        if not covered:
            result.add_warning(
                'guardians',
                f'No guardian is named for {name or child_id}',
                GUARDIANSHIP_INCOMPLETE,
                legal_reference=config.legal_reference(REFERENCE_GUARDIANSHIP),
            )


def _receives_share(beneficiary) -> bool:
    share = beneficiary.share
    if share.type is None:
        return False
    if share.type in (ShareType.PERCENTAGE, ShareType.SPECIFIC_AMOUNT):
        return share.value is not None and share.value > 0
    return True


def _validate_forced_heirship(will: WillUserData, config: JurisdictionConfig,
                              result: WillValidationResult):
    if not config.requirements.forced_heirship:
        return

    receiving = [b for b in will.beneficiaries if _receives_share(b)]
    receiving_names = {b.name.casefold() for b in receiving if b.name}
    receiving_ids = {b.id for b in receiving if b.id}
    omitted: List[str] = []

    spouse = will.family.spouse
    if spouse is not None and spouse.full_name:
        spouse_provided = (
            spouse.full_name.casefold() in receiving_names
            or any(b.relationship == Relationship.SPOUSE for b in receiving)
        )
        if not spouse_provided:
            omitted.append(spouse.full_name)

    for child in will.family.children:
        if not child.full_name and not child.id:
            continue
        if child.full_name.casefold() in receiving_names or (child.id and child.id in receiving_ids):
            continue
        omitted.append(child.full_name or child.id)

    for heir in omitted:
        result.add_warning(
            'beneficiaries',
            f'{heir} may be entitled to a compulsory share under the forced heirship rules of '
            f'{config.country_name("en")} but receives nothing under this will; seek legal review',
            FORCED_HEIRSHIP_REVIEW,
            legal_reference=config.legal_reference(REFERENCE_FORCED_HEIRSHIP),
        )


def _expected_fields(will: WillUserData, config: JurisdictionConfig,
                     will_type: Optional[WillType], as_of: date) -> Dict[str, bool]:
    """Expected field -> present."""
    personal = will.personal
    expected = {
        'personal.full_name': bool(personal.full_name),
        'personal.date_of_birth': personal.date_of_birth is not None,
        'personal.address': personal.address.is_complete(),
        'personal.place_of_birth': bool(personal.place_of_birth),
        'personal.citizenship': bool(personal.citizenship),
        'personal.marital_status': personal.marital_status is not None,
        'beneficiaries': bool(will.beneficiaries),
        'assets': bool(will.assets) or will.no_assets_declared,
        'executors': bool(will.executors),
    }
    if will.guardians or find_minor_children(will, config, as_of):
        expected['guardians'] = any(g.names_primary_guardian for g in will.guardians)
    if config.requires_witnesses(will_type):
        expected['witnesses'] = len([w for w in will.witnesses if w.name]) >= config.minimum_witnesses(will_type)
    return expected


def _field_key(issue_field: str) -> Optional[str]:
    """Longest expected field that the issue path falls under."""
    best = None
    for key in FIELD_WEIGHTS:
        if issue_field == key or issue_field.startswith(key + '.') or issue_field.startswith(key + '['):
            if best is None or len(key) > len(best):
                best = key
    return best


def calculate_completeness_score(will: WillUserData, config: JurisdictionConfig,
                                 will_type: Optional[WillType], as_of: date,
                                 result: WillValidationResult) -> int:
    """
    Weighted completeness score in [0, 100].

    Adding a missing mandatory field never lowers the score: the field's
    credit rises by at least half its weight, while the integrity part is
    already zero whenever a mandatory field is missing.
    """
    expected = _expected_fields(will, config, will_type, as_of)
    fields_with_errors = {_field_key(e.field) for e in result.errors}

    total_weight = 0.0
    credit = 0.0
    for key, present in expected.items():
        weight = FIELD_WEIGHTS[key]
        total_weight += weight
        if present:
            credit += weight / 2 if key in fields_with_errors else weight

    presence = PRESENCE_POINTS * credit / total_weight if total_weight else 0.0
    integrity = 0 if result.errors else max(0, INTEGRITY_POINTS - len(result.warnings))

    score = int(round(presence + integrity))
    return max(0, min(100, score))
