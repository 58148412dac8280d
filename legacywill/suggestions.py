"""
Advisory Suggestions

Generates prioritized, non-blocking suggestions for improving a will.
Suggestions are informational only: they never block generation or
persistence and this module never raises on partially filled data.

Rules are evaluated in a fixed order and the result is stable-sorted by
priority, so suggestions of equal priority keep rule order.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from legacywill.clause_logic import SectionId
from legacywill.jurisdictions import JurisdictionConfig, WillType
from legacywill.utils import format_percentage, join_names
from legacywill.validation import SHARE_TOLERANCE, find_minor_children
from legacywill.will_data import (
    AssetType, ExecutorRole, InstructionCategory, Priority, Relationship, ShareType, WillUserData,
    percentage_pools,
)


class SuggestionType(str, Enum):
    IMPROVEMENT = 'improvement'
    WARNING = 'warning'
    OPTIMIZATION = 'optimization'
    LEGAL_CONSIDERATION = 'legal_consideration'


PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}

# Estates with at least this many assets count as complex
COMPLEX_ESTATE_ASSET_COUNT = 5

CIRCUMSTANCE_INTERNATIONAL = ('international_validity', 'international_assets')
CIRCUMSTANCE_COMPLEX = ('complex_assets', 'complex_estate')
CIRCUMSTANCE_BUSINESS = 'business_succession'


@dataclass
class AISuggestion:
    """An advisory suggestion for the testator."""
    id: str
    type: SuggestionType
    category: str
    title: str
    description: str
    suggested_action: str
    priority: Priority
    is_jurisdiction_specific: bool = False
    affected_sections: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'type': self.type.value,
            'category': self.category,
            'title': self.title,
            'description': self.description,
            'suggested_action': self.suggested_action,
            'priority': self.priority.value,
            'is_jurisdiction_specific': self.is_jurisdiction_specific,
            'affected_sections': list(self.affected_sections),
        }


def suggest(will: WillUserData, config: JurisdictionConfig, will_type: Optional[WillType] = None,
            as_of: Optional[date] = None) -> List[AISuggestion]:
    """
    Generate advisory suggestions for a will.

    Args:
        will: The will data snapshot
        config: Jurisdiction configuration
        will_type: Will type being prepared (None if not chosen yet)
        as_of: Reference date for ages (defaults to today)

    Returns:
        Suggestions ordered high, medium, low priority
    """
    as_of = as_of or date.today()
    suggestions: List[AISuggestion] = []

    suggestions.extend(_executor_suggestions(will))
    suggestions.extend(_guardianship_suggestions(will, config, as_of))
    suggestions.extend(_distribution_suggestions(will))
    suggestions.extend(_jurisdiction_suggestions(will, config, will_type))
    suggestions.extend(_asset_suggestions(will))
    suggestions.extend(_formality_suggestions(will, config, will_type))
    suggestions.extend(_detail_suggestions(will))

    return sorted(suggestions, key=lambda s: PRIORITY_RANK[s.priority])


def _executor_suggestions(will: WillUserData) -> List[AISuggestion]:
    suggestions = []
    roles = [e.role for e in will.executors]

    if ExecutorRole.PRIMARY not in roles:
        suggestions.append(AISuggestion(
            id='missing_primary_executor',
            type=SuggestionType.WARNING,
            category='executors',
            title='No primary executor',
            description='You have not appointed a primary executor. A court may have to appoint someone '
                        'to administer your estate.',
            suggested_action='Appoint a trusted person as primary executor.',
            priority=Priority.HIGH,
            affected_sections=[SectionId.EXECUTORS.value],
        ))

    if will.executors and ExecutorRole.ALTERNATE not in roles:
        suggestions.append(AISuggestion(
            id='alternate_executor',
            type=SuggestionType.IMPROVEMENT,
            category='executors',
            title='No alternate executor',
            description='If your executor cannot or will not act, nobody is named to take over.',
            suggested_action='Consider naming an alternate executor.',
            priority=Priority.MEDIUM,
            affected_sections=[SectionId.EXECUTORS.value],
        ))

    return suggestions


def _guardianship_suggestions(will: WillUserData, config: JurisdictionConfig,
                              as_of: date) -> List[AISuggestion]:
    suggestions = []
    minors = find_minor_children(will, config, as_of)
    appointed = [g for g in will.guardians if g.names_primary_guardian]

    if minors and not appointed:
        suggestions.append(AISuggestion(
            id='guardian_for_minors',
            type=SuggestionType.WARNING,
            category='guardianship',
            title='Minor children without a guardian',
            description=f'{join_names([name for _, name in minors if name]) or "Your minor children"} '
                        f'would have no guardian chosen by you.',
            suggested_action='Name a guardian for each minor child.',
            priority=Priority.HIGH,
            is_jurisdiction_specific=True,
            affected_sections=[SectionId.GUARDIANSHIP.value],
        ))

    without_alternate = [g for g in appointed if g.alternate_guardian is None or not g.alternate_guardian.name]
    if without_alternate:
        suggestions.append(AISuggestion(
            id='alternate_guardian',
            type=SuggestionType.IMPROVEMENT,
            category='guardianship',
            title='No alternate guardian',
            description='Some guardianship appointments have no alternate guardian.',
            suggested_action='Consider naming an alternate guardian for each child.',
            priority=Priority.MEDIUM,
            affected_sections=[SectionId.GUARDIANSHIP.value],
        ))

    return suggestions


def _distribution_suggestions(will: WillUserData) -> List[AISuggestion]:
    suggestions = []
    has_remainder = bool(will.remainder_beneficiaries)

    if not has_remainder:
        for pool, members in percentage_pools(will).items():
            total = sum(b.share.value or 0.0 for b in members)
            if total < 100.0 - SHARE_TOLERANCE:
                target = 'your residuary estate' if pool is None else f'asset {pool}'
                suggestions.append(AISuggestion(
                    id=f'under_allocation:{pool or "residuary"}',
                    type=SuggestionType.WARNING,
                    category='beneficiaries',
                    title='Shares do not add up to 100%',
                    description=f'Only {format_percentage(round(total, 2))} of {target} is allocated. '
                                f'The rest would pass under the statutory rules of succession.',
                    suggested_action='Adjust the percentages or name a remainder beneficiary.',
                    priority=Priority.HIGH,
                    affected_sections=[SectionId.BENEFICIARIES.value, SectionId.ASSET_DISTRIBUTION.value],
                ))

    if will.beneficiaries and not has_remainder:
        suggestions.append(AISuggestion(
            id='remainder_beneficiary',
            type=SuggestionType.IMPROVEMENT,
            category='beneficiaries',
            title='No remainder beneficiary',
            description='Property you acquire later or forget to list is not given to anyone.',
            suggested_action='Name a beneficiary to receive the residue of your estate.',
            priority=Priority.MEDIUM,
            affected_sections=[SectionId.BENEFICIARIES.value],
        ))

    without_alternate = [
        b.name for b in will.beneficiaries
        if b.name and not b.alternate_beneficiary_id and b.relationship != Relationship.CHARITY
    ]
    if without_alternate:
        suggestions.append(AISuggestion(
            id='alternate_beneficiary',
            type=SuggestionType.IMPROVEMENT,
            category='beneficiaries',
            title='Beneficiaries without an alternate',
            description=f'No alternate is named for {join_names(without_alternate)}.',
            suggested_action='Consider who should inherit if a beneficiary dies before you.',
            priority=Priority.LOW,
            affected_sections=[SectionId.BENEFICIARIES.value],
        ))

    return suggestions


def _country_differs(value: str, config: JurisdictionConfig) -> bool:
    if not value:
        return False
    known = {config.code.lower()} | {name.lower() for name in config.country_names.values()}
    return value.strip().lower() not in known


def _jurisdiction_suggestions(will: WillUserData, config: JurisdictionConfig,
                              will_type: Optional[WillType]) -> List[AISuggestion]:
    suggestions = []
    requirements = config.requirements
    country = config.country_name('en')

    if requirements.forced_heirship and (will.family.spouse is not None or will.family.children):
        receiving = {b.relationship for b in will.beneficiaries if b.share.type is not None}
        omitted = (
            (will.family.spouse is not None and Relationship.SPOUSE not in receiving)
            or (will.family.children and Relationship.CHILD not in receiving)
        )
        suggestions.append(AISuggestion(
            id='forced_heirship',
            type=SuggestionType.LEGAL_CONSIDERATION,
            category='legal',
            title='Compulsory shares for close family',
            description=f'Under the law of {country} certain relatives are entitled to a compulsory share '
                        f'that a will cannot remove.',
            suggested_action='Have a lawyer or notary check that your distribution respects compulsory shares.',
            priority=Priority.HIGH if omitted else Priority.MEDIUM,
            is_jurisdiction_specific=True,
            affected_sections=[SectionId.BENEFICIARIES.value],
        ))

    notarization = requirements.notarization
    if will_type != WillType.NOTARIAL:
        if notarization.required:
            suggestions.append(AISuggestion(
                id='notarization_required',
                type=SuggestionType.WARNING,
                category='formalities',
                title='Notarial form required',
                description=f'Wills made under the law of {country} must be executed before a notary.',
                suggested_action='Choose the notarial will form.',
                priority=Priority.HIGH,
                is_jurisdiction_specific=True,
                affected_sections=[SectionId.FOOTER.value],
            ))
        elif notarization.optional:
            reasons = []
            international = (
                _country_differs(will.personal.citizenship, config)
                or _country_differs(will.personal.address.country, config)
            )
            if international and any(c in notarization.circumstances for c in CIRCUMSTANCE_INTERNATIONAL):
                reasons.append('international validity')
            if (len(will.assets) >= COMPLEX_ESTATE_ASSET_COUNT
                    and any(c in notarization.circumstances for c in CIRCUMSTANCE_COMPLEX)):
                reasons.append('a complex estate')
            if (any(a.type == AssetType.BUSINESS for a in will.assets)
                    and CIRCUMSTANCE_BUSINESS in notarization.circumstances):
                reasons.append('business succession')

            if reasons:
                suggestions.append(AISuggestion(
                    id='notarization_advisable',
                    type=SuggestionType.LEGAL_CONSIDERATION,
                    category='formalities',
                    title='Consider a notarial will',
                    description=f'A notarial will is advisable in {country} for {join_names(reasons)}.',
                    suggested_action='Consider executing your will before a notary.',
                    priority=Priority.MEDIUM,
                    is_jurisdiction_specific=True,
                    affected_sections=[SectionId.FOOTER.value],
                ))

    if any(b.relationship == Relationship.CHARITY for b in will.beneficiaries):
        suggestions.append(AISuggestion(
            id='charitable_tax',
            type=SuggestionType.OPTIMIZATION,
            category='tax',
            title='Charitable bequests',
            description=f'Charitable bequests may have tax implications in {country}.',
            suggested_action='Check whether the charity qualifies for a tax exemption.',
            priority=Priority.MEDIUM if config.tax.inheritance_tax else Priority.LOW,
            is_jurisdiction_specific=True,
            affected_sections=[SectionId.BENEFICIARIES.value],
        ))

    if config.tax.inheritance_tax and config.tax.rates:
        estate_value = sum(a.value or 0.0 for a in will.assets)
        lowest_threshold = min(rate.threshold for rate in config.tax.rates)
        if estate_value > lowest_threshold:
            suggestions.append(AISuggestion(
                id='inheritance_tax',
                type=SuggestionType.OPTIMIZATION,
                category='tax',
                title='Inheritance tax may apply',
                description=f'The estimated value of your estate exceeds tax-free allowances in {country}.',
                suggested_action='Ask a tax adviser about allowances and lifetime gifts.',
                priority=Priority.MEDIUM,
                is_jurisdiction_specific=True,
                affected_sections=[SectionId.ASSET_DISTRIBUTION.value],
            ))

    return suggestions


def _asset_suggestions(will: WillUserData) -> List[AISuggestion]:
    suggestions = []
    categories = {s.category for s in will.special_instructions}

    if (any(a.type == AssetType.DIGITAL_ASSET for a in will.assets)
            and InstructionCategory.DIGITAL_ASSETS not in categories):
        suggestions.append(AISuggestion(
            id='digital_assets',
            type=SuggestionType.IMPROVEMENT,
            category='assets',
            title='Digital assets without instructions',
            description='You listed digital assets but left no instructions for accessing them.',
            suggested_action='Add instructions on where access details are kept and what should happen to accounts.',
            priority=Priority.MEDIUM,
            affected_sections=[SectionId.SPECIAL_INSTRUCTIONS.value],
        ))

    if (any(a.type == AssetType.BUSINESS for a in will.assets)
            and InstructionCategory.BUSINESS_SUCCESSION not in categories):
        suggestions.append(AISuggestion(
            id='business_succession',
            type=SuggestionType.IMPROVEMENT,
            category='assets',
            title='Business without a succession plan',
            description='You own a business interest but have not said who should run or take over it.',
            suggested_action='Add business succession instructions and check the company documents.',
            priority=Priority.HIGH,
            affected_sections=[SectionId.SPECIAL_INSTRUCTIONS.value, SectionId.ASSET_DISTRIBUTION.value],
        ))

    return suggestions


def _formality_suggestions(will: WillUserData, config: JurisdictionConfig,
                           will_type: Optional[WillType]) -> List[AISuggestion]:
    suggestions = []

    if will_type == WillType.HOLOGRAPHIC:
        suggestions.append(AISuggestion(
            id='holographic_handwriting',
            type=SuggestionType.LEGAL_CONSIDERATION,
            category='formalities',
            title='Write the will by hand',
            description='A holographic will is valid only if you write the entire text, date and signature '
                        'in your own hand.',
            suggested_action='Copy the generated text by hand, then date and sign it.',
            priority=Priority.HIGH,
            is_jurisdiction_specific=True,
            affected_sections=[SectionId.FOOTER.value],
        ))

    minimum = config.minimum_witnesses(will_type)
    if minimum and len(will.witnesses) < minimum:
        suggestions.append(AISuggestion(
            id='witness_requirements',
            type=SuggestionType.LEGAL_CONSIDERATION,
            category='formalities',
            title='Witnesses needed',
            description=f'This will form needs at least {minimum} witnesses; '
                        f'{len(will.witnesses)} recorded so far.',
            suggested_action='Arrange adult witnesses who are not beneficiaries.',
            priority=Priority.HIGH,
            is_jurisdiction_specific=True,
            affected_sections=[SectionId.FOOTER.value],
        ))

    return suggestions


def _detail_suggestions(will: WillUserData) -> List[AISuggestion]:
    suggestions = []

    unpaid = [e.name for e in will.executors if e.is_professional and not e.compensation and e.name]
    if unpaid:
        suggestions.append(AISuggestion(
            id='professional_compensation',
            type=SuggestionType.IMPROVEMENT,
            category='executors',
            title='Professional executor fees',
            description=f'No remuneration is recorded for {join_names(unpaid)}.',
            suggested_action='Agree and record the fee terms of professional executors.',
            priority=Priority.LOW,
            affected_sections=[SectionId.EXECUTORS.value],
        ))

    if any(a.encumbrances for a in will.assets):
        suggestions.append(AISuggestion(
            id='encumbered_assets',
            type=SuggestionType.LEGAL_CONSIDERATION,
            category='assets',
            title='Encumbered assets',
            description='Some assets carry mortgages or other charges that pass with them.',
            suggested_action='State whether the beneficiary takes the asset with or without the debt.',
            priority=Priority.MEDIUM,
            affected_sections=[SectionId.ASSET_DISTRIBUTION.value],
        ))

    if any(a.is_partially_owned for a in will.assets):
        suggestions.append(AISuggestion(
            id='partial_ownership',
            type=SuggestionType.LEGAL_CONSIDERATION,
            category='assets',
            title='Partly owned assets',
            description='You can only leave your own share of jointly owned assets.',
            suggested_action='Check co-ownership agreements and survivorship rights.',
            priority=Priority.LOW,
            affected_sections=[SectionId.ASSET_DISTRIBUTION.value],
        ))

    categories = {s.category for s in will.special_instructions}
    if not categories & {InstructionCategory.FUNERAL, InstructionCategory.BURIAL}:
        suggestions.append(AISuggestion(
            id='funeral_wishes',
            type=SuggestionType.IMPROVEMENT,
            category='special_instructions',
            title='Funeral wishes',
            description='You have not recorded any funeral or burial wishes.',
            suggested_action='Consider adding your funeral wishes to guide your family.',
            priority=Priority.LOW,
            affected_sections=[SectionId.SPECIAL_INSTRUCTIONS.value],
        ))

    return suggestions
