"""
Section Logic Module

Determines which sections and legal clauses appear in the will and their
order. All selection is based on explicit flags derived from the will data
and the jurisdiction.

Section Rules:
==============

1. HEADER: Always included
2. DECLARATIONS: Always included (carries the legal clauses)
3. BENEFICIARIES: Included if has_beneficiaries is True
4. ASSET_DISTRIBUTION: Included if has_assets is True
   - has_assets also holds when the testator declared no assets
5. EXECUTORS: Included if has_executors is True
6. GUARDIANSHIP: Included if has_guardianship is True
7. SPECIAL_INSTRUCTIONS: Included if has_special_instructions is True
8. FOOTER: Always included (last)

Clause Rules:
=============
- Mandatory clauses are always included, even for an empty draft
- Conditional clauses are included when their flag is True
- Optional clauses are included when optional clauses are requested
  and their flag (if any) is True
- No section or clause appears more than once; the order is fixed
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from legacywill.jurisdictions import JurisdictionConfig, WillType
from legacywill.will_data import (
    AssetType, ExecutorRole, GenerationPreferences, InstructionCategory, ShareType, WillUserData,
)


class ClauseKind(str, Enum):
    """How a legal clause is selected."""
    MANDATORY = 'mandatory'
    CONDITIONAL = 'conditional'
    OPTIONAL = 'optional'


class SectionId(str, Enum):
    """Stable section identifiers."""
    HEADER = 'header'
    DECLARATIONS = 'declarations'
    BENEFICIARIES = 'beneficiaries'
    ASSET_DISTRIBUTION = 'asset_distribution'
    EXECUTORS = 'executors'
    GUARDIANSHIP = 'guardianship'
    SPECIAL_INSTRUCTIONS = 'special_instructions'
    FOOTER = 'footer'


# Fixed section order - this never changes
SECTION_ORDER: List[SectionId] = [
    SectionId.HEADER,
    SectionId.DECLARATIONS,
    SectionId.BENEFICIARIES,
    SectionId.ASSET_DISTRIBUTION,
    SectionId.EXECUTORS,
    SectionId.GUARDIANSHIP,
    SectionId.SPECIAL_INSTRUCTIONS,
    SectionId.FOOTER,
]


@dataclass
class SectionDependency:
    """Flags that must all be True for a section to be included."""
    section_id: SectionId
    required_flags: List[str] = field(default_factory=list)
    notes: str = ''


SECTION_DEPENDENCIES: Dict[SectionId, SectionDependency] = {
    SectionId.HEADER: SectionDependency(
        section_id=SectionId.HEADER,
        notes='Always included'
    ),
    SectionId.DECLARATIONS: SectionDependency(
        section_id=SectionId.DECLARATIONS,
        notes='Always included - holds the mandatory legal clauses'
    ),
    SectionId.BENEFICIARIES: SectionDependency(
        section_id=SectionId.BENEFICIARIES,
        required_flags=['has_beneficiaries'],
        notes='Only if at least one beneficiary is named'
    ),
    SectionId.ASSET_DISTRIBUTION: SectionDependency(
        section_id=SectionId.ASSET_DISTRIBUTION,
        required_flags=['has_assets'],
        notes='Only if assets are listed or no assets were declared'
    ),
    SectionId.EXECUTORS: SectionDependency(
        section_id=SectionId.EXECUTORS,
        required_flags=['has_executors'],
        notes='Only if an executor is appointed'
    ),
    SectionId.GUARDIANSHIP: SectionDependency(
        section_id=SectionId.GUARDIANSHIP,
        required_flags=['has_guardianship'],
        notes='Only if a guardianship appointment exists'
    ),
    SectionId.SPECIAL_INSTRUCTIONS: SectionDependency(
        section_id=SectionId.SPECIAL_INSTRUCTIONS,
        required_flags=['has_special_instructions'],
        notes='Only if special instructions exist'
    ),
    SectionId.FOOTER: SectionDependency(
        section_id=SectionId.FOOTER,
        notes='Always included - must be last'
    ),
}


def get_section_flags(will: WillUserData, config: JurisdictionConfig,
                      will_type: Optional[WillType] = None) -> Dict[str, bool]:
    """
    Derive the boolean flags used for section and clause selection.

    Args:
        will: The will data snapshot
        config: Jurisdiction configuration
        will_type: Will type being generated

    Returns:
        Dictionary of flag names to boolean values
    """
    has_digital_assets = (
        any(a.type == AssetType.DIGITAL_ASSET for a in will.assets)
        or any(s.category == InstructionCategory.DIGITAL_ASSETS for s in will.special_instructions)
    )

    return {
        'has_beneficiaries': bool(will.beneficiaries),
        'has_assets': bool(will.assets) or will.no_assets_declared,
        'has_executors': bool(will.executors),
        'has_primary_executor': any(e.role == ExecutorRole.PRIMARY for e in will.executors),
        'has_guardianship': bool(will.guardians),
        'has_special_instructions': bool(will.special_instructions),
        'has_remainder_beneficiary': any(b.share.type == ShareType.REMAINDER for b in will.beneficiaries),
        'has_alternate_beneficiary': any(b.alternate_beneficiary_id for b in will.beneficiaries),
        'has_digital_assets': has_digital_assets,
        'requires_witnesses': config.requires_witnesses(will_type),
        'forced_heirship': config.requirements.forced_heirship,
        'inheritance_tax': config.tax.inheritance_tax,
    }


def check_section_dependencies(section_id: SectionId, flags: Dict[str, bool]) -> bool:
    """
    Check if a section's dependencies are satisfied.

    Args:
        section_id: The section to check
        flags: Flags from get_section_flags

    Returns:
        True if section should be included
    """
    dependency = SECTION_DEPENDENCIES.get(section_id)
    if not dependency:
        return False

    return all(flags.get(flag_name, False) for flag_name in dependency.required_flags)


def select_sections(flags: Dict[str, bool]) -> List[SectionId]:
    """
    Select the sections to render, in the fixed order.

    A data section is never emitted without data, so the document
    never carries an empty section header.
    """
    return [s for s in SECTION_ORDER if check_section_dependencies(s, flags)]


def select_clauses(template: Any, flags: Dict[str, bool],
                   preferences: Optional[GenerationPreferences] = None) -> List[Any]:
    """
    Select the legal clauses of a template, keeping template order.

    Args:
        template: WillTemplate providing legal_clauses
        flags: Flags from get_section_flags
        preferences: Generation preferences (defaults apply when None)

    Returns:
        Ordered list of LegalClause objects
    """
    preferences = preferences or GenerationPreferences()
    selected = []

    for clause in template.legal_clauses:
        condition_met = clause.condition is None or flags.get(clause.condition, False)

        if clause.kind == ClauseKind.MANDATORY:
            selected.append(clause)
        elif clause.kind == ClauseKind.CONDITIONAL:
            if condition_met:
                selected.append(clause)
        elif clause.kind == ClauseKind.OPTIONAL:
            if preferences.include_optional_clauses and condition_met:
                selected.append(clause)

    return selected


def get_section_number(section_id: SectionId, selected_sections: List[SectionId]) -> int:
    """
    Article number of a section (1-indexed), counting only titled sections.

    The header and footer are not numbered.

    Returns:
        The article number, or 0 if not numbered or not selected
    """
    numbered = [s for s in selected_sections if s not in (SectionId.HEADER, SectionId.FOOTER)]
    try:
        return numbered.index(section_id) + 1
    except ValueError:
        return 0


def validate_section_order(sections: List[SectionId]) -> bool:
    """
    Validate that sections follow the fixed order without repeats.
    """
    last_index = -1
    for section in sections:
        try:
            current_index = SECTION_ORDER.index(section)
        except ValueError:
            return False
        if current_index <= last_index:
            return False
        last_index = current_index

    return True


def get_sections_summary(will: WillUserData, config: JurisdictionConfig, template: Any,
                         preferences: Optional[GenerationPreferences] = None) -> Dict[str, Any]:
    """
    Summary of section and clause selection for a will.

    Args:
        will: The will data snapshot
        config: Jurisdiction configuration
        template: WillTemplate in use
        preferences: Generation preferences

    Returns:
        Dictionary with the selection summary
    """
    flags = get_section_flags(will, config, template.will_type)
    sections = select_sections(flags)
    clauses = select_clauses(template, flags, preferences)

    return {
        'flags': flags,
        'sections': [s.value for s in sections],
        'clauses': [
            {
                'id': c.id,
                'kind': c.kind.value,
                'legal_basis': c.legal_basis,
            }
            for c in clauses
        ],
    }
