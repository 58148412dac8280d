"""
Execution Instructions

Builds the jurisdiction-specific instructions for signing, witnessing or
notarizing a generated will, in the document language.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from legacywill.jurisdictions import (
    FORMALITY_HANDWRITTEN, FORMALITY_PERSONAL_HANDWRITING, JurisdictionConfig, WillType,
)
from legacywill.templates import WillTemplate
from legacywill.utils import format_amount


HOLOGRAPHIC_STEPS = ['exec.holographic.1', 'exec.holographic.2', 'exec.holographic.3', 'exec.holographic.4']
WITNESSED_STEPS = ['exec.witnessed.1', 'exec.witnessed.2', 'exec.witnessed.3', 'exec.witnessed.4',
                   'exec.witnessed.5']
NOTARIAL_STEPS = ['exec.notarial.2', 'exec.notarial.3', 'exec.notarial.4']

HANDWRITING_FORMALITIES = (FORMALITY_HANDWRITTEN, FORMALITY_PERSONAL_HANDWRITING)


@dataclass(frozen=True)
class NotaryGuidance:
    organization: str
    search_url: str
    expected_costs: str
    verification_required: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            'organization': self.organization,
            'search_url': self.search_url,
            'expected_costs': self.expected_costs,
            'verification_required': self.verification_required,
        }


@dataclass(frozen=True)
class ExecutionInstructions:
    will_type: WillType
    steps: List[str] = field(default_factory=list)
    requirements: List[str] = field(default_factory=list)
    witness_requirements: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    notary: Optional[NotaryGuidance] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'will_type': self.will_type.value,
            'steps': list(self.steps),
            'requirements': list(self.requirements),
            'witness_requirements': list(self.witness_requirements),
            'warnings': list(self.warnings),
            'notary': self.notary.to_dict() if self.notary else None,
        }


def _formal_requirements(config: JurisdictionConfig, template: WillTemplate,
                         include_handwriting: bool) -> List[str]:
    requirements = []
    for formality in config.requirements.formal_requirements:
        if formality in HANDWRITING_FORMALITIES and not include_handwriting:
            continue
        key = f'req.{formality}'
        if key in template.phrases:
            requirements.append(template.phrase(key))
    return requirements


def _witness_requirements(config: JurisdictionConfig, template: WillTemplate,
                          will_type: WillType) -> List[str]:
    if not config.requires_witnesses(will_type):
        return []

    requirements = [template.phrase('witness.count', count=config.minimum_witnesses(will_type))]
    for restriction in config.requirements.witnesses.restrictions:
        key = f'witness.{restriction}'
        if key in template.phrases:
            requirements.append(template.phrase(key))
    return requirements


def build_execution_instructions(config: JurisdictionConfig, will_type: WillType,
                                 template: WillTemplate) -> ExecutionInstructions:
    """
    Build signing and execution instructions for a will type.

    Args:
        config: Jurisdiction configuration
        will_type: Will type being executed
        template: Template supplying the document-language phrases

    Returns:
        ExecutionInstructions with steps, requirements, witness rules,
        warnings and, for notarial wills, notary guidance
    """
    language = template.language.value
    notary = None

    if will_type == WillType.HOLOGRAPHIC:
        steps = [template.phrase(key) for key in HOLOGRAPHIC_STEPS]
        requirements = _formal_requirements(config, template, include_handwriting=True)
        warnings = [template.phrase('warn.holographic')]

    elif will_type == WillType.NOTARIAL:
        if config.notary:
            first = template.phrase('exec.notarial.1', organization=config.notary.organization,
                                    url=config.notary.search_url)
        else:
            first = template.phrase('exec.notarial.contact', country=config.country_name(language))
        steps = [first] + [template.phrase(key) for key in NOTARIAL_STEPS]
        requirements = [template.phrase('req.identity')]
        requirements.extend(_formal_requirements(config, template, include_handwriting=False))
        warnings = [template.phrase('warn.notarial')]

        if config.notary:
            notary = NotaryGuidance(
                organization=config.notary.organization,
                search_url=config.notary.search_url,
                expected_costs=template.phrase(
                    'notary.costs',
                    min=format_amount(config.notary.fee_min, config.notary.fee_currency, language),
                    max=format_amount(config.notary.fee_max, config.notary.fee_currency, language),
                ),
                verification_required=config.notary.verification_required,
            )

    else:
        steps = [template.phrase(key) for key in WITNESSED_STEPS]
        requirements = _formal_requirements(config, template, include_handwriting=False)
        warnings = [template.phrase('warn.witnessed')]

    if config.requirements.notarization.required and will_type != WillType.NOTARIAL:
        warnings.append(template.phrase('warn.notarization_required'))
    warnings.append(template.phrase('warn.review'))

    return ExecutionInstructions(
        will_type=will_type,
        steps=steps,
        requirements=requirements,
        witness_requirements=_witness_requirements(config, template, will_type),
        warnings=warnings,
        notary=notary,
    )
