"""
Content Generator

Turns a will data snapshot into rendered will content: plain text, HTML,
the serialized document plan and the execution instructions, plus a
checksum over the canonical text for later integrity checks.

generate() runs whatever the validation outcome is, so an incomplete or
invalid draft still renders as a recognizable will skeleton.
"""

import hmac
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from legacywill.clause_renderer import document_plan_to_dict, plan_to_html, plan_to_text, render_document_plan
from legacywill.execution_checklist import ExecutionInstructions, build_execution_instructions
from legacywill.jurisdictions import JurisdictionConfig
from legacywill.templates import WillTemplate
from legacywill.utils import calculate_sha256, canonicalize_text, count_words, estimate_pages
from legacywill.will_data import GenerationPreferences, WillUserData


@dataclass(frozen=True)
class GeneratedContent:
    text: str
    html: str
    sections: List[Dict[str, Any]]
    execution_instructions: ExecutionInstructions
    checksum: str
    word_count: int
    page_count: int
    template_id: str
    template_version: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'html': self.html,
            'sections': self.sections,
            'execution_instructions': self.execution_instructions.to_dict(),
            'checksum': self.checksum,
            'word_count': self.word_count,
            'page_count': self.page_count,
            'template_id': self.template_id,
            'template_version': self.template_version,
        }


def compute_checksum(text: str) -> str:
    """
    SHA-256 of the canonical form of a document text.

    Args:
        text: Document text

    Returns:
        Hexadecimal hash string
    """
    return calculate_sha256(canonicalize_text(text).encode('utf-8'))


def verify_checksum(text: str, checksum: str) -> bool:
    """True when text still matches a stored checksum."""
    if not checksum:
        return False
    return hmac.compare_digest(compute_checksum(text), checksum)


def generate(will: WillUserData, config: JurisdictionConfig, template: WillTemplate,
             preferences: Optional[GenerationPreferences] = None) -> GeneratedContent:
    """
    Render will content for a jurisdiction template.

    Args:
        will: The will data snapshot
        config: Jurisdiction configuration (must match the template)
        template: Template from TemplateLibrary.get_template
        preferences: Generation preferences

    Returns:
        GeneratedContent with text, HTML, plan, instructions and checksum

    Raises:
        ValueError: If the template belongs to another jurisdiction
    """
    if template.jurisdiction != config.code:
        raise ValueError(f'Template {template.id} does not belong to jurisdiction {config.code}')

    preferences = preferences or GenerationPreferences()
    plan = render_document_plan(will, config, template, preferences)
    text = plan_to_text(plan)
    word_count = count_words(text)

    return GeneratedContent(
        text=text,
        html=plan_to_html(plan, template),
        sections=document_plan_to_dict(plan),
        execution_instructions=build_execution_instructions(config, template.will_type, template),
        checksum=compute_checksum(text),
        word_count=word_count,
        page_count=estimate_pages(word_count),
        template_id=template.id,
        template_version=template.version,
    )
