"""
Read-only poster template catalog.

Functions:
    list_templates: All templates in catalog order
    get_template: Look up a template by id
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from PX_Libs.constants import TEMPLATE_CATALOG


@dataclass(frozen=True)
class Template:
    id: str
    name: str
    thumbnail_ref: str


_TEMPLATES: Dict[str, Template] = {
    template_id: Template(template_id, name, thumbnail_ref)
    for template_id, name, thumbnail_ref in TEMPLATE_CATALOG
}


def list_templates() -> List[Template]:
    return list(_TEMPLATES.values())


def get_template(template_id: Optional[str]) -> Optional[Template]:
    """Return the template with this id, or None if there is none."""
    if template_id is None:
        return None
    return _TEMPLATES.get(template_id)
