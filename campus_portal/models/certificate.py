"""Certificate model definition."""

from typing import Any, Dict, Optional
from dataclasses import dataclass, fields

TEMPLATE_PLACEHOLDER = "/placeholder.svg?height=800&width=1200&text=Certificate+Template"

# Rendering defaults for the optional styling fields
DEFAULT_FONT = "Arial"
DEFAULT_COLOR = "#000000"
DEFAULT_NAME_SIZE = 24
DEFAULT_DESC_SIZE = 18
DEFAULT_DATE_SIZE = 16

# Persisted (camelCase) key for each attribute
_KEYS = {
    'issued_by': 'issuedBy',
    'register_number': 'registerNumber',
    'template_url': 'templateUrl',
    'signature_url': 'signatureUrl',
    'name_font': 'nameFont',
    'name_size': 'nameSize',
    'name_color': 'nameColor',
    'desc_font': 'descFont',
    'desc_size': 'descSize',
    'desc_color': 'descColor',
    'date_font': 'dateFont',
    'date_size': 'dateSize',
    'date_color': 'dateColor',
    'signature_size': 'signatureSize',
}


@dataclass(frozen=True)
class Certificate:
    """
    Certificate issued to a student.

    Certificates are immutable once issued; the styling fields are display
    metadata only.

    Fields:
        id: Unique identifier, supplied by the issuer (e.g. 'cert-001')
        title: Certificate title
        type: Certificate type (e.g. 'Achievement', 'Course Completion')
        issued_by: Name of the issuing faculty member
        date: Issue date as an ISO string
        student: Recipient name
        register_number: Recipient register number
        content: Body text (optional)
        template_url: Background image (optional)
        signature_url: Signature image (optional)
    """
    id: str
    title: str
    type: str
    issued_by: str
    date: str
    student: str
    register_number: str
    content: Optional[str] = None
    template_url: Optional[str] = None
    signature_url: Optional[str] = None
    name_font: Optional[str] = None
    name_size: Optional[int] = None
    name_color: Optional[str] = None
    desc_font: Optional[str] = None
    desc_size: Optional[int] = None
    desc_color: Optional[str] = None
    date_font: Optional[str] = None
    date_size: Optional[int] = None
    date_color: Optional[str] = None
    signature_size: Optional[int] = None

    def style(self) -> Dict[str, Any]:
        """Resolve the styling fields against the rendering defaults."""
        return {
            'template_url': self.template_url or TEMPLATE_PLACEHOLDER,
            'name': {
                'font': self.name_font or DEFAULT_FONT,
                'size': self.name_size or DEFAULT_NAME_SIZE,
                'color': self.name_color or DEFAULT_COLOR,
            },
            'description': {
                'font': self.desc_font or DEFAULT_FONT,
                'size': self.desc_size or DEFAULT_DESC_SIZE,
                'color': self.desc_color or DEFAULT_COLOR,
            },
            'date': {
                'font': self.date_font or DEFAULT_FONT,
                'size': self.date_size or DEFAULT_DATE_SIZE,
                'color': self.date_color or DEFAULT_COLOR,
            },
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted dictionary form, omitting unset optionals."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                data[_KEYS.get(f.name, f.name)] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Certificate':
        """Rebuild a certificate from its persisted dictionary form."""
        kwargs = {}
        for f in fields(cls):
            key = _KEYS.get(f.name, f.name)
            if key in data:
                kwargs[f.name] = data[key]
        return cls(**kwargs)
