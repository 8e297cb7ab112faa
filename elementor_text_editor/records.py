from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .errors import MalformedInput
from .io_utils import dump_json, parse_json_text


@dataclass
class EditableField:
    """One editable string found in a document, and where it lives."""

    type: str
    path: str
    value: Optional[str]
    label: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {'type': self.type, 'path': self.path}
        if self.label is not None:
            out['label'] = self.label
        out['value'] = self.value
        return out

    @classmethod
    def from_value(cls, item: Any) -> 'EditableField':
        """Coerce a record read back from edited JSON.

        Only `path` is required; `value` is taken as given.
        """
        if isinstance(item, EditableField):
            return item
        if not isinstance(item, Mapping):
            raise MalformedInput(f"Field record must be an object, got {type(item).__name__}.")

        path = item.get('path')
        if not isinstance(path, str) or not path.strip():
            raise MalformedInput("Field record has no usable 'path'.")

        field_type = item.get('type')
        label = item.get('label')
        return cls(
            type=field_type if isinstance(field_type, str) else '',
            path=path,
            value=item.get('value'),
            label=label if isinstance(label, str) else None,
        )


def fields_to_json(fields: Iterable[EditableField]) -> str:
    return dump_json([f.to_dict() for f in fields])


def fields_from_json(text: str) -> List[EditableField]:
    """Parse the edited field list back from text."""
    data = parse_json_text(text)
    if not isinstance(data, list):
        raise MalformedInput("The field list must be a JSON array.")

    fields: List[EditableField] = []
    for idx, item in enumerate(data):
        try:
            fields.append(EditableField.from_value(item))
        except MalformedInput as e:
            raise MalformedInput(f"Field #{idx + 1}: {e}") from e
    return fields
