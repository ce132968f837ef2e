"""Record store for bull rows.

Every write to the ``Bull`` table goes through the helpers in this
module. Attributes arrive as plain dictionaries (already parsed from a
request body or a spreadsheet row), are restricted to
:data:`bulls.forms.PERMITTED_FIELDS` and validated with
:class:`bulls.forms.BullForm` before anything is saved.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from django.db.models import QuerySet
from django.forms.models import model_to_dict

from ..forms import PERMITTED_FIELDS, BullForm
from ..models import Bull

logger = logging.getLogger(__name__)


class BullNotFound(Exception):
    """Raised when no bull exists for the requested primary key."""

    def __init__(self, pk: Any) -> None:
        super().__init__(f'Bull {pk} does not exist.')
        self.pk = pk


class BullValidationError(Exception):
    """Raised when attributes fail validation.

    ``errors`` maps each offending field to its list of messages, in the
    same shape Django uses for ``form.errors``.
    """

    def __init__(self, errors: Mapping[str, List[str]]) -> None:
        self.errors: Dict[str, List[str]] = {field: list(messages) for field, messages in errors.items()}
        summary = '; '.join(
            f"{field}: {' '.join(messages)}" for field, messages in self.errors.items()
        )
        super().__init__(summary or 'Invalid bull attributes.')


def permitted_attributes(attributes: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop every key that is not an editable bull field."""

    return {key: attributes[key] for key in PERMITTED_FIELDS if key in attributes}


def _save_form(form: BullForm) -> Bull:
    if not form.is_valid():
        raise BullValidationError(form.errors)
    return form.save()


def all_bulls() -> QuerySet[Bull]:
    return Bull.objects.order_by('id')


def find_bull(pk: Any) -> Bull:
    try:
        return Bull.objects.get(pk=pk)
    except (Bull.DoesNotExist, ValueError, TypeError):
        raise BullNotFound(pk) from None


def create_bull(attributes: Mapping[str, Any]) -> Bull:
    """Validate ``attributes`` and insert a new bull."""

    bull = _save_form(BullForm(data=permitted_attributes(attributes)))
    logger.debug(f"[store] created bull {bull.pk}")
    return bull


def update_bull(pk: Any, attributes: Mapping[str, Any]) -> Bull:
    """Apply ``attributes`` to an existing bull.

    Only the supplied fields change; the rest keep their stored values.
    """

    bull = find_bull(pk)
    data = model_to_dict(bull, fields=PERMITTED_FIELDS)
    data.update(permitted_attributes(attributes))
    bull = _save_form(BullForm(data=data, instance=bull))
    logger.debug(f"[store] updated bull {bull.pk}")
    return bull


def delete_bull(pk: Any) -> None:
    bull = find_bull(pk)
    bull.delete()
    logger.debug(f"[store] deleted bull {pk}")
