"""JSON endpoints for the bull registry.

Request bodies are JSON objects, either flat or wrapped in a ``"bull"``
key. Validation failures answer 422 with ``{"errors": {...}}``, unknown
ids answer 404 and malformed bodies answer 400 with ``{"error": ...}``.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.urls import reverse
from django.views.decorators.http import require_http_methods

from .models import Bull
from .services.record_store import (
    BullNotFound,
    BullValidationError,
    all_bulls,
    create_bull,
    delete_bull,
    find_bull,
    permitted_attributes,
    update_bull,
)


def _serialise_bull(bull: Bull) -> Dict[str, Any]:
    return {
        'id': bull.pk,
        'registration_code': bull.registration_code,
        'name': bull.name,
        'born_on': bull.born_on.isoformat() if bull.born_on else None,
        'offspring_count': bull.offspring_count,
        'created_at': bull.created_at.isoformat(),
        'updated_at': bull.updated_at.isoformat(),
        'url': reverse('api_bull_detail', args=[bull.pk]),
    }


def _parse_json_body(request: HttpRequest) -> Dict[str, Any]:
    """Decode the request body into permitted bull attributes.

    Raises ``ValueError`` when the body is not a JSON object and
    ``BullValidationError`` when a field holds a list or object.
    """
    if not request.body:
        return {}
    payload = json.loads(request.body)
    if isinstance(payload, dict) and isinstance(payload.get('bull'), dict):
        payload = payload['bull']
    if not isinstance(payload, dict):
        raise ValueError('Expected a JSON object.')
    return _normalise_json_values(permitted_attributes(payload))


def _normalise_json_values(attributes: Dict[str, Any]) -> Dict[str, Any]:
    """Hand scalars to the form as text; reject nested values.

    Form fields expect what a browser would post, so numbers and booleans
    are turned into strings. Lists and objects raise
    ``BullValidationError``.
    """
    errors: Dict[str, List[str]] = {}
    normalised: Dict[str, Any] = {}
    for key, value in attributes.items():
        if isinstance(value, (list, dict)):
            errors[key] = ['Expected a single value, not a list or object.']
        elif value is None or isinstance(value, str):
            normalised[key] = value
        else:
            normalised[key] = str(value)
    if errors:
        raise BullValidationError(errors)
    return normalised


def _bad_request(message: str) -> JsonResponse:
    return JsonResponse({'error': message}, status=400)


def _not_found(exc: BullNotFound) -> JsonResponse:
    return JsonResponse({'error': str(exc)}, status=404)


def _invalid(exc: BullValidationError) -> JsonResponse:
    return JsonResponse({'errors': exc.errors}, status=422)


@require_http_methods(["GET", "POST"])
def api_bull_list(request: HttpRequest) -> JsonResponse:
    """List bulls (GET) or create one (POST)."""
    if request.method == 'GET':
        return JsonResponse({'bulls': [_serialise_bull(bull) for bull in all_bulls()]})

    try:
        bull = create_bull(_parse_json_body(request))
    except ValueError as exc:
        return _bad_request(f'Invalid JSON body: {exc}')
    except BullValidationError as exc:
        return _invalid(exc)
    response = JsonResponse(_serialise_bull(bull), status=201)
    response['Location'] = reverse('api_bull_detail', args=[bull.pk])
    return response


@require_http_methods(["GET", "PATCH", "PUT", "DELETE"])
def api_bull_detail(request: HttpRequest, pk: int) -> HttpResponse:
    """Show, update or delete a single bull."""
    try:
        if request.method == 'GET':
            return JsonResponse(_serialise_bull(find_bull(pk)))
        if request.method == 'DELETE':
            delete_bull(pk)
            return HttpResponse(status=204)
        try:
            attributes = _parse_json_body(request)
        except ValueError as exc:
            return _bad_request(f'Invalid JSON body: {exc}')
        bull = update_bull(pk, attributes)
    except BullNotFound as exc:
        return _not_found(exc)
    except BullValidationError as exc:
        return _invalid(exc)
    return JsonResponse(_serialise_bull(bull))
