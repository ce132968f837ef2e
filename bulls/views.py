"""HTML views for the bull registry.

Each view parses the submitted form data explicitly, hands the resulting
attributes to the record store in :mod:`bulls.services.record_store` and
turns store errors into form errors, 404s or flash messages. JSON
endpoints live in :mod:`bulls.views_api`.
"""

from __future__ import annotations

from typing import Any, Dict

from django.contrib import messages
from django.forms.models import model_to_dict
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from .forms import PERMITTED_FIELDS, BullForm, BullImportForm
from .services.bull_import import REQUIRED_HEADERS, BullImportError, import_bulls_workbook
from .services.record_store import (
    BullNotFound,
    BullValidationError,
    all_bulls,
    create_bull,
    delete_bull,
    find_bull,
    update_bull,
)


def _parse_form_params(request: HttpRequest) -> Dict[str, Any]:
    """Pick the editable bull fields out of a form-encoded POST."""
    return {key: request.POST.get(key) for key in PERMITTED_FIELDS if key in request.POST}


def _get_bull_or_404(pk: int):
    try:
        return find_bull(pk)
    except BullNotFound as exc:
        raise Http404(str(exc)) from exc


def _render_form(request: HttpRequest, form: BullForm, title: str, status: int = 200) -> HttpResponse:
    context = {
        'form': form,
        'title': title,
        'bull': form.instance if form.instance.pk else None,
    }
    return render(request, 'bull_form.html', context, status=status)


@require_http_methods(["GET"])
def bull_list(request: HttpRequest) -> HttpResponse:
    """List every bull in the registry."""
    context = {
        'bulls': all_bulls(),
        'title': 'Bulls',
    }
    return render(request, 'bulls_list.html', context)


@require_http_methods(["GET"])
def bull_detail(request: HttpRequest, pk: int) -> HttpResponse:
    bull = _get_bull_or_404(pk)
    return render(request, 'bull_detail.html', {'bull': bull, 'title': str(bull)})


@require_http_methods(["GET", "POST"])
def bull_add(request: HttpRequest) -> HttpResponse:
    """Show the new bull form or create a bull from the submitted data."""
    if request.method == 'POST':
        attributes = _parse_form_params(request)
        try:
            bull = create_bull(attributes)
        except BullValidationError:
            # Rebind the submitted data so the form re-renders with its errors
            return _render_form(request, BullForm(data=attributes), 'New bull', status=422)
        messages.success(request, 'Bull was successfully created.')
        return redirect('bull_detail', pk=bull.pk)
    return _render_form(request, BullForm(), 'New bull')


@require_http_methods(["GET", "POST"])
def bull_edit(request: HttpRequest, pk: int) -> HttpResponse:
    """Edit an existing bull; fields missing from the POST are left alone."""
    bull = _get_bull_or_404(pk)
    if request.method == 'POST':
        attributes = _parse_form_params(request)
        try:
            bull = update_bull(pk, attributes)
        except BullNotFound as exc:
            raise Http404(str(exc)) from exc
        except BullValidationError:
            data = model_to_dict(bull, fields=PERMITTED_FIELDS)
            data.update(attributes)
            return _render_form(request, BullForm(data=data, instance=bull), 'Editing bull', status=422)
        messages.success(request, 'Bull was successfully updated.')
        return redirect('bull_detail', pk=bull.pk)
    return _render_form(request, BullForm(instance=bull), 'Editing bull')


@require_POST
def bull_delete(request: HttpRequest, pk: int) -> HttpResponse:
    try:
        delete_bull(pk)
    except BullNotFound as exc:
        raise Http404(str(exc)) from exc
    messages.success(request, 'Bull was successfully destroyed.')
    return redirect('bull_list')


@require_http_methods(["GET", "POST"])
def bull_import(request: HttpRequest) -> HttpResponse:
    """Upload a workbook and create one bull per data row."""
    if request.method == 'POST':
        form = BullImportForm(request.POST, request.FILES)
        if form.is_valid():
            workbook = form.cleaned_data['workbook']
            try:
                result = import_bulls_workbook(workbook, strict=form.cleaned_data['strict'])
            except BullImportError as exc:
                form.add_error('workbook', str(exc))
                if exc.result is not None and exc.result.created:
                    messages.warning(
                        request,
                        f'{exc.result.created} bulls were created before the import stopped.',
                    )
            else:
                messages.success(request, f'Imported {result.created} bulls from the workbook.')
                if result.errors:
                    preview = '; '.join(result.errors[:5])
                    messages.warning(request, f'Some rows were skipped: {preview}')
                return redirect('bull_list')
        status = 422
    else:
        form = BullImportForm()
        status = 200
    context = {
        'form': form,
        'title': 'Import bulls',
        'required_headers': REQUIRED_HEADERS,
    }
    return render(request, 'bull_import.html', context, status=status)
