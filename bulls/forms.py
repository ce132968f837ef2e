"""Forms used by the bull registry.

``BullForm`` is the single validation path for bull attributes: the
record store runs every create and update through it, whether the data
came from an HTML form, a JSON body or a spreadsheet row.
"""

from __future__ import annotations

from django import forms
from django.core.validators import FileExtensionValidator

from .models import Bull

# Attributes callers may set. Anything else in a payload is dropped.
PERMITTED_FIELDS = ['registration_code', 'name', 'born_on', 'offspring_count']


class BullForm(forms.ModelForm):
    """Create or edit a bull record."""

    class Meta:
        model = Bull
        fields = PERMITTED_FIELDS
        widgets = {
            'registration_code': forms.TextInput(attrs={'class': 'form-control'}),
            'name': forms.TextInput(attrs={'class': 'form-control'}),
            'born_on': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}, format='%Y-%m-%d'),
            'offspring_count': forms.NumberInput(attrs={'class': 'form-control', 'min': 0}),
        }
        labels = {
            'registration_code': 'Registration code',
            'born_on': 'Born on',
            'offspring_count': 'Offspring count',
        }


class BullImportForm(forms.Form):
    """Upload wrapper around the bull spreadsheet importer."""

    workbook = forms.FileField(
        label='Bull Excel Workbook',
        validators=[FileExtensionValidator(allowed_extensions=['xlsx'])],
        widget=forms.ClearableFileInput(
            attrs={
                'class': 'form-control',
                'accept': '.xlsx',
            }
        ),
    )
    strict = forms.BooleanField(
        label='Stop at the first invalid row',
        required=False,
        widget=forms.CheckboxInput(attrs={'class': 'form-check-input'}),
    )
