"""Import bull records from an Excel workbook.

Usage::

    python manage.py import_bulls bulls.xlsx
    python manage.py import_bulls bulls.xlsx --strict

The workbook's header row must contain the columns ``Registration Code``,
``Name``, ``Born On`` and ``Offspring Count``. Each data row becomes one
bull. Invalid rows are skipped and listed unless ``--strict`` is given,
in which case the first invalid row stops the import (rows created
before it are kept).
"""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from bulls.services.bull_import import BullImportError, import_bulls_workbook


class Command(BaseCommand):
    help = "Create bull records from the rows of an Excel workbook."

    def add_arguments(self, parser):
        parser.add_argument("path", help="Path to the .xlsx workbook to import.")
        parser.add_argument(
            "--strict",
            action="store_true",
            help="Stop at the first invalid row instead of skipping it.",
        )

    def handle(self, *args, **options):
        path = options["path"]
        self.stdout.write(self.style.NOTICE(f"Importing bulls from {path}..."))
        try:
            result = import_bulls_workbook(path, strict=options["strict"])
        except BullImportError as exc:
            if exc.result is not None and exc.result.created:
                self.stderr.write(
                    self.style.WARNING(f"{exc.result.created} bulls were created before the failure.")
                )
            raise CommandError(f"Failed to import bulls: {exc}") from exc

        for message in result.errors:
            self.stdout.write(self.style.WARNING(message))
        self.stdout.write(
            self.style.SUCCESS(
                f"Created {result.created} bulls ({result.skipped} rows skipped)."
            )
        )
