"""Tests for the ``import_bulls`` management command."""

from __future__ import annotations

import os
import shutil
import tempfile
from datetime import date
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from openpyxl import Workbook

from bulls.models import Bull


class ImportBullsCommandTests(TestCase):
    def setUp(self) -> None:
        super().setUp()
        self._workdir = tempfile.mkdtemp()
        self.addCleanup(lambda: shutil.rmtree(self._workdir, ignore_errors=True))

    def _build_workbook(self, rows) -> str:
        workbook = Workbook()
        worksheet = workbook.active
        worksheet.append(['Registration Code', 'Name', 'Born On', 'Offspring Count'])
        for row in rows:
            worksheet.append(row)
        path = os.path.join(self._workdir, 'bulls.xlsx')
        workbook.save(path)
        return path

    def test_command_reports_created_and_skipped_rows(self) -> None:
        path = self._build_workbook(
            [
                ['001', 'Alpha', date(2010, 1, 1), 1],
                ['002', 'Beta', 'next spring', 2],
                ['003', 'Gamma', date(2012, 1, 1), 3],
            ]
        )
        out = StringIO()

        call_command('import_bulls', path, stdout=out)

        output = out.getvalue()
        self.assertIn('Created 2 bulls (1 rows skipped).', output)
        self.assertIn('Row 3: born_on:', output)
        self.assertEqual(Bull.objects.count(), 2)

    def test_strict_flag_fails_on_invalid_row(self) -> None:
        path = self._build_workbook(
            [
                ['001', 'Alpha', date(2010, 1, 1), 1],
                ['002', 'Beta', 'next spring', 2],
            ]
        )

        with self.assertRaises(CommandError):
            call_command('import_bulls', path, '--strict', stdout=StringIO(), stderr=StringIO())

        self.assertEqual(Bull.objects.count(), 1)

    def test_missing_file_raises_command_error(self) -> None:
        with self.assertRaises(CommandError):
            call_command('import_bulls', os.path.join(self._workdir, 'missing.xlsx'), stdout=StringIO())
