"""Tests for the HTML bull pages."""

from __future__ import annotations

from datetime import date
from io import BytesIO

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.urls import reverse

from openpyxl import Workbook

from bulls.models import Bull


class BullViewTests(TestCase):
    def setUp(self) -> None:
        self.bull = Bull.objects.create(
            registration_code='R-1',
            name='Ferdinand',
            born_on=date(2016, 4, 2),
            offspring_count=12,
        )

    def test_list_shows_bulls(self) -> None:
        response = self.client.get(reverse('bull_list'))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, '<h1>Bulls</h1>', html=True)
        self.assertContains(response, 'Ferdinand')

    def test_root_redirects_to_list(self) -> None:
        response = self.client.get('/')

        self.assertRedirects(response, reverse('bull_list'))

    def test_new_form_renders(self) -> None:
        response = self.client.get(reverse('bull_add'))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Create Bull')

    def test_create_redirects_to_new_bull(self) -> None:
        response = self.client.post(
            reverse('bull_add'),
            data={'name': 'Bodacious', 'born_on': '2012-02-12', 'offspring_count': '3'},
            follow=True,
        )

        self.assertEqual(Bull.objects.count(), 2)
        created = Bull.objects.last()
        self.assertRedirects(response, reverse('bull_detail', args=[created.pk]))
        self.assertContains(response, 'Bull was successfully created.')
        self.assertEqual(created.born_on, date(2012, 2, 12))
        self.assertEqual(created.offspring_count, 3)

    def test_create_with_invalid_values_rerenders_form(self) -> None:
        response = self.client.post(
            reverse('bull_add'),
            data={'name': 'Bodacious', 'born_on': 'last year', 'offspring_count': '-1'},
        )

        self.assertEqual(response.status_code, 422)
        self.assertContains(response, 'Enter a valid date.', status_code=422)
        self.assertContains(response, 'greater than or equal to 0', status_code=422)
        self.assertEqual(Bull.objects.count(), 1)

    def test_create_without_name_is_accepted(self) -> None:
        response = self.client.post(reverse('bull_add'), data={'offspring_count': '3'})

        created = Bull.objects.last()
        self.assertRedirects(response, reverse('bull_detail', args=[created.pk]))
        self.assertEqual(created.name, '')
        self.assertEqual(created.offspring_count, 3)

    def test_detail_shows_bull(self) -> None:
        response = self.client.get(reverse('bull_detail', args=[self.bull.pk]))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'R-1')
        self.assertContains(response, '2016-04-02')

    def test_detail_missing_is_404(self) -> None:
        response = self.client.get(reverse('bull_detail', args=[self.bull.pk + 1000]))

        self.assertEqual(response.status_code, 404)

    def test_edit_form_renders(self) -> None:
        response = self.client.get(reverse('bull_edit', args=[self.bull.pk]))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Update Bull')
        self.assertContains(response, 'value="Ferdinand"')

    def test_update_changes_only_posted_fields(self) -> None:
        response = self.client.post(
            reverse('bull_edit', args=[self.bull.pk]),
            data={'name': 'Ferdinand II'},
            follow=True,
        )

        self.assertRedirects(response, reverse('bull_detail', args=[self.bull.pk]))
        self.assertContains(response, 'Bull was successfully updated.')
        self.bull.refresh_from_db()
        self.assertEqual(self.bull.name, 'Ferdinand II')
        self.assertEqual(self.bull.registration_code, 'R-1')
        self.assertEqual(self.bull.born_on, date(2016, 4, 2))
        self.assertEqual(self.bull.offspring_count, 12)

    def test_invalid_update_rerenders_form(self) -> None:
        response = self.client.post(
            reverse('bull_edit', args=[self.bull.pk]),
            data={'offspring_count': '-1'},
        )

        self.assertEqual(response.status_code, 422)
        self.bull.refresh_from_db()
        self.assertEqual(self.bull.offspring_count, 12)

    def test_delete_removes_bull(self) -> None:
        response = self.client.post(reverse('bull_delete', args=[self.bull.pk]), follow=True)

        self.assertRedirects(response, reverse('bull_list'))
        self.assertContains(response, 'Bull was successfully destroyed.')
        self.assertFalse(Bull.objects.exists())
        self.assertEqual(
            self.client.get(reverse('bull_detail', args=[self.bull.pk])).status_code,
            404,
        )

    def test_delete_requires_post(self) -> None:
        response = self.client.get(reverse('bull_delete', args=[self.bull.pk]))

        self.assertEqual(response.status_code, 405)
        self.assertTrue(Bull.objects.filter(pk=self.bull.pk).exists())


class BullImportViewTests(TestCase):
    def _build_upload(self, rows, headers=None) -> SimpleUploadedFile:
        workbook = Workbook()
        worksheet = workbook.active
        worksheet.append(headers or ['Registration Code', 'Name', 'Born On', 'Offspring Count'])
        for row in rows:
            worksheet.append(row)
        payload = BytesIO()
        workbook.save(payload)
        payload.seek(0)
        return SimpleUploadedFile(
            'bulls.xlsx',
            payload.getvalue(),
            content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
        )

    def test_import_page_lists_required_columns(self) -> None:
        response = self.client.get(reverse('bull_import'))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Registration Code, Name, Born On, Offspring Count')

    def test_upload_creates_bulls(self) -> None:
        upload = self._build_upload(
            [
                ['001', 'Alpha', date(2010, 1, 1), 1],
                ['002', 'Beta', date(2011, 1, 1), 2],
            ]
        )

        response = self.client.post(reverse('bull_import'), data={'workbook': upload}, follow=True)

        self.assertRedirects(response, reverse('bull_list'))
        self.assertContains(response, 'Imported 2 bulls from the workbook.')
        self.assertEqual(Bull.objects.count(), 2)

    def test_upload_reports_skipped_rows(self) -> None:
        upload = self._build_upload(
            [
                ['001', 'Alpha', date(2010, 1, 1), 1],
                ['002', 'Beta', 'next spring', 2],
            ]
        )

        response = self.client.post(reverse('bull_import'), data={'workbook': upload}, follow=True)

        self.assertContains(response, 'Some rows were skipped: Row 3: born_on:')
        self.assertEqual(Bull.objects.count(), 1)

    def test_upload_with_wrong_headers_shows_error(self) -> None:
        upload = self._build_upload([['Alpha']], headers=['Name'])

        response = self.client.post(reverse('bull_import'), data={'workbook': upload})

        self.assertEqual(response.status_code, 422)
        self.assertContains(response, 'Missing required columns', status_code=422)
        self.assertFalse(Bull.objects.exists())
