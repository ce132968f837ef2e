"""Allow bulls without a name.

Spreadsheet rows and form submissions may leave the name empty; the
column now defaults to an empty string like ``registration_code``.
"""

from __future__ import annotations

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('bulls', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='bull',
            name='name',
            field=models.CharField(blank=True, default='', max_length=255),
        ),
    ]
