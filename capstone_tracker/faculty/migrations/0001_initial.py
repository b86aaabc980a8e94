# Generated manually on 2026-10-12

import uuid

import django.utils.timezone
import model_utils.fields
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='FacultyMember',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200, verbose_name='name')),
                ('college', models.CharField(max_length=200, verbose_name='college')),
                ('department', models.CharField(max_length=200, verbose_name='department')),
            ],
            options={
                'verbose_name': 'faculty member',
                'verbose_name_plural': 'faculty members',
                'ordering': ['name'],
                'constraints': [models.UniqueConstraint(fields=('name', 'department'), name='unique_faculty_name_department')],
            },
        ),
    ]
