# Generated manually on 2026-10-12

import uuid

import django.utils.timezone
import django_fsm
import model_utils.fields
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Project',
            fields=[
                ('created', model_utils.fields.AutoCreatedField(default=django.utils.timezone.now, editable=False, verbose_name='created')),
                ('modified', model_utils.fields.AutoLastModifiedField(default=django.utils.timezone.now, editable=False, verbose_name='modified')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('project_type', models.CharField(choices=[('proposal', 'Proposal'), ('final', 'Final'), ('inventory', 'Inventory')], default='proposal', max_length=20, verbose_name='type')),
                ('title', models.CharField(max_length=500, verbose_name='title')),
                ('college', models.CharField(max_length=200, verbose_name='college')),
                ('department', models.CharField(max_length=200, verbose_name='department')),
                ('adviser', models.CharField(max_length=200, verbose_name='adviser')),
                ('members', models.JSONField(default=list, help_text='Ordered list of group member names', verbose_name='members')),
                ('description', models.TextField(blank=True, verbose_name='description')),
                ('status', django_fsm.FSMField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('rejected', 'Rejected')], default='pending', max_length=50, verbose_name='status')),
                ('progress', models.CharField(blank=True, default='In Progress', max_length=100, verbose_name='progress')),
                ('defense_schedule', models.DateTimeField(blank=True, null=True, verbose_name='defense schedule')),
                ('venue', models.CharField(blank=True, max_length=200, verbose_name='venue')),
                ('panel_members', models.JSONField(blank=True, default=list, verbose_name='panel members')),
                ('documenter', models.CharField(blank=True, max_length=200, verbose_name='documenter')),
                ('defense_result', models.CharField(blank=True, choices=[('passed', 'Passed'), ('failed', 'Failed')], max_length=10, verbose_name='defense result')),
                ('proposal_id', models.UUIDField(blank=True, null=True, verbose_name='proposal id')),
                ('original_id', models.UUIDField(blank=True, null=True, verbose_name='original id')),
            ],
            options={
                'verbose_name': 'project',
                'verbose_name_plural': 'projects',
                'ordering': ['-created'],
                'indexes': [
                    models.Index(fields=['defense_schedule'], name='project_defense_idx'),
                    models.Index(fields=['project_type', 'status'], name='project_type_status_idx'),
                ],
            },
        ),
    ]
