"""
Seed command to populate the faculty directory with the default advisers.

Usage:
    python manage.py seed_faculty
    python manage.py seed_faculty --clear  # Remove every faculty member first
"""

import logging

from django.core.management.base import BaseCommand

from capstone_tracker.faculty.constants import DEFAULT_FACULTY, college_of
from capstone_tracker.faculty.models import FacultyMember

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Seed the faculty directory with the default faculty members"

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Remove existing faculty members before seeding",
        )

    def handle(self, *args, **options):
        if options["clear"]:
            deleted, _ = FacultyMember.objects.all().delete()
            self.stdout.write(f"Removed {deleted} faculty members.")

        created_count = 0
        for department, names in DEFAULT_FACULTY.items():
            college = college_of(department)
            for name in names:
                _, created = FacultyMember.objects.get_or_create(
                    name=name,
                    department=department,
                    defaults={"college": college},
                )
                if created:
                    created_count += 1

        logger.info("Seeded %s faculty members", created_count)
        self.stdout.write(self.style.SUCCESS(f"Created {created_count} faculty members."))
