from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class ProjectsConfig(AppConfig):
    name = "capstone_tracker.projects"
    verbose_name = _("Capstone Projects")
