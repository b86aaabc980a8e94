from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class DefensesConfig(AppConfig):
    name = "capstone_tracker.defenses"
    verbose_name = _("Defense Scheduling")
