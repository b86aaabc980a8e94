from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Project


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ["title", "project_type", "adviser", "status", "progress", "defense_schedule", "created"]
    list_filter = ["project_type", "status", "college", "department", "defense_result"]
    search_fields = ["title", "adviser", "description"]
    readonly_fields = ["created", "modified", "proposal_id", "original_id"]
    ordering = ["-created"]
    fieldsets = (
        (None, {"fields": ("title", "project_type", "description")}),
        (_("Affiliation"), {"fields": ("college", "department", "adviser", "members")}),
        (_("Workflow"), {"fields": ("status", "progress")}),
        (_("Defense"), {"fields": ("defense_schedule", "venue", "panel_members", "documenter", "defense_result")}),
        (_("History"), {"fields": ("proposal_id", "original_id", "created", "modified")}),
    )
