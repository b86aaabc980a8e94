from django.contrib import admin

from .models import FacultyMember


@admin.register(FacultyMember)
class FacultyMemberAdmin(admin.ModelAdmin):
    list_display = ["name", "college", "department", "created"]
    list_filter = ["college", "department"]
    search_fields = ["name"]
    ordering = ["name"]
