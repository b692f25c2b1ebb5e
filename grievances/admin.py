from django.contrib import admin
from grievances.models import Official, Submission


@admin.register(Submission)
class SubmissionAdmin(admin.ModelAdmin):
    list_display = ("id", "type", "name", "taluk", "village", "urgency", "status", "last_updated")
    list_filter = ("type", "status", "urgency", "taluk")
    search_fields = ("id", "name", "phone", "description")
    # Status changes go through the API so the history ledger stays complete.
    readonly_fields = [field.name for field in Submission._meta.fields]
    fieldsets = (
        ("Citizen", {"fields": ("id", "type", "name", "phone", "email")}),
        (
            "Location",
            {"fields": ("taluk", "firka", "village", "department", "category")},
        ),
        ("Details", {"fields": ("description", "urgency", "photos")}),
        ("Status", {"fields": ("status", "timestamp", "last_updated", "resolved_at")}),
        ("History", {"fields": ("history",), "classes": ("collapse",)}),
    )

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Official)
class OfficialAdmin(admin.ModelAdmin):
    list_display = ("username",)
    search_fields = ("username",)
    readonly_fields = ("password",)
