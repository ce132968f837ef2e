"""Django admin configuration for the bull registry."""

from django.contrib import admin

from .models import Bull


@admin.register(Bull)
class BullAdmin(admin.ModelAdmin):
    list_display = ('name', 'registration_code', 'born_on', 'offspring_count', 'updated_at')
    search_fields = ('name', 'registration_code')
    ordering = ('id',)
