from django.contrib import admin
from .models import Session


@admin.register(Session)
class SessionAdmin(admin.ModelAdmin):
    list_display = ['name', 'start_date', 'end_date', 'sale_commission', 'deposit_fee', 'is_open_now']
    search_fields = ['name', 'location']
    list_filter = ['start_date']
    readonly_fields = ['id', 'created_at', 'updated_at']

    def is_open_now(self, obj):
        return obj.is_open()
    is_open_now.boolean = True
    is_open_now.short_description = 'Open'
