from django.contrib import admin
from .models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ['id', 'label', 'session', 'seller', 'client', 'manager', 'transaction_date']
    list_filter = ['session', 'transaction_date']
    search_fields = ['seller__name', 'client__name', 'label__game_description__name']
    raw_id_fields = ['label', 'session', 'seller', 'client', 'manager']
    readonly_fields = ['id']
    date_hierarchy = 'transaction_date'
