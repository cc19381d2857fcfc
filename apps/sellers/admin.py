from django.contrib import admin
from .models import Seller


@admin.register(Seller)
class SellerAdmin(admin.ModelAdmin):
    list_display = ['name', 'email', 'phone', 'amount_owed', 'created_at']
    search_fields = ['name', 'email']
    readonly_fields = ['id', 'amount_owed', 'created_at', 'updated_at']
