from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import Manager


@admin.register(Manager)
class ManagerAdmin(BaseUserAdmin):
    """Admin interface for manager accounts."""

    list_display = [
        'email',
        'first_name',
        'last_name',
        'is_admin',
        'is_active',
        'created_at',
        'last_login',
    ]
    list_filter = ['is_admin', 'is_active', 'is_staff']
    search_fields = ['email', 'first_name', 'last_name']
    ordering = ['email']
    readonly_fields = ['id', 'created_at', 'last_login']

    fieldsets = (
        (None, {'fields': ('id', 'email', 'password')}),
        ('Personal info', {'fields': ('first_name', 'last_name')}),
        ('Permissions', {'fields': ('is_admin', 'is_active', 'is_staff', 'is_superuser')}),
        ('Dates', {'fields': ('created_at', 'last_login')}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'password1', 'password2', 'is_admin'),
        }),
    )
