from django.contrib import admin
from .models import GameDescription, DepositedGame


@admin.register(GameDescription)
class GameDescriptionAdmin(admin.ModelAdmin):
    list_display = ['name', 'publisher', 'min_players', 'max_players', 'age_range']
    search_fields = ['name', 'publisher']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(DepositedGame)
class DepositedGameAdmin(admin.ModelAdmin):
    list_display = ['game_description', 'seller', 'session', 'sale_price', 'for_sale', 'sold', 'picked_up']
    list_filter = ['for_sale', 'sold', 'picked_up', 'session']
    search_fields = ['game_description__name', 'seller__name']
    raw_id_fields = ['game_description', 'seller', 'session']
    readonly_fields = ['id', 'created_at', 'updated_at']
