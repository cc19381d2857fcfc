from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'games'

router = DefaultRouter()
router.register(r'game-descriptions', views.GameDescriptionViewSet, basename='game-description')
router.register(r'deposited-games', views.DepositedGameViewSet, basename='deposited-game')

urlpatterns = [
    # Catalog
    # GET    /api/game-descriptions/                   - List game descriptions
    # POST   /api/game-descriptions/                   - Create game description
    # GET    /api/game-descriptions/{id}/              - Get game description
    # PUT    /api/game-descriptions/{id}/              - Update (merge)
    # PATCH  /api/game-descriptions/{id}/              - Partial update
    # DELETE /api/game-descriptions/{id}/              - Delete
    #
    # Deposited games
    # GET    /api/deposited-games/                     - List deposited games
    # POST   /api/deposited-games/                     - Deposit in a given session
    # POST   /api/deposited-games/open-session/        - Deposit in the open session
    # GET    /api/deposited-games/seller/{id}/         - By seller
    # GET    /api/deposited-games/session/{id}/        - By session
    # GET    /api/deposited-games/seller/{id}/session/{id}/ - By seller and session
    # GET    /api/deposited-games/{id}/                - Get deposited game
    # PUT    /api/deposited-games/{id}/                - Update price/references
    # PATCH  /api/deposited-games/{id}/                - Partial update
    # DELETE /api/deposited-games/{id}/                - Delete
    # POST   /api/deposited-games/{id}/for_sale/       - Put up for sale
    # POST   /api/deposited-games/{id}/remove_from_sale/ - Take off sale
    # POST   /api/deposited-games/{id}/picked_up/      - Returned to seller
    path('', include(router.urls)),
]
