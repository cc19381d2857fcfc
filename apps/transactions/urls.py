from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'transactions'

router = DefaultRouter()
router.register(r'', views.TransactionViewSet, basename='transaction')

urlpatterns = [
    # All routes require authentication
    # GET    /api/transactions/                        - List transactions
    # POST   /api/transactions/                        - Sell a deposited game
    # POST   /api/transactions/bulk/                   - Record several sales
    # GET    /api/transactions/by-session/{id}/        - Sales of a session
    # GET    /api/transactions/client/{id}/            - Purchases of a client
    # GET    /api/transactions/seller/{id}/            - Sales of a seller
    # GET    /api/transactions/{id}/                   - Get transaction
    # PUT    /api/transactions/{id}/                   - Correct transaction (merge)
    # PATCH  /api/transactions/{id}/                   - Partial correction
    # DELETE /api/transactions/{id}/                   - Delete transaction
    path('', include(router.urls)),
]
