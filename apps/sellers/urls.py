from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'sellers'

router = DefaultRouter()
router.register(r'', views.SellerViewSet, basename='seller')

urlpatterns = [
    # GET    /api/sellers/         - List sellers
    # POST   /api/sellers/         - Create seller
    # GET    /api/sellers/{id}/    - Get seller
    # PUT    /api/sellers/{id}/    - Update seller (merge)
    # PATCH  /api/sellers/{id}/    - Partial update
    # DELETE /api/sellers/{id}/    - Delete seller
    path('', include(router.urls)),
]
