from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'sale_sessions'

router = DefaultRouter()
router.register(r'', views.SessionViewSet, basename='session')

urlpatterns = [
    # GET    /api/sessions/                - List sessions
    # POST   /api/sessions/                - Create session
    # GET    /api/sessions/open/           - Currently open session
    # GET    /api/sessions/{id}/           - Get session
    # PUT    /api/sessions/{id}/           - Update session (merge)
    # PATCH  /api/sessions/{id}/           - Partial update
    # DELETE /api/sessions/{id}/           - Delete session
    # GET    /api/sessions/{id}/is_open/   - Open state
    path('', include(router.urls)),
]
