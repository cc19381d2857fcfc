from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Authentication
    path('login/', views.login, name='login'),
    path('register/', views.register, name='register'),

    # Manager profile
    path('me/', views.me, name='me'),
]
