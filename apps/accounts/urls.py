from django.urls import path
from . import views

app_name = 'admins'

urlpatterns = [
    # POST /admin/login           - Start session
    # POST /admin/logout          - Destroy session
    # POST /admin/change-password - Change password (admin)
    path('login', views.login, name='login'),
    path('logout', views.logout, name='logout'),
    path('change-password', views.change_password, name='change-password'),
]
