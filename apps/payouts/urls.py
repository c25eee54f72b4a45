from django.urls import path
from . import views

app_name = 'payouts'

urlpatterns = [
    # GET /account-details - Current payout instructions (public)
    # PUT /account-details - Replace payout instructions (admin)
    path('account-details', views.AccountDetailsView.as_view(), name='account-details'),
]
