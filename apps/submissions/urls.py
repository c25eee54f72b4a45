from django.urls import path
from . import views

app_name = 'submissions'

urlpatterns = [
    # POST /submissions              - Submit a claim (public, multipart)
    # GET  /submissions              - List claims (admin)
    # PUT  /submissions/{id}/status  - Confirm a claim (admin)
    path('submissions', views.SubmissionListCreateView.as_view(), name='submission-list'),
    path('submissions/<str:submission_id>/status', views.update_status, name='submission-status'),
]
