from django.urls import path
from grievances.api.views import (
    DcdmLoginView,
    OfficialLoginView,
    SubmissionDetailView,
    SubmissionListCreateView,
    SubmissionLookupView,
    SubmissionStatusView,
)

urlpatterns = [
    path("submissions", SubmissionListCreateView.as_view(), name="submission-list"),
    # Must stay ahead of the <submission_id> route.
    path("submissions/lookup", SubmissionLookupView.as_view(), name="submission-lookup"),
    path(
        "submissions/<str:submission_id>",
        SubmissionDetailView.as_view(),
        name="submission-detail",
    ),
    path(
        "submissions/<str:submission_id>/status",
        SubmissionStatusView.as_view(),
        name="submission-status",
    ),
    # Authentication endpoints
    path("auth/dcdm", DcdmLoginView.as_view(), name="auth-dcdm"),
    path("auth/official", OfficialLoginView.as_view(), name="auth-official"),
]
