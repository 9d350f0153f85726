from django.urls import path, include
from core.views import PingView, StatusView

urlpatterns = [
    path("api/auth/", include("authx.urls")),
    path("api/users/", include("users.urls")),
    path("api/", include("ideas.urls")),
    path("api/", include("investments.urls")),
    path("api/", include("chats.urls")),
    path("api/status", StatusView.as_view(), name="status"),
    path("api/ping", PingView.as_view(), name="ping"),
]
