# users/urls.py

from django.urls import path
from .views import MyProfileView, UserDetailView

urlpatterns = [
    path("me", MyProfileView.as_view(), name="my-profile"),
    path("<str:user_id>", UserDetailView.as_view(), name="user-detail"),
]
