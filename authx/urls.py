# authx/urls.py
from django.urls import path
from .views import SignupView, LoginView, LogoutView, MeView

urlpatterns = [
    path("register", SignupView.as_view(), name="register"),
    path("login", LoginView.as_view(), name="login"),
    path("logout", LogoutView.as_view(), name="logout"),
    path("me", MeView.as_view(), name="me"),
]
