from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import AuthApiIndexView, RegisterView, LoginView, CurrentUserView

urlpatterns = [
    path("", AuthApiIndexView.as_view(), name="auth-index"),
    path("register/", RegisterView.as_view(), name="auth-register"),
    path("signup/", RegisterView.as_view(), name="auth-signup"),
    path("login/", LoginView.as_view(), name="auth-login"),
    path("refresh/", TokenRefreshView.as_view(), name="auth-refresh"),
    path("me/", CurrentUserView.as_view(), name="auth-me"),
]
