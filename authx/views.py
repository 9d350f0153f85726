from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.exceptions import AuthenticationFailed
from rest_framework import status

from core.responses import api_success
from core.store import get_store
from users.services import UserDirectory, public_user
from .serializers import SignupSerializer, LoginSerializer
from .tokens import issue_token


class SignupView(APIView):
    """
    POST /api/auth/register
    Creates a founder or investor and returns {user, token}.
    """
    permission_classes = [AllowAny]
    throttle_scope = "auth"

    def post(self, request):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserDirectory(get_store()).create_user(**serializer.validated_data)
        return api_success(
            {"user": public_user(user), "token": issue_token(user)},
            message="User created successfully",
            status_code=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    permission_classes = [AllowAny]
    throttle_scope = "auth"

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserDirectory(get_store()).authenticate(
            serializer.validated_data["email"],
            serializer.validated_data["password"],
        )
        if user is None:
            raise AuthenticationFailed("Invalid email or password")
        return api_success({"user": public_user(user), "token": issue_token(user)})


class LogoutView(APIView):
    # Tokens are stateless; the client discards its copy.
    permission_classes = [IsAuthenticated]

    def post(self, request):
        return api_success(message="Logged out successfully")


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return api_success(request.user.record)
