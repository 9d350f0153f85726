# users/views.py - profile API over the Record Store

from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.exceptions import NotFound

from core.responses import api_success
from core.store import get_store
from .serializers import UpdateProfileSerializer
from .services import UserDirectory, public_user


class MyProfileView(APIView):
    """
    GET   /api/users/me
    PATCH /api/users/me   {name?, company?, bio?}
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        user = UserDirectory(get_store()).get(request.user.id)
        return api_success(public_user(user))

    def patch(self, request):
        serializer = UpdateProfileSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = UserDirectory(get_store()).update_profile(request.user.id, serializer.validated_data)
        if user is None:
            raise NotFound("User not found")
        return api_success(public_user(user), message="Profile updated successfully")


class UserDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, user_id):
        user = UserDirectory(get_store()).get(user_id)
        if user is None:
            raise NotFound("User not found")
        data = public_user(user)
        # email stays private to the account owner
        if user["id"] != request.user.id:
            data.pop("email", None)
        return api_success(data)
