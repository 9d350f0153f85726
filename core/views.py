from rest_framework.views import APIView
from rest_framework.permissions import AllowAny

from core.responses import api_success
from core.store import get_store


class PingView(APIView):
    """Liveness check."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return api_success(message="VentureLink API is running")


class StatusView(APIView):
    """Which record store backend is serving requests, and whether it answers."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        store = get_store()
        available = store.is_available()
        if available:
            message = f"Connected to {store.backend_name} storage"
        else:
            message = f"{store.backend_name} storage is not reachable"
        return api_success({
            "backend": store.backend_name,
            "available": available,
            "message": message,
        })
