from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.exceptions import PermissionDenied
from rest_framework import status

from core.permissions import IsFounder, IsInvestor
from core.responses import api_error, api_success
from core.store import get_store
from users.services import UserDirectory
from .serializers import IdeaCreateSerializer, IdeaUpdateSerializer, ToggleLikeSerializer
from .services import DEFAULT_PAGE_SIZE, IdeaCatalog, LikeService


# -----------------------------
# IDEAS
# -----------------------------
class IdeaListCreateView(APIView):
    """
    GET  /api/ideas?category=&search=&status=&page=&limit=
    POST /api/ideas            (founders only)
    """

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsFounder()]
        return [AllowAny()]

    def get(self, request):
        params = request.query_params
        try:
            page = int(params.get("page", 1))
            limit = int(params.get("limit", DEFAULT_PAGE_SIZE))
        except ValueError:
            return api_error("Invalid pagination params")

        catalog = IdeaCatalog(get_store())
        ideas = catalog.list_ideas(
            category=params.get("category"),
            search=params.get("search"),
            status=params.get("status"),
        )
        return api_success(catalog.paginate(ideas, page=page, limit=limit))

    def post(self, request):
        serializer = IdeaCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        store = get_store()
        founder = UserDirectory(store).get(request.user.id)
        idea = IdeaCatalog(store).add_idea(serializer.validated_data, founder)
        return api_success(idea, message="Idea created successfully", status_code=status.HTTP_201_CREATED)


class IdeaDetailView(APIView):
    """
    GET    /api/ideas/<id>
    PUT    /api/ideas/<id>   (owner only, partial)
    DELETE /api/ideas/<id>   (owner only)
    """

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAuthenticated()]

    def get(self, request, idea_id):
        return api_success(IdeaCatalog(get_store()).require_idea(idea_id))

    def put(self, request, idea_id):
        catalog = IdeaCatalog(get_store())
        idea = catalog.require_idea(idea_id)
        if idea.get("founder_id") != request.user.id:
            raise PermissionDenied("You can only update your own ideas")

        serializer = IdeaUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        updated = catalog.update_idea(idea_id, serializer.validated_data)
        return api_success(updated, message="Idea updated successfully")

    patch = put

    def delete(self, request, idea_id):
        catalog = IdeaCatalog(get_store())
        idea = catalog.require_idea(idea_id)
        if idea.get("founder_id") != request.user.id:
            raise PermissionDenied("You can only delete your own ideas")

        catalog.delete_idea(idea_id)
        return api_success(message="Idea deleted successfully")


class FounderIdeasView(APIView):
    permission_classes = [IsFounder]

    def get(self, request):
        return api_success(IdeaCatalog(get_store()).get_ideas_by_founder(request.user.id))


# -----------------------------
# LIKES
# -----------------------------
class ToggleLikeView(APIView):
    """
    POST /api/likes {"idea_id": "..."}
    201 + like when the idea becomes liked, 200 when it is unliked.
    """
    permission_classes = [IsInvestor]

    def post(self, request):
        serializer = ToggleLikeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        liked, like = LikeService(get_store()).toggle_like(request.user.id, serializer.validated_data["idea_id"])
        if liked:
            return api_success(like, message="Idea liked successfully", status_code=status.HTTP_201_CREATED)
        return api_success(message="Idea unliked successfully")


class IdeaLikesView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, idea_id):
        return api_success(LikeService(get_store()).likes_for_idea(idea_id))


class MyLikesView(APIView):
    permission_classes = [IsInvestor]

    def get(self, request):
        return api_success(LikeService(get_store()).liked_idea_ids(request.user.id))


class CheckLikeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, idea_id):
        has_liked = LikeService(get_store()).has_liked(request.user.id, idea_id)
        return api_success({"has_liked": has_liked})
