from django.urls import path
from .views import (
    IdeaListCreateView,
    IdeaDetailView,
    FounderIdeasView,
    ToggleLikeView,
    IdeaLikesView,
    MyLikesView,
    CheckLikeView,
)

urlpatterns = [
    path("ideas", IdeaListCreateView.as_view(), name="idea-list-create"),
    path("ideas/<str:idea_id>", IdeaDetailView.as_view(), name="idea-detail"),
    path("founder/ideas", FounderIdeasView.as_view(), name="founder-ideas"),

    path("likes", ToggleLikeView.as_view(), name="like-toggle"),
    path("likes/idea/<str:idea_id>", IdeaLikesView.as_view(), name="idea-likes"),
    path("likes/user", MyLikesView.as_view(), name="my-likes"),
    path("likes/check/<str:idea_id>", CheckLikeView.as_view(), name="like-check"),
]
