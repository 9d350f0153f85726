from django.urls import path
from .views import (
    ChatListCreateView,
    SendMessageView,
    ChatDetailView,
    ChatMessagesView,
)

urlpatterns = [
    path("chats", ChatListCreateView.as_view(), name="chat-list-create"),
    path("chats/message", SendMessageView.as_view(), name="chat-message"),
    path("chats/<str:chat_id>", ChatDetailView.as_view(), name="chat-detail"),
    path("chats/<str:chat_id>/messages", ChatMessagesView.as_view(), name="chat-messages"),
]
