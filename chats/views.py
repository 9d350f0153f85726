from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework import status

from core.constants import ROLE_INVESTOR
from core.exceptions import MutualInterestRequired
from core.permissions import is_participant
from core.responses import api_success
from core.store import get_store
from ideas.services import IdeaCatalog
from investments.matching import has_mutual_interest
from .serializers import OpenChatSerializer, SendMessageSerializer
from .services import ChatChannelManager


def _participant_channel(request, chat_id):
    channel = ChatChannelManager(get_store()).get(chat_id)
    if channel is None:
        raise NotFound("Chat not found")
    if not is_participant(request.user, channel):
        raise PermissionDenied("You are not a participant in this chat")
    return channel


class ChatListCreateView(APIView):
    """
    GET  /api/chats   channels the caller takes part in
    POST /api/chats   {"idea_id", "founder_id"?, "investor_id"?}
                      201 when opened, 200 when it already existed
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return api_success(ChatChannelManager(get_store()).channels_for_user(request.user.id))

    def post(self, request):
        serializer = OpenChatSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        store = get_store()
        idea = IdeaCatalog(store).require_idea(data["idea_id"])
        founder_id = idea.get("founder_id")
        if data.get("founder_id") and data["founder_id"] != founder_id:
            raise PermissionDenied("founder_id does not own this idea")

        investor_id = data.get("investor_id")
        if not investor_id and request.user.role == ROLE_INVESTOR:
            investor_id = request.user.id
        if not investor_id:
            raise PermissionDenied("investor_id is required")

        if request.user.id not in (founder_id, investor_id):
            raise PermissionDenied("You are not a participant in this chat")

        if not has_mutual_interest(store, founder_id, investor_id, data["idea_id"]):
            raise MutualInterestRequired()

        channel, created = ChatChannelManager(store).get_or_create(founder_id, investor_id, data["idea_id"])
        if created:
            return api_success(channel, message="Chat created successfully", status_code=status.HTTP_201_CREATED)
        return api_success(channel)


class ChatDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, chat_id):
        return api_success(_participant_channel(request, chat_id))


class ChatMessagesView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, chat_id):
        return api_success(_participant_channel(request, chat_id).get("messages") or [])


class SendMessageView(APIView):
    """
    POST /api/chats/message {"chat_id": "...", "body": "..."}
    """
    permission_classes = [IsAuthenticated]
    throttle_scope = "chat-message"

    def post(self, request):
        serializer = SendMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        channel = _participant_channel(request, data["chat_id"])
        message = ChatChannelManager(get_store()).append_message(
            channel["id"], request.user.id, request.user.name, data["body"]
        )
        if message is None:
            raise NotFound("Chat not found")
        return api_success(message, message="Message sent successfully", status_code=status.HTTP_201_CREATED)
