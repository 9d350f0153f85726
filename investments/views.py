from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.exceptions import NotFound, PermissionDenied
from rest_framework import status

from core.constants import INTEREST_INTERESTED
from core.permissions import IsFounder, IsInvestor
from core.responses import api_success
from core.store import get_store
from ideas.services import IdeaCatalog
from users.services import UserDirectory
from .matching import annotate_can_chat
from .serializers import ExpressInterestSerializer, InvestmentUpdateSerializer, LikeBackSerializer
from .services import InterestLedger


def _founders_by_idea(catalog):
    return {idea["id"]: idea.get("founder_id") for idea in catalog.all()}


class ExpressInterestView(APIView):
    """
    POST /api/investments {"idea_id": "...", "amount": "$250k"}
    """
    permission_classes = [IsInvestor]

    def post(self, request):
        serializer = ExpressInterestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        store = get_store()
        investor = UserDirectory(store).get(request.user.id)
        record = InterestLedger(store).express_interest(
            investor,
            serializer.validated_data["idea_id"],
            serializer.validated_data["amount"],
        )
        return api_success(record, message="Interest expressed successfully", status_code=status.HTTP_201_CREATED)


class IdeaInvestmentsView(APIView):
    """The idea's founder sees every record; anyone else only their own."""
    permission_classes = [IsAuthenticated]

    def get(self, request, idea_id):
        ledger = InterestLedger(get_store())
        idea = ledger.catalog.require_idea(idea_id)
        records = ledger.for_idea(idea["id"])
        if idea.get("founder_id") != request.user.id:
            records = [r for r in records if r.get("investor_id") == request.user.id]
        return api_success(records)


class MyInvestmentsView(APIView):
    permission_classes = [IsInvestor]

    def get(self, request):
        store = get_store()
        ledger = InterestLedger(store)
        records = ledger.for_investor(request.user.id)
        return api_success(annotate_can_chat(store, records, _founders_by_idea(ledger.catalog)))


class FounderInvestmentsView(APIView):
    permission_classes = [IsFounder]

    def get(self, request):
        store = get_store()
        ledger = InterestLedger(store)
        records = ledger.for_founder(request.user.id)
        founders = {r["idea_id"]: request.user.id for r in records}
        return api_success(annotate_can_chat(store, records, founders))


class LikeBackView(APIView):
    """
    POST /api/investments/like-back {"investor_id": "...", "idea_id": "..."}
    Only the founder who owns the idea can like back.
    """
    permission_classes = [IsFounder]

    def post(self, request):
        serializer = LikeBackSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        ledger = InterestLedger(get_store())
        idea = ledger.catalog.require_idea(data["idea_id"])
        if idea.get("founder_id") != request.user.id:
            raise PermissionDenied("You can only like back interest in your own ideas")

        record = ledger.like_back(data["investor_id"], idea["id"], actor_id=request.user.id)
        if record is None:
            raise NotFound("Investment not found")
        return api_success(record, message="Interest liked back successfully")


class InvestmentDetailView(APIView):
    """
    PUT    /api/investments/<id>   investor edits amount or re-opens; founder moves status
    DELETE /api/investments/<id>   original investor withdraws
    """
    permission_classes = [IsAuthenticated]

    def put(self, request, investment_id):
        serializer = InvestmentUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        changes = serializer.validated_data

        ledger = InterestLedger(get_store())
        record = ledger.require(investment_id)
        idea = ledger.catalog.get_idea(record["idea_id"])
        is_investor = record.get("investor_id") == request.user.id
        is_founder = idea is not None and idea.get("founder_id") == request.user.id

        if not (is_investor or is_founder):
            raise PermissionDenied("You do not have permission to update this investment")
        if "amount" in changes and not is_investor:
            raise PermissionDenied("Only the investor can change the amount")
        if "status" in changes and not is_founder:
            if not (is_investor and changes["status"] == INTEREST_INTERESTED):
                raise PermissionDenied("Only the idea's founder can change the status")

        updated = ledger.update(record["id"], changes, actor_id=request.user.id)
        return api_success(updated, message="Investment updated successfully")

    patch = put

    def delete(self, request, investment_id):
        InterestLedger(get_store()).withdraw(investment_id, request.user.id)
        return api_success(message="Investment withdrawn successfully")
