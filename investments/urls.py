from django.urls import path
from .views import (
    ExpressInterestView,
    IdeaInvestmentsView,
    MyInvestmentsView,
    FounderInvestmentsView,
    LikeBackView,
    InvestmentDetailView,
)

urlpatterns = [
    path("investments", ExpressInterestView.as_view(), name="investment-create"),
    path("investments/idea/<str:idea_id>", IdeaInvestmentsView.as_view(), name="idea-investments"),
    path("investments/user", MyInvestmentsView.as_view(), name="my-investments"),
    path("investments/founder", FounderInvestmentsView.as_view(), name="founder-investments"),
    path("investments/like-back", LikeBackView.as_view(), name="investment-like-back"),
    path("investments/<str:investment_id>", InvestmentDetailView.as_view(), name="investment-detail"),
]
