# core/constants.py

# --- Record Store collections ---
COLLECTION_USERS = "users"
COLLECTION_IDEAS = "ideas"
COLLECTION_LIKES = "likes"
COLLECTION_INVESTMENTS = "investments"
COLLECTION_CHATS = "chats"

COLLECTIONS = (
    COLLECTION_USERS,
    COLLECTION_IDEAS,
    COLLECTION_LIKES,
    COLLECTION_INVESTMENTS,
    COLLECTION_CHATS,
)

# --- Roles ---
ROLE_FOUNDER = "founder"
ROLE_INVESTOR = "investor"

ROLE_CHOICES = [
    (ROLE_FOUNDER, "Founder"),
    (ROLE_INVESTOR, "Investor"),
]

# --- Idea ---
IDEA_STATUS_ACTIVE = "active"
IDEA_STATUS_FUNDED = "funded"
IDEA_STATUS_CLOSED = "closed"

IDEA_STATUS_CHOICES = [
    (IDEA_STATUS_ACTIVE, "Active"),
    (IDEA_STATUS_FUNDED, "Funded"),
    (IDEA_STATUS_CLOSED, "Closed"),
]

IDEA_CATEGORIES = [
    "FinTech",
    "HealthTech",
    "EdTech",
    "E-commerce",
    "SaaS",
    "AI/ML",
    "Blockchain",
    "IoT",
    "CleanTech",
    "FoodTech",
    "Mobility",
    "Other",
]

# --- Interest records ---
INTEREST_INTERESTED = "interested"
INTEREST_LIKED_BACK = "liked_back"
INTEREST_DECLINED = "declined"

INTEREST_STATUS_CHOICES = [
    (INTEREST_INTERESTED, "Interested"),
    (INTEREST_LIKED_BACK, "Liked back"),
    (INTEREST_DECLINED, "Declined"),
]

# Values written by the older negotiation flow, folded into the canonical set.
LEGACY_INTEREST_STATUSES = {
    "negotiating": INTEREST_LIKED_BACK,
    "funded": INTEREST_LIKED_BACK,
}

# --- Chat ---
CHAT_ID_PREFIX = "chat"
MESSAGE_MAX_LENGTH = 1000
