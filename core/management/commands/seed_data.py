from django.core.management.base import BaseCommand

from core.constants import COLLECTIONS, ROLE_FOUNDER, ROLE_INVESTOR
from core.store import get_store
from ideas.services import IdeaCatalog
from users.services import UserDirectory

DEMO_PASSWORD = "password123"

USERS = [
    {"name": "Alice Founder", "email": "alice@venturelink.dev", "role": ROLE_FOUNDER, "company": "GreenGrid Labs",
     "bio": "Second-time founder working on distributed energy."},
    {"name": "Farid Khan", "email": "farid@venturelink.dev", "role": ROLE_FOUNDER, "company": "MediTrack",
     "bio": "Clinician turned product builder."},
    {"name": "Ivy Investor", "email": "ivy@venturelink.dev", "role": ROLE_INVESTOR, "company": "Northstar Ventures",
     "bio": "Seed-stage investor in climate and health."},
    {"name": "Victor Chen", "email": "victor@venturelink.dev", "role": ROLE_INVESTOR, "company": "Blue Harbor Capital",
     "bio": "Angel investor, ex-fintech operator."},
]

IDEAS = [
    {
        "founder": "alice@venturelink.dev",
        "title": "Peer-to-peer solar trading",
        "description": "A marketplace letting households with rooftop solar sell surplus energy to their neighbours.",
        "category": "CleanTech",
        "funding_goal": "$500k",
    },
    {
        "founder": "alice@venturelink.dev",
        "title": "Smart meter analytics for landlords",
        "description": "Usage insights and anomaly alerts for multi-unit buildings using existing smart meters.",
        "category": "IoT",
        "funding_goal": "$250k",
    },
    {
        "founder": "farid@venturelink.dev",
        "title": "Medication adherence companion",
        "description": "A mobile assistant that reminds patients about doses and shares adherence reports with clinicians.",
        "category": "HealthTech",
        "funding_goal": "$750k",
    },
]


class Command(BaseCommand):
    help = "Seeds the active record store with demo founders, investors and ideas"

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Empty every collection before seeding",
        )

    def handle(self, *args, **options):
        store = get_store()
        self.stdout.write(f"🌱 Seeding data into the {store.backend_name} store...")

        if options["reset"]:
            for collection in COLLECTIONS:
                store.save(collection, [])
            self.stdout.write("Cleared all collections")

        # 1. Ensure users
        directory = UserDirectory(store)
        users = {}
        for data in USERS:
            user = directory.find_by_email(data["email"])
            if user is None:
                user = directory.create_user(password=DEMO_PASSWORD, **data)
                self.stdout.write(f"Created {user['role']}: {user['email']}")
            users[user["email"]] = user

        # 2. Ideas, skipped when the founder already has one with the same title
        catalog = IdeaCatalog(store)
        for data in IDEAS:
            founder = users[data["founder"]]
            titles = {idea.get("title") for idea in catalog.get_ideas_by_founder(founder["id"])}
            if data["title"] in titles:
                continue
            fields = {k: v for k, v in data.items() if k != "founder"}
            idea = catalog.add_idea(fields, founder)
            self.stdout.write(f"Created Idea: {idea['title']}")

        self.stdout.write(self.style.SUCCESS(f"✅ Seeding Complete! Demo password: {DEMO_PASSWORD}"))
