import atexit
import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger("venturelink.store")


class CoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self):
        from core import store

        instance = store.build_store(settings.VENTURELINK_STORE)
        store.set_store(instance)
        atexit.register(store.close_store)
        logger.info(f"Record store ready: {instance.backend_name}")
