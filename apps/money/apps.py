import logging
import os

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class MoneyConfig(AppConfig):
    name = "apps.money"
    label = "money"
    verbose_name = "Money"
    path = os.path.dirname(os.path.abspath(__file__))

    def ready(self):
        from apps.money.domain.context import set_default_context
        from apps.money.infrastructure.registry import build_context

        context = build_context(getattr(settings, "MONEY", None))
        set_default_context(context)
        logger.info(
            "Money configured with %s (default currency %s)",
            context.bank.__class__.__name__,
            context.default_currency,
        )
