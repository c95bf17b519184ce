"""Adapter DI providers (non-mockable)."""

from dishka import Scope, provide

from roster.adapter.email.renderer import TemplateRenderer
from roster.util.di.base import ProviderBase


class ProdAdapterProvider(ProviderBase):
    """Adapters with no external side effects, shared by prod and tests."""

    scope = Scope.APP

    @provide
    def get_template_renderer(self) -> TemplateRenderer:
        """Provide email template renderer."""
        return TemplateRenderer()
