from __future__ import annotations

from opentelemetry import trace

from bistro.application.dto.responses import MenuResponse
from bistro.application.mappers.menu_mapper import to_menu_response
from bistro.domain.menu.entities import MenuCatalog

tracer = trace.get_tracer(__name__)


class GetMenu:
    def __init__(self, catalog: MenuCatalog) -> None:
        self._catalog = catalog

    def execute(self) -> MenuResponse:
        with tracer.start_as_current_span("get_menu"):
            return to_menu_response(self._catalog.list_all(), capacity=self._catalog.capacity)
