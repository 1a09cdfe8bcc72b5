"""Collection assembly from a route table."""

import logging
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from collection_creator.collection.models import Collection, Info, Item
from collection_creator.config import AuthorizationSettings, CollectionSettings
from collection_creator.errors import SerializationError
from collection_creator.generator.parameters import ParameterExtractor
from collection_creator.generator.request import RequestTemplateBuilder
from collection_creator.routes.base import RouteDescriptor

logger = logging.getLogger(__name__)


class RouteFailure(BaseModel):
    """A route that raised while being turned into items."""

    model_config = ConfigDict(frozen=True)

    route: str
    error: str


class AssemblyReport(BaseModel):
    """Outcome of one assembly run."""

    model_config = ConfigDict(frozen=True)

    collection: Collection
    failures: list[RouteFailure] = []
    unmapped: int = 0  # routes without a pattern or a method


class CollectionAssembler:
    """Walks a route table and builds one item per pattern x method."""

    def __init__(
        self,
        authorization: AuthorizationSettings | None = None,
        extractor: ParameterExtractor | None = None,
        builder: RequestTemplateBuilder | None = None,
    ):
        self.extractor = extractor or ParameterExtractor()
        self.builder = builder or RequestTemplateBuilder(authorization)

    def assemble(self, routes: Iterable[RouteDescriptor], base_url: str, meta: CollectionSettings) -> Collection:
        return self.assemble_report(routes, base_url, meta).collection

    def assemble_report(
        self, routes: Iterable[RouteDescriptor], base_url: str, meta: CollectionSettings
    ) -> AssemblyReport:
        """Assemble the collection, recording routes that failed or were skipped."""
        items: list[Item] = []
        failures: list[RouteFailure] = []
        unmapped = 0

        for route in list(routes):
            if not route.patterns or not route.methods:
                logger.debug("Skipping route %s: no URL pattern or HTTP method", route.label)
                unmapped += 1
                continue
            try:
                items.extend(self._items_for(route, base_url))
            except SerializationError:
                raise
            except Exception as e:
                logger.warning("Failed to process route %s", route.label, exc_info=True)
                failures.append(RouteFailure(route=route.label, error=f"{type(e).__name__}: {e}"))

        collection = Collection(info=Info(name=meta.name, schema=meta.schema_uri), item=items)
        return AssemblyReport(collection=collection, failures=failures, unmapped=unmapped)

    def _items_for(self, route: RouteDescriptor, base_url: str) -> list[Item]:
        body_defaults: dict = {}
        query_defaults: dict = {}
        self.extractor.extract(route, body_defaults, query_defaults)

        return [
            self.builder.build(pattern, method, base_url, body_defaults, query_defaults)
            for pattern in route.patterns
            for method in route.methods
        ]
