"""Programmatic entry point: turn a host route table into a collection file."""

import logging
from typing import Iterable

from collection_creator.collection.models import Collection
from collection_creator.config import GeneratorSettings
from collection_creator.errors import GeneratorDisabledError
from collection_creator.generator.assembler import AssemblyReport, CollectionAssembler
from collection_creator.generator.writer import write_collection
from collection_creator.routes.base import RouteDescriptor

logger = logging.getLogger(__name__)


class CollectionService:
    """Binds a route table to generator settings.

    Usage::

        service = CollectionService(routes, load_settings())
        path = service.generate_collection("http://localhost:8080")
    """

    def __init__(self, routes: Iterable[RouteDescriptor], settings: GeneratorSettings | None = None):
        self.routes = routes
        self.settings = settings or GeneratorSettings()
        self.assembler = CollectionAssembler(authorization=self.settings.authorization)

    def resolve_base_url(self, base_url_override: str | None = None) -> str:
        """A non-blank configured base URL wins over the caller's argument."""
        if self.settings.base_url.strip():
            return self.settings.base_url
        return base_url_override or ""

    def build_report(self, base_url_override: str | None = None) -> AssemblyReport:
        base_url = self.resolve_base_url(base_url_override)
        return self.assembler.assemble_report(self.routes, base_url, self.settings.collection)

    def build_collection(self, base_url_override: str | None = None) -> Collection:
        return self.build_report(base_url_override).collection

    def generate_collection(self, base_url_override: str | None = None) -> str:
        """Generate the collection file and return its absolute path."""
        path, _ = self.generate_with_report(base_url_override)
        return path

    def generate_with_report(self, base_url_override: str | None = None) -> tuple[str, AssemblyReport]:
        """Like generate_collection, also returning the assembly report."""
        if not self.settings.enabled:
            raise GeneratorDisabledError("collection generator is disabled in settings")

        logger.info("Starting collection generation")
        report = self.build_report(base_url_override)
        if report.failures:
            logger.warning("%d route(s) skipped because of errors", len(report.failures))

        path = write_collection(report.collection, self.settings.output.full_path)
        logger.info("Collection with %d item(s) written to %s", len(report.collection.item), path)
        return path, report
