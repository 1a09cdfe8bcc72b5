import json
from pathlib import Path
from typing import Annotated

import pytest

from collection_creator.config import AuthorizationSettings, GeneratorSettings, OutputSettings
from collection_creator.errors import GeneratorDisabledError, SerializationError
from collection_creator.generator.assembler import CollectionAssembler
from collection_creator.routes.base import Query
from collection_creator.routes.table import RouteTable
from collection_creator.service import CollectionService


def _routes() -> RouteTable:
    table = RouteTable()

    @table.route("/users/{id}", methods=["GET", "DELETE"])
    def user(id: Annotated[int, Query()]):
        pass

    return table


def _settings(tmp_path, **overrides) -> GeneratorSettings:
    return GeneratorSettings(output=OutputSettings(directory=str(tmp_path / "out"), filename="c.json"), **overrides)


class TestBaseUrl:
    def test_configured_base_url_wins(self, tmp_path):
        service = CollectionService(_routes(), _settings(tmp_path, base_url="http://configured"))
        assert service.resolve_base_url("http://argument") == "http://configured"
        assert service.build_collection("http://argument").item[0].request.url.startswith("http://configured/")

    def test_blank_configured_base_url_falls_back_to_argument(self, tmp_path):
        service = CollectionService(_routes(), _settings(tmp_path, base_url="   "))
        assert service.resolve_base_url("http://argument") == "http://argument"

    def test_no_base_url_at_all(self, tmp_path):
        service = CollectionService(_routes(), _settings(tmp_path))
        assert service.resolve_base_url(None) == ""
        assert service.build_collection().item[0].request.url == "/users/{id}?id=0"


class TestGenerateCollection:
    def test_writes_file_and_returns_absolute_path(self, tmp_path):
        service = CollectionService(_routes(), _settings(tmp_path))
        path = service.generate_collection("http://localhost:8080")

        assert path == str((tmp_path / "out" / "c.json").absolute())
        data = json.loads((tmp_path / "out" / "c.json").read_text(encoding="utf-8"))
        assert [i["name"] for i in data["item"]] == ["/users/{id}_GET", "/users/{id}_DELETE"]
        assert data["item"][0]["request"]["url"] == "http://localhost:8080/users/{id}?id=0"
        assert data["item"][0]["request"]["header"] == [
            {"key": "Authorization", "value": "{{logintoken}}", "type": "text"}
        ]

    def test_output_is_byte_identical_across_runs(self, tmp_path):
        service = CollectionService(_routes(), _settings(tmp_path))
        target = tmp_path / "out" / "c.json"

        service.generate_collection("http://h")
        first = target.read_bytes()
        service.generate_collection("http://h")
        assert target.read_bytes() == first

    def test_authorization_disabled(self, tmp_path):
        settings = _settings(tmp_path, authorization=AuthorizationSettings(enabled=False))
        collection = CollectionService(_routes(), settings).build_collection()
        assert all(item.request.header == [] for item in collection.item)

    def test_disabled_generator_raises(self, tmp_path):
        service = CollectionService(_routes(), _settings(tmp_path, enabled=False))
        with pytest.raises(GeneratorDisabledError):
            service.generate_collection()
        assert not (tmp_path / "out").exists()

    def test_report_includes_failures(self, tmp_path):
        table = _routes()

        @table.route("/broken", methods=["GET"])
        def broken(x: "Missing" = Query()):  # noqa: F821
            pass

        path, report = CollectionService(table, _settings(tmp_path)).generate_with_report()
        assert len(report.failures) == 1
        assert len(json.loads(Path(path).read_text(encoding="utf-8"))["item"]) == 2

    def test_serialization_failure_writes_nothing(self, tmp_path):
        class ObjectBodyExtractor:
            def extract(self, route, body, query):
                body["x"] = object()

        service = CollectionService(_routes(), _settings(tmp_path))
        service.assembler = CollectionAssembler(extractor=ObjectBodyExtractor())
        with pytest.raises(SerializationError):
            service.generate_collection()
        assert not (tmp_path / "out" / "c.json").exists()
