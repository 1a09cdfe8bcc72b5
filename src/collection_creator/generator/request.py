"""Builds one collection item per (URL pattern, HTTP method) pair."""

import json
from typing import Any

from collection_creator.collection.models import Header, Item, RequestBody, RequestTemplate
from collection_creator.config import AuthorizationSettings
from collection_creator.errors import SerializationError


class RequestTemplateBuilder:
    """Assembles the headers, body and URL of a single request."""

    def __init__(self, authorization: AuthorizationSettings | None = None):
        self.authorization = authorization or AuthorizationSettings(enabled=False)

    def build(
        self,
        url_pattern: str,
        http_method: str,
        base_url: str,
        body_defaults: dict[str, Any],
        query_defaults: dict[str, Any],
    ) -> Item:
        method = http_method.upper()
        body = self._build_body(body_defaults) if body_defaults else None
        return Item(
            name=f"{url_pattern}_{method}",
            request=RequestTemplate(
                method=method,
                header=self._build_headers(),
                body=body,
                url=self._build_url(base_url, url_pattern, query_defaults),
            ),
        )

    def _build_headers(self) -> list[Header]:
        if not self.authorization.enabled:
            return []
        return [
            Header(
                key=self.authorization.header_name,
                value=self.authorization.header_value,
                type=self.authorization.header_type,
            )
        ]

    def _build_body(self, body_defaults: dict[str, Any]) -> RequestBody:
        try:
            raw = json.dumps(body_defaults, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise SerializationError(f"cannot encode request body placeholders: {e}") from e
        return RequestBody(raw=raw)

    def _build_url(self, base_url: str, path: str, query_defaults: dict[str, Any]) -> str:
        url = base_url + path
        if query_defaults:
            # Values are left unencoded so {placeholder} braces survive.
            url += "?" + "&".join(f"{key}={_render(value)}" for key, value in query_defaults.items())
        return url


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
