"""Transactional templates and their versions.

See https://sendgrid.com/docs/API_Reference/Web_API_v3/Transactional_Templates/templates.html
"""

from __future__ import annotations

import threading

from ..infrastructure.deserialization import KeyedField, ensure_success, parse_response
from ..models import Template, TemplateVersion
from ..protocols import HttpClient


class Templates:
    """Manage transactional templates."""

    def __init__(self, client: HttpClient, endpoint: str = "/templates") -> None:
        self._client = client
        self._endpoint = endpoint

    def create(self, name: str, *, cancellation: threading.Event | None = None) -> Template:
        response = self._client.post(self._endpoint, {"name": name}, cancellation=cancellation)
        return parse_response(response, Template)

    def get_all(self, *, cancellation: threading.Event | None = None) -> list[Template]:
        response = self._client.get(self._endpoint, cancellation=cancellation)
        return parse_response(response, list[Template], KeyedField("templates"))

    def get(self, template_id: str, *, cancellation: threading.Event | None = None) -> Template:
        response = self._client.get(f"{self._endpoint}/{template_id}", cancellation=cancellation)
        return parse_response(response, Template)

    def update(
        self,
        template_id: str,
        name: str,
        *,
        cancellation: threading.Event | None = None,
    ) -> Template:
        response = self._client.patch(
            f"{self._endpoint}/{template_id}", {"name": name}, cancellation=cancellation
        )
        return parse_response(response, Template)

    def delete(self, template_id: str, *, cancellation: threading.Event | None = None) -> None:
        response = self._client.delete(
            f"{self._endpoint}/{template_id}", cancellation=cancellation
        )
        ensure_success(response)

    def create_version(
        self,
        template_id: str,
        name: str,
        subject: str,
        html_content: str,
        text_content: str,
        is_active: bool,
        *,
        cancellation: threading.Event | None = None,
    ) -> TemplateVersion:
        data: dict[str, object] = {
            "name": name,
            "subject": subject,
            "html_content": html_content,
            "plain_content": text_content,
            "active": 1 if is_active else 0,
        }
        response = self._client.post(
            f"{self._endpoint}/{template_id}/versions", data, cancellation=cancellation
        )
        return parse_response(response, TemplateVersion)

    def activate_version(
        self,
        template_id: str,
        version_id: str,
        *,
        cancellation: threading.Event | None = None,
    ) -> TemplateVersion:
        response = self._client.post(
            f"{self._endpoint}/{template_id}/versions/{version_id}/activate",
            cancellation=cancellation,
        )
        return parse_response(response, TemplateVersion)

    def get_version(
        self,
        template_id: str,
        version_id: str,
        *,
        cancellation: threading.Event | None = None,
    ) -> TemplateVersion:
        response = self._client.get(
            f"{self._endpoint}/{template_id}/versions/{version_id}", cancellation=cancellation
        )
        return parse_response(response, TemplateVersion)

    def update_version(
        self,
        template_id: str,
        version_id: str,
        name: str | None = None,
        subject: str | None = None,
        html_content: str | None = None,
        text_content: str | None = None,
        is_active: bool | None = None,
        *,
        cancellation: threading.Event | None = None,
    ) -> TemplateVersion:
        """Update a template version; only the supplied values are sent."""
        data: dict[str, object] = {}
        if name:
            data["name"] = name
        if subject:
            data["subject"] = subject
        if html_content:
            data["html_content"] = html_content
        if text_content:
            data["plain_content"] = text_content
        if is_active is not None:
            data["active"] = 1 if is_active else 0
        response = self._client.patch(
            f"{self._endpoint}/{template_id}/versions/{version_id}",
            data,
            cancellation=cancellation,
        )
        return parse_response(response, TemplateVersion)

    def delete_version(
        self,
        template_id: str,
        version_id: str,
        *,
        cancellation: threading.Event | None = None,
    ) -> None:
        response = self._client.delete(
            f"{self._endpoint}/{template_id}/versions/{version_id}", cancellation=cancellation
        )
        ensure_success(response)
