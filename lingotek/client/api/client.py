"""Lingotek API client.

The client wires one authenticated transport to the page streaming engine
and exposes the per-resource operations of the API. Single-page operations
raise their errors directly; ``list_*`` operations return a PageStream whose
errors arrive on its error channel.

Example:
    >>> async with LingotekClient("token") as client:
    ...     async with client.list_communities() as communities:
    ...         async for community in communities:
    ...             print(community.properties.title)
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, BinaryIO, TypeVar

from pydantic import ValidationError

from ..config import (
    ACCESS_TOKEN_ENV,
    DEFAULT_PAGE_LIMIT,
    DEFAULT_TIMEOUT,
    ENVIRONMENT_ENV,
    get_base_url,
)
from ..core import Environment, IdRequiredError, ServerError
from ..models import Community, Document, Messages, Project, Status, Translation
from ..runtime import (
    BearerToken,
    CredentialProvider,
    PageFetcher,
    PageStream,
    RESTTransport,
)
from .endpoints import community, document, project, translation
from .endpoints import get_collection_spec
from .spec import EntityAdapter

logger = logging.getLogger(__name__)

M = TypeVar("M")


def _require_id(value: str | None, what: str) -> str:
    if not value:
        raise IdRequiredError(f"No ID given: {what} id is required")
    return value


class LingotekClient:
    """Async client for the Lingotek REST API."""

    def __init__(
        self,
        access_token: str | None = None,
        *,
        credentials: CredentialProvider | None = None,
        environment: Environment | str = Environment.SANDBOX,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        page_limit: int = DEFAULT_PAGE_LIMIT,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            access_token: OAuth access token, sent as ``bearer <token>``
            credentials: Custom credential provider (overrides access_token)
            environment: Deployment used when base_url is not given
            base_url: Explicit API base URL
            timeout: Total request timeout in seconds
            page_limit: Page size requested when streaming collections
            transport: Pre-built transport (tests, shared sessions)
        """
        if transport is None:
            if credentials is None:
                if not access_token:
                    raise ValueError("An access token or credential provider is required")
                credentials = BearerToken(access_token)
            transport = RESTTransport(
                base_url or get_base_url(environment),
                credentials,
                timeout=timeout,
            )
        self._transport = transport
        self._fetcher = PageFetcher(transport)
        self._page_limit = page_limit

    @classmethod
    def from_env(cls, **kwargs: Any) -> LingotekClient:
        """Build a client from LINGOTEK_ACCESS_TOKEN / LINGOTEK_ENVIRONMENT."""
        token = os.environ.get(ACCESS_TOKEN_ENV)
        if not token:
            raise ValueError(f"{ACCESS_TOKEN_ENV} is not set")
        kwargs.setdefault("environment", os.environ.get(ENVIRONMENT_ENV, Environment.SANDBOX))
        return cls(token, **kwargs)

    # ----------------------
    # Streams
    # ----------------------
    def stream(
        self,
        collection_id: str,
        params: dict[str, Any] | None = None,
        *,
        done: asyncio.Event | None = None,
    ) -> PageStream[Any]:
        """Start streaming a registered collection.

        Args:
            collection_id: Collection identifier (e.g., "communities")
            params: Collection parameters (e.g., ``{"community_id": ...}``)
            done: Optional cancellation signal shared with the caller

        Raises:
            ValueError: If collection_id is not registered
            IdRequiredError: If a required id parameter is empty
        """
        spec = get_collection_spec(collection_id)
        if spec is None:
            raise ValueError(f"Unknown collection: {collection_id}")

        params = dict(params or {})
        for key in spec.required:
            _require_id(params.get(key), key.removesuffix("_id"))

        query = spec.build_query(params) if spec.build_query else None
        stream = PageStream(
            self._fetcher,
            spec.build_path(params),
            spec.decoder,
            query=query,
            limit=self._page_limit,
            done=done,
            endpoint_id=spec.id,
        )
        return stream.start()

    def list_communities(self, done: asyncio.Event | None = None) -> PageStream[Community]:
        return self.stream(community.SPEC.id, done=done)

    def list_projects(
        self, community_ref: Community | str, done: asyncio.Event | None = None
    ) -> PageStream[Project]:
        community_id = community_ref if isinstance(community_ref, str) else community_ref.id
        return self.stream(project.SPEC.id, {"community_id": community_id}, done=done)

    def list_documents(self, done: asyncio.Event | None = None) -> PageStream[Document]:
        return self.stream(document.SPEC.id, done=done)

    def list_translations(
        self, doc: Document | str, done: asyncio.Event | None = None
    ) -> PageStream[Translation]:
        document_id = doc if isinstance(doc, str) else doc.id
        return self.stream(translation.SPEC.id, {"document_id": document_id}, done=done)

    # ----------------------
    # Single pages and entities
    # ----------------------
    async def get_community(self, community_id: str) -> Community:
        _require_id(community_id, "community")
        return await self._get_entity(community.entity_path(community_id), community.ADAPTER)

    async def get_communities_page(self, offset: int, limit: int) -> list[Community]:
        query = {"offset": str(offset), "limit": str(limit)}
        return await self._get_collection_page("community", query, community.ADAPTER)

    async def get_projects(self, community_id: str) -> list[Project]:
        """Fetch the first page of a community's projects."""
        _require_id(community_id, "community")
        query = project.build_query({"community_id": community_id})
        return await self._get_collection_page("project", query, project.ADAPTER)

    async def get_document(self, document_id: str) -> Document:
        _require_id(document_id, "document")
        return await self._get_entity(document.entity_path(document_id), document.ADAPTER)

    async def check_status(self, doc: Document) -> Document:
        """Refetch a document to read its current status."""
        _require_id(doc.id, "document")
        return await self._get_entity(document.entity_path(doc.id), document.ADAPTER)

    async def upload_string(
        self, title: str, content: str, locale_code: str, target_project: Project
    ) -> Status:
        """Upload a string as a new document of ``target_project``."""
        form = {
            "title": title,
            "content": content,
            "locale_code": locale_code,
            "project_id": target_project.id,
        }
        return await self._post_entity("document", form, document.STATUS_ADAPTER)

    async def add_translation(self, doc: Document, locale_code: str) -> Translation:
        """Request a translation of ``doc`` into ``locale_code``."""
        _require_id(doc.id, "document")
        return await self._post_entity(
            translation.collection_path(doc.id),
            {"locale_code": locale_code},
            translation.ADAPTER,
        )

    async def get_translated_document(
        self, doc: Document, locale_code: str, writer: BinaryIO | Any
    ) -> int:
        """Download the translated content of ``doc`` into ``writer``.

        Returns:
            Number of bytes written
        """
        _require_id(doc.id, "document")
        return await self._transport.download(
            document.content_path(doc.id), writer, {"locale_code": locale_code}
        )

    async def _get_entity(
        self, route: str, adapter: EntityAdapter[M], query: dict[str, str] | None = None
    ) -> M:
        raw = await self._transport.get(route, query)
        return adapter.parse_one(raw)

    async def _get_collection_page(
        self, route: str, query: dict[str, str], adapter: EntityAdapter[M]
    ) -> list[M]:
        envelope = await self._fetcher.fetch_page(route, query)
        return adapter.parse_many(envelope.entities)

    async def _post_entity(
        self, route: str, form: dict[str, str], adapter: EntityAdapter[M]
    ) -> M:
        try:
            raw = await self._transport.post(route, form)
        except ServerError as e:
            e.messages = _server_messages(e.body)
            logger.warning(
                "write_rejected",
                extra={"route": route, "status_code": e.status_code, "messages": e.messages},
            )
            raise
        return adapter.parse_one(raw)

    # ----------------------
    # Lifecycle
    # ----------------------
    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> LingotekClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def _server_messages(body: bytes) -> list[str]:
    # Error bodies usually carry {"messages": [...]}; anything else has none
    if not body:
        return []
    try:
        return Messages.model_validate_json(body).messages
    except ValidationError:
        return []
