"""Network response events produced by the page crawler."""

from typing import List, Optional

import httpx
from pydantic import BaseModel, Field

from circumvention.config import ResourceType, TEXT_RESOURCE_TYPES


class ResponseEvent(BaseModel):
    """A network response observed while loading a monitored page.

    ``body`` is None whenever the crawler could not or chose not to read the
    response text (binary resource, non-200 status, read error).
    """

    url: str
    source_page_url: Optional[str] = Field(default=None, alias="sourcePageUrl")
    resource_type: str = Field(default=ResourceType.OTHER.value, alias="resourceType")
    status_code: int = Field(default=200, alias="statusCode")
    body: Optional[str] = None

    model_config = {"populate_by_name": True}

    @classmethod
    def from_httpx(
        cls,
        response: httpx.Response,
        source_page_url: Optional[str],
        resource_type: str,
    ) -> "ResponseEvent":
        """Build an event from an already received httpx response.

        This is the entry point for crawlers that fetch resources with httpx:
        they hand each response here together with the page that loaded it
        and the browser resource type, and feed the resulting events to a
        PageVisit. Only text resources with a 200 status keep their body.
        """
        if isinstance(resource_type, ResourceType):
            resource_type = resource_type.value

        body = None
        if resource_type in TEXT_RESOURCE_TYPES and response.status_code == 200:
            body = response.text

        return cls(
            url=str(response.url),
            source_page_url=source_page_url,
            resource_type=resource_type,
            status_code=response.status_code,
            body=body,
        )


class PageVisit(BaseModel):
    """All responses observed while loading one page."""

    page_url: str = Field(alias="pageUrl")
    responses: List[ResponseEvent] = Field(default_factory=list)
    error: Optional[str] = None

    model_config = {"populate_by_name": True}

    def source_of(self, event: ResponseEvent) -> str:
        return event.source_page_url or self.page_url
