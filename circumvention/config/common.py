"""Common enumerations used across monitor configuration."""

from enum import Enum


class ResourceType(str, Enum):
    """Resource type of an observed network response, as reported by the browser."""

    DOCUMENT = "document"
    STYLESHEET = "stylesheet"
    IMAGE = "image"
    MEDIA = "media"
    FONT = "font"
    SCRIPT = "script"
    TEXTTRACK = "texttrack"
    XHR = "xhr"
    FETCH = "fetch"
    EVENTSOURCE = "eventsource"
    WEBSOCKET = "websocket"
    MANIFEST = "manifest"
    OTHER = "other"


# Resource types whose body is kept for content matching
TEXT_RESOURCE_TYPES = frozenset({
    ResourceType.DOCUMENT.value,
    ResourceType.STYLESHEET.value,
    ResourceType.SCRIPT.value,
})


class NegativeReason(str, Enum):
    """Why a monitored page produced no positive match."""

    WEBSITE_DOWN = "WebsiteDown"
    NOT_FOUND = "NotFound"


class RuleScope(str, Enum):
    """Granularity of the URL pattern of a generated blocking rule."""

    DOMAIN = "domain"
    REGISTERED_DOMAIN = "registeredDomain"
    DOMAIN_AND_PATH = "domainAndPath"
