"""
Schema registry client.

Fetches the service's OpenAPI document from the registry exactly once, at
startup. The registry stores the artifact as YAML; JSON content parses too,
since JSON is a subset of YAML.

There is deliberately no retry and no refresh: if the registry is down when
the process starts, the process does not start.
"""

import logging
from typing import Any

import httpx
import yaml

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Base class for failures loading the schema document."""


class FetchError(RegistryError):
    """The registry could not be reached or answered with a non-200 status."""


class ParseError(RegistryError):
    """The registry answered, but the body is not a YAML mapping."""


def load_schema(url: str, transport: httpx.BaseTransport | None = None) -> dict[str, Any]:
    """Fetch and parse the schema document at ``url``.

    ``transport`` is handed to ``httpx.Client`` as-is; tests use it to plug
    in a stub registry.
    """
    logger.info("Fetching OpenAPI spec from %s", url)

    try:
        with httpx.Client(transport=transport) as client:
            resp = client.get(url)
    except httpx.HTTPError as e:
        raise FetchError(f"failed to fetch from registry: {e}") from e

    if resp.status_code != httpx.codes.OK:
        raise FetchError(f"registry returned status: {resp.status_code}")

    return parse_schema(resp.content)


def parse_schema(body: bytes | str) -> dict[str, Any]:
    try:
        document = yaml.safe_load(body)
    except yaml.YAMLError as e:
        raise ParseError(f"failed to parse OpenAPI spec: {e}") from e

    if not isinstance(document, dict):
        raise ParseError(
            f"failed to parse OpenAPI spec: expected a mapping, got {type(document).__name__}"
        )

    return document
