"""Shareable link encoding for plan parameters.

Parameters travel in a single ``args`` query parameter holding the
percent-encoded JSON of the camelCase parameter dict, e.g.
``?args=%7B%22columns%22%3A10%2C...%7D``.
"""
import json
from typing import Mapping, Union
from urllib.parse import parse_qs, quote, urlsplit

from ..errors import ParameterError
from ..models import PlanParameters

QUERY_KEY = 'args'


def encode_share_query(params: PlanParameters) -> str:
    """
    Encode parameters as a query string.

    Args:
        params: PlanParameters

    Returns:
        Query string without the leading ``?``
    """
    payload = json.dumps(params.to_dict(), separators=(',', ':'))
    return f"{QUERY_KEY}={quote(payload, safe='')}"


def build_share_url(base_url: str, params: PlanParameters) -> str:
    """Append the encoded parameters to a page URL."""
    return f"{base_url.split('?', 1)[0]}?{encode_share_query(params)}"


def decode_share_query(query: Union[str, Mapping[str, str], None]) -> PlanParameters:
    """
    Decode parameters from a URL, query string or query mapping.

    A missing ``args`` value gives the default parameters; keys absent from
    the JSON keep their defaults.

    Args:
        query: Full URL, query string (with or without ``?``), or a mapping
            such as Flask's ``request.args``

    Returns:
        PlanParameters

    Raises:
        ParameterError: If the payload is not a JSON object or holds
            non-numeric values
    """
    if query is None:
        return PlanParameters()

    if isinstance(query, str):
        if '://' in query:
            query = urlsplit(query).query
        values = parse_qs(query.lstrip('?'))
        raw = values[QUERY_KEY][0] if QUERY_KEY in values else None
    else:
        raw = query.get(QUERY_KEY)

    if not raw:
        return PlanParameters()

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParameterError(f"Malformed share link: {e}")

    if not isinstance(data, dict):
        raise ParameterError("Malformed share link: expected a JSON object")

    return PlanParameters.from_dict(data)
