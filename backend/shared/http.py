"""
Single-attempt JSON HTTP helpers shared by the provider clients.

Every failure is converted into a ProviderError subclass tagged with the
calling operation's name. No retries.
"""

from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from shared.errors import DeserializationError, ProviderStatusError, TransportError

ModelT = TypeVar("ModelT", bound=BaseModel)

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def get_json(
    operation: str,
    url: str,
    model: type[ModelT],
    timeout: float,
    params: dict[str, str] | None = None,
) -> ModelT:
    """GET a URL and validate the JSON body against a pydantic model."""
    try:
        response = requests.get(
            url, params=params, headers={"Accept": "application/json"}, timeout=timeout
        )
    except requests.RequestException as e:
        raise TransportError(operation, e) from e

    check_status(operation, response)
    return parse_body(operation, response, model)


def post_json(
    operation: str,
    url: str,
    payload: dict[str, Any],
    timeout: float,
    headers: dict[str, str] | None = None,
) -> requests.Response:
    """POST a JSON payload; returns the response once its status is 2xx."""
    try:
        response = requests.post(
            url,
            json=payload,
            headers={**JSON_HEADERS, **(headers or {})},
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise TransportError(operation, e) from e

    check_status(operation, response)
    return response


def check_status(operation: str, response: requests.Response) -> None:
    if not 200 <= response.status_code < 300:
        raise ProviderStatusError(operation, response.status_code, response.text)


def parse_body(
    operation: str, response: requests.Response, model: type[ModelT]
) -> ModelT:
    try:
        body = response.json()
    except ValueError as e:
        raise DeserializationError(operation, e) from e

    try:
        return model.model_validate(body)
    except ValidationError as e:
        raise DeserializationError(operation, e) from e
