"""PyPI fallback for dependencies without local license metadata."""

import asyncio
from typing import Any, Optional

import httpx

from license_file_generator.collectors.metadata import CLASSIFIER_TO_SPDX
from license_file_generator.exceptions import NetworkError
from license_file_generator.models.dependency import ProjectSnapshot

PYPI_BASE_URL = "https://pypi.org/pypi"

# Rate limiting for concurrent HTTP requests
MAX_CONCURRENT_REQUESTS = 10


async def fetch_pypi_metadata(
    package_name: str,
    version: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[dict[str, Any]]:
    """Fetch package metadata from PyPI JSON API.

    Args:
        package_name: The package name to fetch metadata for.
        version: Optional version; the latest release is used when omitted.
        client: Optional httpx.AsyncClient to use. If not provided,
            a new client will be created.

    Returns:
        PyPI JSON API response dict, or None if package not found or the
        response is not JSON.

    Raises:
        NetworkError: If the network request fails.
    """
    if version:
        url = f"{PYPI_BASE_URL}/{package_name}/{version}/json"
    else:
        url = f"{PYPI_BASE_URL}/{package_name}/json"

    async def do_fetch(c: httpx.AsyncClient) -> Optional[dict[str, Any]]:
        try:
            response = await c.get(url, timeout=httpx.Timeout(30.0))
            if response.status_code == 404:
                return None
            response.raise_for_status()
            return response.json()  # type: ignore[no-any-return]
        except httpx.HTTPStatusError:
            return None
        except ValueError:
            # 200 with a body that is not JSON, e.g. a proxy login page
            return None
        except httpx.RequestError as e:
            raise NetworkError(f"Failed to fetch {package_name}: {e}") from e

    if client:
        return await do_fetch(client)

    async with httpx.AsyncClient() as new_client:
        return await do_fetch(new_client)


def extract_license_from_metadata(metadata: Optional[dict[str, Any]]) -> Optional[str]:
    """Extract license identifier from PyPI metadata.

    Args:
        metadata: PyPI JSON API response dict.

    Returns:
        License identifier string, or None if not found.
    """
    if not metadata:
        return None

    info: dict[str, Any] = metadata.get("info", {})

    expression: Optional[str] = info.get("license_expression")
    if expression and expression.strip():
        return expression.strip()

    license_str: Optional[str] = info.get("license")
    if license_str and license_str.strip():
        cleaned: str = license_str.strip()
        if cleaned.upper() not in ("UNKNOWN", "NONE") and "\n" not in cleaned:
            return cleaned

    classifiers: list[str] = info.get("classifiers") or []
    for classifier in classifiers:
        if classifier in CLASSIFIER_TO_SPDX:
            return CLASSIFIER_TO_SPDX[classifier]

    return None


async def fill_missing_licenses(snapshot: ProjectSnapshot) -> ProjectSnapshot:
    """Look up license identifiers on PyPI for records that have none.

    Records that already have license identifiers are not queried. Network
    failures leave the affected record unchanged.

    Args:
        snapshot: Project snapshot to complete.

    Returns:
        New snapshot, same keys and order, with licenses filled in where found.
    """
    missing = [name for name, record in snapshot.items() if not record.first_license]
    if not missing:
        return snapshot

    semaphore = asyncio.Semaphore(MAX_CONCURRENT_REQUESTS)

    async def lookup(name: str, client: httpx.AsyncClient) -> Optional[str]:
        record = snapshot[name]
        async with semaphore:
            try:
                metadata = await fetch_pypi_metadata(
                    record.name, record.version, client=client
                )
            except NetworkError:
                return None
        return extract_license_from_metadata(metadata)

    async with httpx.AsyncClient() as client:
        found = await asyncio.gather(*(lookup(name, client) for name in missing))

    completed = dict(snapshot)
    for name, license_id in zip(missing, found):
        if license_id is not None:
            completed[name] = snapshot[name].model_copy(update={"licenses": [license_id]})
    return completed
