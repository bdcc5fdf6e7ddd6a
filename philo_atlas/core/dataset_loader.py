from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, List, Tuple, Union

import httpx

from philo_atlas.core.dataset import Dataset
from philo_atlas.core.entry import Entry
from philo_atlas.core.exceptions import MalformedDatasetError
from philo_atlas.core.sample_data import sample_payload
from philo_atlas.validation.dataset_validation import validate_entry_items
from philo_atlas.validation.errors import ValidationIssue

logger = logging.getLogger(__name__)

# "entries" is the documented shape, "filosofos" the legacy file layout
PAYLOAD_KEYS = ("entries", "filosofos")

DEFAULT_TIMEOUT = 10.0

Source = Union[str, Path]


def _extract_items(raw: Any) -> List[Any]:
    if isinstance(raw, list):
        return raw

    if isinstance(raw, dict):
        for key in PAYLOAD_KEYS:
            if key in raw:
                items = raw[key]
                if not isinstance(items, list):
                    raise MalformedDatasetError(
                        [ValidationIssue("PAYLOAD_NOT_LIST", f"'{key}' must be a list, got {type(items).__name__}.")]
                    )
                return items
        raise MalformedDatasetError(
            [ValidationIssue("PAYLOAD_MISSING_KEY", f"Expected one of {list(PAYLOAD_KEYS)} at the top level.")]
        )

    raise MalformedDatasetError(
        [ValidationIssue("PAYLOAD_BAD_TYPE", f"Dataset must be an object or a list, got {type(raw).__name__}.")]
    )


def parse_entries(raw: Any) -> List[Entry]:
    """
    Validate a decoded JSON payload and turn it into Entry objects.

    Raises:
        MalformedDatasetError: wrong top-level shape, empty list, or entries
        without id/region/location.
    """
    items = _extract_items(raw)
    if not items:
        raise MalformedDatasetError([ValidationIssue("PAYLOAD_EMPTY", "Dataset contains no entries.")])

    issues = validate_entry_items(items)
    if issues:
        raise MalformedDatasetError(issues)

    entries = [Entry.from_raw(item) for item in items]

    # Identity is by id, so shared coordinates are allowed but worth knowing about
    coord_counts = Counter(e.coordinate for e in entries)
    shared = [coord for coord, n in coord_counts.items() if n > 1]
    if shared:
        logger.warning(
            "Several entries share a coordinate",
            extra={"coordinates": [list(c) for c in shared]},
        )

    return entries


def _is_url(source: Source) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def fetch_payload(source: Source, timeout: float = DEFAULT_TIMEOUT) -> Any:
    """Fetch and decode the JSON document from a URL or a local path."""
    if _is_url(source):
        response = httpx.get(str(source), timeout=timeout, follow_redirects=True)
        response.raise_for_status()
        return response.json()

    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"Dataset file not found at {path}")
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def load_dataset(source: Source, timeout: float = DEFAULT_TIMEOUT) -> Dataset:
    payload = fetch_payload(source, timeout=timeout)
    entries = parse_entries(payload)
    logger.info(
        "Dataset loaded",
        extra={"source": str(source), "n_entries": len(entries)},
    )
    return Dataset(entries, name=Path(str(source)).stem or "filosofos", source=str(source))


def load_sample_dataset() -> Dataset:
    return Dataset(parse_entries(sample_payload()), name="sample", source=None)


def load_dataset_with_fallback(source: Source | None, timeout: float = DEFAULT_TIMEOUT) -> Tuple[Dataset, bool]:
    """
    Load the configured dataset, falling back to the built-in sample.

    Returns (dataset, used_fallback). Never raises for fetch, decode or schema
    problems: those are logged and the sample dataset is returned.
    """
    if source is None:
        logger.warning("No dataset source configured; using sample data")
        return load_sample_dataset(), True

    try:
        return load_dataset(source, timeout=timeout), False
    except MalformedDatasetError as e:
        logger.error(
            "Malformed dataset; using sample data",
            extra={"source": str(source), "issues": [f"{i.code}: {i.message}" for i in e.issues]},
        )
    except httpx.HTTPStatusError as e:
        logger.error(
            "Dataset request failed; using sample data",
            extra={"source": str(source), "status": e.response.status_code},
        )
    except (httpx.RequestError, OSError, ValueError) as e:
        # ValueError covers json.JSONDecodeError
        logger.error(
            "Could not read dataset; using sample data",
            extra={"source": str(source), "error": str(e)},
        )

    return load_sample_dataset(), True
