"""Swagger 2.0 document loader.

Reads one document per chain into SourceDocument models. The chain name
of a file is its stem: `kyve.yaml` describes the `kyve` chain.
"""

import logging
from pathlib import Path

import httpx
import yaml
from pydantic import ValidationError

from cosmos_swagger_gen.errors import (
    EmptyInputError,
    FetchError,
    InvalidDocumentError,
    UnsupportedFormatError,
)
from cosmos_swagger_gen.parser.base import SourceDocument
from cosmos_swagger_gen.parser.detect import detect_format

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIXES = (".yaml", ".yml", ".json")


def parse_document(data: dict, source: str = "<memory>") -> SourceDocument:
    """Validate a decoded Swagger 2.0 mapping into a SourceDocument."""
    fmt = detect_format(data)
    if fmt != "swagger2":
        raise UnsupportedFormatError(f"{source}: expected a Swagger 2.0 document, got '{fmt}'")
    try:
        return SourceDocument.model_validate(data)
    except ValidationError as e:
        raise InvalidDocumentError(f"{source}: {e}") from e


def load_document(file_path: Path) -> SourceDocument:
    """Parse a Swagger YAML or JSON file into a SourceDocument."""
    text = file_path.read_text(encoding="utf-8")
    # JSON is a subset of YAML, so one loader covers both.
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InvalidDocumentError(f"{file_path}: {e}") from e
    return parse_document(data, source=str(file_path))


def load_chain_documents(input_dir: Path) -> list[tuple[str, SourceDocument]]:
    """Load every document in `input_dir` as (chain_name, document) pairs, sorted by file name."""
    files = sorted(
        p for p in input_dir.iterdir()
        if p.is_file() and p.suffix.lower() in DOCUMENT_SUFFIXES
    )
    if not files:
        raise EmptyInputError(f"There isn't any Swagger file inside '{input_dir}'")

    chains = []
    for file_path in files:
        logger.debug("Loading %s", file_path)
        chains.append((file_path.stem, load_document(file_path)))
    return chains


def fetch_document(url: str, client: httpx.Client | None = None) -> str:
    """Download the Swagger document at `url` and return the response body."""
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=30, follow_redirects=True)
    try:
        response = client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise FetchError(f"URL cannot be fetched {url}.\n{e}") from e
    finally:
        if owns_client:
            client.close()
    return response.text
