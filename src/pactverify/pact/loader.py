"""
Loads Pact v1 JSON documents into a PactFile.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pactverify.core.errors import ContractError
from pactverify.pact.models import PactInteraction, PactMetadata, Party
from pactverify.pact.pact_file import PactFile

logger = structlog.get_logger()


class PactDocument(BaseModel):
    """Schema of a pact file as found on disk."""

    model_config = ConfigDict(extra="ignore")

    consumer: Party
    provider: Party
    interactions: list[PactInteraction] = Field(default_factory=list)
    metadata: PactMetadata | None = None


def load_pact(data: Mapping[str, Any], source: str = "<memory>") -> PactFile:
    """
    Build a PactFile from already-decoded pact JSON.

    Args:
        data: Decoded pact document
        source: Where the data came from, used in errors and logs

    Raises:
        ContractError: The document does not describe a pact
    """
    try:
        document = PactDocument.model_validate(data)
    except ValidationError as exc:
        raise ContractError(
            f"Invalid pact in {source}: {exc.error_count()} validation error(s)",
            {"source": source},
        ) from exc

    if document.metadata and not document.metadata.spec_version.startswith("1."):
        logger.warning(
            "pact_spec_version_unsupported",
            source=source,
            spec_version=document.metadata.spec_version,
        )

    pact = PactFile(consumer=document.consumer, provider=document.provider)
    pact.add_interactions(document.interactions)

    logger.info(
        "pact_loaded",
        source=source,
        consumer=document.consumer.name,
        provider=document.provider.name,
        interactions=len(document.interactions),
    )
    return pact


def load_pact_file(path: str | Path) -> PactFile:
    """
    Read and parse a pact file.

    Raises:
        ContractError: The file is missing, is not JSON, or is not a pact
    """
    pact_path = Path(path)
    try:
        text = pact_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ContractError(
            f"Cannot read pact file {pact_path}: {exc}", {"path": str(pact_path)}
        ) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ContractError(
            f"Pact file {pact_path} is not valid JSON: {exc}", {"path": str(pact_path)}
        ) from exc

    if not isinstance(data, dict):
        raise ContractError(
            f"Pact file {pact_path} must contain a JSON object", {"path": str(pact_path)}
        )

    return load_pact(data, source=str(pact_path))
