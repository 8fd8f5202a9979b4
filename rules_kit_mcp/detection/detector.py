"""Stack detection: ordered marker-file signatures with a static-site fallback."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from rules_kit_mcp.core.config import (
    HEURISTIC_CONFIDENCE,
    SIGNATURE_CONFIDENCE,
    UNKNOWN_CONFIDENCE,
)
from rules_kit_mcp.detection.files import file_exists, list_dir
from rules_kit_mcp.detection.registry import (
    SIGNATURES,
    STATIC_SITE_MARKER,
    STATIC_SITE_STACK,
    StackSignature,
)
from rules_kit_mcp.models import ProjectClassification

logger = logging.getLogger(__name__)


def _unknown() -> ProjectClassification:
    return ProjectClassification(stack="Unknown", files_detected=[], confidence=UNKNOWN_CONFIDENCE)


class StackDetector:
    """Classify a project by the first signature whose markers are present.

    Never raises: a classifier error skips that signature, anything else
    degrades to the "Unknown" classification.
    """

    def __init__(self, signatures: Sequence[StackSignature] = SIGNATURES) -> None:
        self._signatures = signatures

    async def detect(self, project_path: str | Path) -> ProjectClassification:
        """Detect the technology stack of the project rooted at *project_path*."""
        try:
            return await self._detect(Path(project_path))
        except Exception:
            logger.exception("Stack detection failed for %s", project_path)
            return _unknown()

    async def _detect(self, root: Path) -> ProjectClassification:
        for signature in self._signatures:
            present = await asyncio.gather(
                *(file_exists(root / marker) for marker in signature.markers)
            )
            if not any(present):
                continue

            try:
                guess = await signature.classify(root)
            except Exception as exc:
                logger.warning(
                    "Classifier %s failed in %s, trying next signature: %s",
                    signature.name,
                    root,
                    exc,
                )
                continue
            if guess is None:
                continue

            found = [m for m, ok in zip(signature.markers, present) if ok]
            logger.info("Detected %s in %s (found %s)", guess.stack, root, ", ".join(found))
            return ProjectClassification(
                stack=guess.stack,
                version=guess.version,
                architecture=guess.architecture,
                files_detected=found,
                confidence=SIGNATURE_CONFIDENCE,
            )

        if STATIC_SITE_MARKER in await list_dir(root):
            logger.info("No signature matched in %s, found %s", root, STATIC_SITE_MARKER)
            return ProjectClassification(
                stack=STATIC_SITE_STACK,
                files_detected=[STATIC_SITE_MARKER],
                confidence=HEURISTIC_CONFIDENCE,
            )

        logger.info("No stack detected in %s", root)
        return _unknown()


async def detect_project_stack(project_path: str | Path) -> ProjectClassification:
    """Detect a project's stack with the default signatures."""
    return await StackDetector().detect(project_path)
