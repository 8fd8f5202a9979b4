"""Stack detector: classify a project from its marker files."""

from rules_kit_mcp.detection.detector import StackDetector, detect_project_stack
from rules_kit_mcp.detection.registry import SIGNATURES, StackSignature

__all__ = ["SIGNATURES", "StackDetector", "StackSignature", "detect_project_stack"]
