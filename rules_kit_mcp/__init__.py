"""Agent Rules Kit MCP server: project stack detection and rules installation."""

__version__ = "1.0.0"

from rules_kit_mcp.detection import StackDetector, detect_project_stack
from rules_kit_mcp.installer import RuleInstaller
from rules_kit_mcp.models import InstallRequest, ProcessResult, ProjectClassification
from rules_kit_mcp.operations import RulesKitOperations
from rules_kit_mcp.runner import probe_available, run_command, run_script

__all__ = [
    "InstallRequest",
    "ProcessResult",
    "ProjectClassification",
    "RuleInstaller",
    "RulesKitOperations",
    "StackDetector",
    "detect_project_stack",
    "probe_available",
    "run_command",
    "run_script",
]
