"""Static documentation resources served to MCP clients."""

from __future__ import annotations

from dataclasses import dataclass

from rules_kit_mcp.exceptions import UnknownResourceError

MARKDOWN = "text/markdown"

DOCUMENTATION_URI = "agent-rules-kit://documentation"
USAGE_GUIDE_URI = "agent-rules-kit://usage-guide"

DOCUMENTATION = """\
# Agent Rules Kit

Bootstrap Cursor rules (.cursor/rules) and mirror documentation (.md) for AI agent-guided projects.

## Key Features

- 🎯 Multi-Stack Support: 15+ frameworks including Laravel, Next.js, React, Angular, Vue, and more
- 🏗️ Architecture-Aware: Specialized rules for different architectural patterns (MVC, DDD, Hexagonal, etc.)
- 📦 Version Detection: Automatic framework version detection with version-specific optimizations
- 🌐 Global Best Practices: Universal coding standards and quality assurance rules
- 🔧 MCP Tools Integration: Multi-select support for popular Model Context Protocol tools
- ⚡ Performance Optimized: Efficient rule generation with progress tracking and memory management

## Basic Usage

```bash
# Install globally
npm install -g agent-rules-kit

# Use in a project
agent-rules-kit
```

For more information: https://github.com/tecnomanu/agent-rules-kit"""

USAGE_GUIDE = """\
# Usage Guide for AI Agents

## Automatic Rule Installation

1. **Get Available Options**: Use `get_available_options` to see all supported stacks and tools
2. **Detect Stack**: Use `get_project_info` to analyze the current project
3. **Install Rules**: Use `install_rules` to install appropriate rules with advanced options

## Example Workflow

```bash
# 1. See available options
get_available_options

# 2. Analyze current project
get_project_info

# 3. Install rules with specific configuration
install_rules --stack=nodejs --version=20 --architecture=standard --mcp_tools=pampa,github --ide=cursor
```

## Supported Stacks

- **Frontend**: React, Vue, Angular, Next.js, Astro
- **Backend**: Node.js, NestJS, Laravel, Spring Boot, Django, FastAPI
- **Mobile**: React Native
- **Emerging**: MCP (Model Context Protocol)

## Automatic Detection

The system automatically detects:
- package.json (Node.js ecosystem)
- composer.json (PHP/Laravel)
- requirements.txt / pyproject.toml / setup.py (Python)
- pom.xml / build.gradle (Java/Spring)
- go.mod (Go)"""


@dataclass(frozen=True)
class Resource:
    uri: str
    name: str
    description: str
    text: str
    mime_type: str = MARKDOWN


RESOURCES: tuple[Resource, ...] = (
    Resource(
        uri=DOCUMENTATION_URI,
        name="Agent Rules Kit Documentation",
        description="Complete Agent Rules Kit documentation",
        text=DOCUMENTATION,
    ),
    Resource(
        uri=USAGE_GUIDE_URI,
        name="Usage Guide",
        description="Usage guide for AI agents",
        text=USAGE_GUIDE,
    ),
)


def read_resource(uri: str) -> Resource:
    """Look up a resource by URI; unknown URIs raise :class:`UnknownResourceError`."""
    for resource in RESOURCES:
        if resource.uri == uri:
            return resource
    raise UnknownResourceError(uri)
