"""Custom exceptions for the Agent Rules Kit MCP server."""


class RulesKitError(Exception):
    """Base exception for all rules-kit server errors."""


class ConfigError(RulesKitError):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, name: str, value: str, expected: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid value for {name}: {value!r} (expected {expected})")


class UnknownToolError(RulesKitError):
    """Raised when a caller names a tool the server does not expose."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class UnknownResourceError(RulesKitError):
    """Raised when a resource URI is not served."""

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(f"Unknown resource: {uri}")


class UnknownPromptError(RulesKitError):
    """Raised when a prompt name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown prompt: {name}")
