"""
Exception hierarchy for content model generation.

Every error raised on purpose by the package derives from GeneratorError so
callers can catch one type at the outer boundary.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class ConfigError(GeneratorError):
    """Invalid configuration or output location."""

    pass


class SchemaProviderError(GeneratorError):
    """Failure while retrieving content types from upstream."""

    pass


class SchemaError(SchemaProviderError):
    """A content type payload does not have the expected structure."""

    pass


class ModelError(GeneratorError):
    """A content type cannot be turned into a well-formed class."""

    pass


class EmissionError(GeneratorError):
    """Failure while writing a generated class."""

    def __init__(self, message: str, class_name: str = None):
        super().__init__(message)
        self.class_name = class_name


class RegistryError(GeneratorError):
    """Exception raised for registry-related errors."""

    pass


class TemplateError(GeneratorError):
    """Exception raised for template-related errors."""

    pass
