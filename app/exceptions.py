from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for failures raised by the recipe generation flow.

    Attributes:
        message: short, human-readable message safe to return to clients
        details: optional mapping with extra context, kept for server-side logs
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ConfigurationMissing(ServiceError):
    """Raised at startup when required configuration (credentials, API key) is absent."""

    default_message = "Required configuration is missing"


class PersistenceError(ServiceError):
    """Raised when reading, decoding or writing a document-store record fails."""

    default_message = "Document store operation failed"


class ModelUnavailable(ServiceError):
    """Raised when the chat-completion call errors or returns no choices."""

    default_message = "Recipe model is unavailable"


class MalformedModelOutput(ServiceError):
    """Raised when the model reply cannot be decoded into a recipe.

    Attributes:
        raw_output: the cleaned reply text, kept for diagnosis
    """

    default_message = "Recipe model returned malformed output"

    def __init__(self, raw_output: str, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message, details=details, code="MALFORMED_MODEL_OUTPUT")
        self.raw_output = raw_output


class NoIngredientsAvailable(ServiceError):
    """Raised when the ingredient store is empty. A client-side precondition, not a fault."""

    http_status = 400
    default_message = "No ingredients found"


class RecipeGenerationFailed(ServiceError):
    """Raised by the orchestrator when a generation stage fails.

    Attributes:
        stage: the stage that failed
        cause: the underlying ServiceError
        http_status: taken from the cause
    """

    def __init__(self, stage, cause: ServiceError, message: Optional[str] = None):
        super().__init__(message or cause.message, details=cause.to_dict(), code=cause.code)
        self.stage = stage
        self.cause = cause
        self.http_status = cause.http_status
