from kitchen.domain.models import ErrorKind, GenerationError


class GenerationFailure(Exception):
    kind: ErrorKind = ErrorKind.provider

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_result(self) -> GenerationError:
        return GenerationError(kind=self.kind, message=self.message)


class EmptyStockError(GenerationFailure):
    kind = ErrorKind.empty_stock

    def __init__(self, message: str = "No ingredients provided") -> None:
        super().__init__(message)


class MissingCredentialError(GenerationFailure):
    kind = ErrorKind.missing_credential

    def __init__(self, message: str = "API key not configured") -> None:
        super().__init__(message)


class ProviderError(GenerationFailure):
    kind = ErrorKind.provider


class GenerationInProgress(Exception):
    pass
