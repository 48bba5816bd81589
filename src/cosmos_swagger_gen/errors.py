"""Exceptions raised by the generator and the chain client."""


class GeneratorError(Exception):
    """Base class for errors that abort a generation run."""


class EmptyInputError(GeneratorError):
    """No source documents were supplied."""


class UnsupportedFormatError(GeneratorError):
    """The input document is not a Swagger 2.0 document."""


class InvalidDocumentError(GeneratorError):
    """The input document could not be decoded or does not fit the Swagger 2.0 shape."""


class FetchError(GeneratorError):
    """A source document could not be downloaded."""


class MissingOperationIdError(GeneratorError):
    def __init__(self, chain_name: str, path: str):
        self.chain_name = chain_name
        self.path = path
        super().__init__(f"Missing operationId for '{path}' on chain '{chain_name}'")


class DuplicateChainError(GeneratorError):
    def __init__(self, chain_name: str):
        self.chain_name = chain_name
        super().__init__(f"Chain '{chain_name}' was supplied more than once")


class SchemaCycleError(GeneratorError):
    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__("Cyclic schema reference: " + " -> ".join(chain))


class ChainClientError(Exception):
    """Base class for runtime client errors."""


class UnknownChainError(ChainClientError):
    pass


class RpcError(ChainClientError):
    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class RestError(ChainClientError):
    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
