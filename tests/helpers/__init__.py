from .mocks import MockResponse, MockSession, load_fixture, mock_client, io_exception_client

__all__ = [
    "MockResponse",
    "MockSession",
    "load_fixture",
    "mock_client",
    "io_exception_client",
]
