"""Link functions for classification cost functions."""

from .functions import (
    LinkFunction,
    LogitLinkFunction,
    SoftmaxLinkFunction,
    create_link_function,
)

__all__ = [
    "LinkFunction",
    "LogitLinkFunction",
    "SoftmaxLinkFunction",
    "create_link_function",
]
