"""
Adapters package - External service connections.
Document store (MongoDB) and chat-completion (OpenAI) clients.
"""

from adapters import mongo_adapter, openai_adapter

__all__ = [
    "mongo_adapter",
    "openai_adapter",
]
