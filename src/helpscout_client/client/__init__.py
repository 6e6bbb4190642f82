"""Request building blocks for the Help Scout client."""

from .requests import ApiRequest

__all__ = ["ApiRequest"]
