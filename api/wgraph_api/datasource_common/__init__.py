"""Shared building blocks for datasource plugins."""

from .base import BaseDatasourcePlugin

__all__ = ["BaseDatasourcePlugin"]
