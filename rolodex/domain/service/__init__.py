"""Domain services."""

from .base import Service
from .model import PREDICATE_SHOW_ALL_PERSONS, Model, PersonPredicate
from .model_manager import ModelManager

__all__ = [
    "Model",
    "ModelManager",
    "PersonPredicate",
    "PREDICATE_SHOW_ALL_PERSONS",
    "Service",
]
