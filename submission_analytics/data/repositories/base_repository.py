"""
Base repository for the submission analytics system.

This module provides the BaseRepository abstract class that serves as the
foundation for entity-specific repositories. It defines document loading,
model conversion and common read operations over static data sets.
"""

from abc import ABC, abstractmethod
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    List,
    Optional,
    Type,
    TypeVar,
)
import json
import logging
from pathlib import Path
import functools

from pydantic import BaseModel, ValidationError

# Type variable for the model type
T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T], ABC):
    """
    Base repository for data access.

    This abstract class holds validated Pydantic models in memory and
    provides common read operations over them.

    Attributes:
        _collection_name (str): Name of the data collection
        _model_class (Type[T]): Pydantic model class for this repository
        _documents (List[T]): Loaded and validated models
        _cache (Dict): In-memory cache for query results
    """

    def __init__(self, collection_name: str, model_class: Type[T]):
        """
        Initialize the repository.

        Args:
            collection_name: Name of the data collection
            model_class: Pydantic model class to use for this repository
        """
        self._collection_name = collection_name
        self._model_class = model_class
        self._logger = logging.getLogger(f"{self.__class__.__name__}")
        self._cache: Dict[str, Any] = {}
        self._documents: List[T] = []
        self._validation_context: Optional[Dict[str, Any]] = None

    @abstractmethod
    def extract_documents(self, data: Any) -> List[Dict[str, Any]]:
        """
        Pull the raw documents for this collection out of parsed file content.

        Args:
            data: Parsed JSON content

        Returns:
            List[Dict[str, Any]]: Raw documents
        """

    def set_validation_context(self, context: Optional[Dict[str, Any]]) -> None:
        """Set the context passed to model validation (e.g. ``{"tz": zone}``)."""
        self._validation_context = context

    def _to_model(self, data: Dict) -> Optional[T]:
        """
        Convert a raw document to a Pydantic model.

        Args:
            data: Raw document

        Returns:
            Optional[T]: Model instance, or None if the document is invalid
        """
        try:
            return self._model_class.model_validate(
                data, context=self._validation_context
            )
        except ValidationError as e:
            self._logger.warning(
                f"Skipping invalid {self._collection_name} document: "
                f"{e.error_count()} validation error(s)"
            )
            self._logger.debug(str(e))
            return None

    def load_documents(self, documents: List[Dict[str, Any]]) -> int:
        """
        Validate and store raw documents, replacing previously loaded data.

        Args:
            documents: Raw documents

        Returns:
            int: Number of documents loaded (invalid ones are skipped)
        """
        models = []
        for document in documents:
            if not isinstance(document, dict):
                self._logger.warning(
                    f"Skipping non-object {self._collection_name} entry"
                )
                continue
            model = self._to_model(document)
            if model is not None:
                models.append(model)

        self._documents = models
        self._cache = {}

        skipped = len(documents) - len(models)
        if skipped:
            self._logger.warning(
                f"Skipped {skipped} of {len(documents)} {self._collection_name} documents"
            )
        return len(models)

    def load_data_from_file(self, filepath: str) -> int:
        """
        Load documents from a JSON file.

        Args:
            filepath: Path to the JSON file

        Returns:
            int: Number of documents loaded
        """
        try:
            with open(filepath, "r", encoding="utf-8") as file:
                data = json.load(file)
        except (OSError, json.JSONDecodeError) as e:
            self._logger.error(f"Error loading data from file {filepath}: {e}")
            raise

        return self.load_documents(self.extract_documents(data))

    # Cache decorator for query methods
    def _cache_result(func: Callable) -> Callable:
        """Decorator to cache results of repository methods."""

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            # Create a cache key based on function name and arguments
            cache_key = f"{func.__name__}:{str(args)}:{str(kwargs)}"

            if cache_key in self._cache:
                return self._cache[cache_key]

            result = func(self, *args, **kwargs)
            self._cache[cache_key] = result
            return result

        return wrapper

    def get_all(self) -> List[T]:
        """
        Get all loaded documents.

        Returns:
            List[T]: All model instances, in load order
        """
        return list(self._documents)

    def find_many(self, predicate: Callable[[T], bool]) -> List[T]:
        """
        Find documents matching a predicate.

        Args:
            predicate: Function returning True for documents to keep

        Returns:
            List[T]: Matching model instances
        """
        return [doc for doc in self._documents if predicate(doc)]

    def count(self) -> int:
        """
        Count loaded documents.

        Returns:
            int: Number of documents
        """
        return len(self._documents)

    @staticmethod
    def file_format(filepath: str) -> str:
        """Lowercase file extension without the dot."""
        return Path(filepath).suffix.lower().lstrip(".")
