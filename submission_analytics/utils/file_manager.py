"""
FileManager for the submission analytics system.

This module provides a centralized file management system for saving
analysis outputs. It ensures consistent file naming and directory
structures for snapshots and exported tables.
"""

import logging
from pathlib import Path
from datetime import datetime
from typing import Dict, Optional, Union
from uuid import uuid4

import pandas as pd
from pydantic import BaseModel


class FileManager:
    """
    Centralized file management for analysis outputs.

    Files are organized under ``base_dir`` into categories (``analysis``
    for snapshots, ``data/exported`` for CSV tables) and named with a
    per-session stamp so that runs never overwrite each other.
    """

    def __init__(self, base_dir: Union[str, Path]):
        """
        Initialize the FileManager with a base directory.

        Args:
            base_dir: Base directory for all outputs
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)

        # Define standard subdirectories
        self.structure = {
            "analysis": {},
            "data": {
                "exported": {},
            },
        }

        self._create_directory_structure()
        self.session_id = self._generate_session_id()

        self.logger.debug(
            f"FileManager initialized with base directory: {self.base_dir} "
            f"(session {self.session_id})"
        )

    def _create_directory_structure(self) -> None:
        """Create the standard directory structure if it doesn't exist."""

        def create_nested_dirs(parent_path: Path, structure: Dict) -> None:
            for name, substructure in structure.items():
                dir_path = parent_path / name
                dir_path.mkdir(exist_ok=True)

                if substructure:
                    create_nested_dirs(dir_path, substructure)

        create_nested_dirs(self.base_dir, self.structure)

    def _generate_session_id(self) -> str:
        """Generate a unique session ID for grouping files."""
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        short_uuid = str(uuid4())[:8]
        return f"{timestamp}_{short_uuid}"

    def get_path(
        self,
        category: str,
        subcategory: Optional[str] = None,
        filename: Optional[str] = None,
    ) -> Path:
        """
        Get a standardized path within the directory structure.

        Args:
            category: Top-level category (analysis, data)
            subcategory: Optional subcategory (e.g. "exported" under data)
            filename: Optional filename to append to the path

        Returns:
            Path: Constructed path

        Raises:
            ValueError: If the category or subcategory is not part of the
                directory structure
        """
        if category not in self.structure:
            raise ValueError(f"Unknown category: {category}")

        path = self.base_dir / category

        if subcategory:
            if subcategory not in self.structure[category]:
                raise ValueError(f"Unknown subcategory: {subcategory} for {category}")
            path = path / subcategory

        if filename:
            path = path / filename

        return path

    def generate_filename(self, base_name: str, extension: str) -> str:
        """
        Generate a standardized filename.

        Args:
            base_name: Core name for the file
            extension: File extension, with or without the dot

        Returns:
            str: Generated filename
        """
        if not extension.startswith("."):
            extension = f".{extension}"
        stamp = self.session_id.split("_")[0]
        return f"{self._sanitize_filename(base_name)}_{stamp}{extension}"

    def _sanitize_filename(self, filename: str) -> str:
        """
        Sanitize a filename to be safe across different operating systems.

        Args:
            filename: Original filename

        Returns:
            str: Sanitized filename
        """
        filename = filename.replace(" ", "_")
        for char in ["\\", "/", ":", "*", "?", '"', "<", ">", "|", "%"]:
            filename = filename.replace(char, "_")

        if filename.startswith("."):
            filename = "_" + filename[1:]

        return filename

    def save_file(
        self,
        data: Union[BaseModel, pd.DataFrame],
        filename: str,
        category: str,
        subcategory: Optional[str] = None,
    ) -> Path:
        """
        Save a model as JSON or a DataFrame as CSV.

        Existing files are never overwritten; a version suffix is added
        instead.

        Args:
            data: Pydantic model (saved by alias) or DataFrame
            filename: Base filename (without extension)
            category: Category for directory structure
            subcategory: Optional subcategory

        Returns:
            Path: Path to the saved file
        """
        if isinstance(data, BaseModel):
            extension = ".json"
        elif isinstance(data, pd.DataFrame):
            extension = ".csv"
        else:
            raise TypeError(f"Cannot save {type(data).__name__}")

        file_path = self.get_path(
            category=category,
            subcategory=subcategory,
            filename=self.generate_filename(filename, extension),
        )

        if file_path.exists():
            base_path = file_path.with_suffix("")
            version = 1
            while file_path.exists():
                file_path = base_path.with_name(
                    f"{base_path.name}_v{version}{file_path.suffix}"
                )
                version += 1

        try:
            if isinstance(data, BaseModel):
                with open(file_path, "w", encoding="utf-8") as f:
                    f.write(data.model_dump_json(by_alias=True, indent=2))
            else:
                data.to_csv(file_path, index=True)
        except OSError as e:
            self.logger.error(f"Error saving file {file_path}: {e}")
            raise

        self.logger.info(f"File saved successfully: {file_path}")
        return file_path
