"""
File handling utilities for the Polish realizer.
"""

import json
from typing import Any, Union
from pathlib import Path


def load_json(filepath: Union[str, Path]) -> Any:
    """
    Load JSON from file.

    Args:
        filepath: Path to JSON file

    Returns:
        Parsed JSON data
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


def save_json(data: Any, filepath: Union[str, Path], indent: int = 2) -> None:
    """
    Save data to JSON file, keeping Polish diacritics unescaped.

    Args:
        data: Data to save
        filepath: Path to output file
        indent: JSON indentation
    """
    path = ensure_directory(Path(filepath).parent) / Path(filepath).name
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)


def save_text(text: str, filepath: Union[str, Path]) -> None:
    """
    Save realised text to a file.

    Args:
        text: Realised text
        filepath: Path to output file
    """
    path = ensure_directory(Path(filepath).parent) / Path(filepath).name
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path

    Returns:
        Path object for the directory
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path
