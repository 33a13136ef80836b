"""
File Utilities Module
Common file operations and path handling functions.
"""

import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional

# File extension categories, keyed by extractor filetype
EXTENSION_GROUPS = {
    'html': {'.html', '.htm'},
    'vue': {'.vue'},
    'svelte': {'.svelte'},
    'jsx': {'.jsx'},
    'tsx': {'.tsx'},
    'js': {'.js', '.mjs', '.cjs'},
    'ts': {'.ts', '.mts', '.cts'},
}

SKIPPED_DIRECTORIES = {'node_modules', 'dist', 'build', '__pycache__'}

def normalize_path(path: str | Path) -> Path:
    """Convert string path to normalized Path object."""
    return Path(path).resolve()

def is_hidden(path: Path) -> bool:
    """Check if a file or directory is hidden."""
    # Check for hidden files/directories in Unix-like systems
    if path.name.startswith('.'):
        return True

    # Check for hidden files/directories in Windows
    try:
        import ctypes
        attrs = ctypes.windll.kernel32.GetFileAttributesW(str(path))
        return attrs & 2 != 0
    except (AttributeError, ImportError):
        return False

def filetype_for(path: str | Path) -> Optional[str]:
    """Extractor filetype for a path, None when the extension is not lintable."""
    suffix = Path(path).suffix.lower()
    for filetype, extensions in EXTENSION_GROUPS.items():
        if suffix in extensions:
            return filetype
    return None

def collect_files(paths: Iterable[str | Path]) -> List[Path]:
    """
    Collect lintable files from files and directories.

    Args:
        paths: Files are taken as given when their extension is known;
            directories are walked recursively

    Returns:
        Sorted list of unique file paths
    """
    result = set()
    for entry in paths:
        base_path = normalize_path(entry)
        if base_path.is_file():
            if filetype_for(base_path):
                result.add(base_path)
            continue

        for root, dirs, files in os.walk(base_path):
            # Skip hidden and dependency directories
            dirs[:] = [d for d in dirs
                       if d not in SKIPPED_DIRECTORIES and not is_hidden(Path(root) / d)]

            for file in files:
                file_path = Path(root) / file
                if is_hidden(file_path):
                    continue
                if filetype_for(file_path):
                    result.add(file_path)

    return sorted(result)

def count_by_filetype(files: Iterable[Path]) -> Dict[str, int]:
    """Number of files per extractor filetype."""
    counts: Dict[str, int] = {}
    for file_path in files:
        filetype = filetype_for(file_path)
        if filetype:
            counts[filetype] = counts.get(filetype, 0) + 1
    return counts

def read_file_content(file_path: Path) -> str:
    """
    Safely read file content with proper encoding.

    Args:
        file_path: Path to the file to read

    Returns:
        File contents as string

    Raises:
        FileNotFoundError: If file doesn't exist
        IOError: If file can't be read
    """
    try:
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except UnicodeDecodeError:
        # Fallback to system default encoding if UTF-8 fails
        with open(file_path, 'r', newline='') as f:
            return f.read()

def write_file_content(file_path: Path, content: str) -> None:
    """Write content back with UTF-8 encoding, keeping line endings as given."""
    with open(file_path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)
