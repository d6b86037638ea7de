"""
Project: an in-memory set of source files.

Files are keyed by normalized absolute POSIX path. The project resolves
relative module specifiers between its files so that import aliases can be
followed from one file to another. Nothing is read from or written to disk.
"""

import posixpath
from typing import Any, Dict, List, Optional, Union

from tsedit.compiler.source_file import SourceFile
from tsedit.exceptions import InvalidOperationError, NotFoundError
from tsedit.logging_config import get_logger
from tsedit.manipulation.config import validate_manipulation_config
from tsedit.provider.config import validate_resolution_config
from tsedit.provider.parser import TypeScriptProvider, get_provider

logger = get_logger("project")


def normalize_path(file_path: str) -> str:
    """Normalize to an absolute POSIX path ("a/./b.ts" -> "/a/b.ts")."""
    path = file_path.replace("\\", "/")
    if not path.startswith("/"):
        path = "/" + path
    return posixpath.normpath(path)


class Project:
    """
    Container of source files sharing one parser provider and config.
    """

    def __init__(
        self,
        resolution_config: Optional[Dict[str, Any]] = None,
        manipulation_config: Optional[Dict[str, Any]] = None,
        provider_config: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize an empty project.

        Args:
            resolution_config: Overrides for RESOLUTION_CONFIG, applied to every file
            manipulation_config: Overrides for MANIPULATION_CONFIG
            provider_config: Overrides for PROVIDER_CONFIG. Without overrides
                the shared provider is used.
        """
        self.resolution_config = validate_resolution_config(resolution_config)
        self.manipulation_config = validate_manipulation_config(manipulation_config)
        self._provider: TypeScriptProvider = (
            TypeScriptProvider(provider_config) if provider_config else get_provider()
        )
        self._source_files: Dict[str, SourceFile] = {}

    def create_source_file(self, file_path: str, text: str = "", overwrite: bool = False) -> SourceFile:
        """
        Create a source file from text.

        Args:
            file_path: Path of the new file
            text: Source text
            overwrite: Replace the text of an existing file at that path
                instead of failing

        Returns:
            The new source file, or the existing one when overwritten

        Raises:
            InvalidOperationError: If the file exists and overwrite is False
        """
        path = normalize_path(file_path)
        existing = self._source_files.get(path)
        if existing is not None:
            if not overwrite:
                raise InvalidOperationError(
                    f"A source file already exists at {path}. Use overwrite=True to replace its text."
                )
            logger.debug(f"Overwriting source file {path}")
            return existing.replace_with_text(text)

        source_file = SourceFile(
            path,
            text,
            project=self,
            provider=self._provider,
            resolution_config=self.resolution_config,
            manipulation_config=self.manipulation_config,
        )
        self._source_files[path] = source_file
        return source_file

    def get_source_file(self, file_path: str) -> Optional[SourceFile]:
        return self._source_files.get(normalize_path(file_path))

    def get_source_file_or_throw(self, file_path: str) -> SourceFile:
        source_file = self.get_source_file(file_path)
        if source_file is None:
            raise NotFoundError(f"Could not find source file: {normalize_path(file_path)}")
        return source_file

    def get_source_files(self) -> List[SourceFile]:
        return list(self._source_files.values())

    def remove_source_file(self, source_file: Union[SourceFile, str]) -> bool:
        """
        Forget a source file. Its nodes can no longer be used.

        Returns:
            True if the file was part of the project
        """
        path = source_file if isinstance(source_file, str) else source_file.get_file_path()
        removed = self._source_files.pop(normalize_path(path), None)
        if removed is None:
            return False
        removed._mark_unusable("it was removed from its project")
        return True

    def resolve_module_specifier(self, from_file: SourceFile, specifier: str) -> Optional[SourceFile]:
        """
        Find the project file a relative import specifier refers to.

        Tries the path as written, then each configured module suffix
        (".ts", "/index.ts", ...). A ".js" extension also tries the
        TypeScript file it is compiled from. Bare specifiers ("react") are
        not resolved.
        """
        if not specifier.startswith("."):
            return None

        base_dir = posixpath.dirname(from_file.get_file_path())
        target = posixpath.normpath(posixpath.join(base_dir, specifier))
        stems = [target]
        if target.endswith(".js"):
            stems.append(target[:-3])

        suffixes = from_file.get_resolution_config()["module_suffixes"]
        for stem in stems:
            for candidate in [stem] + [stem + suffix for suffix in suffixes]:
                source_file = self._source_files.get(candidate)
                if source_file is not None:
                    return source_file
        return None

    def __len__(self):
        return len(self._source_files)

    def __repr__(self):
        return f"<Project {len(self._source_files)} file(s)>"
