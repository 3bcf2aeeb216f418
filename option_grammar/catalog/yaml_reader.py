# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""YAML catalog reader with source locations and caching support."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from ..config import grammar_config
from ..exceptions import CatalogError
from .source_location import SourceMap, join_pointer

logger = logging.getLogger(__name__)


class YamlReader:
    """Reads YAML documents and remembers where each value came from."""

    def __init__(self, cache_enabled: Optional[bool] = None):
        """Initialize the reader.

        Args:
            cache_enabled: Whether to cache parsed files. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else grammar_config.cache_enabled
        self._cache: Dict[Path, Tuple[Any, SourceMap]] = {}

    @staticmethod
    def build_source_map(content: str) -> SourceMap:
        """Map JSON-pointer-like paths (``/operations/Foo/0``) to 1-based line/column.

        Uses PyYAML's node tree (``yaml.compose``) so locations can be tracked
        without changing the data returned by ``safe_load``.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            return source_map

        if root is None:
            return source_map

        def _walk(node, path: str) -> None:
            mark = getattr(node, "start_mark", None)
            if mark is not None:
                # PyYAML marks are 0-based
                source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, join_pointer(path, key))
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, join_pointer(path, idx))

        _walk(root, "")
        return source_map

    def load_string(self, content: str) -> Tuple[Any, SourceMap]:
        """Parse YAML text and return (data, source_map)."""
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise CatalogError(f"Failed to parse YAML content: {exc}") from exc
        if data is None:
            data = {}
        return data, self.build_source_map(content)

    def load_file(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load a YAML file and return (data, source_map).

        Raises:
            CatalogError: If the file cannot be read or parsed.
        """
        path = Path(file_path)

        if not path.exists():
            raise CatalogError(f"Catalog file not found: {path}")

        if not path.is_file():
            raise CatalogError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading catalog from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading catalog file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CatalogError(f"Failed to read catalog file {path}: {exc}") from exc

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise CatalogError(f"Failed to parse YAML file {path}: {exc}") from exc
        if data is None:
            data = {}

        result = (data, self.build_source_map(content))
        if self.cache_enabled:
            self._cache[path] = result
        return result

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.debug("Catalog cache cleared")
