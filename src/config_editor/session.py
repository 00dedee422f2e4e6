import logging
from typing import List, Mapping, Optional, Tuple

from rich.tree import Tree

from .cache import ParseCache
from .collaborators import ListConfigFiles, ReadFile, WriteFile
from .config import EditorConfig
from .editor.render import render_nodes
from .editor.tree_edit import Edit, apply_edit
from .editor.tree_filter import filter_tree
from .editor.value_editor import EditorNode, ValueEditor
from .format_parser.core.config_path import PathLike
from .format_parser.core.config_value import ConfigValue, ValueType
from .format_parser.format_detector import ConfigFormat, detect_format, supports_structural_editing
from .format_parser.format_parser import FormatParser
from .models import ConfigFile


class ConfigSessionError(Exception):
    """Base error for session operations"""
    pass

class ConfigReadError(ConfigSessionError):
    pass

class ConfigWriteError(ConfigSessionError):
    pass

class StructuralEditingUnavailable(ConfigSessionError):
    """The open file can only be edited as raw text"""
    pass


class ConfigSession:
    """Editing session for one config file at a time.

    Loads text through the read collaborator, keeps a value tree while the
    text parses, re-serializes after every structural edit and writes
    through the write collaborator on save. Nothing is written implicitly:
    selecting another file or closing drops unsaved text.
    """

    def __init__(
        self,
        read_file: ReadFile,
        write_file: WriteFile,
        list_candidates: Optional[ListConfigFiles] = None,
        config: Optional[EditorConfig] = None,
        parser: Optional[FormatParser] = None
    ):
        self._logger = logging.getLogger(__name__)
        self.config = config or EditorConfig()
        self._read_file = read_file
        self._write_file = write_file
        self._list_candidates = list_candidates
        self._parser = parser or FormatParser()
        self._cache = ParseCache(self._parser, max_size=self.config.max_cache_size)
        self._editor = ValueEditor(self.config)
        self.candidates: List[ConfigFile] = []
        self._clear_document()

    def _clear_document(self) -> None:
        self.path: Optional[str] = None
        self.format = ConfigFormat.TEXT
        self.tree: Optional[ConfigValue] = None
        self.comments: Mapping[str, str] = {}
        self.current_text = ""
        self.last_saved_text = ""
        self.parse_error: Optional[str] = None

    @property
    def dirty(self) -> bool:
        return self.current_text != self.last_saved_text

    @property
    def structural(self) -> bool:
        """Whether the structural editor is available for the open file"""
        return self.tree is not None

    def open_mod(self, mod_name: str, mod_filename_base: str) -> List[ConfigFile]:
        """List a mod's config files and open the first one"""
        if self._list_candidates is None:
            raise ConfigSessionError("No config file listing configured")

        self.candidates = list(self._list_candidates(mod_name, mod_filename_base))
        self._logger.debug(f"Found {len(self.candidates)} config files for {mod_name}")

        if self.candidates:
            self.select_file(self.candidates[0].path)
        else:
            self.close()
        return self.candidates

    def select_file(self, path: str) -> None:
        """Open a file, discarding the current document without saving"""
        if self.dirty:
            self._logger.info(f"Discarding unsaved changes to {self.path}")
        self.close()

        try:
            text = self._read_file(path)
        except Exception as e:
            self._handle_error(e, f"read failed for {path}")
            raise ConfigReadError(f"Failed to read config file {path}: {str(e)}") from e

        self.path = path
        self.format = detect_format(path)
        self.current_text = text
        self.last_saved_text = text
        self._load_tree(text)
        self._logger.debug(f"Opened {path} as {self.format.value} (structural={self.structural})")

    def _load_tree(self, text: str) -> None:
        """Rebuild the tree from text, or fall back to raw text editing"""
        self.tree = None
        self.comments = {}

        if not supports_structural_editing(self.format):
            self.parse_error = None
            return

        outcome = self._cache.parse(text, self.format)
        if not outcome.ok:
            self.parse_error = outcome.error
            return

        if outcome.result.values.type != ValueType.MAP:
            self.parse_error = f"Unsupported structure: {outcome.result.values.type.value} at document root"
            self._logger.warning(self.parse_error)
            return

        self.tree = outcome.result.values
        self.comments = outcome.result.comments
        self.parse_error = None

    def edit(self, path: PathLike, edit: Edit) -> ConfigValue:
        """Apply a structural edit and re-serialize the document"""
        if self.tree is None:
            raise StructuralEditingUnavailable(
                f"Structural editing unavailable for {self.path}: {self.parse_error or 'raw text only'}"
            )

        new_tree = apply_edit(self.tree, path, edit)
        if new_tree is self.tree:
            return new_tree

        self.current_text = self._parser.serialize(new_tree, self.format)
        self.tree = new_tree
        return new_tree

    def set_text(self, text: str) -> None:
        """Raw text edit; structural editing follows whether the text parses"""
        self.current_text = text
        self._load_tree(text)

    def save(self) -> bool:
        """Write the current text. Returns False when there was nothing to save."""
        if not self.dirty or self.path is None:
            return False

        text = self.current_text
        try:
            written = self._write_file(self.path, text)
        except Exception as e:
            self._handle_error(e, f"write failed for {self.path}")
            raise ConfigWriteError(f"Failed to save config file {self.path}: {str(e)}") from e

        if written is False:
            error = ConfigWriteError(f"Failed to save config file {self.path}")
            self._handle_error(error, f"write failed for {self.path}")
            raise error

        self.last_saved_text = text
        self._logger.info(f"Saved {self.path}")
        return True

    def reset(self) -> None:
        """Drop unsaved changes and re-parse the last saved text"""
        self.current_text = self.last_saved_text
        self._load_tree(self.current_text)

    def close(self) -> None:
        self._clear_document()

    def filtered_tree(self, query: str = "") -> Optional[ConfigValue]:
        if self.tree is None:
            return None
        return filter_tree(self.tree, query)

    def editor_nodes(self, query: str = "") -> Tuple[EditorNode, ...]:
        tree = self.filtered_tree(query)
        if tree is None:
            return ()
        return self._editor.build(tree, self.comments)

    def render(self, query: str = "") -> Tree:
        return render_nodes(self.editor_nodes(query), title=self.path or "config")

    def _handle_error(self, error: Exception, context: str = "") -> None:
        if self.config and self.config.error_handler:
            try:
                self.config.error_handler(error)
            except Exception as e:
                self._logger.error(f"Error handler failed: {e}")
                return

        self._logger.error(f"Error in {context}: {error}")
