from typing import List, Optional, Protocol

from .models import ConfigFile

class ListConfigFiles(Protocol):
    """Lists the config files that belong to a mod, best match first"""
    def __call__(self, mod_name: str, mod_filename_base: str) -> List[ConfigFile]: ...

class ReadFile(Protocol):
    """Returns the text of a config file; raises on failure"""
    def __call__(self, path: str) -> str: ...

class WriteFile(Protocol):
    """Writes a config file; raises or returns False on failure"""
    def __call__(self, path: str, text: str) -> Optional[bool]: ...
