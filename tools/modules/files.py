import logging
import re
from pathlib import Path
from typing import Callable, List, Optional

from config_editor.models import ConfigFile

logger = logging.getLogger(__name__)

CONFIG_SUFFIXES = {'.json', '.json5', '.toml', '.yml', '.yaml', '.properties', '.cfg', '.txt'}


#
# Disk Collaborators
#

def read_file(path: str) -> str:
    """Read a config file, falling back to latin1 for legacy encodings"""
    file_path = Path(path)
    try:
        return file_path.read_text(encoding='utf-8')
    except UnicodeDecodeError:
        logger.debug(f"Retrying with latin1 encoding: {file_path}")
        return file_path.read_text(encoding='latin1')

def write_file(path: str, text: str) -> Optional[bool]:
    """Write text through a temporary file so a failed write keeps the original"""
    file_path = Path(path)
    temp_path = file_path.with_name(file_path.name + '.tmp')
    temp_path.write_text(text, encoding='utf-8')
    temp_path.replace(file_path)
    return True


#
# Candidate Listing
#

def filename_base(mod_filename: str) -> str:
    """'sodium-0.5.3.jar.disabled' -> 'sodium-0.5.3'"""
    return re.sub(r'(\.(jar|disabled))+$', '', mod_filename, flags=re.IGNORECASE)

def config_file_lister(config_dir: Path) -> Callable[[str, str], List[ConfigFile]]:
    """Build a lister matching a mod against files under config_dir"""
    def list_candidates(mod_name: str, mod_filename_base: str) -> List[ConfigFile]:
        name_lower = re.sub(r'\s+', '', mod_name.lower())
        base_lower = mod_filename_base.lower()
        needles = [n for n in (name_lower, base_lower) if n]

        matches = []
        for file_path in sorted(config_dir.rglob('*')):
            if not file_path.is_file() or file_path.suffix.lower() not in CONFIG_SUFFIXES:
                continue
            relative = file_path.relative_to(config_dir).as_posix().lower()
            if any(n in relative or n in file_path.name.lower() for n in needles):
                matches.append(ConfigFile(path=str(file_path), name=file_path.name))

        logger.debug(f"Matched {len(matches)} config files for {mod_name}")
        return matches

    return list_candidates
