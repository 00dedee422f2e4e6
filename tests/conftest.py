import pytest
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from config_editor.config import EditorConfig
from config_editor.format_parser.format_parser import FormatParser
from config_editor.session import ConfigSession

# Test Data Constants
TOML_SAMPLE = """# Server settings
[server]
# max players allowed
max-players = 20
motd = "Welcome # not a comment"
pvp = true # allow pvp

[server.limits]
view-distance = 10.5
worlds = ["overworld", "nether"]
"""

TOML_EXPECTED = {
    "server": {
        "max-players": 20,
        "motd": "Welcome # not a comment",
        "pvp": True,
        "limits": {
            "view-distance": 10.5,
            "worlds": ["overworld", "nether"],
        },
    }
}

YAML_SAMPLE = """# General options
general:
  enabled: yes
  # Display name
  name: Example Mod
  ratio: 0.75
  nothing: ~
  tags: [alpha, "beta, gamma"]
features:
  # first feature
  - flight
  - speed # fast
url: http://example.com # homepage
"""

YAML_EXPECTED = {
    "general": {
        "enabled": True,
        "name": "Example Mod",
        "ratio": 0.75,
        "nothing": None,
        "tags": ["alpha", "beta, gamma"],
    },
    "features": ["flight", "speed"],
    "url": "http://example.com",
}

PROPERTIES_SAMPLE = """# Minecraft server properties
! generated
server-port=25565
motd:A Minecraft Server
white-list=false
spawn-protection = 16

level-name=world=1
ratio=0.5
"""

PROPERTIES_EXPECTED = {
    "server-port": 25565,
    "motd": "A Minecraft Server",
    "white-list": False,
    "spawn-protection": 16,
    "level-name": "world=1",
    "ratio": 0.5,
}

JSON_SAMPLE = """{
  // client options
  "renderDistance": 12,
  "fancyGraphics": true,
  "keys": ["w", "a", "s", "d",],
  "nested": {"volume": 0.8, "name": null},
}
"""

JSON_EXPECTED = {
    "renderDistance": 12,
    "fancyGraphics": True,
    "keys": ["w", "a", "s", "d"],
    "nested": {"volume": 0.8, "name": None},
}

SAMPLE_FILES: Dict[str, str] = {
    "config/server.toml": TOML_SAMPLE,
    "config/example.yml": YAML_SAMPLE,
    "server.properties": PROPERTIES_SAMPLE,
    "config/client.json": JSON_SAMPLE,
    "config/broken.json": '{"unterminated": ',
    "config/notes.txt": "free form notes\n",
}


class MemoryFiles:
    """In-memory stand-in for the read/write collaborators"""

    def __init__(self, files: Dict[str, str]) -> None:
        self.files = dict(files)
        self.writes: List[Tuple[str, str]] = []

    def read(self, path: str) -> str:
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]

    def write(self, path: str, text: str) -> Optional[bool]:
        self.writes.append((path, text))
        self.files[path] = text
        return True


@pytest.fixture
def parser() -> FormatParser:
    """Create parser instance for testing"""
    return FormatParser()

@pytest.fixture
def memory_files() -> MemoryFiles:
    return MemoryFiles(SAMPLE_FILES)

@pytest.fixture
def session(memory_files: MemoryFiles) -> ConfigSession:
    """Create a session over the sample documents"""
    return ConfigSession(memory_files.read, memory_files.write, config=EditorConfig())

@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Create an instance config directory on disk"""
    base = tmp_path / "config"
    base.mkdir()

    files = {
        "sodium-options.json": '{"quality": {"weather": true}}',
        "create/create-common.toml": "[worldgen]\nenabled = true\n",
        "journeymap.yml": "mapping:\n  enabled: yes\n",
        "unrelated.toml": "x = 1\n",
        "sodium.png": "not a config",
    }

    for path, content in files.items():
        full_path = base / path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content)

    return base
