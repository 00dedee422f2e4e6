from dataclasses import dataclass
from pathlib import PurePath

@dataclass(frozen=True)
class ConfigFile:
    """A config file offered for a mod"""
    path: str
    name: str = ''

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Path cannot be empty")
        if not self.name:
            object.__setattr__(self, 'name', PurePath(self.path).name)

    def to_dict(self) -> dict:
        return {'path': self.path, 'name': self.name}

    @classmethod
    def from_dict(cls, data: dict) -> 'ConfigFile':
        return cls(path=data['path'], name=data.get('name', ''))
