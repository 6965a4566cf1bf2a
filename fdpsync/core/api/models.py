"""Remote directory listing models."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class FileItem:
    """File entry of a remote directory listing."""
    name: str
    path: str
    size: int = 0
    content_type: str = ''
    creation_time: Optional[int] = None
    modification_time: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], parent_path: str) -> 'FileItem':
        """Create from a gateway listing entry."""
        name = data.get('name', '')
        return cls(
            name=name,
            path=_child_path(parent_path, name),
            size=int(data.get('size') or 0),
            content_type=data.get('contentType', ''),
            creation_time=_optional_int(data.get('creationTime')),
            modification_time=_optional_int(data.get('modificationTime')),
        )


@dataclass
class DirectoryItem:
    """
    Remote directory with its (optionally recursive) content.

    Attributes:
        name: Directory name ("/" for the root)
        path: Absolute directory path
        directories: Child directories
        files: Files directly in this directory
    """
    name: str
    path: str
    directories: List['DirectoryItem'] = field(default_factory=list)
    files: List[FileItem] = field(default_factory=list)
    creation_time: Optional[int] = None
    modification_time: Optional[int] = None

    def walk_files(self) -> List[FileItem]:
        """All files in this directory and its loaded subdirectories."""
        result = list(self.files)
        for directory in self.directories:
            result.extend(directory.walk_files())
        return result

    def find(self, name: str) -> Optional['DirectoryItem']:
        for directory in self.directories:
            if directory.name == name:
                return directory
        return None


def _child_path(parent_path: str, name: str) -> str:
    return f"{parent_path.rstrip('/')}/{name}"


def _optional_int(value: Any) -> Optional[int]:
    if value in (None, ''):
        return None
    return int(value)
