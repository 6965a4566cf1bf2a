"""
Local file reading.

Uses aiofiles for non-blocking I/O operations.
"""
from pathlib import Path
from typing import Union
import aiofiles

from ..exceptions import PathNotFoundError
from ..logging import get_logger


class NativeFileReader:
    """Reads whole local files for upload."""

    def __init__(self):
        self._logger = get_logger('fdpsync.files')

    async def read_file(self, file_path: Union[str, Path]) -> bytes:
        """
        Read entire file.

        Args:
            file_path: Path to the file

        Returns:
            File data

        Raises:
            PathNotFoundError: If the file does not exist
        """
        path = Path(file_path)
        if not path.is_file():
            raise PathNotFoundError(f'File does not exist: "{path}"', path=str(path))

        try:
            async with aiofiles.open(path, 'rb') as f:
                data = await f.read()
        except FileNotFoundError as e:
            raise PathNotFoundError(f'File does not exist: "{path}"', path=str(path)) from e

        self._logger.debug(f"Read {len(data)} bytes from {path}")
        return data
