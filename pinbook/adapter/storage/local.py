"""Uploads directory asset store."""

import asyncio
import contextlib
import os
import tempfile
from pathlib import Path

from pinbook.domain.service.image_service import AssetStore


class LocalAssetStore(AssetStore):
    """Stores assets as flat files in one directory.

    Writes go to a temporary file in the same directory and are renamed into
    place, so a reader never sees a half written asset.
    """

    def __init__(self, directory: Path) -> None:
        """Initialize store.

        Args:
            directory: Uploads directory (created on first write)
        """
        self.directory = Path(directory)

    def path_for(self, name: str) -> Path:
        """Resolve an asset name to its path inside the directory.

        Raises:
            ValueError: If the name is empty or not a plain file name
        """
        if not name or name in (".", "..") or os.path.basename(name) != name:
            raise ValueError(f"Invalid asset name: {name!r}")
        if "/" in name or "\\" in name:
            raise ValueError(f"Invalid asset name: {name!r}")
        return self.directory / name

    async def write(self, name: str, data: bytes) -> None:
        """Write an asset atomically."""
        target = self.path_for(name)
        await asyncio.to_thread(self._write, target, data)

    async def remove(self, name: str) -> bool:
        """Delete an asset, reporting whether it existed."""
        target = self.path_for(name)
        return await asyncio.to_thread(self._remove, target)

    async def exists(self, name: str) -> bool:
        return await asyncio.to_thread(self.path_for(name).is_file)

    def _write(self, target: Path, data: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".upload-")
        try:
            with os.fdopen(fd, "wb") as out:
                out.write(data)
                out.flush()
                os.fsync(out.fileno())
            os.replace(tmp_name, target)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise

    @staticmethod
    def _remove(target: Path) -> bool:
        try:
            target.unlink()
        except FileNotFoundError:
            return False
        return True
