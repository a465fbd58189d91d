"""Copy the skill content into agent directories."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from skill_mobile.errors import InstallError
from skill_mobile.filesystem import RealFileSystem
from skill_mobile.manifest import CONTENT_DIR, DEFAULT_MANIFEST, SKILL_NAME, ContentManifest
from skill_mobile.protocols import FileSystem
from skill_mobile.types import InstallResult, InstallTarget

logger = logging.getLogger(__name__)


class Installer:
    """Materializes a content manifest under install targets.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(
        self,
        manifest: ContentManifest,
        source_root: Path,
        filesystem: FileSystem,
        skill_name: str = SKILL_NAME,
    ) -> None:
        """Initialize installer with required dependencies.

        Args:
            manifest: Files and folders to copy.
            source_root: Directory holding the content files.
            filesystem: Filesystem abstraction.
            skill_name: Name of the folder created under each target.
        """
        self.manifest = manifest
        self.source_root = source_root
        self.fs = filesystem
        self.skill_name = skill_name

    @classmethod
    def create(
        cls,
        manifest: ContentManifest | None = None,
        source_root: Path | None = None,
        filesystem: FileSystem | None = None,
    ) -> Installer:
        """Factory method for production instantiation.

        Args:
            manifest: Optional manifest (default skill manifest if not provided).
            source_root: Optional content directory (bundled content if not provided).
            filesystem: Optional filesystem abstraction (created if not provided).

        Returns:
            Configured Installer instance.
        """
        return cls(
            manifest=manifest or DEFAULT_MANIFEST,
            source_root=source_root or CONTENT_DIR,
            filesystem=filesystem or RealFileSystem(),
        )

    def destination_for(self, target: InstallTarget) -> Path:
        """Get the skill directory for a target."""
        return target.base_dir / self.skill_name

    def copy_to(self, target: InstallTarget) -> int:
        """Copy every available manifest file into the target.

        Existing files are overwritten, files not in the manifest are left
        alone, and manifest files missing from the source are skipped.

        Args:
            target: Where to install.

        Returns:
            Number of files copied.

        Raises:
            InstallError: If a directory cannot be created or a file cannot
                be copied. Files already copied are left in place.
        """
        return len(self._copy_manifest(target))

    def install(self, target: InstallTarget) -> InstallResult:
        """Install to one target, capturing failure in the result.

        Args:
            target: Where to install.

        Returns:
            InstallResult with the number of files copied or the error.
        """
        destination = self.destination_for(target)
        try:
            copied = self._copy_manifest(target)
        except InstallError as e:
            logger.exception("Installation failed for %s", target.display_name)
            return InstallResult(
                success=False,
                target=target,
                destination=destination,
                error=str(e),
            )
        return InstallResult(
            success=True,
            target=target,
            destination=destination,
            files_copied=len(copied),
            installed_files=tuple(copied),
        )

    def install_all(self, targets: Iterable[InstallTarget]) -> list[InstallResult]:
        """Install to each target in order.

        A failure on one target does not stop the others.
        """
        return [self.install(target) for target in targets]

    def _copy_manifest(self, target: InstallTarget) -> list[str]:
        """Copy the manifest into the target.

        Returns:
            Paths of the copied files, relative to the skill directory.
        """
        destination = self.destination_for(target)
        self._ensure_dir(target, destination)

        copied = []
        for name in self.manifest.root_files:
            if self._copy_file(target, self.source_root / name, destination / name):
                copied.append(name)

        for folder, files in self.manifest.subfolders.items():
            self._ensure_dir(target, destination / folder)
            for name in files:
                src = self.source_root / folder / name
                if self._copy_file(target, src, destination / folder / name):
                    copied.append(f"{folder}/{name}")

        logger.debug("Copied %d files to %s", len(copied), destination)
        return copied

    def _copy_file(self, target: InstallTarget, src: Path, dst: Path) -> bool:
        """Copy one file if its source exists.

        Returns:
            True if the file was copied, False if the source is missing.
        """
        if not self.fs.is_file(src):
            logger.debug("Skipping missing source file %s", src)
            return False
        try:
            self.fs.copy_file(src, dst)
        except OSError as e:
            raise InstallError(
                f"Cannot copy {src} to {dst} for {target.display_name}: {e}",
                target=target.display_name,
                path=dst,
            ) from e
        return True

    def _ensure_dir(self, target: InstallTarget, path: Path) -> None:
        try:
            self.fs.mkdir(path, parents=True, exist_ok=True)
        except OSError as e:
            raise InstallError(
                f"Cannot create {path} for {target.display_name}: {e}",
                target=target.display_name,
                path=path,
            ) from e
