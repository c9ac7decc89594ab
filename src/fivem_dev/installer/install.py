"""Install the plugin into each destination root."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fivem_dev.infrastructure.logger import logger

from .fs_utils import copy_tree
from .types import CopyTask, InstallConfig, InstallResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from .types import CopyResult, DestinationRoot


def install_plugin(
    config: InstallConfig,
    progress: Callable[[DestinationRoot, CopyResult], None] | None = None,
) -> InstallResult:
    """Copy the package root into every destination root, one after another.

    Stops at the first failed copy; later destinations are not attempted.
    ``progress`` is called after each successful copy.
    """
    result = InstallResult(success=True)

    for root in config.destinations:
        task = CopyTask(
            source=config.package_root,
            destination=root.path,
            excludes=config.excludes,
        )
        logger.info("Installing", target=root.label, destination=str(task.destination))

        copy_result = copy_tree(task.source, task.destination, task.excludes)
        result.results.append(copy_result)

        if not copy_result.success:
            result.success = False
            result.failed_destination = root.path
            result.error = copy_result.error
            return result

        if progress is not None:
            progress(root, copy_result)

    return result
