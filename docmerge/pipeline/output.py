"""
Output root preparation.

An existing output root is cleared and recreated before a run. Whether that
is allowed is decided either by configuration (auto-confirm) or by asking an
OverwritePrompter once, before anything is written.
"""

import shutil
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable
import logging

from docmerge.exceptions import OutputDirectoryError

logger = logging.getLogger(__name__)


@runtime_checkable
class OverwritePrompter(Protocol):
    """Asks the user whether an existing output directory may be replaced."""

    def confirm(self, message: str) -> bool:
        """
        Ask a yes/no question.

        Args:
            message: Question to display

        Returns:
            True if the user agreed
        """
        ...


class DeclinePrompter:
    """Prompter for non-interactive use: never agrees to overwrite."""

    def confirm(self, message: str) -> bool:
        return False


def prepare_output_dir(
    output_dir: Path,
    auto_confirm: bool = False,
    prompter: Optional[OverwritePrompter] = None
) -> bool:
    """
    Make sure ``output_dir`` exists and is empty.

    Args:
        output_dir: Output root
        auto_confirm: Replace an existing directory without asking
        prompter: Asked once when the directory exists and auto_confirm is off
            (default: DeclinePrompter)

    Returns:
        True if the run may proceed, False if the user declined

    Raises:
        OutputDirectoryError: If the directory cannot be removed or created
    """
    output_dir = Path(output_dir)

    if output_dir.exists():
        if auto_confirm:
            logger.warning(f"Directory {output_dir} already exists, overwriting")
        else:
            prompter = prompter or DeclinePrompter()
            if not prompter.confirm(f"Directory {output_dir} already exists. Overwrite?"):
                logger.info("Operation cancelled")
                return False
            logger.warning(f"Overwriting files in {output_dir}")

        try:
            if output_dir.is_dir():
                shutil.rmtree(output_dir)
            else:
                output_dir.unlink()
        except OSError as e:
            raise OutputDirectoryError(f"Cannot clear output directory {output_dir}: {e}") from e

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(f"Cannot create output directory {output_dir}: {e}") from e

    return True
