"""Template Module to redirect the maintenance page to a custom template.

The web site renders a single maintenance page slot while maintenance mode
is on. A custom page is installed by prepending a delimited block to that
slot which includes the custom page and stops:

    <?php /* BEGIN ADDED BY WP-CLI maintenance command */
    include '/path/to/custom.php'; die();
    /* END ADDED BY WP-CLI maintenance command */ ?>

Everything after the block is the prior content of the slot and is kept
byte for byte.
"""

__author__ = "The pysitemaint maintainers"
__copyright__ = "Copyright (C) 2026, The pysitemaint maintainers"
__maintainer__ = "The pysitemaint maintainers"

import logging
import os

from .exceptions import TemplateNotFoundError

default_logger = logging.getLogger("pysitemaint.template")


def resolve_template(template: str, content_dir: str) -> str:
    """Resolve a template argument to a path.

    Args:
        template (str):
            The template as given by the user.
        content_dir (str):
            The content root of the web site.

    Returns:
        str:
            The template itself if it starts with a path separator,
            otherwise the template relative to the content root.

    """

    if template.startswith(os.sep):
        return template

    return os.path.join(content_dir, template)


class TemplateInjector:
    """Insert and remove the template override block in the maintenance page slot."""

    # Only class variables or class-wide constants should be defined here:

    logger: logging.Logger = default_logger

    def __init__(self, tool_name: str = "WP-CLI", logger: logging.Logger = default_logger) -> None:
        """Initialize the TemplateInjector object.

        Args:
            tool_name (str, optional):
                The name written into the block delimiters. Defaults to "WP-CLI".
            logger (logging.Logger, optional):
                The logging object to use for all log messages. Defaults to default_logger.

        """

        if logger != default_logger:
            self.logger = logger.getChild("template")
            for logfilter in logger.filters:
                self.logger.addFilter(logfilter)

        # Delimiters are matched on the raw bytes of the slot:
        self._begin = "<?php /* BEGIN ADDED BY {} maintenance command */".format(tool_name).encode("utf-8")
        self._end = "/* END ADDED BY {} maintenance command */ ?>".format(tool_name).encode("utf-8")

    # end method definition

    def block(self, template_path: str) -> str:
        """Build the override block for a template.

        Args:
            template_path (str):
                The resolved path of the custom template.

        Returns:
            str:
                The block including its trailing newline.

        """

        # Quote for a single quoted PHP string:
        quoted = template_path.replace("\\", "\\\\").replace("'", "\\'")

        return "{}\ninclude '{}'; die();\n{}\n".format(
            self._begin.decode("utf-8"),
            quoted,
            self._end.decode("utf-8"),
        )

    # end method definition

    def _find_block(self, content: bytes) -> tuple[int, int] | None:
        """Locate the first complete override block.

        Args:
            content (bytes):
                The raw content of the maintenance page slot.

        Returns:
            tuple[int, int] | None:
                Start and end offset of the block (end includes the newline
                following the END delimiter, if any), or None if there is no
                BEGIN delimiter followed by an END delimiter.

        """

        start = content.find(self._begin)
        if start < 0:
            return None

        end = content.find(self._end, start + len(self._begin))
        if end < 0:
            return None

        end += len(self._end)
        if content.startswith(b"\n", end):
            end += 1

        return start, end

    # end method definition

    def insert(self, target_path: str, template_path: str) -> None:
        """Prepend the override block for a template to the maintenance page slot.

        Inserting the same template again on top of its own block does nothing.
        A different template is prepended on top of any existing block.
        The prior content is kept byte for byte, whatever its encoding.

        Args:
            target_path (str):
                The path of the maintenance page slot.
            template_path (str):
                The resolved path of the custom template.

        Raises:
            TemplateNotFoundError:
                If the template does not exist. The slot is not touched.
            OSError:
                If the slot cannot be read or written.

        """

        if not os.path.exists(template_path):
            raise TemplateNotFoundError(template_path)

        block = self.block(template_path).encode("utf-8", errors="surrogateescape")

        content = b""
        if os.path.exists(target_path):
            with open(target_path, mode="rb") as target_file:
                content = target_file.read()

        if content.startswith(block):
            self.logger.info("Template -> '%s' is already installed in -> '%s'", template_path, target_path)
            return

        with open(target_path, mode="wb") as target_file:
            target_file.write(block + content)

        self.logger.info("Installed template -> '%s' in -> '%s'", template_path, target_path)

    # end method definition

    def remove(self, target_path: str) -> bool:
        """Remove the first override block from the maintenance page slot.

        If nothing but whitespace is left afterwards the slot is deleted.

        Args:
            target_path (str):
                The path of the maintenance page slot.

        Returns:
            bool:
                True if a block has been removed, False if there was nothing to remove.

        Raises:
            OSError:
                If the slot cannot be read, written or deleted.

        """

        if not os.path.exists(target_path):
            return False

        with open(target_path, mode="rb") as target_file:
            content = target_file.read()

        span = self._find_block(content)
        if span is None:
            self.logger.debug("No template override found in -> '%s'", target_path)
            return False

        start, end = span
        content = content[:start] + content[end:]

        if not content.strip():
            os.remove(target_path)
            self.logger.info("Removed template override and empty file -> '%s'", target_path)
            return True

        with open(target_path, mode="wb") as target_file:
            target_file.write(content)

        self.logger.info("Removed template override from -> '%s'", target_path)

        return True

    # end method definition
