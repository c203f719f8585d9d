# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from contextlib import AbstractContextManager

# NOTE: Keep imports lazy in this file so the CLI starts up fast


def raise_startup_error_and_exit(
    message: str, title: str = "Error", exit_code: int = 1
) -> None:
    """Print an error panel on stderr and exit the program.

    Args:
        message: The message to display.
        title: The title of the panel.
        exit_code: The exit code to use.
    """
    import sys

    from rich.console import Console
    from rich.panel import Panel

    console = Console(stderr=True)
    console.print(
        Panel(
            renderable=message,
            title=title,
            title_align="left",
            border_style="bold red",
        )
    )

    sys.exit(exit_code)


class exit_on_error(AbstractContextManager):
    """Context manager that reports the given exceptions in an error panel and exits.

    Args:
        *exceptions: The exceptions to exit on. If none are given, every
            exception except SystemExit and KeyboardInterrupt is caught.
        message: The message to display, formatted with the exception as `{e}`.
        title: The title of the error panel.
        exit_code: The exit code to use.
    """

    def __init__(
        self,
        *exceptions: type[BaseException],
        message: str = "{e}",
        title: str = "Error",
        exit_code: int = 1,
    ):
        self.message = message
        self.title = title
        self.exit_code = exit_code
        self.exceptions: tuple[type[BaseException], ...] = exceptions

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            return

        if (
            not self.exceptions
            and not isinstance(exc_value, (SystemExit | KeyboardInterrupt))
        ) or (self.exceptions and issubclass(exc_type, self.exceptions)):
            raise_startup_error_and_exit(
                self.message.format(e=exc_value),
                title=self.title,
                exit_code=self.exit_code,
            )
