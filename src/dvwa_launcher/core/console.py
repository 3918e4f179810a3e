#!/usr/bin/env python3
"""Module to run console commands.

This module provides a class to run console commands and mirror their
output into the run log.

Copyright (c) Advanced Micro Devices, Inc. All rights reserved.
"""
# built-in modules
import logging
import subprocess
import typing

# user-defined modules
from dvwa_launcher.core.errors import CommandError, create_error_context

OUTPUT_LOGGER_NAME = "dvwa_launcher.output"

# Exit status of a process terminated by SIGINT.
SIGINT_EXIT_CODE = 130


class Console:
    """Class to run console commands.

    Attributes:
        shellVerbose (bool): The shell verbose flag.
        live_output (bool): The live output flag.
        output_logger (logging.Logger): Receives every line of command output.
    """

    def __init__(
        self,
        shellVerbose: bool = True,
        live_output: bool = False,
        output_logger: typing.Optional[logging.Logger] = None,
    ) -> None:
        """Constructor of the Console class.

        Args:
            shellVerbose (bool): The shell verbose flag.
            live_output (bool): The live output flag.
            output_logger (logging.Logger): Logger for raw command output.
        """
        self.shellVerbose = shellVerbose
        self.live_output = live_output
        self.output_logger = output_logger or logging.getLogger(OUTPUT_LOGGER_NAME)

    def sh(
        self,
        command: str,
        canFail: bool = False,
        timeout: typing.Optional[int] = None,
        secret: bool = False,
        prefix: str = "",
        env: typing.Optional[typing.Dict[str, str]] = None,
        interactive: bool = False,
        log_output: bool = True,
    ) -> str:
        """Run shell command.

        Args:
            command (str): The shell command.
            canFail (bool): The flag to allow failure.
            timeout (int): The timeout in seconds, None waits forever.
            secret (bool): The flag to hide the command.
            prefix (str): The prefix of the output.
            env (dict): The environment variables.
            interactive (bool): Attach the terminal's stdin to the command.
            log_output (bool): Mirror the output into the run log. When
                False the output is only captured, never printed.

        Returns:
            str: The output of the shell command.

        Raises:
            CommandError: If the shell command fails.
        """
        # Print the command if shellVerbose is True
        if self.shellVerbose and not secret:
            print("> " + command, flush=True)

        # Run the shell command in BINARY mode to handle UTF-8 safely
        proc = subprocess.Popen(
            command,
            stdin=None if interactive else subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            shell=True,
            universal_newlines=False,
            bufsize=0,
            env=env,
        )

        try:
            # Unlogged commands are queries; capture them without streaming.
            if (not self.live_output or not log_output) and not interactive:
                raw_outs, _ = proc.communicate(timeout=timeout)
                outs = raw_outs.decode("utf-8", errors="replace")
                if log_output:
                    for line in outs.splitlines():
                        self.output_logger.info(line)
            else:
                lines = []
                for raw_line in iter(proc.stdout.readline, b""):
                    line = raw_line.decode("utf-8", errors="replace")
                    print(prefix + line, end="", flush=True)
                    if log_output:
                        self.output_logger.info(line.rstrip("\n"))
                    lines.append(line)
                outs = "".join(lines)
                proc.stdout.close()
                proc.wait(timeout=timeout)
        except subprocess.TimeoutExpired as exc:
            proc.kill()
            raise CommandError(
                "Console script timeout",
                command=None if secret else command,
                cause=exc,
            ) from exc
        except KeyboardInterrupt:
            # The child got the same SIGINT; let it finish its own cleanup.
            proc.wait()
            raise

        if proc.returncode != 0 and not canFail:
            shown = "<secret>" if secret else command
            raise CommandError(
                "Subprocess '"
                + shown
                + "' failed with exit code "
                + str(proc.returncode),
                command=None if secret else command,
                exit_code=proc.returncode,
                output=outs.strip(),
                context=create_error_context(
                    operation="sh", component="Console", command=shown
                ),
            )

        return outs.strip()

    def succeeds(self, command: str) -> bool:
        """Check whether a shell command exits with status zero.

        Args:
            command (str): The shell command.

        Returns:
            bool: True if the command succeeded.
        """
        if self.shellVerbose:
            print("> " + command, flush=True)
        return subprocess.run(command, shell=True).returncode == 0
