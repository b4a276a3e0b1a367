"""
Browser Launcher - Open a URL in the system's default browser.

Each OS has its own way of handing a URL to the default application:

  Linux / BSD  → xdg-open <url>
  macOS        → open <url>
  Windows      → os.startfile(url)

get_launcher() picks the right backend for the running platform. We wait
for the opener command to hand the URL off, never for the page to load.
"""

import os
import subprocess
import sys
from abc import ABC, abstractmethod

from loguru import logger

from nsearch.errors import OpenURLError


class BrowserLauncher(ABC):
    """Abstract interface for launching URLs in a browser."""

    @abstractmethod
    def launch(self, url: str) -> None:
        """
        Open the URL in the default browser.

        Raises:
            OpenURLError: if the OS refused to dispatch the URL
        """
        ...


class CommandLauncher(BrowserLauncher):
    """Launch by running an opener command with the URL as its argument."""

    command: str = ""

    def launch(self, url: str) -> None:
        logger.debug(f"Running {self.command} {url}")
        try:
            result = subprocess.run(
                [self.command, url],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except FileNotFoundError as e:
            raise OpenURLError(url, f"{self.command} not found") from e
        except OSError as e:
            raise OpenURLError(url, str(e)) from e

        if result.returncode != 0:
            raise OpenURLError(url, f"{self.command} exited with status {result.returncode}")


class XdgOpenLauncher(CommandLauncher):
    command = "xdg-open"


class MacOpenLauncher(CommandLauncher):
    command = "open"


class WindowsLauncher(BrowserLauncher):
    def launch(self, url: str) -> None:
        logger.debug(f"Starting {url} via os.startfile")
        try:
            os.startfile(url)  # type: ignore[attr-defined]
        except (AttributeError, OSError) as e:
            raise OpenURLError(url, str(e)) from e


def get_launcher(platform: str = sys.platform) -> BrowserLauncher:
    """Return the launcher backend for a sys.platform value."""
    if platform.startswith("win"):
        return WindowsLauncher()
    if platform == "darwin":
        return MacOpenLauncher()
    return XdgOpenLauncher()


def open_url(url: str, launcher: BrowserLauncher = None) -> None:
    """Open the URL with the given launcher, or the platform default."""
    (launcher or get_launcher()).launch(url)
