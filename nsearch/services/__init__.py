# nsearch Services Package
"""
System integration for nsearch.

Services wrap OS facilities such as opening a URL in the browser.
"""

from .browser import BrowserLauncher, get_launcher, open_url

__all__ = ["BrowserLauncher", "get_launcher", "open_url"]
