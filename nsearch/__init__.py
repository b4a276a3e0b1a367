# nsearch Package
"""
Open web searches from the terminal.

Pick a search provider by name or alias (or from a menu), type a query,
and the matching search page opens in the default browser.
"""

__version__ = "0.1.0"
