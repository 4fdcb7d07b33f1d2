"""Version information for the Penneo Python SDK"""

__version__ = "0.1.0"
