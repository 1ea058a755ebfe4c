"""Version information for the Jupiter swap client."""

__version__ = "0.1.0"
__author__ = "Jupiter Swap Client Contributors"
__email__ = "maintainers@jupiter-swap-client.dev"
