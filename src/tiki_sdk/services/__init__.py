"""Services module initialization"""

from tiki_sdk.services import seller

__all__ = ["seller"]
