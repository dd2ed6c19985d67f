"""NotLocalStorage client and the values it exchanges with callers."""

from .client import Client
from .outcome import Failure, Load, Save, Success
from .urls import NLSURLGenerator

__all__ = [
    "Client",
    "Load",
    "Save",
    "Success",
    "Failure",
    "NLSURLGenerator",
]
