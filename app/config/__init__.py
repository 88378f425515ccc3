"""
Configuration package for the Banjara Translator backend.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    StorageBackend,
    TranslatorSettings,
    SpeechSettings,
    StorageSettings,
    LexiconSettings,
    SecuritySettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "StorageBackend",
    "TranslatorSettings",
    "SpeechSettings",
    "StorageSettings",
    "LexiconSettings",
    "SecuritySettings",
    "settings",
    "get_settings",
    "reload_settings",
]
