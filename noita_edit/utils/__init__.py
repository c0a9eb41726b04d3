"""Utility helpers for the NoitaEdit tool."""

from .platforms import PlatformFamily, PlatformInfo, default_save_path, detect_platform

__all__ = ["PlatformFamily", "PlatformInfo", "default_save_path", "detect_platform"]
