"""
Platform emitters.

Each emitter writes one file per brand:
- css: src/styles/theme-<brand>.css (merged)
- ts: src/styles/theme-<brand>.ts (merged)
- android: tokens/android/theme_<brand>.xml (or .kt)
- ios: tokens/ios/Theme<Brand>.swift
- flutter: tokens/flutter/theme_<brand>.dart
"""

from .android import AndroidEmitter
from .base import (
    PLATFORM_TARGETS,
    EmitResult,
    Emitter,
    EmitterRegistry,
    resolve_target,
    select_emitters,
)
from .css import CSSEmitter
from .flutter import FlutterEmitter
from .ios import IOSEmitter
from .typescript import TypeScriptEmitter

__all__ = [
    # Base classes
    "Emitter",
    "EmitResult",
    "EmitterRegistry",
    "PLATFORM_TARGETS",
    "resolve_target",
    "select_emitters",
    # Implementations
    "CSSEmitter",
    "TypeScriptEmitter",
    "AndroidEmitter",
    "IOSEmitter",
    "FlutterEmitter",
]
