"""
Code emitters.

Render validated descriptors into Python source.
"""

from __future__ import annotations

from .base import CodeEmitter
from .class_emitter import ClassEmitter
from .module_emitter import ModuleEmitter
from .service_emitter import ServiceEmitter

__all__ = [
    "CodeEmitter",
    "ClassEmitter",
    "ModuleEmitter",
    "ServiceEmitter",
]
