"""Concrete adapters bound to the host system."""

from __future__ import annotations

from .system import PythonRuntimeVersion, SystemClock, python_runtime_version, stdout_writer

__all__ = ["PythonRuntimeVersion", "SystemClock", "python_runtime_version", "stdout_writer"]
