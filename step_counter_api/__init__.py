"""
Top‑level package for the Team Step Counter API.

This file makes ``step_counter_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``step_counter_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
