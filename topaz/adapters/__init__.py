"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (filesystem, native
    file dialogs, window events and settings storage) used by use cases.

Dependencies:
    Individual submodules depend on ``tkinter``, ``pywebview`` constants,
    filesystem APIs, and domain protocol definitions.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests.
"""
