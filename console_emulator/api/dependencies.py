"""
FastAPI dependency functions for retrieving the console from the container.
"""

import threading

from console_emulator.container import container
from console_emulator.use_cases.console.console_emulator import ConsoleEmulator


def get_console() -> ConsoleEmulator:
    """
    Get the shared console from the container.

    Returns:
        ConsoleEmulator: The console session instance
    """
    return container.get_console()


def get_console_lock() -> threading.Lock:
    """
    Get the lock guarding the shared console.

    Sync endpoints run in a thread pool while the console itself is not
    thread-safe, so every access must hold this lock.

    Returns:
        threading.Lock: The console lock
    """
    return container.get_console_lock()
