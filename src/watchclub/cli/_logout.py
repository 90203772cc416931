"""``watchclub logout``: forget the persisted identity and club list."""

import argparse

from watchclub.cache import PersistentCache
from watchclub.cli._config import load_config
from watchclub.storage import FileStorage, MemoryStorage


def run_logout(args: argparse.Namespace) -> None:
    config = load_config(args)
    store = FileStorage(config.storage_path) if config.storage_path else MemoryStorage()
    cache = PersistentCache(store)
    identity = cache.identity
    cache.clear_identity()
    if identity is None:
        print("Not signed in.")
    else:
        print(f"Signed out {identity.name} ({identity.email}).")
