"""
Application configuration, read from the environment with local defaults.
"""
import os


class Config:
    MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/recipes")
    MONGO_COLLECTION = os.environ.get("MONGO_COLLECTION", "recipes")
    # Applied to server selection, connect and socket reads
    STORE_TIMEOUT_MS = int(os.environ.get("STORE_TIMEOUT_MS", 2000))

    CACHE_PROVIDER = os.environ.get("CACHE_PROVIDER", "redis")
    REDIS_HOST = os.environ.get("REDIS_HOST", "localhost")
    REDIS_PORT = int(os.environ.get("REDIS_PORT", 6379))
    REDIS_DB = int(os.environ.get("REDIS_DB", 0))
    CACHE_TIMEOUT_SECONDS = float(os.environ.get("CACHE_TIMEOUT_SECONDS", 0.5))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
