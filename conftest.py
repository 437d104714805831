import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("HEVY_API_URL", "https://api.test")
os.environ.setdefault("HEVY_API_KEY", "test-key")
os.environ.setdefault("EXERCISE_CACHE_PAGE_DELAY", "0")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
