import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
def resolve_base_dir(package_dir: Path) -> Path:
    """
    Returns the project root when running from a checkout. An installed copy
    lives in site-packages, so there the directory the command was started
    from is used instead.
    """
    project_root = package_dir.parent
    if (project_root / "pyproject.toml").exists():
        return project_root
    return Path.cwd()


BASE_DIR = resolve_base_dir(Path(__file__).resolve().parent)

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Application ---
APP_TITLE = os.getenv("APP_TITLE", "Shop Inventory v0.1")

# --- Inventory Limits ---
# Soft capacity hint. Adding past it is allowed but logged.
MAX_ITEMS = int(os.getenv("MAX_ITEMS", "30"))
# Longest model code accepted when adding an item.
MAX_MODEL_NAME = int(os.getenv("MAX_MODEL_NAME", "64"))

# --- Pricing ---
CURRENCY = os.getenv("CURRENCY", "GBP")

# --- Logging ---
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")
LOG_FILENAME = os.getenv("LOG_FILENAME", "app.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Console Output ---
SEPARATOR = "---------------"
