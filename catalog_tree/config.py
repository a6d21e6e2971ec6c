# catalog_tree/config.py
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent

class Config:
    """Configuration settings for the category tree engine"""

    # Catalog API settings
    CATALOG_API_URL: str = os.getenv("CATALOG_API_URL", "http://localhost:8000/api")
    CATALOG_API_TOKEN: str = os.getenv("CATALOG_API_TOKEN", "")
    CATALOG_TIMEOUT: float = float(os.getenv("CATALOG_TIMEOUT", "30"))

    # Paging
    TREE_PAGE_SIZE: int = int(os.getenv("TREE_PAGE_SIZE", "1000"))
    TABLE_PAGE_SIZE: int = int(os.getenv("TABLE_PAGE_SIZE", "15"))

    # Other settings
    TIMEZONE: str = os.getenv("TZ", "UTC")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Paths
    LOG_DIR = Path(os.getenv("LOG_DIR", BASE_DIR / "logs"))

def setup_logging():
    """Configure logging settings"""
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    Config.LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = Config.LOG_DIR / "catalog_tree.log"

    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        format=log_format,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )
