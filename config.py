import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration."""

    # Flask core
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-key-change-in-production')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Output
    OUTPUT_DIR = os.environ.get('OUTPUT_DIR', 'output')
    OUTPUT_FILENAME = 'wasteboard.nc'

    # Largest grid the API will generate (columns * rows)
    MAX_HOLES = int(os.environ.get('MAX_HOLES', 10000))
