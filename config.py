import logging
import os
from dotenv import load_dotenv

load_dotenv()

DB_PATH = os.getenv('FLASHCARDS_DB', 'flashcards.db')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING').upper()

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=getattr(logging, LOG_LEVEL, logging.WARNING)
)
