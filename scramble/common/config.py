import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Root word source, one word per line
CATALOG_PATH = os.getenv('SCRAMBLE_CATALOG', os.path.join(BASE_DIR, "data", "start.txt"))
DEFAULT_ROOT_WORD = "billions"

# Dictionary oracle: bundled English word list, proper nouns excluded
DICTIONARY_PATH = os.getenv('SCRAMBLE_DICTIONARY', os.path.join(BASE_DIR, "data", "english.txt"))
LOCALE = os.getenv('SCRAMBLE_LOCALE', 'en')
# wordfreq Zipf floor; 1.0 drops words wordfreq has never seen, 0 disables it
MIN_ZIPF = float(os.getenv('SCRAMBLE_MIN_ZIPF', '1.0'))

# Submitted words must be strictly longer than this
MIN_WORD_LENGTH = 3

LOG_LEVEL = os.getenv('SCRAMBLE_LOG_LEVEL', 'INFO').upper()

WINDOW_WIDTH = 420
WINDOW_HEIGHT = 720
