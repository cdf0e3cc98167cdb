import os

DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite://bloglist.sqlite3')

HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', '3003'))

API_PREFIX = os.getenv('API_PREFIX', '/api')

# seconds allowed for a single record store call
STORE_TIMEOUT = float(os.getenv('STORE_TIMEOUT', '5'))

# bcrypt cost factor, not taken from the environment
PASSWORD_HASH_ROUNDS = 10

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_TO_CONSOLE = os.getenv('LOG_TO_CONSOLE', 'true').lower() == 'true'
LOG_TO_FILE = os.getenv('LOG_TO_FILE', 'false').lower() == 'true'
LOG_FILE_PATH = os.getenv('LOG_FILE_PATH', 'logs/bloglist.log')
