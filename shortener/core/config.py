import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))

# Backing file for the link mapping
LINKS_FILE = os.getenv("LINKS_FILE", os.path.join("data", "links.json"))
# 0 writes compact JSON
LINKS_FILE_INDENT = int(os.getenv("LINKS_FILE_INDENT", "2")) or None

TEMPLATE_PATH = os.getenv("TEMPLATE_PATH", os.path.join(BASE_DIR, "templates", "index.html"))
STATIC_DIR = os.getenv("STATIC_DIR", os.path.join(BASE_DIR, "static"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
# Also log to this file when set
LOG_FILE = os.getenv("LOG_FILE")
